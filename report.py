"""Comprehensive spending report combining every insight module."""

from __future__ import annotations

import datetime
import json
from decimal import Decimal
from typing import Any, Iterable

from analytics import aggregate_monthly, filter_by_cards, trailing_category_spending
from co2_advisory import check_advisory
from currency import REPORTING_CURRENCY, currency_symbol
from models import ZERO, CO2Advisory, ExchangeRates, MonthlyAggregate, OpportunityCostResult, Transaction
from opportunity_cost import analyze, biggest_savings_opportunity

REPORT_WINDOW_MONTHS = 12


def _money(value: Decimal) -> float:
    return round(float(value), 2)


def _month_payload(month: MonthlyAggregate) -> dict[str, Any]:
    return {
        "month": month.month_name,
        "year": month.year,
        "label": month.label,
        "total_chf": _money(month.total),
        "transaction_count": month.transaction_count,
        "unconverted_count": month.unconverted_count,
        "currencies": {symbol: _money(amount) for symbol, amount in month.currencies.items()},
        "categories": {category: _money(amount) for category, amount in month.categories.items()},
    }


def _opportunity_payload(result: OpportunityCostResult) -> dict[str, Any]:
    return {
        "category_analysis": [
            {
                "category": row.category,
                "annual_spending": _money(row.annual_spending),
                "monthly_spending": _money(row.monthly_spending),
                "threshold": _money(row.threshold),
                "monthly_overage": _money(row.overage),
                "annual_savings": _money(row.annual_savings),
                "is_within_limit": row.is_within_limit,
            }
            for row in result.per_category
        ],
        "total_annual_savings": _money(result.total_annual_savings),
        "investment_projections": {f"{years}_years": _money(value) for years, value in result.projections.items()},
        "thresholds": {category: _money(value) for category, value in result.thresholds.items()},
        "household_size": result.household_size,
    }


def _co2_payload(advisory: CO2Advisory) -> dict[str, Any]:
    return {
        "fuel_expenses": {
            "last_30_days": _money(advisory.fuel_total),
            "transaction_count": advisory.fuel_count,
            "show_tip": advisory.fuel_tip,
        },
        "parking_expenses": {
            "last_60_days": _money(advisory.parking_total),
            "transaction_count": advisory.parking_count,
            "show_tip": advisory.parking_tip,
        },
        "environmental_recommendations": advisory.recommendations,
    }


def _environmental_impact(advisory: CO2Advisory, symbol: str) -> str:
    if advisory.fuel_tip:
        return f"High fuel spending ({advisory.fuel_total:.0f} {symbol} in 30 days)"
    if advisory.parking_tip:
        return f"Frequent parking expenses ({advisory.parking_total:.0f} {symbol} in 60 days)"
    return "Good environmental practices"


def _investment_potential(result: OpportunityCostResult, symbol: str) -> str:
    if result.total_annual_savings <= 0:
        return "Already optimized spending"
    return (
        f"Could save {result.total_annual_savings:.0f} {symbol} annually, "
        f"growing to {result.projections[30]:.0f} {symbol} in 30 years"
    )


def generate_report(
    transactions: Iterable[Transaction],
    rates: ExchangeRates,
    household_size: int = 1,
    now: datetime.date | None = None,
    card_ids: Iterable[str] | None = None,
    user_id: str | None = None,
    reporting_currency: str = REPORTING_CURRENCY,
) -> dict[str, Any]:
    """Build the report consumed by dashboards and the narrative summary."""
    selected = filter_by_cards(transactions, card_ids)
    aggregation = aggregate_monthly(selected, rates, reporting_currency)
    last_months = aggregation.months[:REPORT_WINDOW_MONTHS]

    breakdown = trailing_category_spending(last_months, window=REPORT_WINDOW_MONTHS)
    total_spent = sum((month.total for month in last_months), ZERO)
    opportunity = analyze(breakdown, household_size)
    advisory = check_advisory(selected, rates, now=now, reporting_currency=reporting_currency)
    symbol = currency_symbol(reporting_currency)

    top_category = max(breakdown.items(), key=lambda item: item[1])[0] if breakdown else "Unknown"

    return {
        "metadata": {
            "generated_at": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "report_period": f"Last {REPORT_WINDOW_MONTHS} months",
            "user_id": user_id,
            "currency": symbol,
            "transaction_count": len(selected),
            "skipped_count": aggregation.skipped_count,
            "unconverted_count": aggregation.unconverted_count,
            "reduced_confidence": aggregation.reduced_confidence,
        },
        "monthly_spending": {
            "last_12_months": [_month_payload(month) for month in last_months],
            "total_spent": _money(total_spent),
            "average_monthly": _money(total_spent / REPORT_WINDOW_MONTHS),
            "category_breakdown": {category: _money(amount) for category, amount in breakdown.items()},
        },
        "opportunity_cost": _opportunity_payload(opportunity),
        "co2_impact": _co2_payload(advisory),
        "insights": {
            "top_spending_category": top_category,
            "biggest_savings_opportunity": biggest_savings_opportunity(opportunity),
            "environmental_impact": _environmental_impact(advisory, symbol),
            "investment_potential": _investment_potential(opportunity, symbol),
        },
    }


def report_to_json(report: dict[str, Any]) -> str:
    return json.dumps(report, indent=2, ensure_ascii=False)


def report_as_text(report: dict[str, Any]) -> str:
    """Plain-text rendering of a report, section by section."""
    meta = report["metadata"]
    monthly = report["monthly_spending"]
    opportunity = report["opportunity_cost"]
    co2 = report["co2_impact"]
    insights = report["insights"]
    cur = meta["currency"]

    lines = [
        "=== COMPREHENSIVE FINANCIAL REPORT ===",
        f"Generated: {meta['generated_at']}",
        f"Period: {meta['report_period']}",
    ]
    if meta.get("reduced_confidence"):
        lines.append(
            f"Data quality: {meta['skipped_count']} record(s) skipped, "
            f"{meta['unconverted_count']} amount(s) without exchange rate"
        )

    lines += [
        "",
        "MONTHLY SPENDING SUMMARY",
        f"Total spent (12 months): {monthly['total_spent']:.2f} {cur}",
        f"Average monthly: {monthly['average_monthly']:.2f} {cur}",
        "",
        "CATEGORY BREAKDOWN (12 months)",
    ]
    for category, amount in sorted(monthly["category_breakdown"].items(), key=lambda item: item[1], reverse=True):
        lines.append(f"  {category}: {amount:.2f} {cur}")

    lines += [
        "",
        "OPPORTUNITY COST ANALYSIS",
        f"Household size: {opportunity['household_size']}",
        f"Total potential annual savings: {opportunity['total_annual_savings']:.2f} {cur}",
        "Category analysis:",
    ]
    for row in opportunity["category_analysis"]:
        if row["is_within_limit"]:
            lines.append(f"  [ok] {row['category']}: within budget ({row['monthly_spending']:.2f} {cur}/month)")
        else:
            lines.append(f"  [over] {row['category']}: overspending by {row['annual_savings']:.2f} {cur}/year")
            lines.append(
                f"     Current: {row['monthly_spending']:.2f} {cur}/month, "
                f"Target: {row['threshold']:.2f} {cur}/month"
            )

    projections = opportunity["investment_projections"]
    lines += [
        "",
        "INVESTMENT PROJECTIONS (savings invested at 7% annually)",
        f"  10 years: {projections['10_years']:.2f} {cur}",
        f"  20 years: {projections['20_years']:.2f} {cur}",
        f"  30 years: {projections['30_years']:.2f} {cur}",
        "",
        "CO2 & ENVIRONMENTAL IMPACT",
        f"Fuel expenses (30 days): {co2['fuel_expenses']['last_30_days']:.2f} {cur} "
        f"({co2['fuel_expenses']['transaction_count']} transactions)",
        f"Parking expenses (60 days): {co2['parking_expenses']['last_60_days']:.2f} {cur} "
        f"({co2['parking_expenses']['transaction_count']} transactions)",
    ]
    if co2["environmental_recommendations"]:
        lines.append("Environmental recommendations:")
        lines.extend(f"  - {tip}" for tip in co2["environmental_recommendations"])

    lines += [
        "",
        "KEY INSIGHTS",
        f"Top spending category: {insights['top_spending_category']}",
        f"Biggest savings opportunity: {insights['biggest_savings_opportunity']}",
        f"Environmental impact: {insights['environmental_impact']}",
        f"Investment potential: {insights['investment_potential']}",
        "",
        "=== END REPORT ===",
    ]
    return "\n".join(lines)
