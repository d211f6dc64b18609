"""Household-adjusted spending thresholds and the investment value of overspend."""

from __future__ import annotations

from decimal import Decimal
from typing import Mapping

import pandas as pd

from categorization import Category
from currency import to_decimal
from models import ZERO, CategoryAnalysis, OpportunityCostResult

# Reporting-currency units per month for a one-person household.
BASE_MONTHLY_THRESHOLDS = {
    Category.FOOD_DINING.value: Decimal("400"),
    Category.RETAIL_SHOPPING.value: Decimal("300"),
    Category.TRANSPORTATION.value: Decimal("200"),
    Category.ENTERTAINMENT.value: Decimal("150"),
}

GROWTH_RATE = Decimal("0.07")
PROJECTION_YEARS = (10, 20, 30)
MONTHS_PER_YEAR = Decimal("12")


def future_value(annual_contribution: Decimal, years: int, rate: Decimal = GROWTH_RATE) -> Decimal:
    """Future value of an ordinary annuity: PMT * ((1 + r)^n - 1) / r."""
    return annual_contribution * (((1 + rate) ** years - 1) / rate)


def analyze(category_spending: Mapping[str, Decimal], household_size: int = 1) -> OpportunityCostResult:
    """Compare trailing-12-month category spending against household thresholds.

    Only the threshold categories are analyzed; a missing one counts as zero
    spending. ``household_size`` is expected to be >= 1 (see
    ``config.clamp_household_size``).
    """
    spending = {str(key): value for key, value in (category_spending or {}).items()}
    thresholds = {
        category: base * household_size for category, base in BASE_MONTHLY_THRESHOLDS.items()
    }

    rows = []
    for category, threshold in thresholds.items():
        annual = to_decimal(spending.get(category, ZERO)) or ZERO
        monthly = annual / MONTHS_PER_YEAR
        overage = max(ZERO, monthly - threshold)
        rows.append(
            CategoryAnalysis(
                category=category,
                annual_spending=annual,
                monthly_spending=monthly,
                threshold=threshold,
                overage=overage,
                annual_savings=overage * MONTHS_PER_YEAR,
                is_within_limit=monthly <= threshold,
            )
        )

    total_savings = sum((row.annual_savings for row in rows), ZERO)
    return OpportunityCostResult(
        per_category=tuple(rows),
        total_annual_savings=total_savings,
        projections={years: future_value(total_savings, years) for years in PROJECTION_YEARS},
        thresholds=thresholds,
        household_size=household_size,
    )


def biggest_savings_opportunity(result: OpportunityCostResult) -> str:
    """Category with the largest annual savings, or ``"None"`` when nothing is over.

    Within-budget results do not name a category, even though the first row
    would otherwise be Food & Dining.
    """
    over = [row for row in result.per_category if row.annual_savings > 0]
    if not over:
        return "None"
    return max(over, key=lambda row: row.annual_savings).category


def analysis_frame(result: OpportunityCostResult) -> pd.DataFrame:
    rows = [
        {
            "Category": row.category,
            "AnnualSpendingCHF": round(float(row.annual_spending), 2),
            "MonthlySpendingCHF": round(float(row.monthly_spending), 2),
            "MonthlyThresholdCHF": round(float(row.threshold), 2),
            "MonthlyOverageCHF": round(float(row.overage), 2),
            "AnnualSavingsCHF": round(float(row.annual_savings), 2),
            "WithinLimit": row.is_within_limit,
        }
        for row in result.per_category
    ]
    return pd.DataFrame(rows)
