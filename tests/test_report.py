import datetime
import json
from decimal import Decimal

from models import FUEL_RECOMMENDATION, Transaction
from report import generate_report, report_as_text, report_to_json

AS_OF = datetime.date(2025, 3, 31)


def _txn(day: datetime.date, amount: str, mcc: str, card_id: str = "card-1", currency: str = "756") -> Transaction:
    return Transaction(card_id=card_id, trx_date=day, amount=Decimal(amount), currency=currency, mcc=mcc)


def _year_of_groceries() -> list[Transaction]:
    out = []
    for offset in range(12):
        year, month = divmod(2025 * 12 + 2 - offset, 12)
        out.append(_txn(datetime.date(year, month + 1, 10), "500", "5411"))
    return out


def _history() -> list[Transaction]:
    return [
        *_year_of_groceries(),
        _txn(datetime.date(2024, 3, 10), "999", "5411"),
        _txn(datetime.date(2025, 3, 5), "80", "5541", card_id="card-2"),
        _txn(datetime.date(2025, 3, 15), "80", "5542", card_id="card-2"),
        _txn(datetime.date(2025, 3, 25), "80", "5541", card_id="card-2"),
    ]


def test_report_covers_last_twelve_months() -> None:
    report = generate_report(_history(), {}, now=AS_OF)
    monthly = report["monthly_spending"]

    assert len(monthly["last_12_months"]) == 12
    assert monthly["last_12_months"][0]["label"] == "2025-03"
    assert monthly["last_12_months"][-1]["label"] == "2024-04"
    assert monthly["total_spent"] == 6240.0
    assert monthly["average_monthly"] == 520.0
    assert monthly["category_breakdown"] == {"Food & Dining": 6000.0, "Automotive": 240.0}
    assert report["metadata"]["transaction_count"] == 16
    assert report["metadata"]["currency"] == "CHF"
    assert not report["metadata"]["reduced_confidence"]


def test_report_insights_and_sections() -> None:
    report = generate_report(_history(), {}, now=AS_OF, user_id="user-7")

    opportunity = report["opportunity_cost"]
    assert opportunity["total_annual_savings"] == 1200.0
    assert sorted(opportunity["investment_projections"]) == ["10_years", "20_years", "30_years"]
    assert opportunity["investment_projections"]["10_years"] == 16579.74

    co2 = report["co2_impact"]
    assert co2["fuel_expenses"] == {"last_30_days": 240.0, "transaction_count": 3, "show_tip": True}
    assert co2["environmental_recommendations"] == [FUEL_RECOMMENDATION]

    insights = report["insights"]
    assert report["metadata"]["user_id"] == "user-7"
    assert insights["top_spending_category"] == "Food & Dining"
    assert insights["biggest_savings_opportunity"] == "Food & Dining"
    assert insights["environmental_impact"] == "High fuel spending (240 CHF in 30 days)"
    assert insights["investment_potential"].startswith("Could save 1200 CHF annually, growing to ")


def test_report_card_filter_and_empty_history() -> None:
    fuel_only = generate_report(_history(), {}, now=AS_OF, card_ids=["card-2"])
    assert fuel_only["monthly_spending"]["category_breakdown"] == {"Automotive": 240.0}
    assert fuel_only["insights"]["biggest_savings_opportunity"] == "None"
    assert fuel_only["insights"]["investment_potential"] == "Already optimized spending"

    empty = generate_report([], {}, now=AS_OF)
    assert empty["monthly_spending"]["total_spent"] == 0.0
    assert empty["insights"]["top_spending_category"] == "Unknown"
    assert empty["insights"]["environmental_impact"] == "Good environmental practices"


def test_report_flags_unconverted_amounts() -> None:
    transactions = [_txn(AS_OF, "10", "5411", currency="978")]

    report = generate_report(transactions, {}, now=AS_OF)

    assert report["metadata"]["unconverted_count"] == 1
    assert report["metadata"]["reduced_confidence"]
    assert "Data quality:" in report_as_text(report)


def test_report_renders_as_json_and_text() -> None:
    report = generate_report(_history(), {}, now=AS_OF)

    assert json.loads(report_to_json(report))["insights"] == report["insights"]

    text = report_as_text(report)
    assert text.startswith("=== COMPREHENSIVE FINANCIAL REPORT ===")
    assert text.endswith("=== END REPORT ===")
    assert "MONTHLY SPENDING SUMMARY" in text
    assert "  [over] Food & Dining: overspending by 1200.00 CHF/year" in text
    assert "  [ok] Transportation: within budget (0.00 CHF/month)" in text
    assert "KEY INSIGHTS" in text
