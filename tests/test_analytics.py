import datetime
from decimal import Decimal

from analytics import (
    aggregate_monthly,
    card_summaries,
    filter_by_cards,
    filter_by_date_range,
    monthly_frame,
    sort_transactions,
    trailing_category_spending,
    transactions_frame,
)
from models import Transaction


def _txn(
    day: str,
    amount: str,
    currency: str = "756",
    mcc: str = "5411",
    card_id: str = "card-1",
) -> Transaction:
    return Transaction(
        card_id=card_id,
        trx_date=datetime.date.fromisoformat(day),
        amount=Decimal(amount),
        currency=currency,
        mcc=mcc,
    )


def _sample() -> list[Transaction]:
    return [
        _txn("2025-01-05", "40.00"),
        _txn("2025-01-20", "100.00", currency="978", mcc="5812"),
        _txn("2025-02-02", "60.00", mcc="5541", card_id="card-2"),
        _txn("2024-12-31", "25.50", currency="840", mcc="7523"),
        _txn("2025-02-14", "-10.00", mcc="5411", card_id="card-2"),
    ]


def test_single_grocery_transaction_aggregates_to_one_month() -> None:
    result = aggregate_monthly([_txn("2025-03-10", "100")], {})

    assert len(result.months) == 1
    month = result.months[0]
    assert (month.year, month.month, month.month_name) == (2025, 3, "March")
    assert month.total == Decimal("100")
    assert month.transaction_count == 1
    assert month.categories == {"Food & Dining": Decimal("100")}
    assert month.currencies == {"CHF": Decimal("100")}
    assert not result.reduced_confidence


def test_aggregate_orders_months_most_recent_first() -> None:
    result = aggregate_monthly(_sample(), {"978": Decimal("0.95"), "840": Decimal("0.9")})

    assert [month.label for month in result.months] == ["2025-02", "2025-01", "2024-12"]


def test_aggregate_sums_converted_and_raw_amounts() -> None:
    result = aggregate_monthly(_sample(), {"978": Decimal("0.95"), "840": Decimal("0.9")})
    january = result.months[1]

    assert january.total == Decimal("135.00")
    assert january.currencies == {"CHF": Decimal("40.00"), "EUR": Decimal("100.00")}
    assert january.categories == {"Food & Dining": Decimal("135.00")}

    december = result.months[2]
    assert december.total == Decimal("22.950")
    assert december.categories == {"Transportation": Decimal("22.950")}

    february = result.months[0]
    assert february.total == Decimal("50.00")
    assert february.categories == {"Automotive": Decimal("60.00"), "Food & Dining": Decimal("-10.00")}


def test_aggregate_counts_every_transaction_once() -> None:
    transactions = _sample()
    result = aggregate_monthly(transactions, {})

    assert sum(month.transaction_count for month in result.months) == len(transactions)
    assert result.transaction_count == len(transactions)


def test_aggregate_is_deterministic() -> None:
    rates = {"978": Decimal("0.95")}
    assert aggregate_monthly(_sample(), rates) == aggregate_monthly(_sample(), rates)


def test_aggregate_flags_amounts_without_rate() -> None:
    result = aggregate_monthly(_sample(), {"978": Decimal("0.95")})

    assert result.months[2].unconverted_count == 1
    assert result.months[2].total == Decimal("25.50")
    assert result.unconverted_count == 1
    assert result.reduced_confidence


def test_aggregate_skips_records_with_invalid_dates() -> None:
    broken = Transaction(card_id="card-1", trx_date="2025-13-40", amount=Decimal("5"), currency="756")  # type: ignore[arg-type]
    missing = Transaction(card_id="card-1", trx_date=None, amount=Decimal("5"), currency="756")  # type: ignore[arg-type]
    textual = Transaction(card_id="card-1", trx_date="2025-01-03", amount=Decimal("5"), currency="756")  # type: ignore[arg-type]

    result = aggregate_monthly([broken, missing, textual, _txn("2025-01-05", "1")], {})

    assert result.skipped_count == 2
    assert result.months[0].transaction_count == 2
    assert result.reduced_confidence


def test_aggregate_empty_input() -> None:
    result = aggregate_monthly([], {})

    assert result.months == ()
    assert result.skipped_count == 0
    assert monthly_frame(result.months).empty


def test_trailing_category_spending_limits_window() -> None:
    months = aggregate_monthly(_sample(), {"978": Decimal("1"), "840": Decimal("1")}).months

    assert trailing_category_spending(months, window=2) == {
        "Automotive": Decimal("60.00"),
        "Food & Dining": Decimal("130.00"),
    }
    assert trailing_category_spending(months)["Transportation"] == Decimal("25.50")


def test_card_filters_and_summaries() -> None:
    transactions = _sample()

    assert len(filter_by_cards(transactions, ["card-2"])) == 2
    assert len(filter_by_cards(transactions, [])) == len(transactions)
    assert len(filter_by_cards(transactions, None)) == len(transactions)

    summaries = card_summaries(transactions)
    assert [item.card_id for item in summaries] == ["card-1", "card-2"]
    assert summaries[0].transaction_count == 3
    assert summaries[0].currencies == ("CHF", "EUR", "USD")
    assert summaries[1].total_amount == Decimal("50.00")


def test_date_range_and_sorting() -> None:
    transactions = _sample()

    january = filter_by_date_range(transactions, datetime.date(2025, 1, 1), datetime.date(2025, 1, 31))
    assert len(january) == 2

    newest = sort_transactions(transactions)
    assert newest[0].trx_date == datetime.date(2025, 2, 14)
    oldest = sort_transactions(transactions, newest_first=False)
    assert oldest[0].trx_date == datetime.date(2024, 12, 31)


def test_monthly_frame_is_chronological_with_category_columns() -> None:
    months = aggregate_monthly(_sample(), {"978": Decimal("0.95"), "840": Decimal("0.9")}).months

    frame = monthly_frame(months)

    assert list(frame["Month"]) == ["2024-12", "2025-01", "2025-02"]
    assert "Automotive" in frame.columns
    assert float(frame.loc[1, "TotalCHF"]) == 135.0
    assert float(frame.loc[0, "Automotive"]) == 0.0


def test_transactions_frame_marks_unconverted_rows() -> None:
    frame = transactions_frame(_sample(), {"978": Decimal("0.95")})

    assert len(frame) == 5
    assert list(frame["Converted"]) == [True, True, True, False, True]
    assert float(frame.loc[1, "AmountCHF"]) == 95.0
    assert frame.loc[2, "Category"] == "Automotive"
