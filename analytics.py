"""Monthly aggregation of card transactions plus dashboard-facing views."""

from __future__ import annotations

import calendar
import datetime
from collections import Counter, defaultdict
from decimal import Decimal
from typing import Iterable, Sequence

import pandas as pd

from categorization import classify
from currency import REPORTING_CURRENCY, convert, currency_symbol
from logging_setup import get_logger
from models import ZERO, AggregationResult, CardSummary, ExchangeRates, MonthlyAggregate, Transaction

logger = get_logger(__name__)


def calendar_date(value) -> datetime.date | None:
    """Calendar date of a record, or None when it cannot be trusted."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        try:
            return datetime.date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


class _MonthBucket:
    __slots__ = ("total", "count", "currencies", "categories", "unconverted")

    def __init__(self) -> None:
        self.total = ZERO
        self.count = 0
        self.currencies: dict[str, Decimal] = defaultdict(lambda: ZERO)
        self.categories: dict[str, Decimal] = defaultdict(lambda: ZERO)
        self.unconverted = 0


def aggregate_monthly(
    transactions: Iterable[Transaction],
    rates: ExchangeRates,
    reporting_currency: str = REPORTING_CURRENCY,
) -> AggregationResult:
    """Group transactions by calendar month, most recent month first.

    Each month carries the normalized total, the raw per-currency sums and
    the normalized per-category sums. Records with an unusable date are
    left out and counted in ``skipped_count``.
    """
    buckets: dict[tuple[int, int], _MonthBucket] = {}
    skipped = 0
    missing_rates: Counter[str] = Counter()

    for txn in transactions:
        day = calendar_date(txn.trx_date)
        if day is None:
            skipped += 1
            continue

        bucket = buckets.get((day.year, day.month))
        if bucket is None:
            bucket = buckets[(day.year, day.month)] = _MonthBucket()

        amount, converted = convert(txn.amount, txn.currency, rates, reporting_currency)
        if not converted:
            bucket.unconverted += 1
            missing_rates[txn.currency] += 1

        bucket.count += 1
        bucket.total += amount
        bucket.currencies[currency_symbol(txn.currency)] += txn.amount
        bucket.categories[classify(txn.mcc).category.value] += amount

    if skipped:
        logger.warning("Skipped %d transaction(s) with an invalid date", skipped)
    for code, count in sorted(missing_rates.items()):
        logger.warning(
            "No exchange rate for currency %s; %d amount(s) counted as %s",
            currency_symbol(code),
            count,
            currency_symbol(reporting_currency),
        )

    months = tuple(
        MonthlyAggregate(
            year=year,
            month=month,
            month_name=calendar.month_name[month],
            total=bucket.total,
            transaction_count=bucket.count,
            currencies=dict(bucket.currencies),
            categories=dict(bucket.categories),
            unconverted_count=bucket.unconverted,
        )
        for (year, month), bucket in sorted(buckets.items(), reverse=True)
    )
    return AggregationResult(months=months, skipped_count=skipped)


def trailing_category_spending(months: Sequence[MonthlyAggregate], window: int = 12) -> dict[str, Decimal]:
    """Sum category totals over the ``window`` most recent aggregates."""
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for month in list(months)[: max(int(window), 0)]:
        for category, amount in month.categories.items():
            totals[category] += amount
    return dict(totals)


def filter_by_cards(transactions: Iterable[Transaction], card_ids: Iterable[str] | None) -> list[Transaction]:
    """Keep transactions of the selected cards; an empty selection keeps all."""
    selected = {str(card).strip() for card in (card_ids or []) if str(card).strip()}
    if not selected:
        return list(transactions)
    return [txn for txn in transactions if txn.card_id in selected]


def filter_by_date_range(
    transactions: Iterable[Transaction], start_date: datetime.date, end_date: datetime.date
) -> list[Transaction]:
    """Filter transactions in inclusive date range."""
    out = []
    for txn in transactions:
        day = calendar_date(txn.trx_date)
        if day is not None and start_date <= day <= end_date:
            out.append(txn)
    return out


def sort_transactions(transactions: Iterable[Transaction], newest_first: bool = True) -> list[Transaction]:
    dated = [txn for txn in transactions if calendar_date(txn.trx_date) is not None]
    return sorted(dated, key=lambda txn: (calendar_date(txn.trx_date), txn.card_id), reverse=newest_first)


def card_summaries(transactions: Iterable[Transaction]) -> list[CardSummary]:
    """Per-card count, raw amount total and currencies, busiest card first."""
    counts: Counter[str] = Counter()
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    currencies: dict[str, set[str]] = defaultdict(set)
    for txn in transactions:
        counts[txn.card_id] += 1
        totals[txn.card_id] += txn.amount
        currencies[txn.card_id].add(currency_symbol(txn.currency))

    summaries = [
        CardSummary(
            card_id=card_id,
            transaction_count=counts[card_id],
            total_amount=totals[card_id],
            currencies=tuple(sorted(currencies[card_id])),
        )
        for card_id in counts
    ]
    return sorted(summaries, key=lambda item: (-item.transaction_count, item.card_id))


def monthly_frame(months: Sequence[MonthlyAggregate]) -> pd.DataFrame:
    """Month-per-row table for charts, oldest month first."""
    base_columns = ["Month", "Year", "MonthName", "TotalCHF", "Transactions", "Unconverted"]
    if not months:
        return pd.DataFrame(columns=base_columns)

    categories = sorted({category for month in months for category in month.categories})
    rows = []
    for month in sorted(months, key=lambda item: item.key):
        row = {
            "Month": month.label,
            "Year": month.year,
            "MonthName": month.month_name,
            "TotalCHF": float(month.total),
            "Transactions": month.transaction_count,
            "Unconverted": month.unconverted_count,
        }
        for category in categories:
            row[category] = float(month.categories.get(category, ZERO))
        rows.append(row)
    return pd.DataFrame(rows, columns=base_columns + categories)


def transactions_frame(
    transactions: Iterable[Transaction],
    rates: ExchangeRates,
    reporting_currency: str = REPORTING_CURRENCY,
) -> pd.DataFrame:
    """Flat transaction table with the reporting-currency amount and MCC category."""
    columns = [
        "CardId",
        "Date",
        "Description",
        "City",
        "Country",
        "Currency",
        "Amount",
        "AmountCHF",
        "Converted",
        "Mcc",
        "Category",
        "Subcategory",
    ]
    rows = []
    for txn in transactions:
        amount, converted = convert(txn.amount, txn.currency, rates, reporting_currency)
        entry = classify(txn.mcc)
        rows.append(
            {
                "CardId": txn.card_id,
                "Date": txn.trx_date,
                "Description": txn.description,
                "City": txn.city,
                "Country": txn.country,
                "Currency": currency_symbol(txn.currency),
                "Amount": float(txn.amount),
                "AmountCHF": float(amount),
                "Converted": converted,
                "Mcc": txn.mcc,
                "Category": entry.category.value,
                "Subcategory": entry.subcategory or "",
            }
        )
    out = pd.DataFrame(rows, columns=columns)
    if not out.empty:
        out["Date"] = pd.to_datetime(out["Date"], errors="coerce")
    return out
