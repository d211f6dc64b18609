"""Fuel and parking spend checks behind the sustainability tips."""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Iterable

from analytics import calendar_date
from categorization import normalize_mcc
from currency import REPORTING_CURRENCY, normalize
from models import ZERO, CO2Advisory, ExchangeRates, Transaction

FUEL_MCCS = frozenset({"5541", "5542"})
PARKING_MCCS = frozenset({"7523"})

FUEL_WINDOW_DAYS = 30
PARKING_WINDOW_DAYS = 60

FUEL_TIP_THRESHOLD = Decimal("200")
PARKING_TIP_THRESHOLD = Decimal("15")


def _window_total(
    transactions: Iterable[Transaction],
    mccs: frozenset[str],
    start: datetime.date,
    end: datetime.date,
    rates: ExchangeRates,
    reporting_currency: str,
) -> tuple[Decimal, int]:
    total = ZERO
    count = 0
    for txn in transactions:
        if normalize_mcc(txn.mcc) not in mccs:
            continue
        day = calendar_date(txn.trx_date)
        if day is None or not start <= day <= end:
            continue
        total += abs(normalize(txn.amount, txn.currency, rates, reporting_currency))
        count += 1
    return total, count


def check_advisory(
    transactions: Iterable[Transaction],
    rates: ExchangeRates,
    now: datetime.date | None = None,
    reporting_currency: str = REPORTING_CURRENCY,
) -> CO2Advisory:
    """Decide whether recent fuel or parking spend warrants a tip.

    Fuel (MCC 5541/5542) is summed over the last 30 days and parking (7523)
    over the last 60 days, both as absolute reporting-currency amounts.
    """
    today = now or datetime.date.today()
    if isinstance(today, datetime.datetime):
        today = today.date()
    records = list(transactions)

    fuel_total, fuel_count = _window_total(
        records, FUEL_MCCS, today - datetime.timedelta(days=FUEL_WINDOW_DAYS), today, rates, reporting_currency
    )
    parking_total, parking_count = _window_total(
        records,
        PARKING_MCCS,
        today - datetime.timedelta(days=PARKING_WINDOW_DAYS),
        today,
        rates,
        reporting_currency,
    )
    return CO2Advisory(
        fuel_tip=fuel_total > FUEL_TIP_THRESHOLD,
        parking_tip=parking_total > PARKING_TIP_THRESHOLD,
        fuel_total=fuel_total,
        parking_total=parking_total,
        fuel_count=fuel_count,
        parking_count=parking_count,
    )
