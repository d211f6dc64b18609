"""Currency codes, reporting-currency normalization and live exchange rates."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

import requests

from config import DEFAULT_FX_TIMEOUT, DEFAULT_FX_URL
from logging_setup import get_logger
from models import ExchangeRates

logger = get_logger(__name__)

REPORTING_CURRENCY = "756"

# ISO 4217 numeric code -> alphabetic symbol.
CURRENCY_CODES = {
    "756": "CHF",
    "978": "EUR",
    "840": "USD",
    "826": "GBP",
    "392": "JPY",
    "949": "TRY",
    "208": "DKK",
    "410": "KRW",
    "752": "SEK",
    "901": "TWD",
    "764": "THB",
    "985": "PLN",
    "203": "CZK",
    "834": "TZS",
    "504": "MAD",
    "784": "AED",
    "702": "SGD",
    "144": "LKR",
    "032": "ARS",
    "512": "OMR",
    "170": "COP",
    "124": "CAD",
    "048": "BHD",
}

_CODES_BY_SYMBOL = {symbol: code for code, symbol in CURRENCY_CODES.items()}


def currency_symbol(code: str) -> str:
    """Alphabetic symbol for a numeric code, or the code itself when unknown."""
    text = str(code or "").strip()
    return CURRENCY_CODES.get(text, text)


def to_decimal(value: Any) -> Decimal | None:
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, bool) or value is None:
        return None
    try:
        out = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return out if out.is_finite() else None


def convert(
    amount: Decimal,
    currency_code: str,
    rates: ExchangeRates,
    reporting_currency: str = REPORTING_CURRENCY,
) -> tuple[Decimal, bool]:
    """Return ``(amount in reporting currency, converted)``.

    ``converted`` is False only when a foreign amount had no rate and was
    passed through unchanged.
    """
    if currency_code == reporting_currency:
        return amount, True
    rate = to_decimal(rates.get(currency_code))
    if rate is None:
        return amount, False
    return amount * rate, True


def normalize(
    amount: Decimal,
    currency_code: str,
    rates: ExchangeRates,
    reporting_currency: str = REPORTING_CURRENCY,
) -> Decimal:
    """Express ``amount`` in the reporting currency; unknown rates pass through."""
    value, _ = convert(amount, currency_code, rates, reporting_currency)
    return value


def parse_rate_table(raw: Mapping[str, Any], reporting_currency: str = REPORTING_CURRENCY) -> dict[str, Decimal]:
    """Coerce a user-supplied ``{code or symbol: rate}`` mapping into an exchange-rate table."""
    rates: dict[str, Decimal] = {}
    for key, value in (raw or {}).items():
        code = str(key).strip().upper()
        code = _CODES_BY_SYMBOL.get(code, code)
        rate = to_decimal(value)
        if not code or code == reporting_currency:
            continue
        if rate is None or rate <= 0:
            logger.warning("Ignoring exchange rate for %s: %r is not a positive number", key, value)
            continue
        rates[code] = rate
    return rates


def _safe_json_response(response: requests.Response) -> dict[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


def fetch_exchange_rates(
    url: str = DEFAULT_FX_URL,
    timeout: float = DEFAULT_FX_TIMEOUT,
    session: requests.Session | None = None,
    reporting_currency: str = REPORTING_CURRENCY,
) -> dict[str, Decimal]:
    """Fetch reporting-units-per-foreign-unit rates keyed by numeric code.

    The service quotes foreign units per one reporting unit, so each quote is
    inverted. Any failure yields an empty table, which leaves foreign amounts
    unconverted downstream.
    """
    base_symbol = currency_symbol(reporting_currency)
    http = session or requests
    try:
        response = http.get(url.format(symbol=base_symbol), timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("Exchange-rate fetch failed, amounts stay unconverted: %s", exc)
        return {}

    quotes = _safe_json_response(response).get("rates")
    if not isinstance(quotes, dict):
        logger.warning("Exchange-rate response from %s has no rates table", url)
        return {}

    rates: dict[str, Decimal] = {}
    for code, symbol in CURRENCY_CODES.items():
        if code == reporting_currency:
            continue
        quote = to_decimal(quotes.get(symbol))
        if quote is None or quote <= 0:
            continue
        rates[code] = Decimal(1) / quote
    logger.info("Loaded %d exchange rates against %s", len(rates), base_symbol)
    return rates
