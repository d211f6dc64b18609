from decimal import Decimal

import requests

from currency import (
    REPORTING_CURRENCY,
    convert,
    currency_symbol,
    fetch_exchange_rates,
    normalize,
    parse_rate_table,
)


class FakeResponse:
    def __init__(self, payload, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(self, response=None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple[str, float]] = []

    def get(self, url: str, timeout: float):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


def test_normalize_reporting_currency_is_identity() -> None:
    for amount in [Decimal("0"), Decimal("100"), Decimal("-12.35")]:
        assert normalize(amount, REPORTING_CURRENCY, {"756": Decimal("3")}) == amount


def test_normalize_converts_with_rate() -> None:
    assert normalize(Decimal("50"), "978", {"978": Decimal("0.95")}) == Decimal("47.5")


def test_normalize_float_rates_convert_exactly() -> None:
    assert normalize(Decimal("50"), "978", {"978": 0.95}) == Decimal("47.5")
    assert convert(Decimal("10"), "840", {"840": 0.1}) == (Decimal("1.0"), True)


def test_unusable_rate_counts_as_missing() -> None:
    assert convert(Decimal("80"), "840", {"840": "n/a"}) == (Decimal("80"), False)


def test_normalize_without_rate_passes_amount_through() -> None:
    assert normalize(Decimal("80"), "840", {}) == Decimal("80")
    assert convert(Decimal("80"), "840", {}) == (Decimal("80"), False)
    assert convert(Decimal("80"), "756", {}) == (Decimal("80"), True)


def test_currency_symbol_falls_back_to_code() -> None:
    assert currency_symbol("978") == "EUR"
    assert currency_symbol("999") == "999"


def test_parse_rate_table_accepts_symbols_and_codes() -> None:
    rates = parse_rate_table({"EUR": 0.95, "840": "0.88", "CHF": 1, "GBP": -1, "JPY": "abc"})

    assert rates == {"978": Decimal("0.95"), "840": Decimal("0.88")}


def test_fetch_exchange_rates_inverts_quotes() -> None:
    session = FakeSession(FakeResponse({"base": "CHF", "rates": {"CHF": 1, "EUR": 1.25, "USD": 0.8}}))

    rates = fetch_exchange_rates(url="https://fx.test/latest/{symbol}", timeout=2.0, session=session)

    assert session.calls == [("https://fx.test/latest/CHF", 2.0)]
    assert rates == {"978": Decimal("0.8"), "840": Decimal("1.25")}


def test_fetch_exchange_rates_network_failure_returns_empty() -> None:
    session = FakeSession(error=requests.ConnectionError("offline"))

    assert fetch_exchange_rates(session=session) == {}


def test_fetch_exchange_rates_bad_payload_returns_empty() -> None:
    assert fetch_exchange_rates(session=FakeSession(FakeResponse({"error": "quota"}))) == {}
    assert fetch_exchange_rates(session=FakeSession(FakeResponse(ValueError("not json")))) == {}
    assert fetch_exchange_rates(session=FakeSession(FakeResponse({}, status_code=503))) == {}
