"""Typed records shared by ingestion, aggregation and the insight modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Mapping

ExchangeRates = Mapping[str, Decimal]
"""Currency code -> reporting-currency units per one foreign unit."""

ZERO = Decimal("0")


@dataclass(frozen=True)
class Transaction:
    card_id: str
    trx_date: date
    amount: Decimal
    currency: str
    description: str = ""
    city: str = ""
    country: str = ""
    mcc: str = ""
    is_card_present: bool = False
    is_purchase: bool = False
    is_cash: bool = False
    trx_code: str = ""
    age_category: str = ""
    limit_exhaustion_category: str = ""


@dataclass(frozen=True)
class MonthlyAggregate:
    year: int
    month: int
    month_name: str
    total: Decimal
    transaction_count: int
    currencies: dict[str, Decimal] = field(default_factory=dict)
    categories: dict[str, Decimal] = field(default_factory=dict)
    unconverted_count: int = 0

    @property
    def key(self) -> tuple[int, int]:
        return self.year, self.month

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class AggregationResult:
    months: tuple[MonthlyAggregate, ...] = ()
    skipped_count: int = 0

    @property
    def unconverted_count(self) -> int:
        return sum(month.unconverted_count for month in self.months)

    @property
    def transaction_count(self) -> int:
        return sum(month.transaction_count for month in self.months)

    @property
    def reduced_confidence(self) -> bool:
        """True when some records were skipped or left in their own currency."""
        return bool(self.skipped_count or self.unconverted_count)


@dataclass(frozen=True)
class CardSummary:
    card_id: str
    transaction_count: int
    total_amount: Decimal
    currencies: tuple[str, ...] = ()


@dataclass(frozen=True)
class CategoryAnalysis:
    category: str
    annual_spending: Decimal
    monthly_spending: Decimal
    threshold: Decimal
    overage: Decimal
    annual_savings: Decimal
    is_within_limit: bool


@dataclass(frozen=True)
class OpportunityCostResult:
    per_category: tuple[CategoryAnalysis, ...]
    total_annual_savings: Decimal
    projections: dict[int, Decimal]
    thresholds: dict[str, Decimal]
    household_size: int


FUEL_TIP = "Consider cycling or public transport to reduce your environmental impact and save money."
PARKING_TIP = "Consider using more sustainable transport options to reduce both costs and CO2 emissions."
FUEL_RECOMMENDATION = "Consider cycling or public transport to reduce fuel expenses and CO2 emissions"
PARKING_RECOMMENDATION = "High parking costs suggest frequent car usage - consider alternative transportation"


@dataclass(frozen=True)
class CO2Advisory:
    fuel_tip: bool = False
    parking_tip: bool = False
    fuel_total: Decimal = ZERO
    parking_total: Decimal = ZERO
    fuel_count: int = 0
    parking_count: int = 0

    @property
    def recommendations(self) -> list[str]:
        tips = []
        if self.fuel_tip:
            tips.append(FUEL_RECOMMENDATION)
        if self.parking_tip:
            tips.append(PARKING_RECOMMENDATION)
        return tips

    @property
    def primary_tip(self) -> str | None:
        """The single tip a compact widget shows: fuel wins over parking."""
        if self.fuel_tip:
            return FUEL_TIP
        if self.parking_tip:
            return PARKING_TIP
        return None


@dataclass
class ParseResult:
    transactions: list[Transaction] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
