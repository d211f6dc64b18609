from decimal import Decimal

from opportunity_cost import (
    BASE_MONTHLY_THRESHOLDS,
    analysis_frame,
    analyze,
    biggest_savings_opportunity,
    future_value,
)


def _row(result, category: str):
    return next(row for row in result.per_category if row.category == category)


def test_food_overspend_for_single_person_household() -> None:
    result = analyze({"Food & Dining": Decimal("6000")}, household_size=1)
    food = _row(result, "Food & Dining")

    assert food.monthly_spending == Decimal("500")
    assert food.threshold == Decimal("400")
    assert food.overage == Decimal("100")
    assert food.annual_savings == Decimal("1200")
    assert not food.is_within_limit
    assert result.total_annual_savings == Decimal("1200")
    assert result.projections[10].quantize(Decimal("0.01")) == Decimal("16579.74")


def test_projections_grow_with_horizon() -> None:
    result = analyze({"Retail & Shopping": Decimal("4800")})

    assert result.total_annual_savings == Decimal("1200")
    assert sorted(result.projections) == [10, 20, 30]
    assert result.projections[10] < result.projections[20] < result.projections[30]


def test_missing_categories_count_as_zero_spending() -> None:
    result = analyze({})

    assert [row.category for row in result.per_category] == list(BASE_MONTHLY_THRESHOLDS)
    assert all(row.annual_spending == 0 and row.is_within_limit for row in result.per_category)
    assert result.total_annual_savings == 0
    assert all(value == 0 for value in result.projections.values())
    assert biggest_savings_opportunity(result) == "None"


def test_other_categories_are_not_analyzed() -> None:
    result = analyze({"Travel & Lodging": Decimal("90000"), "Entertainment & Recreation": Decimal("1800")})

    assert {row.category for row in result.per_category} == set(BASE_MONTHLY_THRESHOLDS)
    assert result.total_annual_savings == 0


def test_larger_households_never_increase_savings() -> None:
    spending = {
        "Food & Dining": Decimal("15000"),
        "Retail & Shopping": Decimal("9000"),
        "Transportation": Decimal("4000"),
        "Entertainment & Recreation": Decimal("3000"),
    }

    savings = [analyze(spending, household_size=size).total_annual_savings for size in range(1, 6)]

    assert savings == sorted(savings, reverse=True)
    assert analyze(spending, household_size=2).thresholds["Food & Dining"] == Decimal("800")


def test_biggest_savings_opportunity_picks_largest_overage() -> None:
    result = analyze({"Food & Dining": Decimal("6000"), "Transportation": Decimal("6000")})

    assert biggest_savings_opportunity(result) == "Transportation"


def test_future_value_matches_annuity_formula() -> None:
    assert future_value(Decimal("0"), 30) == 0
    assert future_value(Decimal("100"), 1) == Decimal("100")


def test_analysis_frame_has_one_row_per_threshold_category() -> None:
    frame = analysis_frame(analyze({"Food & Dining": Decimal("6000")}))

    assert list(frame["Category"]) == list(BASE_MONTHLY_THRESHOLDS)
    assert frame.loc[0, "AnnualSavingsCHF"] == 1200.0
    assert not frame.loc[0, "WithinLimit"]
