import pandas as pd

from categorization import (
    MCC_MAPPING,
    MCC_RANGES,
    Category,
    all_categories,
    assign_categories,
    category_stats,
    classify,
    codes_for_category,
    normalize_mcc,
)


def test_classify_groceries_from_table() -> None:
    entry = classify("5411")

    assert entry.category is Category.FOOD_DINING
    assert entry.subcategory == "Groceries"
    assert entry.description == "Grocery Stores, Supermarkets"


def test_classify_strips_country_prefix_and_whitespace() -> None:
    assert normalize_mcc("CH,5411") == "5411"
    assert normalize_mcc("  DE5812 ") == "5812"
    assert classify(" CH,5411 ") == classify("5411")


def test_classify_every_table_code_returns_table_entry() -> None:
    for code, entry in MCC_MAPPING.items():
        assert classify(code) is entry


def test_table_has_unique_four_digit_keys() -> None:
    assert len(MCC_MAPPING) == 299
    assert all(len(code) == 4 and code.isdigit() for code in MCC_MAPPING)
    assert all(entry.code == code for code, entry in MCC_MAPPING.items())


def test_table_cannot_be_mutated() -> None:
    try:
        MCC_MAPPING["0000"] = MCC_MAPPING["5411"]  # type: ignore[index]
    except TypeError:
        pass
    else:
        raise AssertionError("MCC_MAPPING accepted a write")


def test_unknown_code_falls_back_to_range() -> None:
    entry = classify("9999")
    assert entry.category is Category.GOVERNMENT
    assert entry.description == "Government Services"

    hotel = classify("3600")
    assert hotel.category is Category.TRAVEL_LODGING
    assert hotel.subcategory == "Hotels"

    assert classify("0500").category is Category.BUSINESS
    assert classify("1600").category is Category.SERVICES
    assert classify("5650").subcategory == "Clothing"


def test_codes_in_bracket_gaps_are_other() -> None:
    for code in ["3300", "3450", "7750"]:
        entry = classify(code)
        assert entry.category is Category.OTHER
        assert entry.description == "Unknown Merchant Category"


def test_classify_is_total_over_strings() -> None:
    samples = ["", "   ", "abc", "CH,", "12ab", "-5", "0", "10000", "99999", "5411.0", "ÄÖÜ", None]
    for sample in samples:
        entry = classify(sample)
        assert entry.category in set(Category)

    assert classify("abc").category is Category.OTHER
    assert classify("0").category is Category.OTHER
    assert classify("10000").category is Category.OTHER


def test_classify_handles_very_long_digit_runs() -> None:
    assert classify("1" * 5000).category is Category.OTHER
    assert classify("9" * 5000 + "abc").category is Category.OTHER
    assert classify("-" + "5" * 5000).category is Category.OTHER
    assert classify("0" * 5000 + "5999").category is Category.FOOD_DINING
    assert classify("0" * 5000).category is Category.OTHER


def test_ranges_are_ordered_and_disjoint() -> None:
    for (_, high, *_), (low, *_) in zip(MCC_RANGES, MCC_RANGES[1:]):
        assert high < low

    for value in range(1, 10000):
        matches = [bracket for bracket in MCC_RANGES if bracket[0] <= value <= bracket[1]]
        assert len(matches) <= 1


def test_category_helpers() -> None:
    assert len(all_categories()) == 17
    assert "Food & Dining" in all_categories()
    fuel = codes_for_category("Automotive")
    assert any(entry.code == "5541" for entry in fuel)
    assert codes_for_category(Category.OTHER) == []

    stats = category_stats()
    assert list(stats.columns) == ["Category", "CodeCount"]
    assert stats.iloc[0]["Category"] == "Travel & Lodging"
    assert int(stats["CodeCount"].sum()) == 299


def test_assign_categories_adds_columns() -> None:
    df = pd.DataFrame([{"trx_mcc": "5541"}, {"trx_mcc": "3300"}])

    out = assign_categories(df)

    assert list(out["Category"]) == ["Automotive", "Other"]
    assert list(out["Subcategory"]) == ["Gas Stations", ""]
    assert "MccDescription" in out.columns
