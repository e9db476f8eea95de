import pytest

from roman_converter.common.symbols import (
    MULTIPLIER_TIERS,
    ROMAN_ALPHABET,
    ROMAN_NUMERALS,
    ROMAN_VALUES,
    VINCULUM_MULTIPLIERS,
    multiplier_legend,
    symbol_legend,
)


def test_symbol_legend_is_ascending():
    assert symbol_legend() == [
        ("I", 1), ("V", 5), ("X", 10), ("L", 50), ("C", 100), ("D", 500), ("M", 1000),
    ]


def test_multiplier_legend_is_ascending():
    assert multiplier_legend() == [("·", 1000), (":", 1000000)]


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        ROMAN_VALUES["A"] = 1
    with pytest.raises(TypeError):
        VINCULUM_MULTIPLIERS["!"] = 10


def test_alphabet_covers_both_cases_and_marks():
    assert set("IVXLCDMivxlcdm·:") == ROMAN_ALPHABET


def test_emission_table_is_descending():
    values = [value for _, value in ROMAN_NUMERALS]
    assert values == sorted(values, reverse=True)


def test_tiers_are_largest_first():
    assert MULTIPLIER_TIERS == ((1000000, ":"), (1000, "·"))
