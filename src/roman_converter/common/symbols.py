"""Roman numeral symbol tables for the converter package.

This module holds the static lookup tables shared by the validator, the parser
and the converters: the value of each roman letter, the multiplier of each
vinculum mark, the greedy emission table and the multiplier tiers used when
rendering large numbers.

All tables are read-only and iterate in a fixed order so that consumers can
render a reference legend deterministically.
"""
from types import MappingProxyType
from typing import List, Tuple

# Vinculum marks placed after a symbol to scale it
THOUSAND_MARK = "·"
MILLION_MARK = ":"

# Standard roman notation, ascending by value
ROMAN_VALUES = MappingProxyType({
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
})

# Multipliers for extended notation, ascending by value
VINCULUM_MULTIPLIERS = MappingProxyType({
    THOUSAND_MARK: 1000,      # x 1 000
    MILLION_MARK: 1000000,    # x 1 000 000
})

# Every character a roman numeral may contain, both cases
ROMAN_ALPHABET = frozenset(
    "".join(ROMAN_VALUES) + "".join(ROMAN_VALUES).lower() + "".join(VINCULUM_MULTIPLIERS)
)

# Greedy emission table in descending order of value
# Includes the subtractive pairs for proper notation
ROMAN_NUMERALS: Tuple[Tuple[str, int], ...] = (
    ("M", 1000),   # 1000
    ("CM", 900),   # 900 (1000 - 100)
    ("D", 500),    # 500
    ("CD", 400),   # 400 (500 - 100)
    ("C", 100),    # 100
    ("XC", 90),    # 90 (100 - 10)
    ("L", 50),     # 50
    ("XL", 40),    # 40 (50 - 10)
    ("X", 10),     # 10
    ("IX", 9),     # 9 (10 - 1)
    ("V", 5),      # 5
    ("IV", 4),     # 4 (5 - 1)
    ("I", 1),      # 1
)

# Tiers rendered by decimal to roman conversion, largest first
MULTIPLIER_TIERS: Tuple[Tuple[int, str], ...] = (
    (VINCULUM_MULTIPLIERS[MILLION_MARK], MILLION_MARK),
    (VINCULUM_MULTIPLIERS[THOUSAND_MARK], THOUSAND_MARK),
)


def symbol_legend() -> List[Tuple[str, int]]:
    """Return the roman symbols with their values, ascending by value.

    Examples:
        >>> symbol_legend()[:3]
        [('I', 1), ('V', 5), ('X', 10)]
    """
    return list(ROMAN_VALUES.items())


def multiplier_legend() -> List[Tuple[str, int]]:
    """Return the vinculum marks with their multipliers, ascending by value."""
    return list(VINCULUM_MULTIPLIERS.items())
