"""Decompose a validated roman numeral into resolved symbol values.

Each symbol may be followed by a single vinculum mark that scales it. The
parser binds every mark to the symbol written immediately before it and
resolves the scaled value, keeping the left-to-right order of the input.
"""
from dataclasses import dataclass
from typing import List, Optional

from .common.symbols import ROMAN_VALUES, VINCULUM_MULTIPLIERS


@dataclass(frozen=True)
class ParsedToken:
    """One roman symbol with its optional mark and resolved value."""
    symbol: str
    multiplier: Optional[str]
    value: int


def resolve_symbol_value(symbol: str, multiplier: Optional[str] = None) -> int:
    """Get the value of a roman symbol scaled by its optional mark.

    Args:
        symbol: Roman letter, either case
        multiplier: Vinculum mark following the symbol, if any

    Returns:
        The symbol value times the mark multiplier, or 0 for an unknown symbol
    """
    base_value = ROMAN_VALUES.get(symbol.upper(), 0)
    if not base_value:
        return 0

    return base_value * VINCULUM_MULTIPLIERS.get(multiplier, 1)


def parse_roman_symbols(roman: str) -> List[ParsedToken]:
    """Split a roman numeral into tokens, left to right.

    The input is expected to have passed validate_roman_number(). Characters
    that do not resolve to a value (marks, or anything unexpected) produce no
    token.

    Args:
        roman: Validated roman numeral (e.g., "X·L·V·MMM", "xiv")

    Returns:
        List of ParsedToken in the order the symbols were written

    Examples:
        >>> [token.value for token in parse_roman_symbols("I·V·")]
        [1000, 5000]
    """
    upper_roman = roman.upper()
    tokens = []

    for i, char in enumerate(upper_roman):
        # A mark belongs to the symbol right before it
        following = upper_roman[i + 1] if i + 1 < len(upper_roman) else None
        multiplier = following if following in VINCULUM_MULTIPLIERS else None

        value = resolve_symbol_value(char, multiplier)
        if value > 0:
            tokens.append(ParsedToken(char, multiplier, value))

    return tokens
