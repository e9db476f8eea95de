"""Bidirectional conversion between roman numerals and decimal integers.

This module provides the public conversion functions of the package. Roman
numerals may use the vinculum marks to scale a symbol by one thousand ("·")
or one million (":"), so values up to 3,999,999,999 can be written.

None of these functions raise on bad input. They return a ConversionResult
holding either the converted value or a single error message.
"""
import numbers
import re
from typing import Any, List, Optional, Union

from .common.config import (
    STANDARD_MAX,
    MAX_VALUE,
    EMPTY_INPUT_MESSAGE,
    NOT_AN_INTEGER_MESSAGE,
    NOT_POSITIVE_MESSAGE,
    TOO_LARGE_MESSAGE,
)
from .common.results import (
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    ErrorKind,
    ValidationIssue,
)
from .common.symbols import MULTIPLIER_TIERS, ROMAN_NUMERALS
from .common.validators import validate_roman_number
from .parser import parse_roman_symbols

_INTEGER_LITERAL = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_DIGIT = re.compile(r"\d", re.ASCII)
_MAX_DIGITS = len(str(MAX_VALUE))


def accumulate(values: List[int]) -> int:
    """Add or subtract resolved symbol values following the roman rules.

    Scanning from the right, a value smaller than the one after it is
    subtracted, otherwise it is added. The rule applies to the scaled values,
    so [1000, 5000] (I·V·) gives 4000.

    Args:
        values: Resolved values in the order the symbols were written

    Returns:
        The total, not clamped
    """
    total = 0
    previous_value = 0

    for value in reversed(values):
        if value < previous_value:
            total -= value
        else:
            total += value
        previous_value = value

    return total


def convert_roman_to_decimal(roman: Any) -> ConversionResult:
    """Convert a roman numeral to its decimal value.

    The input is validated first (not-empty, repeats, format, subtraction),
    then decomposed into resolved symbol values and accumulated. Input is
    case-insensitive.

    Args:
        roman: Roman numeral string (e.g., "XIV", "m·", "X·L·V·MMM")

    Returns:
        ConversionSuccess with an int value, or ConversionFailure with value 0

    Examples:
        >>> convert_roman_to_decimal("MMMCMXCIX").value
        3999
        >>> convert_roman_to_decimal("M·").value
        1000000
        >>> convert_roman_to_decimal("IIII").error
        'A symbol cannot appear more than 3 times consecutively'
    """
    issue = validate_roman_number(roman)
    if issue:
        return ConversionFailure.from_issue(issue, 0)

    tokens = parse_roman_symbols(roman)
    return ConversionSuccess(value=accumulate([token.value for token in tokens]))


def render_standard(number: int, mark: str = "") -> str:
    """Render a number in [1, 3999] greedily, largest symbol first.

    Args:
        number: Value to render
        mark: Vinculum mark appended after every emitted symbol

    Returns:
        Roman numeral string, e.g. render_standard(4, "·") == "I·V·"
    """
    result = []

    # Build roman numeral by subtracting largest possible values
    for roman, value in ROMAN_NUMERALS:
        while number >= value:
            result.extend(symbol + mark for symbol in roman)
            number -= value

    return "".join(result)


def _coerce_integer(raw: Any) -> Union[int, ValidationIssue]:
    """Read an integer from a number or a numeric string.

    Strings must be written with ASCII digits, the same digits that
    is_decimal_input() looks for.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return ValidationIssue(ErrorKind.EMPTY_INPUT, EMPTY_INPUT_MESSAGE)

    not_an_integer = ValidationIssue(ErrorKind.NOT_AN_INTEGER, NOT_AN_INTEGER_MESSAGE)

    if isinstance(raw, bool):
        return not_an_integer

    if isinstance(raw, numbers.Integral):
        return int(raw)

    if isinstance(raw, str):
        text = raw.strip()
        if _INTEGER_LITERAL.fullmatch(text):
            digits = text.lstrip("+-").lstrip("0")
            # Too many digits for MAX_VALUE, and too many for int() to parse safely
            if len(digits) > _MAX_DIGITS:
                if text.startswith("-"):
                    return ValidationIssue(ErrorKind.NOT_POSITIVE, NOT_POSITIVE_MESSAGE)
                return ValidationIssue(ErrorKind.TOO_LARGE, TOO_LARGE_MESSAGE)
            value = int(digits) if digits else 0
            return -value if text.startswith("-") else value
        if not _FLOAT_LITERAL.fullmatch(text):
            return not_an_integer
        raw = float(text)

    if isinstance(raw, numbers.Real):
        # nan and infinities are not integers either
        if float(raw).is_integer():
            return int(raw)
        return not_an_integer

    return not_an_integer


def convert_decimal_to_roman(number: Any) -> ConversionResult:
    """Convert a positive integer to a roman numeral.

    Values up to 3999 use plain notation. Larger values are split into tiers
    (millions, then thousands, then units); each tier portion is rendered with
    the standard table and the tier's mark appended after every symbol.

    Args:
        number: int, integral float, or string holding an integer (e.g., "48000")

    Returns:
        ConversionSuccess with a str value, or ConversionFailure with value ""

    Examples:
        >>> convert_decimal_to_roman(14).value
        'XIV'
        >>> convert_decimal_to_roman("4000").value
        'I·V·'
        >>> convert_decimal_to_roman(0).error
        'The number must be positive'
    """
    coerced = _coerce_integer(number)
    if isinstance(coerced, ValidationIssue):
        return ConversionFailure.from_issue(coerced, "")

    if coerced <= 0:
        return ConversionFailure(value="", kind=ErrorKind.NOT_POSITIVE, error=NOT_POSITIVE_MESSAGE)
    if coerced > MAX_VALUE:
        return ConversionFailure(value="", kind=ErrorKind.TOO_LARGE, error=TOO_LARGE_MESSAGE)

    if coerced <= STANDARD_MAX:
        return ConversionSuccess(value=render_standard(coerced))

    remaining = coerced
    parts = []

    for multiplier, mark in MULTIPLIER_TIERS:
        portion = remaining // multiplier
        # A portion above 3999 cannot be written in this tier and is skipped
        if 0 < portion <= STANDARD_MAX:
            parts.append(render_standard(portion, mark))
            remaining -= portion * multiplier

    if 0 < remaining <= STANDARD_MAX:
        parts.append(render_standard(remaining))

    return ConversionSuccess(value="".join(parts))


def is_decimal_input(raw: Any) -> bool:
    """Tell whether raw input should be read as a decimal number.

    Any decimal digit in a string, or a numeric object, selects the decimal
    to roman direction.
    """
    if isinstance(raw, bool):
        return False
    if isinstance(raw, numbers.Number):
        return True
    return isinstance(raw, str) and bool(_DIGIT.search(raw))


def convert(raw: Any) -> ConversionResult:
    """Convert in whichever direction the input calls for.

    Examples:
        >>> convert("XIV").value
        14
        >>> convert("14").value
        'XIV'
    """
    if is_decimal_input(raw):
        return convert_decimal_to_roman(raw)
    return convert_roman_to_decimal(raw)


def describe_tokens(roman: str) -> Optional[str]:
    """Describe how a valid roman numeral decomposes, for debug output."""
    if validate_roman_number(roman):
        return None
    return " ".join(
        f"{token.symbol}{token.multiplier or ''}={token.value}"
        for token in parse_roman_symbols(roman)
    )
