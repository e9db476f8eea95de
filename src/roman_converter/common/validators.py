"""Validation utilities for the roman converter package.

This module provides the roman numeral well-formedness checks run before any
arithmetic, plus the file system validators used by the batch front-end.

Roman numeral checks never raise: each returns None when the rule holds, or a
ValidationIssue describing the first broken rule. File checks raise ValueError,
ensuring consistent error handling across the command line tools.
"""
from pathlib import Path
from typing import Any, Optional

from .config import (
    VALIDATION_RULES,
    EMPTY_INPUT_MESSAGE,
    TOO_MANY_REPEATS_MESSAGE,
    MALFORMED_FORMAT_MESSAGE,
    VLD_SUBTRACTION_MESSAGE,
    I_SUBTRACTION_MESSAGE,
    X_SUBTRACTION_MESSAGE,
    C_SUBTRACTION_MESSAGE,
)
from .results import ErrorKind, ValidationIssue
from .symbols import ROMAN_VALUES, VINCULUM_MULTIPLIERS

# Symbols allowed on the right of a subtractive pair, keyed by the subtracted symbol
ALLOWED_SUBTRACTIONS = {
    "I": (("V", "X"), I_SUBTRACTION_MESSAGE),
    "X": (("L", "C"), X_SUBTRACTION_MESSAGE),
    "C": (("D", "M"), C_SUBTRACTION_MESSAGE),
}

# Symbols that may never be subtracted
NON_SUBTRACTABLE = frozenset("VLD")


def validate_not_empty(roman: Any) -> Optional[ValidationIssue]:
    """Get an error if the roman number is missing or blank."""
    if roman is None or (isinstance(roman, str) and not roman.strip()):
        return ValidationIssue(ErrorKind.EMPTY_INPUT, EMPTY_INPUT_MESSAGE)
    return None


def validate_repeats(roman: str) -> Optional[ValidationIssue]:
    """Get an error if a symbol is repeated more than allowed.

    A mark between two occurrences does not break the run, so "M·M·M·M·"
    counts as four consecutive M's.
    """
    if VALIDATION_RULES.repeat_pattern.search(roman):
        return ValidationIssue(ErrorKind.TOO_MANY_REPEATS, TOO_MANY_REPEATS_MESSAGE)
    return None


def validate_format(roman: str) -> Optional[ValidationIssue]:
    """Get an error if the string is not a sequence of (symbol, optional mark)."""
    if not VALIDATION_RULES.pattern.fullmatch(roman):
        return ValidationIssue(ErrorKind.MALFORMED_FORMAT, MALFORMED_FORMAT_MESSAGE)
    return None


def validate_subtraction_rules(roman: str) -> Optional[ValidationIssue]:
    """Get an error if a symbol is subtracted from a symbol it may not precede.

    Only symbols written directly next to each other form a pair. A mark after
    the right-hand symbol is ignored, while a mark between the two symbols
    means they belong to different tiers and are not compared.

    Args:
        roman: Roman numeral that already passed the format check

    Returns:
        The issue for the first invalid pair, scanning left to right, or None
    """
    upper_roman = roman.upper()

    # Check each pair of consecutive characters for invalid subtractions
    for current, following in zip(upper_roman, upper_roman[1:]):
        if following in VINCULUM_MULTIPLIERS:
            continue

        current_value = ROMAN_VALUES.get(current)
        following_value = ROMAN_VALUES.get(following)
        if not current_value or not following_value or current_value >= following_value:
            continue

        if current in NON_SUBTRACTABLE:
            return ValidationIssue(ErrorKind.INVALID_SUBTRACTION, VLD_SUBTRACTION_MESSAGE)

        allowed, message = ALLOWED_SUBTRACTIONS[current]
        if following not in allowed:
            return ValidationIssue(ErrorKind.INVALID_SUBTRACTION, message)

    return None


def validate_roman_number(roman: Any) -> Optional[ValidationIssue]:
    """Validate a candidate roman numeral against every rule, in priority order.

    The checks run in a fixed order and the first failing rule wins:
    not-empty, repeats, format, subtraction. Any non-string value other than
    None is reported as a format error.

    Args:
        roman: Untrusted input, usually a string typed by the user

    Returns:
        None when the numeral is valid, otherwise the single ValidationIssue

    Examples:
        >>> validate_roman_number("XIV") is None
        True
        >>> validate_roman_number("IIII").kind
        <ErrorKind.TOO_MANY_REPEATS: 'too_many_repeats'>
    """
    issue = validate_not_empty(roman)
    if issue:
        return issue

    if not isinstance(roman, str):
        return ValidationIssue(ErrorKind.MALFORMED_FORMAT, MALFORMED_FORMAT_MESSAGE)

    return (
        validate_repeats(roman)
        or validate_format(roman)
        or validate_subtraction_rules(roman)
    )


def validate_file(path: Path, name: str = "File") -> None:
    """Validate that a path exists and is a file.

    Args:
        path: Path object to validate
        name: Descriptive name for the file, used in error messages
              (e.g., "Configuration file")

    Raises:
        ValueError: If path does not exist or is not a file
    """
    if not path.is_file():
        raise ValueError(f"Error: {name} not found: {path}")


def validate_csv_file(path: Path, name: str = "CSV file") -> None:
    """Validate that a path exists, is a file, and has .csv extension.

    Args:
        path: Path object to validate
        name: Descriptive name for the CSV file, used in error messages
              (e.g., "Input CSV")

    Raises:
        ValueError: If path does not exist, is not a file, or doesn't
                   have a .csv extension
    """
    if not path.is_file() or path.suffix != ".csv":
        raise ValueError(f"Error: {name} is not a valid CSV: {path}")
