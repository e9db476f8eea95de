"""Configuration constants for the roman converter package.

This module contains all configuration settings shared across the package:
- Validation rules for roman numeral input
- Supported value range for decimal to roman conversion
- User-facing error messages

Environment Variables:
    ROMAN_CONVERTER_DEBUG: Set to "1" to print parsed tokens from the CLI
"""
import os
import re
from dataclasses import dataclass
from typing import Pattern

from .symbols import ROMAN_VALUES, VINCULUM_MULTIPLIERS

# Debug mode makes the CLI show how each roman numeral was decomposed
ROMAN_CONVERTER_DEBUG = os.getenv("ROMAN_CONVERTER_DEBUG", "0") == "1"


@dataclass(frozen=True)
class ValidationRules:
    """Read-only rule set applied to roman numeral input.

    Attributes:
        max_length: Maximum number of characters accepted from a typed input
        max_repeats: Maximum number of consecutive identical symbols
        pattern: Whole-string format, one or more (symbol, optional mark) groups
        repeat_pattern: Matches a symbol repeated more than max_repeats times,
                        each occurrence optionally followed by a mark
    """
    max_length: int
    max_repeats: int
    pattern: Pattern[str]
    repeat_pattern: Pattern[str]


_SYMBOL_CLASS = "[" + "".join(ROMAN_VALUES) + "]"
_MARK_CLASS = "[" + re.escape("".join(VINCULUM_MULTIPLIERS)) + "]"
_MAX_REPEATS = 3

# re.ASCII keeps case folding to the latin letters (no dotless i etc.)
VALIDATION_RULES = ValidationRules(
    max_length=25,
    max_repeats=_MAX_REPEATS,
    pattern=re.compile(
        rf"{_SYMBOL_CLASS}{_MARK_CLASS}?(?:{_SYMBOL_CLASS}{_MARK_CLASS}?)*",
        re.IGNORECASE | re.ASCII,
    ),
    repeat_pattern=re.compile(
        rf"({_SYMBOL_CLASS}){_MARK_CLASS}?(?:\1{_MARK_CLASS}?){{{_MAX_REPEATS},}}",
        re.IGNORECASE | re.ASCII,
    ),
)

# Largest plain roman numeral (MMMCMXCIX)
STANDARD_MAX = 3999

# Largest value rendered by decimal to roman conversion (MMMCMXCIX at every tier)
MAX_VALUE = 3999999999

# Messages shown to the user, one per failure
EMPTY_INPUT_MESSAGE = "Please enter a number"
TOO_MANY_REPEATS_MESSAGE = f"A symbol cannot appear more than {_MAX_REPEATS} times consecutively"
MALFORMED_FORMAT_MESSAGE = "Incorrect roman numeral format"
VLD_SUBTRACTION_MESSAGE = "V, L and D cannot be subtracted"
I_SUBTRACTION_MESSAGE = "I can only be subtracted from V and X"
X_SUBTRACTION_MESSAGE = "X can only be subtracted from L and C"
C_SUBTRACTION_MESSAGE = "C can only be subtracted from D and M"
NOT_AN_INTEGER_MESSAGE = "The number must be an integer"
NOT_POSITIVE_MESSAGE = "The number must be positive"
TOO_LARGE_MESSAGE = f"The number is too large (maximum {MAX_VALUE:,})"
