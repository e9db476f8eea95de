"""Sanitize free-typed roman numeral input.

The command line front-end runs every typed value through sanitize() before
converting it.
"""
from typing import Any

from .common.symbols import ROMAN_ALPHABET


def sanitize(raw: Any) -> str:
    """Remove every character that cannot appear in a roman numeral.

    Digits, punctuation, whitespace, control characters and non-latin scripts
    are dropped, not replaced. This is a best-effort filter and never reports
    an error.

    Args:
        raw: Input to clean. None and non-string values are treated as empty.

    Returns:
        A new string made only of I, V, X, L, C, D, M (either case) and the
        vinculum marks

    Examples:
        >>> sanitize("X1I2V3")
        'XIV'
        >>> sanitize(None)
        ''
    """
    if not isinstance(raw, str):
        return ""
    return "".join(char for char in raw if char in ROMAN_ALPHABET)
