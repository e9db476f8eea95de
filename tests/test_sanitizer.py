import pytest

from roman_converter.sanitizer import sanitize


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("X1I2V3", "XIV"),
        ("X1I2V3!@#", "XIV"),
        ("X1Y2Z", "X"),
        ("M@C#M", "MCM"),
        ("IVXLCDM", "IVXLCDM"),
        ("ivxlcdm", "ivxlcdm"),
        ("IVXLCDM·:", "IVXLCDM·:"),
        ("M·V:", "M·V:"),
        # Whitespace and control characters
        ("X I V ", "XIV"),
        ("X\nI\tV", "XIV"),
        ("X\u0000I\u0001V", "XIV"),
        # Nothing left to keep
        ("", ""),
        ("123!@#$%^&*()", ""),
        ("中文😀", ""),
        ("Ⅻ", ""),
    ],
)
def test_sanitize(raw, expected):
    assert sanitize(raw) == expected


@pytest.mark.parametrize("raw", [None, 123, 4.5, ["X", "I"], {"X": 1}])
def test_sanitize_non_string_gives_empty(raw):
    assert sanitize(raw) == ""


@pytest.mark.parametrize("raw", ["X1I2V3", "m·c:x", "  ", "héllo MIX", "M·M·M·M·"])
def test_sanitize_is_idempotent(raw):
    once = sanitize(raw)
    assert sanitize(once) == once
