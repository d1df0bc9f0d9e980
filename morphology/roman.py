"""
morphology/roman.py

Roman numeral conversion for the standard range 1..3999.

    int_to_roman(1994)      -> "MCMXCIV"
    roman_to_int("mcmxciv") -> 1994

Parsing is case-insensitive and strict about the classical rules:

- only I V X L C D M;
- V, L and D never repeat; I, X, C and M repeat at most three times;
- only I, X and C subtract, and only from the next two larger symbols
  (IV IX, XL XC, CD CM);
- a subtractive pair is not followed by a symbol at least as large as the
  subtracted one ("IXI", "XCX").

Malformed input raises InvalidRomanNumeralError.
"""

from __future__ import annotations

from types import MappingProxyType

from app.core.domain.exceptions import InvalidRomanNumeralError

MIN_ROMAN = 1
MAX_ROMAN = 3999

_SYMBOLS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

VALUES = MappingProxyType(
    {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
)

_SUBTRACTIVE_TARGETS = MappingProxyType({"I": "VX", "X": "LC", "C": "DM"})


def int_to_roman(n: int) -> str:
    """Roman numeral for 1..3999; "" outside that range."""
    if n < MIN_ROMAN or n > MAX_ROMAN:
        return ""

    out = []
    for value, symbol in _SYMBOLS:
        count, n = divmod(n, value)
        out.append(symbol * count)
    return "".join(out)


def _validate(text: str) -> None:
    for ch in text:
        if ch not in VALUES:
            raise InvalidRomanNumeralError(text)

    run_char, run_length = "", 0
    for ch in text:
        run_length = run_length + 1 if ch == run_char else 1
        run_char = ch
        if ch in "VLD" and run_length > 1:
            raise InvalidRomanNumeralError(text)
        if run_length > 3:
            raise InvalidRomanNumeralError(text)

    for i in range(len(text) - 1):
        current, following = text[i], text[i + 1]
        if VALUES[current] >= VALUES[following]:
            continue
        if following not in _SUBTRACTIVE_TARGETS.get(current, ""):
            raise InvalidRomanNumeralError(text)
        if i + 2 < len(text) and VALUES[text[i + 2]] >= VALUES[current]:
            raise InvalidRomanNumeralError(text)


def roman_to_int(text: str) -> int:
    if not text:
        raise InvalidRomanNumeralError(text)

    upper = text.upper()
    _validate(upper)

    total = 0
    for i, ch in enumerate(upper):
        value = VALUES[ch]
        if i + 1 < len(upper) and value < VALUES[upper[i + 1]]:
            total -= value
        else:
            total += value

    # "IIV", "DCD" and similar pass the symbol checks but are not canonical
    if int_to_roman(total) != upper:
        raise InvalidRomanNumeralError(text)
    return total


__all__ = ["MIN_ROMAN", "MAX_ROMAN", "int_to_roman", "roman_to_int"]
