"""
morphology/numbers.py

Numbers as English words.

    number_to_words(42)             -> "forty-two"
    number_to_words_with_and(101)   -> "one hundred and one"
    number_to_words_float(3.14)     -> "three point one four"
    ordinal(22)                     -> "22nd"
    ordinal_word(21)                -> "twenty-first"
    word_to_ordinal("Twenty-One")   -> "Twenty-First"
    counting_word(2)                -> "twice"
    fraction_to_words(3, 4)         -> "three quarters"

Scales go up to billions; larger values are expressed as a multiple of a
billion ("one thousand billion"). Everything here is stateless. The engine
only adds `no()`, which needs the plural rules and the classical-zero flag.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from morphology.casing import apply_case, detect_case

ZERO = "zero"

_ONES = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen",
)

_ONES_ORDINAL = (
    "", "first", "second", "third", "fourth", "fifth", "sixth", "seventh",
    "eighth", "ninth", "tenth", "eleventh", "twelfth", "thirteenth",
    "fourteenth", "fifteenth", "sixteenth", "seventeenth", "eighteenth",
    "nineteenth",
)

_TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy",
    "eighty", "ninety",
)

_TENS_ORDINAL = (
    "", "", "twentieth", "thirtieth", "fortieth", "fiftieth", "sixtieth",
    "seventieth", "eightieth", "ninetieth",
)

_DIGITS = ("zero",) + _ONES[1:10]

# (value, name), largest first
_SCALES = (
    (1_000_000_000, "billion"),
    (1_000_000, "million"),
    (1_000, "thousand"),
)

CARDINAL_TO_ORDINAL: Mapping[str, str] = MappingProxyType(
    {
        ZERO: "zeroth",
        **{_ONES[i]: _ONES_ORDINAL[i] for i in range(1, 20)},
        **{_TENS[i]: _TENS_ORDINAL[i] for i in range(2, 10)},
        "hundred": "hundredth",
        "thousand": "thousandth",
        "million": "millionth",
        "billion": "billionth",
    }
)

ORDINAL_TO_CARDINAL: Mapping[str, str] = MappingProxyType(
    {v: k for k, v in CARDINAL_TO_ORDINAL.items()}
)

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_NUMERIC_ORDINAL_RE = re.compile(r"^([+-]?\d+)(st|nd|rd|th)$", re.IGNORECASE)


def _parse_int(text: str) -> Optional[int]:
    if _INTEGER_RE.match(text):
        return int(text)
    return None


# ---------------------------------------------------------------------------
# 1. Cardinals
# ---------------------------------------------------------------------------


def _below_hundred(n: int) -> str:
    if n < 20:
        return _ONES[n]
    tens, ones = divmod(n, 10)
    if ones == 0:
        return _TENS[tens]
    return _TENS[tens] + "-" + _ONES[ones]


def _cardinal(n: int, with_and: bool = False) -> str:
    if n == 0:
        return ZERO
    if n < 100:
        return _below_hundred(n)
    if n < 1000:
        hundreds, rest = divmod(n, 100)
        head = _ONES[hundreds] + " hundred"
        if rest == 0:
            return head
        joiner = " and " if with_and else " "
        return head + joiner + _cardinal(rest, with_and)

    for value, name in _SCALES:
        if n >= value:
            major, rest = divmod(n, value)
            head = _cardinal(major, with_and) + " " + name
            if rest == 0:
                return head
            joiner = " and " if with_and and rest < 100 else " "
            return head + joiner + _cardinal(rest, with_and)

    raise AssertionError("unreachable")  # pragma: no cover


def number_to_words(n: int) -> str:
    """
    Cardinal words: 0 -> "zero", -5 -> "negative five",
    1234 -> "one thousand two hundred thirty-four".
    """
    if n < 0:
        return "negative " + _cardinal(-n)
    return _cardinal(n)


def number_to_words_with_and(n: int) -> str:
    """British style: 101 -> "one hundred and one", 1001 -> "one thousand and one"."""
    if n < 0:
        return "negative " + _cardinal(-n, with_and=True)
    return _cardinal(n, with_and=True)


def number_to_words_float(f: float, decimal: str = "point") -> str:
    """
    Integer part in words, then each fractional digit:
    3.14 -> "three point one four". Whole floats read as integers (5.0 -> "five").
    NaN and infinities give "".
    """
    f = float(f)
    if math.isnan(f) or math.isinf(f):
        return ""

    prefix = ""
    if f < 0:
        prefix = "negative "
        f = -f

    if f.is_integer():
        return prefix + _cardinal(int(f))

    text = format(Decimal(repr(f)), "f")
    whole, _, digits = text.partition(".")
    parts = [prefix + _cardinal(int(whole)), decimal]
    parts.extend(_DIGITS[int(ch)] for ch in digits)
    return " ".join(parts)


def number_to_words_threshold(n: int, threshold: int) -> str:
    """Words below `threshold`, digits at or above it."""
    if n < threshold:
        return number_to_words(n)
    return str(n)


def number_to_words_grouped(n: int, group_size: int) -> str:
    """
    Read the digits in groups from the right, e.g. a phone-style
    number_to_words_grouped(1234, 2) -> "twelve thirty-four".
    """
    if group_size <= 0:
        return number_to_words(n)

    prefix = ""
    if n < 0:
        prefix = "negative "
        n = -n
    if n == 0:
        return ZERO

    digits = str(n)
    groups: List[str] = []
    while digits:
        start = max(len(digits) - group_size, 0)
        groups.insert(0, digits[start:])
        digits = digits[:start]

    return prefix + " ".join(_cardinal(int(g)) for g in groups)


def format_number(n: int) -> str:
    """1234567 -> "1,234,567"."""
    return f"{n:,}"


# ---------------------------------------------------------------------------
# 2. Ordinals
# ---------------------------------------------------------------------------


def ordinal_suffix(n: int) -> str:
    n = abs(n)
    if 11 <= n % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def ordinal(n: int) -> str:
    return f"{n}{ordinal_suffix(n)}"


def _ordinal_words(n: int) -> str:
    if n < 20:
        return _ONES_ORDINAL[n]
    if n < 100:
        tens, ones = divmod(n, 10)
        if ones == 0:
            return _TENS_ORDINAL[tens]
        return _TENS[tens] + "-" + _ONES_ORDINAL[ones]
    if n < 1000:
        hundreds, rest = divmod(n, 100)
        if rest == 0:
            return _ONES[hundreds] + " hundredth"
        return _ONES[hundreds] + " hundred " + _ordinal_words(rest)

    for value, name in _SCALES:
        if n >= value:
            major, rest = divmod(n, value)
            if rest == 0:
                return _cardinal(major) + " " + name + "th"
            return _cardinal(major) + " " + name + " " + _ordinal_words(rest)

    raise AssertionError("unreachable")  # pragma: no cover


def ordinal_word(n: int) -> str:
    if n == 0:
        return "zeroth"
    if n < 0:
        return "negative " + ordinal_word(-n)
    return _ordinal_words(n)


def _split_last(lower: str) -> Tuple[str, str, str]:
    """Split at the last hyphen or space: ("twenty", "-", "one")."""
    idx = max(lower.rfind("-"), lower.rfind(" "))
    if idx < 0:
        return "", "", lower
    return lower[:idx], lower[idx], lower[idx + 1:]


def _convert_last_word(text: str, table: Mapping[str, str]) -> Optional[str]:
    pattern = detect_case(text)
    head, sep, last = _split_last(text.lower())
    replacement = table.get(last)
    if replacement is None:
        return None
    return apply_case(head + sep + replacement, pattern)


def word_to_ordinal(text: str) -> str:
    """
    "one" -> "first", "Twenty-One" -> "Twenty-First", "one hundred" ->
    "one hundredth", "42" -> "42nd". Unrecognized input comes back as is,
    including words that are already ordinal.
    """
    n = _parse_int(text)
    if n is not None:
        return ordinal(n)

    converted = _convert_last_word(text, CARDINAL_TO_ORDINAL)
    return text if converted is None else converted


def ordinal_to_cardinal(text: str) -> str:
    """Inverse of word_to_ordinal: "Twenty-First" -> "Twenty-One", "21st" -> "21"."""
    if not text:
        return text

    match = _NUMERIC_ORDINAL_RE.match(text)
    if match:
        return match.group(1)

    converted = _convert_last_word(text, ORDINAL_TO_CARDINAL)
    return text if converted is None else converted


def is_ordinal(text: str) -> bool:
    if not text:
        return False
    if _NUMERIC_ORDINAL_RE.match(text):
        return True
    _, _, last = _split_last(text.lower())
    return last in ORDINAL_TO_CARDINAL


# ---------------------------------------------------------------------------
# 3. Counting words and fractions
# ---------------------------------------------------------------------------


def counting_word(n: int, use_thrice: bool = True) -> str:
    """1 -> "once", 2 -> "twice", 3 -> "thrice", 5 -> "five times"."""
    if n < 0:
        return "negative " + counting_word(-n, use_thrice)
    if n == 0:
        return "zero times"
    if n == 1:
        return "once"
    if n == 2:
        return "twice"
    if n == 3 and use_thrice:
        return "thrice"
    return number_to_words(n) + " times"


def counting_word_threshold(n: int, threshold: int) -> str:
    if abs(n) < threshold:
        return counting_word(n)
    return f"{n} times"


_SCALE_DENOMINATORS = {
    100: "hundredth",
    1_000: "thousandth",
    1_000_000: "millionth",
    1_000_000_000: "billionth",
}


def _denominator_word(denominator: int, plural: bool, use_quarters: bool) -> str:
    if denominator == 2:
        return "halves" if plural else "half"
    if denominator == 4:
        singular = "quarter" if use_quarters else "fourth"
        return singular + "s" if plural else singular
    word = _SCALE_DENOMINATORS.get(denominator) or ordinal_word(denominator)
    return word + "s" if plural else word


def fraction_to_words(numerator: int, denominator: int, use_quarters: bool = True) -> str:
    """
    1/2 -> "one half", 3/4 -> "three quarters", 2/3 -> "two thirds",
    -1/2 and 1/-2 -> "negative one half". A zero denominator gives "".
    """
    if denominator == 0:
        return ""

    negative = (numerator < 0) != (denominator < 0)
    numerator, denominator = abs(numerator), abs(denominator)

    if denominator == 1:
        result = number_to_words(numerator)
    else:
        result = (
            number_to_words(numerator)
            + " "
            + _denominator_word(denominator, numerator != 1, use_quarters)
        )

    return "negative " + result if negative else result


def fraction_to_words_with_fourths(numerator: int, denominator: int) -> str:
    return fraction_to_words(numerator, denominator, use_quarters=False)


__all__ = [
    "number_to_words",
    "number_to_words_with_and",
    "number_to_words_float",
    "number_to_words_threshold",
    "number_to_words_grouped",
    "format_number",
    "ordinal",
    "ordinal_suffix",
    "ordinal_word",
    "word_to_ordinal",
    "ordinal_to_cardinal",
    "is_ordinal",
    "counting_word",
    "counting_word_threshold",
    "fraction_to_words",
    "fraction_to_words_with_fourths",
]
