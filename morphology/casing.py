"""
morphology/casing.py

Case-matching helpers shared by every English rule chain.

A rule computes its replacement in lowercase; the helpers here re-apply the
capitalization pattern of the input word:

    match_case("CHILD", "children")  -> "CHILDREN"
    match_case("Child", "children")  -> "Children"
    match_case("child", "children")  -> "children"

Suffix-only rules (add "-es", "-ies", ...) use `match_suffix`, which only
has to care about the all-caps case because the stem is kept verbatim.

The module also hosts the small string utilities that the public API
exposes directly (capitalize, titleize, word_count) and the case-pattern
detection used by ordinal word conversions.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


# ---------------------------------------------------------------------------
# 1. Classification
# ---------------------------------------------------------------------------


def is_all_upper(word: str) -> bool:
    """True when every letter in `word` is uppercase (non-letters ignored)."""
    return all(ch.isupper() for ch in word if ch.isalpha())


def is_proper_name(word: str) -> bool:
    """Capitalized, at least two characters, and not an all-caps token."""
    if len(word) < 2:
        return False
    if not word[0].isupper():
        return False
    return not is_all_upper(word)


def is_proper_name_ending_in_s(word: str) -> bool:
    return is_proper_name(word) and word[-1].lower() == "s"


# ---------------------------------------------------------------------------
# 2. Case transfer
# ---------------------------------------------------------------------------


def _upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def match_case(original: str, replacement: str) -> str:
    """
    Apply the case pattern of `original` to `replacement`.

    - Single-letter originals only transfer an initial capital ("I" -> "We").
    - All-caps originals give an all-caps replacement.
    - Capitalized originals give a capitalized replacement.
    - Anything else leaves `replacement` untouched.
    """
    if not original or not replacement:
        return replacement

    letters = sum(1 for ch in original if ch.isalpha())
    if letters == 1:
        if original[0].isupper():
            return _upper_first(replacement)
        return replacement

    if is_all_upper(original):
        return replacement.upper()

    if original[0].isupper():
        return _upper_first(replacement)

    return replacement


def match_suffix(word: str, suffix: str) -> str:
    """Uppercase `suffix` when `word` is written in all caps."""
    if is_all_upper(word):
        return suffix.upper()
    return suffix


def extract_whitespace(word: str) -> Tuple[str, str, str]:
    """
    Split `word` into (leading whitespace, trimmed word, trailing whitespace).

    Whitespace-only input comes back whole as the prefix so that callers can
    return it unchanged.
    """
    trimmed = word.strip()
    if not trimmed:
        return word, "", ""
    start = word.index(trimmed)
    return word[:start], trimmed, word[start + len(trimmed):]


# ---------------------------------------------------------------------------
# 3. Public string utilities
# ---------------------------------------------------------------------------


def capitalize(text: str) -> str:
    """Uppercase the first character only ("hello world" -> "Hello world")."""
    return _upper_first(text)


def titleize(text: str) -> str:
    """
    Capitalize every word, lowercasing the rest.

    Word starts are the first letter of the text and any letter after
    whitespace or a hyphen: "the well-known fact" -> "The Well-Known Fact".
    """
    if not text:
        return text

    out = []
    capitalize_next = True
    for ch in text.lower():
        if capitalize_next and ch.isalpha():
            out.append(ch.upper())
            capitalize_next = False
        else:
            if ch.isspace() or ch == "-":
                capitalize_next = True
            out.append(ch)
    return "".join(out)


def word_count(text: str) -> int:
    """Number of whitespace-separated words."""
    return len(text.split())


# ---------------------------------------------------------------------------
# 4. Case patterns (whole-string)
# ---------------------------------------------------------------------------


class CasePattern(str, Enum):
    LOWER = "lower"
    UPPER = "upper"
    TITLE = "title"
    MIXED = "mixed"


def detect_case(text: str) -> CasePattern:
    if not text:
        return CasePattern.LOWER

    letters = [ch for ch in text if ch.isalpha()]
    if all(ch.isupper() for ch in letters):
        return CasePattern.UPPER
    if all(ch.islower() for ch in letters):
        return CasePattern.LOWER
    if text[0].isupper():
        return CasePattern.TITLE
    return CasePattern.MIXED


def apply_case(text: str, pattern: CasePattern) -> str:
    """Re-apply a detected pattern; TITLE also capitalizes after hyphens."""
    if pattern == CasePattern.UPPER:
        return text.upper()
    if pattern == CasePattern.TITLE:
        chars = list(text)
        if chars:
            chars[0] = chars[0].upper()
        for i in range(1, len(chars)):
            if chars[i - 1] == "-":
                chars[i] = chars[i].upper()
        return "".join(chars)
    return text


__all__ = [
    "is_all_upper",
    "is_proper_name",
    "is_proper_name_ending_in_s",
    "match_case",
    "match_suffix",
    "extract_whitespace",
    "capitalize",
    "titleize",
    "word_count",
    "CasePattern",
    "detect_case",
    "apply_case",
]
