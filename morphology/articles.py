"""
morphology/articles.py

Default a/an heuristic.

English chooses the indefinite article by sound, not spelling. Without a
pronunciation dictionary we approximate with ordered spelling checks:

1. Silent h ("an hour", "an honest man").
2. Abbreviations read letter by letter ("an FBI agent", "a CIA report").
3. Vowel letters with a consonant sound ("a unicorn", "a one-off").
4. Otherwise, the first letter decides.

Custom words and patterns registered on an engine take precedence over this
heuristic; see `engines.state.EngineState`.
"""

from __future__ import annotations

from morphology import tables
from morphology.casing import is_all_upper


def first_word(text: str) -> str:
    parts = text.split()
    return parts[0] if parts else ""


def _abbreviation_needs_an(abbrev: str) -> bool:
    return bool(abbrev) and abbrev[0].upper() in tables.VOWEL_SOUND_LETTERS


def _has_you_sound(lower: str) -> bool:
    return len(lower) >= 3 and lower[0] == "u" and lower[:3] in tables.YOU_SOUND_PREFIXES


def needs_an(text: str) -> bool:
    """True when the first word of `text` should take "an"."""
    word = first_word(text)
    if not word:
        return False
    lower = word.lower()

    if lower.startswith(tables.SILENT_H_WORDS):
        return True

    if len(word) >= 2 and is_all_upper(word):
        return _abbreviation_needs_an(word)

    if lower in tables.LOWERCASE_ABBREVIATIONS:
        return _abbreviation_needs_an(lower)

    if lower.startswith(tables.CONSONANT_SOUND_PREFIXES):
        return False

    if _has_you_sound(lower):
        return False

    return lower[0] in "aeiou"


__all__ = ["first_word", "needs_an"]
