"""
morphology/possessive.py

Possessive forms ('s / ').

The hard part is deciding whether a word ending in "s" is a plural
("cats" -> "cats'") or a singular ("bus" -> "bus's", "James" -> "James's").
That decision needs the engine's plural and singular rules, so the entry
point takes them as callables:

    possessive("cats", plural=engine.plural, singular=engine.singular)

Singular nouns ending in "s" get "'s" in the modern style and a bare
apostrophe in the traditional style.
"""

from __future__ import annotations

from typing import Callable

from app.core.domain.models import PossessiveStyle
from morphology import tables
from morphology.casing import is_proper_name, match_suffix
from morphology.phonetics import is_vowel

Inflector = Callable[[str], str]

# Final letters that rarely end an English word after another consonant.
_UNLIKELY_FINAL_LETTERS = frozenset("bcdfghjkmpqvwz")


def is_already_possessive(word: str) -> bool:
    return word.endswith(("'s", "'S", "s'", "S'"))


def is_likely_common_noun(lower: str) -> bool:
    """
    Guess whether `lower` (the singular of a capitalized "-s" word) is a
    common noun, so that "Cats" counts as a plural but "James" does not.
    """
    if len(lower) < 2:
        return False
    if lower in tables.COMMON_NOUNS:
        return True
    if lower in tables.TRUNCATED_NAMES:
        return False

    last = lower[-1]
    if last in "iu":
        return False
    if last == "a" and len(lower) <= 5 and lower not in tables.SHORT_A_NOUNS:
        return False
    if last == "e" and len(lower) >= 4:
        if not is_vowel(lower[-2]) and not is_vowel(lower[-3]):
            return False
    return True


def looks_like_complete_word(lower: str) -> bool:
    if len(lower) < 2:
        return False
    return not (lower[-1] in _UNLIKELY_FINAL_LETTERS and not is_vowel(lower[-2]))


def is_true_plural(word: str, plural: Inflector, singular: Inflector) -> bool:
    lower = word.lower()

    if lower in tables.IRREGULAR_PLURALS_WITHOUT_S:
        return True
    if lower.endswith("ss"):
        return False

    if is_proper_name(word) and lower.endswith("s"):
        singular_lower = singular(word).lower()
        return singular_lower != lower and is_likely_common_noun(singular_lower)

    if lower in tables.SINGULARS_ENDING_IN_S or not lower.endswith("s"):
        return False

    base = singular(word)
    singular_lower = base.lower()
    if singular_lower == lower or len(singular_lower) <= 2:
        return False

    if lower.endswith("es") and lower[:-2].endswith(("s", "x", "z", "ch", "sh")):
        return True
    if len(lower) > 3 and lower.endswith("ies"):
        return True

    if plural(base).lower() == lower:
        return looks_like_complete_word(singular_lower)
    return False


def possessive(
    word: str,
    *,
    plural: Inflector,
    singular: Inflector,
    style: PossessiveStyle = PossessiveStyle.MODERN,
) -> str:
    """
    cat -> cat's, cats -> cats', children -> children's,
    James -> James's (modern) / James' (traditional), CAT -> CAT'S.
    """
    if not word:
        return ""
    if is_already_possessive(word):
        return word

    ends_in_s = word.lower().endswith("s")

    if is_true_plural(word, plural, singular):
        if ends_in_s:
            return word + "'"
        return word + match_suffix(word, "'s")

    if ends_in_s and style == PossessiveStyle.TRADITIONAL:
        return word + "'"

    return word + match_suffix(word, "'s")


__all__ = [
    "is_already_possessive",
    "is_likely_common_noun",
    "looks_like_complete_word",
    "is_true_plural",
    "possessive",
]
