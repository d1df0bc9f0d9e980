"""
morphology/nouns.py

Regular English noun pluralization and singularization.

These are the suffix rules that run after the engine has exhausted its
lookups (classical forms, irregular map, unchanged set). They never consult
engine state and are safe to call from any thread.

Plural rules, first match wins:

    woman -> women        (-man, except -human, listed words and proper names)
    box -> boxes          (-s, -sh, -ch, -x, -z)
    city -> cities        (consonant + y; proper names keep the y)
    knife -> knives       (listed -f / -fe nouns)
    hero -> heroes        (consonant + o, unless listed)
    cat -> cats           (default)

Singular rules mirror them in reverse.
"""

from __future__ import annotations

from morphology import tables
from morphology.casing import is_proper_name, match_case, match_suffix
from morphology.phonetics import is_vowel


def has_unchanged_suffix(lower: str) -> bool:
    """Chinese, Japanese, Iroquois: same form in both numbers."""
    return lower.endswith(tables.UNCHANGED_SUFFIXES)


# ---------------------------------------------------------------------------
# 1. Plural
# ---------------------------------------------------------------------------


def plural_by_suffix(word: str) -> str:
    lower = word.lower()

    if (
        lower.endswith("man")
        and not lower.endswith("human")
        and lower not in tables.MAN_TAKES_S
        and not is_proper_name(word)
    ):
        return word[:-3] + match_case(word[-3:], "men")

    if lower.endswith(("s", "sh", "ch", "x", "z")):
        return word + match_suffix(word, "es")

    if len(lower) > 1 and lower.endswith("y") and not is_vowel(lower[-2]):
        if is_proper_name(word):
            return word + match_suffix(word, "s")
        return word[:-1] + match_suffix(word, "ies")

    if lower.endswith("fe"):
        if lower in tables.CHANGE_TO_VES:
            return word[:-2] + match_suffix(word, "ves")
    elif lower.endswith("f") and not lower.endswith("ff"):
        if lower in tables.CHANGE_TO_VES:
            return word[:-1] + match_suffix(word, "ves")

    if len(lower) > 1 and lower.endswith("o"):
        if is_vowel(lower[-2]) or lower in tables.O_TAKES_S:
            return word + match_suffix(word, "s")
        return word + match_suffix(word, "es")

    return word + match_suffix(word, "s")


# ---------------------------------------------------------------------------
# 2. Singular
# ---------------------------------------------------------------------------


def _es_restores_s_noun(word: str, base: str) -> bool:
    # base is the lowercase word minus "es" and ends in a single s
    if base in tables.SINGULARS_ENDING_IN_S:
        return True
    return is_proper_name(word) and base.endswith("es")


def _strip_es(word: str, lower: str) -> bool:
    """
    Decide whether a word ending in -es lost exactly "es" when pluralized
    (boxes -> box, heroes -> hero, buses -> bus) rather than just "s"
    (horses -> horse, shoes -> shoe).
    """
    base = lower[:-2]

    if base.endswith(("ss", "sh", "ch", "x", "zz", "tz")):
        return True

    if len(base) >= 2 and base.endswith("o"):
        if base in tables.O_TAKES_S or base + "e" in tables.OE_NOUNS:
            return False
        return not is_vowel(base[-2])

    if base.endswith("s") and not base.endswith("ss"):
        return _es_restores_s_noun(word, base)

    return False


def singular_by_suffix(word: str) -> str:
    lower = word.lower()
    n = len(lower)

    if lower in tables.SINGULARS_ENDING_IN_S:
        return word

    if n > 3 and lower.endswith("men"):
        return word[:-3] + match_case(word[-3:], "man")

    if n > 3 and lower.endswith("ves"):
        base = lower[:-3]
        if base + "fe" in tables.CHANGE_TO_VES:
            return word[:-3] + match_suffix(word, "fe")
        if base + "f" in tables.CHANGE_TO_VES:
            return word[:-3] + match_suffix(word, "f")

    if n > 3 and lower.endswith("ies") and not is_vowel(lower[-4]):
        if lower[:-1] in tables.IE_NOUNS:
            return word[:-1]
        return word[:-3] + match_suffix(word, "y")

    if n > 2 and lower.endswith("es") and _strip_es(word, lower):
        return word[:-2]

    if n > 1 and lower.endswith("s") and not lower.endswith("ss"):
        return word[:-1]

    return word


__all__ = ["has_unchanged_suffix", "plural_by_suffix", "singular_by_suffix"]
