"""
morphology/phonetics.py

Syllable and consonant-vowel-consonant (CVC) heuristics.

These are deliberately crude spelling-based estimates, shared by every
rule chain that has to choose between affix strategies:

- comparative / superlative: "-er/-est" vs. "more/most"
- past tense and participles: double the final consonant or not

The algorithm uses vowel-run counting with a silent final -e adjustment;
it is fast and consistent, not phonologically exact. "y" is not a vowel
here, which is what makes "happy" a one-syllable stem for suffixing.
"""

from __future__ import annotations

from typing import Collection

# Vowel characters for syllable detection
VOWELS: frozenset = frozenset("aeiouAEIOU")

# Final consonants that are never doubled (show -> showed, fix -> fixed, play -> played)
_NEVER_DOUBLED: frozenset = frozenset("wxy")


def is_vowel(ch: str) -> bool:
    return ch in VOWELS


def count_vowels(text: str) -> int:
    return sum(1 for ch in text if ch in VOWELS)


def count_syllables(word: str) -> int:
    """
    Estimate the syllable count of a single word.

    1. Count runs of consecutive vowels as one syllable each.
    2. Subtract one for a final "e" when more than one syllable was counted.
    3. Never return less than 1 for a non-empty word.

    Examples:
        >>> count_syllables("big")
        1
        >>> count_syllables("simple")
        1
        >>> count_syllables("beautiful")
        3
    """
    if not word:
        return 0

    word = word.lower()
    count = 0
    prev_vowel = False
    last = len(word) - 1

    for i, ch in enumerate(word):
        current = ch in VOWELS
        if current and not prev_vowel:
            count += 1
        prev_vowel = current

        if i == last and ch == "e" and count > 1:
            count -= 1

    return max(count, 1)


def ends_with_cvc(lower: str) -> bool:
    """
    True when `lower` ends consonant-vowel-consonant and the final consonant
    can be doubled (not w, x or y). Two-letter words only need vowel-consonant.
    """
    n = len(lower)
    if n < 2:
        return False

    last, before_last = lower[-1], lower[-2]
    if last in VOWELS or last in _NEVER_DOUBLED:
        return False
    if before_last not in VOWELS:
        return False
    if n >= 3 and lower[-3] in VOWELS:
        return False
    return True


def should_double_final_consonant(
    lower: str, extra: Collection[str] = frozenset()
) -> bool:
    """
    Doubling test used by comparatives and the past tense.

    One-syllable CVC stems double (big -> bigger, stop -> stopped). Longer
    stems double only when listed in `extra` (prefer -> preferred).
    """
    if not ends_with_cvc(lower):
        return False
    if count_syllables(lower) == 1:
        return True
    return lower in extra


def should_double_consonant(lower: str, extra: Collection[str] = frozenset()) -> bool:
    """
    Doubling test used by the participles.

    - three letters: always (run -> running, sit -> sitting)
    - four letters: only with a single vowel (stop -> stopping, but
      edit -> editing)
    - longer words: only when listed in `extra` (begin -> beginning)
    """
    n = len(lower)
    if n < 3 or not ends_with_cvc(lower):
        return False
    if n == 3:
        return True
    if n == 4:
        return count_vowels(lower) == 1
    return lower in extra


__all__ = [
    "VOWELS",
    "is_vowel",
    "count_vowels",
    "count_syllables",
    "ends_with_cvc",
    "should_double_final_consonant",
    "should_double_consonant",
]
