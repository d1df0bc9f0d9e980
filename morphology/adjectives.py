"""
morphology/adjectives.py

Comparison and adverb derivation for English adjectives.

Strategy for comparative / superlative:

1. Irregular forms (good -> better -> best).
2. Suffix forms (-er / -est) for short adjectives: one syllable, two
   syllables ending in -y, or a listed two-syllable exception
   (simple -> simpler).
3. Periphrastic forms (more / most) for everything else.

The syllable count comes from `morphology.phonetics`, which treats "y" as a
consonant; "happy" therefore counts as one syllable and takes a suffix.
"""

from __future__ import annotations

from morphology import tables
from morphology.casing import is_all_upper, match_case, match_suffix
from morphology.phonetics import count_syllables, is_vowel, should_double_final_consonant


def _takes_suffix(lower: str) -> bool:
    syllables = count_syllables(lower)
    if syllables == 1:
        return True
    if syllables == 2 and lower.endswith("y"):
        return True
    return lower in tables.TWO_SYLLABLE_WITH_SUFFIX


def _apply_suffix(adj: str, lower: str, suffix: str) -> str:
    # suffix is "er" or "est"
    if lower.endswith("e"):
        return adj + match_suffix(adj, suffix[1:])

    if len(lower) > 1 and lower.endswith("y") and not is_vowel(lower[-2]):
        return adj[:-1] + match_suffix(adj, "i" + suffix)

    if should_double_final_consonant(lower):
        return adj + match_suffix(adj, lower[-1] + suffix)

    return adj + match_suffix(adj, suffix)


def _periphrastic(adj: str, lower_word: str, upper_word: str) -> str:
    if is_all_upper(adj):
        return upper_word + " " + adj
    if "A" <= adj[0] <= "Z":
        return upper_word.capitalize() + " " + adj[0] + adj[1:].lower()
    return lower_word + " " + adj


def comparative(adj: str) -> str:
    """
    big -> bigger, happy -> happier, good -> better,
    beautiful -> more beautiful, Beautiful -> More Beautiful.
    """
    if not adj:
        return ""

    lower = adj.lower()
    irregular = tables.IRREGULAR_COMPARATIVES.get(lower)
    if irregular is not None:
        return match_case(adj, irregular)

    if _takes_suffix(lower):
        return _apply_suffix(adj, lower, "er")

    return _periphrastic(adj, "more", "MORE")


def superlative(adj: str) -> str:
    if not adj:
        return ""

    lower = adj.lower()
    irregular = tables.IRREGULAR_SUPERLATIVES.get(lower)
    if irregular is not None:
        return match_case(adj, irregular)

    if _takes_suffix(lower):
        return _apply_suffix(adj, lower, "est")

    return _periphrastic(adj, "most", "MOST")


# ---------------------------------------------------------------------------
# Adverbs
# ---------------------------------------------------------------------------


def adverb(adj: str) -> str:
    """
    Derive the -ly adverb of an adjective.

        quick -> quickly      happy -> happily     basic -> basically
        full -> fully         true -> truly        simple -> simply
        good -> well          fast -> fast         shy -> shyly
    """
    if not adj:
        return ""

    lower = adj.lower()

    irregular = tables.IRREGULAR_ADVERBS.get(lower)
    if irregular is not None:
        return match_case(adj, irregular)

    if lower in tables.UNCHANGED_ADVERBS:
        return adj

    if lower == "public":
        return adj + match_suffix(adj, "ly")

    if lower.endswith("ic"):
        return adj + match_suffix(adj, "ally")

    if lower.endswith("ll"):
        return adj + match_suffix(adj, "y")

    if lower.endswith("ue"):
        return adj[:-1] + match_suffix(adj, "ly")

    if lower.endswith("ile"):
        return adj + match_suffix(adj, "ly")

    if lower.endswith("le"):
        if lower in tables.LE_KEEPS_E:
            return adj + match_suffix(adj, "ly")
        return adj[:-2] + match_suffix(adj, "ly")

    if len(lower) > 1 and lower.endswith("y") and not is_vowel(lower[-2]):
        if lower in tables.SHORT_Y_ADVERBS:
            return adj + match_suffix(adj, "ly")
        return adj[:-1] + match_suffix(adj, "ily")

    return adj + match_suffix(adj, "ly")


__all__ = ["comparative", "superlative", "adverb"]
