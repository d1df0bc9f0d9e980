"""
morphology/pronouns.py

Personal pronoun tables for number agreement.

Singular -> plural is gender independent ("he", "she" and "it" all become
"they"). Plural -> singular depends on the gender configured on the engine:

    they  -> he (m) / she (f) / it (n) / they (t)

The four cases (nominative, accusative, possessive, reflexive) are kept as
separate tables so that `plural_noun` and `singular_noun` can be reasoned
about case by case; lookups go through the merged views at the bottom.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional


def _same_for_all_genders(form: str) -> Mapping[str, str]:
    return MappingProxyType({g: form for g in ("m", "f", "n", "t")})


def _by_gender(m: str, f: str, n: str, t: str) -> Mapping[str, str]:
    return MappingProxyType({"m": m, "f": f, "n": n, "t": t})


# ---------------------------------------------------------------------------
# 1. Singular -> plural
# ---------------------------------------------------------------------------

NOMINATIVE_TO_PLURAL: Mapping[str, str] = MappingProxyType(
    {"i": "we", "he": "they", "she": "they", "it": "they"}
)

ACCUSATIVE_TO_PLURAL: Mapping[str, str] = MappingProxyType(
    {"me": "us", "him": "them", "her": "them"}
)

POSSESSIVE_TO_PLURAL: Mapping[str, str] = MappingProxyType(
    {
        "my": "our",
        "mine": "ours",
        "his": "their",
        "hers": "theirs",
        "its": "their",
        "one's": "one's",
    }
)

REFLEXIVE_TO_PLURAL: Mapping[str, str] = MappingProxyType(
    {
        "myself": "ourselves",
        "yourself": "yourselves",
        "himself": "themselves",
        "herself": "themselves",
        "itself": "themselves",
        "oneself": "oneselves",
    }
)


def _merge(*tables: Mapping[str, str]) -> Mapping[str, str]:
    merged: Dict[str, str] = {}
    for table in tables:
        merged.update(table)
    return MappingProxyType(merged)


ALL_PRONOUNS_TO_PLURAL = _merge(
    NOMINATIVE_TO_PLURAL,
    ACCUSATIVE_TO_PLURAL,
    POSSESSIVE_TO_PLURAL,
    REFLEXIVE_TO_PLURAL,
)


# ---------------------------------------------------------------------------
# 2. Plural -> singular, keyed by gender
# ---------------------------------------------------------------------------

NOMINATIVE_TO_SINGULAR: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "we": _same_for_all_genders("I"),
        "they": _by_gender("he", "she", "it", "they"),
    }
)

ACCUSATIVE_TO_SINGULAR: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "us": _same_for_all_genders("me"),
        "them": _by_gender("him", "her", "it", "them"),
    }
)

POSSESSIVE_TO_SINGULAR: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "our": _same_for_all_genders("my"),
        "ours": _same_for_all_genders("mine"),
        "their": _by_gender("his", "her", "its", "their"),
        "theirs": _by_gender("his", "hers", "its", "theirs"),
    }
)

REFLEXIVE_TO_SINGULAR: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "ourselves": _same_for_all_genders("myself"),
        "yourselves": _same_for_all_genders("yourself"),
        "themselves": _by_gender("himself", "herself", "itself", "themself"),
    }
)

SINGULAR_TABLES = (
    NOMINATIVE_TO_SINGULAR,
    ACCUSATIVE_TO_SINGULAR,
    POSSESSIVE_TO_SINGULAR,
    REFLEXIVE_TO_SINGULAR,
)


def pronoun_to_plural(lower: str) -> Optional[str]:
    return ALL_PRONOUNS_TO_PLURAL.get(lower)


def pronoun_to_singular(lower: str, gender: str) -> Optional[str]:
    """
    Singular form of a plural pronoun for the given gender code, or None
    when `lower` is not a plural pronoun.
    """
    for table in SINGULAR_TABLES:
        forms = table.get(lower)
        if forms is not None:
            return forms.get(gender)
    return None


__all__ = [
    "ALL_PRONOUNS_TO_PLURAL",
    "NOMINATIVE_TO_PLURAL",
    "ACCUSATIVE_TO_PLURAL",
    "POSSESSIVE_TO_PLURAL",
    "REFLEXIVE_TO_PLURAL",
    "NOMINATIVE_TO_SINGULAR",
    "ACCUSATIVE_TO_SINGULAR",
    "POSSESSIVE_TO_SINGULAR",
    "REFLEXIVE_TO_SINGULAR",
    "pronoun_to_plural",
    "pronoun_to_singular",
]
