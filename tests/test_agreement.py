# tests/test_agreement.py
"""
Number agreement for nouns, pronouns, verbs and determiners.
"""

from __future__ import annotations

import pytest


@pytest.mark.parametrize(
    "word, expected",
    [
        ("I", "We"),
        ("me", "us"),
        ("my", "our"),
        ("mine", "ours"),
        ("he", "they"),
        ("him", "them"),
        ("himself", "themselves"),
        ("cat", "cats"),
        ("child", "children"),
    ],
)
def test_plural_noun(engine, word, expected) -> None:
    assert engine.plural_noun(word) == expected


def test_plural_noun_keeps_surrounding_whitespace(engine) -> None:
    assert engine.plural_noun("  cat ") == "  cats "
    assert engine.plural_noun("   ") == "   "
    assert engine.plural_noun("") == ""


def test_plural_noun_count(engine) -> None:
    assert engine.plural_noun("cat", 1) == "cat"
    assert engine.plural_noun("cat", -1) == "cat"
    assert engine.plural_noun("cat", 0) == "cats"
    assert engine.plural_noun("I", 2) == "We"


@pytest.mark.parametrize(
    "word, expected",
    [
        ("is", "are"),
        ("was", "were"),
        ("has", "have"),
        ("doesn't", "don't"),
        ("Is", "Are"),
        ("runs", "run"),
        ("tries", "try"),
        ("watches", "watch"),
        ("fixes", "fix"),
        ("goes", "go"),
        ("sees", "see"),
        ("can", "can"),
        ("must", "must"),
        ("kiss", "kiss"),
    ],
)
def test_plural_verb(engine, word, expected) -> None:
    assert engine.plural_verb(word) == expected


def test_plural_verb_count(engine) -> None:
    assert engine.plural_verb("is", 1) == "is"
    assert engine.plural_verb("are", 1) == "is"
    assert engine.plural_verb("were", -1) == "was"
    assert engine.plural_verb("is", 2) == "are"
    assert engine.plural_verb(" is ", 3) == " are "


def test_plural_verb_custom(engine) -> None:
    engine.def_verb("foo", "fooz")
    assert engine.plural_verb("foo") == "fooz"
    assert engine.plural_verb("fooz", 1) == "foo"


@pytest.mark.parametrize(
    "word, expected",
    [
        ("this", "these"),
        ("that", "those"),
        ("a", "some"),
        ("my", "our"),
        ("his", "their"),
        ("This", "These"),
        ("red", "red"),
    ],
)
def test_plural_adj(engine, word, expected) -> None:
    assert engine.plural_adj(word) == expected


def test_plural_adj_count(engine) -> None:
    assert engine.plural_adj("these", 1) == "this"
    assert engine.plural_adj("our", 1) == "my"
    assert engine.plural_adj("their", 1) == "their"
    engine.set_gender("f")
    assert engine.plural_adj("their", 1) == "her"
    assert engine.plural_adj("this", 2) == "these"


def test_plural_adj_custom(engine) -> None:
    engine.def_adj("hir", "hirs")
    assert engine.plural_adj("hir") == "hirs"
    assert engine.plural_adj("hirs", 1) == "hir"


@pytest.mark.parametrize(
    "gender, expected",
    [("m", "he"), ("f", "she"), ("n", "it"), ("t", "they")],
)
def test_singular_noun_follows_gender(engine, gender, expected) -> None:
    engine.set_gender(gender)
    assert engine.singular_noun("they") == expected


def test_singular_noun_pronoun_cases(engine) -> None:
    engine.set_gender("f")
    assert engine.singular_noun("them") == "her"
    assert engine.singular_noun("Them") == "Her"
    assert engine.singular_noun("themselves") == "herself"
    assert engine.singular_noun("theirs") == "hers"
    assert engine.singular_noun("we") == "I"
    assert engine.singular_noun("us") == "me"


def test_singular_noun_falls_back_to_singular(engine) -> None:
    assert engine.singular_noun("cats") == "cat"
    assert engine.singular_noun(" children ") == " child "
    assert engine.singular_noun("cats", 2) == "cats"
    assert engine.singular_noun("cats", 1) == "cat"


def test_no(engine) -> None:
    assert engine.no("cat", 0) == "no cats"
    assert engine.no("cat", 1) == "1 cat"
    assert engine.no("cat", -1) == "-1 cat"
    assert engine.no("cat", 3) == "3 cats"


def test_no_classical_zero(engine) -> None:
    engine.classical_zero(True)
    assert engine.no("cat", 0) == "no cat"
