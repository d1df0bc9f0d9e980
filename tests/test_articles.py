# tests/test_articles.py
"""
Indefinite article selection and its customization.
"""

from __future__ import annotations

import pytest

from app.core.domain.exceptions import InflectionError, InvalidPatternError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("apple", "an apple"),
        ("banana", "a banana"),
        ("hour", "an hour"),
        ("honest man", "an honest man"),
        ("heir", "an heir"),
        ("house", "a house"),
        ("university", "a university"),
        ("unanimous", "a unanimous"),
        ("unanimous decision", "a unanimous decision"),
        ("Unabomber", "a Unabomber"),
        ("unkind remark", "an unkind remark"),
        ("umbrella", "an umbrella"),
        ("utensil", "a utensil"),
        ("European", "a European"),
        ("one-off", "a one-off"),
        ("onion", "an onion"),
        ("FBI agent", "an FBI agent"),
        ("CIA report", "a CIA report"),
        ("sql query", "an sql query"),
        ("gif", "a gif"),
    ],
)
def test_default_heuristic(engine, text, expected) -> None:
    assert engine.an(text) == expected


def test_a_is_an_alias(engine) -> None:
    assert engine.a("hour") == "an hour"
    assert engine.a("cat") == "a cat"


def test_empty_and_blank_input(engine) -> None:
    assert engine.an("") == ""
    assert engine.an("   ") == "   "


def test_custom_words(engine) -> None:
    engine.def_a("apple")
    assert engine.an("apple") == "a apple"
    assert engine.an("Apple pie") == "a Apple pie"

    engine.def_an("banana")
    assert engine.an("banana") == "an banana"


def test_custom_words_are_mutually_exclusive(engine) -> None:
    engine.def_a("ewe")
    engine.def_an("ewe")
    assert engine.an("ewe") == "an ewe"
    assert engine.undef_a("ewe") is False
    assert engine.undef_an("ewe") is True
    assert engine.undef_an("ewe") is False
    assert engine.an("ewe") == "a ewe"


def test_patterns_are_anchored(engine) -> None:
    engine.def_an_pattern("b")
    assert engine.an("banana") == "a banana"
    assert engine.an("b") == "an b"

    engine.def_an_pattern("ban.*")
    assert engine.an("banana") == "an banana"


def test_priority_order(engine) -> None:
    # "a" patterns beat "an" patterns
    engine.def_an_pattern("e.*")
    engine.def_a_pattern("eg.*")
    assert engine.an("egg") == "a egg"
    assert engine.an("elephant") == "an elephant"

    # exact words beat patterns
    engine.def_an("egg")
    assert engine.an("egg") == "an egg"


def test_undef_pattern_matches_source_text(engine) -> None:
    engine.def_a_pattern("e.*")
    assert engine.undef_a_pattern("^(?:e.*)$") is False
    assert engine.undef_a_pattern("e.*") is True
    assert engine.undef_a_pattern("e.*") is False
    assert engine.an("egg") == "an egg"


def test_invalid_pattern_raises(engine) -> None:
    with pytest.raises(InvalidPatternError) as excinfo:
        engine.def_a_pattern("(")
    assert excinfo.value.pattern == "("
    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value, InflectionError)

    # nothing was registered
    assert engine.an("apple") == "an apple"


def test_def_a_reset(engine) -> None:
    engine.def_a("apple")
    engine.def_an("banana")
    engine.def_a_pattern("e.*")
    engine.def_an_pattern("c.*")

    engine.def_a_reset()

    assert engine.an("apple") == "an apple"
    assert engine.an("banana") == "a banana"
    assert engine.an("egg") == "an egg"
    assert engine.an("cat") == "a cat"
