# tests/test_plural.py
"""
tests/test_plural.py
--------------------

Noun pluralization: irregular table, unchanged sets, suffix rules,
classical modes and case preservation.
"""

from __future__ import annotations

import pytest

from morphology import tables


@pytest.mark.parametrize(
    "word, expected",
    [
        ("cat", "cats"),
        ("child", "children"),
        ("woman", "women"),
        ("mouse", "mice"),
        ("box", "boxes"),
        ("church", "churches"),
        ("bush", "bushes"),
        ("buzz", "buzzes"),
        ("bus", "buses"),
        ("city", "cities"),
        ("boy", "boys"),
        ("knife", "knives"),
        ("leaf", "leaves"),
        ("roof", "roofs"),
        ("cliff", "cliffs"),
        ("potato", "potatoes"),
        ("radio", "radios"),
        ("piano", "pianos"),
        ("fireman", "firemen"),
        ("human", "humans"),
        ("analysis", "analyses"),
        ("cactus", "cacti"),
    ],
)
def test_plural_rules(engine, word, expected) -> None:
    assert engine.plural(word) == expected


def test_plural_empty_string(engine) -> None:
    assert engine.plural("") == ""


def test_unchanged_nouns(engine) -> None:
    for word in ("sheep", "fish", "series", "deer"):
        assert engine.plural(word) == word


def test_nationality_suffixes_are_unchanged(engine) -> None:
    assert engine.plural("Chinese") == "Chinese"
    assert engine.plural("Iroquois") == "Iroquois"


def test_proper_name_ending_in_y_takes_s(engine) -> None:
    assert engine.plural("Kennedy") == "Kennedys"


@pytest.mark.parametrize(
    "word, expected",
    [
        ("German", "Germans"),
        ("Roman", "Romans"),
        ("Norman", "Normans"),
        ("Newman", "Newmans"),
        ("talisman", "talismans"),
        ("shaman", "shamans"),
        ("caiman", "caimans"),
        ("ottoman", "ottomans"),
        ("postman", "postmen"),
        ("POSTMAN", "POSTMEN"),
    ],
)
def test_man_rule_skips_proper_names_and_listed_words(engine, word, expected) -> None:
    assert engine.plural(word) == expected


@pytest.mark.parametrize(
    "word, expected",
    [
        ("child", "children"),
        ("CHILD", "CHILDREN"),
        ("Child", "Children"),
        ("BOX", "BOXES"),
        ("Box", "Boxes"),
        ("CITY", "CITIES"),
        ("FIREMAN", "FIREMEN"),
    ],
)
def test_plural_preserves_case(engine, word, expected) -> None:
    assert engine.plural(word) == expected


@pytest.mark.parametrize("word", ["cat", "child", "box", "city", "knife", "woman"])
def test_case_pattern_is_kept(engine, word) -> None:
    assert engine.plural(word.upper()).isupper()
    assert engine.plural(word.capitalize())[0].isupper()
    assert engine.plural(word).islower()


def test_count_argument(engine) -> None:
    assert engine.plural("cat", 1) == "cat"
    assert engine.plural("cat", -1) == "cat"
    assert engine.plural("cat", 0) == "cats"
    assert engine.plural("cat", 2) == "cats"
    assert engine.plural("cat", -7) == "cats"


@pytest.mark.parametrize("word", sorted(tables.UNCHANGED_PLURALS))
@pytest.mark.parametrize("count", [0, 2, 5, -3])
def test_unchanged_plurals_ignore_count(engine, word, count) -> None:
    assert engine.plural(word, count) == word


def test_irregular_round_trip(engine) -> None:
    for singular, plural in tables.DEFAULT_IRREGULAR_PLURALS.items():
        assert engine.plural(singular) == plural
        assert engine.singular(engine.plural(singular)) == singular
        assert engine.plural(engine.singular(plural)) == plural


# ---------------------------------------------------------------------------
# Classical modes
# ---------------------------------------------------------------------------


def test_classical_ancient_plurals(engine) -> None:
    assert engine.plural("formula") == "formulas"

    engine.classical_ancient(True)
    assert engine.plural("formula") == "formulae"
    assert engine.plural("Octopus") == "Octopodes"

    engine.classical_ancient(False)
    assert engine.plural("formula") == "formulas"


def test_classical_herd(engine) -> None:
    assert engine.plural("bison") == "bisons"
    engine.classical_herd(True)
    assert engine.plural("bison") == "bison"


def test_classical_persons(engine) -> None:
    assert engine.plural("person") == "people"
    engine.classical_persons(True)
    assert engine.plural("person") == "persons"
    assert engine.plural("Person") == "Persons"


def test_classical_names(engine) -> None:
    assert engine.plural("Jones") == "Joneses"
    engine.classical_names(True)
    assert engine.plural("Jones") == "Jones"
    # lowercase words are not names
    assert engine.plural("bus") == "buses"


def test_classical_all_enables_every_mode(engine) -> None:
    engine.classical_all(True)
    assert engine.plural("formula") == "formulae"
    assert engine.plural("bison") == "bison"
    assert engine.plural("person") == "persons"
    assert engine.plural("Jones") == "Jones"
