# tests/test_singular.py
"""
tests/test_singular.py
----------------------

Noun singularization: reverse irregular map and the reversed suffix rules,
including the ambiguous -es / -ies / -ves endings.
"""

from __future__ import annotations

import pytest


@pytest.mark.parametrize(
    "word, expected",
    [
        ("cats", "cat"),
        ("children", "child"),
        ("women", "woman"),
        ("firemen", "fireman"),
        ("boxes", "box"),
        ("churches", "church"),
        ("buses", "bus"),
        ("horses", "horse"),
        ("cities", "city"),
        ("movies", "movie"),
        ("knives", "knife"),
        ("wolves", "wolf"),
        ("potatoes", "potato"),
        ("heroes", "hero"),
        ("shoes", "shoe"),
        ("radios", "radio"),
        ("analyses", "analysis"),
        ("data", "datum"),
    ],
)
def test_singular_rules(engine, word, expected) -> None:
    assert engine.singular(word) == expected


@pytest.mark.parametrize("word", ["cat", "glass", "bus", "analysis", "child", "sheep"])
def test_singular_of_singular_is_unchanged(engine, word) -> None:
    assert engine.singular(word) == word


def test_singular_empty_string(engine) -> None:
    assert engine.singular("") == ""


def test_singular_preserves_case(engine) -> None:
    assert engine.singular("CHILDREN") == "CHILD"
    assert engine.singular("Children") == "Child"
    assert engine.singular("BOXES") == "BOX"
    assert engine.singular("Cities") == "City"


def test_family_names(engine) -> None:
    assert engine.singular("Joneses") == "Jones"


def test_nationalities_are_unchanged(engine) -> None:
    assert engine.singular("Japanese") == "Japanese"


def test_count_argument(engine) -> None:
    assert engine.singular("cats", 1) == "cat"
    assert engine.singular("cats", -1) == "cat"
    assert engine.singular("cats", 0) == "cats"
    assert engine.singular("cats", 2) == "cats"


def test_classical_singulars_need_classical_mode(engine) -> None:
    assert engine.singular("formulae") == "formulae"
    engine.classical_ancient(True)
    assert engine.singular("formulae") == "formula"


def test_is_plural_and_is_singular(engine) -> None:
    assert engine.is_plural("cats")
    assert engine.is_plural("children")
    assert not engine.is_plural("cat")
    assert not engine.is_plural("sheep")
    assert not engine.is_plural("")

    assert engine.is_singular("child")
    assert not engine.is_singular("boxes")
    assert not engine.is_singular("")


def test_aliases(engine) -> None:
    assert engine.pluralize("cat") == "cats"
    assert engine.singularize("cats") == "cat"
