# tests/test_engine.py
"""
tests/test_engine.py
--------------------

Engine configuration state: classical flags, gender, possessive style,
default number, custom word overrides, clone and reset.
"""

from __future__ import annotations

import pytest

from app.core.domain.models import ClassicalOptions, Gender, PossessiveStyle
from app.shared.config import Settings
from engines import state
from engines.english import Engine

# ---------------------------------------------------------------------------
# Classical flags
# ---------------------------------------------------------------------------


def test_fresh_engine_is_not_classical(engine) -> None:
    assert not engine.is_classical()
    assert not engine.is_classical_all()
    assert engine.classical_options() == ClassicalOptions()


def test_classical_all_sets_every_flag(engine) -> None:
    engine.classical_all(True)
    assert engine.is_classical()
    assert engine.is_classical_all()
    assert engine.classical_options() == ClassicalOptions(
        mode=True, all=True, zero=True, herd=True,
        names=True, ancient=True, persons=True,
    )

    engine.classical_all(False)
    assert not engine.is_classical()
    assert not engine.is_classical_all()


def test_classical_alias(engine) -> None:
    engine.classical(True)
    assert engine.is_classical_all()


def test_individual_flags_are_independent(engine) -> None:
    engine.classical_zero(True)
    assert engine.is_classical_zero()
    assert not engine.is_classical_herd()
    assert not engine.is_classical()

    engine.classical_herd(True)
    engine.classical_names(True)
    engine.classical_persons(True)
    assert engine.is_classical_herd()
    assert engine.is_classical_names()
    assert engine.is_classical_persons()
    # "ancient" is still off
    assert not engine.is_classical_all()


def test_classical_ancient_turns_on_general_mode(engine) -> None:
    engine.classical_ancient(True)
    assert engine.is_classical()
    assert engine.is_classical_ancient()
    assert engine.classical_options().mode


def test_plural_reads_flags_without_building_a_snapshot(engine, monkeypatch) -> None:
    engine.classical_ancient(True)
    engine.classical_herd(True)
    assert engine._plural_flags() == (True, False, False, True)

    def no_snapshot(**_):
        raise AssertionError("plural built a ClassicalOptions snapshot")

    monkeypatch.setattr(state, "ClassicalOptions", no_snapshot)
    assert engine.plural("formula") == "formulae"
    assert engine.plural("bison") == "bison"


def test_apply_classical_options(engine) -> None:
    engine.apply_classical_options(ClassicalOptions(herd=True, zero=True))
    assert engine.is_classical_herd()
    assert engine.is_classical_zero()
    assert not engine.is_classical_names()


# ---------------------------------------------------------------------------
# Gender, possessive style, num
# ---------------------------------------------------------------------------


def test_gender_defaults_to_they(engine) -> None:
    assert engine.get_gender() == Gender.THEY


@pytest.mark.parametrize("value", ["m", "F", Gender.NEUTER])
def test_set_gender_accepts_codes_and_members(engine, value) -> None:
    engine.set_gender(value)
    assert engine.get_gender() == Gender.parse(value)


@pytest.mark.parametrize("value", ["x", "", "male", None, 3])
def test_invalid_gender_is_ignored(engine, value) -> None:
    engine.set_gender("m")
    engine.set_gender(value)
    assert engine.get_gender() == Gender.MASCULINE


def test_possessive_style(engine) -> None:
    assert engine.get_possessive_style() == PossessiveStyle.MODERN
    engine.set_possessive_style(PossessiveStyle.TRADITIONAL)
    assert engine.get_possessive_style() == PossessiveStyle.TRADITIONAL
    engine.set_possessive_style("modern")
    assert engine.get_possessive_style() == PossessiveStyle.MODERN


def test_num(engine) -> None:
    assert engine.get_num() == 0
    assert engine.num(5) == 5
    assert engine.get_num() == 5
    assert engine.num(-3) == 0
    assert engine.get_num() == 0
    engine.num(7)
    assert engine.num() == 0
    assert engine.get_num() == 0


# ---------------------------------------------------------------------------
# Custom nouns
# ---------------------------------------------------------------------------


def test_def_noun(engine) -> None:
    engine.def_noun("foo", "fooz")
    assert engine.plural("foo") == "fooz"
    assert engine.plural("Foo") == "Fooz"
    assert engine.singular("fooz") == "foo"


def test_def_noun_lowercases_both_forms(engine) -> None:
    engine.def_noun("Foo", "FOOZ")
    assert engine.plural("foo") == "fooz"
    assert engine.singular("fooz") == "foo"


def test_redefining_a_noun_drops_the_stale_reverse_entry(engine) -> None:
    engine.def_noun("foo", "fooz")
    engine.def_noun("foo", "fooi")
    assert engine.plural("foo") == "fooi"
    assert engine.singular("fooi") == "foo"
    # "fooz" no longer maps back to "foo" through the override table
    assert engine.singular("fooz") == "fooz"


def test_custom_noun_overrides_builtin(engine) -> None:
    engine.def_noun("child", "childs")
    assert engine.plural("child") == "childs"
    assert engine.singular("childs") == "child"


def test_undef_noun(engine) -> None:
    engine.def_noun("foo", "fooz")
    assert engine.undef_noun("foo") is True
    assert engine.undef_noun("foo") is False
    assert engine.plural("foo") == "foos"
    assert engine.singular("fooz") == "fooz"


def test_undef_noun_refuses_builtins(engine) -> None:
    assert engine.undef_noun("child") is False
    assert engine.plural("child") == "children"


def test_def_noun_reset(engine) -> None:
    engine.def_noun("foo", "fooz")
    engine.def_noun("child", "childs")
    engine.def_noun_reset()
    assert engine.plural("foo") == "foos"
    assert engine.plural("child") == "children"
    assert engine.singular("children") == "child"


def test_add_irregular_and_uncountable(engine) -> None:
    engine.add_irregular("cactus", "cactuses")
    assert engine.plural("cactus") == "cactuses"

    engine.add_uncountable("rice", "equipment")
    assert engine.plural("rice") == "rice"
    assert engine.plural("equipment") == "equipment"
    assert engine.singular("rice") == "rice"


def test_custom_verbs_and_adjectives(engine) -> None:
    engine.def_verb("foo", "fooz")
    assert engine.undef_verb("foo") is True
    assert engine.undef_verb("foo") is False

    engine.def_verb("bar", "barz")
    engine.def_verb_reset()
    assert engine.plural_verb("bar") == "bar"

    engine.def_adj("baz", "bazz")
    assert engine.undef_adj("baz") is True
    assert engine.undef_adj("baz") is False

    engine.def_adj("qux", "quxx")
    engine.def_adj_reset()
    assert engine.plural_adj("qux") == "qux"


# ---------------------------------------------------------------------------
# Clone and reset
# ---------------------------------------------------------------------------


def test_clone_copies_state(engine) -> None:
    engine.def_noun("foo", "fooz")
    engine.classical_ancient(True)
    engine.set_gender("f")
    engine.def_a("apple")
    engine.def_an_pattern("b.*")
    engine.num(4)

    copy = engine.clone()

    assert isinstance(copy, Engine)
    assert copy.plural("foo") == "fooz"
    assert copy.plural("formula") == "formulae"
    assert copy.get_gender() == Gender.FEMININE
    assert copy.an("apple") == "a apple"
    assert copy.an("banana") == "an banana"
    assert copy.get_num() == 4


def test_clone_is_independent(engine) -> None:
    engine.def_noun("foo", "fooz")
    copy = engine.clone()

    copy.def_noun("bar", "barz")
    copy.def_a("apple")
    copy.def_an_pattern("c.*")
    engine.def_noun("baz", "bazz")

    assert engine.plural("bar") == "bars"
    assert engine.an("apple") == "an apple"
    assert engine.an("cat") == "a cat"
    assert copy.plural("baz") == "bazes"
    assert copy.plural("foo") == "fooz"


def test_reset_restores_defaults(engine) -> None:
    engine.classical_all(True)
    engine.def_noun("foo", "fooz")
    engine.def_noun("child", "childs")
    engine.def_verb("foo", "fooz")
    engine.def_a("apple")
    engine.set_gender("m")
    engine.set_possessive_style(PossessiveStyle.TRADITIONAL)
    engine.num(9)

    engine.reset()

    assert not engine.is_classical()
    assert engine.plural("foo") == "foos"
    assert engine.plural("child") == "children"
    assert engine.singular("children") == "child"
    assert engine.plural_verb("foo") == "foo"
    assert engine.an("apple") == "an apple"
    assert engine.get_gender() == Gender.THEY
    assert engine.get_possessive_style() == PossessiveStyle.MODERN
    assert engine.get_num() == 0


def test_from_settings() -> None:
    settings = Settings(
        CLASSICAL_ANCIENT=True,
        CLASSICAL_HERD=True,
        DEFAULT_GENDER="f",
        POSSESSIVE_STYLE="traditional",
    )
    engine = Engine.from_settings(settings)

    assert engine.plural("formula") == "formulae"
    assert engine.plural("bison") == "bison"
    assert not engine.is_classical_zero()
    assert engine.get_gender() == Gender.FEMININE
    assert engine.get_possessive_style() == PossessiveStyle.TRADITIONAL

    # reset ignores settings
    engine.reset()
    assert engine.plural("formula") == "formulas"


def test_from_settings_classical_all() -> None:
    engine = Engine.from_settings(Settings(CLASSICAL_ALL=True))
    assert engine.is_classical_all()
