# tests/test_numbers.py
"""
tests/test_numbers.py
---------------------

Cardinal and ordinal words, counting words and fractions.
"""

from __future__ import annotations

import math

import pytest


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, "zero"),
        (7, "seven"),
        (13, "thirteen"),
        (20, "twenty"),
        (42, "forty-two"),
        (100, "one hundred"),
        (101, "one hundred one"),
        (1234, "one thousand two hundred thirty-four"),
        (1_000_000, "one million"),
        (2_500_000, "two million five hundred thousand"),
        (1_000_000_000_000, "one thousand billion"),
        (-5, "negative five"),
    ],
)
def test_number_to_words(engine, n, expected) -> None:
    assert engine.number_to_words(n) == expected


@pytest.mark.parametrize(
    "n, expected",
    [
        (101, "one hundred and one"),
        (1001, "one thousand and one"),
        (1234, "one thousand two hundred and thirty-four"),
        (-101, "negative one hundred and one"),
    ],
)
def test_number_to_words_with_and(engine, n, expected) -> None:
    assert engine.number_to_words_with_and(n) == expected


def test_number_to_words_float(engine) -> None:
    assert engine.number_to_words_float(3.14) == "three point one four"
    assert engine.number_to_words_float(5.0) == "five"
    assert engine.number_to_words_float(-2.5) == "negative two point five"
    assert engine.number_to_words_float(0.5, "dot") == "zero dot five"


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_number_to_words_float_non_finite(engine, value) -> None:
    assert engine.number_to_words_float(value) == ""


def test_number_to_words_threshold(engine) -> None:
    assert engine.number_to_words_threshold(5, 10) == "five"
    assert engine.number_to_words_threshold(10, 10) == "10"
    assert engine.number_to_words_threshold(15, 10) == "15"


def test_number_to_words_grouped(engine) -> None:
    assert engine.number_to_words_grouped(1234, 2) == "twelve thirty-four"
    assert engine.number_to_words_grouped(123, 2) == "one twenty-three"
    assert engine.number_to_words_grouped(0, 2) == "zero"
    assert engine.number_to_words_grouped(1234, 0) == engine.number_to_words(1234)


def test_format_number(engine) -> None:
    assert engine.format_number(1234567) == "1,234,567"
    assert engine.format_number(999) == "999"
    assert engine.format_number(-1234) == "-1,234"


# ---------------------------------------------------------------------------
# Ordinals
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "n, expected",
    [
        (1, "1st"),
        (2, "2nd"),
        (3, "3rd"),
        (4, "4th"),
        (11, "11th"),
        (12, "12th"),
        (13, "13th"),
        (21, "21st"),
        (22, "22nd"),
        (101, "101st"),
        (111, "111th"),
        (112, "112th"),
        (0, "0th"),
        (-1, "-1st"),
    ],
)
def test_ordinal(engine, n, expected) -> None:
    assert engine.ordinal(n) == expected


def test_ordinal_suffix(engine) -> None:
    assert engine.ordinal_suffix(23) == "rd"
    assert engine.ordinal_suffix(213) == "th"


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, "zeroth"),
        (1, "first"),
        (12, "twelfth"),
        (20, "twentieth"),
        (21, "twenty-first"),
        (100, "one hundredth"),
        (101, "one hundred first"),
        (1000, "one thousandth"),
        (-3, "negative third"),
    ],
)
def test_ordinal_word(engine, n, expected) -> None:
    assert engine.ordinal_word(n) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("one", "first"),
        ("Twenty-One", "Twenty-First"),
        ("TWO", "SECOND"),
        ("one hundred", "one hundredth"),
        ("42", "42nd"),
        ("first", "first"),
        ("cat", "cat"),
    ],
)
def test_word_to_ordinal(engine, text, expected) -> None:
    assert engine.word_to_ordinal(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("first", "one"),
        ("Twenty-First", "Twenty-One"),
        ("21st", "21"),
        ("cat", "cat"),
        ("", ""),
    ],
)
def test_ordinal_to_cardinal(engine, text, expected) -> None:
    assert engine.ordinal_to_cardinal(text) == expected


def test_is_ordinal(engine) -> None:
    assert engine.is_ordinal("first")
    assert engine.is_ordinal("twenty-first")
    assert engine.is_ordinal("21st")
    assert not engine.is_ordinal("one")
    assert not engine.is_ordinal("")


# ---------------------------------------------------------------------------
# Counting words and fractions
# ---------------------------------------------------------------------------


def test_counting_word(engine) -> None:
    assert engine.counting_word(1) == "once"
    assert engine.counting_word(2) == "twice"
    assert engine.counting_word(3) == "thrice"
    assert engine.counting_word(3, False) == "three times"
    assert engine.counting_word(5) == "five times"
    assert engine.counting_word(0) == "zero times"


def test_counting_word_threshold(engine) -> None:
    assert engine.counting_word_threshold(2, 5) == "twice"
    assert engine.counting_word_threshold(10, 5) == "10 times"


@pytest.mark.parametrize(
    "numerator, denominator, expected",
    [
        (1, 2, "one half"),
        (3, 2, "three halves"),
        (1, 4, "one quarter"),
        (3, 4, "three quarters"),
        (1, 3, "one third"),
        (2, 3, "two thirds"),
        (1, 100, "one hundredth"),
        (3, 100, "three hundredths"),
        (5, 1, "five"),
        (-1, 2, "negative one half"),
        (1, -2, "negative one half"),
        (-1, -2, "one half"),
        (1, 0, ""),
    ],
)
def test_fraction_to_words(engine, numerator, denominator, expected) -> None:
    assert engine.fraction_to_words(numerator, denominator) == expected


def test_fraction_to_words_with_fourths(engine) -> None:
    assert engine.fraction_to_words_with_fourths(1, 4) == "one fourth"
    assert engine.fraction_to_words_with_fourths(3, 4) == "three fourths"
    assert engine.fraction_to_words_with_fourths(1, 2) == "one half"
