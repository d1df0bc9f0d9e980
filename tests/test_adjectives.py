# tests/test_adjectives.py
"""
Comparatives, superlatives and adverbs.
"""

from __future__ import annotations

import pytest


@pytest.mark.parametrize(
    "adj, comparative, superlative",
    [
        ("good", "better", "best"),
        ("bad", "worse", "worst"),
        ("big", "bigger", "biggest"),
        ("hot", "hotter", "hottest"),
        ("large", "larger", "largest"),
        ("happy", "happier", "happiest"),
        ("simple", "simpler", "simplest"),
        ("fast", "faster", "fastest"),
        ("beautiful", "more beautiful", "most beautiful"),
        ("Beautiful", "More Beautiful", "Most Beautiful"),
        ("BEAUTIFUL", "MORE BEAUTIFUL", "MOST BEAUTIFUL"),
        ("BIG", "BIGGER", "BIGGEST"),
        ("Good", "Better", "Best"),
    ],
)
def test_comparison(engine, adj, comparative, superlative) -> None:
    assert engine.comparative(adj) == comparative
    assert engine.superlative(adj) == superlative


def test_comparison_empty(engine) -> None:
    assert engine.comparative("") == ""
    assert engine.superlative("") == ""


@pytest.mark.parametrize(
    "adj, expected",
    [
        ("quick", "quickly"),
        ("happy", "happily"),
        ("basic", "basically"),
        ("public", "publicly"),
        ("full", "fully"),
        ("true", "truly"),
        ("simple", "simply"),
        ("gentle", "gently"),
        ("sole", "solely"),
        ("agile", "agilely"),
        ("shy", "shyly"),
        ("good", "well"),
        ("fast", "fast"),
        ("Quick", "Quickly"),
        ("", ""),
    ],
)
def test_adverb(engine, adj, expected) -> None:
    assert engine.adverb(adj) == expected


def test_count_syllables(engine) -> None:
    assert engine.count_syllables("big") == 1
    assert engine.count_syllables("beautiful") == 3
    assert engine.count_syllables("") == 0
