"""
morphology/joining.py

English list joining with the serial (Oxford) comma.

    join(["a", "b", "c"])                    -> "a, b, and c"
    join_with_conj(["a", "b"], "or")         -> "a or b"
    join_with_auto_sep(["x, y", "z"], "and") -> "x, y; and z"
"""

from __future__ import annotations

from typing import Sequence


def join_with_sep(words: Sequence[str], conj: str, sep: str) -> str:
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f"{words[0]} {conj} {words[1]}"
    return sep.join(words[:-1]) + sep + conj + " " + words[-1]


def join_with_conj(words: Sequence[str], conj: str) -> str:
    return join_with_sep(words, conj, ", ")


def join(words: Sequence[str]) -> str:
    return join_with_conj(words, "and")


def join_with_auto_sep(words: Sequence[str], conj: str) -> str:
    """Switch to "; " between items when any item already contains a comma."""
    if not any("," in w for w in words):
        return join_with_sep(words, conj, ", ")
    if len(words) == 2:
        return f"{words[0]}; {conj} {words[1]}"
    return join_with_sep(words, conj, "; ")


__all__ = ["join", "join_with_conj", "join_with_sep", "join_with_auto_sep"]
