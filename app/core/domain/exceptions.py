# app/core/domain/exceptions.py
"""
Exception hierarchy for the inflection engine.

Only two operation families ever raise:

- Roman numeral parsing (malformed or empty input).
- Registration of custom article patterns (invalid regular expression).

Every morphological transformation and the macro interpreter are total
functions and never raise for any string input.
"""

from __future__ import annotations


class InflectionError(Exception):
    """Base exception for inflection-related problems."""


class InvalidRomanNumeralError(InflectionError, ValueError):
    """Raised when a string is empty or is not a well-formed Roman numeral."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid Roman numeral: {value!r}")


class InvalidPatternError(InflectionError, ValueError):
    """Raised when a custom article pattern does not compile."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid article pattern {pattern!r}: {reason}")
