# app/core/domain/models.py
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

# --- Enums ---


class Gender(str, Enum):
    """Gender used to resolve third-person singular pronouns."""
    MASCULINE = "m"   # he / him / his / himself
    FEMININE = "f"    # she / her / hers / herself
    NEUTER = "n"      # it / it / its / itself
    THEY = "t"        # singular they (default)

    @classmethod
    def parse(cls, value: object) -> "Gender | None":
        """Return the matching member, or None for anything unrecognized."""
        if isinstance(value, Gender):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class PossessiveStyle(str, Enum):
    """How singular nouns ending in 's' form their possessive."""
    MODERN = "modern"             # James's
    TRADITIONAL = "traditional"   # James'


class NumberComparison(str, Enum):
    """Result of comparing the grammatical number of two words."""
    EQUAL = "eq"
    SINGULAR_PLURAL = "s:p"
    PLURAL_SINGULAR = "p:s"
    PLURAL_PLURAL = "p:p"
    UNRELATED = ""


# --- Value objects ---


class ClassicalOptions(BaseModel):
    """
    Snapshot of the classical-mode flags of an engine.

    `mode` is the general classical switch; it is turned on together with
    `ancient` and with `all`, and it is what makes Latin/Greek plurals apply.
    """
    model_config = ConfigDict(frozen=True)

    mode: bool = False
    all: bool = False
    zero: bool = False
    herd: bool = False
    names: bool = False
    ancient: bool = False
    persons: bool = False
