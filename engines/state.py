# engines/state.py
"""
Mutable configuration carried by an inflection engine.

`EngineState` owns everything an `Engine` can be told to change at runtime:

- the seven classical-mode flags,
- gender (third-person singular pronoun resolution),
- possessive style,
- the default number used by `num()`,
- custom noun / verb / adjective overrides, each kept as a forward and a
  reverse map,
- custom article words and article patterns.

Every read and write of that state goes through one `RWLock`. The lock is
held only around the map or list access itself and never while calling
another locking method, so transformation code can freely combine several
lookups without risking self-deadlock.
"""

from __future__ import annotations

import copy
import re
from typing import Dict, List, Optional, Set, Tuple

import structlog

from app.core.domain.exceptions import InvalidPatternError
from app.core.domain.models import ClassicalOptions, Gender, PossessiveStyle
from morphology import tables
from utils.rwlock import RWLock

logger = structlog.get_logger()

# (source text as registered, compiled full-match pattern)
ArticlePattern = Tuple[str, re.Pattern[str]]


def _compile_article_pattern(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(f"^(?:{pattern})$")
    except re.error as exc:
        logger.warning("article_pattern_rejected", pattern=pattern, error=str(exc))
        raise InvalidPatternError(pattern, str(exc)) from exc


class EngineState:
    """Lock-guarded configuration and override tables for one engine."""

    def __init__(self) -> None:
        self._lock = RWLock()
        self._load_defaults()

    def _load_defaults(self) -> None:
        # Callers other than __init__ must hold the write lock.
        self._classical_mode = False
        self._classical_all = False
        self._classical_zero = False
        self._classical_herd = False
        self._classical_names = False
        self._classical_ancient = False
        self._classical_persons = False

        self._gender = Gender.THEY
        self._possessive_style = PossessiveStyle.MODERN
        self._default_num = 0

        self._irregular: Dict[str, str] = dict(tables.DEFAULT_IRREGULAR_PLURALS)
        self._irregular_reverse: Dict[str, str] = tables.reverse_map(self._irregular)

        self._verbs: Dict[str, str] = {}
        self._verbs_reverse: Dict[str, str] = {}
        self._adjs: Dict[str, str] = {}
        self._adjs_reverse: Dict[str, str] = {}

        self._a_words: Set[str] = set()
        self._an_words: Set[str] = set()
        self._a_patterns: List[ArticlePattern] = []
        self._an_patterns: List[ArticlePattern] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @classmethod
    def from_settings(cls, settings) -> "EngineState":
        """
        Build an engine seeded from an `app.shared.config.Settings` instance
        (classical switches, default gender, possessive style).
        """
        engine = cls()
        engine.apply_classical_options(settings.CLASSICAL_OPTIONS)
        engine.set_gender(settings.DEFAULT_GENDER)
        engine.set_possessive_style(settings.POSSESSIVE_STYLE)
        return engine

    def clone(self):
        """Deep copy of this engine; the copy shares no mutable state with it."""
        other = type(self)()
        with self._lock.read_locked():
            for name, value in vars(self).items():
                if name == "_lock":
                    continue
                # compiled patterns are immutable; copy the list, share the regexes
                if name in ("_a_patterns", "_an_patterns"):
                    setattr(other, name, list(value))
                else:
                    setattr(other, name, copy.deepcopy(value))
        return other

    def reset(self) -> None:
        """Restore every setting and table to a freshly constructed engine's."""
        with self._lock.write_locked():
            self._load_defaults()
        logger.debug("engine_reset")

    # ------------------------------------------------------------------
    # Classical modes
    # ------------------------------------------------------------------

    def classical_all(self, enabled: bool = True) -> None:
        with self._lock.write_locked():
            self._classical_mode = enabled
            self._classical_all = enabled
            self._classical_zero = enabled
            self._classical_herd = enabled
            self._classical_names = enabled
            self._classical_ancient = enabled
            self._classical_persons = enabled
        logger.debug("classical_all_set", enabled=enabled)

    classical = classical_all

    def classical_ancient(self, enabled: bool = True) -> None:
        """Latin/Greek plurals (formula -> formulae); also the general switch."""
        with self._lock.write_locked():
            self._classical_ancient = enabled
            self._classical_mode = enabled
        logger.debug("classical_ancient_set", enabled=enabled)

    def classical_zero(self, enabled: bool = True) -> None:
        with self._lock.write_locked():
            self._classical_zero = enabled
        logger.debug("classical_zero_set", enabled=enabled)

    def classical_herd(self, enabled: bool = True) -> None:
        with self._lock.write_locked():
            self._classical_herd = enabled
        logger.debug("classical_herd_set", enabled=enabled)

    def classical_names(self, enabled: bool = True) -> None:
        with self._lock.write_locked():
            self._classical_names = enabled
        logger.debug("classical_names_set", enabled=enabled)

    def classical_persons(self, enabled: bool = True) -> None:
        with self._lock.write_locked():
            self._classical_persons = enabled
        logger.debug("classical_persons_set", enabled=enabled)

    def is_classical(self) -> bool:
        with self._lock.read_locked():
            return self._classical_ancient or self._classical_mode

    def is_classical_all(self) -> bool:
        with self._lock.read_locked():
            return (
                self._classical_all
                and self._classical_zero
                and self._classical_herd
                and self._classical_names
                and self._classical_ancient
                and self._classical_persons
            )

    def is_classical_ancient(self) -> bool:
        with self._lock.read_locked():
            return self._classical_ancient

    def is_classical_zero(self) -> bool:
        with self._lock.read_locked():
            return self._classical_zero

    def is_classical_herd(self) -> bool:
        with self._lock.read_locked():
            return self._classical_herd

    def is_classical_names(self) -> bool:
        with self._lock.read_locked():
            return self._classical_names

    def is_classical_persons(self) -> bool:
        with self._lock.read_locked():
            return self._classical_persons

    def classical_options(self) -> ClassicalOptions:
        with self._lock.read_locked():
            return ClassicalOptions(
                mode=self._classical_mode,
                all=self._classical_all,
                zero=self._classical_zero,
                herd=self._classical_herd,
                names=self._classical_names,
                ancient=self._classical_ancient,
                persons=self._classical_persons,
            )

    def _plural_flags(self) -> Tuple[bool, bool, bool, bool]:
        """(classical forms, names, persons, herd) read in one pass."""
        with self._lock.read_locked():
            return (
                self._classical_ancient or self._classical_mode,
                self._classical_names,
                self._classical_persons,
                self._classical_herd,
            )

    def apply_classical_options(self, options: ClassicalOptions) -> None:
        with self._lock.write_locked():
            self._classical_mode = options.mode
            self._classical_all = options.all
            self._classical_zero = options.zero
            self._classical_herd = options.herd
            self._classical_names = options.names
            self._classical_ancient = options.ancient
            self._classical_persons = options.persons
        logger.debug("classical_options_applied", **options.model_dump())

    # ------------------------------------------------------------------
    # Gender, possessive style, default number
    # ------------------------------------------------------------------

    def set_gender(self, gender) -> None:
        """Accepts a `Gender` or its code ("m", "f", "n", "t"); anything else is ignored."""
        parsed = Gender.parse(gender)
        if parsed is None:
            logger.debug("gender_ignored", value=repr(gender))
            return
        with self._lock.write_locked():
            self._gender = parsed
        logger.debug("gender_set", gender=parsed.value)

    def get_gender(self) -> Gender:
        with self._lock.read_locked():
            return self._gender

    def set_possessive_style(self, style: PossessiveStyle) -> None:
        style = PossessiveStyle(style)
        with self._lock.write_locked():
            self._possessive_style = style
        logger.debug("possessive_style_set", style=style.value)

    def get_possessive_style(self) -> PossessiveStyle:
        with self._lock.read_locked():
            return self._possessive_style

    def num(self, n: Optional[int] = None) -> int:
        """
        Store the default number and return it. `None`, zero and negative
        values clear it back to 0.
        """
        value = n if n is not None and n > 0 else 0
        with self._lock.write_locked():
            self._default_num = value
        return value

    def get_num(self) -> int:
        with self._lock.read_locked():
            return self._default_num

    # ------------------------------------------------------------------
    # Custom nouns
    # ------------------------------------------------------------------

    def def_noun(self, singular: str, plural: str) -> None:
        """Register (or replace) an irregular plural, both directions."""
        singular, plural = singular.lower(), plural.lower()
        with self._lock.write_locked():
            previous = self._irregular.get(singular)
            if previous is not None and self._irregular_reverse.get(previous) == singular:
                del self._irregular_reverse[previous]
            self._irregular[singular] = plural
            self._irregular_reverse[plural] = singular
        logger.debug("custom_noun_defined", singular=singular, plural=plural)

    add_irregular = def_noun

    def add_uncountable(self, *words: str) -> None:
        for word in words:
            self.def_noun(word, word)

    def undef_noun(self, singular: str) -> bool:
        """
        Remove a custom noun. Built-in irregulars cannot be removed, even
        after being redefined; use `def_noun_reset` for that.
        """
        singular = singular.lower()
        if singular in tables.DEFAULT_IRREGULAR_PLURALS:
            return False
        with self._lock.write_locked():
            plural = self._irregular.pop(singular, None)
            if plural is None:
                return False
            if self._irregular_reverse.get(plural) == singular:
                del self._irregular_reverse[plural]
        logger.debug("custom_noun_removed", singular=singular)
        return True

    def def_noun_reset(self) -> None:
        with self._lock.write_locked():
            self._irregular = dict(tables.DEFAULT_IRREGULAR_PLURALS)
            self._irregular_reverse = tables.reverse_map(self._irregular)
        logger.debug("custom_nouns_reset")

    def _irregular_plural(self, lower: str) -> Optional[str]:
        with self._lock.read_locked():
            return self._irregular.get(lower)

    def _irregular_singular(self, lower: str) -> Optional[str]:
        # known singulars (analysis, index) map to themselves
        with self._lock.read_locked():
            found = self._irregular_reverse.get(lower)
            if found is None and lower in self._irregular:
                return lower
            return found

    # ------------------------------------------------------------------
    # Custom verbs and adjectives
    # ------------------------------------------------------------------

    def def_verb(self, singular: str, plural: str) -> None:
        singular, plural = singular.lower(), plural.lower()
        with self._lock.write_locked():
            _define(self._verbs, self._verbs_reverse, singular, plural)
        logger.debug("custom_verb_defined", singular=singular, plural=plural)

    def undef_verb(self, singular: str) -> bool:
        with self._lock.write_locked():
            removed = _undefine(self._verbs, self._verbs_reverse, singular.lower())
        if removed:
            logger.debug("custom_verb_removed", singular=singular.lower())
        return removed

    def def_verb_reset(self) -> None:
        with self._lock.write_locked():
            self._verbs = {}
            self._verbs_reverse = {}
        logger.debug("custom_verbs_reset")

    def def_adj(self, singular: str, plural: str) -> None:
        singular, plural = singular.lower(), plural.lower()
        with self._lock.write_locked():
            _define(self._adjs, self._adjs_reverse, singular, plural)
        logger.debug("custom_adj_defined", singular=singular, plural=plural)

    def undef_adj(self, singular: str) -> bool:
        with self._lock.write_locked():
            removed = _undefine(self._adjs, self._adjs_reverse, singular.lower())
        if removed:
            logger.debug("custom_adj_removed", singular=singular.lower())
        return removed

    def def_adj_reset(self) -> None:
        with self._lock.write_locked():
            self._adjs = {}
            self._adjs_reverse = {}
        logger.debug("custom_adjs_reset")

    def _custom_verb(self, lower: str, *, reverse: bool = False) -> Optional[str]:
        with self._lock.read_locked():
            return (self._verbs_reverse if reverse else self._verbs).get(lower)

    def _custom_adj(self, lower: str, *, reverse: bool = False) -> Optional[str]:
        with self._lock.read_locked():
            return (self._adjs_reverse if reverse else self._adjs).get(lower)

    # ------------------------------------------------------------------
    # Custom articles
    # ------------------------------------------------------------------

    def def_a(self, word: str) -> None:
        """Always use "a" before `word` (matched case-insensitively)."""
        word = word.lower()
        with self._lock.write_locked():
            self._a_words.add(word)
            self._an_words.discard(word)
        logger.debug("custom_a_defined", word=word)

    def def_an(self, word: str) -> None:
        """Always use "an" before `word` (matched case-insensitively)."""
        word = word.lower()
        with self._lock.write_locked():
            self._an_words.add(word)
            self._a_words.discard(word)
        logger.debug("custom_an_defined", word=word)

    def undef_a(self, word: str) -> bool:
        word = word.lower()
        with self._lock.write_locked():
            if word not in self._a_words:
                return False
            self._a_words.remove(word)
        return True

    def undef_an(self, word: str) -> bool:
        word = word.lower()
        with self._lock.write_locked():
            if word not in self._an_words:
                return False
            self._an_words.remove(word)
        return True

    def def_a_pattern(self, pattern: str) -> None:
        """
        Use "a" before any first word fully matching `pattern`.

        Raises InvalidPatternError if the expression does not compile.
        """
        compiled = _compile_article_pattern(pattern)
        with self._lock.write_locked():
            self._a_patterns.append((pattern, compiled))
        logger.debug("custom_a_pattern_defined", pattern=pattern)

    def def_an_pattern(self, pattern: str) -> None:
        """Use "an" before any first word fully matching `pattern`."""
        compiled = _compile_article_pattern(pattern)
        with self._lock.write_locked():
            self._an_patterns.append((pattern, compiled))
        logger.debug("custom_an_pattern_defined", pattern=pattern)

    def undef_a_pattern(self, pattern: str) -> bool:
        with self._lock.write_locked():
            return _remove_pattern(self._a_patterns, pattern)

    def undef_an_pattern(self, pattern: str) -> bool:
        with self._lock.write_locked():
            return _remove_pattern(self._an_patterns, pattern)

    def def_a_reset(self) -> None:
        """Drop every custom article word and pattern."""
        with self._lock.write_locked():
            self._a_words = set()
            self._an_words = set()
            self._a_patterns = []
            self._an_patterns = []
        logger.debug("custom_articles_reset")

    def _custom_article(self, lower: str) -> Optional[str]:
        """ "a", "an" or None, in priority order: words, then a/an patterns."""
        with self._lock.read_locked():
            if lower in self._a_words:
                return "a"
            if lower in self._an_words:
                return "an"
            for _, compiled in self._a_patterns:
                if compiled.match(lower):
                    return "a"
            for _, compiled in self._an_patterns:
                if compiled.match(lower):
                    return "an"
        return None


# ----------------------------------------------------------------------
# Helpers (callers hold the write lock)
# ----------------------------------------------------------------------


def _define(forward: Dict[str, str], reverse: Dict[str, str], singular: str, plural: str) -> None:
    previous = forward.get(singular)
    if previous is not None and reverse.get(previous) == singular:
        del reverse[previous]
    forward[singular] = plural
    reverse[plural] = singular


def _undefine(forward: Dict[str, str], reverse: Dict[str, str], singular: str) -> bool:
    plural = forward.pop(singular, None)
    if plural is None:
        return False
    if reverse.get(plural) == singular:
        del reverse[plural]
    return True


def _remove_pattern(patterns: List[ArticlePattern], source: str) -> bool:
    for i, (registered, _) in enumerate(patterns):
        if registered == source:
            del patterns[i]
            return True
    return False


__all__ = ["EngineState", "ArticlePattern"]
