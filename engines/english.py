# engines/english.py
"""
ENGLISH INFLECTION ENGINE
-------------------------
The public surface of the library.

`Engine` layers its mutable configuration (`EngineState`) over the stateless
rules in `morphology`:

1. Nouns: plural / singular with classical modes and custom overrides.
2. Number agreement: nouns, pronouns, verbs and determiners by count.
3. Verbs, adjectives and adverbs.
4. Articles ("a" / "an") with custom words and patterns.
5. Numbers, ordinals, currency, Roman numerals.
6. Possessives, list joining, number comparison.
7. Case conversion and Rails-style helpers.
8. The inline macro interpreter (`inflect`).

Every method is safe to call from several threads. Package-level functions
in `engines.api` are bound methods of one shared default engine.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

from app.core.domain.models import NumberComparison
from engines.macros import expand
from engines.state import EngineState
from morphology import adjectives, articles, case_convert, casing, currency
from morphology import joining, nouns, numbers, phonetics, possessive, rails
from morphology import roman, tables, verbs
from morphology.casing import extract_whitespace, is_proper_name_ending_in_s, match_case
from morphology.pronouns import pronoun_to_plural, pronoun_to_singular

_CLASSICAL_SINGULARS = tables.reverse_map(tables.CLASSICAL_PLURALS)


def _is_singular_count(count: Optional[int]) -> bool:
    return count is not None and count in (1, -1)


class Engine(EngineState):
    """
    English inflection engine.

        engine = Engine()
        engine.plural("child")              # "children"
        engine.an("hour")                   # "an hour"
        engine.classical_ancient(True)
        engine.plural("formula")            # "formulae"

    `Engine()` starts from hard defaults. Use `Engine.from_settings(settings)`
    to seed classical modes, gender and possessive style from configuration.
    """

    # =================================================================
    # 1. Nouns
    # =================================================================

    def plural(self, word: str, count: Optional[int] = None) -> str:
        """
        Plural of a noun, with the input's case pattern.

        With a count of 1 or -1 the word is returned as given.
        """
        if not word:
            return ""
        if _is_singular_count(count):
            return word
        return self._plural(word)

    def _plural(self, word: str) -> str:
        lower = word.lower()
        classical, names, persons, herd = self._plural_flags()

        if names and is_proper_name_ending_in_s(word):
            return word

        if classical:
            form = tables.CLASSICAL_PLURALS.get(lower)
            if form is not None:
                return match_case(word, form)

        if persons and lower == "person":
            return match_case(word, "persons")

        irregular = self._irregular_plural(lower)
        if irregular is not None:
            return match_case(word, irregular)

        if lower in tables.UNCHANGED_PLURALS:
            return word

        if lower in tables.HERD_ANIMALS and herd:
            return word

        if nouns.has_unchanged_suffix(lower):
            return word

        return nouns.plural_by_suffix(word)

    def singular(self, word: str, count: Optional[int] = None) -> str:
        """
        Singular of a noun, with the input's case pattern.

        With a count other than 1 or -1 the word is returned as given.
        """
        if not word:
            return ""
        if count is not None and not _is_singular_count(count):
            return word

        lower = word.lower()

        irregular = self._irregular_singular(lower)
        if irregular is not None:
            return match_case(word, irregular)

        if self.is_classical():
            classical = _CLASSICAL_SINGULARS.get(lower)
            if classical is not None:
                return match_case(word, classical)
        if lower in tables.CLASSICAL_PLURALS:
            return word

        if lower in tables.UNCHANGED_PLURALS or nouns.has_unchanged_suffix(lower):
            return word

        return nouns.singular_by_suffix(word)

    def pluralize(self, word: str) -> str:
        return self.plural(word)

    def singularize(self, word: str) -> str:
        return self.singular(word)

    def is_plural(self, word: str) -> bool:
        if not word:
            return False
        return self.singular(word).lower() != word.lower()

    def is_singular(self, word: str) -> bool:
        if not word:
            return False
        return not self.is_plural(word)

    # =================================================================
    # 2. Number agreement
    # =================================================================

    def plural_noun(self, word: str, count: Optional[int] = None) -> str:
        """Plural of a noun or pronoun ("I" -> "we", "cat" -> "cats")."""
        if not word:
            return ""
        prefix, trimmed, suffix = extract_whitespace(word)
        if not trimmed:
            return word
        if _is_singular_count(count):
            return word

        pronoun = pronoun_to_plural(trimmed.lower())
        if pronoun is not None:
            return prefix + match_case(trimmed, pronoun) + suffix
        return prefix + self._plural(trimmed) + suffix

    def plural_verb(self, word: str, count: Optional[int] = None) -> str:
        """Plural of a present-tense verb ("is" -> "are", "runs" -> "run")."""
        if not word:
            return ""
        prefix, trimmed, suffix = extract_whitespace(word)
        if not trimmed:
            return word
        lower = trimmed.lower()

        if _is_singular_count(count):
            singular = tables.VERB_PLURAL_TO_SINGULAR.get(lower)
            if singular is None:
                singular = self._custom_verb(lower, reverse=True)
            if singular is not None:
                return prefix + match_case(trimmed, singular) + suffix
            return word

        if lower in tables.VERB_UNCHANGED:
            return word

        plural = tables.VERB_SINGULAR_TO_PLURAL.get(lower)
        if plural is None:
            plural = self._custom_verb(lower)
        if plural is not None:
            return prefix + match_case(trimmed, plural) + suffix

        if len(lower) > 3 and lower.endswith("ies"):
            return prefix + trimmed[:-3] + casing.match_suffix(trimmed, "y") + suffix

        if len(lower) > 2 and lower.endswith("es"):
            base = lower[:-2]
            if base.endswith(("ss", "sh", "ch", "x", "z", "o")):
                return prefix + trimmed[:-2] + suffix

        if len(lower) > 1 and lower.endswith("s") and not lower.endswith("ss"):
            return prefix + trimmed[:-1] + suffix

        return word

    def plural_adj(self, word: str, count: Optional[int] = None) -> str:
        """Plural of a determiner or adjective ("this" -> "these", "my" -> "our")."""
        if not word:
            return ""
        prefix, trimmed, suffix = extract_whitespace(word)
        if not trimmed:
            return word
        lower = trimmed.lower()

        if _is_singular_count(count):
            singular = tables.ADJ_PLURAL_TO_SINGULAR.get(lower)
            if singular is None:
                singular = self._custom_adj(lower, reverse=True)
            if singular is None:
                by_gender = tables.ADJ_PLURAL_TO_SINGULAR_BY_GENDER.get(lower)
                if by_gender is not None:
                    singular = by_gender.get(self.get_gender().value)
            if singular is not None:
                return prefix + match_case(trimmed, singular) + suffix
            return word

        plural = tables.ADJ_SINGULAR_TO_PLURAL.get(lower)
        if plural is None:
            plural = self._custom_adj(lower)
        if plural is not None:
            return prefix + match_case(trimmed, plural) + suffix
        return word

    def singular_noun(self, word: str, count: Optional[int] = None) -> str:
        """
        Singular of a noun or pronoun. Plural pronouns resolve through the
        engine gender: "they" -> "he" / "she" / "it" / "they".
        """
        if not word:
            return ""
        prefix, trimmed, suffix = extract_whitespace(word)
        if not trimmed:
            return word
        if count is not None and not _is_singular_count(count):
            return word

        pronoun = pronoun_to_singular(trimmed.lower(), self.get_gender().value)
        if pronoun is not None:
            return prefix + match_case(trimmed, pronoun) + suffix
        return prefix + self.singular(trimmed) + suffix

    def no(self, word: str, count: int) -> str:
        """
        "no cats", "1 cat", "3 cats". Classical zero mode keeps the word
        as given after "no".
        """
        if count == 0:
            if self.is_classical_zero():
                return "no " + word
            return "no " + self.plural(word)
        if count in (1, -1):
            return f"{count} {word}"
        return f"{count} {self.plural(word)}"

    # =================================================================
    # 3. Verbs, adjectives, adverbs
    # =================================================================

    def past_tense(self, verb: str) -> str:
        return verbs.past_tense(verb)

    def past_participle(self, verb: str) -> str:
        return verbs.past_participle(verb)

    def present_participle(self, verb: str) -> str:
        return verbs.present_participle(verb)

    def future_tense(self, verb: str) -> str:
        return verbs.future_tense(verb)

    def is_participle(self, word: str) -> bool:
        return verbs.is_participle(word)

    def comparative(self, adj: str) -> str:
        return adjectives.comparative(adj)

    def superlative(self, adj: str) -> str:
        return adjectives.superlative(adj)

    def adverb(self, adj: str) -> str:
        return adjectives.adverb(adj)

    def count_syllables(self, word: str) -> int:
        return phonetics.count_syllables(word)

    # =================================================================
    # 4. Articles
    # =================================================================

    def an(self, word: str) -> str:
        """
        Prefix `word` with "a" or "an".

        Custom words beat custom patterns, "a" beats "an" at each tier, and
        the spelling heuristic in `morphology.articles` decides the rest.
        """
        if not word:
            return ""
        first = articles.first_word(word)
        if not first:
            return word

        article = self._custom_article(first.lower())
        if article is None:
            article = "an" if articles.needs_an(word) else "a"
        return f"{article} {word}"

    a = an

    # =================================================================
    # 5. Numbers
    # =================================================================

    def number_to_words(self, n: int) -> str:
        return numbers.number_to_words(n)

    def number_to_words_with_and(self, n: int) -> str:
        return numbers.number_to_words_with_and(n)

    def number_to_words_float(self, f: float, decimal: str = "point") -> str:
        return numbers.number_to_words_float(f, decimal)

    def number_to_words_threshold(self, n: int, threshold: int) -> str:
        return numbers.number_to_words_threshold(n, threshold)

    def number_to_words_grouped(self, n: int, group_size: int) -> str:
        return numbers.number_to_words_grouped(n, group_size)

    def format_number(self, n: int) -> str:
        return numbers.format_number(n)

    def ordinal(self, n: int) -> str:
        return numbers.ordinal(n)

    def ordinal_suffix(self, n: int) -> str:
        return numbers.ordinal_suffix(n)

    def ordinal_word(self, n: int) -> str:
        return numbers.ordinal_word(n)

    def word_to_ordinal(self, text: str) -> str:
        return numbers.word_to_ordinal(text)

    def ordinal_to_cardinal(self, text: str) -> str:
        return numbers.ordinal_to_cardinal(text)

    def is_ordinal(self, text: str) -> bool:
        return numbers.is_ordinal(text)

    def counting_word(self, n: int, use_thrice: bool = True) -> str:
        return numbers.counting_word(n, use_thrice)

    def counting_word_threshold(self, n: int, threshold: int) -> str:
        return numbers.counting_word_threshold(n, threshold)

    def fraction_to_words(self, numerator: int, denominator: int) -> str:
        return numbers.fraction_to_words(numerator, denominator)

    def fraction_to_words_with_fourths(self, numerator: int, denominator: int) -> str:
        return numbers.fraction_to_words_with_fourths(numerator, denominator)

    def currency_to_words(self, amount: float, code: str) -> str:
        return currency.currency_to_words(amount, code)

    def int_to_roman(self, n: int) -> str:
        return roman.int_to_roman(n)

    def roman_to_int(self, text: str) -> int:
        """Raises InvalidRomanNumeralError for empty or malformed input."""
        return roman.roman_to_int(text)

    # =================================================================
    # 6. Possessives, lists, comparison
    # =================================================================

    def possessive(self, word: str) -> str:
        return possessive.possessive(
            word,
            plural=self.plural,
            singular=self.singular,
            style=self.get_possessive_style(),
        )

    def join(self, words: Sequence[str]) -> str:
        return joining.join(words)

    def join_with_conj(self, words: Sequence[str], conj: str) -> str:
        return joining.join_with_conj(words, conj)

    def join_with_sep(self, words: Sequence[str], conj: str, sep: str) -> str:
        return joining.join_with_sep(words, conj, sep)

    def join_with_auto_sep(self, words: Sequence[str], conj: str) -> str:
        return joining.join_with_auto_sep(words, conj)

    def compare(self, word1: str, word2: str) -> str:
        """
        Compare the grammatical number of two nouns:

            "eq"   same word            compare("cat", "cat")
            "s:p"  singular, plural     compare("cat", "cats")
            "p:s"  plural, singular     compare("cats", "cat")
            "p:p"  two plural forms     compare("indexes", "indices")
            ""     unrelated
        """
        return _compare(word1, word2, self.plural, self.singular)

    compare_nouns = compare

    def compare_verbs(self, verb1: str, verb2: str) -> str:
        return _compare(
            verb1, verb2, self.plural_verb, lambda w: self.plural_verb(w, 1)
        )

    def compare_adjs(self, adj1: str, adj2: str) -> str:
        return _compare(
            adj1, adj2, self.plural_adj, lambda w: self.plural_adj(w, 1)
        )

    # =================================================================
    # 7. Text, case conversion, Rails helpers
    # =================================================================

    def capitalize(self, text: str) -> str:
        return casing.capitalize(text)

    def titleize(self, text: str) -> str:
        return casing.titleize(text)

    def word_count(self, text: str) -> int:
        return casing.word_count(text)

    def snake_case(self, text: str) -> str:
        return case_convert.snake_case(text)

    def kebab_case(self, text: str) -> str:
        return case_convert.kebab_case(text)

    def pascal_case(self, text: str) -> str:
        return case_convert.pascal_case(text)

    def camel_case(self, text: str) -> str:
        return case_convert.camel_case(text)

    underscore = snake_case
    dasherize = kebab_case
    title_case = pascal_case
    camelize = pascal_case
    camelize_down_first = camel_case

    def humanize(self, word: str) -> str:
        return rails.humanize(word)

    def parameterize(self, text: str) -> str:
        return rails.parameterize(text)

    def parameterize_join(self, text: str, sep: str) -> str:
        return rails.parameterize_join(text, sep)

    def asciify(self, text: str) -> str:
        return rails.asciify(text)

    def tableize(self, word: str) -> str:
        """Class name to table name: "RawScaledScorer" -> "raw_scaled_scorers"."""
        return self.plural(case_convert.snake_case(word))

    def typeify(self, word: str) -> str:
        """Table name to class name: "egg_and_hams" -> "EggAndHam"."""
        return case_convert.pascal_case(self.singular(word))

    def foreign_key(self, word: str) -> str:
        return case_convert.snake_case(word) + "_id"

    def foreign_key_condensed(self, word: str) -> str:
        return case_convert.snake_case(word) + "id"

    # =================================================================
    # 8. Macros and templating
    # =================================================================

    def inflect(self, text: str) -> str:
        """
        Expand inline calls such as "plural('error', 3)" or "an('hour')"
        in free text. Unknown or malformed calls are left untouched.
        """
        return expand(self, text)

    def template_functions(self) -> Dict[str, Callable]:
        """
        Name -> bound callable map for templating layers, e.g.
        `jinja_env.globals.update(engine.template_functions())`.
        """
        names = (
            "plural", "pluralize", "singular", "singularize", "plural_noun",
            "plural_verb", "plural_adj", "singular_noun", "an", "a",
            "ordinal", "ordinal_suffix", "ordinal_word", "ordinal_to_cardinal",
            "word_to_ordinal", "number_to_words", "number_to_words_with_and",
            "format_number", "counting_word", "fraction_to_words",
            "currency_to_words", "no", "past_tense", "past_participle",
            "present_participle", "future_tense", "comparative", "superlative",
            "adverb", "possessive", "join", "join_with_conj", "camel_case",
            "snake_case", "underscore", "kebab_case", "dasherize",
            "pascal_case", "title_case", "camelize", "camelize_down_first",
            "capitalize", "titleize", "humanize", "tableize", "foreign_key",
            "typeify", "parameterize", "asciify", "word_count",
            "count_syllables",
        )
        return {name: getattr(self, name) for name in names}


def _compare(
    word1: str,
    word2: str,
    to_plural: Callable[[str], str],
    to_singular: Callable[[str], str],
) -> str:
    if not word1 or not word2:
        if not word1 and not word2:
            return NumberComparison.EQUAL.value
        return NumberComparison.UNRELATED.value

    lower1, lower2 = word1.lower(), word2.lower()
    if lower1 == lower2:
        return NumberComparison.EQUAL.value

    if to_plural(word1).lower() == lower2:
        return NumberComparison.SINGULAR_PLURAL.value
    if to_plural(word2).lower() == lower1:
        return NumberComparison.PLURAL_SINGULAR.value

    singular1 = to_singular(word1).lower()
    singular2 = to_singular(word2).lower()
    if singular1 == singular2 and lower1 != singular1 and lower2 != singular2:
        plural_of_singular = to_plural(singular1).lower()
        if plural_of_singular in (lower1, lower2):
            return NumberComparison.PLURAL_PLURAL.value

    return NumberComparison.UNRELATED.value


__all__ = ["Engine"]
