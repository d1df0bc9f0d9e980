# engines/api.py
"""
Package-level convenience API.

Every function here is a bound method of one process-wide default `Engine`,
built from `app.shared.config.settings` at import time:

    from engines import plural, an, inflect

    plural("child")                         # "children"
    an("hour")                              # "an hour"
    inflect("There are plural('error', 3)") # "There are errors"

Configuration calls (`classical_all`, `def_noun`, `set_gender`, ...) change
that shared engine for every caller in the process. Code that needs its own
configuration should create an `Engine()` or `default_engine().clone()`.
"""

from __future__ import annotations

from app.shared.config import settings
from engines.english import Engine
from utils.logging_setup import configure_logging

# LOG_LEVEL (default INFO) filters the debug events emitted while the
# default engine is seeded.
configure_logging()

_default = Engine.from_settings(settings)


def default_engine() -> Engine:
    """The shared engine behind the package-level functions."""
    return _default


# --- Lifecycle ---
reset = _default.reset
clone = _default.clone

# --- Nouns ---
plural = _default.plural
singular = _default.singular
pluralize = _default.pluralize
singularize = _default.singularize
is_plural = _default.is_plural
is_singular = _default.is_singular
plural_noun = _default.plural_noun
plural_verb = _default.plural_verb
plural_adj = _default.plural_adj
singular_noun = _default.singular_noun
no = _default.no

# --- Verbs, adjectives, adverbs ---
past_tense = _default.past_tense
past_participle = _default.past_participle
present_participle = _default.present_participle
future_tense = _default.future_tense
is_participle = _default.is_participle
comparative = _default.comparative
superlative = _default.superlative
adverb = _default.adverb
count_syllables = _default.count_syllables

# --- Articles ---
an = _default.an
a = _default.a
def_a = _default.def_a
def_an = _default.def_an
undef_a = _default.undef_a
undef_an = _default.undef_an
def_a_pattern = _default.def_a_pattern
def_an_pattern = _default.def_an_pattern
undef_a_pattern = _default.undef_a_pattern
undef_an_pattern = _default.undef_an_pattern
def_a_reset = _default.def_a_reset

# --- Configuration ---
classical = _default.classical
classical_all = _default.classical_all
classical_ancient = _default.classical_ancient
classical_zero = _default.classical_zero
classical_herd = _default.classical_herd
classical_names = _default.classical_names
classical_persons = _default.classical_persons
is_classical = _default.is_classical
is_classical_all = _default.is_classical_all
is_classical_ancient = _default.is_classical_ancient
is_classical_zero = _default.is_classical_zero
is_classical_herd = _default.is_classical_herd
is_classical_names = _default.is_classical_names
is_classical_persons = _default.is_classical_persons
classical_options = _default.classical_options
apply_classical_options = _default.apply_classical_options
set_gender = _default.set_gender
get_gender = _default.get_gender
set_possessive_style = _default.set_possessive_style
get_possessive_style = _default.get_possessive_style
num = _default.num
get_num = _default.get_num

# --- Custom words ---
def_noun = _default.def_noun
undef_noun = _default.undef_noun
def_noun_reset = _default.def_noun_reset
def_verb = _default.def_verb
undef_verb = _default.undef_verb
def_verb_reset = _default.def_verb_reset
def_adj = _default.def_adj
undef_adj = _default.undef_adj
def_adj_reset = _default.def_adj_reset
add_irregular = _default.add_irregular
add_uncountable = _default.add_uncountable

# --- Numbers ---
number_to_words = _default.number_to_words
number_to_words_with_and = _default.number_to_words_with_and
number_to_words_float = _default.number_to_words_float
number_to_words_threshold = _default.number_to_words_threshold
number_to_words_grouped = _default.number_to_words_grouped
format_number = _default.format_number
ordinal = _default.ordinal
ordinal_suffix = _default.ordinal_suffix
ordinal_word = _default.ordinal_word
word_to_ordinal = _default.word_to_ordinal
ordinal_to_cardinal = _default.ordinal_to_cardinal
is_ordinal = _default.is_ordinal
counting_word = _default.counting_word
counting_word_threshold = _default.counting_word_threshold
fraction_to_words = _default.fraction_to_words
fraction_to_words_with_fourths = _default.fraction_to_words_with_fourths
currency_to_words = _default.currency_to_words
int_to_roman = _default.int_to_roman
roman_to_int = _default.roman_to_int

# --- Possessives, lists, comparison ---
possessive = _default.possessive
join = _default.join
join_with_conj = _default.join_with_conj
join_with_sep = _default.join_with_sep
join_with_auto_sep = _default.join_with_auto_sep
compare = _default.compare
compare_nouns = _default.compare_nouns
compare_verbs = _default.compare_verbs
compare_adjs = _default.compare_adjs

# --- Text, case conversion, Rails helpers ---
capitalize = _default.capitalize
titleize = _default.titleize
word_count = _default.word_count
snake_case = _default.snake_case
kebab_case = _default.kebab_case
pascal_case = _default.pascal_case
camel_case = _default.camel_case
underscore = _default.underscore
dasherize = _default.dasherize
title_case = _default.title_case
camelize = _default.camelize
camelize_down_first = _default.camelize_down_first
humanize = _default.humanize
parameterize = _default.parameterize
parameterize_join = _default.parameterize_join
asciify = _default.asciify
tableize = _default.tableize
typeify = _default.typeify
foreign_key = _default.foreign_key
foreign_key_condensed = _default.foreign_key_condensed

# --- Macros and templating ---
inflect = _default.inflect
template_functions = _default.template_functions


__all__ = [
    "Engine",
    "default_engine",
    "reset",
    "clone",
    "plural",
    "singular",
    "pluralize",
    "singularize",
    "is_plural",
    "is_singular",
    "plural_noun",
    "plural_verb",
    "plural_adj",
    "singular_noun",
    "no",
    "past_tense",
    "past_participle",
    "present_participle",
    "future_tense",
    "is_participle",
    "comparative",
    "superlative",
    "adverb",
    "count_syllables",
    "an",
    "a",
    "def_a",
    "def_an",
    "undef_a",
    "undef_an",
    "def_a_pattern",
    "def_an_pattern",
    "undef_a_pattern",
    "undef_an_pattern",
    "def_a_reset",
    "classical",
    "classical_all",
    "classical_ancient",
    "classical_zero",
    "classical_herd",
    "classical_names",
    "classical_persons",
    "is_classical",
    "is_classical_all",
    "is_classical_ancient",
    "is_classical_zero",
    "is_classical_herd",
    "is_classical_names",
    "is_classical_persons",
    "classical_options",
    "apply_classical_options",
    "set_gender",
    "get_gender",
    "set_possessive_style",
    "get_possessive_style",
    "num",
    "get_num",
    "def_noun",
    "undef_noun",
    "def_noun_reset",
    "def_verb",
    "undef_verb",
    "def_verb_reset",
    "def_adj",
    "undef_adj",
    "def_adj_reset",
    "add_irregular",
    "add_uncountable",
    "number_to_words",
    "number_to_words_with_and",
    "number_to_words_float",
    "number_to_words_threshold",
    "number_to_words_grouped",
    "format_number",
    "ordinal",
    "ordinal_suffix",
    "ordinal_word",
    "word_to_ordinal",
    "ordinal_to_cardinal",
    "is_ordinal",
    "counting_word",
    "counting_word_threshold",
    "fraction_to_words",
    "fraction_to_words_with_fourths",
    "currency_to_words",
    "int_to_roman",
    "roman_to_int",
    "possessive",
    "join",
    "join_with_conj",
    "join_with_sep",
    "join_with_auto_sep",
    "compare",
    "compare_nouns",
    "compare_verbs",
    "compare_adjs",
    "capitalize",
    "titleize",
    "word_count",
    "snake_case",
    "kebab_case",
    "pascal_case",
    "camel_case",
    "underscore",
    "dasherize",
    "title_case",
    "camelize",
    "camelize_down_first",
    "humanize",
    "parameterize",
    "parameterize_join",
    "asciify",
    "tableize",
    "typeify",
    "foreign_key",
    "foreign_key_condensed",
    "inflect",
    "template_functions",
]
