# engines/macros.py
"""
Inline macro interpreter.

Expands calls embedded in free text:

    "There are num(3) plural('error', 3)"  -> "There are 3 errors"
    "I saw an('apple')"                     -> "I saw an apple"
    "The cat plural_verb('is') happy"       -> "The cat are happy"

Grammar
=======

A call is `name(arg, arg, ...)`. Arguments are single- or double-quoted
strings or bare numbers; commas inside quotes do not split. Empty arguments
are dropped. The argument list ends at the first ")", so calls do not nest:
an inner call is passed to the outer function as plain text.

A call is replaced only when the name is known and the arguments fit the
macro's signature. Anything else (unknown name, wrong argument count, a
number that does not parse) is left in the text exactly as written.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from engines.english import Engine

CALL_PATTERN = re.compile(r"(\w+)\(([^)]*)\)")

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")

# Argument kinds
STR = "str"
INT = "int"
FLOAT = "float"


@dataclass(frozen=True, slots=True)
class Macro:
    """
    One dispatch entry: required argument kinds, optional trailing kinds,
    and whether extra string arguments are accepted.
    """
    handler: Callable[..., object]
    required: Tuple[str, ...]
    optional: Tuple[str, ...] = ()
    variadic: bool = False

    def bind(self, raw: Sequence[str]) -> Optional[List[object]]:
        """Convert raw arguments to the declared kinds, or None on mismatch."""
        n_required = len(self.required)
        if len(raw) < n_required:
            return None
        if not self.variadic and len(raw) > n_required + len(self.optional):
            return None

        kinds = list(self.required) + list(self.optional)
        kinds += [STR] * (len(raw) - len(kinds))

        values: List[object] = []
        for kind, text in zip(kinds, raw):
            value = _convert(kind, text)
            if value is None:
                return None
            values.append(value)
        return values


def _convert(kind: str, text: str) -> object:
    if kind == STR:
        return text
    if kind == INT:
        return int(text) if _INT_RE.match(text) else None
    if kind == FLOAT:
        return float(text) if _FLOAT_RE.match(text) else None
    raise ValueError(f"unknown argument kind: {kind}")


def parse_args(text: str) -> List[str]:
    """
    Split an argument list on commas outside quotes, strip whitespace and
    quotes, drop empty arguments.

        parse_args("'a, b', 3") -> ["a, b", "3"]
    """
    args: List[str] = []
    current: List[str] = []
    quote = ""

    for ch in text:
        if quote:
            if ch == quote:
                quote = ""
            else:
                current.append(ch)
        elif ch in "'\"":
            quote = ch
        elif ch == ",":
            _flush(args, current)
        else:
            current.append(ch)

    _flush(args, current)
    return args


def _flush(args: List[str], current: List[str]) -> None:
    arg = "".join(current).strip()
    if arg:
        args.append(arg)
    current.clear()


# ---------------------------------------------------------------------------
# Dispatch table
# ---------------------------------------------------------------------------


def _counted(method: str) -> Macro:
    """word plus an optional integer count."""
    return Macro(lambda e, word, *count: getattr(e, method)(word, *count), (STR,), (INT,))


def _unary(method: str, kind: str = STR) -> Macro:
    return Macro(lambda e, arg: getattr(e, method)(arg), (kind,))


def _binary(method: str, first: str, second: str) -> Macro:
    return Macro(lambda e, x, y: getattr(e, method)(x, y), (first, second))


MACROS: Dict[str, Macro] = {
    # nouns and agreement
    "plural": _counted("plural"),
    "plural_noun": _counted("plural_noun"),
    "plural_verb": _counted("plural_verb"),
    "plural_adj": _counted("plural_adj"),
    "singular": _counted("singular_noun"),
    "singular_noun": _counted("singular_noun"),
    "no": _binary("no", STR, INT),
    # articles
    "an": _unary("an"),
    "a": _unary("an"),
    # numbers
    "num": _unary("num", INT),
    "ordinal": _unary("ordinal", INT),
    "ordinal_word": _unary("ordinal_word", INT),
    "number_to_words": _unary("number_to_words", INT),
    "number_to_words_with_and": _unary("number_to_words_with_and", INT),
    "number_to_words_threshold": _binary("number_to_words_threshold", INT, INT),
    "counting_word": _unary("counting_word", INT),
    "fraction": _binary("fraction_to_words", INT, INT),
    "format_number": _unary("format_number", INT),
    "word_to_ordinal": _unary("word_to_ordinal"),
    "ordinal_to_cardinal": _unary("ordinal_to_cardinal"),
    "currency_to_words": _binary("currency_to_words", FLOAT, STR),
    # verbs, adjectives
    "past_tense": _unary("past_tense"),
    "past_participle": _unary("past_participle"),
    "present_participle": _unary("present_participle"),
    "future_tense": _unary("future_tense"),
    "comparative": _unary("comparative"),
    "superlative": _unary("superlative"),
    "adverb": _unary("adverb"),
    # possessives, comparison, lists
    "possessive": _unary("possessive"),
    "compare": _binary("compare", STR, STR),
    "compare_nouns": _binary("compare", STR, STR),
    "compare_verbs": _binary("compare_verbs", STR, STR),
    "compare_adjs": _binary("compare_adjs", STR, STR),
    "join": Macro(lambda e, *items: e.join(items), (STR,), variadic=True),
    "join_with": Macro(
        lambda e, conj, *items: e.join_with_conj(items, conj), (STR, STR), variadic=True
    ),
    # text and case
    "capitalize": _unary("capitalize"),
    "titleize": _unary("titleize"),
    "word_count": _unary("word_count"),
    "snake_case": _unary("snake_case"),
    "camel_case": _unary("camel_case"),
    "pascal_case": _unary("pascal_case"),
    "kebab_case": _unary("kebab_case"),
    "humanize": _unary("humanize"),
    "tableize": _unary("tableize"),
    "foreign_key": _unary("foreign_key"),
    "typeify": _unary("typeify"),
    "parameterize": _unary("parameterize"),
    "asciify": _unary("asciify"),
}


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------


def expand_call(engine: "Engine", match: "re.Match[str]") -> str:
    original = match.group(0)
    macro = MACROS.get(match.group(1).lower())
    if macro is None:
        return original

    values = macro.bind(parse_args(match.group(2)))
    if values is None:
        return original
    return str(macro.handler(engine, *values))


def expand(engine: "Engine", text: str) -> str:
    if not text:
        return text
    return CALL_PATTERN.sub(lambda m: expand_call(engine, m), text)


__all__ = ["CALL_PATTERN", "MACROS", "Macro", "parse_args", "expand", "expand_call"]
