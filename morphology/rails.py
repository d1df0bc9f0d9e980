"""
morphology/rails.py

Rails-style string helpers that do not need noun inflection.

    humanize("employee_salary")      -> "Employee salary"
    humanize("author_id")            -> "Author"
    parameterize("Hello, World!")    -> "hello-world"
    asciify("café")                  -> "cafe"

`tableize`, `typeify` and the foreign-key helpers depend on plural and
singular forms, so they live on the engine.
"""

from __future__ import annotations

import re
import unicodedata

_NOT_URL_SAFE = re.compile(r"[^a-zA-Z0-9\-_ ]")
_SEPARATOR_RUN = re.compile(r"[-_\s]+")


def asciify(text: str) -> str:
    """
    Strip diacritics and drop every remaining non-ASCII character:
    'naïve café' -> 'naive cafe', '日本' -> ''.
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    composed = unicodedata.normalize("NFC", stripped)
    return "".join(ch for ch in composed if ord(ch) < 128)


def separated_words(text: str, sep: str = " ") -> str:
    text = text.replace("_", sep).replace("-", sep)

    out = []
    for i, ch in enumerate(text):
        if i > 0 and ch.isupper():
            prev = text[i - 1]
            if prev.islower() or prev.isdigit():
                out.append(sep)
            elif prev.isupper() and i + 1 < len(text) and text[i + 1].islower():
                out.append(sep)
        out.append(ch)

    result = "".join(out)
    if sep:
        result = re.sub(re.escape(sep) + "+", sep, result)
    return result.strip()


def humanize(word: str) -> str:
    for suffix in ("_id", "_ID", "ID"):
        if word.endswith(suffix):
            word = word[: -len(suffix)]
            break

    word = separated_words(word, " ").lower()
    return word[:1].upper() + word[1:]


def parameterize_join(text: str, sep: str) -> str:
    """URL slug joined with `sep`: lowercase ASCII letters, digits, '-' and '_'."""
    text = asciify(text.lower())
    text = _NOT_URL_SAFE.sub("", text).strip()
    text = _SEPARATOR_RUN.sub(sep, text)
    return text.strip(sep) if sep else text


def parameterize(text: str) -> str:
    return parameterize_join(text, "-")


__all__ = [
    "asciify",
    "separated_words",
    "humanize",
    "parameterize",
    "parameterize_join",
]
