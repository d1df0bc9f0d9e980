"""
morphology/case_convert.py

Identifier case conversion.

    snake_case("HTTPServer")      -> "http_server"
    kebab_case("someValue")       -> "some-value"
    pascal_case("hello_world")    -> "HelloWorld"
    camel_case("Hello World")     -> "helloWorld"

Word boundaries:

- separators: "_", "-" and whitespace;
- a lowercase letter followed by an uppercase one ("someValue");
- the end of an acronym, i.e. an uppercase letter followed by a lowercase
  one after other uppercase letters ("HTTPServer" -> HTTP / Server);
- a change between letters and digits ("version2" -> version / 2).

Characters that are neither letters, digits nor separators are dropped.
"""

from __future__ import annotations

from typing import List


def _is_separator(ch: str) -> bool:
    return ch in "_-" or ch.isspace()


def split_words(text: str) -> List[str]:
    words: List[str] = []
    current: List[str] = []

    def flush() -> None:
        if current:
            words.append("".join(current))
            current.clear()

    for i, ch in enumerate(text):
        if _is_separator(ch):
            flush()
            continue

        last = current[-1] if current else ""

        if ch.isupper():
            if last.islower() or last.isdigit():
                flush()
            elif last.isupper() and i + 1 < len(text) and text[i + 1].islower():
                flush()
            current.append(ch)
        elif ch.isdigit():
            if last.isalpha():
                flush()
            current.append(ch)
        elif ch.isalpha():
            if last.isdigit():
                flush()
            current.append(ch)

    flush()
    return words


def _join_lower(text: str, separator: str) -> str:
    return separator.join(word.lower() for word in split_words(text))


def snake_case(text: str) -> str:
    return _join_lower(text, "_")


def kebab_case(text: str) -> str:
    return _join_lower(text, "-")


def _camelize(text: str, upper_first: bool) -> str:
    out = []
    for i, word in enumerate(split_words(text)):
        word = word.lower()
        if i == 0 and not upper_first:
            out.append(word)
        else:
            out.append(word[:1].upper() + word[1:])
    return "".join(out)


def pascal_case(text: str) -> str:
    return _camelize(text, upper_first=True)


def camel_case(text: str) -> str:
    return _camelize(text, upper_first=False)


# Rails-style aliases
underscore = snake_case
dasherize = kebab_case
title_case = pascal_case
camelize = pascal_case
camelize_down_first = camel_case


__all__ = [
    "split_words",
    "snake_case",
    "kebab_case",
    "pascal_case",
    "camel_case",
    "underscore",
    "dasherize",
    "title_case",
    "camelize",
    "camelize_down_first",
]
