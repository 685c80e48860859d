"""Small text helpers: word splitting, trimming and substring work."""

from __future__ import annotations

import re

WHITESPACE = "\t\n\v\f\r "

_WHITESPACE_RUN = re.compile(r"[\t\n\v\f\r ]+")
_LEADING_DIGITS = re.compile(r"[0-9]*")


def _check_separator(sep: str) -> None:
    if len(sep) != 1:
        raise ValueError("separator must be a single character")


def _check_substring(sub: str) -> None:
    if not sub:
        raise ValueError("substring must not be empty")


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    _check_separator(sep)
    return [word for word in text.split(sep) if word]


def count_words(text: str, sep: str) -> int:
    """Count the non-empty pieces of ``text`` between ``sep`` characters."""
    return len(split_words(text, sep))


def trim(text: str) -> str:
    """Strip ASCII whitespace from both ends of ``text``."""
    return text.strip(WHITESPACE)


def squeeze_spaces(text: str) -> str:
    """Trim ``text`` and collapse each inner run of whitespace to one space."""
    return " ".join(word for word in _WHITESPACE_RUN.split(text) if word)


def count_substr(text: str, sub: str) -> int:
    """Count non-overlapping occurrences of ``sub``, scanning left to right."""
    _check_substring(sub)
    return text.count(sub)


def substr_index(text: str, sub: str) -> int:
    """Return the index of the first occurrence of ``sub``, or -1."""
    return text.find(sub)


def replace_substr(text: str, sub: str, replacement: str) -> str:
    """Replace every non-overlapping occurrence of ``sub`` with ``replacement``."""
    _check_substring(sub)
    return text.replace(sub, replacement)


def parse_int(text: str) -> int:
    """Read a leading integer the lenient way the map format expects.

    At most one leading tab, space or newline is skipped, then an optional
    sign ("+-" and "-+" are not accepted as signs), then decimal digits.
    Anything after the digits is ignored; no digits yields 0.
    """

    def char_at(index: int) -> str:
        return text[index] if index < len(text) else ""

    pos = 0
    if char_at(pos) in ("\t", " ", "\n") and char_at(pos):
        pos += 1
    sign = 1
    if char_at(pos) == "+" and char_at(pos + 1) != "-":
        pos += 1
    if char_at(pos) == "-" and char_at(pos + 1) != "+":
        sign = -1
        pos += 1
    match = _LEADING_DIGITS.match(text, pos)
    digits = match.group(0) if match else ""
    return sign * int(digits) if digits else 0