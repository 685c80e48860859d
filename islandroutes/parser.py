"""Reading, checking and parsing island map files.

A map starts with a line holding the number of islands, followed by one
line per bridge of the form ``Island-Island,distance``. Every line,
the last included, ends with a newline.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from .errors import (
    EmptyFileError,
    FileMissingError,
    InvalidIslandCountError,
    InvalidLineError,
)
from .textutil import parse_int

_COUNT_LINE = re.compile(r"[0-9]+")
_BRIDGE_LINE = re.compile(r"([A-Za-z]+)-([A-Za-z]+),([0-9]+)")


@dataclass(frozen=True)
class Bridge:
    """A bridge between two islands and its length."""

    first: str
    second: str
    distance: int


@dataclass(frozen=True)
class IslandMap:
    """The unique islands of a map, in order of appearance, and its bridges."""

    islands: tuple[str, ...]
    bridges: tuple[Bridge, ...]


def read_map(path) -> str:
    """Return the text of the map file at ``path``.

    Raises FileMissingError if it cannot be opened, EmptyFileError if empty.
    """
    name = str(path)
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError:
        raise FileMissingError(name) from None
    if not text:
        raise EmptyFileError(name)
    return text


def validate(text: str) -> int:
    """Check the layout of a map and return the declared island count.

    The first line must be a positive decimal number, every further line
    a bridge line. A map whose last line lacks its newline is reported
    as an invalid line 1.
    """
    first, _, rest = text.partition("\n")
    if not _COUNT_LINE.fullmatch(first) or parse_int(first) <= 0:
        raise InvalidLineError(1)
    terminated = text.endswith("\n")
    lines = rest.split("\n")
    if terminated:
        lines.pop()
    for number, line in enumerate(lines, start=2):
        if not _BRIDGE_LINE.fullmatch(line):
            raise InvalidLineError(number)
    if not terminated:
        raise InvalidLineError(1)
    return parse_int(first)


def parse_bridges(text: str) -> list[Bridge]:
    """Parse the bridge lines that follow the first line of ``text``."""
    bridges = []
    for number, line in enumerate(text.split("\n")[1:], start=2):
        if not line:
            continue
        match = _BRIDGE_LINE.fullmatch(line)
        if match is None:
            raise InvalidLineError(number)
        first, second, distance = match.groups()
        bridges.append(Bridge(first, second, int(distance)))
    return bridges


def unique_islands(bridges: Iterable[Bridge], expected: int) -> list[str]:
    """Return the distinct islands named by ``bridges`` in order of appearance.

    Raises InvalidIslandCountError if their number is not ``expected``.
    """
    names = dict.fromkeys(
        name for bridge in bridges for name in (bridge.first, bridge.second)
    )
    if len(names) != expected:
        raise InvalidIslandCountError()
    return list(names)


def load_map(text: str) -> IslandMap:
    """Validate and parse the whole text of a map."""
    count = validate(text)
    bridges = parse_bridges(text)
    islands = unique_islands(bridges, count)
    return IslandMap(islands=tuple(islands), bridges=tuple(bridges))