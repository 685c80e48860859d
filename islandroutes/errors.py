"""Exceptions raised while reading and checking an island map."""

from __future__ import annotations


class PathfinderError(Exception):
    """Base class for every error the map tools report."""


class UsageError(PathfinderError):
    """The command was started with the wrong arguments."""

    def __init__(self, program: str = "./pathfinder") -> None:
        self.program = program
        super().__init__(f"usage: {program} [filename]")


class FileMissingError(PathfinderError):
    """The map file cannot be opened."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"error: file {filename} does not exist")


class EmptyFileError(PathfinderError):
    """The map file holds no bytes at all."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"error: file {filename} is empty")


class InvalidLineError(PathfinderError):
    """A line of the map does not follow the expected format."""

    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__(f"error: line {line} is not valid")


class InvalidIslandCountError(PathfinderError):
    """The declared number of islands differs from the islands named."""

    def __init__(self) -> None:
        super().__init__("error: invalid number of islands")