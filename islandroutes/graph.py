"""Distance matrices and shortest routes between islands."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from .parser import Bridge

INFINITY = 21474836
"""Distance used for islands with no direct bridge between them."""

Matrix = list[list[int]]


def adjacency_matrix(bridges: Iterable[Bridge], islands: Sequence[str]) -> Matrix:
    """Build the symmetric matrix of direct bridge lengths.

    The diagonal is zero and pairs without a bridge hold INFINITY. When a
    pair is joined by several bridges, the last one listed wins.
    """
    position = {name: index for index, name in enumerate(islands)}
    size = len(islands)
    matrix = [
        [0 if row == column else INFINITY for column in range(size)]
        for row in range(size)
    ]
    for bridge in bridges:
        try:
            first = position[bridge.first]
            second = position[bridge.second]
        except KeyError as missing:
            raise ValueError(f"unknown island {missing.args[0]!r}") from None
        matrix[first][second] = matrix[second][first] = bridge.distance
    return matrix


def floyd(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix of shortest distances; the input is left unchanged."""
    distances = [list(row) for row in matrix]
    for k, through in enumerate(distances):
        for row in distances:
            to_k = row[k]
            for column, onward in enumerate(through):
                if to_k + onward < row[column]:
                    row[column] = to_k + onward
    return distances


def all_routes(
    adjacency: Sequence[Sequence[int]],
    distances: Sequence[Sequence[int]],
    start: int,
    end: int,
) -> Iterator[list[int]]:
    """Yield every shortest route from ``start`` to ``end`` as island indices.

    Routes are produced in order of the index of each next island. Nothing
    is yielded when ``end`` cannot be reached from ``start``.
    """
    size = len(adjacency)
    for index in (start, end):
        if not 0 <= index < size:
            raise ValueError(f"island index {index} out of range")
    return _walk(adjacency, distances, start, end)


def _walk(
    adjacency: Sequence[Sequence[int]],
    distances: Sequence[Sequence[int]],
    start: int,
    end: int,
) -> Iterator[list[int]]:
    if distances[start][end] >= INFINITY:
        return
    route = [start]
    visited = {start}

    def extend() -> Iterator[list[int]]:
        current = route[-1]
        if current == end:
            yield list(route)
            return
        remaining = distances[end][current]
        for neighbour, weight in enumerate(adjacency[current]):
            if neighbour in visited or weight >= INFINITY:
                continue
            if weight == remaining - distances[end][neighbour]:
                route.append(neighbour)
                visited.add(neighbour)
                yield from extend()
                visited.discard(neighbour)
                route.pop()

    yield from extend()