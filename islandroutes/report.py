"""Text output of matrices and routes."""

from __future__ import annotations

from typing import Sequence

PATH = "Path: "
ROUTE = "Route: "
DISTANCE = "Distance: "
DELIM = " -> "
SEPARATOR = "=" * 40


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Lay out a matrix row by row, each value followed by three tabs."""
    return "".join(
        "".join(f"{value}\t\t\t" for value in row) + "\n" for row in matrix
    )


def format_path(
    islands: Sequence[str],
    route: Sequence[int],
    adjacency: Sequence[Sequence[int]],
) -> str:
    """Describe one route between two islands as a framed block of text."""
    if not route:
        raise ValueError("route must not be empty")
    names = [islands[index] for index in route]
    legs = [adjacency[a][b] for a, b in zip(route, route[1:])]
    if len(legs) > 1:
        distance = " + ".join(map(str, legs)) + f" = {sum(legs)}"
    else:
        distance = str(sum(legs))
    lines = [
        SEPARATOR,
        f"{PATH}{names[0]}{DELIM}{names[-1]}",
        ROUTE + DELIM.join(names),
        DISTANCE + distance,
        SEPARATOR,
    ]
    return "\n".join(lines) + "\n"