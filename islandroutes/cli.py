"""Command that prints the shortest routes between every pair of islands."""

from __future__ import annotations

import sys
from typing import Iterator, Sequence

from .errors import EmptyFileError, FileMissingError, PathfinderError, UsageError
from .graph import adjacency_matrix, all_routes, floyd
from .parser import IslandMap, load_map, read_map
from .report import format_path

EXIT_FAILURE = 255


def _report(island_map: IslandMap) -> Iterator[str]:
    islands = island_map.islands
    adjacency = adjacency_matrix(island_map.bridges, islands)
    distances = floyd(adjacency)
    for start in range(len(islands)):
        for end in range(start + 1, len(islands)):
            for route in all_routes(adjacency, distances, start, end):
                yield format_path(islands, route, adjacency)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command on the arguments (without the program name)."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 1:
            raise UsageError()
        try:
            text = read_map(args[0])
        except (FileMissingError, EmptyFileError) as error:
            print(error, file=sys.stderr)
            return 0
        island_map = load_map(text)
    except PathfinderError as error:
        print(error, file=sys.stderr)
        return EXIT_FAILURE
    for block in _report(island_map):
        sys.stdout.write(block)
    return 0


if __name__ == "__main__":
    sys.exit(main())