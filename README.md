# islandroutes

Find every shortest route between every pair of islands joined by bridges.

## The map format

A map is a plain-text file. The first line gives the number of distinct
islands as a positive whole number. Every line after it describes one bridge
as `<island>-<island>,<length>`, where island names are ASCII letters only
and the length is a non-negative whole number. Every line, the last one
included, must end with a newline.

```
4
Greenland-Bananal,8
Fraser-Greenland,10
Bananal-Fraser,3
Java-Fraser,5
```

Islands are numbered in the order in which they first appear in the bridge
lines. When the same pair of islands is joined by more than one bridge, the
last one listed is used.

## Installing

```
pip install .
```

## Command line

```
islandroutes map.txt
```

For each pair of islands, in the order the islands were numbered, the command
prints every shortest route between them as a block:

```
========================================
Path: Greenland -> Java
Route: Greenland -> Bananal -> Fraser -> Java
Distance: 8 + 3 + 5 = 16
========================================
```

A route of a single bridge shows only its length after `Distance: `. Pairs
that no chain of bridges connects are left out.

Before anything is printed the map is checked, and the first problem found is
written to standard error:

- `usage: ./pathfinder [filename]` when the command is not given exactly one
  argument (exit status 255);
- `error: file <name> does not exist` when the file cannot be opened, or
  `error: file <name> is empty` when it holds nothing (exit status 0);
- `error: line N is not valid` when a line breaks the format; a file whose
  last line lacks its newline is reported as line 1 (exit status 255);
- `error: invalid number of islands` when the first line does not match the
  number of distinct islands named by the bridges (exit status 255).

## Library

```python
from islandroutes.parser import load_map, read_map
from islandroutes.graph import adjacency_matrix, floyd, all_routes
from islandroutes.report import format_matrix, format_path

island_map = load_map(read_map("map.txt"))
adjacency = adjacency_matrix(island_map.bridges, island_map.islands)
distances = floyd(adjacency)
print(format_matrix(distances), end="")

for route in all_routes(adjacency, distances, 0, 3):
    print(format_path(island_map.islands, route, adjacency), end="")
```

- `islandroutes.parser`: `read_map` reads a file, `validate` checks the layout
  and returns the declared island count, `parse_bridges` gives `Bridge`
  records (`first`, `second`, `distance`), `unique_islands` lists the distinct
  islands, and `load_map` does all of it, returning an `IslandMap`
  (`islands`, `bridges`).
- `islandroutes.graph`: `adjacency_matrix` builds the matrix of direct bridge
  lengths, with `INFINITY` (21474836) where there is no bridge; `floyd`
  returns a new matrix of shortest distances; `all_routes` yields each
  shortest route as a list of island indices.
- `islandroutes.report`: `format_matrix` lays out a matrix with each value
  followed by three tabs; `format_path` renders one route as shown above.
- `islandroutes.cli`: `main(argv=None)` runs the command and returns its exit
  status.

Errors are raised as subclasses of `islandroutes.errors.PathfinderError`:
`UsageError`, `FileMissingError`, `EmptyFileError`, `InvalidLineError` (with
the line number in `line`) and `InvalidIslandCountError`.

The package also carries small helpers:

- `islandroutes.textutil`: `split_words`, `count_words`, `trim`,
  `squeeze_spaces`, `count_substr`, `substr_index`, `replace_substr` and
  `parse_int`, a lenient reader of a leading integer;
- `islandroutes.numbers`: `hex_to_int`, `int_to_hex` (zero gives the empty
  string), `int_sqrt` (the exact integer square root, or 0 if there is none)
  and `power`;
- `islandroutes.sorting`: `binary_search`, returning `(index, probes)` or
  `(-1, 0)`, and the in-place `bubble_sort` and `quicksort`, each returning
  the number of swaps made.

## Limits

Distances are plain integers, and any total of `INFINITY` or more is treated
as unreachable. The command only prints routes; it has no option to print
the matrices or to choose particular islands, for which the library functions
above are used directly.

## Tests

```
pip install ".[test]"
pytest
```