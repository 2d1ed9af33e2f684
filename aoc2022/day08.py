"""Treetop tree house: visibility and scenic scores in a grid of trees."""

from __future__ import annotations

import math
import string
from typing import Iterable, Iterator, Sequence

Grid = list[list[int]]
Coord = tuple[int, int]


def parse_grid(text: str) -> Grid:
    """Read a rectangular grid of single-digit tree heights."""
    grid: Grid = []
    for line in text.splitlines():
        if not line or any(c not in string.digits for c in line):
            raise ValueError(f"invalid row of trees: {line!r}")
        grid.append([int(c) for c in line])
    if not grid:
        raise ValueError("the grid is empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all rows must have the same width")
    return grid


def _visible(cells: Iterable[tuple[Coord, int]]) -> Iterator[Coord]:
    highest = -1
    for coord, height in cells:
        if height > highest:
            yield coord
            highest = height


def part1(text: str) -> int:
    """Number of trees visible from outside the grid."""
    grid = parse_grid(text)
    visible: set[Coord] = set()
    for y, row in enumerate(grid):
        cells = [((x, y), h) for x, h in enumerate(row)]
        visible.update(_visible(cells))
        visible.update(_visible(reversed(cells)))
    for x, column in enumerate(zip(*grid)):
        cells = [((x, y), h) for y, h in enumerate(column)]
        visible.update(_visible(cells))
        visible.update(_visible(reversed(cells)))
    return len(visible)


def _viewing_distance(height: int, trees: Iterable[int]) -> int:
    count = 0
    for tree in trees:
        count += 1
        if tree >= height:
            break
    return count


def _scenic_score(row: Sequence[int], column: Sequence[int], x: int, y: int) -> int:
    height = row[x]
    views = (
        reversed(row[:x]),
        row[x + 1 :],
        reversed(column[:y]),
        column[y + 1 :],
    )
    return math.prod(_viewing_distance(height, view) for view in views)


def part2(text: str) -> int:
    """Highest scenic score of any tree."""
    grid = parse_grid(text)
    columns = [list(column) for column in zip(*grid)]
    return max(
        _scenic_score(row, columns[x], x, y)
        for y, row in enumerate(grid)
        for x in range(len(row))
    )