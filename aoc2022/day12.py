"""Hill climbing: fewest steps up the heightmap to the best signal."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Sequence

Coord = tuple[int, int]


def _can_reach(source: str, destination: str) -> bool:
    return source in ("S", "z") or 97 <= ord(destination) <= ord(source) + 1


def _neighbours(grid: Sequence[str], x: int, y: int) -> Iterator[Coord]:
    here = grid[y][x]
    for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]):
            if _can_reach(here, grid[ny][nx]):
                yield nx, ny


def shortest_path(grid: Sequence[str], start: Coord) -> int:
    """Length of the shortest path from ``start`` (x, y) to 'E'."""
    queue = deque([(start, 0)])
    visited = {start}
    while queue:
        (x, y), length = queue.popleft()
        if grid[y][x] == "E":
            return length
        for neighbour in _neighbours(grid, x, y):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append((neighbour, length + 1))
    raise ValueError(f"no path up the mountain from {start}")


def _grid(text: str) -> list[str]:
    grid = text.splitlines()
    if not grid:
        raise ValueError("the heightmap is empty")
    return grid


def part1(text: str) -> int:
    """Fewest steps from 'S' to 'E'."""
    grid = _grid(text)
    for y, row in enumerate(grid):
        x = row.find("S")
        if x >= 0:
            return shortest_path(grid, (x, y))
    raise ValueError("there is no start position")


def part2(text: str) -> int:
    """Fewest steps from the first 'a' of any row to 'E'."""
    grid = _grid(text)
    starts = [(row.find("a"), y) for y, row in enumerate(grid) if "a" in row]
    if not starts:
        raise ValueError("there is no square at elevation a")
    return min(shortest_path(grid, start) for start in starts)