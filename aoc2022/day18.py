"""Boiling boulders: surface area of a droplet made of unit cubes."""

from __future__ import annotations

import re
from collections import deque
from typing import Iterator

Point = tuple[int, int, int]

_OFFSETS: tuple[Point, ...] = (
    (-1, 0, 0),
    (1, 0, 0),
    (0, -1, 0),
    (0, 1, 0),
    (0, 0, -1),
    (0, 0, 1),
)
_NUMBER = re.compile(r"[+-]?\d+")
_LOW, _HIGH = -128, 127


def _coordinate(text: str, line: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid cube: {line!r}")
    value = int(text)
    if not _LOW <= value <= _HIGH:
        raise ValueError(f"coordinate out of range: {line!r}")
    return value


def _cubes(text: str) -> set[Point]:
    cubes = set()
    for line in text.rstrip("\n").split("\n"):
        parts = line.split(",")
        if len(parts) != 3:
            raise ValueError(f"invalid cube: {line!r}")
        x, y, z = (_coordinate(part, line) for part in parts)
        cubes.add((x, y, z))
    return cubes


def _neighbours(point: Point) -> Iterator[Point]:
    x, y, z = point
    for dx, dy, dz in _OFFSETS:
        yield x + dx, y + dy, z + dz


def part1(text: str) -> int:
    """Number of cube faces not touching another cube."""
    cubes = _cubes(text)
    return sum(1 for cube in cubes for n in _neighbours(cube) if n not in cubes)


def part2(text: str) -> int:
    """Number of cube faces reachable from outside the droplet."""
    cubes = _cubes(text)
    low = tuple(min(axis) - 1 for axis in zip(*cubes))
    high = tuple(max(axis) + 1 for axis in zip(*cubes))

    def inside(point: Point) -> bool:
        return all(lo <= c <= hi for lo, c, hi in zip(low, point, high))

    start: Point = high  # type: ignore[assignment]
    visited = {start}
    queue = deque([start])
    faces = 0
    while queue:
        point = queue.popleft()
        for n in _neighbours(point):
            if not inside(n) or n in visited:
                continue
            if n in cubes:
                faces += 1
            else:
                visited.add(n)
                queue.append(n)
    return faces