"""Regolith reservoir: simulate falling sand in a cave of rock paths."""

from __future__ import annotations

import re
from typing import Optional

Point = tuple[int, int]

_SOURCE: Point = (500, 0)
_COORD = re.compile(r"(\d+),(\d+)")


def _parse_path(line: str) -> list[Point]:
    points = []
    for part in line.split(" -> "):
        match = _COORD.fullmatch(part)
        if not match:
            raise ValueError(f"invalid coordinate {part!r} in {line!r}")
        points.append((int(match.group(1)), int(match.group(2))))
    return points


def _rocks(text: str) -> tuple[set[Point], int]:
    """Rock positions and the deepest y of any rock segment."""
    rocks: set[Point] = set()
    max_y = 0
    lines = text.rstrip("\n").split("\n")
    for line in lines:
        path = _parse_path(line)
        for (x1, y1), (x2, y2) in zip(path, path[1:]):
            if x1 != x2 and y1 != y2:
                raise ValueError(f"diagonal wall in {line!r}")
            xs = range(min(x1, x2), max(x1, x2) + 1)
            ys = range(min(y1, y2), max(y1, y2) + 1)
            rocks.update((x, y) for x in xs for y in ys)
            max_y = max(max_y, y1, y2)
    return rocks, max_y


def _settle(blocked: set[Point], bottom: int, floor: Optional[int]) -> Optional[Point]:
    """Where one grain comes to rest, or None if it falls past ``bottom``."""
    x, y = _SOURCE
    while y < bottom:
        if floor is not None and y + 1 == floor:
            return x, y
        for dx in (0, -1, 1):
            if (x + dx, y + 1) not in blocked:
                x += dx
                y += 1
                break
        else:
            return x, y
    return None


def part1(text: str) -> int:
    """Units of sand at rest before sand starts flowing into the abyss."""
    blocked, max_y = _rocks(text)
    count = 0
    while _SOURCE not in blocked:
        grain = _settle(blocked, max_y, None)
        if grain is None:
            break
        blocked.add(grain)
        count += 1
    return count


def part2(text: str) -> int:
    """Units of sand at rest once the source is blocked, with a floor below."""
    blocked, max_y = _rocks(text)
    floor = max_y + 2
    count = 0
    while _SOURCE not in blocked:
        grain = _settle(blocked, floor, floor)
        if grain is None:
            raise ValueError("sand fell through the floor")
        blocked.add(grain)
        count += 1
    return count