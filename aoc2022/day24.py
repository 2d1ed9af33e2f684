"""Blizzard basin: cross a valley full of moving blizzards."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Iterator

Point = tuple[int, int]
Blizzard = tuple[int, int, int, int]

_ARROWS = {"^": (0, -1), "v": (0, 1), "<": (-1, 0), ">": (1, 0)}


@dataclass
class _Valley:
    width: int
    height: int
    blizzards: list[Blizzard]

    def advance(self) -> None:
        self.blizzards = [
            ((x + dx) % self.width, (y + dy) % self.height, dx, dy)
            for x, y, dx, dy in self.blizzards
        ]

    def occupied(self) -> set[Point]:
        return {(x, y) for x, y, _, _ in self.blizzards}

    def next_positions(self, point: Point) -> Iterator[Point]:
        x, y = point
        if x > 0:
            yield x - 1, y
        if y > 0:
            yield x, y - 1
        if x < self.width - 1:
            yield x + 1, y
        if y < self.height - 1:
            yield x, y + 1
        yield point


def _parse(text: str) -> _Valley:
    lines = text.splitlines()
    if len(lines) < 3 or len(lines[0]) < 3:
        raise ValueError("the valley needs walls around at least one cell")
    width = len(lines[0]) - 2
    height = len(lines) - 2
    blizzards = [
        (x - 1, y, *_ARROWS[char])
        for y, line in enumerate(lines[1:])
        for x, char in enumerate(line)
        if char in _ARROWS
    ]
    return _Valley(width, height, blizzards)


def _crossing_time(text: str, trips: int) -> int:
    valley = _parse(text)
    corner: Point = (0, 0)
    exit_: Point = (valley.width - 1, valley.height - 1)
    legs = [(corner, exit_), (exit_, corner), (corner, exit_)][:trips]
    (start, target), remaining = legs[0], legs[1:]
    elves: set[Point] = set()
    for round_number in count(1):
        if target in elves:
            if not remaining:
                return round_number
            (start, target), remaining = remaining[0], remaining[1:]
            elves = set()
        following = {start}
        for elf in elves:
            following.update(valley.next_positions(elf))
        valley.advance()
        elves = following - valley.occupied()
    raise AssertionError("unreachable")


def part1(text: str) -> int:
    """Fewest minutes to reach the goal."""
    return _crossing_time(text, 1)


def part2(text: str) -> int:
    """Fewest minutes to reach the goal, go back for the snacks and return."""
    return _crossing_time(text, 3)