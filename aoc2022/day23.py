"""Unstable diffusion: spread elves out over the ground."""

from __future__ import annotations

from collections import defaultdict
from itertools import count

Point = tuple[int, int]

_AROUND: tuple[Point, ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)

# Each direction: the three cells that must be free, the middle one being the move.
_DIRECTIONS: tuple[tuple[Point, Point, Point], ...] = (
    ((-1, -1), (0, -1), (1, -1)),  # north
    ((-1, 1), (0, 1), (1, 1)),  # south
    ((-1, -1), (-1, 0), (-1, 1)),  # west
    ((1, -1), (1, 0), (1, 1)),  # east
)


def _parse(text: str) -> set[Point]:
    elves: set[Point] = set()
    for y, line in enumerate(text.split("\n")):
        for x, char in enumerate(line, start=1):
            if char == "#":
                elves.add((x, y))
            elif char != ".":
                raise ValueError(f"invalid character: {char!r}")
    return elves


def _is_free(elves: set[Point], elf: Point, offsets) -> bool:
    x, y = elf
    return all((x + dx, y + dy) not in elves for dx, dy in offsets)


def _target(elves: set[Point], elf: Point, first_direction: int) -> Point:
    if _is_free(elves, elf, _AROUND):
        return elf
    for turn in range(len(_DIRECTIONS)):
        checks = _DIRECTIONS[(first_direction + turn) % len(_DIRECTIONS)]
        if _is_free(elves, elf, checks):
            dx, dy = checks[1]
            return elf[0] + dx, elf[1] + dy
    return elf


def _round(elves: set[Point], index: int) -> set[Point]:
    proposals: dict[Point, list[Point]] = defaultdict(list)
    for elf in elves:
        proposals[_target(elves, elf, index % len(_DIRECTIONS))].append(elf)
    moved: set[Point] = set()
    for target, movers in proposals.items():
        if len(movers) == 1:
            moved.add(target)
        else:
            moved.update(movers)
    return moved


def _empty_ground(elves: set[Point]) -> int:
    if not elves:
        raise ValueError("there are no elves")
    xs = [x for x, _ in elves]
    ys = [y for _, y in elves]
    width = max(xs) - min(xs) + 1
    height = max(ys) - min(ys) + 1
    return width * height - len(elves)


def part1(text: str) -> int:
    """Empty ground tiles in the elves' bounding box after ten rounds."""
    elves = _parse(text)
    for index in range(10):
        elves = _round(elves, index)
    return _empty_ground(elves)


def part2(text: str) -> int:
    """Number of the first round in which no elf moves."""
    elves = _parse(text)
    for index in count():
        moved = _round(elves, index)
        if moved == elves:
            return index + 1
        elves = moved
    raise AssertionError("unreachable")