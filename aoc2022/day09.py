"""Rope bridge: track where the tail of a rope goes."""

from __future__ import annotations

from typing import Iterator

Point = tuple[int, int]

_STEPS = {"U": (0, 1), "D": (0, -1), "L": (-1, 0), "R": (1, 0)}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def follow(head: Point, tail: Point) -> Point:
    """New position of a knot pulled along by the knot ahead of it."""
    dx = head[0] - tail[0]
    dy = head[1] - tail[1]
    if abs(dx) > 2 or abs(dy) > 2:
        raise ValueError(f"knots too far apart: {head} and {tail}")
    if abs(dx) <= 1 and abs(dy) <= 1:
        return tail
    return tail[0] + _sign(dx), tail[1] + _sign(dy)


def _moves(text: str) -> Iterator[tuple[Point, int]]:
    for line in text.splitlines():
        parts = line.split(" ")
        if len(parts) != 2 or parts[0] not in _STEPS:
            raise ValueError(f"invalid move: {line!r}")
        try:
            amount = int(parts[1])
        except ValueError as exc:
            raise ValueError(f"invalid amount: {line!r}") from exc
        if amount < 0:
            raise ValueError(f"invalid amount: {line!r}")
        yield _STEPS[parts[0]], amount


def simulate(text: str, knots: int) -> int:
    """Number of distinct positions the last knot visits."""
    if knots < 1:
        raise ValueError("a rope needs at least one knot")
    rope: list[Point] = [(0, 0)] * knots
    visited: set[Point] = set()
    for (dx, dy), amount in _moves(text):
        for _ in range(amount):
            head = (rope[0][0] + dx, rope[0][1] + dy)
            moved = [head]
            for knot in rope[1:]:
                moved.append(follow(moved[-1], knot))
            rope = moved
            visited.add(rope[-1])
    return len(visited)


def part1(text: str) -> int:
    """Positions visited by the tail of a two-knot rope."""
    return simulate(text, 2)


def part2(text: str) -> int:
    """Positions visited by the tail of a ten-knot rope."""
    return simulate(text, 10)