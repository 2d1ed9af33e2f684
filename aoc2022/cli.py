"""Command line entry point: solve one part of one day's puzzle."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from aoc2022 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
    day21,
    day23,
    day24,
    day25,
)

_DAY15_ROW = 2_000_000
_DAY15_LOW, _DAY15_HIGH = 0, 4_000_000

Solver = Callable[[str], object]

_SOLVERS: dict[int, tuple[Solver, Solver]] = {
    module_day: (module.part1, module.part2)
    for module_day, module in (
        (1, day01),
        (2, day02),
        (3, day03),
        (4, day04),
        (5, day05),
        (6, day06),
        (7, day07),
        (8, day08),
        (9, day09),
        (10, day10),
        (11, day11),
        (12, day12),
        (13, day13),
        (14, day14),
        (16, day16),
        (17, day17),
        (18, day18),
        (19, day19),
        (20, day20),
        (21, day21),
        (23, day23),
        (24, day24),
        (25, day25),
    )
}
_SOLVERS[15] = (
    lambda text: day15.part1(text, _DAY15_ROW),
    lambda text: day15.part2(text, _DAY15_LOW, _DAY15_HIGH),
)


def solve(day: int, part: int, text: str) -> object:
    """Answer of the given part of the given day for the puzzle input ``text``."""
    if day not in _SOLVERS:
        raise ValueError(f"no solution for day {day}")
    if part not in (1, 2):
        raise ValueError(f"part must be 1 or 2, not {part}")
    return _SOLVERS[day][part - 1](text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a puzzle input file and print the answer."""
    parser = argparse.ArgumentParser(description="Solve an Advent of Code 2022 puzzle.")
    parser.add_argument("day", type=int, choices=sorted(_SOLVERS))
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        parser.error(f"cannot read {args.input}: {exc.strerror}")
    print(solve(args.day, args.part, text))
    return 0