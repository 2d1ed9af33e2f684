"""Camp cleanup: count overlapping section assignments."""

from __future__ import annotations

from typing import Iterator

Assignment = tuple[int, int]


def _pairs(text: str) -> Iterator[tuple[Assignment, Assignment]]:
    for line in text.splitlines():
        try:
            first, second = line.split(",")
            a, b = (int(part) for part in first.split("-"))
            c, d = (int(part) for part in second.split("-"))
        except ValueError as exc:
            raise ValueError(f"invalid assignment pair: {line!r}") from exc
        yield (a, b), (c, d)


def _overlap(first: Assignment, second: Assignment) -> bool:
    (a, b), (c, d) = first, second
    if a > b or c > d:
        return False
    return max(a, c) <= min(b, d)


def _contains(first: Assignment, second: Assignment) -> bool:
    (a, b), (c, d) = first, second
    return (a <= c and d <= b) or (c <= a and b <= d)


def part1(text: str) -> int:
    """Number of pairs where one range fully contains the other."""
    return sum(
        1
        for first, second in _pairs(text)
        if _overlap(first, second) and _contains(first, second)
    )


def part2(text: str) -> int:
    """Number of pairs whose ranges overlap."""
    return sum(1 for first, second in _pairs(text) if _overlap(first, second))