"""Calorie counting: find the elves carrying the most food."""

from __future__ import annotations


def elf_totals(text: str) -> list[int]:
    """Return the calorie total of every elf, sorted in ascending order."""
    totals = []
    for block in text.rstrip("\n").split("\n\n"):
        try:
            totals.append(sum(int(line) for line in block.split("\n")))
        except ValueError as exc:
            raise ValueError(f"invalid calorie entry in block {block!r}") from exc
    return sorted(totals)


def part1(text: str) -> int:
    """Calories carried by the elf carrying the most."""
    return elf_totals(text)[-1]


def part2(text: str) -> int:
    """Calories carried by the top three elves together."""
    totals = elf_totals(text)
    if len(totals) < 3:
        raise ValueError("at least three elves are needed")
    return sum(totals[-3:])