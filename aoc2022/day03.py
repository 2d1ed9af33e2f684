"""Rucksack reorganisation: find shared item types and their priorities."""

from __future__ import annotations

import string


def priority(item: str) -> int:
    """Priority of an item type: a-z are 1-26, A-Z are 27-52."""
    index = string.ascii_letters.find(item)
    if len(item) != 1 or index < 0:
        raise ValueError(f"{item!r} is not a valid item type")
    return index + 1


def _shared(*groups: str) -> str:
    common = set(groups[0]).intersection(*groups[1:])
    if not common:
        raise ValueError(f"no shared item type in {groups!r}")
    return max(common)


def part1(text: str) -> int:
    """Sum of priorities of the item found in both compartments."""
    total = 0
    for rucksack in text.splitlines():
        mid = len(rucksack) // 2
        total += priority(_shared(rucksack[:mid], rucksack[mid:]))
    return total


def part2(text: str) -> int:
    """Sum of priorities of the badge shared by each group of three."""
    lines = text.splitlines()
    if len(lines) % 3:
        raise ValueError("rucksacks must come in groups of three")
    groups = zip(*[iter(lines)] * 3)
    return sum(priority(_shared(*group)) for group in groups)