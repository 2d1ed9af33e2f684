"""Tuning trouble: locate start-of-packet and start-of-message markers."""

from __future__ import annotations


def find_marker(text: str, size: int) -> int:
    """Characters processed until the last ``size`` are all distinct, or 0."""
    chars = text.split("\n", 1)[0]
    for end in range(size, len(chars) + 1):
        if len(set(chars[end - size : end])) == size:
            return end
    return 0


def part1(text: str) -> int:
    """Position after the first start-of-packet marker."""
    return find_marker(text, 4)


def part2(text: str) -> int:
    """Position after the first start-of-message marker."""
    return find_marker(text, 14)