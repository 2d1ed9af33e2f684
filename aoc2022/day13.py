"""Distress signal: compare and order nested packet lists."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Union

Packet = Union[int, list]

_MAX_INT = 255
_DIVIDERS = ([[2]], [[6]])


def _parse_int(text: str, pos: int) -> tuple[int, int]:
    end = pos
    while end < len(text) and text[end].isascii() and text[end].isdigit():
        end += 1
    if end == pos:
        raise ValueError(f"expected a number at position {pos} in {text!r}")
    value = int(text[pos:end])
    if value > _MAX_INT:
        raise ValueError(f"packet value {value} is too large")
    return value, end


def _parse_list(text: str, pos: int) -> tuple[list, int]:
    if not text.startswith("[", pos):
        raise ValueError(f"expected '[' at position {pos} in {text!r}")
    pos += 1
    items: list = []
    if text.startswith("]", pos):
        return items, pos + 1
    while True:
        if text.startswith("[", pos):
            item, pos = _parse_list(text, pos)
        else:
            item, pos = _parse_int(text, pos)
        items.append(item)
        if text.startswith(",", pos):
            pos += 1
        elif text.startswith("]", pos):
            return items, pos + 1
        else:
            raise ValueError(f"expected ',' or ']' at position {pos} in {text!r}")


def parse_packet(text: str) -> list:
    """Read one packet: a bracketed list of integers and nested lists."""
    text = text.strip()
    packet, pos = _parse_list(text, 0)
    if pos != len(text):
        raise ValueError(f"unexpected trailing text in {text!r}")
    return packet


def compare(left: Packet, right: Packet) -> int:
    """Return -1, 0 or 1 as ``left`` is ordered before, with or after ``right``."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for a, b in zip(left, right):
        result = compare(a, b)
        if result:
            return result
    return (len(left) > len(right)) - (len(left) < len(right))


def part1(text: str) -> int:
    """Sum of the 1-based indices of the pairs already in the right order."""
    total = 0
    for index, block in enumerate(text.strip("\n").split("\n\n"), start=1):
        lines = block.split("\n")
        if len(lines) != 2:
            raise ValueError(f"expected a pair of packets, got {block!r}")
        result = compare(parse_packet(lines[0]), parse_packet(lines[1]))
        if result == 0:
            raise ValueError(f"packets must not be the same: pair {index}")
        if result < 0:
            total += index
    return total


def part2(text: str) -> int:
    """Decoder key: product of the divider packets' positions once sorted."""
    packets = [parse_packet(line) for line in text.splitlines() if line]
    if not packets:
        raise ValueError("no packets given")
    packets.extend(_DIVIDERS)
    packets.sort(key=cmp_to_key(compare))
    first = packets.index(_DIVIDERS[0]) + 1
    second = packets.index(_DIVIDERS[1]) + 1
    return first * second