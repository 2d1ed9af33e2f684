"""Grove positioning system: mix an encrypted list of numbers."""

from __future__ import annotations

import re
from typing import Sequence

_NUMBER = re.compile(r"[+-]?\d+")
_DECRYPTION_KEY = 811_589_153
_OFFSETS = (1000, 2000, 3000)


def _parse(text: str) -> list[int]:
    numbers = []
    for line in text.rstrip("\n").split("\n"):
        if not _NUMBER.fullmatch(line):
            raise ValueError(f"invalid number: {line!r}")
        numbers.append(int(line))
    return numbers


def decrypt(numbers: Sequence[int], key: int, rounds: int) -> list[int]:
    """Mix the numbers ``rounds`` times after applying ``key``.

    The result is the circular sequence read starting from the zero.
    """
    values = [number * key for number in numbers]
    if 0 not in values:
        raise ValueError("the list must contain a zero")
    order = list(range(len(values)))
    modulus = len(values) - 1
    for _ in range(rounds):
        for ident, value in enumerate(values):
            if value == 0:
                continue
            position = order.index(ident)
            del order[position]
            order.insert((position + value) % modulus, ident)
    mixed = [values[ident] for ident in order]
    zero = mixed.index(0)
    return mixed[zero:] + mixed[:zero]


def _grove_sum(mixed: list[int]) -> int:
    return sum(mixed[offset % len(mixed)] for offset in _OFFSETS)


def part1(text: str) -> int:
    """Sum of the grove coordinates after one mix."""
    return _grove_sum(decrypt(_parse(text), 1, 1))


def part2(text: str) -> int:
    """Sum of the grove coordinates after ten mixes with the decryption key."""
    return _grove_sum(decrypt(_parse(text), _DECRYPTION_KEY, 10))