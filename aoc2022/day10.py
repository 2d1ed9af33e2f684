"""Cathode-ray tube: run the CPU, sample signal strength and draw the CRT."""

from __future__ import annotations

from typing import Iterator

_SAMPLE_CYCLES = frozenset({20, 60, 100, 140, 180, 220})
_WIDTH = 40


def _register_values(text: str) -> Iterator[int]:
    x = 1
    for line in text.splitlines():
        words = line.split(" ")
        if words == ["noop"]:
            yield x
        elif len(words) == 2 and words[0] == "addx":
            try:
                value = int(words[1])
            except ValueError as exc:
                raise ValueError(f"invalid instruction: {line!r}") from exc
            yield x
            x += value
            yield x
        else:
            raise ValueError(f"invalid instruction: {line!r}")


def run(text: str) -> tuple[int, str]:
    """Run the program; return the summed signal strength and the CRT output."""
    total = 0
    pixels = [" "]
    for cycle, x in enumerate(_register_values(text), start=2):
        position = (cycle - 1) % _WIDTH
        pixels.append("#" if -1 <= position - x <= 1 else " ")
        if position == _WIDTH - 1:
            pixels.append("\n")
        if cycle in _SAMPLE_CYCLES:
            total += cycle * x
    return total, "".join(pixels)


def part1(text: str) -> int:
    """Sum of the six sampled signal strengths."""
    return run(text)[0]


def part2(text: str) -> str:
    """The completed rows drawn on the CRT."""
    return "\n".join(run(text)[1].split("\n")[:-1])