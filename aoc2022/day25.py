"""Full of hot air: add numbers written in balanced base five (SNAFU)."""

from __future__ import annotations

_DIGITS = {"=": -2, "-": -1, "0": 0, "1": 1, "2": 2}
_SYMBOLS = {value: symbol for symbol, value in _DIGITS.items()}


def from_snafu(text: str) -> int:
    """Value of a SNAFU number; it must be positive."""
    if not text:
        raise ValueError("empty SNAFU number")
    value = 0
    for char in text:
        try:
            digit = _DIGITS[char]
        except KeyError:
            raise ValueError(f"invalid character for SNAFU: {char!r}") from None
        value = value * 5 + digit
    if value <= 0:
        raise ValueError(f"SNAFU number must be positive: {text!r}")
    return value


def to_snafu(value: int) -> str:
    """SNAFU form of a non-negative integer."""
    if value < 0:
        raise ValueError("negative values have no SNAFU form here")
    if value < 3:
        return str(value)
    digits = []
    while value:
        digit = value % 5
        if digit > 2:
            digit -= 5
        digits.append(_SYMBOLS[digit])
        value = (value - digit) // 5
    return "".join(reversed(digits))


def part1(text: str) -> str:
    """Sum of all SNAFU numbers, written in SNAFU."""
    return to_snafu(sum(from_snafu(line) for line in text.rstrip("\n").split("\n")))


def part2(text: str) -> str:
    """The last puzzle has no second part."""
    return ""