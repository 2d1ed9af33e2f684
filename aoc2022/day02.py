"""Rock paper scissors strategy guide scoring."""

from __future__ import annotations

from enum import Enum


class Shape(Enum):
    """A hand shape; the value is the score for playing it."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @classmethod
    def parse(cls, code: str) -> "Shape":
        """Read a shape from its guide code (A/B/C or X/Y/Z)."""
        try:
            return _CODES[code]
        except KeyError:
            raise ValueError(f"{code!r} is not a valid move") from None

    def beats(self) -> "Shape":
        """The shape that this shape defeats."""
        return _BEATS[self]

    def loses_to(self) -> "Shape":
        """The shape that defeats this shape."""
        return _LOSES_TO[self]


_CODES = {
    "A": Shape.ROCK,
    "X": Shape.ROCK,
    "B": Shape.PAPER,
    "Y": Shape.PAPER,
    "C": Shape.SCISSORS,
    "Z": Shape.SCISSORS,
}

_BEATS = {
    Shape.ROCK: Shape.SCISSORS,
    Shape.PAPER: Shape.ROCK,
    Shape.SCISSORS: Shape.PAPER,
}

_LOSES_TO = {loser: winner for winner, loser in _BEATS.items()}


def score(opponent: Shape, me: Shape) -> int:
    """Score of one round from my point of view."""
    if opponent.loses_to() is me:
        outcome = 6
    elif opponent is me:
        outcome = 3
    else:
        outcome = 0
    return me.value + outcome


def _rounds(text: str):
    for line in text.splitlines():
        codes = line.split(" ")
        if len(codes) < 2:
            raise ValueError(f"invalid round: {line!r}")
        yield codes[0], codes[1]


def part1(text: str) -> int:
    """Total score when the second column is the shape to play."""
    return sum(
        score(Shape.parse(theirs), Shape.parse(mine)) for theirs, mine in _rounds(text)
    )


def part2(text: str) -> int:
    """Total score when the second column is the outcome to reach."""
    total = 0
    for theirs, strategy in _rounds(text):
        opponent = Shape.parse(theirs)
        if strategy == "X":
            me = opponent.beats()
        elif strategy == "Y":
            me = opponent
        elif strategy == "Z":
            me = opponent.loses_to()
        else:
            raise ValueError(f"{strategy!r} is not a valid strategy")
        total += score(opponent, me)
    return total