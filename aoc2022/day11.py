"""Monkey in the middle: simulate monkeys throwing items around."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field


def _after_prefix(line: str, prefix: str) -> str:
    if not line.startswith(prefix):
        raise ValueError(f"expected {prefix!r}, got {line!r}")
    return line[len(prefix) :]


def _number(text: str) -> int:
    if not text.isascii() or not text.isdigit():
        raise ValueError(f"invalid number: {text!r}")
    return int(text)


@dataclass
class Monkey:
    """One monkey with its held items and throwing rules."""

    index: int
    items: deque[int]
    operator: str
    operand: int | None  # None means the old value is squared
    test_mod: int
    throw_true: int
    throw_false: int
    inspections: int = field(default=0)

    @classmethod
    def parse(cls, block: str) -> "Monkey":
        """Read a monkey from its six-line description."""
        lines = block.strip("\n").split("\n")
        if len(lines) < 6:
            raise ValueError(f"incomplete monkey description: {block!r}")
        header = _after_prefix(lines[0], "Monkey ")
        if not header.endswith(":"):
            raise ValueError(f"invalid monkey header: {lines[0]!r}")
        index = _number(header[:-1])
        items = deque(
            _number(item)
            for item in _after_prefix(lines[1], "  Starting items: ").split(", ")
        )
        expression = _after_prefix(lines[2], "  Operation: new = ").split(" ")
        if len(expression) != 3:
            raise ValueError(f"invalid operation: {lines[2]!r}")
        left, operator, right = expression
        operand = None if left == right else _number(right)
        test_mod = _number(_after_prefix(lines[3], "  Test: divisible by "))
        if test_mod == 0:
            raise ValueError("divisor must not be zero")
        throw_true = _number(_after_prefix(lines[4], "    If true: throw to monkey "))
        throw_false = _number(_after_prefix(lines[5], "    If false: throw to monkey "))
        return cls(index, items, operator, operand, test_mod, throw_true, throw_false)

    def _operate(self, value: int) -> int:
        if self.operand is None:
            return value * value
        if self.operator == "*":
            return value * self.operand
        return value + self.operand

    def inspect(self, worried: bool, troop_mod: int) -> list[tuple[int, int]]:
        """Inspect every held item; return (worry level, target monkey) pairs."""
        throws = []
        while self.items:
            level = self._operate(self.items.popleft())
            level = level % troop_mod + troop_mod if worried else level // 3
            target = self.throw_true if level % self.test_mod == 0 else self.throw_false
            self.inspections += 1
            throws.append((level, target))
        return throws


@dataclass
class Troop:
    """All monkeys playing together."""

    monkeys: list[Monkey]

    @property
    def troop_mod(self) -> int:
        return math.prod(monkey.test_mod for monkey in self.monkeys)

    @classmethod
    def parse(cls, text: str) -> "Troop":
        """Read every monkey from blank-line separated descriptions."""
        blocks = [block for block in text.strip("\n").split("\n\n")]
        return cls([Monkey.parse(block) for block in blocks])

    def round(self, worried: bool) -> None:
        """Let every monkey take one turn, in order."""
        troop_mod = self.troop_mod
        for monkey in self.monkeys:
            for level, target in monkey.inspect(worried, troop_mod):
                if not 0 <= target < len(self.monkeys):
                    raise ValueError(f"there is no monkey {target}")
                self.monkeys[target].items.append(level)

    def monkey_business(self) -> int:
        """Product of the two highest inspection counts."""
        counts = sorted(monkey.inspections for monkey in self.monkeys)
        if len(counts) < 2:
            raise ValueError("at least two monkeys are needed")
        return counts[-1] * counts[-2]


def _play(text: str, rounds: int, worried: bool) -> int:
    troop = Troop.parse(text)
    for _ in range(rounds):
        troop.round(worried)
    return troop.monkey_business()


def part1(text: str) -> int:
    """Monkey business after 20 rounds with relief."""
    return _play(text, 20, worried=False)


def part2(text: str) -> int:
    """Monkey business after 10000 rounds without relief."""
    return _play(text, 10_000, worried=True)