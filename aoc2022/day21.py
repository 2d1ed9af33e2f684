"""Monkey math: evaluate the monkeys' expression tree and solve for the human."""

from __future__ import annotations

import re
from typing import Optional, Union

Job = Union[int, tuple[str, str, str]]

_LINE = re.compile(r"([A-Za-z]+): (?:(\d+)|([A-Za-z]+) +([-+*/]) +([A-Za-z]+))")
_ROOT = "root"
_HUMAN = "humn"


def _parse(text: str) -> dict[str, Job]:
    monkeys: dict[str, Job] = {}
    for line in text.rstrip("\n").split("\n"):
        match = _LINE.fullmatch(line)
        if not match:
            raise ValueError(f"invalid monkey: {line!r}")
        name, number, left, op, right = match.groups()
        monkeys[name] = int(number) if number is not None else (left, op, right)
    return monkeys


def _divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _apply(op: str, left: int, right: int) -> int:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    return _divide(left, right)


class _Evaluator:
    """Evaluates monkeys, optionally treating one of them as unknown."""

    def __init__(self, monkeys: dict[str, Job], unknown: Optional[str]) -> None:
        self.monkeys = monkeys
        self.unknown = unknown
        self._cache: dict[str, Optional[int]] = {}
        self._active: set[str] = set()

    def job(self, name: str) -> Job:
        try:
            return self.monkeys[name]
        except KeyError:
            raise ValueError(f"invalid monkey: {name}") from None

    def value(self, name: str) -> Optional[int]:
        """Number the monkey yells, or None if it depends on the unknown."""
        if name == self.unknown:
            return None
        if name in self._cache:
            return self._cache[name]
        if name in self._active:
            raise ValueError(f"monkey {name} depends on itself")
        job = self.job(name)
        if isinstance(job, int):
            result: Optional[int] = job
        else:
            left, op, right = job
            self._active.add(name)
            try:
                a = self.value(left)
                b = self.value(right)
            finally:
                self._active.discard(name)
            result = None if a is None or b is None else _apply(op, a, b)
        self._cache[name] = result
        return result


def part1(text: str) -> int:
    """The number the root monkey yells."""
    evaluator = _Evaluator(_parse(text), None)
    result = evaluator.value(_ROOT)
    assert result is not None
    return result


def _split(evaluator: _Evaluator, name: str) -> tuple[str, str, str, Optional[int], Optional[int]]:
    job = evaluator.job(name)
    if isinstance(job, int):
        raise ValueError(f"monkey {name} should be an operation")
    left, op, right = job
    a = evaluator.value(left)
    b = evaluator.value(right)
    if (a is None) == (b is None):
        raise ValueError(f"exactly one side of {name} must depend on {_HUMAN}")
    return left, op, right, a, b


def part2(text: str) -> int:
    """The number the human must yell for both sides of root to be equal."""
    evaluator = _Evaluator(_parse(text), _HUMAN)
    left, _, right, a, b = _split(evaluator, _ROOT)
    if a is None:
        target, name = b, left
    else:
        target, name = a, right
    assert target is not None
    while name != _HUMAN:
        left, op, right, a, b = _split(evaluator, name)
        if b is not None:
            if op == "+":
                target = target - b
            elif op == "-":
                target = target + b
            elif op == "*":
                target = _divide(target, b)
            else:
                target = target * b
            name = left
        else:
            assert a is not None
            if op == "+":
                target = target - a
            elif op == "-":
                target = a - target
            elif op == "*":
                target = _divide(target, a)
            else:
                target = _divide(a, target)
            name = right
    return target