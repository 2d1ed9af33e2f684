"""Proboscidea volcanium: release as much pressure as possible from valves."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass

_VALVE = re.compile(
    r"Valve ([A-Za-z]+) has flow rate=(\d+); "
    r"(?:tunnel leads to valve|tunnels lead to valves) "
    r"([A-Za-z]+(?:, [A-Za-z]+)*)"
)
_START = "AA"
_MAX_VALVES = 16
_MAX_FLOW = 255
_FIRST_BIT = 0x8000
_ALL_BITS = 0xFFFF


@dataclass(frozen=True)
class _Valve:
    name: str
    flow: int
    tunnels: tuple[str, ...]


def _parse(text: str) -> list[_Valve]:
    valves = []
    for line in text.rstrip("\n").split("\n"):
        match = _VALVE.fullmatch(line)
        if not match:
            raise ValueError(f"invalid valve description: {line!r}")
        flow = int(match.group(2))
        if flow > _MAX_FLOW:
            raise ValueError(f"flow rate too large: {line!r}")
        valves.append(_Valve(match.group(1), flow, tuple(match.group(3).split(", "))))
    return valves


class _Network:
    """Valves worth opening, with travel times between them."""

    def __init__(self, valves: list[_Valve]) -> None:
        by_name: dict[str, _Valve] = {}
        for valve in valves:
            by_name.setdefault(valve.name, valve)
        if _START not in by_name:
            raise ValueError(f"there is no valve {_START}")
        names = sorted(
            {v.name for v in valves if v.flow > 0 or v.name == _START}
        )
        if len(names) == 1:
            raise ValueError("no valve has a positive flow rate")
        if len(names) > _MAX_VALVES:
            raise ValueError(f"at most {_MAX_VALVES} useful valves are supported")
        index = {name: i for i, name in enumerate(names)}
        self.flow = [by_name[name].flow for name in names]
        self.distances = [_distances(by_name, index, name) for name in names]
        self.mask = sum(_FIRST_BIT >> i for i in range(len(names)))
        self._memo: dict[tuple[int, int, int], int] = {}

    def best(self, current: int, opened: int, minutes: int) -> int:
        """Most pressure releasable from ``current`` with the ``opened`` bitmap."""
        key = (current, opened & self.mask, minutes)
        cached = self._memo.get(key)
        if cached is not None:
            return cached
        result = 0
        for neighbour, distance in self.distances[current]:
            bit = _FIRST_BIT >> neighbour
            if opened & bit:
                continue
            remaining = minutes - distance - 1
            if remaining <= 0:
                continue
            released = self.flow[neighbour] * remaining
            result = max(
                result, self.best(neighbour, opened | bit, remaining) + released
            )
        self._memo[key] = result
        return result


def _distances(
    by_name: dict[str, _Valve], index: dict[str, int], start: str
) -> list[tuple[int, int]]:
    found = []
    visited = {start}
    queue = deque([(start, 0)])
    while queue:
        name, distance = queue.popleft()
        valve = by_name.get(name)
        if valve is None:
            raise ValueError(f"tunnel leads to unknown valve {name!r}")
        for neighbour in valve.tunnels:
            if neighbour in visited:
                continue
            visited.add(neighbour)
            position = index.get(neighbour)
            if position is not None and position != 0:
                found.append((position, distance + 1))
            queue.append((neighbour, distance + 1))
    return found


def part1(text: str) -> int:
    """Most pressure released alone in 30 minutes."""
    network = _Network(_parse(text))
    return network.best(0, _FIRST_BIT, 30)


def part2(text: str) -> int:
    """Most pressure released together with an elephant in 26 minutes."""
    network = _Network(_parse(text))
    best = 0
    seen: set[int] = set()
    for bitmap in range(_FIRST_BIT, _ALL_BITS):
        yours = bitmap & network.mask
        if yours in seen:
            continue
        seen.add(yours)
        elephants = (~bitmap & _ALL_BITS) | _FIRST_BIT
        total = network.best(0, yours, 26) + network.best(0, elephants, 26)
        best = max(best, total)
    return best