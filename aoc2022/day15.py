"""Beacon exclusion zone: reason about sensor coverage along rows."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

Span = tuple[int, int]

_LINE = re.compile(
    r"Sensor at x=([+-]?\d+), y=([+-]?\d+): "
    r"closest beacon is at x=([+-]?\d+), y=([+-]?\d+)"
)
_TUNING_FACTOR = 4_000_000


@dataclass(frozen=True)
class Sensor:
    """A sensor and the closest beacon it detected."""

    x: int
    y: int
    beacon_x: int
    beacon_y: int

    def range_in_row(self, row: int) -> Optional[Span]:
        """Inclusive x span this sensor covers in ``row``, or None."""
        reach = abs(self.x - self.beacon_x) + abs(self.y - self.beacon_y)
        distance = abs(row - self.y)
        if distance > reach:
            return None
        remaining = reach - distance
        return self.x - remaining, self.x + remaining


def parse_sensors(text: str) -> list[Sensor]:
    """Read one sensor report per line."""
    sensors = []
    for line in text.rstrip("\n").split("\n"):
        match = _LINE.fullmatch(line)
        if not match:
            raise ValueError(f"invalid sensor report: {line!r}")
        sensors.append(Sensor(*(int(group) for group in match.groups())))
    return sensors


def _spans(sensors: list[Sensor], row: int) -> list[Span]:
    spans = [span for sensor in sensors if (span := sensor.range_in_row(row))]
    if not spans:
        raise ValueError(f"no sensor covers row {row}")
    return sorted(spans, key=lambda span: span[0])


def part1(text: str, row: int) -> int:
    """Positions in ``row`` where a beacon cannot be."""
    sensors = parse_sensors(text)
    beacons = {(s.beacon_x, s.beacon_y) for s in sensors if s.beacon_y == row}
    merged: list[Span] = []
    for start, end in _spans(sensors, row):
        if merged and start - 1 <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(end, merged[-1][1]))
        else:
            merged.append((start, end))
    covered = sum(end - start + 1 for start, end in merged)
    return covered - len(beacons)


def _gap_in_row(sensors: list[Sensor], row: int, low: int, high: int) -> Optional[int]:
    spans = _spans(sensors, row)
    first_start, first_end = spans[0]
    merged: list[Span] = [(max(low, first_start), first_end)]
    for start, end in spans[1:]:
        if start > high:
            break
        last_start, last_end = merged[-1]
        if start - 1 <= last_end:
            last_end = max(end, last_end)
            merged[-1] = (last_start, last_end)
            if last_start <= low and last_end >= high:
                return None
        else:
            merged.append((start, end))
    if len(merged) > 1:
        return merged[0][1] + 1
    return None


def part2(text: str, low: int, high: int) -> int:
    """Tuning frequency of the only uncovered position in the search square."""
    sensors = parse_sensors(text)
    for row in range(low, high + 1):
        x = _gap_in_row(sensors, row, low, high)
        if x is not None:
            return x * _TUNING_FACTOR + row
    raise ValueError("cannot find the distress beacon")