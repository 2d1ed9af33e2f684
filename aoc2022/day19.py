"""Not enough minerals: pick robot factory blueprints that crack the most geodes."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

ORE, CLAY, OBSIDIAN, GEODE = range(4)

_BLUEPRINT = re.compile(
    r"Blueprint (\d+): "
    r"Each ore robot costs (\d+) ore\.\s*"
    r"Each clay robot costs (\d+) ore\.\s*"
    r"Each obsidian robot costs (\d+) ore and (\d+) clay\.\s*"
    r"Each geode robot costs (\d+) ore and (\d+) obsidian\."
)
_MAX_VALUE = 255

Cost = tuple[tuple[int, int], ...]


@dataclass(frozen=True)
class Blueprint:
    """Robot costs of one factory blueprint."""

    id: int
    ore_robot_ore: int
    clay_robot_ore: int
    obsidian_robot_ore: int
    obsidian_robot_clay: int
    geode_robot_ore: int
    geode_robot_obsidian: int

    @property
    def costs(self) -> tuple[Cost, Cost, Cost, Cost]:
        """(resource, amount) pairs needed for each robot type, by type."""
        return (
            ((ORE, self.ore_robot_ore),),
            ((ORE, self.clay_robot_ore),),
            ((ORE, self.obsidian_robot_ore), (CLAY, self.obsidian_robot_clay)),
            ((ORE, self.geode_robot_ore), (OBSIDIAN, self.geode_robot_obsidian)),
        )

    @property
    def max_spend(self) -> tuple[int, int, int]:
        """Most of ore, clay and obsidian any single robot can cost."""
        spend = [0, 0, 0]
        for cost in self.costs:
            for resource, amount in cost:
                spend[resource] = max(spend[resource], amount)
        return spend[ORE], spend[CLAY], spend[OBSIDIAN]

    def quality_level(self, minutes: int) -> int:
        """Blueprint id times the most geodes it can open in ``minutes``."""
        return max_geodes(self, minutes) * self.id


def parse_blueprints(text: str) -> list[Blueprint]:
    """Read one blueprint per line."""
    blueprints = []
    for line in text.rstrip("\n").split("\n"):
        match = _BLUEPRINT.fullmatch(line.strip())
        if not match:
            raise ValueError(f"invalid blueprint: {line!r}")
        values = [int(group) for group in match.groups()]
        if any(value > _MAX_VALUE for value in values):
            raise ValueError(f"value out of range in blueprint: {line!r}")
        blueprints.append(Blueprint(*values))
    return blueprints


def max_geodes(blueprint: Blueprint, minutes: int) -> int:
    """Most geodes that can be opened in ``minutes`` starting with one ore robot."""
    if minutes < 0:
        raise ValueError("minutes must not be negative")
    costs = blueprint.costs
    max_spend = blueprint.max_spend
    best = 0

    def search(remaining: int, resources: list[int], robots: list[int]) -> None:
        nonlocal best
        idle = resources[GEODE] + robots[GEODE] * remaining
        best = max(best, idle)
        # Even a new geode robot every minute cannot beat the best so far.
        if idle + remaining * (remaining - 1) // 2 <= best:
            return
        for kind in (GEODE, OBSIDIAN, CLAY, ORE):
            if kind != GEODE and robots[kind] >= max_spend[kind]:
                continue
            wait = 0
            for resource, amount in costs[kind]:
                if robots[resource] == 0:
                    break
                shortfall = max(amount - resources[resource], 0)
                wait = max(wait, -(-shortfall // robots[resource]))
            else:
                time = wait + 1
                left = remaining - time
                if left <= 0:
                    continue
                new_resources = [r + b * time for r, b in zip(resources, robots)]
                for resource, amount in costs[kind]:
                    new_resources[resource] -= amount
                new_robots = list(robots)
                new_robots[kind] += 1
                search(left, new_resources, new_robots)

    search(minutes, [0, 0, 0, 0], [1, 0, 0, 0])
    return best


def part1(text: str) -> int:
    """Sum of the quality levels of all blueprints over 24 minutes."""
    return sum(blueprint.quality_level(24) for blueprint in parse_blueprints(text))


def part2(text: str) -> int:
    """Product of the most geodes of the first three blueprints over 32 minutes."""
    blueprints = parse_blueprints(text)[:3]
    return math.prod(max_geodes(blueprint, 32) for blueprint in blueprints)