import pytest

from aoc2022.day16 import part1, part2

EXAMPLE = """\
Valve AA has flow rate=0; tunnels lead to valves DD, II, BB
Valve BB has flow rate=13; tunnels lead to valves CC, AA
Valve CC has flow rate=2; tunnels lead to valves DD, BB
Valve DD has flow rate=20; tunnels lead to valves CC, AA, EE
Valve EE has flow rate=3; tunnels lead to valves FF, DD
Valve FF has flow rate=0; tunnels lead to valves EE, GG
Valve GG has flow rate=0; tunnels lead to valves FF, HH
Valve HH has flow rate=22; tunnel leads to valve GG
Valve II has flow rate=0; tunnels lead to valves AA, JJ
Valve JJ has flow rate=21; tunnel leads to valve II
"""

TINY = """\
Valve AA has flow rate=0; tunnel leads to valve BB
Valve BB has flow rate=10; tunnel leads to valve AA"""


def test_part1_example():
    assert part1(EXAMPLE) == 1651


def test_part2_example():
    assert part2(EXAMPLE) == 1707


def test_part1_single_valve():
    assert part1(TINY) == 280


def test_part2_single_valve():
    assert part2(TINY) == 240


def test_invalid_line_raises():
    with pytest.raises(ValueError):
        part1("Valve AA flows a lot")


def test_missing_start_raises():
    text = "Valve BB has flow rate=3; tunnel leads to valve CC\n"
    with pytest.raises(ValueError):
        part1(text)


def test_unknown_tunnel_raises():
    text = "Valve AA has flow rate=0; tunnel leads to valve BB\n"
    with pytest.raises(ValueError):
        part1(text)