import pytest

from aoc2022.day12 import part1, part2, shortest_path

EXAMPLE = "Sabqponm\nabcryxxl\naccszExk\nacctuvwj\nabdefghi\n"


def test_part1_example():
    assert part1(EXAMPLE) == 31


def test_part2_example():
    assert part2(EXAMPLE) == 29


def test_part2_not_longer_than_part1():
    assert part2(EXAMPLE) <= part1(EXAMPLE)


def test_shortest_path_from_goal_is_zero():
    grid = EXAMPLE.splitlines()
    assert shortest_path(grid, (5, 2)) == 0


def test_shortest_path_matches_part1_from_start():
    grid = EXAMPLE.splitlines()
    assert shortest_path(grid, (0, 0)) == part1(EXAMPLE)


def test_unreachable_goal_raises():
    with pytest.raises(ValueError):
        shortest_path(["SaE"], (0, 0))


def test_missing_start_raises():
    with pytest.raises(ValueError):
        part1("abc\nzEa\n")


def test_missing_a_raises_in_part2():
    with pytest.raises(ValueError):
        part2("SzE\n")


def test_empty_input_raises():
    with pytest.raises(ValueError):
        part1("")