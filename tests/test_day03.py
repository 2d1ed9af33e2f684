import string

import pytest

from aoc2022 import day03

EXAMPLE = """vJrwpWtwJgWrhcsFMMfFFhFp
jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL
PmmdzqPrVvPwwTWBwg
wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn
ttgJtRGJQctTZtZT
CrZsJsPPZsGzwwsLwLmpwMDw
"""


def test_part1_example():
    assert day03.part1(EXAMPLE) == 157


def test_part2_example():
    assert day03.part2(EXAMPLE) == 70


def test_priorities_cover_all_letters_in_order():
    letters = string.ascii_lowercase + string.ascii_uppercase
    assert [day03.priority(c) for c in letters] == list(range(1, len(letters) + 1))


def test_uppercase_follows_lowercase():
    assert day03.priority("A") == day03.priority("z") + 1


@pytest.mark.parametrize("item", ["1", "", "ab", "!"])
def test_priority_invalid(item):
    with pytest.raises(ValueError):
        day03.priority(item)


def test_part1_without_shared_item_raises():
    with pytest.raises(ValueError):
        day03.part1("abcd")


def test_part2_incomplete_group_raises():
    with pytest.raises(ValueError):
        day03.part2("abc\nabd")


def test_single_rucksack_priority_matches_item():
    assert day03.part1("xQxR") == day03.priority("x")