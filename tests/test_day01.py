import pytest

from aoc2022 import day01

EXAMPLE = """1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
"""


def test_part1_example():
    assert day01.part1(EXAMPLE) == 24000


def test_part2_example():
    assert day01.part2(EXAMPLE) == 45000


def test_elf_totals_sorted_and_complete():
    totals = day01.elf_totals(EXAMPLE)
    assert totals == sorted(totals)
    assert len(totals) == EXAMPLE.strip().count("\n\n") + 1


def test_part1_is_largest_total():
    assert day01.part1(EXAMPLE) == max(day01.elf_totals(EXAMPLE))


def test_part2_at_least_part1():
    assert day01.part2(EXAMPLE) >= day01.part1(EXAMPLE)


def test_invalid_number_raises():
    with pytest.raises(ValueError):
        day01.elf_totals("100\nabc\n\n200")


def test_part2_needs_three_elves():
    with pytest.raises(ValueError):
        day01.part2("100\n\n200")