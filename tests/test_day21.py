import pytest

from aoc2022.day21 import part1, part2

EXAMPLE = """root: pppw + sjmn
dbpl: 5
cczh: sllz + lgvd
zczc: 2
ptdq: humn - dvpt
dvpt: 3
lfqf: 4
humn: 5
ljgn: 2
sjmn: drzm * dbpl
sllz: 4
pppw: cczh / lfqf
lgvd: ljgn * ptdq
drzm: hmdt - zczc
hmdt: 32
"""


def test_part1_example():
    assert part1(EXAMPLE) == 152


def test_part2_example():
    assert part2(EXAMPLE) == 301


def test_division_truncates_towards_zero():
    text = "root: a / b\na: c - d\nc: 1\nd: 8\nb: 2"
    assert part1(text) == -3


def test_part2_human_on_right_of_subtraction():
    text = "root: a + b\na: c - humn\nc: 10\nb: 4"
    assert part2(text) == 6


def test_part2_human_on_left_of_multiplication():
    text = "root: a + b\na: humn * c\nc: 3\nb: 12"
    assert part2(text) == 4


def test_unknown_monkey_raises():
    with pytest.raises(ValueError):
        part1("root: a + b\na: 1")


def test_invalid_line_raises():
    with pytest.raises(ValueError):
        part1("root: a ? b")


def test_part2_without_human_raises():
    with pytest.raises(ValueError):
        part2("root: a + b\na: 1\nb: 2")