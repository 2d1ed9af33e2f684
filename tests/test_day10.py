import pytest

from aoc2022 import day10

SMALL = "noop\naddx 3\naddx -5\n"
FULL_SCREEN = "noop\n" * 240


def test_small_program_screen():
    total, screen = day10.run(SMALL)
    assert screen == " #### "
    assert total == day10.part1(SMALL)


def test_signal_at_twentieth_cycle():
    assert day10.part1("noop\n" * 19) == 20


def test_short_program_has_no_signal():
    assert day10.part1(SMALL) == day10.part1("")


def test_full_screen_rows():
    rows = day10.part2(FULL_SCREEN).split("\n")
    assert len(rows) == 6
    assert all(len(row) == 40 for row in rows)


def test_constant_register_draws_same_rows():
    rows = day10.part2(FULL_SCREEN).split("\n")
    assert rows[1] == "###" + " " * 37
    assert all(row == rows[1] for row in rows[2:])
    assert rows[0][1:] == rows[1][1:]


def test_addx_takes_two_cycles():
    _, one_addx = day10.run("addx 0")
    _, two_noops = day10.run("noop\nnoop")
    assert one_addx == two_noops


def test_invalid_instruction_raises():
    with pytest.raises(ValueError):
        day10.run("jump 3")


def test_invalid_operand_raises():
    with pytest.raises(ValueError):
        day10.part1("addx x")