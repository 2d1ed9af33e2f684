import pytest

from aoc2022 import day02
from aoc2022.day02 import Shape

EXAMPLE = "A Y\nB X\nC Z\n"


def test_part1_example():
    assert day02.part1(EXAMPLE) == 15


def test_part2_example():
    assert day02.part2(EXAMPLE) == 12


@pytest.mark.parametrize(
    "code, shape",
    [
        ("A", Shape.ROCK),
        ("X", Shape.ROCK),
        ("B", Shape.PAPER),
        ("Y", Shape.PAPER),
        ("C", Shape.SCISSORS),
        ("Z", Shape.SCISSORS),
    ],
)
def test_parse(code, shape):
    assert Shape.parse(code) is shape


@pytest.mark.parametrize("shape", list(Shape))
def test_win_scores_six_more_than_loss(shape):
    win = day02.score(shape, shape.loses_to())
    loss = day02.score(shape, shape.beats())
    assert win - shape.loses_to().value == 6
    assert loss - shape.beats().value == 0


@pytest.mark.parametrize("shape", list(Shape))
def test_draw_scores_three(shape):
    assert day02.score(shape, shape) - shape.value == 3


def test_parse_invalid_raises():
    with pytest.raises(ValueError):
        Shape.parse("Q")


def test_part2_invalid_strategy_raises():
    with pytest.raises(ValueError):
        day02.part2("A Q")


def test_missing_move_raises():
    with pytest.raises(ValueError):
        day02.part1("A")