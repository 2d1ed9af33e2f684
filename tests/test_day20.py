import pytest

from aoc2022.day20 import decrypt, part1, part2

EXAMPLE = "1\n2\n-3\n3\n-2\n0\n4\n"


def test_part1_example():
    assert part1(EXAMPLE) == 3


def test_part2_example():
    assert part2(EXAMPLE) == 1623178306


def test_decrypt_one_round():
    assert decrypt([1, 2, -3, 3, -2, 0, 4], 1, 1) == [0, 3, -2, 1, 2, -3, 4]


def test_decrypt_keeps_multiset():
    numbers = [1, 2, -3, 3, -2, 0, 4]
    assert sorted(decrypt(numbers, 7, 3)) == sorted(n * 7 for n in numbers)


def test_decrypt_starts_at_zero():
    assert decrypt([5, 0, -4, 9], 1, 2)[0] == 0


def test_missing_zero_raises():
    with pytest.raises(ValueError):
        decrypt([1, 2, 3], 1, 1)


def test_invalid_number_raises():
    with pytest.raises(ValueError):
        part1("1\nx\n0")