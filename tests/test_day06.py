import pytest

from aoc2022 import day06

EXAMPLE = "mjqjpqmgbljsphdztnvjfqwrcgsmlb"

SAMPLES = [
    EXAMPLE,
    "bvwbjplbgvbhsrlpgdmjqwftvncz",
    "nppdvjthqldpwncqszvftbrmjlhg",
    "nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg",
    "zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw",
]


def test_part1_example():
    assert day06.part1(EXAMPLE) == 7


def test_part2_example():
    assert day06.part2(EXAMPLE) == 19


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("size", [4, 14])
def test_marker_window_is_distinct_and_first(text, size):
    end = day06.find_marker(text, size)
    assert len(set(text[end - size : end])) == size
    assert all(
        len(set(text[e - size : e])) < size for e in range(size, end)
    )


def test_message_marker_not_before_packet_marker():
    for text in SAMPLES:
        assert day06.part2(text) >= day06.part1(text)


def test_no_marker_gives_zero():
    assert day06.find_marker("aaaa", 4) == 0


def test_only_first_line_is_read():
    assert day06.part1(EXAMPLE + "\nabcd") == day06.part1(EXAMPLE)
    assert day06.part1("aaab\nabcd") == day06.part1("aaab")