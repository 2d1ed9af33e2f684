# aoc2022

Solutions to the Advent of Code 2022 puzzles. You can use them from Python
or from the command line. The package needs nothing outside the standard
library.

Each day has its own module, `aoc2022.dayNN`. Each module has two functions,
`part1(text)` and `part2(text)`. Both take the whole puzzle input as a string
and return the answer.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

The `aoc2022` command solves one part of one day:

```
aoc2022 13 1 input.txt
```

The arguments are:

1. the day,
2. the part, 1 or 2,
3. the file that holds the puzzle input. This argument is optional and
   defaults to `input.txt` in the current directory.

The command prints the answer on standard output. If the file cannot be
read, it reports an error.

For day 15 the command uses the parameters of the real puzzle: row 2000000
for part 1, and a search area from 0 to 4000000 for part 2.

## Library

```python
from aoc2022 import day01, day13, day15
from aoc2022.cli import solve

with open("input.txt", encoding="utf-8") as handle:
    text = handle.read()

print(day01.part1(text))
print(day13.part2(text))

# Day 15 takes the row and the search range explicitly.
print(day15.part1(text, 10))
print(day15.part2(text, 0, 20))

# Dispatch by day and part number, as the command does.
print(solve(13, 1, text))
```

Some modules also expose the building blocks of their solution:

- `day06.find_marker(text, size)` returns how many characters are read
  before the last `size` of them are all distinct, or 0 if that never
  happens.
- `day09.simulate(text, knots)` returns how many positions the last knot
  of a rope visits.
- `day13.parse_packet(text)` reads a packet. `day13.compare(left, right)`
  orders two packets and returns -1, 0 or 1.
- `day15.parse_sensors(text)` reads the sensors. `Sensor.range_in_row(row)`
  returns the x span a sensor covers in a row.
- `day19.parse_blueprints(text)` reads the blueprints.
  `day19.max_geodes(blueprint, minutes)` returns the most geodes a blueprint
  can open in the given number of minutes.
- `day20.decrypt(numbers, key, rounds)` returns the mixed list, read from
  its zero.
- `day25.from_snafu(text)` and `day25.to_snafu(value)` convert to and from
  SNAFU numbers.

Invalid input raises `ValueError`.

Day 10's `part2` returns the rows drawn on the CRT screen. The letters they
show are the answer. Day 25 has no second puzzle, so its `part2` returns an
empty string.

## What is not included

Day 22 has no module, and the command does not accept it.