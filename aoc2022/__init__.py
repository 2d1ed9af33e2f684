"""Solutions to the Advent of Code 2022 puzzles, one module per day (day 22 excluded)."""

__version__ = "0.1.0"