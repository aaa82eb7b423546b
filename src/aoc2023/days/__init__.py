"""
Daily puzzle solutions

Every module exposes the same four functions:
  - parse(text) -> Input
  - input_from(path) -> Input
  - part1(input) -> int
  - part2(input) -> int
"""

from . import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day08,
    day09,
    day10,
    day11,
    day13,
    day16
)

SOLVERS = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
    13: day13,
    16: day16,
}

__all__ = ["SOLVERS"]
