"""
Day 1: Trebuchet?! (calibration values)

https://adventofcode.com/2023/day/1

Each line hides a calibration value: the first and last "number" on the line
form a two-digit integer. Part 1 only counts digit characters, part 2 also
counts spelled-out words, which may overlap ("eightwo" -> 8 then 2).
"""

from pathlib import Path
from typing import TypedDict

from ..core.errors import SolveError
from ..core.textio import read_text, split_lines


class Input(TypedDict):
    lines: list[str]


DIGITS: dict[str, int] = {str(n): n for n in range(1, 10)}

WORDS: dict[str, int] = {
    "one": 1, "two": 2, "three": 3,
    "four": 4, "five": 5, "six": 6,
    "seven": 7, "eight": 8, "nine": 9,
}


def part1(data: Input) -> int:
    return sum(calibration_value(line, DIGITS) for line in data["lines"])


def part2(data: Input) -> int:
    number_map = {**DIGITS, **WORDS}
    return sum(calibration_value(line, number_map) for line in data["lines"])


def calibration_value(line: str, number_map: dict[str, int]) -> int:
    """
    first * 10 + last, scanning every character offset of line.

    At each offset the first token of number_map that prefixes the remaining
    suffix is taken, so overlapping words are all found.

    Raises:
        SolveError: If no token occurs anywhere in line.
    """
    numbers_found = []
    for i in range(len(line)):
        suffix = line[i:]
        for token, value in number_map.items():
            if suffix.startswith(token):
                numbers_found.append(value)
                break

    if not numbers_found:
        raise SolveError(f"No calibration number found in line: '{line}'")

    return numbers_found[0] * 10 + numbers_found[-1]


# ============================================================================
# Parsing
# ============================================================================

def parse(text: str) -> Input:
    return Input(lines=[line for line in split_lines(text) if line.strip()])


def input_from(path: str | Path) -> Input:
    return parse(read_text(path))
