"""
Day 9: Mirage Maintenance

https://adventofcode.com/2023/day/9

Each history is extrapolated by repeatedly taking differences until a row of
zeros appears, then folding back up. The two parts differ only in how a
row's value is combined with the value extrapolated from its differences.
"""

from pathlib import Path
from typing import Callable, TypedDict

from ..core.errors import SolveError
from ..core.textio import read_text, split_lines, parse_ints

# (values, extrapolated value of the differences) -> extrapolated value of values
Generator = Callable[[list[int], int], int]


class Input(TypedDict):
    histories: list[list[int]]


def next_value(values: list[int], rec: int) -> int:
    return values[-1] + rec


def previous_value(values: list[int], rec: int) -> int:
    return values[0] - rec


def part1(data: Input) -> int:
    return process_histories(data["histories"], next_value)


def part2(data: Input) -> int:
    return process_histories(data["histories"], previous_value)


def process_histories(histories: list[list[int]], generate: Generator) -> int:
    return sum(extrapolate(values, generate) for values in histories)


def extrapolate(values: list[int], generate: Generator) -> int:
    """
    Raises:
        SolveError: If a row with fewer than 2 values is reached before a
            row of zeros.
    """
    if all(v == 0 for v in values):
        return 0

    if len(values) <= 1:
        raise SolveError(
            f"Need at least 2 values to extrapolate, got {values}"
        )

    rec = extrapolate(differences(values), generate)
    return generate(values, rec)


def differences(nums: list[int]) -> list[int]:
    return [b - a for a, b in zip(nums, nums[1:])]


# ============================================================================
# Parsing
# ============================================================================

def parse(text: str) -> Input:
    return Input(histories=[
        parse_ints(line, "history value")
        for line in split_lines(text)
        if line.strip()
    ])


def input_from(path: str | Path) -> Input:
    return parse(read_text(path))
