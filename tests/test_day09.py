"""
Day 9 Tests - Mirage Maintenance
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from aoc2023.core import ParseError, SolveError
from aoc2023.days import day09

INPUTS = Path(__file__).parent.parent / "inputs" / "day09"
needs_input = pytest.mark.skipif(
    not (INPUTS / "input.txt").exists(), reason="personal puzzle input not present"
)


@pytest.fixture
def sample():
    return day09.input_from(INPUTS / "sample.txt")


def test_sample_part1(sample):
    assert day09.part1(sample) == 114


def test_sample_part2(sample):
    assert day09.part2(sample) == 2


@needs_input
def test_part1():
    assert day09.part1(day09.input_from(INPUTS / "input.txt")) == 2043183816


@needs_input
def test_part2():
    assert day09.part2(day09.input_from(INPUTS / "input.txt")) == 1118


def test_extrapolate_each_history(sample):
    assert [day09.extrapolate(h, day09.next_value) for h in sample["histories"]] == [18, 28, 68]
    assert [day09.extrapolate(h, day09.previous_value) for h in sample["histories"]] == [-3, 0, 5]


def test_differences():
    assert day09.differences([0, 3, 6, 9]) == [3, 3, 3]
    assert day09.differences([5, 1]) == [-4]


def test_negative_values_parse():
    data = day09.parse("-1 -2 -3\n")
    assert day09.part1(data) == -4
    assert day09.part2(data) == 0


def test_too_few_values():
    with pytest.raises(SolveError, match="at least 2 values"):
        day09.extrapolate([1, 2, 4], day09.next_value)
    with pytest.raises(SolveError):
        day09.extrapolate([7], day09.next_value)


def test_parse_error():
    with pytest.raises(ParseError, match="Invalid history value: '1.5'"):
        day09.parse("1 1.5 2\n")


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
