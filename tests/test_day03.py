"""
Day 3 Tests - Gear Ratios
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from aoc2023.days import day03

INPUTS = Path(__file__).parent.parent / "inputs" / "day03"
needs_input = pytest.mark.skipif(
    not (INPUTS / "input.txt").exists(), reason="personal puzzle input not present"
)


@pytest.fixture
def sample():
    return day03.input_from(INPUTS / "sample.txt")


def test_sample_part1(sample):
    assert day03.part1(sample) == 4361


def test_sample_part2(sample):
    assert day03.part2(sample) == 467835


@needs_input
def test_part1():
    assert day03.part1(day03.input_from(INPUTS / "input.txt")) == 554003


@needs_input
def test_part2():
    assert day03.part2(day03.input_from(INPUTS / "input.txt")) == 87263515


def test_parse_row():
    numbers, symbols = day03.parse_row("467..114..", 0)
    assert [n["value"] for n in numbers] == [467, 114]
    assert numbers[1]["position"] == (0, 5)
    assert numbers[1]["length"] == 3
    assert symbols == []

    numbers, symbols = day03.parse_row("...$.*....", 8)
    assert numbers == []
    assert [(s["symbol"], s["position"]) for s in symbols] == [("$", (8, 3)), ("*", (8, 5))]


def test_neighbourhood_clamps_at_origin():
    number = {"position": (0, 0), "value": 5, "length": 1}
    assert day03.neighbourhood(number) == {(0, 0), (0, 1), (1, 0), (1, 1)}


def test_gear_needs_exactly_two_numbers():
    data = day03.parse("1*2\n.3.\n")
    assert day03.part2(data) == 0
    data = day03.parse("1*2\n...\n")
    assert day03.part2(data) == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
