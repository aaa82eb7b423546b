"""
Day 6 Tests - Boat races

The integer root-finding must agree with brute force everywhere, including
exact-tie boundaries where t * (T - t) == D.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from aoc2023.core import ParseError
from aoc2023.days import day06

INPUTS = Path(__file__).parent.parent / "inputs" / "day06"
needs_input = pytest.mark.skipif(
    not (INPUTS / "input.txt").exists(), reason="personal puzzle input not present"
)


@pytest.fixture
def sample():
    return day06.input_from(INPUTS / "sample.txt")


def test_sample_part1(sample):
    assert day06.part1(sample) == 288


def test_sample_part2(sample):
    assert day06.part2(sample) == 71503


@needs_input
def test_part1():
    assert day06.part1(day06.input_from(INPUTS / "input.txt")) == 131376


@needs_input
def test_part2():
    assert day06.part2(day06.input_from(INPUTS / "input.txt")) == 34123437


def test_parse_sample(sample):
    assert sample["races"] == [
        {"time": 7, "distance": 9},
        {"time": 15, "distance": 40},
        {"time": 30, "distance": 200},
    ]
    assert sample["squished_race"] == {"time": 71530, "distance": 940200}


def test_ways_per_race(sample):
    assert [day06.ways_to_win(race) for race in sample["races"]] == [4, 8, 9]


def test_ways_to_win_matches_brute_force():
    for T in range(0, 40):
        for D in range(-2, T * T // 4 + 3):
            race = {"time": T, "distance": D}
            brute = sum(1 for t in range(T) if day06.distance_given_delay(race, t) > D)
            assert day06.ways_to_win(race) == brute, (T, D)
    print("✓ Root-finding agrees with brute force")


def test_distance_given_delay():
    race = {"time": 7, "distance": 9}
    assert day06.distance_given_delay(race, 0) == 0
    assert day06.distance_given_delay(race, 3) == 12
    assert day06.distance_given_delay(race, 7) == 0


@pytest.mark.parametrize("text, message", [
    ("Time: 7", "Expected two lines"),
    ("Time: 7 15\nDistance: 9", "count mismatch"),
    ("Time: 7\nDist: 9", "Expected a 'Distance:' line"),
    ("Time: 7 x\nDistance: 9 1", "Invalid time"),
    ("Time: 3\nDistance: -1", "Negative distance: -1"),
    ("Time: -7\nDistance: 9", "Negative time: -7"),
])
def test_parse_errors(text, message):
    with pytest.raises(ParseError, match=message):
        day06.parse(text)


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
