"""
Day 5 Tests - Seed range remapping

Single-number mapping for part 1 and interval splitting for part 2.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from aoc2023.core import ParseError, SolveError
from aoc2023.days import day05

INPUTS = Path(__file__).parent.parent / "inputs" / "day05"
needs_input = pytest.mark.skipif(
    not (INPUTS / "input.txt").exists(), reason="personal puzzle input not present"
)


@pytest.fixture
def sample():
    return day05.input_from(INPUTS / "sample.txt")


def test_sample_part1(sample):
    assert day05.part1(sample) == 35


def test_sample_part2(sample):
    assert day05.part2(sample) == 46


@needs_input
def test_part1():
    assert day05.part1(day05.input_from(INPUTS / "input.txt")) == 318728750


def test_parse_sample(sample):
    assert sample["seeds"] == [79, 14, 55, 13]
    assert len(sample["maps"]) == 7
    assert sample["maps"][0]["title"] == "seed-to-soil"
    assert sample["maps"][0]["ranges"][0] == {"dest": 50, "source": 98, "size": 2}


def test_seed_to_soil(sample):
    seed_to_soil = sample["maps"][0]
    assert [day05.map_number(seed_to_soil, s) for s in (79, 14, 55, 13)] == [81, 14, 57, 13]
    assert day05.map_number(seed_to_soil, 98) == 50
    assert day05.map_number(seed_to_soil, 100) == 100


def test_locations(sample):
    assert [day05.location_of(s, sample["maps"]) for s in (79, 14, 55, 13)] == [82, 43, 86, 35]


def test_map_intervals_splits_at_boundaries(sample):
    seed_to_soil = sample["maps"][0]

    # Fully inside 52 50 48
    assert day05.map_intervals(seed_to_soil, [(79, 93)]) == [(81, 95)]

    # Straddles the start of 52 50 48
    assert sorted(day05.map_intervals(seed_to_soil, [(40, 60)])) == [(40, 50), (52, 62)]

    # Covers both ranges and beyond
    assert sorted(day05.map_intervals(seed_to_soil, [(45, 105)])) == [
        (45, 50), (50, 52), (52, 100), (100, 105)
    ]


def test_intervals_agree_with_single_numbers(sample):
    """Every seed of a small interval lands inside the mapped intervals."""
    intervals = [(40, 60)]
    for step in sample["maps"]:
        intervals = day05.map_intervals(step, intervals)

    for seed in range(40, 60):
        location = day05.location_of(seed, sample["maps"])
        assert any(start <= location < end for start, end in intervals)
    assert sum(end - start for start, end in intervals) == 20


def test_odd_seed_list_has_no_ranges():
    data = day05.parse("seeds: 1 2 3\n\nx-to-y map:\n0 0 1\n")
    assert day05.part1(data) == 1
    with pytest.raises(SolveError, match="odd length"):
        day05.part2(data)


@pytest.mark.parametrize("text, message", [
    ("seeds: 1 2", "Expected at least 2 segments"),
    ("seed: 1 2\n\nx-to-y map:\n0 0 1", "doesn't start with 'seeds: '"),
    ("seeds: 1 2\n\nx-to-y map:", "Need at least 2 lines"),
    ("seeds: 1 2\n\nx-to-y map:\n0 0", "exactly three integers"),
    ("seeds: 1 2\n\nx-to-y map:\n0 a 1", "non-integer"),
    ("seeds: 1 -2\n\nx-to-y map:\n0 0 1", "non-negative seed"),
])
def test_parse_errors(text, message):
    with pytest.raises(ParseError, match=message):
        day05.parse(text)


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
