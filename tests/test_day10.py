"""
Day 10 Tests - Pipe Maze

Loop tracing, S replacement and the shoelace/Pick interior count.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from aoc2023.core import ParseError, SolveError
from aoc2023.days import day10
from aoc2023.kernel import RIGHT, DOWN

INPUTS = Path(__file__).parent.parent / "inputs" / "day10"
needs_input = pytest.mark.skipif(
    not (INPUTS / "input.txt").exists(), reason="personal puzzle input not present"
)


def test_sample_part1():
    assert day10.part1(day10.input_from(INPUTS / "sample-1.txt")) == 8


def test_sample_part2():
    assert day10.part2(day10.input_from(INPUTS / "sample-2.txt")) == 4


def test_squeezed_pipes_part2():
    """Tiles reachable only by squeezing between pipes are still outside."""
    assert day10.part2(day10.input_from(INPUTS / "sample-3.txt")) == 4


def test_sample1_has_one_enclosed_tile():
    assert day10.part2(day10.input_from(INPUTS / "sample-1.txt")) == 1


@needs_input
def test_part1():
    assert day10.part1(day10.input_from(INPUTS / "input.txt")) == 6828


def test_s_is_replaced_by_connecting_pipe():
    data = day10.input_from(INPUTS / "sample-1.txt")
    assert data["s_position"] == (2, 0)
    assert data["grid"][2][0] == "F"

    data = day10.input_from(INPUTS / "sample-2.txt")
    assert data["s_position"] == (1, 1)
    assert data["grid"][1][1] == "F"


def test_trace_loop_length():
    data = day10.input_from(INPUTS / "sample-1.txt")
    loop = day10.trace_loop(data)
    assert len(loop) == 16
    assert loop[0] == (2, 0)
    assert len(set(loop)) == 16


def test_smallest_loop():
    data = day10.parse(".....\n.S-7.\n.|.|.\n.L-J.\n.....\n")
    assert day10.part1(data) == 4
    assert day10.part2(data) == 1


def test_valid_directions_and_pipe_connecting():
    data = day10.parse("S7\nLJ\n")
    assert day10.valid_directions(data["grid"], (0, 0)) == [RIGHT, DOWN]
    assert day10.pipe_connecting([RIGHT, DOWN]) == "F"


def test_missing_s():
    with pytest.raises(ParseError, match="Couldn't find the S"):
        day10.parse("F7\nLJ\n")


def test_s_with_three_connections():
    with pytest.raises(ParseError, match="Expected two valid directions"):
        day10.parse(".|.\n-S-\n...\n")


def test_broken_loop():
    # S connects right and down, but the pipe below leads off the grid
    data = day10.parse("S7\n|.\n")
    with pytest.raises(SolveError, match="Broken loop"):
        day10.part1(data)


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
