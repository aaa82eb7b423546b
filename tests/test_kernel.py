"""
Grid Kernel Tests

Verifies parse_grid validation, transpose, find and the direction helpers.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from aoc2023.core import ParseError
from aoc2023.kernel import (
    parse_grid,
    dims,
    in_bounds,
    find,
    positions_of,
    transpose,
    RIGHT,
    DOWN,
    LEFT,
    UP,
    DIRECTIONS,
    opposite,
    step,
)


def test_parse_grid_rectangular():
    G = parse_grid("ab\ncd\nef\n")
    assert G == [["a", "b"], ["c", "d"], ["e", "f"]]
    assert dims(G) == (3, 2)


def test_parse_grid_rejects_ragged():
    with pytest.raises(ParseError, match="Ragged grid: row 1"):
        parse_grid("abc\nab\n")


def test_parse_grid_rejects_unexpected_character():
    with pytest.raises(ParseError, match="Unexpected character 'x' at row 0, col 1"):
        parse_grid(".x.\n...", allowed=".#")


def test_parse_grid_rejects_empty():
    with pytest.raises(ParseError, match="Empty grid"):
        parse_grid("")


def test_transpose():
    G = parse_grid("abc\ndef")
    T = transpose(G)
    assert T == [["a", "d"], ["b", "e"], ["c", "f"]]
    assert transpose(T) == G
    assert transpose([]) == []


def test_find_and_positions_of():
    G = parse_grid("..#\n#..\n..#")
    assert find(G, "#") == (0, 2)
    assert find(G, "S") is None
    assert list(positions_of(G, "#")) == [(0, 2), (1, 0), (2, 2)]


def test_bounds():
    assert in_bounds(0, 0, 2, 3)
    assert in_bounds(1, 2, 2, 3)
    assert not in_bounds(2, 0, 2, 3)
    assert not in_bounds(0, -1, 2, 3)


def test_directions():
    assert DIRECTIONS == (RIGHT, DOWN, LEFT, UP)
    for d in DIRECTIONS:
        assert opposite(opposite(d)) == d
        assert step(step((5, 5), d), opposite(d)) == (5, 5)
    assert step((0, 0), RIGHT) == (0, 1)
    assert step((0, 0), DOWN) == (1, 0)
    assert opposite(LEFT) == RIGHT


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
