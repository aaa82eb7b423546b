"""
Day 11: Cosmic Expansion

https://adventofcode.com/2023/day/11

Every row and column without a galaxy grows to `factor` rows/columns. The
galaxies themselves never move in the parsed grid; their expanded coordinates
are computed on demand from the count of empty rows/columns before them.
"""

from pathlib import Path
from typing import TypedDict

from ..core.textio import read_text
from ..kernel.grid import Position, parse_grid, dims, positions_of

PART1_FACTOR = 2
PART2_FACTOR = 1_000_000


class Input(TypedDict):
    galaxies: list[Position]
    empty_rows: list[int]
    empty_cols: list[int]


def part1(data: Input) -> int:
    return expanded_distance_sum(data, PART1_FACTOR)


def part2(data: Input) -> int:
    return expanded_distance_sum(data, PART2_FACTOR)


def expanded_positions(data: Input, factor: int) -> list[Position]:
    """Galaxy positions after each empty row/column is replaced by `factor` copies."""
    empty_rows = set(data["empty_rows"])
    empty_cols = set(data["empty_cols"])

    def expand(index: int, empties: set[int]) -> int:
        before = sum(1 for e in empties if e < index)
        return index + before * (factor - 1)

    return [
        (expand(r, empty_rows), expand(c, empty_cols))
        for r, c in data["galaxies"]
    ]


def expanded_distance_sum(data: Input, factor: int) -> int:
    """
    Sum of Manhattan distances over all unordered galaxy pairs.

    Manhattan distance splits per axis, and on one axis the sum of |a - b|
    over all pairs of sorted values is sum(x_i * i - prefix_i).
    """
    positions = expanded_positions(data, factor)
    return (
        _pairwise_axis_sum([r for r, _ in positions])
        + _pairwise_axis_sum([c for _, c in positions])
    )


def _pairwise_axis_sum(values: list[int]) -> int:
    total = 0
    prefix = 0
    for i, x in enumerate(sorted(values)):
        total += x * i - prefix
        prefix += x
    return total


# ============================================================================
# Parsing
# ============================================================================

def parse(text: str) -> Input:
    grid = parse_grid(text, allowed=".#")
    H, W = dims(grid)

    return Input(
        galaxies=list(positions_of(grid, "#")),
        empty_rows=[r for r in range(H) if all(ch == "." for ch in grid[r])],
        empty_cols=[c for c in range(W) if all(grid[r][c] == "." for r in range(H))],
    )


def input_from(path: str | Path) -> Input:
    return parse(read_text(path))
