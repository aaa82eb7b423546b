"""
Day 13: Point of Incidence

https://adventofcode.com/2023/day/13

Each pattern has one line of reflection, either between two rows or between
two columns. Part 2 allows exactly one smudge: the reflection must hold after
flipping a single cell, so we look for a line where the mirrored halves differ
in exactly one position.
"""

from pathlib import Path
from typing import TypedDict

from ..core.errors import ParseError
from ..core.textio import read_text, split_blocks
from ..kernel.grid import parse_grid, transpose


class Input(TypedDict):
    grids: list[list[list[str]]]


def part1(data: Input) -> int:
    return sum(score_grid(grid, smudges=0) for grid in data["grids"])


def part2(data: Input) -> int:
    return sum(score_grid(grid, smudges=1) for grid in data["grids"])


def score_grid(grid: list[list[str]], smudges: int) -> int:
    """100 * rows above a horizontal mirror + columns left of a vertical one."""
    score = 0

    row = find_mirror_point(grid, smudges)
    if row is not None:
        score += row * 100

    column = find_mirror_point(transpose(grid), smudges)
    if column is not None:
        score += column

    return score


def find_mirror_point(rows: list[list[str]], smudges: int) -> int | None:
    """
    First k in 1..len(rows)-1 such that reflecting around the line between
    rows k-1 and k changes exactly `smudges` cells; None if there is none.

    Rows fan out from the line in both directions until either edge is hit.
    A candidate is abandoned as soon as the differences exceed `smudges`.
    """
    for k in range(1, len(rows)):
        diffs = 0
        for above, below in zip(reversed(rows[:k]), rows[k:]):
            diffs += sum(1 for a, b in zip(above, below) if a != b)
            if diffs > smudges:
                break
        if diffs == smudges:
            return k
    return None


# ============================================================================
# Parsing
# ============================================================================

def parse(text: str) -> Input:
    """
    Raises:
        ParseError: If a pattern is ragged, has fewer than 2 rows/columns, or
            contains anything but '.' and '#'.
    """
    grids = []
    for i, block in enumerate(split_blocks(text)):
        try:
            grid = parse_grid(block, allowed=".#")
        except ParseError as e:
            raise ParseError(f"Pattern {i}: {e}") from e
        if len(grid) < 2 or len(grid[0]) < 2:
            raise ParseError(f"Pattern {i} is smaller than 2x2")
        grids.append(grid)
    return Input(grids=grids)


def input_from(path: str | Path) -> Input:
    return parse(read_text(path))
