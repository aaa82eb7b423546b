"""
Character Grids

A grid is a list of H rows, each a list of W single-character strings,
indexed G[r][c] with r growing downward and c growing rightward. Every grid
built here is rectangular; ragged input is rejected at parse time.
"""

from typing import Iterator

from ..core.errors import ParseError
from ..core.textio import split_lines

Position = tuple[int, int]


def parse_grid(text: str, allowed: str | None = None) -> list[list[str]]:
    """
    Parse a block of text into a rectangular character grid.

    Args:
        text: Grid text, one row per line.
        allowed: If given, every cell must be one of these characters.

    Returns:
        list[list[str]]: H rows of W characters.

    Raises:
        ParseError: If the grid is empty, ragged, or has a disallowed character.
    """
    lines = split_lines(text)
    if not lines:
        raise ParseError("Empty grid")

    W = len(lines[0])
    for r, line in enumerate(lines):
        if len(line) != W:
            raise ParseError(
                f"Ragged grid: row {r} has width {len(line)}, expected {W}"
            )
        if allowed is not None:
            for c, ch in enumerate(line):
                if ch not in allowed:
                    raise ParseError(
                        f"Unexpected character '{ch}' at row {r}, col {c}"
                    )

    return [list(line) for line in lines]


def dims(G: list[list[str]]) -> tuple[int, int]:
    """(H, W) of a rectangular grid; (0, 0) for an empty one."""
    H = len(G)
    W = len(G[0]) if H > 0 else 0
    return H, W


def in_bounds(r: int, c: int, H: int, W: int) -> bool:
    return 0 <= r < H and 0 <= c < W


def find(G: list[list[str]], target: str) -> Position | None:
    """Row-major first position holding target, or None."""
    for r, row in enumerate(G):
        for c, ch in enumerate(row):
            if ch == target:
                return (r, c)
    return None


def positions_of(G: list[list[str]], target: str) -> Iterator[Position]:
    """All positions holding target, in row-major order."""
    for r, row in enumerate(G):
        for c, ch in enumerate(row):
            if ch == target:
                yield (r, c)


def transpose(G: list[list[str]]) -> list[list[str]]:
    """
    Swap rows and columns: T[c][r] == G[r][c].

    Edge case:
        An empty grid (or one with empty rows) transposes to [].
    """
    if not G or not G[0]:
        return []
    return [list(col) for col in zip(*G)]
