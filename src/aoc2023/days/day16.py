"""
Day 16: The Floor Will Be Lava

https://adventofcode.com/2023/day/16

A beam enters the contraption grid and is passed on, reflected by mirrors
('/', '\\') or split by splitters ('|', '-'). Beams may cross and loop, so
each (tile, heading) pair is followed at most once. The walk is a FIFO
queue of beam heads rather than recursion; real grids are deep enough to
blow Python's recursion limit.
"""

from collections import deque
from pathlib import Path
from typing import TypedDict

from ..core.textio import read_text
from ..kernel.grid import Position, parse_grid, dims, in_bounds
from ..kernel.directions import Direction, RIGHT, DOWN, LEFT, UP, step

TILES = "./\\|-"


class Input(TypedDict):
    grid: list[list[str]]


def outgoing(tile: str, heading: Direction) -> list[Direction]:
    """Headings of the beam(s) leaving a tile entered with `heading`."""
    dr, dc = heading
    if tile == "/":
        return [(-dc, -dr)]
    if tile == "\\":
        return [(dc, dr)]
    if tile == "|" and dr == 0:
        return [UP, DOWN]
    if tile == "-" and dc == 0:
        return [LEFT, RIGHT]
    return [heading]


def energized_count(G: list[list[str]], start: Position, heading: Direction) -> int:
    """Number of tiles crossed by the beam entering `start` with `heading`."""
    H, W = dims(G)
    seen: set[tuple[Position, Direction]] = set()
    queue = deque([(start, heading)])

    while queue:
        position, d = queue.popleft()
        if (position, d) in seen:
            continue
        seen.add((position, d))

        for nd in outgoing(G[position[0]][position[1]], d):
            r, c = step(position, nd)
            if in_bounds(r, c, H, W):
                queue.append(((r, c), nd))

    return len({position for position, _ in seen})


def starting_positions(G: list[list[str]]) -> list[tuple[Position, Direction]]:
    """Every edge tile with the heading that points into the grid."""
    H, W = dims(G)
    starts = []
    for row in range(H):
        starts.append(((row, 0), RIGHT))
        starts.append(((row, W - 1), LEFT))
    for col in range(W):
        starts.append(((0, col), DOWN))
        starts.append(((H - 1, col), UP))
    return starts


def part1(data: Input) -> int:
    return energized_count(data["grid"], (0, 0), RIGHT)


def part2(data: Input) -> int:
    return max(
        energized_count(data["grid"], position, heading)
        for position, heading in starting_positions(data["grid"])
    )


# ============================================================================
# Parsing
# ============================================================================

def parse(text: str) -> Input:
    return Input(grid=parse_grid(text, allowed=TILES))


def input_from(path: str | Path) -> Input:
    return parse(read_text(path))
