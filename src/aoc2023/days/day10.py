"""
Day 10: Pipe Maze

https://adventofcode.com/2023/day/10

    ..F7.
    .FJ|.
    SJ.L7
    |F--J
    LJ...

The animal sits at S on a single closed loop of pipes. Part 1 is the
distance to the farthest loop tile (half the loop length). Part 2 counts the
tiles enclosed by the loop: the shoelace formula gives the polygon area
spanned by the loop's tile centres, and Pick's theorem turns that area into a
count of interior lattice points:

    interior = area - boundary / 2 + 1
"""

from pathlib import Path
from typing import TypedDict

from ..core.errors import ParseError, SolveError
from ..core.textio import read_text
from ..kernel.grid import Position, parse_grid, dims, in_bounds, find
from ..kernel.directions import (
    Direction, RIGHT, DOWN, LEFT, UP, DIRECTIONS, opposite, step
)


# Directions each pipe opens toward
PIPE_OPENINGS: dict[str, frozenset[Direction]] = {
    "|": frozenset({UP, DOWN}),
    "-": frozenset({LEFT, RIGHT}),
    "L": frozenset({UP, RIGHT}),
    "J": frozenset({UP, LEFT}),
    "7": frozenset({DOWN, LEFT}),
    "F": frozenset({DOWN, RIGHT}),
    ".": frozenset(),
    "S": frozenset(DIRECTIONS),
}


class Input(TypedDict):
    grid: list[list[str]]   # S already replaced by its real pipe
    s_position: Position


# ============================================================================
# Connectivity
# ============================================================================

def valid_directions(G: list[list[str]], p: Position) -> list[Direction]:
    """
    Directions from p to a neighbour whose pipe lines up with p's pipe.

    Returned in the frozen RIGHT, DOWN, LEFT, UP order.
    """
    H, W = dims(G)
    this_openings = PIPE_OPENINGS[G[p[0]][p[1]]]

    directions = []
    for d in DIRECTIONS:
        if d not in this_openings:
            continue
        r, c = step(p, d)
        if not in_bounds(r, c, H, W):
            continue
        if opposite(d) in PIPE_OPENINGS[G[r][c]]:
            directions.append(d)
    return directions


def pipe_connecting(directions: list[Direction]) -> str:
    """The pipe character whose two openings are exactly directions."""
    wanted = frozenset(directions)
    for ch, openings in PIPE_OPENINGS.items():
        if ch != "S" and len(openings) == 2 and openings == wanted:
            return ch
    raise ParseError(f"No pipe connects directions {sorted(directions)}")


def trace_loop(data: Input) -> list[Position]:
    """
    Loop tiles in walk order, starting at S.

    Raises:
        SolveError: If the walk leaves the grid, hits a pipe that does not
            connect back, or never returns to S.
    """
    G = data["grid"]
    H, W = dims(G)
    start = data["s_position"]

    loop = [start]
    position = start
    arrived_by = None

    while True:
        openings = PIPE_OPENINGS[G[position[0]][position[1]]]
        heading = next(
            d for d in DIRECTIONS
            if d in openings and (arrived_by is None or d != opposite(arrived_by))
        )

        r, c = step(position, heading)
        if not in_bounds(r, c, H, W) or opposite(heading) not in PIPE_OPENINGS[G[r][c]]:
            raise SolveError(f"Broken loop at {position} heading {heading}")

        position, arrived_by = (r, c), heading
        if position == start:
            return loop

        loop.append(position)
        if len(loop) > H * W:
            raise SolveError("Loop never returns to S")


# ============================================================================
# Parts
# ============================================================================

def part1(data: Input) -> int:
    return len(trace_loop(data)) // 2


def part2(data: Input) -> int:
    loop = trace_loop(data)

    # Shoelace: twice the signed area
    twice_area = 0
    for (r1, c1), (r2, c2) in zip(loop, loop[1:] + loop[:1]):
        twice_area += r1 * c2 - r2 * c1
    twice_area = abs(twice_area)

    # Pick: i = A - b/2 + 1
    return (twice_area - len(loop)) // 2 + 1


# ============================================================================
# Parsing
# ============================================================================

def parse(text: str) -> Input:
    """
    Raises:
        ParseError: If the grid has no S, or S does not connect to exactly
            two neighbouring pipes.
    """
    grid = parse_grid(text, allowed="".join(PIPE_OPENINGS))

    s_position = find(grid, "S")
    if s_position is None:
        raise ParseError("Couldn't find the S")

    directions = valid_directions(grid, s_position)
    if len(directions) != 2:
        raise ParseError(
            f"Expected two valid directions from the S, found {len(directions)}"
        )

    grid[s_position[0]][s_position[1]] = pipe_connecting(directions)

    return Input(grid=grid, s_position=s_position)


def input_from(path: str | Path) -> Input:
    return parse(read_text(path))
