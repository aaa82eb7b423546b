"""
Grid kernel

Small pure helpers shared by the grid puzzles.

Components:
  - grid: parse/transpose/find on rectangular character grids
  - directions: RIGHT/DOWN/LEFT/UP unit steps
"""

from .grid import (
    Position,
    parse_grid,
    dims,
    in_bounds,
    find,
    positions_of,
    transpose
)
from .directions import (
    Direction,
    RIGHT,
    DOWN,
    LEFT,
    UP,
    DIRECTIONS,
    opposite,
    step
)

__all__ = [
    # Grid
    "Position",
    "parse_grid",
    "dims",
    "in_bounds",
    "find",
    "positions_of",
    "transpose",

    # Directions
    "Direction",
    "RIGHT",
    "DOWN",
    "LEFT",
    "UP",
    "DIRECTIONS",
    "opposite",
    "step",
]
