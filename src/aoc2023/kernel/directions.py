"""
Compass Directions

Unit steps as (d_row, d_col) tuples. The frozen order RIGHT, DOWN, LEFT, UP
is used wherever a direction list has to be enumerated deterministically.
"""

from .grid import Position

Direction = tuple[int, int]

RIGHT: Direction = (0, 1)
DOWN: Direction = (1, 0)
LEFT: Direction = (0, -1)
UP: Direction = (-1, 0)

# Frozen enumeration order
DIRECTIONS: tuple[Direction, ...] = (RIGHT, DOWN, LEFT, UP)


def opposite(d: Direction) -> Direction:
    return (-d[0], -d[1])


def step(p: Position, d: Direction) -> Position:
    """Position one cell away from p in direction d (may be off-grid)."""
    return (p[0] + d[0], p[1] + d[1])

