"""
Advent of Code 2023

Deterministic, receipts-backed solutions for the 2023 daily puzzles.
"""

__version__ = "0.1.0"

from .days import SOLVERS

__all__ = [
    "SOLVERS",
]
