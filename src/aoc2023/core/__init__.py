"""
Core foundation: errors, text I/O, hashing, receipts, puzzle registry.
"""

from .errors import PuzzleError, InputError, ParseError, SolveError
from .registry import puzzle_registry, day_key, RegistryError
from .hashing import blake3_hash, text_hash
from .textio import (
    read_text,
    normalize_newlines,
    split_lines,
    split_blocks,
    parse_ints
)
from .receipts import (
    Receipts,
    assert_double_run_equal,
    ReceiptError,
    DeterminismError
)

__all__ = [
    # Errors
    "PuzzleError",
    "InputError",
    "ParseError",
    "SolveError",

    # Registry
    "puzzle_registry",
    "day_key",
    "RegistryError",

    # Hashing
    "blake3_hash",
    "text_hash",

    # Text I/O
    "read_text",
    "normalize_newlines",
    "split_lines",
    "split_blocks",
    "parse_ints",

    # Receipts
    "Receipts",
    "assert_double_run_equal",
    "ReceiptError",
    "DeterminismError",
]
