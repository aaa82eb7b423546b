"""
Error hierarchy shared by every day.

Read failures, malformed puzzle text and unsolvable inputs each get their own
exception so the runner can report them uniformly and exit non-zero.
"""


class PuzzleError(Exception):
    """Base class for every failure raised while reading, parsing or solving."""
    pass


class InputError(PuzzleError):
    """Raised when a puzzle file cannot be read."""
    pass


class ParseError(PuzzleError):
    """Raised when puzzle text does not match the expected format."""
    pass


class SolveError(PuzzleError):
    """Raised when well-formed input has no answer (e.g. unreachable goal)."""
    pass
