"""
Puzzle Text I/O

Reading puzzle files and splitting them into lines, blank-line separated
blocks and integer lists. Line endings are normalized (CRLF -> LF) before
anything is split, so files saved on Windows parse the same way.
"""

from pathlib import Path

from .errors import InputError, ParseError


def read_text(path: str | Path) -> str:
    """
    Read a puzzle file as UTF-8 text.

    Args:
        path: File to read.

    Returns:
        str: File contents with CRLF folded to LF.

    Raises:
        InputError: If the file cannot be opened or decoded.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Failed to read file: {path}: {e}") from e
    return normalize_newlines(text)


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_lines(text: str) -> list[str]:
    """Lines of text without trailing newline characters or a final empty line."""
    return normalize_newlines(text).splitlines()


def split_blocks(text: str) -> list[str]:
    """
    Split text on blank lines.

    Leading/trailing blank lines are dropped, and runs of several blank lines
    count as one separator.

    Returns:
        list[str]: Non-empty blocks, each without surrounding newlines.
    """
    blocks = []
    current = []
    for line in split_lines(text):
        if line.strip() == "":
            if current:
                blocks.append("\n".join(current))
                current = []
        else:
            current.append(line)
    if current:
        blocks.append("\n".join(current))
    return blocks


def parse_ints(text: str, what: str = "value") -> list[int]:
    """
    Parse whitespace-separated (possibly signed) integers.

    Args:
        text: Text such as " 41 48 83 -2".
        what: Noun used in the error message.

    Raises:
        ParseError: If any token is not an integer.
    """
    values = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError:
            raise ParseError(f"Invalid {what}: '{token}'") from None
    return values
