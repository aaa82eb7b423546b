"""
Day 3: Gear Ratios

https://adventofcode.com/2023/day/3

An engine schematic: numbers and symbols scattered over a dot grid.

    467..114..
    ...*......
    ..35..633.
"""

import re
from pathlib import Path
from typing import TypedDict

from ..core.textio import read_text, split_lines
from ..kernel.grid import Position


# A run of digits, or any single character that is neither a digit nor '.'
_TOKEN = re.compile(r"\d+|[^.\d\s]")


class Number(TypedDict):
    position: Position  # leftmost digit
    value: int
    length: int


class Symbol(TypedDict):
    position: Position
    symbol: str


class Input(TypedDict):
    numbers: list[Number]
    symbols: list[Symbol]


def part1(data: Input) -> int:
    """Sum of part numbers (numbers touching any symbol, diagonals included)."""
    symbols_at = {symbol["position"] for symbol in data["symbols"]}

    return sum(
        number["value"]
        for number in data["numbers"]
        if neighbourhood(number) & symbols_at
    )


def part2(data: Input) -> int:
    """Sum of gear ratios: products of the two numbers around each '*' gear."""
    total = 0
    for symbol in data["symbols"]:
        if symbol["symbol"] != "*":
            continue
        numbers = numbers_around(symbol["position"], data["numbers"])
        if len(numbers) == 2:
            total += numbers[0]["value"] * numbers[1]["value"]
    return total


def numbers_around(position: Position, numbers: list[Number]) -> list[Number]:
    return [number for number in numbers if position in neighbourhood(number)]


def neighbourhood(number: Number) -> set[Position]:
    """
    Cells of the rectangle one larger than number on every side.

    The rectangle is clamped at row/col 0 but not at the far edges; positions
    past the grid simply never match a symbol.
    """
    row, col = number["position"]
    start_row = max(row - 1, 0)
    end_row = row + 1
    start_col = max(col - 1, 0)
    end_col = col + number["length"]

    return {
        (r, c)
        for r in range(start_row, end_row + 1)
        for c in range(start_col, end_col + 1)
    }


# ============================================================================
# Parsing
# ============================================================================

def parse_row(line: str, row: int) -> tuple[list[Number], list[Symbol]]:
    numbers = []
    symbols = []

    for match in _TOKEN.finditer(line):
        value = match.group()
        col = match.start()
        if value[0].isdigit():
            numbers.append(Number(position=(row, col), value=int(value), length=len(value)))
        else:
            symbols.append(Symbol(position=(row, col), symbol=value))

    return numbers, symbols


def parse(text: str) -> Input:
    numbers = []
    symbols = []
    for row, line in enumerate(split_lines(text)):
        row_numbers, row_symbols = parse_row(line, row)
        numbers.extend(row_numbers)
        symbols.extend(row_symbols)
    return Input(numbers=numbers, symbols=symbols)


def input_from(path: str | Path) -> Input:
    return parse(read_text(path))
