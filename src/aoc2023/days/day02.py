"""
Day 2: Cube Conundrum

https://adventofcode.com/2023/day/2

Games of colored cubes drawn from a bag in several handfuls.

Line format:
    Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
"""

from pathlib import Path
from typing import TypedDict

from ..core.errors import ParseError
from ..core.textio import read_text, split_lines


COLORS = ("red", "green", "blue")

# Bag contents for part 1
CUBE_LIMITS = {"red": 12, "green": 13, "blue": 14}


class Handful(TypedDict):
    red: int
    green: int
    blue: int


class Game(TypedDict):
    game_id: int
    handfuls: list[Handful]


class Input(TypedDict):
    games: list[Game]


def part1(data: Input) -> int:
    """Sum of ids of games possible with CUBE_LIMITS cubes in the bag."""
    return sum(
        game["game_id"]
        for game in data["games"]
        if all(
            handful[color] <= CUBE_LIMITS[color]
            for handful in game["handfuls"]
            for color in COLORS
        )
    )


def part2(data: Input) -> int:
    """Sum of powers of the minimal bag for each game."""
    total = 0
    for game in data["games"]:
        minimal = Handful(red=0, green=0, blue=0)
        for handful in game["handfuls"]:
            for color in COLORS:
                minimal[color] = max(minimal[color], handful[color])
        total += minimal["red"] * minimal["green"] * minimal["blue"]
    return total


# ============================================================================
# Parsing
# ============================================================================

def parse_handful(s: str) -> Handful:
    """
    Parse "3 blue, 4 red" into a Handful. Absent colors count 0, repeated
    colors are added together.

    Raises:
        ParseError: On a malformed pair, a bad count or an unknown color.
    """
    handful = Handful(red=0, green=0, blue=0)

    for pair in s.split(","):
        parts = pair.split()
        if len(parts) != 2:
            raise ParseError(f"Invalid format: '{pair.strip()}'")

        count_text, color = parts
        try:
            count = int(count_text)
        except ValueError:
            raise ParseError(f"Invalid number: '{count_text}'") from None

        if color not in COLORS:
            raise ParseError(f"Invalid color: '{color}'")

        handful[color] += count

    return handful


def parse_game(line: str) -> Game:
    """
    Parse one "Game <id>: ..." line.

    Raises:
        ParseError: If the label or any handful is malformed.
    """
    label, sep, data = line.partition(":")
    if not sep:
        raise ParseError("Invalid game line format")

    label_parts = label.split()
    if len(label_parts) != 2 or label_parts[0] != "Game":
        raise ParseError("No game number found in label")
    try:
        game_id = int(label_parts[1])
    except ValueError:
        raise ParseError("Invalid game number format") from None

    handfuls = []
    for segment in data.split(";"):
        try:
            handfuls.append(parse_handful(segment))
        except ParseError as e:
            raise ParseError(f"Error parsing handful: {e}") from e

    return Game(game_id=game_id, handfuls=handfuls)


def parse(text: str) -> Input:
    games = []
    for line in split_lines(text):
        if not line.strip():
            continue
        try:
            games.append(parse_game(line))
        except ParseError as e:
            raise ParseError(f"Failed to parse line: {line}\nError: {e}") from e
    return Input(games=games)


def input_from(path: str | Path) -> Input:
    return parse(read_text(path))
