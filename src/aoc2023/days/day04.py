"""
Day 4: Scratchcards

https://adventofcode.com/2023/day/4

    Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
"""

from pathlib import Path
from typing import TypedDict

from ..core.errors import ParseError
from ..core.textio import read_text, split_lines, parse_ints


class Card(TypedDict):
    winning_numbers: list[int]
    my_numbers: list[int]


class Input(TypedDict):
    cards: list[Card]


def count_matches(card: Card) -> int:
    """How many of my_numbers appear among winning_numbers."""
    winning = set(card["winning_numbers"])
    return sum(1 for n in card["my_numbers"] if n in winning)


def part1(data: Input) -> int:
    total = 0
    for card in data["cards"]:
        matches = count_matches(card)
        if matches > 0:
            total += 2 ** (matches - 1)
    return total


def part2(data: Input) -> int:
    """
    Total scratchcards once every won copy has been processed.

    Card i with m matches wins one copy of each of the next m cards, for every
    copy of card i held. Wins never extend past the last card.
    """
    cards = data["cards"]
    copies = [1] * len(cards)

    for i, card in enumerate(cards):
        last = min(i + count_matches(card), len(cards) - 1)
        for j in range(i + 1, last + 1):
            copies[j] += copies[i]

    return sum(copies)


# ============================================================================
# Parsing
# ============================================================================

def parse_card(line: str) -> Card:
    """
    Raises:
        ParseError: If the "Card n: " prefix or the '|' separator is missing,
            or a number is not an integer.
    """
    _, sep, numbers_part = line.partition(": ")
    if not sep:
        raise ParseError("Invalid format: missing 'Card n: '")

    number_sets = numbers_part.split("|")
    if len(number_sets) != 2:
        raise ParseError("Invalid format: missing '|'")

    return Card(
        winning_numbers=parse_ints(number_sets[0], "number"),
        my_numbers=parse_ints(number_sets[1], "number"),
    )


def parse(text: str) -> Input:
    return Input(cards=[parse_card(line) for line in split_lines(text) if line.strip()])


def input_from(path: str | Path) -> Input:
    return parse(read_text(path))
