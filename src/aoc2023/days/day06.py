"""
Day 6: Wait For It

https://adventofcode.com/2023/day/6

    Time:      7  15   30
    Distance:  9  40  200

Holding the button for t ms of a T ms race travels t * (T - t) mm. The
winning hold times are the integers strictly between the two roots of
t^2 - T*t + D = 0, found here with exact integer arithmetic.
"""

import math
from pathlib import Path
from typing import TypedDict

from ..core.errors import ParseError
from ..core.textio import read_text, split_lines, parse_ints


class Race(TypedDict):
    time: int
    distance: int


class Input(TypedDict):
    races: list[Race]
    # Part 2: every line's digits squished into a single number
    squished_race: Race


def distance_given_delay(race: Race, hold_delay: int) -> int:
    if hold_delay >= race["time"]:
        return 0
    return hold_delay * (race["time"] - hold_delay)


def ways_to_win(race: Race) -> int:
    """
    Count integer hold delays t in [0, T) with t * (T - t) > D.

    The first winning delay is near (T - sqrt(T^2 - 4D)) / 2. math.isqrt
    gives the floor of the root; the candidate is then nudged up or down until
    it is the smallest winning t. The winners are symmetric around T/2, so the
    last winner is T - first, capped at T - 1 when D < 0 lets t = 0 win.
    """
    T, D = race["time"], race["distance"]

    discriminant = T * T - 4 * D
    if discriminant <= 0:
        return 0

    first = max((T - math.isqrt(discriminant)) // 2, 0)
    while first <= T // 2 and distance_given_delay(race, first) <= D:
        first += 1
    while first > 0 and distance_given_delay(race, first - 1) > D:
        first -= 1

    if distance_given_delay(race, first) <= D:
        return 0
    last = min(T - first, T - 1)
    return last - first + 1


def part1(data: Input) -> int:
    return math.prod(ways_to_win(race) for race in data["races"])


def part2(data: Input) -> int:
    return ways_to_win(data["squished_race"])


# ============================================================================
# Parsing
# ============================================================================

def _line_values(line: str, label: str) -> tuple[list[int], int]:
    """(individual ints, squished int) for a "Label: 7 15 30" line."""
    prefix, sep, rest = line.partition(":")
    if not sep or prefix.strip() != label:
        raise ParseError(f"Expected a '{label}:' line, got: '{line}'")

    values = parse_ints(rest, label.lower())
    if not values:
        raise ParseError(f"No values on the '{label}:' line")
    negative = [v for v in values if v < 0]
    if negative:
        raise ParseError(f"Negative {label.lower()}: {negative[0]}")

    squished = "".join(rest.split())
    return values, int(squished)


def parse(text: str) -> Input:
    lines = [line for line in split_lines(text) if line.strip()]
    if len(lines) != 2:
        raise ParseError("Expected two lines in input")

    times, squished_time = _line_values(lines[0], "Time")
    distances, squished_distance = _line_values(lines[1], "Distance")

    if len(times) != len(distances):
        raise ParseError(
            f"Time/Distance count mismatch: {len(times)} times, {len(distances)} distances"
        )

    return Input(
        races=[Race(time=t, distance=d) for t, d in zip(times, distances)],
        squished_race=Race(time=squished_time, distance=squished_distance),
    )


def input_from(path: str | Path) -> Input:
    return parse(read_text(path))
