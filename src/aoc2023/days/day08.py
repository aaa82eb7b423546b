"""
Day 8: Haunted Wasteland

https://adventofcode.com/2023/day/8

    RL

    AAA = (BBB, CCC)
    BBB = (DDD, EEE)

A network of nodes, each with a left and right successor, walked by cycling
through the L/R instruction line.

Part 2 walks every "..A" node at once until all stand on "..Z" nodes. The
simultaneous walk is far too long to simulate; each ghost's first arrival at a
Z node is found separately and the answer is the LCM of those step counts.
The puzzle input is built so that each ghost loops with exactly that period.
"""

import math
import re
from itertools import cycle
from pathlib import Path
from typing import TypedDict

from ..core.errors import ParseError, SolveError
from ..core.textio import read_text, split_lines

_NODE = re.compile(r"^(\w+) = \((\w+), (\w+)\)$")

START = "AAA"
GOAL = "ZZZ"


class Input(TypedDict):
    directions: str                       # only 'L' / 'R'
    network: dict[str, tuple[str, str]]   # label -> (left, right)


def next_node(data: Input, node: str, direction: str) -> str:
    left, right = data["network"][node]
    return left if direction == "L" else right


def steps_until(data: Input, start: str, is_goal) -> int:
    """
    Steps from start until is_goal(node) holds, cycling the instructions.

    The walk is a deterministic function of (node, instruction index), so
    after len(directions) * len(network) steps without reaching a goal it must
    be looping forever.

    Raises:
        SolveError: If no goal node is reachable.
    """
    limit = len(data["directions"]) * len(data["network"])
    node = start
    for count, direction in enumerate(cycle(data["directions"]), start=1):
        node = next_node(data, node, direction)
        if is_goal(node):
            return count
        if count >= limit:
            break
    raise SolveError(f"No goal node reachable from '{start}'")


def part1(data: Input) -> int:
    if START not in data["network"]:
        raise SolveError(f"Network has no '{START}' node")
    return steps_until(data, START, lambda node: node == GOAL)


def part2(data: Input) -> int:
    starts = sorted(label for label in data["network"] if label.endswith("A"))
    if not starts:
        raise SolveError("Network has no nodes ending in 'A'")

    cycle_lengths = [
        steps_until(data, start, lambda node: node.endswith("Z"))
        for start in starts
    ]
    return math.lcm(*cycle_lengths)


# ============================================================================
# Parsing
# ============================================================================

def parse_node(line: str) -> tuple[str, str, str]:
    """Parse "AAA = (BBB, CCC)" into (name, left, right)."""
    match = _NODE.match(line.strip())
    if match is None:
        raise ParseError(f"Invalid node format: '{line}'")
    return match.group(1), match.group(2), match.group(3)


def parse_instructions(line: str) -> str:
    line = line.strip()
    if not line:
        raise ParseError("Empty instruction line")
    for ch in line:
        if ch not in "LR":
            raise ParseError(f"Unknown instruction character: '{ch}'")
    return line


def parse(text: str) -> Input:
    lines = split_lines(text)
    if len(lines) < 3:
        raise ParseError("Expected at least three lines in the input")
    if lines[1].strip():
        raise ParseError("Expected a blank line after the instructions")

    network = {}
    for line in lines[2:]:
        if not line.strip():
            continue
        name, left, right = parse_node(line)
        if name in network:
            raise ParseError(f"Duplicate node: '{name}'")
        network[name] = (left, right)

    for name, successors in network.items():
        for successor in successors:
            if successor not in network:
                raise ParseError(f"Node '{name}' points to unknown node '{successor}'")

    return Input(directions=parse_instructions(lines[0]), network=network)


def input_from(path: str | Path) -> Input:
    return parse(read_text(path))
