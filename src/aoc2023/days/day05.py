"""
Day 5: If You Give A Seed A Fertilizer

https://adventofcode.com/2023/day/5

Seeds are pushed through a chain of mapping steps (seed-to-soil,
soil-to-fertilizer, ..., humidity-to-location). Each step is a list of
ranges "dest source size"; numbers outside every range map to themselves.

Part 2 reinterprets the seed list as (start, length) pairs, which covers
billions of seeds. Instead of mapping seeds one at a time, whole half-open
intervals are split at range boundaries and shifted step by step.
"""

from pathlib import Path
from typing import TypedDict

from ..core.errors import ParseError, SolveError
from ..core.textio import read_text, split_blocks, split_lines

Interval = tuple[int, int]  # half-open [start, end)


class Range(TypedDict):
    dest: int
    source: int
    size: int


class MappingStep(TypedDict):
    title: str
    ranges: list[Range]


class Input(TypedDict):
    seeds: list[int]
    maps: list[MappingStep]


# ============================================================================
# Single numbers
# ============================================================================

def map_number(step: MappingStep, n: int) -> int:
    """Map n through the first range that contains it, else unchanged."""
    for rng in step["ranges"]:
        if rng["source"] <= n < rng["source"] + rng["size"]:
            return rng["dest"] + (n - rng["source"])
    return n


def location_of(seed: int, maps: list[MappingStep]) -> int:
    value = seed
    for step in maps:
        value = map_number(step, value)
    return value


def part1(data: Input) -> int:
    if not data["seeds"]:
        raise SolveError("No seeds to map")
    return min(location_of(seed, data["maps"]) for seed in data["seeds"])


# ============================================================================
# Intervals
# ============================================================================

def map_intervals(step: MappingStep, intervals: list[Interval]) -> list[Interval]:
    """
    Push half-open intervals through one mapping step.

    Each range in turn carves the still-unmapped pieces into a before part,
    an overlap (shifted by dest - source) and an after part. Pieces that no
    range touches pass through unchanged. Earlier ranges take precedence,
    matching map_number.

    Returns:
        list[Interval]: Mapped intervals (not merged, order unspecified).
    """
    mapped = []
    pending = list(intervals)

    for rng in step["ranges"]:
        src_start = rng["source"]
        src_end = rng["source"] + rng["size"]
        shift = rng["dest"] - rng["source"]

        unmatched = []
        for start, end in pending:
            before_end = min(end, src_start)
            if start < before_end:
                unmatched.append((start, before_end))

            lo, hi = max(start, src_start), min(end, src_end)
            if lo < hi:
                mapped.append((lo + shift, hi + shift))

            after_start = max(start, src_end)
            if after_start < end:
                unmatched.append((after_start, end))
        pending = unmatched

    return mapped + pending


def seed_intervals(seeds: list[int]) -> list[Interval]:
    """
    Raises:
        SolveError: If the seed list has odd length.
    """
    if len(seeds) % 2 != 0:
        raise SolveError(f"Seed list has odd length {len(seeds)}; expected (start, length) pairs")
    return [
        (start, start + length)
        for start, length in zip(seeds[0::2], seeds[1::2])
        if length > 0
    ]


def part2(data: Input) -> int:
    intervals = seed_intervals(data["seeds"])
    for step in data["maps"]:
        intervals = map_intervals(step, intervals)

    if not intervals:
        raise SolveError("No seed ranges to map")
    return min(start for start, _ in intervals)


# ============================================================================
# Parsing
# ============================================================================

def parse_range(line: str) -> Range:
    """Parse "50 98 2" (dest, source, size)."""
    parts = line.split()
    if len(parts) != 3:
        raise ParseError(f"Range does not contain exactly three integers: '{line}'")
    try:
        dest, source, size = (int(p) for p in parts)
    except ValueError:
        raise ParseError(f"Range contains a non-integer value: '{line}'") from None
    if size < 0:
        raise ParseError(f"Range has negative size: '{line}'")
    return Range(dest=dest, source=source, size=size)


def parse_step(block: str) -> MappingStep:
    """
    Parse a mapping block:

        soil-to-fertilizer map:
        0 15 37
        37 52 2
    """
    lines = split_lines(block)
    if len(lines) < 2:
        raise ParseError(
            "Need at least 2 lines, one for the map title, the rest for ranges"
        )

    title = lines[0].strip()
    if not title.endswith("map:"):
        raise ParseError(f"Expected a map title, got: '{title}'")

    return MappingStep(title=title[:-len("map:")].strip(), ranges=[parse_range(line) for line in lines[1:]])


def parse_seeds(line: str) -> list[int]:
    """Parse "seeds: 79 14 55 13"."""
    if not line.startswith("seeds:"):
        raise ParseError("Line doesn't start with 'seeds: '")

    seeds = []
    for token in line[len("seeds:"):].split():
        if not token.isdigit():
            raise ParseError(f"Expected a non-negative seed number, got '{token}'")
        seeds.append(int(token))
    return seeds


def parse(text: str) -> Input:
    blocks = split_blocks(text)
    if len(blocks) < 2:
        raise ParseError("Expected at least 2 segments separated by a blank line")

    return Input(
        seeds=parse_seeds(blocks[0]),
        maps=[parse_step(block) for block in blocks[1:]]
    )


def input_from(path: str | Path) -> Input:
    return parse(read_text(path))
