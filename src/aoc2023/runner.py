"""
Advent of Code 2023 Runner

Solves one day (or all of them) the way each original program's main did:
sample part 1, sample part 2, then both parts of the real input. Every run
also produces a receipt binding the input hashes and answers, so a double
run can prove the answers are a pure function of the files.

File names per day come from the frozen puzzle registry; the files
themselves live under <inputs_dir>/dayNN/.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Tuple

from .core import (
    DeterminismError,
    PuzzleError,
    Receipts,
    assert_double_run_equal,
    puzzle_registry,
    day_key,
    read_text,
    text_hash
)
from .days import SOLVERS

DEFAULT_INPUTS_DIR = "inputs"

# (answer key, file layout key, part function name)
_RUN_PLAN = (
    ("sample.part1", "sample_part1", "part1"),
    ("sample.part2", "sample_part2", "part2"),
    ("part1", "input", "part1"),
    ("part2", "input", "part2"),
)

_LABELS = {
    "sample.part1": "Sample part 1",
    "sample.part2": "Sample part 2",
    "part1": "Part 1",
    "part2": "Part 2",
}


class UnknownDay(Exception):
    """Raised when no solution module exists for the requested day."""

    def __init__(self, day: int):
        self.day = day
        super().__init__(
            f"No solution for day {day}. Available: {puzzle_registry()['days']}"
        )


# ============================================================================
# File layout
# ============================================================================

def day_files(day: int, inputs_dir: str | Path = DEFAULT_INPUTS_DIR) -> Dict[str, Path]:
    """
    Resolve the sample/input paths of a day from the registry layout.

    Returns:
        dict with keys "sample_part1", "sample_part2", "input".

    Raises:
        UnknownDay: If the day is not in the registry.
    """
    registry = puzzle_registry()
    if day not in registry["days"] or day not in SOLVERS:
        raise UnknownDay(day)

    key = day_key(day)
    base = Path(inputs_dir) / f"day{key}"
    layout = registry["input_layout"][key]
    return {name: base / filename for name, filename in layout.items()}


# ============================================================================
# Solving
# ============================================================================

def _solve_receipts(
    day: int,
    inputs_dir: str | Path,
    input_path: str | Path | None,
    samples_only: bool
) -> Tuple[Dict[str, int], Receipts]:
    files = day_files(day, inputs_dir)
    module = SOLVERS[day]
    if input_path is not None:
        files["input"] = Path(input_path)

    receipts = Receipts(f"day{day_key(day)}")
    answers = {}
    parsed = {}  # layout key -> parsed Input, so shared files are parsed once

    for answer_key, file_key, part_name in _RUN_PLAN:
        if samples_only and file_key == "input":
            continue

        if file_key not in parsed:
            text = read_text(files[file_key])
            receipts.put(f"{file_key}.file", files[file_key].name)
            receipts.put(f"{file_key}.text_hash", text_hash(text))
            parsed[file_key] = module.parse(text)

        answers[answer_key] = getattr(module, part_name)(parsed[file_key])

    receipts.put("answers", answers)
    return answers, receipts


def solve_day(
    day: int,
    inputs_dir: str | Path = DEFAULT_INPUTS_DIR,
    input_path: str | Path | None = None,
    samples_only: bool = False
) -> Tuple[Dict[str, int], Dict]:
    """
    Solve one day.

    Args:
        day: Day number (1-25, must be in the registry).
        inputs_dir: Directory holding dayNN/ subdirectories.
        input_path: Override for the real input file.
        samples_only: Skip the real input entirely.

    Returns:
        Tuple of (answers, receipts):
          - answers: {"sample.part1", "sample.part2", "part1", "part2"} -> int
            (the last two absent when samples_only)
          - receipts: Receipts digest with file hashes and answers

    Raises:
        UnknownDay: If the day has no solution.
        PuzzleError: On any read, parse or solve failure.
    """
    answers, receipts = _solve_receipts(day, inputs_dir, input_path, samples_only)
    return answers, receipts.digest()


def solve_with_determinism_check(
    day: int,
    inputs_dir: str | Path = DEFAULT_INPUTS_DIR,
    input_path: str | Path | None = None,
    samples_only: bool = False
) -> Tuple[Dict[str, int], Dict]:
    """
    Solve a day twice and verify both runs produce the same section hash.

    Returns:
        Tuple of (answers, receipts) with determinism flags added.

    Raises:
        DeterminismError: If the two runs differ.
    """
    runs = []

    def build() -> Receipts:
        answers, receipts = _solve_receipts(day, inputs_dir, input_path, samples_only)
        runs.append((answers, receipts))
        return receipts

    assert_double_run_equal(build)

    answers, receipts = runs[0]
    digest = receipts.digest()
    digest["determinism.double_run_ok"] = True
    return answers, digest


def solve_all(
    inputs_dir: str | Path = DEFAULT_INPUTS_DIR,
    samples_only: bool = False,
    determinism_check: bool = False
) -> List[Tuple[int, Dict[str, int], Dict]]:
    """Solve every registry day in order. Stops at the first failure."""
    solve = solve_with_determinism_check if determinism_check else solve_day
    results = []
    for day in puzzle_registry()["days"]:
        answers, receipts = solve(day, inputs_dir=inputs_dir, samples_only=samples_only)
        results.append((day, answers, receipts))
    return results


def format_answers(answers: Dict[str, int]) -> List[str]:
    """The four "Sample part 1: X" style lines (fewer when samples_only)."""
    return [
        f"{_LABELS[key]}: {answers[key]}"
        for key, _, _ in _RUN_PLAN
        if key in answers
    ]


# ============================================================================
# CLI Entry Point
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc2023",
        description="Advent of Code 2023 runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Samples and real input for day 16
  python -m aoc2023.runner 16

  # Samples only (no personal input.txt needed)
  python -m aoc2023.runner 16 --samples-only

  # Every day, solved twice with a hash comparison
  python -m aoc2023.runner --all --samples-only --determinism-check

Puzzle files are read from <inputs-dir>/dayNN/ (default: inputs/).
        """
    )

    parser.add_argument(
        "day",
        type=int,
        nargs="?",
        help="Day number to solve"
    )

    parser.add_argument(
        "--all",
        action="store_true",
        help="Solve every available day in order."
    )

    parser.add_argument(
        "--inputs-dir",
        type=str,
        default=DEFAULT_INPUTS_DIR,
        help="Directory holding dayNN/ puzzle files. Default: inputs."
    )

    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Override the real input file (single day only)."
    )

    parser.add_argument(
        "--samples-only",
        action="store_true",
        help="Only solve the samples; skip the real input."
    )

    parser.add_argument(
        "--determinism-check",
        action="store_true",
        help="Solve twice and compare section hashes. Default: False (single solve)."
    )

    parser.add_argument(
        "--receipts",
        action="store_true",
        help="Print receipts JSON to stderr."
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write answers and receipts JSON to this file."
    )

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.all == (args.day is not None):
        print("Error: give exactly one of DAY or --all", file=sys.stderr)
        return 2
    if args.all and args.input:
        print("Error: --input applies to a single day only", file=sys.stderr)
        return 2

    try:
        if args.all:
            results = solve_all(
                inputs_dir=args.inputs_dir,
                samples_only=args.samples_only,
                determinism_check=args.determinism_check
            )
        else:
            solve = solve_with_determinism_check if args.determinism_check else solve_day
            answers, receipts = solve(
                args.day,
                inputs_dir=args.inputs_dir,
                input_path=args.input,
                samples_only=args.samples_only
            )
            results = [(args.day, answers, receipts)]
    except UnknownDay as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except (PuzzleError, DeterminismError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for day, answers, receipts in results:
        if args.all:
            print(f"Day {day_key(day)}")
        for line in format_answers(answers):
            print(line)

        if args.receipts:
            print(json.dumps(receipts, indent=2), file=sys.stderr)

    if args.output:
        result = {
            f"day{day_key(day)}": {"answers": answers, "receipts": receipts}
            for day, answers, receipts in results
        }
        try:
            with open(args.output, 'w') as f:
                json.dump(result, f, indent=2)
        except OSError as e:
            print(f"Error: Failed to write file: {args.output}: {e}", file=sys.stderr)
            return 1
        print(f"Results written to: {args.output}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
