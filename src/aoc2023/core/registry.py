"""
Puzzle Registry

Frozen constants for the runner: which days exist and which files feed
which part. The registry is hashed into every day's receipts so a change in
layout shows up as a different section hash.

No environment lookups, no optionals.
"""


def puzzle_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by the runner.

    Keys and values are JSON-serializable primitives or lists/dicts.

    Returns:
        dict: Parameter mapping with exact keys and values.

    Raises:
        RegistryError: If a key is missing or a day has no file layout.
    """
    registry = {
        "year": 2023,

        # Days with a solution module, ascending
        "days": [1, 2, 3, 4, 5, 6, 8, 9, 10, 11, 13, 16],

        # Per-day file names, relative to inputs/dayNN/
        # sample_part1 / sample_part2 may differ when the puzzle ships
        # separate worked examples for each part
        "input_layout": {
            "01": {"sample_part1": "sample-1.txt", "sample_part2": "sample-2.txt", "input": "input.txt"},
            "02": {"sample_part1": "sample.txt", "sample_part2": "sample.txt", "input": "input.txt"},
            "03": {"sample_part1": "sample.txt", "sample_part2": "sample.txt", "input": "input.txt"},
            "04": {"sample_part1": "sample.txt", "sample_part2": "sample.txt", "input": "input.txt"},
            "05": {"sample_part1": "sample.txt", "sample_part2": "sample.txt", "input": "input.txt"},
            "06": {"sample_part1": "sample.txt", "sample_part2": "sample.txt", "input": "input.txt"},
            "08": {"sample_part1": "sample-1.txt", "sample_part2": "sample-3.txt", "input": "input.txt"},
            "09": {"sample_part1": "sample.txt", "sample_part2": "sample.txt", "input": "input.txt"},
            "10": {"sample_part1": "sample-1.txt", "sample_part2": "sample-2.txt", "input": "input.txt"},
            "11": {"sample_part1": "sample.txt", "sample_part2": "sample.txt", "input": "input.txt"},
            "13": {"sample_part1": "sample.txt", "sample_part2": "sample.txt", "input": "input.txt"},
            "16": {"sample_part1": "sample.txt", "sample_part2": "sample.txt", "input": "input.txt"},
        },

        # Hashing
        "hash_algo": "BLAKE3",

        # Answers are recorded as plain ints in receipts
        "answer_encoding": "int",
    }

    required_keys = {"year", "days", "input_layout", "hash_algo", "answer_encoding"}

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"puzzle_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    layout_days = sorted(int(k) for k in registry["input_layout"])
    if layout_days != registry["days"]:
        raise RegistryError(
            f"puzzle_registry() layout/days mismatch: {layout_days} != {registry['days']}"
        )

    return registry


def day_key(day: int) -> str:
    """Zero-padded registry key for a day number (1 -> "01")."""
    return f"{day:02d}"


class RegistryError(Exception):
    """Raised when puzzle_registry() has missing or inconsistent keys."""
    pass
