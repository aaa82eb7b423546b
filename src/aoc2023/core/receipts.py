"""
Day Receipts & Double-Run Checker

A receipt records what a day was solved from (file names, text hashes) and
what it answered. Its digest binds the puzzle registry hash and a
section_hash, so two runs over the same files can be compared by one string.
"""

import json
from typing import Any, Callable

from .registry import puzzle_registry
from .hashing import blake3_hash

_SCALARS = (bool, int, str, type(None))


class Receipts:
    """
    Ordered key/value receipt for one section (usually a day, "day05").

    Values are ints, bools, strings, None, or lists/dicts of those. Floats
    are rejected: every answer is an exact integer.
    """

    def __init__(self, section: str):
        self.section = section
        self.payload: dict[str, Any] = {}

    def put(self, key: str, value: Any) -> None:
        """
        Raises:
            ReceiptError: If key was already recorded or value has a forbidden type.
        """
        if key in self.payload:
            raise ReceiptError(f"Duplicate key in receipts: '{key}'")
        _check_value(value, key)
        self.payload[key] = value

    def digest(self) -> dict:
        """
        {section, year, registry_hash, payload, section_hash}, where
        section_hash covers the other four fields.
        """
        registry = puzzle_registry()
        body = {
            "section": self.section,
            "year": registry["year"],
            "registry_hash": blake3_hash(_stable_json_bytes(registry)),
            "payload": dict(self.payload),
        }
        body["section_hash"] = blake3_hash(_stable_json_bytes(body))
        return body


def assert_double_run_equal(build: Callable[[], Receipts]) -> None:
    """
    Build the same receipt twice and compare section hashes.

    Raises:
        DeterminismError: Naming the first payload key whose values differ.
    """
    first = build().digest()
    second = build().digest()
    if first["section_hash"] == second["section_hash"]:
        return

    key, value_a, value_b = _first_difference(first["payload"], second["payload"])
    raise DeterminismError(first["section"], key, value_a, value_b)


def _first_difference(a: dict, b: dict) -> tuple[str | None, Any, Any]:
    # Keys in recording order, then any only the second run recorded
    for key in list(a) + [k for k in b if k not in a]:
        value_a = a.get(key, "<MISSING>")
        value_b = b.get(key, "<MISSING>")
        if value_a != value_b:
            return key, value_a, value_b
    return None, None, None


def _stable_json_bytes(obj: Any) -> bytes:
    return json.dumps(obj, sort_keys=True, separators=(",", ":")).encode("utf-8")


def _check_value(value: Any, where: str) -> None:
    if isinstance(value, float):
        raise ReceiptError(f"Floats forbidden in receipts: '{where}' = {value}")
    if isinstance(value, _SCALARS):
        return
    if isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _check_value(item, f"{where}[{i}]")
        return
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise ReceiptError(f"Dict keys must be strings in receipts: '{where}' has {k!r}")
            _check_value(v, f"{where}.{k}")
        return
    raise ReceiptError(f"Invalid type in receipts: '{where}' is {type(value).__name__}")


class ReceiptError(Exception):
    """Raised on a duplicate key or a forbidden value type."""
    pass


class DeterminismError(Exception):
    """Raised when two runs of the same day record different receipts."""

    def __init__(self, section: str, first_differing_key: str | None, value_a: Any, value_b: Any):
        self.section = section
        self.first_differing_key = first_differing_key
        self.value_a = value_a
        self.value_b = value_b
        super().__init__(
            f"Runs of {section} disagree at '{first_differing_key}': {value_a!r} != {value_b!r}"
        )
