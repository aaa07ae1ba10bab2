"""Cafeteria inventory: check ingredient ids against fresh id ranges."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable

from aoc2025.day01 import _solve_command

DATA_PATH = "day-05/data/ingredients-ids-input.txt"

_NUMBER = re.compile(r"\+?[0-9]+")

IdRange = tuple[int, int]


def _parse_number(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid ingredient id: {text!r}")
    return int(text)


def _parse(text: str) -> tuple[list[IdRange], list[str]]:
    """Split the database into its fresh ranges and the lines of available ids."""
    lines = text.splitlines()
    ranges: list[IdRange] = []
    for line in lines:
        if not line.strip():
            break
        parts = line.split("-")
        if len(parts) < 2:
            raise ValueError(f"invalid range: {line!r}")
        ranges.append((_parse_number(parts[0]), _parse_number(parts[1])))
    return ranges, lines[len(ranges) + 1 :]


def merge_ranges(ranges: Iterable[IdRange]) -> list[IdRange]:
    """Merge overlapping or adjacent inclusive ranges, sorted by start."""
    merged: list[IdRange] = []
    for start, end in sorted(ranges, key=lambda bounds: bounds[0]):
        if merged and start <= merged[-1][1] + 1:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def part_one(text: str) -> int:
    """Count the available ingredient ids that fall in a fresh range."""
    ranges, id_lines = _parse(text)
    fresh = merge_ranges(ranges)
    ids = [_parse_number(line) for line in id_lines]
    return sum(1 for ingredient in ids if any(start <= ingredient <= end for start, end in fresh))


def part_two(text: str) -> int:
    """Count every id covered by at least one fresh range."""
    ranges, _ = _parse(text)
    return sum(end - start + 1 for start, end in merge_ranges(ranges))


def main(argv: list[str] | None = None) -> int:
    """Solve the fresh ingredients puzzle for the given input file."""
    return _solve_command(
        "Solve the fresh ingredients puzzle.", DATA_PATH, part_one, part_two, argv
    )


if __name__ == "__main__":
    sys.exit(main())