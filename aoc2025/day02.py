"""Gift shop product ids: sum the ids made of a repeated digit block."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator

from aoc2025.day01 import _solve_command

DATA_PATH = "day-02/data/ids-input.txt"

_ID = re.compile(r"\+?[0-9]+")


def _parse_id(text: str) -> int:
    if not _ID.fullmatch(text):
        raise ValueError(f"invalid product id: {text!r}")
    return int(text)


def _ranges(text: str) -> Iterator[tuple[str, str]]:
    """Yield the trimmed (low, high) bound texts of each comma-separated range."""
    for chunk in text.split(","):
        bounds = chunk.split("-")
        if len(bounds) < 2:
            raise ValueError(f"invalid range: {chunk!r}")
        yield bounds[0].strip(), bounds[1].strip()


def _seeds(smallest: int, largest: int, multiplier: int, low: int, high: int) -> range:
    """Seeds in [smallest, largest] whose product with *multiplier* lies in [low, high]."""
    first = max(smallest, -(-low // multiplier))
    last = min(largest, high // multiplier)
    return range(first, last + 1)


def part_one(text: str) -> int:
    """Sum the ids in range that are a digit block written exactly twice."""
    total = 0
    for low_text, high_text in _ranges(text):
        low, high = _parse_id(low_text), _parse_id(high_text)
        for length in range(len(str(low)), len(str(high)) + 1):
            if length % 2:
                continue
            block = 10 ** (length // 2)
            multiplier = block + 1
            total += multiplier * sum(_seeds(block // 10, block - 1, multiplier, low, high))
    return total


def part_two(text: str) -> int:
    """Sum the distinct ids in range that are a digit block written two or more times."""
    found: set[int] = set()
    for low_text, high_text in _ranges(text):
        low, high = _parse_id(low_text), _parse_id(high_text)
        max_digits = len(str(high))
        for width in range(1, len(high_text) // 2 + 1):
            block = 10**width
            copies = 2
            while copies * width <= max_digits:
                multiplier = (block**copies - 1) // (block - 1)
                found.update(
                    seed * multiplier
                    for seed in _seeds(block // 10, block - 1, multiplier, low, high)
                )
                copies += 1
    return sum(found)


def main(argv: list[str] | None = None) -> int:
    """Solve the product id puzzle for the given input file."""
    return _solve_command("Solve the product id puzzle.", DATA_PATH, part_one, part_two, argv)


if __name__ == "__main__":
    sys.exit(main())