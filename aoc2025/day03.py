"""Battery banks: pick digits to build the largest joltage per bank."""

from __future__ import annotations

import sys

from aoc2025.day01 import _solve_command

DATA_PATH = "day-03/data/batteries-input.txt"
BATTERIES_TO_USE = 12

_DIGITS = "0123456789"


def _digits(line: str) -> list[int]:
    bad = next((char for char in line if char not in _DIGITS), None)
    if bad is not None:
        raise ValueError(f"not a digit: {bad!r}")
    return [int(char) for char in line]


def part_one(text: str) -> int:
    """Sum, over all banks, the best two-digit number kept in order."""
    total = 0
    for line in text.splitlines():
        tens = ones = 0
        for digit in _digits(line):
            if ones > tens:
                tens, ones = ones, digit
            elif digit > ones:
                ones = digit
        total += tens * 10 + ones
    return total


def part_two(text: str) -> int:
    """Sum, over all banks, the largest twelve-digit number kept in order."""
    total = 0
    for line in text.splitlines():
        surplus = len(line) - BATTERIES_TO_USE
        if surplus < 0:
            raise ValueError(f"bank has fewer than {BATTERIES_TO_USE} batteries: {line!r}")
        kept: list[int] = []
        for digit in _digits(line):
            while kept and surplus and kept[-1] < digit:
                kept.pop()
                surplus -= 1
            kept.append(digit)
        total += int("".join(map(str, kept[:BATTERIES_TO_USE])))
    return total


def main(argv: list[str] | None = None) -> int:
    """Solve the battery joltage puzzle for the given input file."""
    return _solve_command(
        "Solve the battery joltage puzzle.", DATA_PATH, part_one, part_two, argv
    )


if __name__ == "__main__":
    sys.exit(main())