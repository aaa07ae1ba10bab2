"""Secret entrance dial: count how often the dial points at zero."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterator
from typing import Any

from aoc2025.common import read_input, run

DATA_PATH = "day-01/data/dial-input.txt"
START_POSITION = 50
DIAL_SIZE = 100

_AMOUNT = re.compile(r"[+-]?[0-9]+")

Solver = Callable[[str], Any]


def _solve_command(
    description: str,
    default_path: str,
    part_one: Solver,
    part_two: Solver,
    argv: list[str] | None,
) -> int:
    """Read the puzzle file named on the command line and print both answers."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input", nargs="?", default=default_path, help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = read_input(args.input)
    except OSError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    run(part_one, part_two, text)
    return 0


def _rotations(text: str) -> Iterator[tuple[str, int]]:
    """Yield (direction, amount) for each valid rotation line, warning on bad ones."""
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        direction, amount = line[0], line[1:]
        if not _AMOUNT.fullmatch(amount):
            print(f"Warning: Skipping invalid line format: {line}", file=sys.stderr)
            continue
        yield direction, int(amount)


def part_one(text: str) -> int:
    """Count rotations that leave the dial pointing at zero."""
    position = START_POSITION
    zeros = 0
    for direction, amount in _rotations(text):
        step = amount if direction == "R" else -amount
        position = (position + step) % DIAL_SIZE
        if position == 0:
            zeros += 1
    return zeros


def part_two(text: str) -> int:
    """Count every single click that lands the dial on zero."""
    position = START_POSITION
    zeros = 0
    for direction, amount in _rotations(text):
        if amount <= 0:
            continue
        if direction == "R":
            end = position + amount
            zeros += end // DIAL_SIZE - position // DIAL_SIZE
        else:
            end = position - amount
            zeros += (position - 1) // DIAL_SIZE - (end - 1) // DIAL_SIZE
        position = end % DIAL_SIZE
    return zeros


def main(argv: list[str] | None = None) -> int:
    """Solve the dial puzzle for the given input file."""
    return _solve_command("Solve the dial puzzle.", DATA_PATH, part_one, part_two, argv)


if __name__ == "__main__":
    sys.exit(main())