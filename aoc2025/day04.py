"""Paper roll layout: count rolls a forklift can reach and remove."""

from __future__ import annotations

import sys

from aoc2025.day01 import _solve_command

DATA_PATH = "day-04/data/rolls-layout-input.txt"
ROLL = "@"
MAX_NEIGHBOURS = 4

_NEIGHBOURS = tuple(
    (dy, dx) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dy, dx) != (0, 0)
)

Position = tuple[int, int]


def _parse_rolls(text: str) -> set[Position]:
    """Return the (row, column) of every roll; the first row fixes the grid width."""
    rows = text.splitlines()
    if not rows:
        raise ValueError("empty layout")
    width = len(rows[0])
    rolls: set[Position] = set()
    for y, row in enumerate(rows):
        if len(row) < width:
            raise ValueError(f"row {y} is shorter than the first row")
        rolls.update((y, x) for x, cell in enumerate(row[:width]) if cell == ROLL)
    return rolls


def _accessible(rolls: set[Position]) -> set[Position]:
    """Rolls with fewer than four rolls among their eight neighbours."""
    return {
        (y, x)
        for y, x in rolls
        if sum((y + dy, x + dx) in rolls for dy, dx in _NEIGHBOURS) < MAX_NEIGHBOURS
    }


def part_one(text: str) -> int:
    """Count the rolls that are reachable in the initial layout."""
    return len(_accessible(_parse_rolls(text)))


def part_two(text: str) -> int:
    """Count the rolls removed when reachable rolls are taken away round after round."""
    rolls = _parse_rolls(text)
    removed = 0
    while accessible := _accessible(rolls):
        removed += len(accessible)
        rolls -= accessible
    return removed


def main(argv: list[str] | None = None) -> int:
    """Solve the paper roll puzzle for the given input file."""
    return _solve_command("Solve the paper roll puzzle.", DATA_PATH, part_one, part_two, argv)


if __name__ == "__main__":
    sys.exit(main())