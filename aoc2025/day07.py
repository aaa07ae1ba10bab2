"""Tachyon manifold: follow beams through splitters."""

from __future__ import annotations

import sys
from collections import Counter

from aoc2025.day01 import _solve_command

DATA_PATH = "day-07/data/tachyon-manifold-diagram-input.txt"
START = "S"
SPLITTER = "^"


def part_one(text: str) -> int:
    """Count how many times a beam hits a splitter on its way down."""
    splits = 0
    beams: set[int] = set()
    for line in text.splitlines():
        if START in line:
            beams.add(line.index(START))
            continue
        following = set(beams)
        for position, cell in enumerate(line):
            if cell == SPLITTER and position in beams:
                if position > 0:
                    following.add(position - 1)
                if position < len(line) - 1:
                    following.add(position + 1)
                splits += 1
                following.discard(position)
        beams = following
    return splits


def part_two(text: str) -> int:
    """Count the distinct timelines a single particle can end up in."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty diagram")
    width = len(lines[0])
    start = 0
    rows: list[set[int]] = []
    for line in lines:
        if START in line:
            start = line.index(START)
            continue
        splitters = {position for position, cell in enumerate(line) if cell == SPLITTER}
        if splitters:
            rows.append(splitters)

    timelines: Counter[int] = Counter({start: 1})
    for splitters in rows:
        following: Counter[int] = Counter()
        for column, count in timelines.items():
            if column in splitters:
                if column > 0:
                    following[column - 1] += count
                if column < width - 1:
                    following[column + 1] += count
            else:
                following[column] += count
        timelines = following
    return sum(timelines.values())


def main(argv: list[str] | None = None) -> int:
    """Solve the tachyon manifold puzzle for the given input file."""
    return _solve_command(
        "Solve the tachyon manifold puzzle.", DATA_PATH, part_one, part_two, argv
    )


if __name__ == "__main__":
    sys.exit(main())