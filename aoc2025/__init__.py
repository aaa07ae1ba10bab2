"""Solutions to the Advent of Code 2025 puzzles, days 1 to 7, with shared input helpers."""

__version__ = "0.1.0"

__all__ = [
    "common",
    "day01",
    "day02",
    "day03",
    "day04",
    "day05",
    "day06",
    "day07",
]