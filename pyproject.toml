[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2025"
version = "0.1.0"
description = "Solutions to the 2025 Advent of Code puzzles, days 1 to 7"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2025"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2025-day01 = "aoc2025.day01:main"
aoc2025-day02 = "aoc2025.day02:main"
aoc2025-day03 = "aoc2025.day03:main"
aoc2025-day04 = "aoc2025.day04:main"
aoc2025-day05 = "aoc2025.day05:main"
aoc2025-day06 = "aoc2025.day06:main"
aoc2025-day07 = "aoc2025.day07:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2025"]

[tool.pytest.ini_options]
addopts = "-ra"
