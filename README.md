# aoc2025

Solutions to the first seven puzzles of Advent of Code 2025.

| Module          | Puzzle                                 |
|-----------------|----------------------------------------|
| `aoc2025.day01` | Safe dial rotations and zero crossings |
| `aoc2025.day02` | Invalid product IDs made of repeats    |
| `aoc2025.day03` | Battery bank joltage                   |
| `aoc2025.day04` | Accessible paper rolls                 |
| `aoc2025.day05` | Fresh ingredient ID ranges             |
| `aoc2025.day06` | Cephalopod math worksheet              |
| `aoc2025.day07` | Tachyon manifold beam splitting        |

## Installation

```
pip install .
```

To run the test suite with `pytest`, install the `test` extra: `pip install .[test]`.

## Command line

There is one command for each day:

```
aoc2025-day01 [INPUT]
aoc2025-day02 [INPUT]
aoc2025-day03 [INPUT]
aoc2025-day04 [INPUT]
aoc2025-day05 [INPUT]
aoc2025-day06 [INPUT]
aoc2025-day07 [INPUT]
```

Each command reads the puzzle input file and prints the answers to both parts. It also
prints how long each part took. If you leave out `INPUT`, the command reads that day's
default path under the current working directory:

| Command         | Default input                                      |
|-----------------|----------------------------------------------------|
| `aoc2025-day01` | `day-01/data/dial-input.txt`                       |
| `aoc2025-day02` | `day-02/data/ids-input.txt`                        |
| `aoc2025-day03` | `day-03/data/batteries-input.txt`                  |
| `aoc2025-day04` | `day-04/data/rolls-layout-input.txt`               |
| `aoc2025-day05` | `day-05/data/ingredients-ids-input.txt`            |
| `aoc2025-day06` | `day-06/data/cephalopod-math-pb-input.txt`         |
| `aoc2025-day07` | `day-07/data/tachyon-manifold-diagram-input.txt`   |

If the file cannot be read, the command prints an error to standard error and exits with
status 1.

## As a library

Every day module has `part_one(text)` and `part_two(text)`. Each one takes the puzzle input
as a string and returns the answer as an integer:

```python
from aoc2025 import day01

text = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82\n"
print(day01.part_one(text))
print(day01.part_two(text))
```

Input that cannot be parsed raises `ValueError`. Days 2 to 7 do this. Day 1 is the
exception: it prints a warning for a rotation line it cannot read and skips that line.

`aoc2025.day05.merge_ranges(ranges)` merges overlapping and adjacent inclusive
`(start, end)` ranges. It returns the merged ranges sorted by start.

`aoc2025.common` holds the helpers that the commands use:

- `read_input(file_name)` returns the contents of a file as UTF-8 text.
- `run(part_one, part_two, text)` calls both parts on the text and prints each result with
  its timing. It returns the two results as a tuple.

## What it does not do

The package does not download puzzle inputs and does not submit answers. You supply the
input files yourself.