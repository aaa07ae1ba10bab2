"""Cephalopod math worksheet: evaluate column problems two ways."""

from __future__ import annotations

import argparse
import math
import re
import sys

from aoc2025.common import read_input, run

DATA_PATH = "day-06/data/cephalopod-math-pb-input.txt"

_NUMBER = re.compile(r"\+?[0-9]+")
_OPERATOR_COLUMN = re.compile(r"[*+]\s*")
_OPERATORS = "+*"
_DIGITS = "0123456789"


def _apply(operator: str, operands: list[int]) -> int:
    if operator == "+":
        return sum(operands)
    if operator == "*":
        return math.prod(operands)
    raise ValueError(f"bad operator: {operator}")


def _check_operator(token: str) -> str:
    if token not in _OPERATORS:
        raise ValueError(f"unknown operator: {token}")
    return token


def part_one(text: str) -> int:
    """Sum the problems read as whitespace-separated numbers in each column."""
    columns: list[list[int]] = []
    operators: list[str] = []
    for line in text.splitlines():
        for index, token in enumerate(line.split()):
            if _NUMBER.fullmatch(token):
                while len(columns) <= index:
                    columns.append([])
                columns[index].append(int(token))
            elif len(token.encode()) == 1:
                operators.append(_check_operator(token))
    if not columns:
        raise ValueError("worksheet has no operands")
    per_problem = len(columns[0])
    total = 0
    for index, operator in enumerate(operators):
        if index >= len(columns) or len(columns[index]) < per_problem:
            raise ValueError(f"problem {index} has too few operands")
        total += _apply(operator, columns[index][:per_problem])
    return total


def _split_columns(lines: list[str]) -> tuple[list[list[str]], list[str]]:
    """Cut the worksheet into fixed-width column cells, guided by the operator row."""
    last = lines[-1]
    columns: list[list[str]] = []
    operators: list[str] = []
    pos = 0
    while pos < len(last):
        found = _OPERATOR_COLUMN.match(last, pos)
        if found is None:
            raise ValueError(f"no operator at column {pos}")
        size = found.end() - pos
        if pos + size < len(last):
            size -= 1
        cells: list[str] = []
        for line in lines:
            if len(line) < pos + size:
                raise ValueError(f"line too short for column at {pos}: {line!r}")
            cell = line[pos : pos + size]
            trimmed = cell.strip()
            if _NUMBER.fullmatch(trimmed):
                cells.append(cell)
            elif len(trimmed.encode()) == 1:
                operators.append(_check_operator(trimmed))
        columns.append(cells)
        pos += size + 1
    return columns, operators


def part_two(text: str) -> int:
    """Sum the problems read right to left, one number per digit column."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty worksheet")
    columns, operators = _split_columns(lines)
    if not columns:
        raise ValueError("worksheet has no columns")
    order = len(columns[0])
    total = 0
    for index, operator in enumerate(operators):
        if index >= len(columns):
            raise ValueError(f"problem {index} has no column")
        rows = columns[index][:order]
        if not rows or len(rows) < order:
            raise ValueError(f"problem {index} has too few operands")
        operands = []
        for digit_column in reversed(list(zip(*rows))):
            digits = "".join(char for char in digit_column if char in _DIGITS)
            operands.append(int(digits) if digits else 0)
        total += _apply(operator, operands)
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve the cephalopod math puzzle.")
    parser.add_argument("input", nargs="?", default=DATA_PATH, help="puzzle input file")
    args = parser.parse_args(argv)
    try:
        text = read_input(args.input)
    except OSError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    run(part_one, part_two, text)
    return 0


if __name__ == "__main__":
    sys.exit(main())