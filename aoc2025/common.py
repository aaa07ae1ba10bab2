"""Shared helpers for reading puzzle input and reporting solutions."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, TypeVar

T1 = TypeVar("T1")
T2 = TypeVar("T2")


def read_input(file_name: str | Path) -> str:
    """Return the whole content of *file_name* as text."""
    return Path(file_name).read_text(encoding="utf-8")


def _format_duration(seconds: float) -> str:
    nanos = round(seconds * 1e9)
    if nanos < 1_000:
        return f"{nanos}ns"
    if nanos < 1_000_000:
        return f"{nanos / 1e3:.3f}µs"
    if nanos < 1_000_000_000:
        return f"{nanos / 1e6:.3f}ms"
    return f"{nanos / 1e9:.3f}s"


def run(
    part_one: Callable[[str], T1],
    part_two: Callable[[str], T2],
    text: str,
) -> tuple[T1, T2]:
    """Solve both parts on *text*, print each answer with its timing, and return them."""
    start = time.perf_counter()
    first = part_one(text)
    elapsed = _format_duration(time.perf_counter() - start)
    print(f"The solution for the first part is : {first} (took {elapsed})\n")

    start = time.perf_counter()
    second = part_two(text)
    elapsed = _format_duration(time.perf_counter() - start)
    print(f"The solution for the second part is : {second} (took {elapsed})")

    return first, second