"""Load a day's puzzle input from disk, solve it, or benchmark it."""

from __future__ import annotations

import contextlib
import io
import os
import time
from pathlib import Path
from typing import Callable

from .registry import solution_for

DEFAULT_INPUT_DIR = Path("inputs")
_BENCH_RUNS = 10


def load_input(day: int, input_dir: str | os.PathLike[str] = DEFAULT_INPUT_DIR) -> str:
    """Read the puzzle input stored in a file named after the day number."""
    return (Path(input_dir) / str(day)).read_text(encoding="utf-8")


def solve_day(
    day: int,
    include_time: bool,
    input_dir: str | os.PathLike[str] = DEFAULT_INPUT_DIR,
) -> tuple[str, str]:
    """Solve both parts of a day, print them and return them.

    Raises ValueError for an unknown day.
    """
    solution = solution_for(day)
    return solution.solve(load_input(day, input_dir), include_time)


def _mean_seconds(case: Callable[[], object], runs: int) -> float:
    with contextlib.redirect_stdout(io.StringIO()):
        start = time.perf_counter()
        for _ in range(runs):
            case()
        total = time.perf_counter() - start
    return total / runs


def bench_day(day: int) -> dict[str, float]:
    """Time parsing, each part and the whole solution for a day.

    Prints the mean time of each in microseconds and returns them in seconds.
    """
    print(f"Benchmarking day {day}...")
    solution = solution_for(day)
    text = load_input(day)

    cases: dict[str, Callable[[], object]] = {
        "parsing": lambda: solution.parse_input(text),
        "parsing_and_part_one": lambda: solution.solve_part_one(text),
        "parsing_and_part_two": lambda: solution.solve_part_two(text),
        "whole_solution": lambda: solve_day(day, False),
    }

    results = {name: _mean_seconds(case, _BENCH_RUNS) for name, case in cases.items()}

    for name, seconds in results.items():
        print(f"{name}: {seconds * 1_000_000:.1f} μs")
    return results