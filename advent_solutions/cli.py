"""Command line entry point: run or benchmark one day or all of them."""

from __future__ import annotations

import argparse
from typing import Sequence

from .registry import FIRST_DAY, LAST_DAY
from .runner import bench_day, solve_day


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Advent of Code test and benchmarking template",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "day",
        nargs="?",
        type=int,
        help="Selects a single day to run. If not specified, all days are run.",
    )
    parser.add_argument(
        "-b",
        "--bench",
        action="store_true",
        help="Benchmarks the solution for given days.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the selected day, or days 1 to 25 when none is given."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.day is not None:
        if not FIRST_DAY <= args.day <= LAST_DAY:
            parser.error("Day not found")
        days = [args.day]
    else:
        # Day 0 is only an example and is run only when asked for.
        days = list(range(FIRST_DAY + 1, LAST_DAY + 1))

    for day in days:
        if args.bench:
            bench_day(day)
        else:
            solve_day(day, True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())