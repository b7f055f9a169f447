"""Reactor reports: which level sequences are safe, with and without a dampener."""

from __future__ import annotations

import re
from itertools import pairwise

from .solution import Solution

_INT = re.compile(r"[+-]?[0-9]+")


def _parse_i8(token: str) -> int:
    if not _INT.fullmatch(token):
        raise ValueError(f"invalid integer {token!r}")
    value = int(token)
    if not -128 <= value <= 127:
        raise ValueError(f"integer out of range {token!r}")
    return value


def _is_bad(diff: int, increasing: bool) -> bool:
    return (
        (increasing and diff < 0)
        or (not increasing and diff > 0)
        or abs(diff) > 3
        or diff == 0
    )


def check_safe(diffs: list[int]) -> bool:
    """Whether every step goes the same way as the first and by 1 to 3."""
    increasing = diffs[0] > 0
    return not any(_is_bad(diff, increasing) for diff in diffs)


def first_unsafe_diff_idx(diffs: list[int]) -> int | None:
    """Index of the first step against the majority direction or out of range."""
    increasing = sum(1 for diff in diffs if diff > 0) > len(diffs) // 2
    return next((i for i, diff in enumerate(diffs) if _is_bad(diff, increasing)), None)


def can_make_safe(diffs: list[int]) -> bool:
    """Whether removing one level next to the first bad step makes the report safe."""
    idx = first_unsafe_diff_idx(diffs)
    if idx is None:
        return True
    remove_first: list[int] = []
    remove_second: list[int] = []
    for j, diff in enumerate(diffs):
        if j == idx:
            if idx > 0:
                remove_first.append(diff + diffs[idx - 1])
            if idx + 1 < len(diffs):
                remove_second.append(diff + diffs[idx + 1])
        else:
            if idx > 0 and j != idx - 1:
                remove_first.append(diff)
            if j != idx + 1:
                remove_second.append(diff)
    return (
        first_unsafe_diff_idx(remove_first) is None
        or first_unsafe_diff_idx(remove_second) is None
    )


class Day02(Solution):
    """Count safe reports."""

    def parse_input(self, input_lines: str) -> list[list[int]]:
        return [
            [b - a for a, b in pairwise(_parse_i8(tok) for tok in line.split())]
            for line in input_lines.splitlines()
        ]

    def part_one(self, parsed_input: list[list[int]]) -> str:
        return str(sum(1 for diffs in parsed_input if check_safe(diffs)))

    def part_two(self, parsed_input: list[list[int]]) -> str:
        return str(sum(1 for diffs in parsed_input if can_make_safe(diffs)))