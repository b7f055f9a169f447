"""Example puzzle: lines of two comma-separated integers."""

from __future__ import annotations

import re

from .solution import Solution

_INT = re.compile(r"[+-]?[0-9]+")


def _parse_numbers(line: str) -> list[int]:
    numbers = []
    for token in line.split(", "):
        if not _INT.fullmatch(token):
            raise ValueError(f"Couldn't parse {token!r}")
        numbers.append(int(token))
    return numbers


def sum_numbers_in_line(line: str) -> int:
    """Sum the comma-separated integers on a line."""
    return sum(_parse_numbers(line))


def square_difference_in_line(line: str) -> int:
    """Square the difference of the two integers on a line."""
    numbers = _parse_numbers(line)
    if len(numbers) != 2:
        raise ValueError(f"expected exactly two numbers, found {len(numbers)}")
    first, second = numbers
    return (first - second) ** 2


class Day00(Solution):
    """Sum of all numbers, then sum of squared differences per line."""

    def parse_input(self, input_lines: str) -> str:
        return input_lines

    def part_one(self, parsed_input: str) -> str:
        return str(sum(map(sum_numbers_in_line, parsed_input.splitlines())))

    def part_two(self, parsed_input: str) -> str:
        return str(sum(map(square_difference_in_line, parsed_input.splitlines())))