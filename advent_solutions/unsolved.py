"""Placeholder solution for puzzles that have not been worked out yet."""

from __future__ import annotations

from .solution import Solution


class Unsolved(Solution):
    """Keeps the raw text and answers 0 for both parts."""

    def parse_input(self, input_lines: str) -> str:
        return input_lines

    def part_one(self, parsed_input: str) -> str:
        return "0"

    def part_two(self, parsed_input: str) -> str:
        return "0"