"""Common interface shared by every daily puzzle solution."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Any


def _elapsed_micros(start_ns: int) -> int:
    return (time.perf_counter_ns() - start_ns) // 1000


class Solution(ABC):
    """A puzzle solution: parse the input once, then answer both parts.

    Both parts receive the same parsed object, so a part may change it
    in place and the other part will see the change.
    """

    @abstractmethod
    def parse_input(self, input_lines: str) -> Any:
        """Turn the raw puzzle text into whatever the parts work on."""

    @abstractmethod
    def part_one(self, parsed_input: Any) -> str:
        """Answer the first part of the puzzle."""

    @abstractmethod
    def part_two(self, parsed_input: Any) -> str:
        """Answer the second part of the puzzle."""

    def solve_part_one(self, input_lines: str) -> str:
        """Parse the text and answer part one."""
        return self.part_one(self.parse_input(input_lines))

    def solve_part_two(self, input_lines: str) -> str:
        """Parse the text and answer part two."""
        return self.part_two(self.parse_input(input_lines))

    def solve(self, input_lines: str, include_time: bool) -> tuple[str, str]:
        """Answer both parts, print them, and return them as a pair."""
        if include_time:
            return self.solve_with_time(input_lines)
        parsed = self.parse_input(input_lines)
        p1 = self.part_one(parsed)
        p2 = self.part_two(parsed)
        print("----------")
        print(f"Part 1: {p1}\nPart 2: {p2}")
        return p1, p2

    def solve_with_time(self, input_lines: str) -> tuple[str, str]:
        """Answer both parts, printing each with its wall-clock time in microseconds."""
        start = time.perf_counter_ns()
        parsed = self.parse_input(input_lines)
        parse_time = _elapsed_micros(start)

        start = time.perf_counter_ns()
        p1 = self.part_one(parsed)
        p1_time = _elapsed_micros(start)

        start = time.perf_counter_ns()
        p2 = self.part_two(parsed)
        p2_time = _elapsed_micros(start)

        print("----------")
        print(f"Parsing... ({parse_time} μs)")
        print(f"Part 1: {p1} ({p1_time} μs)")
        print(f"Part 2: {p2} ({p2_time} μs)")
        return p1, p2