"""Two columns of location ids: total distance and similarity score."""

from __future__ import annotations

from collections import Counter

from .solution import Solution

_U32_MAX = 2**32 - 1


def _parse_u32(token: str) -> int:
    digits = token[1:] if token.startswith("+") else token
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid unsigned integer {token!r}")
    value = int(digits)
    if value > _U32_MAX:
        raise ValueError(f"integer out of range {token!r}")
    return value


class Day01(Solution):
    """Pair up two lists of ids."""

    def parse_input(self, input_lines: str) -> tuple[list[int], list[int]]:
        first: list[int] = []
        second: list[int] = []
        for line in input_lines.splitlines():
            tokens = line.split()
            if len(tokens) < 2:
                raise ValueError(f"expected two numbers on line {line!r}")
            first.append(_parse_u32(tokens[0]))
            second.append(_parse_u32(tokens[1]))
        return first, second

    def part_one(self, parsed_input: tuple[list[int], list[int]]) -> str:
        left, right = parsed_input
        left.sort()
        right.sort()
        return str(sum(abs(a - b) for a, b in zip(left, right)))

    def part_two(self, parsed_input: tuple[list[int], list[int]]) -> str:
        left, right = parsed_input
        counts = Counter(right)
        return str(sum(value * counts[value] for value in left))