"""Corrupted memory: find mul instructions, optionally toggled by do/don't."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from .solution import Solution

_INSTRUCTION = re.compile(r"mul\((\d+),(\d+)\)|do\(\)|don't\(\)", re.ASCII)


@dataclass(frozen=True)
class Mul:
    """A multiplication whose product has already been worked out."""

    value: int


@dataclass(frozen=True)
class Do:
    """Turns multiplications back on."""


@dataclass(frozen=True)
class Dont:
    """Turns multiplications off."""


Instruction = Union[Mul, Do, Dont]


def parse_instructions(text: str) -> list[Instruction]:
    """Pick every well-formed instruction out of the text, skipping the rest.

    Raises ValueError if the text holds no instruction at all.
    """
    instructions: list[Instruction] = []
    for match in _INSTRUCTION.finditer(text):
        token = match.group(0)
        if token == "do()":
            instructions.append(Do())
        elif token == "don't()":
            instructions.append(Dont())
        else:
            instructions.append(Mul(int(match.group(1)) * int(match.group(2))))
    if not instructions:
        raise ValueError("no instruction found in input")
    return instructions


class Day03(Solution):
    """Sum the products, then only those that are enabled."""

    def parse_input(self, input_lines: str) -> list[Instruction]:
        return parse_instructions(input_lines)

    def part_one(self, parsed_input: list[Instruction]) -> str:
        return str(sum(i.value for i in parsed_input if isinstance(i, Mul)))

    def part_two(self, parsed_input: list[Instruction]) -> str:
        enabled = True
        total = 0
        for instruction in parsed_input:
            if isinstance(instruction, Mul):
                if enabled:
                    total += instruction.value
            else:
                enabled = isinstance(instruction, Do)
        return str(total)