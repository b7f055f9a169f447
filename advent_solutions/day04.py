"""Word search: count XMAS in every direction, then X-shaped MAS crosses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable

from .solution import Solution


class WordProgress(Enum):
    """How much of XMAS (or its reverse) has just been read."""

    NONE = auto()
    X = auto()
    XM = auto()
    XMA = auto()
    S = auto()
    SA = auto()
    SAM = auto()


_ON_M = {WordProgress.X: WordProgress.XM, WordProgress.SA: WordProgress.SAM}
_ON_A = {WordProgress.XM: WordProgress.XMA, WordProgress.S: WordProgress.SA}


@dataclass
class Tracker:
    """Counts XMAS and SAMX along a stream of letters."""

    count: int = 0
    word_progress: WordProgress = WordProgress.NONE

    def update(self, new_char: str) -> None:
        """Feed the next letter; raises ValueError for anything but X, M, A, S."""
        if new_char == "X":
            if self.word_progress is WordProgress.SAM:
                self.count += 1
            self.word_progress = WordProgress.X
        elif new_char == "M":
            self.word_progress = _ON_M.get(self.word_progress, WordProgress.NONE)
        elif new_char == "A":
            self.word_progress = _ON_A.get(self.word_progress, WordProgress.NONE)
        elif new_char == "S":
            if self.word_progress is WordProgress.XMA:
                self.count += 1
            self.word_progress = WordProgress.S
        else:
            raise ValueError(f"unexpected letter {new_char!r}")

    def new_line(self) -> None:
        """Forget any partial word at the end of a line."""
        self.word_progress = WordProgress.NONE

    def feed(self, letters: Iterable[str]) -> None:
        for letter in letters:
            self.update(letter)
        self.new_line()


def _dimensions(grid: list[list[str]], minimum: int) -> tuple[int, int]:
    if not grid:
        raise ValueError("empty grid")
    n_rows, n_cols = len(grid), len(grid[0])
    if n_rows < minimum or n_cols < minimum:
        raise ValueError(f"grid must be at least {minimum}x{minimum}")
    return n_rows, n_cols


class Day04(Solution):
    """Search a letter grid."""

    def parse_input(self, input_lines: str) -> list[list[str]]:
        return [list(line) for line in input_lines.splitlines()]

    def part_one(self, parsed_input: list[list[str]]) -> str:
        grid = parsed_input
        n_rows, n_cols = _dimensions(grid, 3)
        tracker = Tracker()

        for row in grid:
            tracker.feed(row[c] for c in range(n_cols))
        for c in range(n_cols):
            tracker.feed(grid[r][c] for r in range(n_rows))

        # Top-left to bottom-right diagonals.
        for r in range(n_rows - 3):
            tracker.feed(grid[r + i][i] for i in range(min(n_cols, n_rows - r)))
        for c in range(1, n_cols - 3):
            tracker.feed(grid[i][c + i] for i in range(min(n_cols - c, n_rows)))

        # Top-right to bottom-left diagonals.
        for r in range(n_rows - 3):
            tracker.feed(
                grid[r + i][n_cols - 1 - i] for i in range(min(n_cols - 1, n_rows - r))
            )
        for c in range(3, n_cols - 1):
            tracker.feed(grid[i][c - i] for i in range(min(c + 1, n_rows)))

        return str(tracker.count)

    def part_two(self, parsed_input: list[list[str]]) -> str:
        grid = parsed_input
        n_rows, n_cols = _dimensions(grid, 2)
        crosses = {("M", "M", "S", "S"), ("S", "S", "M", "M"),
                   ("M", "S", "M", "S"), ("S", "M", "S", "M")}
        count = 0
        for left in range(n_cols - 2):
            right = left + 2
            for top in range(n_rows - 2):
                bottom = top + 2
                if grid[top + 1][left + 1] != "A":
                    continue
                corners = (
                    grid[top][left],
                    grid[top][right],
                    grid[bottom][left],
                    grid[bottom][right],
                )
                if corners in crosses:
                    count += 1
        return str(count)