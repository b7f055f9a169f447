"""Lookup from puzzle day number to the solution that answers it."""

from __future__ import annotations

from .day00 import Day00
from .day01 import Day01
from .day02 import Day02
from .day03 import Day03
from .day04 import Day04
from .day05 import Day05
from .solution import Solution
from .unsolved import Unsolved

FIRST_DAY = 0
LAST_DAY = 25

_SOLVED: dict[int, type[Solution]] = {
    0: Day00,
    1: Day01,
    2: Day02,
    3: Day03,
    4: Day04,
    5: Day05,
}


def solution_for(day: int) -> Solution:
    """Return the solution for a day from 0 to 25.

    Days without a worked-out answer get a placeholder that answers 0.
    Raises ValueError for any other day.
    """
    if not FIRST_DAY <= day <= LAST_DAY:
        raise ValueError("Day not found")
    return _SOLVED.get(day, Unsolved)()