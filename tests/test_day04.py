import pytest

from advent_solutions.day04 import Day04, Tracker, WordProgress

EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX"""


def test_part_one_example():
    assert Day04().solve_part_one(EXAMPLE) == "18"


def test_part_two_example():
    assert Day04().solve_part_two(EXAMPLE) == "9"


def _feed(text):
    tracker = Tracker()
    for letter in text:
        tracker.update(letter)
    return tracker


@pytest.mark.parametrize(
    "text, expected",
    [("XMAS", 1), ("SAMX", 1), ("XMASAMX", 2), ("XMXMAS", 1), ("MASX", 0)],
)
def test_tracker_counts(text, expected):
    assert _feed(text).count == expected


def test_tracker_progress_state():
    assert _feed("XMA").word_progress is WordProgress.XMA
    assert _feed("SAM").word_progress is WordProgress.SAM
    assert _feed("XA").word_progress is WordProgress.NONE


def test_tracker_new_line_resets():
    tracker = _feed("XMA")
    tracker.new_line()
    tracker.update("S")
    assert tracker.count == 0
    assert tracker.word_progress is WordProgress.S


def test_tracker_rejects_other_letters():
    with pytest.raises(ValueError):
        Tracker().update("Q")


def test_parse_input_grid():
    assert Day04().parse_input("XM\nAS") == [["X", "M"], ["A", "S"]]


def test_part_one_small_grid_raises():
    with pytest.raises(ValueError):
        Day04().solve_part_one("XM\nAS")


def test_part_one_empty_raises():
    with pytest.raises(ValueError):
        Day04().solve_part_one("")


def test_part_two_single_cross():
    assert Day04().solve_part_two("MXS\nXAX\nMXS") == "1"


def test_part_two_no_cross():
    assert Day04().solve_part_two("MXM\nXAX\nMXS") == "0"