import pytest

from advent_solutions.day02 import (
    Day02,
    can_make_safe,
    check_safe,
    first_unsafe_diff_idx,
)

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9"""


def test_part1_case1():
    assert Day02().solve_part_one("") == "0"


def test_part2_case1():
    assert Day02().solve_part_two(EXAMPLE) == "4"


def test_both_case1(capsys):
    assert Day02().solve("", False) == ("0", "0")
    capsys.readouterr()


def test_can_make_safe_case1():
    assert can_make_safe([1, -1, -3, -1, -3]) is True


def test_can_make_safe_case2():
    assert can_make_safe([1, -1, -1, -1, -3, -1]) is True


def test_can_make_safe_case3():
    assert can_make_safe([-2, 2, 2, 1, 3, 2]) is True


def test_parse_produces_differences():
    assert Day02().parse_input("7 6 4 2 1") == [[-1, -2, -2, -1]]


def test_check_safe_examples():
    assert check_safe([-1, -2, -2, -1]) is True
    assert check_safe([1, 5, 1, 1]) is False
    assert check_safe([-2, -2, 0, -3]) is False


def test_first_unsafe_diff_idx():
    assert first_unsafe_diff_idx([1, 5, 1, 1]) == 1
    assert first_unsafe_diff_idx([-1, -2, -2, -1]) is None


def test_cannot_make_safe():
    assert can_make_safe([1, 5, 1, 1]) is False


def test_safe_reports_stay_safe_with_dampener():
    for diffs in Day02().parse_input(EXAMPLE):
        if check_safe(diffs):
            assert can_make_safe(diffs)


def test_out_of_range_level_rejected():
    with pytest.raises(ValueError):
        Day02().parse_input("1 200")