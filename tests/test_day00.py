import pytest

from advent_solutions.day00 import Day00, square_difference_in_line, sum_numbers_in_line


def test_part1_case1():
    assert Day00().solve_part_one("1, 2\n4, 3") == "10"


def test_part2_case1():
    assert Day00().solve_part_two("1, 2\n4, 3") == "2"


def test_both_case1(capsys):
    assert Day00().solve("1, 2\n40, 30", False) == ("73", "101")
    capsys.readouterr()


def test_empty_input_is_zero():
    assert Day00().solve_part_one("") == "0"
    assert Day00().solve_part_two("") == "0"


def test_sum_numbers_in_line():
    assert sum_numbers_in_line("40, 30") == 70


def test_square_difference_is_symmetric():
    assert square_difference_in_line("1, 2") == square_difference_in_line("2, 1") == 1


def test_unparseable_number_raises():
    with pytest.raises(ValueError):
        sum_numbers_in_line("1,2")


def test_square_difference_requires_two_numbers():
    with pytest.raises(ValueError):
        square_difference_in_line("1, 2, 3")