import pytest

from advent_solutions.unsolved import Unsolved


def test_part1_case1():
    assert Unsolved().solve_part_one("") == "0"


def test_part2_case1():
    assert Unsolved().solve_part_two("") == "0"


def test_both_case1():
    assert Unsolved().solve("", False) == ("0", "0")


def test_both_prints_answers(capsys):
    Unsolved().solve("", False)
    out = capsys.readouterr().out
    assert out == "----------\nPart 1: 0\nPart 2: 0\n"


def test_both_with_time():
    assert Unsolved().solve("", True) == ("0", "0")


@pytest.mark.parametrize("text", ["1 2 3\n4 5 6", "anything at all", "\n\n"])
def test_parse_keeps_text(text):
    assert Unsolved().parse_input(text) == text


@pytest.mark.parametrize("text", ["1 2 3\n4 5 6", "anything at all"])
def test_answers_are_zero_for_any_input(text):
    assert Unsolved().solve(text, False) == ("0", "0")