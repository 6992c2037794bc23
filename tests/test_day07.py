import pytest

from advent2024.day07 import parse, part1, part2, reachable

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_example_part1():
    assert part1(EXAMPLE) == 3749


def test_example_part2():
    assert part2(EXAMPLE) == 11387


def test_parse_first_equation():
    assert parse(EXAMPLE)[0] == (190, [10, 19])


def test_single_number_reaches_itself():
    assert reachable([5], False) == {5}


def test_concatenation_adds_values():
    assert 190 in reachable([10, 19], False)
    assert 1019 not in reachable([10, 19], False)
    assert 1019 in reachable([10, 19], True)


def test_concatenation_is_a_superset():
    for _, numbers in parse(EXAMPLE):
        assert reachable(numbers, False) <= reachable(numbers, True)


def test_part2_never_below_part1():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


def test_empty_numbers_rejected():
    with pytest.raises(ValueError):
        reachable([], False)


def test_missing_separator_rejected():
    with pytest.raises(ValueError):
        parse("190 10 19\n")