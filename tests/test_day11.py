import pytest

from advent2024.day11 import blink, count_stones, part1, part2


def test_zero_becomes_one():
    assert blink(0) == (1,)


def test_odd_digit_count_is_multiplied():
    assert blink(1) == (2024,)


def test_even_digit_count_is_split_without_leading_zeros():
    assert blink(1000) == (10, 0)


def test_example_after_six_blinks():
    assert count_stones("125 17", 6) == 22


def test_part1_example():
    assert part1("125 17") == 55312


def test_zero_blinks_keeps_every_stone():
    text = "0 1 10 99 999"
    assert count_stones(text, 0) == len(text.split())


@pytest.mark.parametrize("blinks", [1, 5, 12])
def test_stones_evolve_independently(blinks):
    assert count_stones("125 17", blinks) == count_stones("125", blinks) + count_stones(
        "17", blinks
    )


def test_stone_count_never_shrinks():
    counts = [count_stones("0 7 4048", blinks) for blinks in range(10)]
    assert counts == sorted(counts)


def test_part2_exceeds_part1():
    assert part2("125 17") > part1("125 17")


def test_negative_stone_is_rejected():
    with pytest.raises(ValueError):
        count_stones("3 -4", 1)