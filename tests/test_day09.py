import pytest

from advent2024.day09 import checksum, expand, part1, part2

EXAMPLE = "2333133121414131402\n"


def test_example_part1():
    assert part1(EXAMPLE) == 1928


def test_example_part2():
    assert part2(EXAMPLE) == 2858


def test_expand_small_map():
    assert expand("12345") == [0, None, None, 1, 1, 1, None, None, None, None, 2, 2, 2, 2, 2]


def test_expand_ignores_non_digits():
    assert expand("12345\n") == expand("12345")


def test_expand_length_is_sum_of_digits():
    assert len(expand(EXAMPLE)) == sum(int(char) for char in EXAMPLE.strip())


def test_full_disk_is_left_alone():
    text = "30302"
    assert part1(text) == checksum(expand(text))
    assert part2(text) == checksum(expand(text))


def test_free_space_is_ignored_by_checksum():
    assert checksum([None, None]) == checksum([])


def test_compaction_never_increases_checksum():
    original = checksum(expand(EXAMPLE))
    assert part1(EXAMPLE) <= original
    assert part2(EXAMPLE) <= original


def test_empty_map_rejected():
    with pytest.raises(ValueError):
        part1("")
    with pytest.raises(ValueError):
        part2("\n")