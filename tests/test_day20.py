import pytest

from advent2024.day20 import count_cheats, part1, part2, race_path

EXAMPLE = """###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############
"""

CORRIDOR = """#########
#S.....E#
#########
"""


def _find(text, marker):
    rows = [line for line in text.splitlines() if line]
    for y, row in enumerate(rows):
        if marker in row:
            return row.index(marker), y
    raise AssertionError(marker)


def test_race_path_covers_all_distances():
    path = race_path(EXAMPLE)
    assert sorted(path.values()) == list(range(len(path)))
    assert path[_find(EXAMPLE, "E")] == len(path) - 1
    assert path[_find(EXAMPLE, "S")] == min(path.values())


def test_race_path_length_of_example():
    assert race_path(EXAMPLE)[_find(EXAMPLE, "E")] == 84


def test_race_path_steps_are_adjacent():
    ordered = sorted(race_path(EXAMPLE).items(), key=lambda item: item[1])
    for (a, _), (b, _) in zip(ordered, ordered[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def test_example_part1():
    assert part1(EXAMPLE, 20) == 5


def test_example_part2():
    assert part2(EXAMPLE, 76) == 3


def test_counts_shrink_as_threshold_grows():
    counts = [part1(EXAMPLE, threshold) for threshold in range(1, 70)]
    assert counts == sorted(counts, reverse=True)
    assert not counts[-1]


def test_longer_cheats_find_at_least_as_many():
    for threshold in (2, 10, 50):
        assert part2(EXAMPLE, threshold) >= part1(EXAMPLE, threshold)
        assert count_cheats(EXAMPLE, 2, threshold) == part1(EXAMPLE, threshold)


def test_straight_corridor_has_no_useful_cheats():
    assert not part1(CORRIDOR, 1)
    assert not part2(CORRIDOR, 1)


def test_missing_start_is_rejected():
    with pytest.raises(ValueError):
        race_path(CORRIDOR.replace("S", "."))


def test_broken_track_is_rejected():
    with pytest.raises(ValueError):
        race_path("#########\n#S..#..E#\n#########\n")