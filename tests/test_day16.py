import pytest

from advent2024.day16 import Direction, part1, part2

EXAMPLE = """\
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""


def _corridor(length):
    wall = "#" * (length + 4)
    return f"{wall}\n#S{'.' * length}E#\n{wall}\n"


def test_part1_example():
    assert part1(EXAMPLE) == 7036


def test_part2_example():
    assert part2(EXAMPLE) == 45


@pytest.mark.parametrize("length", [0, 1, 5])
def test_straight_corridor_costs_one_per_step(length):
    assert part1(_corridor(length)) == length + 1


@pytest.mark.parametrize("length", [0, 1, 5])
def test_straight_corridor_tiles(length):
    assert part2(_corridor(length)) == length + 2


def test_turns_cost_more_than_steps():
    bent = "####\n#.E#\n#S##\n####\n"
    straight = "#####\n#S.E#\n#####\n"
    assert part1(bent) > part1(straight)


def test_east_offset():
    assert Direction.EAST.offset() == (1, 0)


def test_east_rotations():
    assert list(Direction.EAST.rotations()) == [Direction.NORTH, Direction.SOUTH]


@pytest.mark.parametrize("name", ["EAST", "SOUTH", "WEST", "NORTH"])
def test_rotations_are_perpendicular_and_opposite(name):
    heading = Direction[name]
    first, second = Direction.rotations(heading)
    dx, dy = Direction.offset(heading)
    for turned in (first, second):
        tx, ty = Direction.offset(turned)
        assert dx * tx + dy * ty == 0
    (ax, ay), (bx, by) = Direction.offset(first), Direction.offset(second)
    assert (ax + bx, ay + by) == (0, 0)


def test_missing_start_is_rejected():
    with pytest.raises(ValueError):
        part1("#####\n#..E#\n#####\n")


def test_unreachable_end_is_rejected():
    with pytest.raises(ValueError):
        part1("#####\n#S#E#\n#####\n")