"""Day 14: predict where the restroom guard robots end up."""

from dataclasses import dataclass
from math import lcm, prod


@dataclass(frozen=True)
class Robot:
    """Starting position and velocity of a robot."""

    pos: tuple
    vel: tuple


def _pair(field, line):
    if not field.startswith(("p=", "v=")):
        raise ValueError(f"malformed robot: {line!r}")
    x, separator, y = field[2:].partition(",")
    if not separator:
        raise ValueError(f"malformed robot: {line!r}")
    return int(x), int(y)


def parse_robots(text):
    """One robot per line, written as 'p=x,y v=dx,dy'."""
    robots = []
    for line in text.splitlines():
        position, separator, velocity = line.partition(" ")
        if not separator:
            raise ValueError(f"malformed robot: {line!r}")
        robots.append(Robot(_pair(position, line), _pair(velocity, line)))
    return robots


def _position_after(robot, seconds, width, height):
    return (
        (robot.pos[0] + robot.vel[0] * seconds) % width,
        (robot.pos[1] + robot.vel[1] * seconds) % height,
    )


def part1(text, width=101, height=103, seconds=100):
    """Safety factor: product of robot counts in the four quadrants."""
    positions = [_position_after(robot, seconds, width, height) for robot in parse_robots(text)]
    mid_x, mid_y = width // 2, height // 2
    quadrants = (
        (lambda x: x > mid_x, lambda y: y > mid_y),
        (lambda x: x > mid_x, lambda y: y < mid_y),
        (lambda x: x < mid_x, lambda y: y > mid_y),
        (lambda x: x < mid_x, lambda y: y < mid_y),
    )
    return prod(
        sum(1 for x, y in positions if in_x(x) and in_y(y)) for in_x, in_y in quadrants
    )


def _transitions(occupied, size):
    """Changes between empty and occupied cells, scanning the map in order."""
    starts = sum(1 for index in occupied if index - 1 not in occupied)
    ends = sum(1 for index in occupied if index + 1 < size and index + 1 not in occupied)
    return starts + ends


def part2(text, width=101, height=103, limit=100_000):
    """First second within the limit at which the robots form the most orderly picture."""
    robots = parse_robots(text)
    size = width * height
    # Positions repeat with this period, so later seconds cannot score better.
    last = min(limit, lcm(width, height))
    best_score = None
    best_second = 0
    for second in range(1, last + 1):
        occupied = {
            x + y * width
            for x, y in (_position_after(robot, second, width, height) for robot in robots)
        }
        score = _transitions(occupied, size)
        if best_score is None or score < best_score:
            best_score = score
            best_second = second
    return best_second