"""Day 13: win prizes from claw machines as cheaply as possible."""

import re
from dataclasses import dataclass, replace

_COORDS = re.compile(r".*?: X=?([+-]?\d+), Y=?([+-]?\d+)")
_PRIZE_OFFSET = 10_000_000_000_000
_MAX_PRESSES = 100


@dataclass(frozen=True)
class ClawMachine:
    """Button movements and the prize position of one machine."""

    a: tuple
    b: tuple
    goal: tuple


def _coords(line):
    match = _COORDS.fullmatch(line) if line is not None else None
    if match is None:
        raise ValueError(f"malformed machine line: {line!r}")
    return int(match.group(1)), int(match.group(2))


def parse_machines(text):
    """Machines described by groups of button A, button B and prize lines."""
    lines = iter(text.splitlines())
    machines = []
    for line in lines:
        a = _coords(line)
        b = _coords(next(lines, None))
        goal = _coords(next(lines, None))
        next(lines, None)
        machines.append(ClawMachine(a, b, goal))
    return machines


def _lands(machine, a, b):
    return (
        a * machine.a[0] + b * machine.b[0] == machine.goal[0]
        and a * machine.a[1] + b * machine.b[1] == machine.goal[1]
    )


def _cheapest_within_limit(machine):
    presses = range(_MAX_PRESSES + 1)
    return min(
        (3 * a + b for a in presses for b in presses if _lands(machine, a, b)),
        default=0,
    )


def _cheapest_exact(machine):
    (ax, ay), (bx, by), (gx, gy) = machine.a, machine.b, machine.goal
    determinant = ax * by - bx * ay
    if determinant == 0:
        return 0
    a, a_rest = divmod(gx * by - gy * bx, determinant)
    b, b_rest = divmod(gy * ax - gx * ay, determinant)
    if a_rest or b_rest:
        return 0
    return 3 * a + b


def part1(text):
    """Fewest tokens to win every winnable prize with at most 100 presses each."""
    return sum(_cheapest_within_limit(machine) for machine in parse_machines(text))


def part2(text):
    """Fewest tokens once every prize is moved far away."""
    return sum(
        _cheapest_exact(
            replace(
                machine,
                goal=(machine.goal[0] + _PRIZE_OFFSET, machine.goal[1] + _PRIZE_OFFSET),
            )
        )
        for machine in parse_machines(text)
    )