"""Day 16: find the cheapest routes through the reindeer maze."""

import heapq
from collections import defaultdict
from enum import IntEnum
from math import inf

_STEP_COST = 1
_TURN_COST = 1000


class Direction(IntEnum):
    """Headings in the maze."""

    EAST = 0
    SOUTH = 1
    WEST = 2
    NORTH = 3

    def offset(self):
        """The (dx, dy) of one step in this direction."""
        return _OFFSETS[self]

    def rotations(self):
        """The two directions reachable by a quarter turn."""
        return _ROTATIONS[self]


_OFFSETS = {
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
    Direction.NORTH: (0, -1),
}

_ROTATIONS = {
    Direction.EAST: (Direction.NORTH, Direction.SOUTH),
    Direction.SOUTH: (Direction.EAST, Direction.WEST),
    Direction.WEST: (Direction.SOUTH, Direction.NORTH),
    Direction.NORTH: (Direction.WEST, Direction.EAST),
}


def _parse(text):
    rows = [line for line in text.splitlines() if line]
    grid = {(x, y): char for y, row in enumerate(rows) for x, char in enumerate(row)}

    def find(marker):
        pos = next((pos for pos, char in grid.items() if char == marker), None)
        if pos is None:
            raise ValueError(f"the maze has no {marker!r}")
        return pos

    return grid, find("S"), find("E")


def _entry(cost, pos, heading):
    # Among equal costs the largest state is expanded first.
    return cost, -pos[0], -pos[1], -int(heading)


def _unpack(entry):
    cost, x, y, heading = entry
    return cost, ((-x, -y), Direction(-heading))


def _neighbours(cost, pos, heading):
    dx, dy = heading.offset()
    yield cost + _STEP_COST, ((pos[0] + dx, pos[1] + dy), heading)
    for turned in heading.rotations():
        yield cost + _TURN_COST, (pos, turned)


def _search(grid, start):
    """Best cost of every state and the predecessors on its cheapest routes."""
    best = {}
    previous = defaultdict(set)
    expanded = set()
    heap = [_entry(0, start, Direction.EAST)]
    while heap:
        cost, state = _unpack(heapq.heappop(heap))
        if cost > best.get(state, inf) or (cost, state) in expanded:
            continue
        expanded.add((cost, state))
        for new_cost, new_state in _neighbours(cost, *state):
            if grid.get(new_state[0], "#") == "#":
                continue
            if new_cost <= best.get(new_state, inf):
                best[new_state] = new_cost
                heapq.heappush(heap, _entry(new_cost, *new_state))
                previous[new_state].add(state)
    return best, previous


def part1(text):
    """Lowest score of any route from the start tile to the end tile."""
    grid, start, end = _parse(text)
    best, _ = _search(grid, start)
    costs = [best[(end, heading)] for heading in Direction if (end, heading) in best]
    if not costs:
        raise ValueError("the end tile cannot be reached")
    return min(costs)


def part2(text):
    """Number of tiles lying on at least one best route."""
    grid, start, end = _parse(text)
    _, previous = _search(grid, start)
    visited = set()
    stack = [(end, heading) for heading in Direction]
    while stack:
        state = stack.pop()
        if state in visited:
            continue
        visited.add(state)
        stack.extend(previous.get(state, ()))
    return len({pos for pos, _ in visited})