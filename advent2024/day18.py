"""Day 18: escape the memory grid as bytes fall into it."""

from bisect import bisect_left
from collections import deque

_SIZE = 71
_FIRST_BYTES = 1024
_OFFSETS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def parse(text):
    """The falling byte positions as (x, y) pairs, in order."""
    coords = []
    for line in text.splitlines():
        x, separator, y = line.partition(",")
        if not separator:
            raise ValueError(f"malformed coordinate: {line!r}")
        pos = (int(x), int(y))
        if min(pos) < 0:
            raise ValueError(f"coordinates must not be negative: {line!r}")
        coords.append(pos)
    return coords


def _within(coords, size):
    for x, y in coords:
        if x >= size or y >= size:
            raise ValueError(f"byte ({x}, {y}) falls outside the grid")
    return coords


def shortest_path(blocked, size=_SIZE):
    """Fewest steps from the top-left to the bottom-right corner, or None."""
    if size < 1:
        raise ValueError("the grid size must be positive")
    start, target = (0, 0), (size - 1, size - 1)
    distances = {start: 0}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        if pos == target:
            return distances[pos]
        for dx, dy in _OFFSETS:
            following = (pos[0] + dx, pos[1] + dy)
            if (
                0 <= following[0] < size
                and 0 <= following[1] < size
                and following not in blocked
                and following not in distances
            ):
                distances[following] = distances[pos] + 1
                queue.append(following)
    return None


def part1(text, size=_SIZE, count=_FIRST_BYTES):
    """Fewest steps to the exit after the first bytes have fallen."""
    coords = _within(parse(text), size)
    steps = shortest_path(set(coords[:count]), size)
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part2(text, size=_SIZE):
    """Coordinates 'x,y' of the first byte that cuts off the exit, or None."""
    coords = _within(parse(text), size)
    index = bisect_left(
        range(len(coords)),
        True,
        key=lambda n: shortest_path(set(coords[: n + 1]), size) is None,
    )
    if index == len(coords):
        return None
    x, y = coords[index]
    return f"{x},{y}"