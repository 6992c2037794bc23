"""Day 10: score and rate hiking trails on a topographic map."""

_HEADINGS = ((0, -1), (1, 0), (0, 1), (-1, 0))
_DIGITS = "0123456789"


def _parse(text):
    cells = [char for char in text if not char.isspace()]
    height = sum(1 for line in text.splitlines() if line)
    if height == 0:
        raise ValueError("the map is empty")
    width = len(cells) // height
    heights = {}
    for index, char in enumerate(cells[: width * height]):
        if char not in _DIGITS:
            raise ValueError(f"unexpected map cell {char!r}")
        heights[(index % width, index // width)] = int(char)
    return heights


def _trail_ends(heights, start):
    """Yield the summit reached by every distinct trail from start."""
    stack = [start]
    while stack:
        pos = stack.pop()
        value = heights[pos]
        if value == 9:
            yield pos
            continue
        for dx, dy in _HEADINGS:
            following = (pos[0] + dx, pos[1] + dy)
            if heights.get(following) == value + 1:
                stack.append(following)


def _trailheads(heights):
    return (pos for pos, value in heights.items() if value == 0)


def part1(text):
    """Sum over trailheads of the number of distinct summits they reach."""
    heights = _parse(text)
    return sum(len(set(_trail_ends(heights, start))) for start in _trailheads(heights))


def part2(text):
    """Sum over trailheads of the number of distinct trails they start."""
    heights = _parse(text)
    return sum(
        sum(1 for _ in _trail_ends(heights, start)) for start in _trailheads(heights)
    )