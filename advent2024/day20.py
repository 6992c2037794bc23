"""Day 20: find cheats that shorten the race through the program."""

_OFFSETS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_THRESHOLD = 100


def _parse(text):
    rows = [line for line in text.splitlines() if line]
    grid = {(x, y): char for y, row in enumerate(rows) for x, char in enumerate(row)}

    def find(marker):
        pos = next((pos for pos, char in grid.items() if char == marker), None)
        if pos is None:
            raise ValueError(f"the racetrack has no {marker!r}")
        return pos

    return grid, find("S"), find("E")


def race_path(text):
    """Every track position mapped to its distance from the start."""
    grid, start, end = _parse(text)
    path = {start: 0}
    pos = start
    while pos != end:
        for dx, dy in _OFFSETS:
            following = (pos[0] + dx, pos[1] + dy)
            if grid.get(following, "#") != "#" and following not in path:
                path[following] = len(path)
                pos = following
                break
        else:
            raise ValueError("the track ends before reaching the finish")
    return path


def _cheat_offsets(shortest, longest):
    span = range(-longest, longest + 1)
    return [
        (dx, dy) for dx in span for dy in span if shortest <= abs(dx) + abs(dy) <= longest
    ]


def _count(path, offsets, threshold):
    total = 0
    for (x, y), distance in path.items():
        for dx, dy in offsets:
            other = path.get((x + dx, y + dy))
            if other is not None and distance - other - abs(dx) - abs(dy) >= threshold:
                total += 1
    return total


def count_cheats(text, max_cheat, threshold):
    """Cheats of at most max_cheat steps that save at least threshold steps."""
    return _count(race_path(text), _cheat_offsets(0, max_cheat), threshold)


def part1(text, threshold=_THRESHOLD):
    """Two-step cheats that save at least threshold picoseconds."""
    return _count(race_path(text), _cheat_offsets(2, 2), threshold)


def part2(text, threshold=_THRESHOLD):
    """Cheats of up to twenty steps that save at least threshold picoseconds."""
    return count_cheats(text, 20, threshold)