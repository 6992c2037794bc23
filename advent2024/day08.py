"""Day 8: count antinodes created by resonant antennas."""

from collections import defaultdict
from itertools import count, permutations


def _parse(text):
    cells = [char for char in text if not char.isspace()]
    height = sum(1 for line in text.splitlines() if line)
    if height == 0:
        raise ValueError("the map is empty")
    width = len(cells) // height
    groups = defaultdict(list)
    for index, char in enumerate(cells):
        if char != ".":
            groups[char].append((index % width, index // width))
    return groups, width, height


def _antinodes(text, harmonics):
    groups, width, height = _parse(text)

    def inside(pos):
        return 0 <= pos[0] < width and 0 <= pos[1] < height

    found = set()
    for antennas in groups.values():
        for pos, other in permutations(antennas, 2):
            dx, dy = pos[0] - other[0], pos[1] - other[1]
            if not harmonics:
                node = (pos[0] + dx, pos[1] + dy)
                if inside(node):
                    found.add(node)
                continue
            for step in count():
                node = (pos[0] + step * dx, pos[1] + step * dy)
                if not inside(node):
                    break
                found.add(node)
    return found


def part1(text):
    """Distinct antinode positions at twice the antenna distance."""
    return len(_antinodes(text, False))


def part2(text):
    """Distinct antinode positions along every antenna line."""
    return len(_antinodes(text, True))