"""Day 12: price the fences around garden regions."""

_ORTHOGONAL = ((0, -1), (1, 0), (0, 1), (-1, 0))
_NEIGHBOURS = ((0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1))


def _corners(state):
    """Corners of a cell whose same-plant neighbours are the set bits of state."""
    total = 0
    for side in range(0, 8, 2):
        left = state >> side & 1
        edge = state >> (side + 1) & 1
        right = state >> ((side + 2) % 8) & 1
        if (left and not edge and right) or (not left and not right):
            total += 1
    return total


_CORNERS = tuple(_corners(state) for state in range(256))


def _parse(text):
    cells = [char for char in text if not char.isspace()]
    height = sum(1 for line in text.splitlines() if line)
    if height == 0:
        raise ValueError("the map is empty")
    width = len(cells) // height
    return {
        (index % width, index // width): char
        for index, char in enumerate(cells[: width * height])
    }


def _around(pos, offsets):
    return ((pos[0] + dx, pos[1] + dy) for dx, dy in offsets)


def _regions(garden):
    """Yield (plant, cells) for every connected region, in reading order."""
    seen = set()
    for start, plant in garden.items():
        if start in seen:
            continue
        region = set()
        stack = [start]
        while stack:
            pos = stack.pop()
            if pos in region:
                continue
            region.add(pos)
            stack.extend(n for n in _around(pos, _ORTHOGONAL) if garden.get(n) == plant)
        seen |= region
        yield plant, region


def _perimeter(garden, plant, region):
    return sum(
        garden.get(neighbour) != plant
        for pos in region
        for neighbour in _around(pos, _ORTHOGONAL)
    )


def _sides(garden, plant, region):
    total = 0
    for pos in region:
        state = sum(
            1 << bit
            for bit, neighbour in enumerate(_around(pos, _NEIGHBOURS))
            if garden.get(neighbour) == plant
        )
        total += _CORNERS[state]
    return total


def part1(text):
    """Total price using area times perimeter."""
    garden = _parse(text)
    return sum(
        len(region) * _perimeter(garden, plant, region)
        for plant, region in _regions(garden)
    )


def part2(text):
    """Total price using area times number of sides."""
    garden = _parse(text)
    return sum(
        len(region) * _sides(garden, plant, region) for plant, region in _regions(garden)
    )