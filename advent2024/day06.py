"""Day 6: follow the lab guard and find loop-inducing obstructions."""

from dataclasses import dataclass

_HEADINGS = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass(frozen=True)
class _Lab:
    cells: str
    width: int
    height: int
    start: tuple

    def cell(self, pos):
        x, y = pos
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.cells[x + y * self.width]
        return None


def _parse(text):
    cells = [char for char in text if not char.isspace()]
    height = sum(1 for line in text.splitlines() if line)
    if height == 0:
        raise ValueError("the map is empty")
    width = len(cells) // height
    try:
        index = cells.index("^")
    except ValueError:
        raise ValueError("the map has no guard") from None
    cells[index] = "."
    return _Lab("".join(cells), width, height, (index % width, index // width))


def _step(lab, pos, heading, blocker=None):
    """The next position and heading, or None once the guard leaves."""
    dx, dy = _HEADINGS[heading]
    ahead = (pos[0] + dx, pos[1] + dy)
    cell = "#" if ahead == blocker else lab.cell(ahead)
    if cell is None:
        return None
    if cell == ".":
        return ahead, heading
    if cell == "#":
        return pos, (heading + 1) % 4
    raise ValueError(f"unexpected map cell {cell!r}")


def _patrol(lab):
    """Yield every position the guard steps onto."""
    state = (lab.start, 0)
    while (following := _step(lab, *state)) is not None:
        if following[0] != state[0]:
            yield following[0]
        state = following


def _loops(lab, blocker):
    state = (lab.start, 0)
    seen = {state}
    while (state := _step(lab, *state, blocker)) is not None:
        if state in seen:
            return True
        seen.add(state)
    return False


def part1(text):
    """Distinct positions visited before the guard leaves the map."""
    lab = _parse(text)
    return len({lab.start, *_patrol(lab)})


def part2(text):
    """Number of single obstructions on the route that trap the guard in a loop."""
    lab = _parse(text)
    return sum(_loops(lab, blocker) for blocker in set(_patrol(lab)))