"""Day 15: push boxes around a warehouse with a wandering robot."""

_MOVES = {"^": (0, -1), ">": (1, 0), "v": (0, 1), "<": (-1, 0)}
_WIDENED = {"#": "##", "O": "[]", ".": "..", "@": "@."}


def _shift(pos, direction):
    return pos[0] + direction[0], pos[1] + direction[1]


def _widen(row):
    try:
        return "".join(_WIDENED[char] for char in row)
    except KeyError as error:
        raise ValueError(f"unexpected map cell {error.args[0]!r}") from None


def _parse(text, wide):
    """The map as a dict of cells, the robot position and the list of moves."""
    lines = text.splitlines()
    blank = lines.index("") if "" in lines else len(lines)
    rows, move_lines = lines[:blank], lines[blank:]
    if not rows:
        raise ValueError("the warehouse map is empty")
    if wide:
        rows = [_widen(row) for row in rows]
    grid = {(x, y): char for y, row in enumerate(rows) for x, char in enumerate(row)}
    robot = next((pos for pos, char in grid.items() if char == "@"), None)
    if robot is None:
        raise ValueError("the warehouse map has no robot")
    grid[robot] = "."
    moves = []
    for char in "".join(move_lines):
        if char not in _MOVES:
            raise ValueError(f"unexpected move {char!r}")
        moves.append(_MOVES[char])
    return grid, robot, moves


def _cell(grid, pos):
    try:
        return grid[pos]
    except KeyError:
        raise ValueError(f"position {pos} is outside the warehouse") from None


def _gps_sum(grid, marker):
    return sum(x + 100 * y for (x, y), char in grid.items() if char == marker)


def part1(text):
    """Sum of box GPS coordinates after the robot has made all its moves."""
    grid, robot, moves = _parse(text, wide=False)
    for direction in moves:
        ahead = _shift(robot, direction)
        end = ahead
        while (cell := _cell(grid, end)) == "O":
            end = _shift(end, direction)
        if cell == "#":
            continue
        if cell != ".":
            raise ValueError(f"unexpected map cell {cell!r}")
        grid[ahead], grid[end] = grid[end], grid[ahead]
        robot = ahead
    return _gps_sum(grid, "O")


def _boxes_to_push(grid, robot, direction):
    """Cells of every box half that moves, or None if a wall stops the push."""
    boxes = set()
    stack = [_shift(robot, direction)]
    while stack:
        pos = stack.pop()
        if pos in boxes:
            continue
        cell = _cell(grid, pos)
        if cell == ".":
            continue
        if cell == "#":
            return None
        if cell == "[":
            partner = (pos[0] + 1, pos[1])
        elif cell == "]":
            partner = (pos[0] - 1, pos[1])
        else:
            raise ValueError(f"unexpected map cell {cell!r}")
        boxes.add(pos)
        stack.append(partner)
        stack.append(_shift(pos, direction))
    return boxes


def part2(text):
    """Sum of box GPS coordinates in the widened warehouse."""
    grid, robot, moves = _parse(text, wide=True)
    for direction in moves:
        boxes = _boxes_to_push(grid, robot, direction)
        if boxes is None:
            continue
        moved = {pos: grid[pos] for pos in boxes}
        for pos in moved:
            grid[pos] = "."
        for pos, char in moved.items():
            grid[_shift(pos, direction)] = char
        robot = _shift(robot, direction)
    return _gps_sum(grid, "[")