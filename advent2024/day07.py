"""Day 7: find calibration equations that can be made true."""


def parse(text):
    """List of (target, numbers) pairs, one per line."""
    equations = []
    for line in text.splitlines():
        target, separator, rest = line.partition(": ")
        if not separator:
            raise ValueError(f"malformed equation: {line!r}")
        equations.append((int(target), [int(number) for number in rest.split()]))
    return equations


def _combine(left, right, concatenate):
    yield left + right
    yield left * right
    if concatenate:
        yield int(f"{left}{right}")


def reachable(numbers, concatenate):
    """Every value obtainable by combining the numbers left to right."""
    if not numbers:
        raise ValueError("an equation needs at least one number")
    first, *rest = numbers
    values = {first}
    for number in rest:
        values = {result for value in values for result in _combine(value, number, concatenate)}
    return values


def _total(text, concatenate):
    return sum(
        target
        for target, numbers in parse(text)
        if target in reachable(numbers, concatenate)
    )


def part1(text):
    """Sum of targets reachable with addition and multiplication."""
    return _total(text, False)


def part2(text):
    """Sum of targets reachable when concatenation is also allowed."""
    return _total(text, True)