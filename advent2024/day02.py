"""Day 2: check reactor reports for safely changing levels."""


def parse(text):
    """One list of integer levels per line."""
    return [[int(token) for token in line.split()] for line in text.splitlines()]


def is_safe(report):
    """True if levels change monotonically by 1 to 3 at every step."""
    if len(report) < 2:
        raise ValueError("a report needs at least two levels")
    allowed = range(1, 4) if report[0] < report[1] else range(-3, 0)
    return all(b - a in allowed for a, b in zip(report, report[1:]))


def is_safe_with_dampener(report):
    """True if the report is safe, or becomes safe with one level removed."""
    return is_safe(report) or any(
        is_safe(report[:index] + report[index + 1:]) for index in range(len(report))
    )


def part1(text):
    """Number of safe reports."""
    return sum(1 for report in parse(text) if is_safe(report))


def part2(text):
    """Number of reports that are safe with the problem dampener."""
    return sum(1 for report in parse(text) if is_safe_with_dampener(report))