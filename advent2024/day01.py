"""Day 1: reconcile two columns of location ids."""

from collections import Counter


def _parse_id(token):
    value = int(token)
    if value < 0:
        raise ValueError(f"location id must not be negative: {token!r}")
    return value


def parse(text):
    """Split whitespace-separated pairs into a left and a right list."""
    numbers = [_parse_id(token) for token in text.split()]
    if len(numbers) % 2:
        raise ValueError("both location lists must have the same length")
    return numbers[0::2], numbers[1::2]


def part1(text):
    """Total distance between the sorted left and right lists."""
    left, right = parse(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right), strict=True))


def part2(text):
    """Similarity score: each left id times its count in the right list."""
    left, right = parse(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)