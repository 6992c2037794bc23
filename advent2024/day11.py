"""Day 11: count the plutonian pebbles after repeated blinking."""

from collections import Counter


def blink(stone):
    """The stones that one stone turns into after a single blink."""
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        middle = len(digits) // 2
        return int(digits[:middle]), int(digits[middle:])
    return (stone * 2024,)


def _parse(text):
    stones = [int(token) for token in text.split()]
    if any(stone < 0 for stone in stones):
        raise ValueError("stone numbers must not be negative")
    return stones


def count_stones(text, blinks):
    """Number of stones after the given number of blinks."""
    counts = Counter(_parse(text))
    for _ in range(blinks):
        following = Counter()
        for stone, amount in counts.items():
            for result in blink(stone):
                following[result] += amount
        counts = following
    return sum(counts.values())


def part1(text):
    """Number of stones after 25 blinks."""
    return count_stones(text, 25)


def part2(text):
    """Number of stones after 75 blinks."""
    return count_stones(text, 75)