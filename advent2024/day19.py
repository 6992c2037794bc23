"""Day 19: arrange towel patterns into the requested designs."""


def parse(text):
    """The available patterns and the non-empty designs to build."""
    lines = text.splitlines()
    if not lines or not lines[0]:
        raise ValueError("the towel patterns are missing")
    patterns = lines[0].split(", ")
    designs = [line for line in lines[1:] if line]
    return patterns, designs


def count_arrangements(patterns, design):
    """Number of ways to build the design by concatenating patterns."""
    if any(not pattern for pattern in patterns):
        raise ValueError("towel patterns must not be empty")
    ways = [1] + [0] * len(design)
    for start in range(len(design)):
        if not ways[start]:
            continue
        for pattern in patterns:
            if design.startswith(pattern, start):
                ways[start + len(pattern)] += ways[start]
    return ways[-1]


def part1(text):
    """Number of designs that can be built at all."""
    patterns, designs = parse(text)
    return sum(1 for design in designs if count_arrangements(patterns, design))


def part2(text):
    """Total number of ways to build every design."""
    patterns, designs = parse(text)
    return sum(count_arrangements(patterns, design) for design in designs)