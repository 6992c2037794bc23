"""Day 9: compact an amphipod disk map and compute its checksum."""

from itertools import groupby


def expand(text):
    """Blocks of the disk map: file ids, with None for free space."""
    digits = (int(char) for char in text if char.isdigit())
    blocks = []
    for index, length in enumerate(digits):
        blocks.extend([index // 2 if index % 2 == 0 else None] * length)
    return blocks


def checksum(blocks):
    """Sum of position times file id over all occupied blocks."""
    return sum(position * file_id for position, file_id in enumerate(blocks) if file_id is not None)


def _require_blocks(text):
    blocks = expand(text)
    if not blocks:
        raise ValueError("the disk map is empty")
    return blocks


def part1(text):
    """Checksum after moving single blocks into the leftmost free space."""
    blocks = _require_blocks(text)
    left, right = 0, len(blocks) - 1
    while True:
        while blocks[left] is not None and left < right:
            left += 1
        while blocks[right] is None and left < right:
            right -= 1
        if left >= right:
            break
        blocks[left], blocks[right] = blocks[right], blocks[left]
    return checksum(blocks)


def _free_span(blocks, limit, length):
    """Start of the leftmost free run before limit that fits length blocks."""
    runs = groupby(enumerate(blocks[:limit]), key=lambda item: item[1] is None)
    for is_free, run in runs:
        positions = [position for position, _ in run]
        if is_free and len(positions) >= length:
            return positions[0]
    return None


def part2(text):
    """Checksum after moving whole files, highest id first."""
    blocks = _require_blocks(text)
    max_id = max((block for block in blocks if block is not None), default=-1)
    for file_id in range(max_id, -1, -1):
        start = blocks.index(file_id)
        end = start
        while end < len(blocks) and blocks[end] == file_id:
            end += 1
        length = end - start
        target = _free_span(blocks, start, length)
        if target is not None:
            blocks[target:target + length], blocks[start:end] = (
                blocks[start:end],
                blocks[target:target + length],
            )
    return checksum(blocks)