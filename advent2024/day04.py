"""Day 4: word search for XMAS and crossed MAS."""

from dataclasses import dataclass
from itertools import product

_DIRECTIONS = ((1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1))
_DIAGONALS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


@dataclass(frozen=True)
class Field:
    """A rectangular grid of letters."""

    data: str
    width: int
    height: int

    @classmethod
    def from_text(cls, text):
        data = "".join(char for char in text if char.isalpha())
        height = sum(1 for line in text.splitlines() if line)
        if height == 0:
            raise ValueError("the field is empty")
        return cls(data, len(data) // height, height)

    def get(self, x, y):
        """The letter at (x, y), or a space outside the field."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.data[x + y * self.width]
        return " "


def _has_xmas(field, x, y, dx, dy):
    return all(
        field.get(x + dx * step, y + dy * step) == letter
        for step, letter in enumerate("XMAS")
    )


def _has_cross(field, x, y, dx, dy):
    return (
        field.get(x + dx, y + dy) == "M"
        and field.get(x + dy, y - dx) == "M"
        and field.get(x, y) == "A"
        and field.get(x - dx, y - dy) == "S"
        and field.get(x - dy, y + dx) == "S"
    )


def part1(text):
    """Occurrences of XMAS in any of the eight directions."""
    field = Field.from_text(text)
    return sum(
        _has_xmas(field, x, y, dx, dy)
        for x, y, (dx, dy) in product(range(field.width), range(field.height), _DIRECTIONS)
    )


def part2(text):
    """Occurrences of two MAS words crossing in an X."""
    field = Field.from_text(text)
    if field.width * field.height != len(field.data):
        raise ValueError("the field is not rectangular")
    return sum(
        _has_cross(field, x, y, dx, dy)
        for x, y, (dx, dy) in product(
            range(1, field.width), range(1, field.height), _DIAGONALS
        )
    )