"""Day 3: add up the valid multiplications in corrupted memory."""

import re

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_DISABLED = re.compile(r"don't\(\)[\S\s]*?(do\(\)|\Z)")


def _valid_operand(digits):
    return 1 <= len(digits) <= 3


def sum_products(text):
    """Sum of every mul(a,b) whose operands have one to three digits."""
    return sum(
        int(a) * int(b)
        for a, b in _MUL.findall(text)
        if _valid_operand(a) and _valid_operand(b)
    )


def strip_disabled(text):
    """Remove every region from don't() up to the next do() or the end."""
    return _DISABLED.sub("", text)


def part1(text):
    """Sum of all valid multiplications."""
    return sum_products(text)


def part2(text):
    """Sum of the multiplications that are still enabled."""
    return sum_products(strip_disabled(text))