"""Command line entry point that solves one puzzle part from an input file."""

import argparse
import sys

from advent2024 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
)

_DAYS = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
    12: day12,
    13: day13,
    14: day14,
    15: day15,
    16: day16,
    17: day17,
    18: day18,
    19: day19,
    20: day20,
}


def solve(day, part, text):
    """Answer of the given day and part for the puzzle input text."""
    module = _DAYS.get(day)
    if module is None:
        raise ValueError(f"no solution for day {day}")
    if part == 1:
        return module.part1(text)
    if part == 2:
        return module.part2(text)
    raise ValueError(f"part must be 1 or 2, not {part}")


def _build_parser():
    parser = argparse.ArgumentParser(prog="advent2024", description="Solve a puzzle part.")
    parser.add_argument("day", type=int, choices=sorted(_DAYS))
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument(
        "input",
        nargs="?",
        default="input.txt",
        help="puzzle input file, or - for standard input (default: input.txt)",
    )
    return parser


def main(argv=None):
    """Read the puzzle input, solve it and print the result."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.input == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as error:
            parser.error(f"cannot read {args.input}: {error.strerror}")
    try:
        result = solve(args.day, args.part, text)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    if result is None:
        return 1
    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())