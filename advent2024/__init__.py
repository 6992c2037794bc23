"""Solutions to the 2024 Advent of Code puzzles, days 1 to 20."""

__version__ = "0.1.0"