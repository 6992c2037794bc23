# advent2024

Solutions to the 2024 Advent of Code puzzles, days 1 through 20. Each day is
a module, `advent2024.day01` to `advent2024.day20`, with `part1` and `part2`
functions that take the puzzle input text and return the answer. Malformed
input raises `ValueError`. The package has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

## Command line

```
advent2024 DAY PART [INPUT]
```

`DAY` is 1 to 20 and `PART` is 1 or 2. `INPUT` is the puzzle input file; it
defaults to `input.txt` in the current directory, and `-` reads standard
input. The answer is printed as `Result: <answer>`.

The exit status is 0 on success. It is 1 when the input is malformed (the
message goes to standard error) or when there is no answer, which happens
for day 18 part 2 if no byte ever cuts off the exit.

The command always uses the puzzle's own sizes and thresholds: a 101 by 103
room and 100 seconds on day 14, a 71 by 71 grid and the first 1024 bytes on
day 18, and a saving of at least 100 picoseconds on day 20.

## Library use

```python
from advent2024 import day01

with open("input.txt") as handle:
    text = handle.read()

print(day01.part1(text))
print(day01.part2(text))
```

`advent2024.cli.solve(day, part, text)` picks the right module and returns
its answer.

Some days take extra parameters, so the smaller examples from the puzzle
text can be run as well:

- `day14.part1(text, width=101, height=103, seconds=100)` and
  `day14.part2(text, width=101, height=103, limit=100_000)`
- `day18.part1(text, size=71, count=1024)` and `day18.part2(text, size=71)`;
  `part2` returns the coordinates as `"x,y"`, or `None`
- `day20.part1(text, threshold=100)` and `day20.part2(text, threshold=100)`

A few days also expose the pieces their parts are built from, for example
`day02.is_safe` and `day02.is_safe_with_dampener`, `day03.sum_products` and
`day03.strip_disabled`, `day04.Field`, `day07.reachable`, `day09.expand` and
`day09.checksum`, `day11.blink` and `day11.count_stones`,
`day13.parse_machines`, `day14.parse_robots`, `day16.Direction`,
`day17.run` and `day17.find_initial_a`, `day18.shortest_path`,
`day19.count_arrangements`, and `day20.race_path` and `day20.count_cheats`.

## What is not included

Only days 1 to 20 are solved; there are no modules for days 21 to 25. The
package does not download puzzle inputs or submit answers, and the command
line has no options for the sizes and thresholds above; call the functions
directly to change them.

## Tests

```
pip install .[test]
pytest
```