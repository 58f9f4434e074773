# puzzlebox

Solvers for a selection of Advent of Code puzzles: days 1 to 5 of 2023 and
days 1 to 15 of 2024. Every day is a small module with no third-party
dependencies. Each module exposes `part1(text)` and `part2(text)`. Both take
the whole puzzle input as a string and return the answer as an integer.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using it from Python

The modules are named `y<year>_day<nn>`, for example `y2023_day05` or
`y2024_day12`:

```python
from puzzlebox import y2024_day01

with open("input.txt") as handle:
    text = handle.read()

print(y2024_day01.part1(text))
print(y2024_day01.part2(text))
```

Most modules also expose the building blocks behind the two parts.
For example:

- `y2024_day02.is_safe(levels)` and `y2024_day02.is_safe_with_dampener(levels)`
  check a single report.
- `y2024_day07.can_reach(target, numbers, allow_concat)` decides whether one
  equation can be satisfied.
- `y2024_day11.count_stones(stones, blinks)` counts stones after any number of
  blinks.
- `y2024_day12.regions(grid)` returns `Region` objects with `area`,
  `perimeter` and `sides`.
- `y2024_day13.parse_machines(text)` returns `ClawMachine` objects, and
  `y2024_day13.solve_exact(machine)` solves one machine in closed form.
- `y2024_day14.render(positions, width, height)` draws the robots' floor as
  text.
- `y2023_day05.parse_almanac(text)` returns an `Almanac`. Its `locate(seed)`
  method follows a seed through every conversion map.

Malformed input raises `ValueError`.

## Using it from the command line

Installing the package adds a `puzzlebox` command. It takes a year, a day, a
part (1 or 2) and an input file, reads standard input when the file is
omitted or given as `-`, and prints the answer:

```
puzzlebox 2024 1 1 input.txt
puzzlebox 2023 4 2 < input.txt
```

It exits with status 1 and a message on standard error when the file cannot
be read or the input is malformed. To list the options it accepts:

```
puzzlebox --help
```

## What it does not do

- It does not download puzzle inputs; you supply the text yourself.
- Only the days listed above have solvers.
- Day 14 of 2024 uses a fixed 101 × 103 floor in `part1` and `part2`; the
  lower-level functions take the width and height as arguments.
- Part 2 of day 5 of 2023 checks every seed in each range one by one, so it
  can take a long time on a full-size input.