"""Command line entry point: solve one part of one puzzle for an input file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from types import ModuleType

from puzzlebox import (
    y2023_day01,
    y2023_day02,
    y2023_day03,
    y2023_day04,
    y2023_day05,
    y2024_day01,
    y2024_day02,
    y2024_day03,
    y2024_day04,
    y2024_day05,
    y2024_day06,
    y2024_day07,
    y2024_day08,
    y2024_day09,
    y2024_day10,
    y2024_day11,
    y2024_day12,
    y2024_day13,
    y2024_day14,
    y2024_day15,
)

SOLVERS: dict[tuple[int, int], ModuleType] = {
    (2023, 1): y2023_day01,
    (2023, 2): y2023_day02,
    (2023, 3): y2023_day03,
    (2023, 4): y2023_day04,
    (2023, 5): y2023_day05,
    (2024, 1): y2024_day01,
    (2024, 2): y2024_day02,
    (2024, 3): y2024_day03,
    (2024, 4): y2024_day04,
    (2024, 5): y2024_day05,
    (2024, 6): y2024_day06,
    (2024, 7): y2024_day07,
    (2024, 8): y2024_day08,
    (2024, 9): y2024_day09,
    (2024, 10): y2024_day10,
    (2024, 11): y2024_day11,
    (2024, 12): y2024_day12,
    (2024, 13): y2024_day13,
    (2024, 14): y2024_day14,
    (2024, 15): y2024_day15,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="puzzlebox", description="Solve one part of a daily puzzle."
    )
    parser.add_argument("year", type=int, help="puzzle year")
    parser.add_argument("day", type=int, help="puzzle day")
    parser.add_argument("part", type=int, choices=(1, 2), help="puzzle part")
    parser.add_argument(
        "input", nargs="?", default="-", help="input file, or '-' for standard input"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the solver chosen on the command line and print its answer."""
    parser = _parser()
    args = parser.parse_args(argv)
    module = SOLVERS.get((args.year, args.day))
    if module is None:
        parser.error(f"no solver for {args.year} day {args.day}")
    try:
        text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    except OSError as exc:
        print(f"puzzlebox: {exc}", file=sys.stderr)
        return 1
    solve = module.part1 if args.part == 1 else module.part2
    try:
        answer = solve(text)
    except (ValueError, IndexError) as exc:
        print(f"puzzlebox: {exc}", file=sys.stderr)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())