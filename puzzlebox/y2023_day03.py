"""Engine schematic part numbers and gear ratios (2023, day 3)."""

from __future__ import annotations

import re
from collections import defaultdict
from collections.abc import Iterator, Sequence

_SYMBOLS = frozenset("=>?@") | (
    frozenset(chr(code) for code in range(ord("!"), ord("/") + 1)) - {"."}
)

_NUMBER = re.compile(r"[0-9]+")

Cell = tuple[int, int]


def is_symbol(char: str) -> bool:
    """Tell whether ``char`` counts as a schematic symbol."""
    return char in _SYMBOLS


def _numbers(grid: Sequence[str]) -> Iterator[tuple[int, list[Cell]]]:
    """Yield each number with its neighbouring cells, in scan order, digit by digit."""
    rows = len(grid)
    for row, line in enumerate(grid):
        for match in _NUMBER.finditer(line):
            cells = [
                (x, y)
                for col in range(match.start(), match.end())
                for x in range(row - 1, row + 2)
                if 0 <= x < rows
                for y in range(col - 1, col + 2)
                if 0 <= y < len(grid[x])
            ]
            yield int(match.group()), cells


def part_numbers(grid: Sequence[str]) -> list[int]:
    """Return the numbers adjacent to a symbol, in reading order."""
    return [
        value
        for value, cells in _numbers(grid)
        if any(is_symbol(grid[x][y]) for x, y in cells)
    ]


def gear_ratio_sum(grid: Sequence[str]) -> int:
    """Sum the products of the number pairs attached to the same ``*``.

    A number touching several ``*`` is attached to the last one met in scan order.
    """
    gears: dict[Cell, list[int]] = defaultdict(list)
    for value, cells in _numbers(grid):
        stars = [(x, y) for x, y in cells if grid[x][y] == "*"]
        if stars:
            gears[stars[-1]].append(value)
    return sum(nums[0] * nums[1] for nums in gears.values() if len(nums) == 2)


def part1(text: str) -> int:
    """Sum the part numbers of the schematic in ``text``."""
    return sum(part_numbers(text.split()))


def part2(text: str) -> int:
    """Sum the gear ratios of the schematic in ``text``."""
    return gear_ratio_sum(text.split())