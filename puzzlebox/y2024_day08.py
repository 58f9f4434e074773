"""Antenna antinodes on a city map (2024, day 8)."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

Cell = tuple[int, int]


def _in_bounds(grid: Sequence[str], row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[0])


def antenna_positions(grid: Sequence[str]) -> dict[str, list[Cell]]:
    """Map each antenna frequency (a letter or digit) to its positions in reading order."""
    positions: dict[str, list[Cell]] = {}
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char.isascii() and char.isalnum():
                positions.setdefault(char, []).append((row, col))
    return positions


def antinodes(grid: Sequence[str]) -> set[Cell]:
    """Return the antinodes one spacing beyond each pair of same-frequency antennas.

    Cells holding an antenna of the pair's own frequency, or ``#``, are skipped.
    """
    found: set[Cell] = set()
    for frequency, cells in antenna_positions(grid).items():
        for (r1, c1), (r2, c2) in combinations(cells, 2):
            dr, dc = r1 - r2, c1 - c2
            for row, col in ((r2 - dr, c2 - dc), (r1 + dr, c1 + dc)):
                if _in_bounds(grid, row, col) and grid[row][col] not in (frequency, "#"):
                    found.add((row, col))
    return found


def resonant_antinodes(grid: Sequence[str]) -> set[Cell]:
    """Return every in-map cell on the line through each same-frequency pair, at whole spacings."""
    found: set[Cell] = set()
    for cells in antenna_positions(grid).values():
        for (r1, c1), (r2, c2) in combinations(cells, 2):
            dr, dc = r1 - r2, c1 - c2
            for sign in (1, -1):
                row, col = r1, c1
                while _in_bounds(grid, row, col):
                    found.add((row, col))
                    row += sign * dr
                    col += sign * dc
    return found


def part1(text: str) -> int:
    """Count the distinct antinode cells."""
    return len(antinodes(text.split()))


def part2(text: str) -> int:
    """Count the distinct resonant antinode cells."""
    return len(resonant_antinodes(text.split()))