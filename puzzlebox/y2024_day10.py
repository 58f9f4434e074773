"""Hiking trails on a topographic map (2024, day 10)."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

Cell = tuple[int, int]

_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _height(char: str) -> int:
    return ord(char) - ord("0")


def _trail_ends(grid: Sequence[str], start: Cell) -> Iterator[Cell]:
    """Yield the height-9 cell at the end of every uphill trail from ``start``."""
    rows, cols = len(grid), len(grid[0])
    stack = [start]
    while stack:
        x, y = stack.pop()
        height = _height(grid[x][y])
        if height == 9:
            yield x, y
        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < rows and 0 <= ny < cols and _height(grid[nx][ny]) == height + 1:
                stack.append((nx, ny))


def trailhead_score(grid: Sequence[str], start: Cell) -> int:
    """Count the distinct height-9 cells reachable from ``start``."""
    return len(set(_trail_ends(grid, start)))


def trailhead_rating(grid: Sequence[str], start: Cell) -> int:
    """Count the distinct uphill trails from ``start`` to any height-9 cell."""
    return sum(1 for _ in _trail_ends(grid, start))


def _trailheads(grid: Sequence[str]) -> Iterator[Cell]:
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char == "0":
                yield row, col


def part1(text: str) -> int:
    """Sum the scores of all trailheads."""
    grid = text.split()
    return sum(trailhead_score(grid, start) for start in _trailheads(grid))


def part2(text: str) -> int:
    """Sum the ratings of all trailheads."""
    grid = text.split()
    return sum(trailhead_rating(grid, start) for start in _trailheads(grid))