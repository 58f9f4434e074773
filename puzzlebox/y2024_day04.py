"""Word search for XMAS and crossed MAS (2024, day 4)."""

from __future__ import annotations

from collections.abc import Sequence

_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1), (1, 1), (-1, 1), (-1, -1), (1, -1))
_DIAGONALS = ((1, 1), (-1, 1), (-1, -1), (1, -1))


def _in_bounds(grid: Sequence[str], x: int, y: int) -> bool:
    return 0 <= x < len(grid) and 0 <= y < len(grid[0])


def _spells_from(grid: Sequence[str], x: int, y: int, dx: int, dy: int) -> bool:
    for step, char in enumerate("MAS", start=1):
        nx, ny = x + dx * step, y + dy * step
        if not _in_bounds(grid, nx, ny) or grid[nx][ny] != char:
            return False
    return True


def count_xmas(grid: Sequence[str]) -> int:
    """Count occurrences of ``XMAS`` in all eight directions."""
    return sum(
        _spells_from(grid, x, y, dx, dy)
        for x, row in enumerate(grid)
        for y, char in enumerate(row)
        if char == "X"
        for dx, dy in _DIRECTIONS
    )


def _is_x_mas(grid: Sequence[str], x: int, y: int) -> bool:
    corners = []
    for dx, dy in _DIAGONALS:
        if not _in_bounds(grid, x + dx, y + dy):
            return False
        corners.append(grid[x + dx][y + dy])
    return (
        corners.count("M") == 2
        and corners.count("S") == 2
        and grid[x - 1][y - 1] != grid[x + 1][y + 1]
    )


def count_x_mas(grid: Sequence[str]) -> int:
    """Count ``A`` cells crossed by two diagonal ``MAS`` words."""
    return sum(
        _is_x_mas(grid, x, y)
        for x, row in enumerate(grid)
        for y, char in enumerate(row)
        if char == "A"
    )


def part1(text: str) -> int:
    """Count ``XMAS`` in the word search ``text``."""
    return count_xmas(text.split())


def part2(text: str) -> int:
    """Count crossed ``MAS`` in the word search ``text``."""
    return count_x_mas(text.split())