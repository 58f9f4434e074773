"""Patrolling guard: visited cells and loop-making obstacles (2024, day 6)."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

Cell = tuple[int, int]

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def find_guard(grid: Sequence[str]) -> Cell:
    """Return the position of the guard, marked ``^``."""
    for row, line in enumerate(grid):
        col = line.find("^")
        if col != -1:
            return row, col
    raise ValueError("no guard ('^') on the map")


def _walk(grid: Sequence[str], obstacle: Cell | None = None) -> Iterator[tuple[int, int, int]]:
    """Yield the guard's (row, col, direction) after each step inside the map.

    A guard boxed in on all four sides repeats its state, which reads as a loop.
    """
    rows, cols = len(grid), len(grid[0])
    x, y = find_guard(grid)
    direction = 0
    turns = 0
    while True:
        dx, dy = _DIRECTIONS[direction]
        nx, ny = x + dx, y + dy
        if not (0 <= nx < rows and 0 <= ny < cols):
            return
        if grid[nx][ny] == "#" or (nx, ny) == obstacle:
            direction = (direction + 1) % 4
            turns += 1
            if turns == 4:
                turns = 0
                yield x, y, direction
            continue
        turns = 0
        x, y = nx, ny
        yield x, y, direction


def visited_cells(grid: Sequence[str]) -> set[Cell]:
    """Return every cell the guard stands on before leaving the map."""
    cells = {find_guard(grid)}
    seen: set[tuple[int, int, int]] = set()
    for state in _walk(grid):
        if state in seen:
            raise ValueError("the guard never leaves the map")
        seen.add(state)
        cells.add((state[0], state[1]))
    return cells


def causes_loop(grid: Sequence[str], obstacle: Cell) -> bool:
    """Tell whether an extra obstacle at ``obstacle`` traps the guard in a loop."""
    seen: set[tuple[int, int, int]] = set()
    for state in _walk(grid, obstacle):
        if state in seen:
            return True
        seen.add(state)
    return False


def part1(text: str) -> int:
    """Count the distinct cells the guard visits."""
    return len(visited_cells(text.split()))


def part2(text: str) -> int:
    """Count the empty cells where one obstacle would make the guard loop."""
    grid = text.split()
    return sum(
        causes_loop(grid, (row, col))
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == "."
    )