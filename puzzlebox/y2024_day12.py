"""Garden plots: fence prices by perimeter and by sides (2024, day 12)."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import pairwise

Cell = tuple[int, int]

# Top, right, bottom, left: the index of a direction is the index of its boundary list.
_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass(frozen=True)
class Region:
    """A connected patch of one plant, with its boundary cells per direction."""

    plant: str
    cells: frozenset[Cell]
    boundaries: tuple[tuple[Cell, ...], ...]

    @property
    def area(self) -> int:
        """Number of plots in the region."""
        return len(self.cells)

    @property
    def perimeter(self) -> int:
        """Number of fence segments around the region."""
        return sum(len(side) for side in self.boundaries)

    @property
    def sides(self) -> int:
        """Number of straight fence sides around the region."""
        return count_sides(self.boundaries)


def regions(grid: Sequence[str]) -> list[Region]:
    """Return the regions of the map, in the reading order of their first plot."""
    rows = len(grid)
    seen: set[Cell] = set()
    found: list[Region] = []
    for row, line in enumerate(grid):
        for col, plant in enumerate(line):
            if (row, col) in seen:
                continue
            seen.add((row, col))
            cells = [(row, col)]
            queue = deque(cells)
            bounds: tuple[list[Cell], ...] = ([], [], [], [])
            while queue:
                x, y = queue.popleft()
                for direction, (dx, dy) in enumerate(_DIRECTIONS):
                    nx, ny = x + dx, y + dy
                    if 0 <= nx < rows and 0 <= ny < len(grid[nx]) and grid[nx][ny] == plant:
                        if (nx, ny) not in seen:
                            seen.add((nx, ny))
                            cells.append((nx, ny))
                            queue.append((nx, ny))
                    else:
                        bounds[direction].append((x, y))
            found.append(
                Region(plant, frozenset(cells), tuple(tuple(side) for side in bounds))
            )
    return found


def count_sides(boundaries: Sequence[Sequence[Cell]]) -> int:
    """Count straight sides, merging boundary cells that continue one another.

    Even-indexed directions (top, bottom) run along rows; odd ones along columns.
    """
    total = 0
    for direction, cells in enumerate(boundaries):
        if not cells:
            continue
        if direction % 2 == 0:
            ordered = sorted(cells)
        else:
            ordered = sorted((col, row) for row, col in cells)
        breaks = sum(
            1
            for (line_a, pos_a), (line_b, pos_b) in pairwise(ordered)
            if not (line_b == line_a and pos_b == pos_a + 1)
        )
        total += breaks + 1
    return total


def part1(text: str) -> int:
    """Sum area times perimeter over all regions."""
    return sum(region.area * region.perimeter for region in regions(text.split()))


def part2(text: str) -> int:
    """Sum area times number of sides over all regions."""
    return sum(region.area * region.sides for region in regions(text.split()))