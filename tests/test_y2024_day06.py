import pytest

from puzzlebox.y2024_day06 import causes_loop, find_guard, part1, part2, visited_cells

EXAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

GRID = EXAMPLE.split()

LOOPING = [
    ".#..",
    ".^.#",
    "#...",
    "..#.",
]

BOXED = [
    ".#.",
    "#^#",
    ".#.",
]


def test_part1_example():
    assert part1(EXAMPLE) == 41


def test_part2_example():
    assert part2(EXAMPLE) == 6


def test_obstacle_beside_start_causes_loop():
    assert causes_loop(GRID, (6, 3)) is True


def test_find_guard_points_at_caret():
    row, col = find_guard(GRID)
    assert GRID[row][col] == "^"


def test_find_guard_without_guard_raises():
    with pytest.raises(ValueError):
        find_guard(["...", "..."])


def test_visited_cells_invariants():
    cells = visited_cells(GRID)
    assert find_guard(GRID) in cells
    assert all(GRID[r][c] != "#" for r, c in cells)
    assert len(cells) == part1(EXAMPLE)


def test_open_grid_has_no_loop():
    assert causes_loop(["...", ".^.", "..."], (0, 0)) is False


def test_visited_cells_raises_on_loop():
    with pytest.raises(ValueError):
        visited_cells(LOOPING)


def test_looping_grid_detected():
    assert causes_loop(LOOPING, (3, 3)) is True


def test_boxed_guard_counts_as_loop():
    assert causes_loop(BOXED, (0, 0)) is True