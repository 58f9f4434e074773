"""Warehouse robot pushing boxes around (2024, day 15)."""

from __future__ import annotations

from collections.abc import Sequence

_MOVES = {"^": (-1, 0), "v": (1, 0), "<": (0, -1), ">": (0, 1)}
_WIDE = {"O": "[]", "@": "@."}

Grid = list[list[str]]


def parse_warehouse(text: str) -> tuple[list[str], str]:
    """Split the input into the map rows (starting with ``#``) and the moves."""
    grid: list[str] = []
    moves: list[str] = []
    for token in text.split():
        (grid if token.startswith("#") else moves).append(token)
    return grid, "".join(moves)


def widen(grid: Sequence[str]) -> list[str]:
    """Double the map's width: boxes become ``[]``, the robot ``@.``."""
    return ["".join(_WIDE.get(char, char * 2) for char in row) for row in grid]


def _find_robot(cells: Grid) -> tuple[int, int]:
    robot = None
    for row, line in enumerate(cells):
        for col, char in enumerate(line):
            if char == "@":
                robot = (row, col)
    if robot is None:
        raise ValueError("no robot ('@') on the map")
    return robot


def _push(cells: Grid, x: int, y: int, dx: int, dy: int, boxes: str) -> tuple[int, int]:
    """Move the thing at (x, y) one step, pushing a line of boxes; return the robot's cell."""
    nx, ny = x + dx, y + dy
    if cells[nx][ny] in boxes:
        _push(cells, nx, ny, dx, dy, boxes)
    if cells[nx][ny] == ".":
        cells[x][y], cells[nx][ny] = cells[nx][ny], cells[x][y]
    if cells[nx][ny] == "@":
        return nx, ny
    return x, y


def _push_box(cells: Grid, x: int, y: int, dx: int) -> bool:
    """Push the wide box with a half at (x, y) up or down; tell whether it moved."""
    b1 = (x, y)
    b2 = (x, y + 1) if cells[x][y] == "[" else (x, y - 1)
    n1 = (x + dx, b1[1])
    n2 = (x + dx, b2[1])

    def at(cell: tuple[int, int]) -> str:
        return cells[cell[0]][cell[1]]

    if at(n1) == at(b1) and at(n2) == at(b2):
        _push_box(cells, *n1, dx)
    if at(n1) == at(b2):
        _push_box(cells, *n1, dx)
    if at(n2) == at(b1):
        _push_box(cells, *n2, dx)
    if at(n1) == "." and at(n2) == ".":
        for old, new in ((b1, n1), (b2, n2)):
            cells[old[0]][old[1]], cells[new[0]][new[1]] = at(new), at(old)
        return True
    return False


def simulate(grid: Sequence[str], moves: str) -> list[str]:
    """Run the moves on a normal-width map and return the final map."""
    cells = [list(row) for row in grid]
    x, y = _find_robot(cells)
    for move in moves:
        if move in _MOVES:
            x, y = _push(cells, x, y, *_MOVES[move], boxes="O")
    return ["".join(row) for row in cells]


def simulate_wide(grid: Sequence[str], moves: str) -> list[str]:
    """Run the moves on a widened map and return the final map."""
    cells = [list(row) for row in grid]
    x, y = _find_robot(cells)
    for move in moves:
        if move in "<>":
            x, y = _push(cells, x, y, *_MOVES[move], boxes="[]")
        elif move in "^v":
            dx = _MOVES[move][0]
            nx = x + dx
            if cells[nx][y] in "[]":
                trial = [row[:] for row in cells]
                if _push_box(trial, nx, y, dx):
                    cells = trial
            if cells[nx][y] == ".":
                cells[x][y], cells[nx][y] = cells[nx][y], cells[x][y]
                x = nx
    return ["".join(row) for row in cells]


def gps_sum(grid: Sequence[str], box: str) -> int:
    """Sum ``100 * row + column`` over every cell holding ``box``."""
    return sum(
        100 * row + col
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == box
    )


def part1(text: str) -> int:
    """Return the GPS sum of the boxes after all moves."""
    grid, moves = parse_warehouse(text)
    return gps_sum(simulate(grid, moves), "O")


def part2(text: str) -> int:
    """Return the GPS sum of the wide boxes after all moves on the widened map."""
    grid, moves = parse_warehouse(text)
    return gps_sum(simulate_wide(widen(grid), moves), "[")