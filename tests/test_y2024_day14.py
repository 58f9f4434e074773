import pytest

from puzzlebox.y2024_day14 import (
    first_no_overlap,
    parse_robots,
    positions_after,
    render,
    safety_factor,
)

ROBOTS = [(0, 4, 3, -3), (6, 3, -1, -3), (10, 3, -1, 2), (2, 0, 2, -1), (9, 5, -3, -3)]
W, H = 11, 7

CORNERS = [(0, 0, 0, 0), (10, 0, 0, 0), (0, 6, 0, 0), (10, 6, 0, 0)]


def test_parse_robots():
    text = "p=0,4 v=3,-3\np=6,3 v=-1,-3\n\n"
    assert parse_robots(text) == [(0, 4, 3, -3), (6, 3, -1, -3)]


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_robots("p=1,2 v=3\n")


def test_positions_at_time_zero():
    assert positions_after(ROBOTS, 0, W, H) == [(x, y) for x, y, _, _ in ROBOTS]


def test_positions_stay_on_the_floor():
    for seconds in range(30):
        for x, y in positions_after(ROBOTS, seconds, W, H):
            assert 0 <= x < W and 0 <= y < H


def test_positions_are_periodic():
    assert positions_after(ROBOTS, W * H, W, H) == positions_after(ROBOTS, 0, W, H)


def test_positions_compose():
    first = positions_after(ROBOTS, 4, W, H)
    moved = [(x, y, vx, vy) for (x, y), (_, _, vx, vy) in zip(first, ROBOTS)]
    assert positions_after(moved, 9, W, H) == positions_after(ROBOTS, 13, W, H)


def test_middle_lines_do_not_count():
    on_middle = CORNERS + [(5, 3, 0, 0), (5, 0, 0, 0), (0, 3, 0, 0)]
    assert safety_factor(on_middle, 0, W, H) == safety_factor(CORNERS, 0, W, H)


def test_extra_robot_in_quadrant_multiplies():
    doubled = CORNERS + [(1, 1, 0, 0)]
    assert safety_factor(doubled, 0, W, H) == 2 * safety_factor(CORNERS, 0, W, H)


def test_empty_quadrant_gives_zero():
    assert safety_factor(CORNERS[:3], 0, W, H) == 0


def test_first_no_overlap_without_overlap():
    assert first_no_overlap(CORNERS, W, H) == 0


def test_first_no_overlap_after_one_step():
    robots = [(0, 0, 0, 0), (0, 0, 1, 0)]
    seconds = first_no_overlap(robots, 5, 5)
    assert seconds == 1
    positions = positions_after(robots, seconds, 5, 5)
    assert len(set(positions)) == len(positions)


def test_first_no_overlap_never():
    with pytest.raises(ValueError):
        first_no_overlap([(1, 1, 2, 3), (1, 1, 2, 3)], 5, 5)


def test_render():
    assert render([(0, 0), (0, 0), (2, 1)], 3, 2) == "2 . . \n. . 1 \n"


def test_render_shape():
    picture = render(positions_after(ROBOTS, 3, W, H), W, H)
    lines = picture.splitlines()
    assert len(lines) == H
    assert all(len(line.split()) == W for line in lines)