from puzzlebox.y2024_day10 import part1, part2, trailhead_rating, trailhead_score

EXAMPLE = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""

GRID = EXAMPLE.split()


def _starts(grid):
    return [(r, c) for r, line in enumerate(grid) for c, ch in enumerate(line) if ch == "0"]


def test_part1_example():
    assert part1(EXAMPLE) == 36


def test_part2_example():
    assert part2(EXAMPLE) == 81


def test_straight_trail():
    grid = ["0123456789"]
    assert trailhead_score(grid, (0, 0)) == trailhead_rating(grid, (0, 0)) == 1


def test_rating_at_least_score():
    nines = sum(line.count("9") for line in GRID)
    for start in _starts(GRID):
        score = trailhead_score(GRID, start)
        assert trailhead_rating(GRID, start) >= score
        assert score <= nines


def test_parts_sum_per_trailhead():
    assert part1(EXAMPLE) == sum(trailhead_score(GRID, s) for s in _starts(GRID))
    assert part2(EXAMPLE) == sum(trailhead_rating(GRID, s) for s in _starts(GRID))


def test_no_trailheads():
    assert part1("1234\n5678") == 0
    assert part2("1234\n5678") == 0