import pytest

from puzzlebox.y2023_day03 import gear_ratio_sum, is_symbol, part1, part2, part_numbers

EXAMPLE = """467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
"""


def test_part1_example():
    assert part1(EXAMPLE) == 4361


def test_part2_example():
    assert part2(EXAMPLE) == 467835


def test_part_numbers_example():
    assert part_numbers(EXAMPLE.split()) == [467, 35, 633, 617, 592, 755, 664, 598]


@pytest.mark.parametrize("char", list("*#+$/@=%-&!?>"))
def test_is_symbol_true(char):
    assert is_symbol(char) is True


@pytest.mark.parametrize("char", list(".5a:<;_"))
def test_is_symbol_false(char):
    assert is_symbol(char) is False


def test_part_numbers_skips_isolated():
    assert part_numbers(["12.", "*..", "..."]) == [12]
    assert part_numbers(["12....", "....34"]) == []


def test_numbers_end_at_row_end():
    assert part_numbers(["..5", "6*."]) == [5, 6]


def test_part1_matches_sum_of_part_numbers():
    grid = EXAMPLE.split()
    assert part1(EXAMPLE) == sum(part_numbers(grid))


def test_gear_needs_exactly_two_numbers():
    assert gear_ratio_sum(["12*..", "....."]) == gear_ratio_sum(["....."])
    assert gear_ratio_sum(["1.2", ".*.", "3.."]) == gear_ratio_sum(["....."])


def test_gear_ratio_swaps_operands():
    assert gear_ratio_sum(["7*8"]) == gear_ratio_sum(["8*7"])


def test_part2_matches_gear_ratio_sum():
    assert part2(EXAMPLE) == gear_ratio_sum(EXAMPLE.split())