from puzzlebox.y2024_day03 import (
    part1,
    part2,
    sum_enabled_multiplications,
    sum_multiplications,
)

EXAMPLE_1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part1_example():
    assert part1(EXAMPLE_1) == 161


def test_part2_example():
    assert part2(EXAMPLE_2) == 48


def test_four_digit_operand_ignored():
    assert sum_multiplications("mul(1234,5)") == 0


def test_spaces_break_instruction():
    assert sum_multiplications("mul( 2,3)") == 0


def test_dont_disables_until_do():
    assert sum_enabled_multiplications("don't()mul(2,3)") == 0
    assert sum_enabled_multiplications("don't()do()mul(2,3)") == sum_multiplications(
        "mul(2,3)"
    )


def test_without_toggles_both_agree():
    assert sum_enabled_multiplications(EXAMPLE_1) == sum_multiplications(EXAMPLE_1)


def test_enabled_never_exceeds_all():
    assert sum_enabled_multiplications(EXAMPLE_2) <= sum_multiplications(EXAMPLE_2)


def test_lines_are_joined():
    assert part1("mul(2,\n3)") == sum_multiplications("mul(2,3)")
    assert part2("don't()\nmul(2,3)") == 0