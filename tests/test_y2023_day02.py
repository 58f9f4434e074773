import pytest

from puzzlebox.y2023_day02 import (
    game_number,
    game_power,
    is_possible,
    parse_counts,
    part1,
    part2,
    revealed_sets,
)

EXAMPLE = """Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""


def test_part1_example():
    assert part1(EXAMPLE) == 8


def test_part2_example():
    assert part2(EXAMPLE) == 2286


def test_game_number():
    assert game_number("Game 17: 1 red") == 17


def test_game_number_without_colon():
    with pytest.raises(ValueError):
        game_number("Game 17 1 red")


def test_revealed_sets():
    assert revealed_sets("Game 1: 3 blue, 4 red; 1 red") == [" 3 blue, 4 red", " 1 red"]


def test_revealed_sets_drops_trailing_empty():
    assert revealed_sets("Game 1: 2 green;") == [" 2 green"]


def test_revealed_sets_empty_game():
    assert revealed_sets("Game 1:") == []


def test_parse_counts():
    assert parse_counts(" 3 blue, 4 red") == {"red": 4, "green": 0, "blue": 3}


def test_parse_counts_accumulates_repeats():
    assert parse_counts(" 1 red, 2 red")["red"] == parse_counts(" 3 red")["red"]


def test_parse_counts_unknown_colour():
    with pytest.raises(ValueError):
        parse_counts(" 3 purple")


def test_is_possible_at_limits():
    assert is_possible("Game 1: 12 red, 13 green, 14 blue") is True


@pytest.mark.parametrize("reveal", ["13 red", "14 green", "15 blue"])
def test_is_possible_over_limits(reveal):
    assert is_possible(f"Game 1: 1 red; {reveal}") is False


def test_is_possible_empty_game():
    assert is_possible("Game 1:") is False


def test_game_power_missing_colour_is_zero():
    assert game_power("Game 1: 4 red, 5 green") == 0


def test_game_power_single_colour_dominates():
    assert game_power("Game 1: 5 red, 1 green, 1 blue") == 5


def test_game_power_uses_maximum_per_colour():
    assert game_power("Game 1: 1 red, 1 green, 1 blue; 5 red") == game_power(
        "Game 1: 5 red, 1 green, 1 blue"
    )


def test_part_totals_ignore_blank_lines():
    assert part1(EXAMPLE + "\n\n") == part1(EXAMPLE)
    assert part2("\n" + EXAMPLE) == part2(EXAMPLE)