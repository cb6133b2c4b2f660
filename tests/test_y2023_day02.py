import pytest

from advent import y2023_day02

EXAMPLE = """Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""


def test_first_example_game():
    assert y2023_day02.game_power(EXAMPLE.splitlines()[0]) == 48


def test_example_total():
    assert y2023_day02.solve(EXAMPLE) == 2286


def test_smaller_round_does_not_change_power():
    line = EXAMPLE.splitlines()[2]
    assert y2023_day02.game_power(line + "; 1 red, 1 green, 1 blue") == y2023_day02.game_power(line)


def test_power_scales_with_counts():
    single = y2023_day02.game_power("Game 9: 1 red, 1 green, 1 blue")
    doubled = y2023_day02.game_power("Game 9: 2 red, 1 green, 1 blue")
    assert doubled == 2 * single


def test_solve_sums_games():
    lines = EXAMPLE.splitlines()
    assert y2023_day02.solve(EXAMPLE) == sum(y2023_day02.game_power(line) for line in lines)


def test_missing_colour_raises():
    with pytest.raises(ValueError):
        y2023_day02.game_power("Game 1: 3 blue, 4 red; 6 blue")


def test_missing_header_raises():
    with pytest.raises(ValueError):
        y2023_day02.game_power("3 blue, 4 red, 2 green")