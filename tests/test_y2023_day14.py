import pytest

from advent.y2023_day14 import part1, part2, total_load

EXAMPLE = """O....#....
O.OO#....#
.....##...
OO.#O....O
.O.....O#.
O.#..O.#.#
..O..#O..O
.......O..
#....###..
#OO..#....
"""


def test_part1_example():
    assert part1(EXAMPLE) == 136


def test_part2_example():
    assert part2(EXAMPLE) == 64


def test_tilting_north_never_lowers_load():
    assert part1(EXAMPLE) >= total_load(EXAMPLE.splitlines())


def test_settled_platform_load_unchanged_by_tilt():
    settled = "OO#\n.O.\n..#"
    assert part1(settled) == total_load(settled.splitlines())


def test_single_rock_on_top_row():
    grid = ["O..", "...", "...", "..."]
    assert total_load(grid) == len(grid)


def test_no_rocks_no_load():
    assert total_load(["..#", "#..", "..."]) == 0
    assert part2("..#\n#..\n...") == 0


def test_empty_platform_raises():
    with pytest.raises(ValueError):
        part1("")