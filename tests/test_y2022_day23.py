from advent import y2022_day23

EXAMPLE = """\
....#..
..###.#
#...#.#
.#...##
#.###..
##.#.##
.#..#..
"""


def test_parse_finds_every_elf():
    elves = y2022_day23.parse(EXAMPLE)
    assert len(elves) == EXAMPLE.count("#")
    assert (0, 4) in elves
    assert (0, 0) not in elves


def test_part1_example():
    assert y2022_day23.part1(EXAMPLE) == 110


def test_part2_example():
    assert y2022_day23.part2(EXAMPLE) == 20


def test_lone_elf_never_moves():
    assert y2022_day23.part2("#\n") == 1
    assert y2022_day23.part1("#\n") == 0