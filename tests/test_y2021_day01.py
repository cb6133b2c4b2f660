from advent.y2021_day01 import parse, part1, part2

EXAMPLE = """199
200
208
210
200
207
240
269
260
263
"""


def test_parse_reads_every_line():
    depths = parse(EXAMPLE)
    assert depths[0] == 199
    assert depths[-1] == 263
    assert len(depths) == len(EXAMPLE.split())


def test_example_part1():
    assert part1(parse(EXAMPLE)) == 7


def test_example_part2():
    assert part2(parse(EXAMPLE)) == 5


def test_strictly_increasing_counts_every_step():
    depths = list(range(10, 30))
    assert part1(depths) == len(depths) - 1
    assert part2(depths) == len(depths) - 3


def test_decreasing_never_increases():
    depths = list(range(30, 10, -1))
    assert part1(depths) == part1([5] * 10)
    assert part2(depths) == part1([])


def test_short_inputs_have_no_windows():
    assert part2([1, 2, 3]) == part1([1])