# advent

Solutions to a selection of Advent of Code puzzles from 2021, 2022 and 2023.
Each puzzle day is a module named `y<year>_day<nn>`. The modules have no
dependencies beyond the standard library and work on puzzle input that you
pass in yourself.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using it

Most modules have `part1(text)` and `part2(text)` functions that take the
whole puzzle input as a string and return the answer:

```python
from pathlib import Path

from advent import y2023_day14

text = Path("input.txt").read_text()
print(y2023_day14.part1(text))
print(y2023_day14.part2(text))
```

A few modules work differently:

- `y2021_day01` and `y2021_day02`: call `parse(text)` first and pass its
  result to `part1` and `part2`.
- `y2021_day03`: `part1(report)` and `part2(report)` take the report as a list
  of binary strings; `oxygen_rating(report)` and `scrubber_rating(report)` give
  the two ratings on their own.
- `y2022_day18`: `parse(text)` returns a set of cubes; `surface_area(cubes)`
  and `exterior_surface_area(cubes)` give the two answers.
- `y2022_day25`: has `part1(text)` only; `add_snafu(a, b)` adds two SNAFU
  numbers.
- `y2023_day02`: a single answer from `solve(text)`; `game_power(line)` scores
  one game.
- `y2023_day11`: `solve(text, expansion=1_000_000)` sums galaxy distances for
  any expansion factor.

Other building blocks that are public:

- `y2021_day06.simulate(ages, days)` counts lanternfish after a number of days.
- `y2021_day08.deduce_mapping(patterns)` maps sorted signal patterns to digits.
- `y2022_day21.parse(text)` reads the monkeys' jobs.
- `y2022_day23.parse(text)` reads the elves' positions.
- `y2023_day04.card_matches(text)` lists the matches on each scratchcard.
- `y2023_day05.RangeMap.lookup(value)` maps a value through one almanac map,
  and `parse(text)` returns the seeds and the maps.
- `y2023_day07.hand_type(hand)` and `hand_type_with_jokers(hand)` rank hands.
- `y2023_day09.extrapolate(values)` and `extrapolate_backwards(values)`.
- `y2023_day12.count_arrangements(pattern, groups)` counts the spring layouts
  that fit a damaged record.
- `y2023_day14.total_load(grid)` weighs the rocks on a platform.
- `y2023_day16.parse(text)` and `energized(grid, row, col, drow, dcol)` trace
  a beam from any starting point.
- `y2023_day17.min_heat_loss(grid, min_straight, max_straight)` finds the
  cheapest route for any straight-run limits.
- `y2023_day19.parse(text)` reads the workflows and parts.

Invalid input raises `ValueError`.

## Modules

2021: `y2021_day01`, `y2021_day02`, `y2021_day03`, `y2021_day06`,
`y2021_day07`, `y2021_day08`.

2022: `y2022_day18`, `y2022_day21`, `y2022_day23`, `y2022_day25`.

2023: `y2023_day02`, `y2023_day04`, `y2023_day05`, `y2023_day06`,
`y2023_day07`, `y2023_day09`, `y2023_day11`, `y2023_day12`, `y2023_day14`,
`y2023_day16`, `y2023_day17`, `y2023_day19`.

## What it does not do

- There is no command-line tool: nothing reads an input file or prints
  answers for you; you call the functions from Python.
- Only the days listed above are solved. Other days of these years are not
  in the package.