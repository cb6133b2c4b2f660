"""Parabolic reflector dish: tilt rolling rocks and measure the load."""

_SPIN_CYCLES = 1_000_000_000


def total_load(grid):
    """Load on the north beams: each round rock weighs its distance from the south edge."""
    height = len(grid)
    return sum((height - y) * row.count("O") for y, row in enumerate(grid))


def _roll_west(row):
    # 'O' sorts after '.', so a reverse sort moves the rocks to the front.
    return "#".join("".join(sorted(segment, reverse=True)) for segment in row.split("#"))


def _tilt_north(grid):
    columns = [_roll_west("".join(column)) for column in zip(*grid)]
    return tuple("".join(row) for row in zip(*columns))


def _rotate_clockwise(grid):
    return tuple("".join(column) for column in zip(*reversed(grid)))


def _spin(grid):
    """Tilt north, west, south and east in turn."""
    for _ in range(4):
        grid = _rotate_clockwise(_tilt_north(grid))
    return grid


def _grid(text):
    rows = tuple(line for line in text.splitlines() if line.strip())
    if not rows:
        raise ValueError("empty platform")
    return rows


def part1(text):
    """Load after tilting the platform north."""
    return total_load(_tilt_north(_grid(text)))


def part2(text):
    """Load after a billion spin cycles, found by detecting the repeat."""
    grid = _grid(text)
    history = [grid]
    seen = {}
    for cycle in range(1, _SPIN_CYCLES + 1):
        grid = _spin(grid)
        if grid in seen:
            loop = cycle - seen[grid]
            remaining = (_SPIN_CYCLES - loop) % loop
            return total_load(history[remaining])
        seen[grid] = cycle
        history.append(grid)
    raise ValueError("cycle not found in the given target cycles")