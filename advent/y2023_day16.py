"""The floor will be lava: beams bouncing through mirrors and splitters."""

from collections import deque


def parse(text):
    """Map every (row, col) of the contraption to its tile character."""
    return {
        (row, col): character
        for row, line in enumerate(line for line in text.splitlines() if line.strip())
        for col, character in enumerate(line)
    }


def energized(grid, row, col, drow, dcol):
    """Tiles energized by a beam that enters from (row, col) heading (drow, dcol).

    The starting point itself lies outside the grid; the beam's first tile is
    one step from it.
    """
    queue = deque([(row, col, drow, dcol)])
    seen = set()
    while queue:
        y, x, dy, dx = queue.popleft()
        yy, xx = y + dy, x + dx
        key = (yy, xx, dy, dx)
        if key in seen:
            continue
        tile = grid.get((yy, xx))
        if tile is None:
            continue
        seen.add(key)
        if tile == "/":
            dx, dy = -dy, -dx
        elif tile == "\\":
            dx, dy = dy, dx
        elif tile == "|" and dx != 0:
            dx, dy = 0, 1
            queue.append((yy, xx, -1, 0))
        elif tile == "-" and dy != 0:
            dx, dy = 1, 0
            queue.append((yy, xx, 0, -1))
        queue.append((yy, xx, dy, dx))
    return len({(y, x) for y, x, _, _ in seen})


def _lines(text):
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("empty contraption")
    return lines


def part1(text):
    """Tiles energized by a beam entering the top-left corner heading right."""
    _lines(text)
    return energized(parse(text), 0, -1, 0, 1)


def part2(text):
    """Most tiles energized by a beam entering from any edge."""
    lines = _lines(text)
    grid = parse(text)
    rows, cols = len(lines), len(lines[0])
    starts = []
    for y in range(rows):
        starts.append((y, -1, 0, 1))
        starts.append((y, cols, 0, -1))
    for x in range(cols):
        starts.append((-1, x, 1, 0))
        starts.append((rows, x, -1, 0))
    return max(energized(grid, *start) for start in starts)