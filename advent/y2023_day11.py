"""Cosmic expansion: distances between galaxies in an expanding universe."""

from itertools import accumulate, combinations


def _prefix_counts(flags):
    """counts[i] is how many of flags[:i] are true."""
    return [0, *accumulate(int(flag) for flag in flags)]


def _between(counts, a, b):
    low, high = sorted((a, b))
    if high - low < 2:
        return 0
    return counts[high] - counts[low + 1]


def solve(text, expansion=1_000_000):
    """Sum of distances between every pair of galaxies.

    Each empty row or column counts as expansion rows or columns.
    """
    rows = [line for line in text.splitlines() if line.strip()]
    if not rows:
        return 0
    width = len(rows[0])
    empty_rows = _prefix_counts(set(row) == {"."} for row in rows)
    empty_cols = _prefix_counts(
        all(x < len(row) and row[x] == "." for row in rows) for x in range(width)
    )
    galaxies = [
        (y, x) for y, row in enumerate(rows) for x, character in enumerate(row) if character == "#"
    ]
    extra = expansion - 1
    total = 0
    for (y1, x1), (y2, x2) in combinations(galaxies, 2):
        total += abs(y1 - y2) + abs(x1 - x2)
        total += extra * (_between(empty_rows, y1, y2) + _between(empty_cols, x1, x2))
    return total