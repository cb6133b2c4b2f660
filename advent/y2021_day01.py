"""Sonar sweep: count depth increases."""


def parse(text):
    """Return the depth readings, one integer per non-blank line."""
    return [int(line) for line in text.splitlines() if line.strip()]


def part1(depths):
    """Count readings larger than the one before."""
    return sum(later > earlier for earlier, later in zip(depths, depths[1:]))


def part2(depths):
    """Count three-measurement sliding windows larger than the previous window."""
    # Consecutive windows share two readings, so only the outer ones matter.
    return sum(later > earlier for earlier, later in zip(depths, depths[3:]))