"""Lanternfish: population growth."""

from collections import Counter


def _parse(text):
    return [int(age) for age in text.strip().split(",")]


def simulate(ages, days):
    """Number of lanternfish after the given number of days."""
    state = Counter(ages)
    for _ in range(days):
        next_state = Counter()
        for age, count in state.items():
            if age == 0:
                next_state[6] += count
                next_state[8] += count
            else:
                next_state[age - 1] += count
        state = next_state
    return sum(state.values())


def part1(text):
    """Population after 80 days."""
    return simulate(_parse(text), 80)


def part2(text):
    """Population after 256 days."""
    return simulate(_parse(text), 256)