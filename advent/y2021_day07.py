"""Treachery of whales: align crab submarines."""

import math
from statistics import fmean


def _parse(text):
    return [int(n) for n in text.strip().split(",")]


def part1(text):
    """Fuel to align at the median with constant cost per step."""
    positions = sorted(_parse(text))
    target = positions[len(positions) // 2]
    return sum(abs(target - p) for p in positions)


def _triangular_cost(positions, target):
    return sum(abs(target - p) * (abs(target - p) + 1) // 2 for p in positions)


def part2(text):
    """Fuel with increasing cost per step, trying both neighbours of the mean."""
    positions = _parse(text)
    mean = fmean(positions)
    return min(
        _triangular_cost(positions, math.floor(mean)),
        _triangular_cost(positions, math.ceil(mean)),
    )