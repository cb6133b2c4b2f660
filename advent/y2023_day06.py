"""Wait for it: ways to win boat races."""

import math


def _races(text):
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    _, sep_time, times = lines[0].partition(":")
    _, sep_distance, distances = lines[1].partition(":")
    if not sep_time or not sep_distance:
        raise ValueError("expected 'Time:' and 'Distance:' lines")
    times, distances = times.split(), distances.split()
    if len(distances) < len(times):
        raise ValueError("every race needs a record distance")
    return times, distances[: len(times)]


def _ways_to_win(time, record):
    return sum(1 for hold in range(time) if (time - hold) * hold > record)


def part1(text):
    """Product of the number of winning hold times of each race."""
    times, distances = _races(text)
    return math.prod(_ways_to_win(int(t), int(d)) for t, d in zip(times, distances))


def part2(text):
    """Winning hold times of the single race formed by joining the digits."""
    times, distances = _races(text)
    time = int("".join(times))
    record = int("".join(distances))
    discriminant = time * time - 4 * record
    if discriminant < 0:
        raise ValueError("race cannot be won")
    root = int(math.sqrt(float(discriminant)))
    shortest = (time - root) // 2
    longest = (time + root) // 2
    return longest - shortest