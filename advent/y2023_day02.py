"""Cube conundrum: the power of the minimum set of cubes."""

import re

_COLOURS = ("red", "green", "blue")
_PATTERNS = {colour: re.compile(rf"[0-9]* {colour}") for colour in _COLOURS}


def game_power(line):
    """Product of the largest red, green and blue counts seen in a game."""
    parts = line.split(":")
    if len(parts) < 2:
        raise ValueError(f"not a game record: {line!r}")
    seen = {colour: [] for colour in _COLOURS}
    for round_text in parts[1].split(";"):
        for colour, pattern in _PATTERNS.items():
            match = pattern.search(round_text)
            if match:
                seen[colour].append(int(match.group().split(" ")[0]))
    for colour, counts in seen.items():
        if not counts:
            raise ValueError(f"no {colour} cubes in game: {line!r}")
    return max(seen["red"]) * max(seen["blue"]) * max(seen["green"])


def solve(text):
    """Sum of the powers of every game."""
    return sum(game_power(line) for line in text.splitlines() if line.strip())