"""If you give a seed a fertilizer: follow seeds through the almanac maps."""

from dataclasses import dataclass
from functools import reduce


@dataclass(frozen=True)
class RangeMap:
    """One almanac map of (start, end, offset) source ranges.

    The end of each range is inclusive, so a range also covers the value
    one past its declared length.
    """

    ranges: tuple = ()

    @classmethod
    def from_lines(cls, lines):
        """Build a map from "destination source length" lines."""
        ranges = []
        for line in lines:
            values = line.split()
            if not values:
                continue
            if len(values) != 3:
                raise ValueError(f"not a map line: {line!r}")
            destination, source, length = (int(v) for v in values)
            ranges.append((source, source + length, destination - source))
        return cls(tuple(ranges))

    def lookup(self, value):
        """Translate value through the first range holding it."""
        for start, end, offset in self.ranges:
            if start <= value <= end:
                return value + offset
        return value


def parse(text):
    """Return the seed numbers and the maps in almanac order."""
    sections = text.split("\n\n")
    _, sep, seeds = sections[0].partition(":")
    if not sep:
        raise ValueError("missing seeds line")
    maps = []
    for section in sections[1:]:
        _, sep, body = section.partition(":\n")
        if not sep:
            raise ValueError(f"not a map section: {section!r}")
        maps.append(RangeMap.from_lines(body.split("\n")))
    return [int(seed) for seed in seeds.split()], maps


def _location(maps, seed):
    return reduce(lambda value, range_map: range_map.lookup(value), maps, seed)


def part1(text):
    """Lowest location of any listed seed."""
    seeds, maps = parse(text)
    if not seeds:
        raise ValueError("no seeds")
    return min(_location(maps, seed) for seed in seeds)


def part2(text):
    """Lowest location of any seed in the listed (start, length) ranges."""
    seeds, maps = parse(text)
    if not seeds or len(seeds) % 2:
        raise ValueError("seeds must come in start and length pairs")
    locations = [
        _location(maps, seed)
        for start, length in zip(seeds[0::2], seeds[1::2])
        for seed in range(start, start + length)
    ]
    if not locations:
        raise ValueError("no seeds in the given ranges")
    return min(locations)