"""Hot springs: count arrangements of damaged springs."""

from functools import lru_cache


def count_arrangements(pattern, groups):
    """Ways to fill the '?' in pattern so that its '#' runs match groups."""
    unknown = set(pattern) - set(".#?")
    if unknown:
        raise ValueError(f"unexpected spring characters: {sorted(unknown)}")
    groups = tuple(int(group) for group in groups)

    @lru_cache(maxsize=None)
    def count(springs, remaining):
        if not springs:
            return 1 if not remaining else 0
        if len(springs) < sum(remaining):
            return 0
        first = springs[0]
        if first == ".":
            return count(springs[1:], remaining)
        if first == "?":
            return count("#" + springs[1:], remaining) + count("." + springs[1:], remaining)
        if not remaining or len(springs) < remaining[0]:
            return 0
        size = remaining[0]
        if "." in springs[:size]:
            return 0
        if len(remaining) > 1:
            if len(springs) < size + 1 or springs[size] == "#":
                return 0
            return count(springs[size + 1 :], remaining[1:])
        return count(springs[size:], remaining[1:])

    return count(pattern, groups)


def _records(text):
    records = []
    for line in text.splitlines():
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 2:
            raise ValueError(f"not a spring record: {line!r}")
        records.append((fields[0], tuple(int(n) for n in fields[1].split(","))))
    return records


def part1(text):
    """Sum of the arrangement counts of every record."""
    return sum(count_arrangements(pattern, groups) for pattern, groups in _records(text))


def part2(text):
    """Sum of the arrangement counts after unfolding every record five times."""
    return sum(
        count_arrangements("?".join([pattern] * 5), groups * 5)
        for pattern, groups in _records(text)
    )