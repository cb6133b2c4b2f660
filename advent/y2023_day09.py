"""Mirage maintenance: extrapolate sequences by repeated differences."""


def _differences(values):
    return [later - earlier for earlier, later in zip(values, values[1:])]


def _difference_rows(values):
    """The sequence followed by each row of differences down to all zeros."""
    rows = [list(values)]
    if not rows[0]:
        raise ValueError("empty sequence")
    while True:
        differences = _differences(rows[-1])
        if not differences:
            raise ValueError("sequence never settles to zeros")
        rows.append(differences)
        if set(differences) == {0}:
            return rows


def extrapolate(values):
    """The next value of the sequence."""
    value = 0
    for row in reversed(_difference_rows(values)[:-1]):
        value = row[-1] + value
    return value


def extrapolate_backwards(values):
    """The value that would come before the sequence."""
    value = 0
    for row in reversed(_difference_rows(values)[:-1]):
        value = row[0] - value
    return value


def _sequences(text):
    return [[int(n) for n in line.split()] for line in text.splitlines() if line.strip()]


def part1(text):
    """Sum of the next value of every sequence."""
    return sum(extrapolate(values) for values in _sequences(text))


def part2(text):
    """Sum of the previous value of every sequence."""
    return sum(extrapolate_backwards(values) for values in _sequences(text))