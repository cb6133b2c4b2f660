"""Seven segment search: decode scrambled displays."""

_UNIQUE_LENGTHS = {2: 1, 3: 7, 4: 4, 7: 8}


def _key(pattern):
    return "".join(sorted(pattern))


def deduce_mapping(patterns):
    """Map each sorted signal pattern to the digit it shows."""
    mapping = {}
    known = {}
    for pattern in patterns:
        digit = _UNIQUE_LENGTHS.get(len(pattern))
        if digit is not None:
            mapping[_key(pattern)] = digit
            known[digit] = set(pattern)

    for pattern in patterns:
        if len(pattern) == 5 and known[1] <= set(pattern):
            mapping[_key(pattern)] = 3
            known[3] = set(pattern)

    for pattern in patterns:
        if len(pattern) != 6:
            continue
        segments = set(pattern)
        if known[7] <= segments:
            digit = 9 if known[4] <= segments else 0
        else:
            digit = 6
        mapping[_key(pattern)] = digit
        known[digit] = segments

    for pattern in patterns:
        if _key(pattern) in mapping or len(pattern) != 5:
            continue
        missing = len(known[6] - set(pattern))
        mapping[_key(pattern)] = 5 if missing == 1 else 2

    return mapping


def _split(line):
    patterns, outputs = line.split("|")
    return patterns.split(), outputs.split()


def part1(text):
    """Count output digits that use a unique number of segments."""
    return sum(
        len(output) in _UNIQUE_LENGTHS
        for line in text.splitlines()
        if line.strip()
        for output in _split(line)[1]
    )


def part2(text):
    """Sum of every decoded output value."""
    total = 0
    for line in text.splitlines():
        if not line.strip():
            continue
        patterns, outputs = _split(line)
        mapping = deduce_mapping(patterns)
        total += int("".join(str(mapping[_key(o)]) for o in outputs))
    return total