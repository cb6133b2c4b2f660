"""Monkey math: evaluate the monkeys' shouted expression tree."""

import operator


def _truncating_div(a, b):
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}

_SEARCH_UPPER = 100_000_000_000_000


def parse(text):
    """Map each monkey to its number or to a (left, op, right) job."""
    monkeys = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        name, sep, job = line.partition(": ")
        if not sep:
            raise ValueError(f"not a monkey job: {line!r}")
        words = job.split()
        if len(words) == 1:
            monkeys[name] = int(words[0])
        elif len(words) == 3 and words[1] in _OPERATIONS:
            monkeys[name] = (words[0], words[1], words[2])
        else:
            raise ValueError(f"not a monkey job: {line!r}")
    return monkeys


def _value(monkeys, name, cache):
    if name in cache:
        return cache[name]
    try:
        job = monkeys[name]
    except KeyError:
        raise ValueError(f"unknown monkey: {name!r}") from None
    if isinstance(job, int):
        result = job
    else:
        left, op, right = job
        result = _OPERATIONS[op](_value(monkeys, left, cache), _value(monkeys, right, cache))
    cache[name] = result
    return result


def part1(text):
    """The number the root monkey shouts."""
    return _value(parse(text), "root", {})


def _compare(monkeys, human):
    """Compare root's inputs for a humn value.

    Returns None when an intermediate monkey computes zero, otherwise
    -1, 0 or 1 as the left input is below, equal to or above the right.
    """
    monkeys = {**monkeys, "humn": human}
    root = monkeys.get("root")
    if not isinstance(root, tuple):
        raise ValueError("root must combine two monkeys")
    left_name, _, right_name = root
    cache = {}
    left = _value(monkeys, left_name, cache)
    right = _value(monkeys, right_name, cache)
    if any(value == 0 for name, value in cache.items() if isinstance(monkeys[name], tuple)):
        return None
    return (left > right) - (left < right)


def part2(text):
    """Search for the humn value that balances root's inputs.

    The search assumes root's left input falls as humn rises, and reports
    one less than the first balancing value it finds.
    """
    monkeys = parse(text)
    lower, upper = 0, _SEARCH_UPPER
    guess = (upper - lower) // 2
    while True:
        outcome = _compare(monkeys, guess)
        if outcome == 0:
            return guess - 1
        if outcome is None:
            guess += 1
            continue
        if outcome < 0:
            upper = guess
        else:
            lower = guess
        if upper - lower <= 1:
            raise ValueError("no humn value balances root")
        guess = lower + (upper - lower) // 2