"""Aplenty: sort machine parts through chains of workflows."""

from collections import deque
from math import prod

_CATEGORIES = "xmas"
_LOWEST = 1
_HIGHEST = 4000


def _parse_workflow(line):
    name, sep, body = line.partition("{")
    if not sep:
        raise ValueError(f"not a workflow: {line!r}")
    steps = body.strip("}").split(",")
    rules = []
    for step in steps[:-1]:
        if len(step) < 2 or step[1] not in "<>" or step[0] not in _CATEGORIES:
            raise ValueError(f"not a workflow rule: {step!r}")
        condition, colon, destination = step.partition(":")
        if not colon:
            raise ValueError(f"not a workflow rule: {step!r}")
        rules.append((step[0], step[1], int(condition[2:]), destination))
    return name, (tuple(rules), steps[-1])


def _parse_part(line):
    part = {}
    for section in line.strip("{}").split(","):
        key, sep, value = section.partition("=")
        if not sep:
            raise ValueError(f"not a part rating: {line!r}")
        part[key] = int(value)
    return part


def parse(text):
    """Return workflows as name -> (rules, fallback) and the parts' ratings.

    Each rule is (category, '<' or '>', value, destination).
    """
    workflow_block, _, part_block = text.partition("\n\n")
    workflows = dict(
        _parse_workflow(line.strip()) for line in workflow_block.splitlines() if line.strip()
    )
    parts = [_parse_part(line.strip()) for line in part_block.splitlines() if line.strip()]
    return workflows, parts


def _workflow(workflows, name):
    try:
        return workflows[name]
    except KeyError:
        raise ValueError(f"unknown workflow: {name!r}") from None


def _destination(workflows, part):
    name = "in"
    visited = set()
    while name not in ("A", "R"):
        if name in visited:
            raise ValueError(f"workflows loop at {name!r}")
        visited.add(name)
        rules, fallback = _workflow(workflows, name)
        for attr, op, value, destination in rules:
            rating = part.get(attr, 0)
            if (rating < value) if op == "<" else (rating > value):
                name = destination
                break
        else:
            name = fallback
    return name


def part1(text):
    """Sum of the ratings of every accepted part."""
    workflows, parts = parse(text)
    return sum(sum(part.values()) for part in parts if _destination(workflows, part) == "A")


def part2(text):
    """Number of rating combinations from 1 to 4000 that are accepted."""
    workflows, _ = parse(text)
    initial = {category: (_LOWEST, _HIGHEST) for category in _CATEGORIES}
    queue = deque([("in", initial)])
    total = 0
    while queue:
        name, ranges = queue.popleft()
        if name == "A":
            total += prod(high - low + 1 for low, high in ranges.values())
            continue
        if name == "R":
            continue
        rules, fallback = _workflow(workflows, name)
        for attr, op, value, destination in rules:
            low, high = ranges[attr]
            if op == "<":
                passed, failed = (low, min(high, value - 1)), (max(low, value), high)
            else:
                passed, failed = (max(low, value + 1), high), (low, min(high, value))
            if passed[0] <= passed[1]:
                queue.append((destination, {**ranges, attr: passed}))
            if failed[0] > failed[1]:
                break
            ranges = {**ranges, attr: failed}
        else:
            queue.append((fallback, ranges))
    return total