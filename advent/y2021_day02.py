"""Dive: steer the submarine."""


def parse(text):
    """Return (command, distance) pairs."""
    commands = []
    for line in text.splitlines():
        if not line.strip():
            continue
        direction, distance = line.split()
        commands.append((direction, int(distance)))
    return commands


def part1(commands):
    """Horizontal position multiplied by depth, with up/down changing depth."""
    horizontal = depth = 0
    for direction, distance in commands:
        if direction == "forward":
            horizontal += distance
        elif direction == "up":
            depth -= distance
        elif direction == "down":
            depth += distance
    return horizontal * depth


def part2(commands):
    """Horizontal position multiplied by depth, with up/down changing aim."""
    horizontal = depth = aim = 0
    for direction, distance in commands:
        if direction == "forward":
            horizontal += distance
            depth += aim * distance
        elif direction == "up":
            aim -= distance
        elif direction == "down":
            aim += distance
    return horizontal * depth