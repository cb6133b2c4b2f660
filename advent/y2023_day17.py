"""Clumsy crucible: least heat loss with limits on straight runs."""

import heapq
from itertools import count

_TURN_LEFT = {(0, 1): (-1, 0), (-1, 0): (0, -1), (0, -1): (1, 0), (1, 0): (0, 1)}
_TURN_RIGHT = {after: before for before, after in _TURN_LEFT.items()}


def min_heat_loss(grid, min_straight, max_straight):
    """Least heat lost travelling from the top-left to the bottom-right block.

    The crucible must go at least min_straight blocks before turning or
    stopping, and at most max_straight blocks in a straight line.
    """
    board = {(r, c): int(v) for r, row in enumerate(grid) for c, v in enumerate(row)}
    if not board:
        raise ValueError("empty map")
    target = (len(grid) - 1, len(grid[0]) - 1)

    tie = count()
    heap = []

    def push(loss, position, direction, straight):
        heapq.heappush(heap, (loss, next(tie), position, direction, straight))

    push(0, (0, 1), (0, 1), 1)
    push(0, (1, 0), (1, 0), 1)
    visited = {}

    while heap:
        loss, _, position, direction, straight = heapq.heappop(heap)
        if position not in board:
            continue
        heat = board[position] + loss
        if position == target and straight >= min_straight:
            return heat
        state = (position, direction, straight)
        previous = visited.get(state)
        if previous is not None and previous <= heat:
            continue
        visited[state] = heat
        row, col = position
        if straight >= min_straight:
            for turned in (_TURN_LEFT[direction], _TURN_RIGHT[direction]):
                push(heat, (row + turned[0], col + turned[1]), turned, 1)
        if straight < max_straight:
            push(heat, (row + direction[0], col + direction[1]), direction, straight + 1)
    raise ValueError("no path to the target")


def _grid(text):
    return [[int(c) for c in line.strip()] for line in text.splitlines() if line.strip()]


def part1(text):
    """Least heat loss for a normal crucible (at most three straight)."""
    return min_heat_loss(_grid(text), 0, 3)


def part2(text):
    """Least heat loss for an ultra crucible (four to ten straight)."""
    return min_heat_loss(_grid(text), 4, 10)