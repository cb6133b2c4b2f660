"""Unstable diffusion: elves spreading out over the ground."""

_AROUND = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0))

# Move and the cone that must be empty, in the order north, south, west, east.
_DIRECTIONS = (
    ((-1, 0), ((-1, -1), (-1, 0), (-1, 1))),
    ((1, 0), ((1, -1), (1, 0), (1, 1))),
    ((0, -1), ((-1, -1), (0, -1), (1, -1))),
    ((0, 1), ((-1, 1), (0, 1), (1, 1))),
)

_MAX_ROUNDS = 1_000_000


def parse(text):
    """Return the set of (row, col) positions holding an elf."""
    return {
        (row, col)
        for row, line in enumerate(text.splitlines())
        for col, character in enumerate(line)
        if character == "#"
    }


def _any_elf(elves, row, col, offsets):
    return any((row + dr, col + dc) in elves for dr, dc in offsets)


def _round(elves, round_index):
    """Play one round; return the new positions and how many elves moved."""
    proposals = {}
    claimed = {}
    for elf in elves:
        row, col = elf
        if not _any_elf(elves, row, col, _AROUND):
            continue
        for i in range(4):
            (dr, dc), cone = _DIRECTIONS[(round_index + i) % 4]
            if _any_elf(elves, row, col, cone):
                continue
            target = (row + dr, col + dc)
            if target in claimed:
                proposals.pop(claimed[target], None)
            else:
                proposals[elf] = target
                claimed[target] = elf
            break
    moved = (elves - proposals.keys()) | set(proposals.values())
    return moved, len(proposals)


def part1(text):
    """Empty ground in the bounding rectangle after ten rounds.

    The rectangle always reaches back to row 0 and column 0.
    """
    elves = parse(text)
    for round_index in range(10):
        elves, _ = _round(elves, round_index)
    rows = [row for row, _ in elves]
    cols = [col for _, col in elves]
    height = max(0, *rows) - min(0, *rows) + 1
    width = max(0, *cols) - min(0, *cols) + 1
    return height * width - len(elves)


def part2(text):
    """The first round in which no elf moves."""
    elves = parse(text)
    for round_index in range(_MAX_ROUNDS):
        elves, moved = _round(elves, round_index)
        if moved == 0:
            return round_index + 1
    raise ValueError("elves never stopped moving")