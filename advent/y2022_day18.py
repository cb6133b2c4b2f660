"""Boiling boulders: surface area of a lava droplet."""

from collections import deque

_OFFSETS = (
    (0, 0, 1),
    (0, 0, -1),
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
)
_LOWER = -1
_UPPER = 22


def parse(text):
    """Return the set of cube coordinates."""
    cubes = set()
    for line in text.splitlines():
        if not line.strip():
            continue
        x, y, z = (int(n) for n in line.split(","))
        cubes.add((x, y, z))
    return cubes


def _neighbours(cube):
    x, y, z = cube
    for dx, dy, dz in _OFFSETS:
        yield (x + dx, y + dy, z + dz), (dx, dy, dz)


def surface_area(cubes):
    """Count cube faces not touching another cube."""
    cubes = set(cubes)
    covered = sum(1 for cube in cubes for neighbour, _ in _neighbours(cube) if neighbour in cubes)
    return len(cubes) * 6 - covered


def _in_bounds(position, offset):
    for coordinate, delta in zip(position, offset):
        if delta > 0:
            return coordinate < _UPPER
        if delta < 0:
            return coordinate > _LOWER
    return True


def exterior_surface_area(cubes):
    """Count faces reached by steam flooding from outside the droplet."""
    cubes = set(cubes)
    blocked = 0
    queue = deque([(_LOWER, _LOWER, _LOWER)])
    seen = set()
    while queue:
        steam = queue.popleft()
        if steam in seen:
            continue
        seen.add(steam)
        for neighbour, offset in _neighbours(steam):
            if neighbour in cubes:
                blocked += 1
            elif _in_bounds(neighbour, offset):
                queue.append(neighbour)
    return blocked