from advent import y2022_day18

EXAMPLE = """2,2,2
1,2,2
3,2,2
2,1,2
2,3,2
2,2,1
2,2,3
2,2,4
2,2,6
1,2,5
3,2,5
2,1,5
2,3,5
"""


def _solid(low, high):
    return {
        (x, y, z)
        for x in range(low, high + 1)
        for y in range(low, high + 1)
        for z in range(low, high + 1)
    }


def test_parse_reads_coordinates():
    assert y2022_day18.parse("1,2,3\n4,5,6\n") == {(1, 2, 3), (4, 5, 6)}


def test_surface_area_example():
    assert y2022_day18.surface_area(y2022_day18.parse(EXAMPLE)) == 64


def test_exterior_surface_area_example():
    assert y2022_day18.exterior_surface_area(y2022_day18.parse(EXAMPLE)) == 58


def test_isolated_cubes_show_every_face():
    cubes = {(1, 1, 1), (5, 5, 5), (9, 1, 4)}
    assert y2022_day18.surface_area(cubes) == 6 * len(cubes)
    assert y2022_day18.exterior_surface_area(cubes) == 6 * len(cubes)


def test_adjacent_pair_hides_two_faces():
    single = y2022_day18.surface_area({(3, 3, 3)})
    assert y2022_day18.surface_area({(3, 3, 3), (4, 3, 3)}) == 2 * single - 2


def test_hollow_shell_exterior_matches_solid():
    solid = _solid(1, 3)
    shell = solid - {(2, 2, 2)}
    assert y2022_day18.exterior_surface_area(shell) == y2022_day18.surface_area(solid)
    assert y2022_day18.surface_area(shell) > y2022_day18.exterior_surface_area(shell)


def test_solid_has_no_interior_faces():
    solid = _solid(2, 4)
    assert y2022_day18.exterior_surface_area(solid) == y2022_day18.surface_area(solid)


def test_translation_preserves_areas():
    cubes = y2022_day18.parse(EXAMPLE)
    shifted = {(x + 3, y + 4, z + 5) for x, y, z in cubes}
    assert y2022_day18.surface_area(shifted) == y2022_day18.surface_area(cubes)
    assert y2022_day18.exterior_surface_area(shifted) == y2022_day18.exterior_surface_area(cubes)