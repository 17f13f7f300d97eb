import pytest

from aoc2018.day25 import Point, count_constellations, parse_points

EXAMPLE = """0,0,0,0
3,0,0,0
0,3,0,0
0,0,3,0
0,0,0,3
0,0,0,6
9,0,0,0
12,0,0,0
"""


def test_parse_points():
    points = parse_points("1,-2,3,-4\n\n0,0,0,0\n")
    assert points == [Point(1, -2, 3, -4), Point(0, 0, 0, 0)]


@pytest.mark.parametrize("line", ["1,2,3", "1,2,3,4,5", "a,b,c,d"])
def test_parse_points_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_points(line)


def test_distance_is_symmetric_and_zero_to_self():
    first, second = Point(1, -2, 3, 4), Point(-5, 0, 2, 9)
    assert first.distance(second) == second.distance(first)
    assert first.distance(first) == 0


def test_example_constellations():
    assert count_constellations(parse_points(EXAMPLE)) == 2


def test_far_points_are_separate():
    points = [Point(10 * i, 0, 0, 0) for i in range(7)]
    assert count_constellations(points) == len(points)


def test_chain_links_into_one():
    points = [Point(3 * i, 0, 0, 0) for i in range(6)]
    assert count_constellations(points) == count_constellations(points[:1])


def test_duplicates_count_once():
    point = Point(1, 1, 1, 1)
    assert count_constellations([point, point]) == count_constellations([point])


def test_order_does_not_matter():
    points = parse_points(EXAMPLE)
    assert count_constellations(reversed(points)) == count_constellations(points)


def test_no_points():
    assert count_constellations([]) == 0