import pytest

from aoc2018.day20 import furthest, room_distances

EXAMPLES = [
    "^WNE$",
    "^ENWWW(NEEE|SSE(EE|N))$",
    "^ENNWSWW(NEWS|)SSSEEN(WNSE|)EE(SWEN|)NNN$",
]


def test_simple_route_distances():
    assert room_distances("^WNE$") == {(-1, 0): 1, (-1, -1): 2, (0, -1): 3}


def test_furthest_branching_example():
    assert furthest(EXAMPLES[1])[0] == 10


def test_furthest_empty_branch_example():
    assert furthest(EXAMPLES[2])[0] == 18


@pytest.mark.parametrize("regex", EXAMPLES)
def test_zero_threshold_counts_every_room(regex):
    assert furthest(regex, 0)[1] == len(room_distances(regex))


@pytest.mark.parametrize("regex", EXAMPLES)
def test_max_distance_matches_distances(regex):
    assert furthest(regex)[0] == max(room_distances(regex).values())
    assert furthest(regex)[1] == 0


def test_branches_start_from_same_room():
    distances = room_distances("^N(E|W)$")
    assert distances[(1, -1)] == distances[(-1, -1)]
    assert distances[(1, -1)] == distances[(0, -1)] + 1


def test_shortest_distance_is_kept():
    distances = room_distances("^NS$")
    assert distances[(0, -1)] == 1
    assert distances[(0, 0)] == distances[(0, -1)] + 1


def test_empty_route_has_no_rooms():
    assert furthest("^$") == (0, 0)


@pytest.mark.parametrize("regex", ["^WNE", "^WXE$", "^N(E|W$", "^N E$"])
def test_invalid_routes_raise(regex):
    with pytest.raises(ValueError):
        room_distances(regex)