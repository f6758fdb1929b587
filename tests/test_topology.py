import pytest

from roomgrid.exceptions import GenerationError
from roomgrid.geometry import Position
from roomgrid.rng import RandomSource
from roomgrid.rooms import Room
from roomgrid.topology import find_dead_ends, pick_boss_room, pick_item_room


def layout(*coords):
    return {Position(x, y): Room.regular() for x, y in coords}


def test_starting_room_is_never_a_dead_end():
    rooms = layout((0, 0), (1, 0), (2, 0))
    assert find_dead_ends(rooms) == [Position(2, 0)]


def test_plus_shape_has_four_dead_ends_in_map_order():
    rooms = layout((0, 0), (0, -1), (0, 1), (-1, 0), (1, 0))
    assert find_dead_ends(rooms) == [Position(0, -1), Position(0, 1), Position(-1, 0), Position(1, 0)]


def test_rooms_with_two_or_more_neighbours_are_not_dead_ends():
    rooms = layout((0, 0), (1, 0), (1, 1), (2, 1), (1, 2))
    dead_ends = find_dead_ends(rooms)
    assert Position(1, 1) not in dead_ends
    assert Position(1, 0) not in dead_ends
    assert set(dead_ends) == {Position(2, 1), Position(1, 2)}


def test_boss_is_last_inserted_room_and_leaves_candidates():
    rooms = layout((0, 0), (0, -1), (0, 1), (-1, 0), (1, 0))
    dead_ends = find_dead_ends(rooms)
    boss = pick_boss_room(rooms, dead_ends)
    assert boss == Position(1, 0)
    assert boss not in dead_ends
    assert len(dead_ends) == 3


def test_boss_pick_on_empty_map_fails():
    with pytest.raises(GenerationError):
        pick_boss_room({}, [])


def test_item_room_is_removed_from_candidates():
    candidates = [Position(0, -1), Position(0, 1), Position(-1, 0)]
    picked = pick_item_room(candidates, RandomSource(4))
    assert picked not in candidates
    assert len(candidates) == 2


def test_item_pick_is_roughly_uniform():
    rng = RandomSource(2024)
    counts = {}
    for _ in range(3000):
        candidates = [Position(0, 1), Position(0, 2), Position(0, 3)]
        picked = pick_item_room(candidates, rng)
        counts[picked] = counts.get(picked, 0) + 1
    assert len(counts) == 3
    assert all(800 < c < 1200 for c in counts.values())


def test_item_pick_without_dead_ends_fails():
    with pytest.raises(GenerationError):
        pick_item_room([], RandomSource(1))
