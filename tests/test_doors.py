from roomgrid.doors import place_doors
from roomgrid.geometry import Direction, Position
from roomgrid.rooms import DoorKind, Room


def test_doors_follow_adjacency_in_both_directions():
    rooms = {
        Position(0, 0): Room.regular(),
        Position(1, 0): Room.regular(),
        Position(1, 1): Room.regular(),
    }
    placed = place_doors(rooms)

    assert placed == 4
    origin, east, south_east = rooms[Position(0, 0)], rooms[Position(1, 0)], rooms[Position(1, 1)]
    assert set(origin.doors) == {Direction.RIGHT}
    assert set(east.doors) == {Direction.LEFT, Direction.DOWN}
    assert set(south_east.doors) == {Direction.UP}
    assert origin.doors[Direction.RIGHT].leads_to is east
    assert east.doors[Direction.LEFT].leads_to is origin
    assert east.doors[Direction.DOWN].leads_to is south_east


def test_special_rooms_lock_doors_on_both_sides():
    item = Room.special()
    rooms = {
        Position(0, 0): Room.regular(),
        Position(0, 1): Room.regular(),
        Position(0, 2): item,
    }
    place_doors(rooms)

    start, middle = rooms[Position(0, 0)], rooms[Position(0, 1)]
    assert start.doors[Direction.DOWN].kind is DoorKind.REGULAR
    assert middle.doors[Direction.UP].kind is DoorKind.REGULAR
    assert middle.doors[Direction.DOWN].kind is DoorKind.SPECIAL
    assert item.doors[Direction.UP].kind is DoorKind.SPECIAL
    assert item.doors[Direction.UP].leads_to is middle


def test_isolated_room_gets_no_doors():
    rooms = {Position(0, 0): Room.regular(), Position(2, 0): Room.regular()}
    assert place_doors(rooms) == 0
    assert all(not room.doors for room in rooms.values())


def test_both_sides_of_a_passage_share_one_lock():
    item = Room.special()
    rooms = {Position(0, 0): Room.regular(), Position(1, 0): item}
    place_doors(rooms)

    way_in = rooms[Position(0, 0)].doors[Direction.RIGHT]
    way_out = item.doors[Direction.LEFT]
    assert way_in.passage is way_out.passage
    assert way_in.requires_key and way_out.requires_key

    way_in.passage.unlock()
    assert way_out.is_passable()
