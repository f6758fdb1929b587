import pytest

from roomgrid.geometry import Direction
from roomgrid.rooms import Door, DoorKind, Passage, Room, RoomKind, door_kind_between


def test_room_variants():
    assert not Room.regular().is_special
    assert Room.special().is_special
    assert Room().kind is RoomKind.REGULAR


def test_room_kind_cannot_be_reassigned():
    room = Room.regular()
    with pytest.raises(AttributeError):
        room.kind = RoomKind.SPECIAL  # type: ignore[misc]
    assert not room.is_special


def test_room_doors_are_read_only_view():
    room = Room.regular()
    other = Room.regular()
    room.add_door(Direction.LEFT, Door(other, Passage()))
    assert room.door(Direction.LEFT).leads_to is other
    assert room.door(Direction.RIGHT) is None
    with pytest.raises(TypeError):
        room.doors[Direction.UP] = Door(other, Passage())  # type: ignore[index]


@pytest.mark.parametrize(
    "a_special, b_special, expected",
    [
        (False, False, DoorKind.REGULAR),
        (True, False, DoorKind.SPECIAL),
        (False, True, DoorKind.SPECIAL),
        (True, True, DoorKind.SPECIAL),
    ],
)
def test_door_kind_rule_is_symmetric(a_special, b_special, expected):
    a = Room.special() if a_special else Room.regular()
    b = Room.special() if b_special else Room.regular()
    assert door_kind_between(a, b) is expected
    assert door_kind_between(b, a) is expected


def test_regular_passage_is_always_open():
    passage = Passage(DoorKind.REGULAR)
    door = Door(Room.regular(), passage)
    assert door.kind is DoorKind.REGULAR
    assert door.is_passable()
    assert not door.requires_key
    assert passage.unlock() is False


class TestSpecialPassage:
    def test_starts_locked(self):
        door = Door(Room.special(), Passage(DoorKind.SPECIAL))
        assert door.is_special
        assert door.requires_key
        assert door.is_passable() is False

    def test_unlock_happens_once(self):
        passage = Passage(DoorKind.SPECIAL)
        assert passage.unlock() is True
        assert passage.is_open
        assert passage.unlock() is False
        assert passage.is_open

    def test_unlocking_one_side_opens_the_other(self):
        outside, inside = Room.regular(), Room.special()
        passage = Passage(door_kind_between(outside, inside))
        way_in = Door(inside, passage)
        way_out = Door(outside, passage)
        assert not way_in.is_passable() and not way_out.is_passable()

        way_in.passage.unlock()

        assert way_in.is_passable()
        assert way_out.is_passable()
        assert not way_out.requires_key
