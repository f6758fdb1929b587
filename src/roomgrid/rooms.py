"""Rooms and the doors that link them.

Both come in two variants. A special room (boss or item room) forces every
door touching it to be special. The two doors on either side of a passage
share one lock: a special passage stays locked until it is unlocked, a
regular one is always open.
"""
from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .geometry import Direction

logger = logging.getLogger(__name__)


class RoomKind(str, Enum):
    REGULAR = "regular"
    SPECIAL = "special"


class DoorKind(str, Enum):
    REGULAR = "regular"
    SPECIAL = "special"


class Room:
    """A floor cell that can hold one door per cardinal direction."""

    __slots__ = ("_kind", "_doors")

    def __init__(self, kind: RoomKind = RoomKind.REGULAR) -> None:
        self._kind = kind
        self._doors: Dict[Direction, Door] = {}

    @classmethod
    def regular(cls) -> "Room":
        return cls(RoomKind.REGULAR)

    @classmethod
    def special(cls) -> "Room":
        return cls(RoomKind.SPECIAL)

    @property
    def kind(self) -> RoomKind:
        return self._kind

    @property
    def is_special(self) -> bool:
        return self._kind is RoomKind.SPECIAL

    @property
    def doors(self) -> Mapping[Direction, "Door"]:
        return MappingProxyType(self._doors)

    def add_door(self, direction: Direction, door: "Door") -> None:
        self._doors[direction] = door

    def door(self, direction: Direction) -> Optional["Door"]:
        return self._doors.get(direction)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        exits = ",".join(d.name for d in self._doors)
        return f"<Room kind={self._kind.value} exits=[{exits}]>"


def door_kind_between(a: Room, b: Room) -> DoorKind:
    """Door variant linking two rooms: special if either endpoint is special.

    Symmetric in its arguments, so both sides of a passage agree on the lock.
    """
    if a.is_special or b.is_special:
        return DoorKind.SPECIAL
    return DoorKind.REGULAR


class Passage:
    """Lock state shared by the two doors of one pair of adjacent rooms."""

    __slots__ = ("_kind", "_open")

    def __init__(self, kind: DoorKind = DoorKind.REGULAR) -> None:
        self._kind = kind
        self._open = kind is DoorKind.REGULAR

    @property
    def kind(self) -> DoorKind:
        return self._kind

    @property
    def is_open(self) -> bool:
        return self._open

    def unlock(self) -> bool:
        """Open a locked passage. Returns True if this call changed its state."""
        if self._open:
            return False
        self._open = True
        logger.info("Unlocked %s passage", self._kind.value)
        return True

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        state = "open" if self._open else "locked"
        return f"<Passage kind={self._kind.value} state={state}>"


class Door:
    """One side of a passage: the exit of a room toward a neighbouring room."""

    __slots__ = ("leads_to", "passage")

    def __init__(self, leads_to: Room, passage: Passage) -> None:
        self.leads_to = leads_to
        self.passage = passage

    @property
    def kind(self) -> DoorKind:
        return self.passage.kind

    @property
    def is_special(self) -> bool:
        return self.passage.kind is DoorKind.SPECIAL

    @property
    def requires_key(self) -> bool:
        return not self.passage.is_open

    def is_passable(self) -> bool:
        return self.passage.is_open

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Door to={self.leads_to!r} passage={self.passage!r}>"


__all__ = [
    "RoomKind",
    "DoorKind",
    "Room",
    "Door",
    "Passage",
    "door_kind_between",
]
