from __future__ import annotations

import logging
from typing import Mapping

from .geometry import Direction, Position
from .rooms import Door, Passage, Room, door_kind_between

logger = logging.getLogger(__name__)


def place_doors(rooms: Mapping[Position, Room]) -> int:
    """Attach a door to every room for each occupied cardinal neighbour.

    Each side of a passage gets its own door, but both doors hold the same
    ``Passage``, so unlocking one side unlocks the other.
    Returns the number of doors placed.
    """
    placed = 0
    passages = 0
    for pos, room in rooms.items():
        for direction in Direction.all():
            neighbour = rooms.get(pos + direction)
            if neighbour is None:
                continue
            back = neighbour.door(direction.opposite)
            if back is not None:
                passage = back.passage
            else:
                passage = Passage(door_kind_between(room, neighbour))
                passages += 1
            room.add_door(direction, Door(neighbour, passage))
            placed += 1
    logger.debug("Placed %d doors (%d passages) across %d rooms", placed, passages, len(rooms))
    return placed


__all__ = ["place_doors"]
