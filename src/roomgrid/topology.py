from __future__ import annotations

import logging
from typing import List, Mapping

from .exceptions import GenerationError
from .geometry import Position
from .growth import count_neighbours
from .rng import RandomSource

logger = logging.getLogger(__name__)


def find_dead_ends(rooms: Mapping[Position, object]) -> List[Position]:
    """Return the dead ends of ``rooms`` in map order.

    A dead end is a room with exactly one neighbour; the starting room never
    counts as one. Dead ends are where special rooms get placed.
    """
    return [
        pos
        for pos in rooms
        if pos != Position.ORIGIN and count_neighbours(rooms, pos) == 1
    ]


def pick_boss_room(rooms: Mapping[Position, object], dead_ends: List[Position]) -> Position:
    """Pick the boss room: the room placed last during growth.

    The pick is removed from ``dead_ends`` so it cannot also become the item room.
    """
    if not rooms:
        raise GenerationError("Cannot pick a boss room on an empty floor")
    boss = list(rooms)[-1]
    if boss in dead_ends:
        dead_ends.remove(boss)
    else:
        logger.warning("Boss room %s is not a dead end", boss)
    return boss


def pick_item_room(dead_ends: List[Position], rng: RandomSource) -> Position:
    """Pick a uniformly random dead end for the item room and remove it from the list."""
    if not dead_ends:
        raise GenerationError("No dead end left for the item room")
    picked = rng.choice(dead_ends)
    dead_ends.remove(picked)
    return picked


__all__ = ["find_dead_ends", "pick_boss_room", "pick_item_room"]
