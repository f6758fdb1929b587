"""Randomized breadth-first growth of a floor's room set.

Works like a BFS starting from the starting room and growing outwards, in the
manner of the dungeon generation of The Binding of Isaac:
https://www.boristhebrave.com/2020/09/12/dungeon-generation-in-binding-of-isaac/

A single attempt is not guaranteed to reach the target room count; the caller
decides whether to keep the result or grow again.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List, Mapping

from .geometry import Direction, Position, neighbour_positions, within_bounds
from .rng import RandomSource
from .rooms import Room

logger = logging.getLogger(__name__)

# A candidate cell with this many occupied neighbours or more is rejected.
MAX_CANDIDATE_NEIGHBOURS = 2


def count_neighbours(rooms: Mapping[Position, object], pos: Position) -> int:
    """Number of occupied cells among the four cardinal neighbours of ``pos``."""
    return sum(1 for n in neighbour_positions(pos) if n in rooms)


class GrowthAttempt:
    """State of one growth attempt: room map, generated counter and BFS queue.

    A fresh instance is built for every attempt so nothing leaks between them.
    """

    def __init__(self, target: int, max_distance: int, rng: RandomSource) -> None:
        self.target = target
        self.max_distance = max_distance
        self.rng = rng
        self.rooms: Dict[Position, Room] = {}
        self.generated = 0
        self._queue: Deque[Position] = deque()

    def _place(self, pos: Position) -> None:
        self.rooms[pos] = Room.regular()
        self._queue.append(pos)
        self.generated += 1

    def _accepts(self, candidate: Position) -> bool:
        # The coin is only flipped for cells that passed the structural checks.
        return (
            candidate not in self.rooms
            and self.generated < self.target
            and count_neighbours(self.rooms, candidate) < MAX_CANDIDATE_NEIGHBOURS
            and self.rng.coin_flip()
            and within_bounds(candidate, self.max_distance)
        )

    def run(self) -> Dict[Position, Room]:
        self._place(Position.ORIGIN)
        while self._queue:
            current = self._queue.popleft()
            directions: List[Direction] = list(Direction.all())
            self.rng.shuffle(directions)
            for direction in directions:
                candidate = current + direction
                if self._accepts(candidate):
                    self._place(candidate)
        logger.debug("Growth attempt produced %d/%d rooms", self.generated, self.target)
        return self.rooms


def grow(target: int, max_distance: int, rng: RandomSource) -> Dict[Position, Room]:
    """Run one growth attempt and return its insertion-ordered room map.

    The map always holds the origin and between 1 and ``target`` rooms.
    """
    return GrowthAttempt(target, max_distance, rng).run()


__all__ = ["MAX_CANDIDATE_NEIGHBOURS", "GrowthAttempt", "count_neighbours", "grow"]
