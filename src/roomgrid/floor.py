"""The Floor: a series of rooms organized in a square grid layout.

Generation is a generate-and-test loop. Each attempt grows a fresh room set
from the starting room at (0, 0); an attempt is kept only when it reached the
exact room count and has enough dead ends to host every special room. The
boss room and the item room are then picked among those dead ends and doors
are inferred between every pair of adjacent rooms.

The loop is probabilistic. Small floors converge within a handful of
attempts, but large counts close to the grid capacity may converge rarely or
never, so the number of attempts is capped by ``max_attempts`` (pass ``None``
to retry forever).
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .doors import place_doors
from .exceptions import FloorConfigError, GenerationError
from .geometry import MAX_DIST_FROM_START, Direction, Position, grid_side
from .growth import grow
from .render import render_layout
from .rng import RandomSource
from .rooms import Passage, Room
from .topology import find_dead_ends, pick_boss_room, pick_item_room

logger = logging.getLogger(__name__)

SPECIAL_ROOMS_AMOUNT = 2
MINIMUM_ROOMS_AMOUNT = SPECIAL_ROOMS_AMOUNT + 1
DEFAULT_MAX_ATTEMPTS = 10_000


@dataclass(frozen=True)
class GenerationStats:
    """Counters describing how a floor was reached."""

    attempts: int
    short_attempts: int
    dead_end_rejections: int
    doors_placed: int
    runtime_ms: float


def validate_floor_request(
    rooms: object,
    max_distance: object = MAX_DIST_FROM_START,
    max_attempts: object = DEFAULT_MAX_ATTEMPTS,
) -> None:
    """Reject a floor request before any generation work is done.

    Raises:
        TypeError: if a value is missing or not an integer.
        FloorConfigError: if a value is out of range.
    """
    if rooms is None:
        raise TypeError("A room count must be provided")
    if isinstance(rooms, bool) or not isinstance(rooms, int):
        raise TypeError(f"Room count must be an integer, got {type(rooms).__name__}")
    if isinstance(max_distance, bool) or not isinstance(max_distance, int):
        raise TypeError(f"max_distance must be an integer, got {type(max_distance).__name__}")
    if max_attempts is not None and (isinstance(max_attempts, bool) or not isinstance(max_attempts, int)):
        raise TypeError(f"max_attempts must be an integer or None, got {type(max_attempts).__name__}")

    if rooms < MINIMUM_ROOMS_AMOUNT:
        raise FloorConfigError(
            f"A floor needs at least {MINIMUM_ROOMS_AMOUNT} rooms, got {rooms}"
        )
    if max_distance < 0:
        raise FloorConfigError(f"max_distance must be non-negative, got {max_distance}")
    capacity = grid_side(max_distance) ** 2
    if rooms > capacity:
        raise FloorConfigError(
            f"{rooms} rooms do not fit in a {grid_side(max_distance)}x{grid_side(max_distance)} grid"
        )
    if max_attempts is not None and max_attempts <= 0:
        raise FloorConfigError(f"max_attempts must be positive, got {max_attempts}")


class Floor:
    """A generated dungeon floor.

    Args:
        rooms: the amount of rooms to generate (>= 3)
        max_distance: maximum distance on each axis from the starting room
        max_attempts: growth attempts allowed before giving up; ``None`` for no cap
        rng: random source to draw from; built from ``seed`` when omitted
        seed: seed for a new random source, for reproducible floors

    Raises:
        TypeError: if ``rooms`` is None or not an integer
        FloorConfigError: if ``rooms`` < 3 or the request cannot fit the grid
        GenerationError: if no valid floor was found within ``max_attempts``
    """

    def __init__(
        self,
        rooms: int,
        *,
        max_distance: int = MAX_DIST_FROM_START,
        max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ) -> None:
        validate_floor_request(rooms, max_distance, max_attempts)
        self._rooms_amount = rooms
        self._max_distance = max_distance
        self._rng = rng if rng is not None else RandomSource(seed)

        started = time.perf_counter()
        rooms_map, dead_ends, attempts, short, lacking = self._generate_until_valid(max_attempts)
        self._rooms_map: Dict[Position, Room] = rooms_map
        self._generated_rooms = len(rooms_map)
        self._dead_ends: Tuple[Position, ...] = tuple(dead_ends)

        candidates = list(dead_ends)
        self._boss_room_pos = pick_boss_room(self._rooms_map, candidates)
        self._item_room_pos = pick_item_room(candidates, self._rng)
        # Replacing values keeps the insertion order of the accepted attempt.
        self._rooms_map[self._boss_room_pos] = Room.special()
        self._rooms_map[self._item_room_pos] = Room.special()
        doors = place_doors(self._rooms_map)

        self._stats = GenerationStats(
            attempts=attempts,
            short_attempts=short,
            dead_end_rejections=lacking,
            doors_placed=doors,
            runtime_ms=(time.perf_counter() - started) * 1000.0,
        )
        logger.info(
            "Generated floor with %d rooms in %d attempt(s); boss=%s item=%s",
            self._rooms_amount,
            attempts,
            self._boss_room_pos,
            self._item_room_pos,
        )

    def _generate_until_valid(self, max_attempts: Optional[int]):
        attempts = 0
        short_attempts = 0
        dead_end_rejections = 0
        while max_attempts is None or attempts < max_attempts:
            attempts += 1
            rooms_map = grow(self._rooms_amount, self._max_distance, self._rng)
            self._generated_rooms = len(rooms_map)
            if self._generated_rooms != self._rooms_amount:
                short_attempts += 1
                continue
            dead_ends = find_dead_ends(rooms_map)
            if len(dead_ends) < SPECIAL_ROOMS_AMOUNT:
                dead_end_rejections += 1
                logger.debug("Attempt %d rejected: only %d dead end(s)", attempts, len(dead_ends))
                continue
            return rooms_map, dead_ends, attempts, short_attempts, dead_end_rejections
        logger.error(
            "Gave up generating a %d room floor after %d attempts", self._rooms_amount, attempts
        )
        raise GenerationError(
            f"Unable to generate a valid floor of {self._rooms_amount} rooms within {attempts} attempts"
        )

    @property
    def rooms_map(self) -> Mapping[Position, Room]:
        """Read-only view of position -> room, in the order rooms were generated."""
        return MappingProxyType(self._rooms_map)

    @property
    def rooms_amount(self) -> int:
        return self._rooms_amount

    @property
    def generated_rooms(self) -> int:
        return self._generated_rooms

    @property
    def max_distance(self) -> int:
        return self._max_distance

    @property
    def boss_room_pos(self) -> Position:
        return self._boss_room_pos

    @property
    def item_room_pos(self) -> Position:
        return self._item_room_pos

    @property
    def dead_ends(self) -> Tuple[Position, ...]:
        """Dead ends found on the accepted attempt, before special rooms were assigned."""
        return self._dead_ends

    @property
    def attempts(self) -> int:
        return self._stats.attempts

    @property
    def stats(self) -> GenerationStats:
        return self._stats

    @property
    def start_room(self) -> Room:
        return self._rooms_map[Position.ORIGIN]

    @property
    def boss_room(self) -> Room:
        return self._rooms_map[self._boss_room_pos]

    @property
    def item_room(self) -> Room:
        return self._rooms_map[self._item_room_pos]

    def room_at(self, pos: Position) -> Optional[Room]:
        return self._rooms_map.get(pos)

    def passage(self, pos: Position, direction: Direction) -> Optional[Passage]:
        """The passage leaving ``pos`` toward ``direction``, if there is one.

        Both neighbouring rooms see the same passage, so unlocking it from
        either side opens the way in both directions.
        """
        room = self._rooms_map.get(pos)
        if room is None:
            return None
        door = room.door(direction)
        return door.passage if door is not None else None

    def __len__(self) -> int:
        return len(self._rooms_map)

    def render(self) -> str:
        return render_layout(self)

    def __str__(self) -> str:
        return self.render()


__all__ = [
    "SPECIAL_ROOMS_AMOUNT",
    "MINIMUM_ROOMS_AMOUNT",
    "DEFAULT_MAX_ATTEMPTS",
    "GenerationStats",
    "validate_floor_request",
    "Floor",
]
