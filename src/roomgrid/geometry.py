from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterator, Tuple

# Maximum distance on each axis a room can be from the starting room (0, 0).
MAX_DIST_FROM_START = 3


@dataclass(frozen=True)
class Position:
    """An integer cell on the unbounded logical floor grid.

    Coordinates are (x, y) with x growing to the right and y growing down,
    the same orientation used when the floor is rendered.
    """

    x: int
    y: int

    ORIGIN: ClassVar["Position"]

    def add(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def __add__(self, other: object) -> "Position":
        if isinstance(other, Direction):
            return self.add(other.offset)
        if isinstance(other, Position):
            return self.add(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Position({self.x}, {self.y})"


Position.ORIGIN = Position(0, 0)


class Direction(Enum):
    """The four cardinal unit offsets. No diagonals."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> Position:
        dx, dy = self.value
        return Position(dx, dy)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    @classmethod
    def all(cls) -> Tuple["Direction", ...]:
        return tuple(cls)


def neighbour_positions(pos: Position) -> Iterator[Position]:
    """Yield the four cardinal neighbours of ``pos`` in ``Direction.all()`` order."""
    for direction in Direction.all():
        yield pos + direction


def within_bounds(pos: Position, max_distance: int = MAX_DIST_FROM_START) -> bool:
    return abs(pos.x) <= max_distance and abs(pos.y) <= max_distance


def grid_side(max_distance: int = MAX_DIST_FROM_START) -> int:
    """Length of one side of the square grid spanned by ``max_distance``."""
    return 2 * max_distance + 1


__all__ = [
    "MAX_DIST_FROM_START",
    "Position",
    "Direction",
    "neighbour_positions",
    "within_bounds",
    "grid_side",
]
