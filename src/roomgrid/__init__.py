"""Procedural dungeon floor generation on a square room grid."""
from importlib.metadata import PackageNotFoundError, version

from .exceptions import FloorConfigError, GenerationError, RoomgridError
from .floor import Floor, GenerationStats
from .geometry import MAX_DIST_FROM_START, Direction, Position
from .rng import RandomSource
from .rooms import Door, DoorKind, Passage, Room, RoomKind

__all__ = [
    "__version__",
    "Floor",
    "GenerationStats",
    "Position",
    "Direction",
    "MAX_DIST_FROM_START",
    "Room",
    "RoomKind",
    "Door",
    "DoorKind",
    "Passage",
    "RandomSource",
    "RoomgridError",
    "FloorConfigError",
    "GenerationError",
]

try:
    __version__ = version("roomgrid")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"
