class RoomgridError(Exception):
    """Base exception for the roomgrid package."""


class FloorConfigError(RoomgridError, ValueError):
    """Raised when a floor is requested with an invalid configuration (e.g., too few rooms)."""


class GenerationError(RoomgridError, RuntimeError):
    """Raised when a valid floor could not be generated within the attempt budget."""
