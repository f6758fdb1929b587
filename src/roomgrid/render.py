from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from .geometry import Position, grid_side

if TYPE_CHECKING:  # pragma: no cover
    from .floor import Floor

START_SYMBOL = "S"
ITEM_SYMBOL = "?"
BOSS_SYMBOL = "!"
ROOM_SYMBOL = "O"
EMPTY_SYMBOL = " "

LEGEND: Dict[str, str] = {
    START_SYMBOL: "Starting Room",
    ITEM_SYMBOL: "Item Room",
    BOSS_SYMBOL: "Boss Room",
    ROOM_SYMBOL: "Room",
}


def render_layout(floor: "Floor") -> str:
    """A graphical representation of the floor's layout.

    One row per y and one bracketed cell per x, origin centred:
    S=Start Room ?=Item Room !=Boss Room O=Room, blank for empty cells.
    """
    side = grid_side(floor.max_distance)
    offset = floor.max_distance
    matrix: List[List[Optional[str]]] = [[None] * side for _ in range(side)]

    symbols = {
        Position.ORIGIN: START_SYMBOL,
        floor.item_room_pos: ITEM_SYMBOL,
        floor.boss_room_pos: BOSS_SYMBOL,
    }
    for pos in floor.rooms_map:
        matrix[pos.y + offset][pos.x + offset] = symbols.get(pos, ROOM_SYMBOL)

    lines = []
    for row in matrix:
        lines.append("".join(f"[{cell or EMPTY_SYMBOL}]" for cell in row))
        lines.append("\n")
    return "".join(lines)


def render_legend() -> str:
    return "  ".join(f"{symbol}={label}" for symbol, label in LEGEND.items())


__all__ = [
    "START_SYMBOL",
    "ITEM_SYMBOL",
    "BOSS_SYMBOL",
    "ROOM_SYMBOL",
    "EMPTY_SYMBOL",
    "LEGEND",
    "render_layout",
    "render_legend",
]
