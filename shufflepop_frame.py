"""Immutable per-tick snapshots handed from the game to the renderer"""
from dataclasses import dataclass
from typing import Optional, Tuple

from shufflepop_tile import Tile


@dataclass(frozen=True)
class CellView:
    col: int
    row: int          # visible row, 0 at the top
    offset: float     # continuous vertical position in rows
    tile: Tile
    selected: bool = False


@dataclass(frozen=True)
class Frame:
    playing: bool
    tick: int
    score: int
    # Play mode
    cells: Tuple[CellView, ...] = ()
    last: Optional[Tile] = None
    cursor: int = 0
    power: float = 0.0
    power_flash: bool = False
    # Message mode
    message: str = ""
    examples: Tuple[Tile, ...] = ()
    previous_score: Optional[int] = None
