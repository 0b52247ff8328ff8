"""Ring-indexed board: unbounded logical rows over fixed storage"""
from typing import List

from shufflepop_tile import Tile

COLS, ROWS = 5, 9


def wrap(index: int, size: int) -> int:
    # Python's % already floors, so negative logical rows land in [0, size)
    return index % size


class Row:
    def __init__(self):
        self.tiles: List[Tile] = [Tile.invalid()] * COLS

    def __getitem__(self, col: int) -> Tile:
        return self.tiles[wrap(col, COLS)]

    def __setitem__(self, col: int, tile: Tile):
        self.tiles[wrap(col, COLS)] = tile

    def __iter__(self):
        return iter(self.tiles)

    def __len__(self):
        return COLS


class Board:
    """ROWS physical rows addressed by logical row modulo ROWS.

    Logical rows decrease as the board scrolls; a slot is refilled with
    fill_row() before its logical row comes back into view.
    """
    def __init__(self):
        self.rows: List[Row] = [Row() for _ in range(ROWS)]

    @staticmethod
    def slot(row: int) -> int:
        return wrap(row, ROWS)

    def __getitem__(self, row: int) -> Row:
        return self.rows[self.slot(row)]

    def __len__(self):
        return ROWS

    def fill_row(self, row: int, bag):
        target = self[row]
        for c in range(COLS):
            target[c] = bag.grab()

    def fill(self, bag):
        for r in range(ROWS):
            self.fill_row(r, bag)
