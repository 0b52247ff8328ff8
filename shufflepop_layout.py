# shufflepop_layout.py
from dataclasses import dataclass
from shufflepop_config import CONFIG
from shufflepop_board import COLS, ROWS

@dataclass
class Dims:
    tile_w: int
    tile_h: int
    space: int
    grid_x: int
    grid_y: int
    font_size: int
    bar_w: int
    bar_x: int
    total_w: int
    total_h: int
    strip_y: int

def compute_dims() -> Dims:
    tile_w = int(CONFIG["TILE_W"])
    tile_h = int(CONFIG["TILE_H"])
    space = int(CONFIG["SPACE"])
    bar_w = int(CONFIG["HEALTH_BAR_W"])

    grid_x = tile_w + space
    grid_y = tile_h + space

    total_w = COLS * grid_x + space + bar_w
    total_h = ROWS * grid_y + space

    bar_x = COLS * grid_x + space
    strip_y = (ROWS - 1) * grid_y + space

    return Dims(
        tile_w=tile_w, tile_h=tile_h, space=space,
        grid_x=grid_x, grid_y=grid_y,
        font_size=int(CONFIG["FONT_SIZE"]),
        bar_w=bar_w, bar_x=bar_x,
        total_w=total_w, total_h=total_h,
        strip_y=strip_y,
    )
