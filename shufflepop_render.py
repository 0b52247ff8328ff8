"""
Rendering helpers for ShufflePop.

- Map tile kinds to glyphs and colors (the simulation never sees either).
- Cache rendered glyph Surfaces per (glyph, color).
- Cache the score and previous-score text; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from shufflepop_config import CONFIG
from shufflepop_frame import Frame
from shufflepop_layout import Dims
from shufflepop_board import COLS, ROWS
from shufflepop_tile import Tile, TileKind, RIGHT

Color = Tuple[int, int, int]

GREEN: Color = (0x28, 0x96, 0x5A)
RED: Color = (0xDA, 0x3E, 0x52)
WHITE: Color = (0xEE, 0xEB, 0xD3)
YELLOW: Color = (0xEE, 0xC3, 0x3F)
BLUE: Color = (0x2E, 0x29, 0x6C)
BLACK: Color = (0x19, 0x15, 0x16)
PURPLE: Color = (200, 122, 255)

# Suit colors 1..4
SUIT_COLORS: Tuple[Color, ...] = (RED, YELLOW, BLACK, BLUE)
SUIT_GLYPHS = ("♠", "♣", "♥", "♦")
STAR_GLYPH = "∗"
DIE_GLYPH = 0x2680
SYMBOL_FONTS = "dejavusans,segoeuisymbol,symbola,notosanssymbols2,arialunicodems"


def glyph(tile: Tile) -> Tuple[str, Color]:
    k = tile.kind
    if k is TileKind.SUITE: return SUIT_GLYPHS[tile.suit - 1], SUIT_COLORS[tile.color - 1]
    if k is TileKind.STAR: return STAR_GLYPH, BLACK
    if k is TileKind.MOVEMENT: return (">" if tile.step == RIGHT else "<"), WHITE
    if k is TileKind.SPEED: return "+", WHITE
    if k is TileKind.DIE: return chr(DIE_GLYPH + tile.pips), WHITE
    if k is TileKind.EMPTY: return " ", WHITE
    return "E", PURPLE


@dataclass
class Fonts:
    tiles: pygame.font.Font
    text: pygame.font.Font
    score_note: pygame.font.Font

def load_fonts(dims: Dims) -> Fonts:
    """Load the tile/text fonts, preferring CONFIG["FONT_PATH"] when set."""
    pygame.font.init()
    path = CONFIG["FONT_PATH"]
    def make(size):
        size = int(size)
        if path: return pygame.font.Font(path, size)
        return pygame.font.SysFont(SYMBOL_FONTS, size)
    return Fonts(make(dims.font_size), make(dims.font_size / 3.2), make(dims.font_size / 3))


@dataclass
class HudCache:
    score: int = -1
    previous: Optional[int] = None
    score_s: Optional[pygame.Surface] = None
    previous_s: Optional[pygame.Surface] = None


class RenderAssets:
    """Draws Frame snapshots; holds cached glyph and HUD surfaces."""
    def __init__(self, dims: Dims, fonts: Fonts):
        self.dims = dims
        self.fonts = fonts
        self.glyphs: Dict[Tuple[str, Color], pygame.Surface] = {}
        self.text_lines: Dict[str, list] = {}
        self.hud = HudCache()

    def glyph_surface(self, tile: Tile) -> pygame.Surface:
        key = glyph(tile)
        s = self.glyphs.get(key)
        if s is None:
            s = self.fonts.tiles.render(key[0], True, key[1])
            self.glyphs[key] = s
        return s

    # ---------- Tiles ----------
    def draw_tile(self, screen: pygame.Surface, tile: Tile, x: float, y: float,
                  selected: bool = False, last: bool = False):
        """Draw a tile at grid position (x, y); y may be fractional while scrolling."""
        if tile.is_gone():
            return
        d = self.dims
        rect = pygame.Rect(round(d.grid_x * x + d.space), round(d.grid_y * y + d.space), d.tile_w, d.tile_h)
        radius = int(min(d.tile_w, d.tile_h) * 0.2)
        if last:
            pygame.draw.circle(screen, BLACK, rect.center, d.tile_w // 2 + 3)
            pygame.draw.circle(screen, WHITE, rect.center, d.tile_w // 2)
        elif tile.is_suite():
            pygame.draw.rect(screen, WHITE, rect, border_radius=radius)
            if selected: pygame.draw.rect(screen, BLACK, rect, 3, border_radius=radius)
        else:
            pygame.draw.rect(screen, BLACK, rect, border_radius=radius)
            if selected: pygame.draw.rect(screen, WHITE, rect, 3, border_radius=radius)
        screen.blit(self.glyph_surface(tile), (round(d.grid_x * x + 7 + d.space), round(d.grid_y * y + 6)))

    # ---------- Screens ----------
    def draw_frame(self, screen: pygame.Surface, frame: Frame):
        screen.fill(GREEN)
        if frame.playing:
            self.draw_play(screen, frame)
        else:
            self.draw_message(screen, frame)

    def draw_message(self, screen: pygame.Surface, frame: Frame):
        d = self.dims
        window = pygame.Rect(d.space, d.grid_y + d.space, d.total_w - 2 * d.space, d.total_h - d.grid_y - 2 * d.space)
        pygame.draw.rect(screen, WHITE, window, border_radius=int(window.w * 0.04))
        for i, tile in enumerate(frame.examples):
            self.draw_tile(screen, tile, i, 0)
        lines = self.text_lines.get(frame.message)
        if lines is None:
            lines = [self.fonts.text.render(line, True, BLACK) for line in frame.message.split("\n")]
            self.text_lines[frame.message] = lines
        x, y = 2 * d.space, d.grid_y + 2 * d.space
        step = self.fonts.text.get_linesize()
        for i, surf in enumerate(lines):
            screen.blit(surf, (x, y + i * step))
        if frame.previous_score is not None:
            if frame.previous_score != self.hud.previous:
                self.hud.previous = frame.previous_score
                self.hud.previous_s = self.fonts.score_note.render(f"Previous Score: {frame.previous_score}", True, BLACK)
            screen.blit(self.hud.previous_s, (x, y + 3 * self.fonts.score_note.get_linesize()))

    def draw_play(self, screen: pygame.Surface, frame: Frame):
        d = self.dims
        for cell in frame.cells:
            self.draw_tile(screen, cell.tile, cell.col, cell.offset, selected=cell.selected)
        if frame.last is not None:
            self.draw_tile(screen, frame.last, frame.cursor, ROWS - 2.5, last=True)
        # Health bar
        top = int((1 - frame.power) * (ROWS - 1) * d.grid_y)
        bar = pygame.Rect(d.bar_x, top, d.bar_w, max(0, d.total_h - top))
        pygame.draw.rect(screen, RED if frame.power_flash else BLACK, bar)
        # Score strip
        pygame.draw.rect(screen, WHITE, (0, d.strip_y, COLS * d.grid_x + d.bar_w + d.space, d.font_size + d.space))
        if frame.score != self.hud.score or self.hud.score_s is None:
            self.hud.score = frame.score
            self.hud.score_s = self.fonts.tiles.render(str(frame.score), True, BLACK)
        screen.blit(self.hud.score_s, (0, d.strip_y))
