"""Scrolling board simulation and scoring state machine"""
from __future__ import annotations
import logging
import math
import random
from typing import Optional, Sequence

from shufflepop_board import Board, COLS, ROWS, wrap
from shufflepop_config import (
    BASE_SCORE, POWER_SCORE, ACCELERATION, SPEED_BOOST, SPEED_SCORE,
    START_SPEED, START_POWER, MISMATCH_PENALTY, POWER_DECAY,
    LEVEL_UP_SCORE, MAX_LEVEL, LOW_POWER, FLASH_TICKS,
)
from shufflepop_frame import CellView, Frame
from shufflepop_levels import LEVELS, Level
from shufflepop_rng import make_rng
from shufflepop_tile import Tile

logger = logging.getLogger(__name__)

SELECT_ROW = ROWS - 2  # visible row the cursor sits on


class GameState:
    """Single game instance, advanced once per frame by the driver.

    While ``play`` is False a scripted message (title or tutorial) is shown
    and a tap moves on; while True the board scrolls and taps pop tiles.
    """

    def __init__(self, rng: Optional[random.Random] = None, levels: Sequence[Level] = LEVELS):
        self.rng = rng if rng is not None else make_rng()
        self.levels = levels
        self.board = Board()
        self.current_level = 1
        self.score = 0.0
        self.reset()

    # ---------- Level setup ----------
    def reset(self):
        """Start the current level over: fresh board, speed, power and cursor."""
        self.bag = self.levels[self.current_level].make_bag(self.rng)
        self.board.fill(self.bag)
        self.x = COLS // 2
        self.y = 0.0
        self.speed = START_SPEED
        self.power = START_POWER
        self.screen = 0
        self.tick_counter = 0
        self.last = Tile.star()
        self.play = False
        logger.debug("reset level %d with %r", self.current_level, self.bag)

    def init_level(self, level_index: int):
        # Entry 0 is the title screen, never a playable level
        if not 1 <= level_index <= min(MAX_LEVEL, len(self.levels) - 1):
            raise IndexError(f"no playable level {level_index}")
        self.current_level = level_index
        self.score = 0.0
        self.reset()

    @property
    def select_row(self) -> int:
        """Logical board row currently under the selection point."""
        return math.floor(self.y) + SELECT_ROW

    # ---------- Tick ----------
    def advance(self, tapped: bool) -> Frame:
        self.tick_counter += 1
        if not self.play:
            return self._advance_message(tapped)
        return self._advance_play(tapped)

    def _advance_message(self, tapped: bool) -> Frame:
        level = self.levels[self.screen]
        frame = Frame(
            playing=False, tick=self.tick_counter, score=int(self.score),
            message=level.text, examples=level.examples,
            previous_score=int(self.score) if self.screen == 0 and self.score != 0 else None,
        )
        if tapped:
            self.score = 0.0
            if self.screen == 0 and self.current_level < MAX_LEVEL:
                self.screen = self.current_level
            else:
                self.reset()
                self.play = True
                logger.info("level %d (%s) started", self.current_level, self.levels[self.current_level].title)
        return frame

    def _advance_play(self, tapped: bool) -> Frame:
        if math.floor(self.y - self.speed) != math.floor(self.y):
            # int() truncates toward zero, picking the row about to enter at the top
            self.board.fill_row(int(self.y - 2), self.bag)
        self.y -= self.speed
        cells = self.visible_cells()
        if tapped:
            self.pop()
        self.power -= self.speed / POWER_DECAY
        self._check_transitions()
        flash = self.power <= LOW_POWER and (self.tick_counter // FLASH_TICKS) % 2 == 1
        return Frame(
            playing=True, tick=self.tick_counter, score=int(self.score),
            cells=cells, last=self.last, cursor=self.x, power=self.power, power_flash=flash,
        )

    def visible_cells(self):
        top = math.floor(self.y)
        cells = []
        for i in range(ROWS):
            row = self.board[top + i]
            for j in range(COLS):
                cells.append(CellView(j, i, i + top - self.y, row[j], j == self.x and i == SELECT_ROW))
        return tuple(cells)

    # ---------- Rules ----------
    def pop(self) -> Tile:
        """Remove the tile under the cursor and apply its effect."""
        row = self.select_row
        popped = self.board[row][self.x]
        self.board[row][self.x] = Tile.empty()
        if popped.is_suite():
            if popped.match(self.last):
                self.score += BASE_SCORE + POWER_SCORE * self.power
                self.speed += ACCELERATION * self.power
                self.power += (1 - self.power) / 10
            else:
                self.power -= MISMATCH_PENALTY
            self.last = popped
        elif popped.is_movement():
            self.x = wrap(self.x + popped.step, COLS)
        elif popped.is_speed():
            self.speed += SPEED_BOOST
            self.score += SPEED_SCORE
        elif popped.is_die():
            # Reshuffle the popped cell and the pips+1 cells above it
            for i in range(popped.pips + 2):
                self.board[row - i][self.x] = self.bag.grab()
            logger.debug("die %d reshuffled column %d from row %d", popped.pips, self.x, row)
        return popped

    def _check_transitions(self):
        if self.score > LEVEL_UP_SCORE and self.current_level < MAX_LEVEL:
            self.current_level += 1
            self.screen = self.current_level
            self.play = False
            self.score = 0.0
            logger.info("level cleared, advancing to level %d", self.current_level)
        if self.power < 0:
            self.screen = 0
            self.play = False
            logger.info("game over on level %d with score %d", self.current_level, int(self.score))
