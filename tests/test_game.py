"""
Tests for the game state machine: scrolling, pop rules and level flow.
"""

import logging
import random

import pytest

from shufflepop_board import COLS, ROWS
from shufflepop_config import (
    ACCELERATION, BASE_SCORE, POWER_SCORE, SPEED_BOOST, SPEED_SCORE, START_SPEED,
)
from shufflepop_game import GameState, SELECT_ROW
from shufflepop_levels import LEVELS
from shufflepop_rng import Bag
from shufflepop_tile import Tile, TileKind, LEFT, RIGHT


def clear_board(state):
    for r in range(ROWS):
        for c in range(COLS):
            state.board[r][c] = Tile.empty()


class TestMessageFlow:

    def test_fresh_state(self, state):
        assert not state.play
        assert state.screen == 0
        assert state.current_level == 1
        assert state.x == COLS // 2
        assert state.y == 0
        assert state.power == 1
        assert state.last == Tile.star()

    def test_title_then_tutorial_then_play(self, state):
        frame = state.advance(True)
        assert not frame.playing
        assert frame.message == LEVELS[0].text
        assert state.screen == 1 and not state.play
        frame = state.advance(True)
        assert frame.message == LEVELS[1].text
        assert frame.examples == LEVELS[1].examples
        assert state.play
        assert state.bag.weights == LEVELS[1].proportions

    def test_no_tap_stays_on_message(self, state):
        for _ in range(10):
            state.advance(False)
        assert state.screen == 0 and not state.play

    def test_title_goes_straight_to_play_at_last_level(self, state):
        state.init_level(5)
        state.advance(True)
        assert state.play
        assert state.bag.weights == LEVELS[5].proportions

    def test_init_level_out_of_range(self, state):
        with pytest.raises(IndexError):
            state.init_level(len(LEVELS))

    def test_init_level_rejects_title(self, state):
        with pytest.raises(IndexError):
            state.init_level(0)
        assert state.current_level == 1
        state.advance(True)
        state.advance(True)
        assert state.play

    def test_start_logs_level_title(self, state, caplog):
        caplog.set_level(logging.INFO, logger="shufflepop_game")
        state.advance(True)
        state.advance(True)
        assert LEVELS[1].title in caplog.text


class TestScrolling:

    def test_advance_scrolls_up(self, playing):
        playing.advance(False)
        assert playing.y == pytest.approx(-START_SPEED)

    def test_frame_has_one_selected_cell(self, playing):
        frame = playing.advance(False)
        assert frame.playing
        assert len(frame.cells) == ROWS * COLS
        selected = [c for c in frame.cells if c.selected]
        assert len(selected) == 1
        assert selected[0].row == SELECT_ROW
        assert selected[0].col == playing.x
        for cell in frame.cells:
            assert -1 < cell.offset < ROWS

    def test_refills_row_entering_at_top(self, playing):
        playing.bag = Bag(1, 0, 0, 0, 0, rng=random.Random(2))
        clear_board(playing)
        playing.y = 0.01
        playing.advance(False)
        filled = [slot for slot, row in enumerate(playing.board.rows)
                  if all(t.kind is TileKind.SUITE for t in row)]
        assert filled == [playing.board.slot(-1)]

    def test_no_refill_within_a_row(self, playing):
        clear_board(playing)
        playing.y = -0.5
        playing.advance(False)
        assert all(t.is_gone() for row in playing.board.rows for t in row)


class TestPop:

    def test_match_scores_and_restores_power(self, playing):
        playing.power = 0.5
        playing.score = 0
        playing.last = Tile.star()
        row = playing.select_row
        playing.board[row][playing.x] = Tile.suite(1, 1)
        popped = playing.pop()
        assert popped == Tile.suite(1, 1)
        assert playing.board[row][playing.x].is_gone()
        assert playing.score == pytest.approx(BASE_SCORE + POWER_SCORE * 0.5)
        assert playing.speed == pytest.approx(START_SPEED + ACCELERATION * 0.5)
        assert playing.power == pytest.approx(0.55)
        assert playing.last == Tile.suite(1, 1)

    def test_mismatch_costs_power_and_updates_reference(self, playing):
        playing.last = Tile.suite(1, 1)
        playing.board[playing.select_row][playing.x] = Tile.suite(2, 2)
        playing.pop()
        assert playing.power == pytest.approx(0.9)
        assert playing.score == 0
        assert playing.last == Tile.suite(2, 2)

    def test_power_eases_toward_one(self, playing):
        playing.power = 0.2
        for _ in range(50):
            before = playing.power
            playing.last = Tile.star()
            playing.board[playing.select_row][playing.x] = Tile.suite(3, 3)
            playing.pop()
            assert before < playing.power <= 1

    @pytest.mark.parametrize("start,step,end", [
        (COLS - 1, RIGHT, 0),
        (0, LEFT, COLS - 1),
        (2, RIGHT, 3),
    ])
    def test_movement_wraps(self, playing, start, step, end):
        playing.x = start
        playing.board[playing.select_row][start] = Tile.movement(step)
        playing.pop()
        assert playing.x == end

    def test_speed_tile(self, playing):
        playing.board[playing.select_row][playing.x] = Tile.speed()
        playing.pop()
        assert playing.speed == pytest.approx(START_SPEED + SPEED_BOOST)
        assert playing.score == SPEED_SCORE

    def test_die_reshuffles_cells_above(self, playing):
        playing.bag = Bag(0, 0, 0, 1, 0, rng=random.Random(4))
        clear_board(playing)
        row, col = playing.select_row, playing.x
        playing.board[row][col] = Tile.die(3)
        playing.pop()
        column = [playing.board[r][col] for r in range(row - ROWS + 1, row + 1)]
        assert sum(t.is_speed() for t in column) == 5
        for i in range(5):
            assert playing.board[row - i][col].is_speed()
        assert playing.board[row - 5][col].is_gone()
        assert playing.board[row + 1][col].is_gone()
        for c in range(COLS):
            if c != col:
                assert all(playing.board[r][c].is_gone() for r in range(ROWS))

    def test_die_at_level_start_reaches_negative_rows(self, playing):
        playing.bag = Bag(0, 0, 0, 1, 0, rng=random.Random(4))
        clear_board(playing)
        playing.y = -3.5
        row = playing.select_row
        playing.board[row][playing.x] = Tile.die(5)
        playing.pop()
        assert row - 6 < 0
        assert playing.board[row - 6][playing.x].is_speed()

    @pytest.mark.parametrize("tile", [Tile.empty(), Tile.invalid()])
    def test_inert_tiles(self, playing, tile):
        playing.board[playing.select_row][playing.x] = tile
        before = (playing.x, playing.speed, playing.power, playing.score, playing.last)
        playing.pop()
        assert (playing.x, playing.speed, playing.power, playing.score, playing.last) == before

    def test_tap_pops_after_snapshot(self, playing):
        playing.y = -0.5
        playing.board[playing.select_row][playing.x] = Tile.speed()
        frame = playing.advance(True)
        selected = next(c for c in frame.cells if c.selected)
        assert selected.tile == Tile.speed()
        assert frame.score == SPEED_SCORE


class TestPower:

    def test_decays_every_tick(self, playing):
        previous = playing.power
        for _ in range(30):
            playing.advance(False)
            assert playing.power < previous
            previous = playing.power

    def test_flashes_when_low(self, playing):
        playing.power = 0.2
        playing.tick_counter = 14
        assert playing.advance(False).power_flash
        playing.tick_counter = 29
        assert not playing.advance(False).power_flash

    def test_no_flash_when_healthy(self, playing):
        playing.tick_counter = 14
        assert not playing.advance(False).power_flash


class TestTransitions:

    def test_level_advance(self, playing):
        playing.score = 151
        playing.advance(False)
        assert playing.current_level == 2
        assert playing.screen == 2
        assert playing.score == 0
        assert not playing.play
        playing.advance(True)
        assert playing.play
        assert playing.bag.weights == LEVELS[2].proportions

    def test_score_at_threshold_does_not_advance(self, playing):
        playing.score = 150
        playing.advance(False)
        assert playing.current_level == 1 and playing.play

    def test_last_level_keeps_playing(self, state):
        state.init_level(5)
        state.advance(True)
        state.score = 500
        state.advance(False)
        assert state.current_level == 5
        assert state.play

    def test_game_over_keeps_score_for_title(self, playing):
        playing.power = 0.0001
        playing.score = 42
        playing.advance(False)
        assert playing.screen == 0
        assert not playing.play
        assert playing.score == 42
        frame = playing.advance(False)
        assert frame.previous_score == 42
        frame = playing.advance(True)
        assert frame.previous_score == 42
        assert playing.score == 0
        assert playing.screen == playing.current_level

    def test_level_advance_and_game_over_same_tick(self, playing):
        playing.score = 151
        playing.power = 0.0001
        playing.advance(False)
        assert playing.current_level == 2
        assert playing.score == 0
        assert playing.screen == 0
        assert not playing.play
        frame = playing.advance(False)
        assert frame.message == LEVELS[0].text
        playing.advance(True)
        assert playing.screen == 2

    def test_title_has_no_previous_score_initially(self, state):
        assert state.advance(False).previous_score is None
