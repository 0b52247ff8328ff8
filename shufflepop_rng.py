"""Seeded randomness and the weighted tile bag"""
import logging
import random
import time
from typing import Optional

from shufflepop_tile import Tile, NUM_SUITS, NUM_COLORS, NUM_PIPS, LEFT, RIGHT

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> random.Random:
    if seed is None:
        seed = time.time_ns() & 0xFFFFFFFF
    logger.debug("rng seed %d", seed)
    return random.Random(seed)


class Bag:
    """Inexhaustible weighted tile generator.

    The five proportions are kept as cumulative thresholds; a draw picks an
    index in [1, total] and takes the first threshold it does not exceed.
    """
    KINDS = ("suites", "stars", "movements", "speeds", "dice")

    def __init__(self, suites: int, stars: int, movements: int, speeds: int, dice: int,
                 rng: Optional[random.Random] = None):
        weights = (suites, stars, movements, speeds, dice)
        if any(w < 0 for w in weights):
            raise ValueError(f"bag proportions must be non-negative, got {weights}")
        if sum(weights) == 0:
            raise ValueError("bag needs at least one non-zero proportion")
        self.weights = weights
        self.suites = suites
        self.stars = self.suites + stars
        self.movements = self.stars + movements
        self.speeds = self.movements + speeds
        self.dice = self.speeds + dice
        self.total = self.dice
        self.rng = rng if rng is not None else random.Random()

    def tile_for(self, choice: int) -> Tile:
        """Map a threshold index to a tile, drawing the tile's own payload."""
        r = self.rng
        if choice < 1:
            return Tile.invalid()
        if choice <= self.suites:
            return Tile.suite(r.randrange(NUM_SUITS) + 1, r.randrange(NUM_COLORS) + 1)
        if choice <= self.stars:
            return Tile.star()
        if choice <= self.movements:
            return Tile.movement(r.choice((LEFT, RIGHT)))
        if choice <= self.speeds:
            return Tile.speed()
        if choice <= self.dice:
            return Tile.die(r.randrange(NUM_PIPS))
        return Tile.invalid()

    def grab(self) -> Tile:
        return self.tile_for(self.rng.randint(1, self.total))

    def __repr__(self):
        pairs = ", ".join(f"{k}={w}" for k, w in zip(self.KINDS, self.weights))
        return f"Bag({pairs})"
