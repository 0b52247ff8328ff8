"""Title screen and tutorial level catalog"""
import random
from dataclasses import dataclass, field
from typing import Tuple

from shufflepop_board import COLS
from shufflepop_rng import Bag
from shufflepop_tile import Tile, LEFT, RIGHT


def _pad(*tiles: Tile) -> Tuple[Tile, ...]:
    return tuple(tiles) + (Tile.empty(),) * (COLS - len(tiles))


@dataclass(frozen=True)
class Level:
    title: str
    text: str
    proportions: Tuple[int, int, int, int, int]
    examples: Tuple[Tile, ...] = field(default_factory=_pad)

    def make_bag(self, rng: random.Random) -> Bag:
        return Bag(*self.proportions, rng=rng)


LEVELS: Tuple[Level, ...] = (
    Level(
        "Title",
        "S H U F F L E       P O P\n"
        "\n"
        "Tap or click to continue...",
        # Never played; one die weight keeps the bag non-degenerate
        (0, 0, 0, 0, 1),
    ),
    Level(
        "Matching",
        "Tap or click to select\n"
        "cards as they go past the\n"
        "circle at the bottom of\n"
        "the screen. Match them by\n"
        "color or suite.\n"
        "Get 150 points to continue\n"
        "to the next tutorial level.\n"
        "Tap or click to continue...",
        (1, 0, 0, 0, 0),
        _pad(Tile.suite(1, 1), Tile.suite(2, 2), Tile.suite(3, 3), Tile.suite(4, 4), Tile.suite(1, 3)),
    ),
    Level(
        "Stars",
        "Star cards can match with\n"
        "any other card.\n"
        "Tap or click to continue...",
        (6, 1, 0, 0, 0),
        _pad(Tile.empty(), Tile.empty(), Tile.star()),
    ),
    Level(
        "Movement",
        "Movement cards will allow\n"
        "you to move between rows\n"
        "and select cards in\n"
        "different rows.\n"
        "Tap or click to continue...",
        (10, 1, 3, 0, 0),
        _pad(Tile.empty(), Tile.movement(LEFT), Tile.empty(), Tile.movement(RIGHT)),
    ),
    Level(
        "Speed",
        "Speed cards increase the\n"
        "speed, and are worth 50\n"
        "points.\n"
        "Tap or click to continue...",
        (32, 3, 12, 1, 0),
        _pad(Tile.empty(), Tile.empty(), Tile.speed()),
    ),
    Level(
        "Dice",
        "Die cards will shuffle\n"
        "some number of cards above\n"
        "them.\n"
        "You completed the tutorial.\n"
        "Tap or click to continue...",
        (32, 3, 12, 1, 4),
        _pad(Tile.die(5), Tile.die(2), Tile.die(4), Tile.die(0), Tile.die(1)),
    ),
)
