"""Tile model: kinds, payload checks and suit/color matching"""
from dataclasses import dataclass
from enum import Enum

NUM_SUITS = 4
NUM_COLORS = 4
NUM_PIPS = 6
LEFT, RIGHT = -1, 1


class ContractViolation(AssertionError):
    """Programmer error inside the simulation; never caught by the game."""


class InvalidComparison(ContractViolation):
    pass


class InvalidTile(ContractViolation):
    pass


class TileKind(Enum):
    SUITE = "suite"
    STAR = "star"
    MOVEMENT = "movement"
    SPEED = "speed"
    DIE = "die"
    EMPTY = "empty"
    INVALID = "invalid"


@dataclass(frozen=True)
class Tile:
    kind: TileKind
    suit: int = 0
    color: int = 0
    step: int = 0
    pips: int = 0

    def __post_init__(self):
        if not isinstance(self.kind, TileKind):
            raise InvalidTile(f"unrecognized tile kind {self.kind!r}")
        if self.kind is TileKind.SUITE:
            if not (1 <= self.suit <= NUM_SUITS and 1 <= self.color <= NUM_COLORS):
                raise InvalidTile(f"suite tile out of range: suit={self.suit} color={self.color}")
        elif self.kind is TileKind.MOVEMENT:
            if self.step not in (LEFT, RIGHT):
                raise InvalidTile(f"movement step must be {LEFT} or {RIGHT}, got {self.step}")
        elif self.kind is TileKind.DIE:
            if not 0 <= self.pips < NUM_PIPS:
                raise InvalidTile(f"die pips out of range: {self.pips}")

    # constructors
    @staticmethod
    def suite(suit: int, color: int) -> "Tile":
        return Tile(TileKind.SUITE, suit=suit, color=color)

    @staticmethod
    def star() -> "Tile":
        return Tile(TileKind.STAR)

    @staticmethod
    def movement(step: int) -> "Tile":
        return Tile(TileKind.MOVEMENT, step=step)

    @staticmethod
    def speed() -> "Tile":
        return Tile(TileKind.SPEED)

    @staticmethod
    def die(pips: int) -> "Tile":
        return Tile(TileKind.DIE, pips=pips)

    @staticmethod
    def empty() -> "Tile":
        return Tile(TileKind.EMPTY)

    @staticmethod
    def invalid() -> "Tile":
        return Tile(TileKind.INVALID)

    # predicates
    def is_star(self) -> bool: return self.kind is TileKind.STAR
    def is_gone(self) -> bool: return self.kind is TileKind.EMPTY
    def is_suite(self) -> bool: return self.kind is TileKind.SUITE or self.is_star()
    def is_movement(self) -> bool: return self.kind is TileKind.MOVEMENT
    def is_speed(self) -> bool: return self.kind is TileKind.SPEED
    def is_die(self) -> bool: return self.kind is TileKind.DIE
    def is_invalid(self) -> bool: return self.kind is TileKind.INVALID

    def match(self, other: "Tile") -> bool:
        """True if the tiles share a suit or a color, or either is a star.

        Only suite and star tiles can be compared.
        """
        if not (self.is_suite() and other.is_suite()):
            raise InvalidComparison(f"cannot match {self.kind.value} with {other.kind.value}")
        if self.is_star() or other.is_star():
            return True
        return self.suit == other.suit or self.color == other.color
