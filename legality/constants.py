"""Board-wide constants, sides and piece kinds."""

from __future__ import annotations

from enum import Enum

BOARD_SIZE = 8
SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

FILES = "abcdefgh"
RANKS = "12345678"

START_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_PLACEMENT = "8/8/8/8/8/8/8/8"


class Side(Enum):
    WHITE = "white"
    BLACK = "black"

    def flip(self) -> Side:
        return Side.BLACK if self is Side.WHITE else Side.WHITE

    def __invert__(self) -> Side:
        return self.flip()

    @property
    def forward(self) -> int:
        """Rank step a pawn of this side advances by."""
        return 1 if self is Side.WHITE else -1

    def __str__(self) -> str:
        return self.value


class Kind(Enum):
    PAWN = "pawn"
    ROOK = "rook"
    KNIGHT = "knight"
    BISHOP = "bishop"
    QUEEN = "queen"
    KING = "king"

    @property
    def slides(self) -> bool:
        return self in (Kind.ROOK, Kind.BISHOP, Kind.QUEEN)

    def __str__(self) -> str:
        return self.value


KIND_SYMBOLS = {
    Kind.PAWN: "p",
    Kind.ROOK: "r",
    Kind.KNIGHT: "n",
    Kind.BISHOP: "b",
    Kind.QUEEN: "q",
    Kind.KING: "k",
}

SYMBOL_TO_KIND = {v: k for k, v in KIND_SYMBOLS.items()}

BACK_RANK = (
    Kind.ROOK,
    Kind.KNIGHT,
    Kind.BISHOP,
    Kind.QUEEN,
    Kind.KING,
    Kind.BISHOP,
    Kind.KNIGHT,
    Kind.ROOK,
)
