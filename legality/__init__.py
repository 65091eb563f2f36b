"""Chess move legality core."""

from .board import Board
from .constants import Kind, Side
from .coordinate import Coordinate
from .destinations import destination_moves, destinations
from .move import Move
from .piece import Piece

__all__ = [
    "Board",
    "Coordinate",
    "Kind",
    "Move",
    "Piece",
    "Side",
    "destination_moves",
    "destinations",
]
