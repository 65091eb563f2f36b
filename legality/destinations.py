"""Destination enumeration on top of the legality predicate."""

from __future__ import annotations

from .board import Board
from .constants import SQUARE_COUNT
from .coordinate import Coordinate
from .move import Move


def destination_moves(board: Board, origin: Coordinate) -> list[Move]:
    if board.is_empty(origin):
        return []

    moves: list[Move] = []
    for index in range(SQUARE_COUNT):
        move = Move(origin, Coordinate.from_index(index))
        if board.is_move_possible(move):
            moves.append(move)
    return moves


def destinations(board: Board, origin: Coordinate) -> list[Coordinate]:
    return [move.destination for move in destination_moves(board, origin)]
