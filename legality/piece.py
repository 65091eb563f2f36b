"""Piece value and per-kind movement geometry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .constants import KIND_SYMBOLS, SYMBOL_TO_KIND, Kind, Side
from .coordinate import Coordinate
from .move import Move

if TYPE_CHECKING:
    from .board import Board


@dataclass(slots=True)
class Piece:
    kind: Kind
    side: Side
    has_moved: bool = False

    @classmethod
    def from_symbol(cls, symbol: str) -> Piece:
        kind = SYMBOL_TO_KIND.get(symbol.lower()) if len(symbol) == 1 else None
        if kind is None:
            raise ValueError(f"Invalid piece symbol: {symbol!r}")
        side = Side.WHITE if symbol.isupper() else Side.BLACK
        return cls(kind, side)

    @property
    def symbol(self) -> str:
        """Uppercase for white, lowercase for black."""
        char = KIND_SYMBOLS[self.kind]
        return char.upper() if self.side is Side.WHITE else char

    def can_move_to(self, board: Board, move: Move) -> tuple[bool, bool]:
        """Shape check for a move starting on this piece's square.

        Returns ``(geometrically_possible, requires_clear_path)``. Ownership of
        the destination and obstruction along the path are left to the board.
        """
        dx, dy = move.deltas()

        if self.kind is Kind.KNIGHT:
            return (dx == 2 and dy == 1) or (dx == 1 and dy == 2), False
        if self.kind is Kind.KING:
            return dx <= 1 and dy <= 1, False
        if self.kind is Kind.ROOK:
            return dx == 0 or dy == 0, self.kind.slides
        if self.kind is Kind.BISHOP:
            return dx == dy, self.kind.slides
        if self.kind is Kind.QUEEN:
            return dx == 0 or dy == 0 or dx == dy, self.kind.slides
        if self.kind is Kind.PAWN:
            return self._pawn_can_move_to(board, move), False
        raise ValueError(f"Unknown piece kind: {self.kind}")

    def _pawn_can_move_to(self, board: Board, move: Move) -> bool:
        df, dr = move.signed_deltas()
        forward = self.side.forward
        distance = dr * forward
        if distance <= 0:
            return False

        dest_occupied = not board.is_empty(move.destination)

        if df == 0 and not dest_occupied:
            if distance == 1:
                return True
            if distance == 2:
                skipped = Coordinate(move.origin.file, move.origin.rank + forward)
                return not self.has_moved and board.is_empty(skipped)
            return False

        if abs(df) == 1 and dest_occupied and distance == 1:
            return True

        # En passant is never recognised here.
        return False

    def __str__(self) -> str:
        return self.symbol
