"""Board storage and the move legality decision."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from .constants import BACK_RANK, BOARD_SIZE, RANKS, SQUARE_COUNT, Kind, Side
from .coordinate import Coordinate
from .move import Move
from .piece import Piece


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Board:
    __slots__ = ("squares",)

    def __init__(self) -> None:
        self.squares: list[Piece | None] = [None] * SQUARE_COUNT

    @classmethod
    def new_clear(cls) -> Board:
        return cls()

    @classmethod
    def new_standard(cls) -> Board:
        board = cls()
        for file_idx, kind in enumerate(BACK_RANK):
            board.set(Coordinate(file_idx, 0), Piece(kind, Side.WHITE))
            board.set(Coordinate(file_idx, 1), Piece(Kind.PAWN, Side.WHITE))
            board.set(Coordinate(file_idx, 6), Piece(Kind.PAWN, Side.BLACK))
            board.set(Coordinate(file_idx, 7), Piece(kind, Side.BLACK))
        return board

    @classmethod
    def from_placement(cls, placement: str, moved: Iterable[Coordinate] = ()) -> Board:
        """Load the piece-placement field of a FEN string.

        Pieces on the ``moved`` coordinates are flagged as having moved.
        """
        board = cls()
        ranks = placement.strip().split("/")
        if len(ranks) != BOARD_SIZE:
            raise ValueError(f"Invalid board placement: {placement}")

        for rank_idx, rank in enumerate(reversed(ranks)):
            file_idx = 0
            for ch in rank:
                if ch in RANKS:
                    file_idx += int(ch)
                    continue
                if file_idx >= BOARD_SIZE:
                    raise ValueError(f"Invalid rank in placement: {rank}")
                board.set(Coordinate(file_idx, rank_idx), Piece.from_symbol(ch))
                file_idx += 1
            if file_idx != BOARD_SIZE:
                raise ValueError(f"Invalid rank in placement: {rank}")

        for coordinate in moved:
            piece = board.get(coordinate)
            if piece is None:
                raise ValueError(f"No piece to mark as moved on {coordinate}")
            piece.has_moved = True
        return board

    def to_placement(self) -> str:
        rows = []
        for rank_idx in range(BOARD_SIZE - 1, -1, -1):
            row = ""
            empty = 0
            for file_idx in range(BOARD_SIZE):
                piece = self.get(Coordinate(file_idx, rank_idx))
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    row += str(empty)
                    empty = 0
                row += piece.symbol
            if empty:
                row += str(empty)
            rows.append(row)
        return "/".join(rows)

    def clear(self) -> None:
        self.squares = [None] * SQUARE_COUNT

    def copy(self) -> Board:
        board = Board()
        board.squares = [None if p is None else replace(p) for p in self.squares]
        return board

    def get(self, coordinate: Coordinate) -> Piece | None:
        return self.squares[coordinate.to_index()]

    def set(self, coordinate: Coordinate, piece: Piece | None) -> None:
        self.squares[coordinate.to_index()] = piece

    def is_empty(self, coordinate: Coordinate) -> bool:
        return self.squares[coordinate.to_index()] is None

    def pieces(self) -> Iterator[tuple[Coordinate, Piece]]:
        for index, piece in enumerate(self.squares):
            if piece is not None:
                yield Coordinate.from_index(index), piece

    def is_move_possible(self, move: Move) -> bool:
        piece = self.get(move.origin)
        if piece is None:
            return False
        # No kind may stay on its own square.
        if move.is_null:
            return False

        possible, requires_clear_path = piece.can_move_to(self, move)
        if not possible:
            return False
        if requires_clear_path and not self._path_is_clear(move):
            return False

        target = self.get(move.destination)
        if target is None:
            return True
        return target.side is not piece.side

    def _path_is_clear(self, move: Move) -> bool:
        """Whether every square strictly between the endpoints is empty.

        Only called for straight or diagonal shapes.
        """
        df, dr = move.signed_deltas()
        step_file, step_rank = _sign(df), _sign(dr)
        file_idx = move.origin.file + step_file
        rank_idx = move.origin.rank + step_rank
        while (file_idx, rank_idx) != (move.destination.file, move.destination.rank):
            if not self.is_empty(Coordinate(file_idx, rank_idx)):
                return False
            file_idx += step_file
            rank_idx += step_rank
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.squares == other.squares

    def __str__(self) -> str:
        rows = []
        for r in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for f in range(BOARD_SIZE):
                piece = self.get(Coordinate(f, r))
                row.append("." if piece is None else piece.symbol)
            rows.append(" ".join(row))
        return "\n".join(rows)
