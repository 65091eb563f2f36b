from legality.board import Board
from legality.constants import Kind, Side
from legality.coordinate import Coordinate
from legality.move import Move
from legality.piece import Piece


def _possible(board: Board, start: tuple[int, int], end: tuple[int, int]) -> bool:
    return board.is_move_possible(Move(Coordinate(*start), Coordinate(*end)))


def _pawn(board: Board, square: tuple[int, int], side: Side, has_moved: bool = False) -> None:
    board.set(Coordinate(*square), Piece(Kind.PAWN, side, has_moved))


def test_basic_white_pawn_movement() -> None:
    board = Board.new_clear()
    _pawn(board, (3, 3), Side.WHITE)

    assert _possible(board, (3, 3), (3, 4))
    assert _possible(board, (3, 3), (3, 5))
    assert not _possible(board, (3, 3), (3, 2))
    assert not _possible(board, (3, 3), (3, 6))

    for target in ((4, 2), (5, 2), (4, 3), (5, 3), (4, 4), (5, 4)):
        assert not _possible(board, (3, 3), target)


def test_basic_black_pawn_movement() -> None:
    board = Board.new_clear()
    _pawn(board, (3, 3), Side.BLACK)

    assert _possible(board, (3, 3), (3, 2))
    assert _possible(board, (3, 3), (3, 1))
    assert not _possible(board, (3, 3), (3, 4))

    for target in ((4, 2), (5, 2), (4, 3), (5, 3), (4, 4), (5, 4)):
        assert not _possible(board, (3, 3), target)


def test_pawn_on_b4_scenario() -> None:
    board = Board.new_clear()
    _pawn(board, (1, 3), Side.WHITE)

    assert board.is_move_possible(Move.from_algebraic("b4b5"))
    assert board.is_move_possible(Move.from_algebraic("b4b6"))
    assert not board.is_move_possible(Move.from_algebraic("b4b3"))


def test_moved_pawn_cannot_double_step() -> None:
    board = Board.new_clear()
    _pawn(board, (3, 3), Side.WHITE, has_moved=True)
    _pawn(board, (5, 5), Side.BLACK, has_moved=True)

    assert _possible(board, (3, 3), (3, 4))
    assert not _possible(board, (3, 3), (3, 5))
    assert _possible(board, (5, 5), (5, 4))
    assert not _possible(board, (5, 5), (5, 3))


def test_blocked_white_pawn_movement() -> None:
    board = Board.new_clear()
    _pawn(board, (3, 3), Side.WHITE)
    _pawn(board, (3, 5), Side.BLACK)

    assert _possible(board, (3, 3), (3, 4))
    assert not _possible(board, (3, 3), (3, 5))

    board.set(Coordinate(3, 5), None)
    _pawn(board, (3, 4), Side.BLACK)

    assert not _possible(board, (3, 3), (3, 4))
    assert not _possible(board, (3, 3), (3, 5))


def test_blocked_black_pawn_movement() -> None:
    board = Board.new_clear()
    _pawn(board, (3, 3), Side.BLACK)
    _pawn(board, (3, 1), Side.WHITE)

    assert _possible(board, (3, 3), (3, 2))
    assert not _possible(board, (3, 3), (3, 1))

    board.set(Coordinate(3, 1), None)
    _pawn(board, (3, 2), Side.WHITE)

    assert not _possible(board, (3, 3), (3, 2))
    assert not _possible(board, (3, 3), (3, 1))


def test_white_pawn_taking_opponent_pieces() -> None:
    board = Board.new_clear()
    _pawn(board, (3, 3), Side.WHITE)
    for square in ((4, 5), (2, 5), (4, 4), (2, 4), (4, 3), (2, 3), (4, 2), (2, 2), (5, 4), (1, 4)):
        _pawn(board, square, Side.BLACK)

    assert _possible(board, (3, 3), (4, 4))
    assert _possible(board, (3, 3), (2, 4))
    for target in ((4, 5), (2, 5), (4, 3), (2, 3), (4, 2), (2, 2), (5, 4), (1, 4)):
        assert not _possible(board, (3, 3), target)


def test_black_pawn_taking_opponent_pieces() -> None:
    board = Board.new_clear()
    _pawn(board, (3, 3), Side.BLACK)
    for square in ((4, 1), (2, 1), (4, 2), (2, 2), (4, 3), (2, 3), (5, 2), (1, 2)):
        _pawn(board, square, Side.WHITE)

    assert _possible(board, (3, 3), (4, 2))
    assert _possible(board, (3, 3), (2, 2))
    for target in ((4, 1), (2, 1), (4, 3), (2, 3), (4, 4), (2, 4), (5, 2), (1, 2)):
        assert not _possible(board, (3, 3), target)


def test_pawn_never_captures_allied_pieces() -> None:
    board = Board.new_clear()
    _pawn(board, (3, 3), Side.WHITE)
    _pawn(board, (4, 4), Side.WHITE)
    _pawn(board, (2, 4), Side.WHITE)

    assert not _possible(board, (3, 3), (4, 4))
    assert not _possible(board, (3, 3), (2, 4))

    board = Board.new_clear()
    _pawn(board, (3, 3), Side.BLACK)
    _pawn(board, (4, 2), Side.BLACK)
    _pawn(board, (2, 2), Side.BLACK)

    assert not _possible(board, (3, 3), (4, 2))
    assert not _possible(board, (3, 3), (2, 2))


def test_pawn_does_not_capture_onto_empty_diagonal() -> None:
    board = Board.new_clear()
    _pawn(board, (4, 4), Side.WHITE)
    _pawn(board, (3, 4), Side.BLACK)

    # A pawn that just passed alongside is not capturable en passant.
    assert not _possible(board, (4, 4), (3, 5))
    assert not _possible(board, (4, 4), (5, 5))


def test_pawn_geometry_reports_no_shared_path_check() -> None:
    board = Board.new_clear()
    pawn = Piece(Kind.PAWN, Side.WHITE)
    board.set(Coordinate(3, 1), pawn)

    assert pawn.can_move_to(board, Move.from_algebraic("d2d4")) == (True, False)
    assert pawn.can_move_to(board, Move.from_algebraic("d2d1")) == (False, False)
