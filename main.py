"""Command-line utilities for the move legality core."""

from __future__ import annotations

import argparse
import logging
import sys

from legality.board import Board
from legality.constants import START_PLACEMENT
from legality.coordinate import Coordinate
from legality.destinations import destinations
from legality.move import Move

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Chess move legality utilities")
    parser.add_argument("--placement", default=START_PLACEMENT, help="FEN piece placement")
    parser.add_argument(
        "--moved",
        action="append",
        default=[],
        metavar="SQUARE",
        help="Square whose piece has already moved (repeatable)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    check_parser = subparsers.add_parser("check", help="Check whether a move is possible")
    check_parser.add_argument("move", help="Move in coordinate notation, e.g. e2e4")

    dest_parser = subparsers.add_parser("destinations", help="List reachable squares")
    dest_parser.add_argument("square", help="Origin square, e.g. g1")

    return parser


def run(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        moved = [Coordinate.from_algebraic(square) for square in args.moved]
        board = Board.from_placement(args.placement, moved=moved)

        if args.command == "check":
            move = Move.from_algebraic(args.move)
            legal = board.is_move_possible(move)
            logger.info("checked %s -> %s", move, legal)
            print(f"{move} {'legal' if legal else 'illegal'}")
            return 0 if legal else 1

        if args.command == "destinations":
            origin = Coordinate.from_algebraic(args.square)
            print(" ".join(c.to_algebraic() for c in destinations(board, origin)))
            return 0
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    print(board)
    return 0


if __name__ == "__main__":
    sys.exit(run())
