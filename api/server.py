"""FastAPI server exposing move legality queries."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from legality.board import Board
from legality.constants import START_PLACEMENT
from legality.coordinate import Coordinate
from legality.destinations import destinations
from legality.move import Move

logger = logging.getLogger(__name__)

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("LEGALITY_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]


class PlacementRequest(BaseModel):
    placement: str = Field(default=START_PLACEMENT)


class CheckRequest(BaseModel):
    placement: str = Field(default=START_PLACEMENT)
    move: str = Field(min_length=4, max_length=4)
    moved: list[str] = Field(default_factory=list, max_length=64)


class DestinationsRequest(BaseModel):
    placement: str = Field(default=START_PLACEMENT)
    square: str = Field(min_length=2, max_length=2)
    moved: list[str] = Field(default_factory=list, max_length=64)


app = FastAPI(title="Chess Move Legality API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _bad_request(exc: ValueError) -> HTTPException:
    logger.warning("Rejected request input: %s", exc)
    return HTTPException(status_code=400, detail=str(exc))


def _coordinate(square: str) -> Coordinate:
    try:
        return Coordinate.from_algebraic(square)
    except ValueError as exc:
        raise _bad_request(exc) from exc


def _board(placement: str, moved: list[str] | None = None) -> Board:
    moved_coordinates = [_coordinate(square) for square in moved or []]
    try:
        return Board.from_placement(placement, moved=moved_coordinates)
    except ValueError as exc:
        raise _bad_request(exc) from exc


def _piece_symbol(board: Board, coordinate: Coordinate) -> str | None:
    piece = board.get(coordinate)
    return None if piece is None else piece.symbol


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/check")
def check(payload: CheckRequest) -> dict:
    board = _board(payload.placement, payload.moved)
    try:
        move = Move.from_algebraic(payload.move)
    except ValueError as exc:
        raise _bad_request(exc) from exc

    legal = board.is_move_possible(move)
    logger.debug("check %s on %s -> %s", move, payload.placement, legal)
    return {
        "move": move.to_algebraic(),
        "legal": legal,
        "piece": _piece_symbol(board, move.origin),
    }


@app.post("/destinations")
def list_destinations(payload: DestinationsRequest) -> dict:
    board = _board(payload.placement, payload.moved)
    origin = _coordinate(payload.square)
    found = destinations(board, origin)
    logger.debug("destinations from %s on %s -> %d", origin, payload.placement, len(found))
    return {
        "square": origin.to_algebraic(),
        "piece": _piece_symbol(board, origin),
        "destinations": [coordinate.to_algebraic() for coordinate in found],
    }


@app.post("/board")
def board_state(payload: PlacementRequest | None = None) -> dict:
    placement = START_PLACEMENT if payload is None else payload.placement
    board = _board(placement)
    return {
        "placement": board.to_placement(),
        "pieces": {coordinate.to_algebraic(): piece.symbol for coordinate, piece in board.pieces()},
    }
