"""Bounded board coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import BOARD_SIZE, FILES, RANKS, SQUARE_COUNT


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A (file, rank) pair on the 8x8 grid, both zero-based.

    Out-of-range components are rejected at construction; a coordinate that
    exists always maps to exactly one storage index.
    """

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not isinstance(self.file, int) or isinstance(self.file, bool):
            raise ValueError(f"File must be an integer: {self.file!r}")
        if not isinstance(self.rank, int) or isinstance(self.rank, bool):
            raise ValueError(f"Rank must be an integer: {self.rank!r}")
        if not 0 <= self.file < BOARD_SIZE:
            raise ValueError(f"File out of range: {self.file}")
        if not 0 <= self.rank < BOARD_SIZE:
            raise ValueError(f"Rank out of range: {self.rank}")

    @classmethod
    def from_algebraic(cls, square: str) -> Coordinate:
        text = square.strip().lower()
        if len(text) != 2 or text[0] not in FILES or text[1] not in RANKS:
            raise ValueError(f"Invalid square: {square!r}")
        return cls(FILES.index(text[0]), RANKS.index(text[1]))

    @classmethod
    def from_index(cls, index: int) -> Coordinate:
        if not 0 <= index < SQUARE_COUNT:
            raise ValueError(f"Square index out of range: {index}")
        return cls(index % BOARD_SIZE, index // BOARD_SIZE)

    def to_algebraic(self) -> str:
        return f"{FILES[self.file]}{RANKS[self.rank]}"

    def to_index(self) -> int:
        return self.file + BOARD_SIZE * self.rank

    def __str__(self) -> str:
        return self.to_algebraic()
