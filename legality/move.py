"""Move model: an ordered pair of coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from .coordinate import Coordinate


@dataclass(frozen=True, slots=True)
class Move:
    origin: Coordinate
    destination: Coordinate

    @classmethod
    def from_algebraic(cls, text: str) -> Move:
        wanted = text.strip().lower()
        if len(wanted) != 4:
            raise ValueError(f"Invalid move: {text!r}")
        return cls(Coordinate.from_algebraic(wanted[:2]), Coordinate.from_algebraic(wanted[2:]))

    @property
    def is_null(self) -> bool:
        return self.origin == self.destination

    def deltas(self) -> tuple[int, int]:
        """Unsigned file and rank distances; direction is lost."""
        df, dr = self.signed_deltas()
        return abs(df), abs(dr)

    def signed_deltas(self) -> tuple[int, int]:
        return (
            self.destination.file - self.origin.file,
            self.destination.rank - self.origin.rank,
        )

    def to_algebraic(self) -> str:
        return f"{self.origin.to_algebraic()}{self.destination.to_algebraic()}"

    def __str__(self) -> str:
        return self.to_algebraic()
