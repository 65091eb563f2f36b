#!/usr/bin/env python3
"""Generate reproducible legality query benchmark CSVs."""

from __future__ import annotations

import argparse
import csv
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from legality.board import Board
from legality.constants import START_PLACEMENT
from legality.coordinate import Coordinate
from legality.move import Move


MIDDLEGAME_PLACEMENT = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R"
OPEN_PLACEMENT = "4k3/8/8/3q4/8/2N2B2/8/R3K2R"


@dataclass(frozen=True)
class PositionCase:
    name: str
    placement: str


def _write_csv(path: Path, fieldnames: list[str], rows: list[dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)


def _all_moves(board: Board) -> dict[str, list[Move]]:
    by_kind: dict[str, list[Move]] = {}
    for origin, piece in board.pieces():
        moves = by_kind.setdefault(str(piece.kind), [])
        for index in range(64):
            moves.append(Move(origin, Coordinate.from_index(index)))
    return by_kind


def run_query_bench(cases: list[PositionCase], repeats: int) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for case in cases:
        board = Board.from_placement(case.placement)
        for kind, moves in sorted(_all_moves(board).items()):
            legal = 0
            start = perf_counter()
            for _ in range(repeats):
                legal = sum(1 for move in moves if board.is_move_possible(move))
            elapsed_ms = (perf_counter() - start) * 1000.0
            queries = len(moves) * repeats
            qps = int(queries / max(elapsed_ms / 1000.0, 1e-9))
            rows.append(
                {
                    "position": case.name,
                    "kind": kind,
                    "queries": queries,
                    "legal": legal,
                    "elapsed_ms": round(elapsed_ms, 3),
                    "qps": qps,
                }
            )
    return rows


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate legality benchmark CSV files")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Output directory for CSV metrics",
    )
    parser.add_argument(
        "--repeats",
        type=int,
        default=50,
        help="Passes over every candidate move per position",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    metrics_dir = Path(args.metrics_dir)

    cases = [
        PositionCase("start", START_PLACEMENT),
        PositionCase("middlegame", MIDDLEGAME_PLACEMENT),
        PositionCase("open", OPEN_PLACEMENT),
    ]
    rows = run_query_bench(cases, repeats=args.repeats)

    query_path = metrics_dir / "query_metrics.csv"
    _write_csv(
        query_path,
        fieldnames=["position", "kind", "queries", "legal", "elapsed_ms", "qps"],
        rows=rows,
    )
    print(f"wrote {query_path}")


if __name__ == "__main__":
    main()
