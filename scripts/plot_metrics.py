#!/usr/bin/env python3
"""Render legality benchmark charts from CSV metrics into SVG."""

from __future__ import annotations

import argparse
import csv
from collections import defaultdict
from pathlib import Path

import matplotlib.pyplot as plt

ROOT = Path(__file__).resolve().parents[1]

PALETTE = {
    "bg": "#161616",
    "panel": "#1e1e1e",
    "grid": "#2b2b2b",
    "text": "#e6e2d8",
    "muted": "#bdb8ad",
    "gold": "#c6a25a",
    "red": "#7d2a2a",
    "green": "#4e7d49",
}


def _load_csv(path: Path) -> list[dict[str, str]]:
    with path.open("r", encoding="utf-8") as handle:
        return list(csv.DictReader(handle))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot legality benchmark metrics")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Directory containing benchmark CSV files",
    )
    parser.add_argument(
        "--output",
        default=str(ROOT / "docs" / "visuals" / "query-throughput.svg"),
        help="Output SVG path",
    )
    return parser.parse_args()


def plot(query_rows: list[dict[str, str]], output: Path) -> None:
    plt.rcParams.update(
        {
            "font.family": "DejaVu Sans",
            "axes.facecolor": PALETTE["panel"],
            "figure.facecolor": PALETTE["bg"],
            "axes.edgecolor": PALETTE["grid"],
            "axes.labelcolor": PALETTE["text"],
            "xtick.color": PALETTE["muted"],
            "ytick.color": PALETTE["muted"],
            "text.color": PALETTE["text"],
            "axes.titlecolor": PALETTE["text"],
            "grid.color": PALETTE["grid"],
        }
    )

    qps_by_pos: dict[str, dict[str, int]] = defaultdict(dict)
    for row in query_rows:
        qps_by_pos[row["position"]][row["kind"]] = int(row["qps"])
    kinds = sorted({kind for per_kind in qps_by_pos.values() for kind in per_kind})

    fig, ax = plt.subplots(figsize=(12, 6), dpi=150)
    fig.suptitle("Legality Query Throughput", fontsize=18, fontweight="bold", color=PALETTE["text"])

    colors = [PALETTE["gold"], PALETTE["red"], PALETTE["green"]]
    positions = sorted(qps_by_pos)
    width = 0.8 / max(len(positions), 1)
    for idx, position in enumerate(positions):
        offsets = [k + idx * width for k in range(len(kinds))]
        values = [qps_by_pos[position].get(kind, 0) for kind in kinds]
        ax.bar(offsets, values, width=width, color=colors[idx % len(colors)], label=position)

    ax.set_xticks([k + width * (len(positions) - 1) / 2 for k in range(len(kinds))])
    ax.set_xticklabels(kinds)
    ax.set_title("Queries/Second by Piece Kind")
    ax.set_xlabel("Piece kind")
    ax.set_ylabel("Queries/second")
    ax.grid(True, axis="y", alpha=0.6)
    ax.legend(frameon=False)

    output.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout(rect=(0, 0, 1, 0.95))
    fig.savefig(output, format="svg")
    plt.close(fig)


def main() -> None:
    args = parse_args()
    metrics_dir = Path(args.metrics_dir)
    output = Path(args.output)

    plot(_load_csv(metrics_dir / "query_metrics.csv"), output)
    print(f"wrote {output}")


if __name__ == "__main__":
    main()
