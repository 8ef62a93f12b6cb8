#!/usr/bin/env python3
"""
Compare BFS, Dijkstra and A* on the same grid.

Usage:
    python scripts/compare.py --grid grids/maze.txt
    python scripts/compare.py --rows 40 --cols 40 --density 0.3 --seed 1 --chart comparison.html
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from gridpath.algorithms import available_algorithms  # noqa: E402
from gridpath.config import DEFAULT_WALL_DENSITY, GRID_COLS, GRID_ROWS  # noqa: E402
from gridpath.errors import ConfigurationError  # noqa: E402
from gridpath.grid import load_grid, random_grid  # noqa: E402
from gridpath.run import SearchEngine  # noqa: E402
from ui.components.charts import create_comparison_chart, create_time_chart  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare search algorithms on one grid")
    parser.add_argument("--grid", type=Path, default=None, help="ASCII grid file (default: random grid)")
    parser.add_argument("--rows", type=int, default=GRID_ROWS)
    parser.add_argument("--cols", type=int, default=GRID_COLS)
    parser.add_argument("--density", type=float, default=DEFAULT_WALL_DENSITY)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--chart", type=Path, default=None, help="Write an HTML chart to this path")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.WARNING)

    try:
        if args.grid is not None:
            grid = load_grid(args.grid)
        else:
            grid = random_grid(args.rows, args.cols, density=args.density, seed=args.seed)
    except (ConfigurationError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    engine = SearchEngine()
    results = []
    for name in available_algorithms():
        try:
            results.append(engine.search(grid, name))
        except ConfigurationError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(f"\nGrid {grid.rows}x{grid.cols}, {len(grid.walls())} walls\n")
    print(f"{'Algorithm':<10} {'Visited':>8} {'Path':>6} {'Time (ms)':>10}")
    print("-" * 37)
    for r in results:
        path = str(r.path_length) if r.path_found else "-"
        print(f"{r.algorithm:<10} {r.nodes_visited:>8} {path:>6} {r.execution_time_ms:>10.2f}")

    if args.chart is not None:
        with open(args.chart, "w", encoding="utf-8") as f:
            f.write(create_comparison_chart(results).to_html(full_html=False, include_plotlyjs="cdn"))
            f.write(create_time_chart(results).to_html(full_html=False, include_plotlyjs=False))
        print(f"\nChart saved to {args.chart}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
