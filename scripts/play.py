#!/usr/bin/env python3
"""
Pathfinding CLI - Run one search algorithm on a grid and play it back.

Usage:
    python scripts/play.py --grid grids/maze.txt --algorithm astar
    python scripts/play.py --rows 15 --cols 30 --density 0.3 --seed 7 --algorithm dijkstra
    python scripts/play.py --grid grids/maze.txt --animate --speed 2

Algorithms:
    bfs       - Breadth-first search
    dijkstra  - Dijkstra's algorithm (unit edge cost)
    astar     - A* with the Manhattan heuristic

Grid files use one line per row: '.' open, '#' wall, 'S' start, 'E' end.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridpath.algorithms import available_algorithms  # noqa: E402
from gridpath.config import (  # noqa: E402
    CELL_PATH,
    CELL_VISITED,
    DEFAULT_ALGORITHM,
    DEFAULT_WALL_DENSITY,
    GRID_COLS,
    GRID_ROWS,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
)
from gridpath.errors import ConfigurationError  # noqa: E402
from gridpath.grid import load_grid, random_grid, render_grid  # noqa: E402
from gridpath.playback import PathEvent, StatsEvent, VisitedEvent  # noqa: E402
from gridpath.run import SearchEngine  # noqa: E402


def parse_cell(value: str) -> tuple[int, int]:
    """Parse 'row,col'."""
    try:
        row, col = (int(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected 'row,col', got {value!r}")
    return row, col


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a pathfinding algorithm on a grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--algorithm",
        "-a",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=available_algorithms(),
        help=f"Algorithm to run (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--grid",
        type=Path,
        default=None,
        help="ASCII grid file (default: random grid)",
    )
    parser.add_argument("--rows", type=int, default=GRID_ROWS, help=f"Random grid rows (default: {GRID_ROWS})")
    parser.add_argument("--cols", type=int, default=GRID_COLS, help=f"Random grid columns (default: {GRID_COLS})")
    parser.add_argument(
        "--density",
        type=float,
        default=DEFAULT_WALL_DENSITY,
        help=f"Random grid wall density (default: {DEFAULT_WALL_DENSITY})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random grid seed")
    parser.add_argument("--start", type=parse_cell, default=None, help="Start cell 'row,col' (overrides the grid)")
    parser.add_argument("--end", type=parse_cell, default=None, help="End cell 'row,col' (overrides the grid)")
    parser.add_argument(
        "--animate",
        action="store_true",
        help="Play the search back in the terminal",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=1.0,
        help="Animation speed multiplier (default: 1.0)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


class TerminalView:
    """Redraws the grid in place as playback events arrive."""

    def __init__(self, base: str) -> None:
        self._cells = [list(line) for line in base.splitlines()]
        self._fixed = {
            (r, c) for r, line in enumerate(self._cells) for c, ch in enumerate(line) if ch in "SE#"
        }
        self.stats: StatsEvent | None = None

    def __call__(self, event) -> None:
        if isinstance(event, StatsEvent):
            self.stats = event
            return

        mark = CELL_VISITED if isinstance(event, VisitedEvent) else CELL_PATH
        if (event.row, event.col) not in self._fixed:
            self._cells[event.row][event.col] = mark

        # Only redraw on path events and every few visited events
        if isinstance(event, PathEvent) or int(event.at_ms) % 100 == 0:
            self.draw()

    def draw(self) -> None:
        sys.stdout.write("\033[H\033[J")
        sys.stdout.write("\n".join("".join(line) for line in self._cells) + "\n")
        sys.stdout.flush()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        if args.grid is not None:
            grid = load_grid(args.grid)
        else:
            grid = random_grid(args.rows, args.cols, density=args.density, seed=args.seed)

        if args.start is not None:
            grid.set_wall(*args.start, is_wall=False)
            grid.set_start(*args.start)
        if args.end is not None:
            grid.set_wall(*args.end, is_wall=False)
            grid.set_end(*args.end)
    except (ConfigurationError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    engine = SearchEngine()

    print("\n" + "=" * 60)
    print("Pathfinding")
    print("=" * 60)
    print(f"  Grid:      {grid.rows}x{grid.cols}, {len(grid.walls())} walls")
    print(f"  Algorithm: {args.algorithm}")
    print("=" * 60 + "\n")

    try:
        result = engine.run(grid, args.algorithm)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.animate:
        view = TerminalView(render_grid(grid))
        try:
            engine.scheduler.play(view, speed=args.speed)
        except KeyboardInterrupt:
            print("\n\nPlayback interrupted by user")
            return 130
        view.draw()
    else:
        engine.scheduler.drain()
        print(render_grid(grid, visited=result.visited, path=result.path if result.path_found else ()))

    stats = result.to_stats()
    print("\n" + "=" * 60)
    if stats.path_found:
        print(f"Path found: {stats.path_length} moves")
    else:
        print("No path found")
    print("=" * 60)
    print(f"  Nodes visited:  {stats.nodes_visited}")
    print(f"  Path length:    {stats.path_length}")
    print(f"  Execution time: {stats.execution_time_ms:.2f}ms")

    return 0 if stats.path_found else 1


if __name__ == "__main__":
    sys.exit(main())
