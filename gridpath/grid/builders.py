"""
Helpers for building grids from ASCII text or numpy wall masks, and for
rendering a grid (plus a run's trace and path) back to text.

ASCII format, one row per line:

    S...#
    .##.#
    ....E

``.`` open, ``#`` wall, ``S`` start, ``E`` end. Blank lines and
surrounding whitespace are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import numpy as np

from gridpath.config import (
    CELL_END,
    CELL_OPEN,
    CELL_PATH,
    CELL_START,
    CELL_VISITED,
    CELL_WALL,
    DEFAULT_WALL_DENSITY,
)
from gridpath.errors import ConfigurationError
from gridpath.grid.model import Grid

logger = logging.getLogger(__name__)


def parse_grid(text: str) -> Grid:
    """
    Build a grid from its ASCII representation.

    Raises:
        ConfigurationError: If rows are ragged, a symbol is unknown, or
            there is more than one start/end cell
    """
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if not lines:
        raise ConfigurationError("Grid text is empty")

    width = len(lines[0])
    for row, line in enumerate(lines):
        if len(line) != width:
            raise ConfigurationError(
                f"Row {row} has {len(line)} cells, expected {width}"
            )

    grid = Grid(len(lines), width)
    start = end = None

    for row, line in enumerate(lines):
        for col, symbol in enumerate(line):
            if symbol == CELL_WALL:
                grid.node(row, col).is_wall = True
            elif symbol == CELL_START:
                if start is not None:
                    raise ConfigurationError("Grid text has more than one start cell")
                start = (row, col)
            elif symbol == CELL_END:
                if end is not None:
                    raise ConfigurationError("Grid text has more than one end cell")
                end = (row, col)
            elif symbol != CELL_OPEN:
                raise ConfigurationError(f"Unknown cell symbol {symbol!r} at ({row}, {col})")

    if start is not None:
        grid.set_start(*start)
    if end is not None:
        grid.set_end(*end)

    return grid


def load_grid(path: Path | str) -> Grid:
    """Read an ASCII grid file."""
    path = Path(path)
    logger.info(f"Loading grid from {path}")
    return parse_grid(path.read_text(encoding="utf-8"))


def render_grid(
    grid: Grid,
    visited: Iterable[tuple[int, int]] = (),
    path: Iterable[tuple[int, int]] = (),
) -> str:
    """
    Render a grid to ASCII, overlaying visited cells and the path.

    Start and end symbols win over path marks, which win over visited marks.
    """
    cells = [
        [CELL_WALL if grid.node(row, col).is_wall else CELL_OPEN for col in range(grid.cols)]
        for row in range(grid.rows)
    ]

    for row, col in visited:
        cells[row][col] = CELL_VISITED
    for row, col in path:
        cells[row][col] = CELL_PATH

    if grid.start is not None:
        cells[grid.start.row][grid.start.col] = CELL_START
    if grid.end is not None:
        cells[grid.end.row][grid.end.col] = CELL_END

    return "\n".join("".join(row) for row in cells)


def to_mask(grid: Grid) -> np.ndarray:
    """Boolean wall mask with shape (rows, cols)."""
    mask = np.zeros((grid.rows, grid.cols), dtype=bool)
    for row, col in grid.walls():
        mask[row, col] = True
    return mask


def from_mask(
    mask: np.ndarray,
    start: tuple[int, int] | None = None,
    end: tuple[int, int] | None = None,
) -> Grid:
    """
    Build a grid from a 2-D boolean wall mask.

    Start and end cells are always cleared of walls.
    """
    mask = np.asarray(mask, dtype=bool)
    if mask.ndim != 2:
        raise ConfigurationError(f"Wall mask must be 2-D, got shape {mask.shape}")

    rows, cols = mask.shape
    grid = Grid(rows, cols)
    for row, col in zip(*np.nonzero(mask)):
        grid.node(int(row), int(col)).is_wall = True

    for cell, setter in ((start, grid.set_start), (end, grid.set_end)):
        if cell is not None:
            grid.node(*cell).is_wall = False
            setter(*cell)

    return grid


def random_mask(
    rows: int,
    cols: int,
    density: float = DEFAULT_WALL_DENSITY,
    seed: int | None = None,
) -> np.ndarray:
    """Random wall mask where each cell is a wall with probability ``density``."""
    if not 0.0 <= density <= 1.0:
        raise ConfigurationError(f"Wall density must be in [0, 1], got {density}")
    rng = np.random.default_rng(seed)
    return rng.random((rows, cols)) < density


def random_grid(
    rows: int,
    cols: int,
    density: float = DEFAULT_WALL_DENSITY,
    seed: int | None = None,
    start: tuple[int, int] = (0, 0),
    end: tuple[int, int] | None = None,
) -> Grid:
    """Random grid with start/end placed (end defaults to the bottom-right corner)."""
    if end is None:
        end = (rows - 1, cols - 1)
    return from_mask(random_mask(rows, cols, density, seed), start=start, end=end)
