"""
Grid model module.

Provides the grid the search algorithms run over:
- Node: One cell with its per-run search state
- Grid: Fixed-size node arena with start/end/wall editing
- parse_grid / render_grid: ASCII conversion
- from_mask / random_grid: numpy-backed construction
"""

from gridpath.grid.builders import (
    from_mask,
    load_grid,
    parse_grid,
    random_grid,
    random_mask,
    render_grid,
    to_mask,
)
from gridpath.grid.model import DIRECTIONS, Grid, Node

__all__ = [
    "DIRECTIONS",
    "Grid",
    "Node",
    "from_mask",
    "load_grid",
    "parse_grid",
    "random_grid",
    "random_mask",
    "render_grid",
    "to_mask",
]
