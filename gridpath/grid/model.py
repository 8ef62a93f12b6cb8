"""
Grid and node dataclasses holding per-run search state.

The grid owns every node. Backlinks between nodes are stored as indices
into the grid's node table, never as object references.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from gridpath.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Neighbor enumeration order: up, down, left, right
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(eq=False)
class Node:
    """
    A single grid cell.

    Attributes:
        row: Row coordinate (fixed)
        col: Column coordinate (fixed)
        is_wall: Whether the cell blocks traversal
        is_visited: Whether the current run has reached/finalized this cell
        distance: Cost from the start node, inf until reached
        previous: Index of the node this one was reached from, or None
    """

    row: int
    col: int
    is_wall: bool = False
    is_visited: bool = False
    distance: float = math.inf
    previous: int | None = None

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    def clear_search_state(self) -> None:
        self.is_visited = False
        self.distance = math.inf
        self.previous = None

    def __repr__(self) -> str:
        flag = " wall" if self.is_wall else ""
        return f"Node({self.row}, {self.col}{flag})"


class Grid:
    """
    Fixed-size rectangular grid of nodes.

    Nodes are stored row-major in a flat list, so a node's index is
    ``row * cols + col``. The grid also tracks the (optional) start and
    end cells; neither may ever be a wall.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ConfigurationError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols
        self._nodes = [Node(row, col) for row in range(rows) for col in range(cols)]
        self._start: int | None = None
        self._end: int | None = None

    # -------------------------------------------------------------------------
    # Node access
    # -------------------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def node(self, row: int, col: int) -> Node:
        """Return the node at (row, col). Raises ConfigurationError if out of bounds."""
        if not self.in_bounds(row, col):
            raise ConfigurationError(
                f"Cell ({row}, {col}) is outside the {self.rows}x{self.cols} grid"
            )
        return self._nodes[row * self.cols + col]

    def index_of(self, node: Node) -> int:
        return node.row * self.cols + node.col

    def node_at(self, index: int) -> Node:
        return self._nodes[index]

    def nodes(self) -> list[Node]:
        """All nodes in row-major order."""
        return list(self._nodes)

    def __iter__(self):
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def neighbors(self, node: Node) -> list[Node]:
        """
        Orthogonally adjacent nodes inside the grid, ordered up, down, left, right.

        Walls are included; filtering them is the caller's job.
        """
        result = []
        for d_row, d_col in DIRECTIONS:
            row, col = node.row + d_row, node.col + d_col
            if self.in_bounds(row, col):
                result.append(self._nodes[row * self.cols + col])
        return result

    def previous_of(self, node: Node) -> Node | None:
        """Follow a node's backlink."""
        if node.previous is None:
            return None
        return self._nodes[node.previous]

    def link(self, node: Node, previous: Node) -> None:
        """Record that ``node`` was reached from ``previous``."""
        node.previous = self.index_of(previous)

    # -------------------------------------------------------------------------
    # Start / end / walls
    # -------------------------------------------------------------------------

    @property
    def start(self) -> Node | None:
        return None if self._start is None else self._nodes[self._start]

    @property
    def end(self) -> Node | None:
        return None if self._end is None else self._nodes[self._end]

    def set_start(self, row: int, col: int) -> Node:
        node = self.node(row, col)
        if node.is_wall:
            raise ConfigurationError(f"Start cell ({row}, {col}) is a wall")
        self._start = self.index_of(node)
        return node

    def set_end(self, row: int, col: int) -> Node:
        node = self.node(row, col)
        if node.is_wall:
            raise ConfigurationError(f"End cell ({row}, {col}) is a wall")
        self._end = self.index_of(node)
        return node

    def set_wall(self, row: int, col: int, is_wall: bool = True) -> Node:
        node = self.node(row, col)
        if is_wall and node in (self.start, self.end):
            raise ConfigurationError(f"Cell ({row}, {col}) is the start or end node")
        node.is_wall = is_wall
        return node

    def toggle_wall(self, row: int, col: int) -> bool:
        """Flip the wall flag of a cell and return the new value."""
        node = self.node(row, col)
        return self.set_wall(row, col, not node.is_wall).is_wall

    def handle_click(self, row: int, col: int) -> str:
        """
        Apply one editing click.

        The first click places the start node, the second the end node,
        and every later click toggles a wall. Clicks on the start or end
        cell are ignored once both are placed.

        Returns:
            What the cell became: "start", "end", "wall", "open" or "ignored"
        """
        node = self.node(row, col)

        if self._start is None:
            node.is_wall = False
            self.set_start(row, col)
            return "start"
        if self._end is None:
            node.is_wall = False
            self.set_end(row, col)
            return "end"
        if node is self.start or node is self.end:
            return "ignored"

        return "wall" if self.toggle_wall(row, col) else "open"

    def walls(self) -> list[tuple[int, int]]:
        return [node.position for node in self._nodes if node.is_wall]

    # -------------------------------------------------------------------------
    # Reset
    # -------------------------------------------------------------------------

    def reset_search_state(self) -> None:
        """Clear every node's search fields; the start node gets distance 0."""
        for node in self._nodes:
            node.clear_search_state()
        if self._start is not None:
            self._nodes[self._start].distance = 0

    def reset(self) -> None:
        """Drop start, end, walls and search state."""
        for node in self._nodes:
            node.is_wall = False
            node.clear_search_state()
        self._start = None
        self._end = None
        logger.debug(f"Grid {self.rows}x{self.cols} reset")

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, start={self._start}, end={self._end})"
