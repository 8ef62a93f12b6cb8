"""
Breadth-first search.

Explores the grid layer by layer, so the first time the end node is
dequeued it has been reached by a minimum number of moves.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from gridpath.algorithms.base import SearchAlgorithm

if TYPE_CHECKING:
    from gridpath.grid.model import Grid, Node

logger = logging.getLogger(__name__)


class BFS(SearchAlgorithm):
    """Unweighted shortest path by FIFO queue."""

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        return "BFS explores all nodes at the current depth before moving to the next."

    def search(self, grid: Grid, start: Node, end: Node) -> list[Node]:
        queue = deque([start])
        visited_nodes = []
        start.is_visited = True

        while queue:
            current = queue.popleft()
            visited_nodes.append(current)

            if current is end:
                break

            for neighbor in grid.neighbors(current):
                if neighbor.is_visited or neighbor.is_wall:
                    continue
                neighbor.is_visited = True
                neighbor.distance = current.distance + 1
                grid.link(neighbor, current)
                queue.append(neighbor)

        logger.debug(f"BFS finalized {len(visited_nodes)} nodes")
        return visited_nodes
