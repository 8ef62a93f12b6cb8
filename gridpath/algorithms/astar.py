"""
A* search guided by the Manhattan distance to the end node.

The open set is a binary heap keyed by (distance + heuristic, heuristic,
sequence). A node is pushed again only when its distance strictly
improves, and stale entries are dropped when popped, so the heap never
grows beyond one live entry per node plus one entry per improvement.

Tie-break: lowest f first, then lowest heuristic (the node closer to the
goal), then insertion order.

The end node is marked visited and appended to the trace before the
search stops, the same as BFS and Dijkstra.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from gridpath.algorithms.base import SearchAlgorithm
from gridpath.config import EDGE_COST
from gridpath.heuristics import manhattan

if TYPE_CHECKING:
    from gridpath.grid.model import Grid, Node

logger = logging.getLogger(__name__)


class AStar(SearchAlgorithm):
    """Best-first search on distance-so-far plus estimated distance-to-go."""

    def __init__(self, heuristic: Callable[[Node, Node], float] = manhattan) -> None:
        """
        Initialize A*.

        Args:
            heuristic: Estimate of the remaining cost between two nodes.
                Must be admissible for the returned path to be optimal.
        """
        self._heuristic = heuristic

    @property
    def name(self) -> str:
        return "astar"

    @property
    def description(self) -> str:
        return "A* Algorithm uses heuristics to find the shortest path more efficiently."

    def search(self, grid: Grid, start: Node, end: Node) -> list[Node]:
        counter = itertools.count()
        h_start = self._heuristic(start, end)
        open_set = [(start.distance + h_start, h_start, next(counter), grid.index_of(start), start.distance)]
        visited_nodes = []
        max_open = 1

        while open_set:
            _, _, _, index, distance = heapq.heappop(open_set)
            current = grid.node_at(index)

            if current.is_visited or distance != current.distance:
                continue
            if current.is_wall:
                continue

            current.is_visited = True
            visited_nodes.append(current)

            if current is end:
                break

            for neighbor in grid.neighbors(current):
                candidate = current.distance + EDGE_COST
                if candidate < neighbor.distance:
                    neighbor.distance = candidate
                    grid.link(neighbor, current)
                    h = self._heuristic(neighbor, end)
                    heapq.heappush(
                        open_set,
                        (candidate + h, h, next(counter), grid.index_of(neighbor), candidate),
                    )
            max_open = max(max_open, len(open_set))

        logger.debug(f"A* finalized {len(visited_nodes)} nodes (open set peaked at {max_open})")
        return visited_nodes
