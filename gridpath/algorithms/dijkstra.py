"""
Dijkstra's algorithm over the unit-cost grid.

Every node starts in the working set. The working set is a binary heap
keyed by (distance, sequence); improving a node's distance pushes a fresh
entry and the superseded one is discarded when it surfaces.

Tie-break: nodes with equal distance are finalized in insertion order,
i.e. row-major order for the initial entries and push order afterwards.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from typing import TYPE_CHECKING

from gridpath.algorithms.base import SearchAlgorithm
from gridpath.config import EDGE_COST

if TYPE_CHECKING:
    from gridpath.grid.model import Grid, Node

logger = logging.getLogger(__name__)


class Dijkstra(SearchAlgorithm):
    """Shortest path by always finalizing the closest unvisited node."""

    @property
    def name(self) -> str:
        return "dijkstra"

    @property
    def description(self) -> str:
        return (
            "Dijkstra's Algorithm finds the shortest path by exploring "
            "the least costly node first."
        )

    def search(self, grid: Grid, start: Node, end: Node) -> list[Node]:
        counter = itertools.count()
        unvisited = [(node.distance, next(counter), grid.index_of(node)) for node in grid]
        heapq.heapify(unvisited)
        visited_nodes = []

        while unvisited:
            distance, _, index = heapq.heappop(unvisited)
            closest = grid.node_at(index)

            # Superseded by a shorter distance pushed later
            if closest.is_visited or distance != closest.distance:
                continue
            if closest.is_wall:
                continue
            if closest.distance == math.inf:
                logger.debug("Dijkstra: remaining nodes are unreachable")
                break

            closest.is_visited = True
            visited_nodes.append(closest)

            if closest is end:
                break

            for neighbor in grid.neighbors(closest):
                candidate = closest.distance + EDGE_COST
                if candidate < neighbor.distance:
                    neighbor.distance = candidate
                    grid.link(neighbor, closest)
                    heapq.heappush(unvisited, (candidate, next(counter), grid.index_of(neighbor)))

        logger.debug(f"Dijkstra finalized {len(visited_nodes)} nodes")
        return visited_nodes
