"""
Path reconstruction from end-node backlinks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridpath.grid.model import Grid, Node


def reconstruct_path(grid: Grid, end: Node) -> list[Node]:
    """
    Walk backlinks from ``end`` and return the nodes from the chain's root to ``end``.

    After a successful run the root is the start node. If ``end`` was never
    reached the result is just ``[end]``; check ``end.is_visited`` to tell
    that apart from a run where start and end coincide.
    """
    path = []
    current = end
    while current is not None:
        path.append(current)
        current = grid.previous_of(current)
    path.reverse()
    return path
