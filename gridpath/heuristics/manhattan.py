"""
Manhattan distance heuristic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridpath.grid.model import Node


def manhattan(node: Node, target: Node) -> int:
    """|dr| + |dc|. Never overestimates on a grid without diagonal moves."""
    return abs(node.row - target.row) + abs(node.col - target.col)
