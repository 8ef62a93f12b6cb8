"""
Search algorithms module.

Provides the grid search strategies:
- BFS: Breadth-first search (FIFO queue)
- Dijkstra: Closest-node-first with a binary heap
- AStar: Dijkstra guided by the Manhattan heuristic
- reconstruct_path: Path from the end node's backlinks
"""

from gridpath.algorithms.astar import AStar
from gridpath.algorithms.base import SearchAlgorithm
from gridpath.algorithms.bfs import BFS
from gridpath.algorithms.dijkstra import Dijkstra
from gridpath.algorithms.path import reconstruct_path
from gridpath.errors import ConfigurationError

__all__ = [
    "SearchAlgorithm",
    "BFS",
    "Dijkstra",
    "AStar",
    "reconstruct_path",
    "ALGORITHMS",
    "available_algorithms",
    "get_algorithm",
]

ALGORITHMS: dict[str, type[SearchAlgorithm]] = {
    "bfs": BFS,
    "dijkstra": Dijkstra,
    "astar": AStar,
}


def available_algorithms() -> list[str]:
    """Identifiers accepted by get_algorithm()."""
    return list(ALGORITHMS)


def get_algorithm(name: str) -> SearchAlgorithm:
    """
    Get an algorithm by name.

    Args:
        name: Algorithm identifier (bfs, dijkstra, astar)

    Returns:
        Instantiated algorithm

    Raises:
        ConfigurationError: If algorithm name is unknown
    """
    if not isinstance(name, str) or name not in ALGORITHMS:
        available = ", ".join(ALGORITHMS)
        raise ConfigurationError(f"Unknown algorithm {name!r}. Available: {available}")

    return ALGORITHMS[name]()
