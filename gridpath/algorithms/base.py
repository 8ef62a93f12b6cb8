"""
Search algorithm base class.

All algorithms implement search() over a freshly reset grid and return
the nodes in the order they were finalized (the visitation trace).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from gridpath.errors import ConfigurationError

if TYPE_CHECKING:
    from gridpath.grid.model import Grid, Node


class SearchAlgorithm(ABC):
    """
    Abstract base class for grid search strategies.

    Subclasses mutate node search state in place (visited flag, distance,
    backlink) and return the visitation trace. Path reconstruction is done
    afterwards from the end node's backlinks.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used to select the algorithm (e.g., 'bfs')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """One-sentence explanation shown next to the grid."""
        ...

    @abstractmethod
    def search(self, grid: Grid, start: Node, end: Node) -> list[Node]:
        """
        Explore the grid from start towards end.

        Assumes grid.reset_search_state() has just been called.

        Returns:
            Nodes in the order they were finalized. Includes end if it was reached.
        """
        ...

    def run(self, grid: Grid, start: Node | None = None, end: Node | None = None) -> list[Node]:
        """
        Reset the grid's search state and run search().

        Start and end default to the ones placed on the grid.

        Raises:
            ConfigurationError: If start or end is missing or is a wall
        """
        start = start if start is not None else grid.start
        end = end if end is not None else grid.end
        if start is None or end is None:
            raise ConfigurationError("Both a start and an end node must be set")
        if start.is_wall or end.is_wall:
            raise ConfigurationError("Start and end nodes cannot be walls")

        grid.reset_search_state()
        start.distance = 0
        return self.search(grid, start, end)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
