"""
Search run record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from gridpath.playback.events import StatsEvent


@dataclass(frozen=True)
class SearchResult:
    """
    Snapshot of a finished search.

    Cells are stored as (row, col) pairs rather than node references, so the
    result stays valid after the grid is edited or searched again.

    Attributes:
        algorithm: Name of the algorithm that ran
        start: Start cell
        end: End cell
        visited: Visitation trace, in finalization order
        path: Cells from start to end (just the end cell if no path)
        path_found: Whether the end node was reached
        execution_time_ms: Time spent in the search (milliseconds)
        timestamp: When the run finished
    """

    algorithm: str
    start: tuple[int, int]
    end: tuple[int, int]
    visited: tuple[tuple[int, int], ...]
    path: tuple[tuple[int, int], ...]
    path_found: bool
    execution_time_ms: float
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def nodes_visited(self) -> int:
        return len(self.visited)

    @property
    def path_length(self) -> int:
        """Number of moves from start to end, 0 when no path was found."""
        if not self.path_found:
            return 0
        return len(self.path) - 1

    def to_stats(self) -> StatsEvent:
        return StatsEvent(
            nodes_visited=self.nodes_visited,
            path_length=self.path_length,
            execution_time_ms=self.execution_time_ms,
            path_found=self.path_found,
        )

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "start": list(self.start),
            "end": list(self.end),
            "visited": [list(cell) for cell in self.visited],
            "path": [list(cell) for cell in self.path],
            "path_found": self.path_found,
            "nodes_visited": self.nodes_visited,
            "path_length": self.path_length,
            "execution_time_ms": self.execution_time_ms,
            "timestamp": self.timestamp.isoformat(),
        }
