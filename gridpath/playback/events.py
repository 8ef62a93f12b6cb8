"""
Playback event dataclasses sent to the presentation layer.

Every event carries ``at_ms``: its scheduled time in milliseconds,
relative to the start of the playback it belongs to.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class VisitedEvent:
    """Mark cell (row, col) as visited."""

    row: int
    col: int
    at_ms: float

    kind: ClassVar[str] = "visited"

    def to_dict(self) -> dict:
        return {"type": self.kind, **asdict(self)}


@dataclass(frozen=True)
class PathEvent:
    """Mark cell (row, col) as part of the shortest path."""

    row: int
    col: int
    at_ms: float

    kind: ClassVar[str] = "path"

    def to_dict(self) -> dict:
        return {"type": self.kind, **asdict(self)}


@dataclass(frozen=True)
class StatsEvent:
    """
    Final statistics for a run.

    Attributes:
        nodes_visited: Length of the visitation trace
        path_length: Number of moves on the path (nodes - 1), 0 if no path
        execution_time_ms: Time spent in the search itself, animation excluded
        path_found: Whether the end node was reached
        at_ms: Scheduled time (that of the last visited event)
    """

    nodes_visited: int
    path_length: int
    execution_time_ms: float
    path_found: bool = True
    at_ms: float = 0.0

    kind: ClassVar[str] = "stats"

    def to_dict(self) -> dict:
        return {"type": self.kind, **asdict(self)}


PlaybackEvent = Union[VisitedEvent, PathEvent, StatsEvent]
