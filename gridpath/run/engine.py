"""
Search engine: validates a run, times the algorithm, reconstructs the path
and hands the snapshot to the playback scheduler.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING

from gridpath.algorithms import get_algorithm, reconstruct_path
from gridpath.algorithms.base import SearchAlgorithm
from gridpath.errors import ConfigurationError, RunInProgressError
from gridpath.playback.scheduler import PlaybackScheduler
from gridpath.run.state import SearchResult

if TYPE_CHECKING:
    from gridpath.grid.model import Grid

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Runs searches on a grid and queues their playback.

    The engine handles:
    - Validating start/end and the algorithm before touching node state
    - Serializing runs (one search at a time, one playback queued at a time)
    - Timing the search itself, excluding playback
    - Snapshotting the trace and path into a SearchResult
    """

    def __init__(self, scheduler: PlaybackScheduler | None = None) -> None:
        """
        Initialize the engine.

        Args:
            scheduler: Playback queue to feed. A fresh one with the
                configured delays is created if omitted.
        """
        self.scheduler = scheduler if scheduler is not None else PlaybackScheduler()
        self._lock = threading.Lock()

    def _resolve(self, algorithm: str | SearchAlgorithm) -> SearchAlgorithm:
        if isinstance(algorithm, SearchAlgorithm):
            return algorithm
        return get_algorithm(algorithm)

    def search(self, grid: Grid, algorithm: str | SearchAlgorithm) -> SearchResult:
        """
        Run one search without queuing playback.

        Args:
            grid: Grid with start and end placed
            algorithm: Algorithm identifier (bfs, dijkstra, astar) or instance

        Returns:
            SearchResult snapshot

        Raises:
            ConfigurationError: Missing start/end, start/end on a wall, or
                unknown algorithm
            RunInProgressError: Another search is running on this engine
        """
        start, end = grid.start, grid.end
        if start is None or end is None:
            raise ConfigurationError("Please set both a start and an end node.")
        if start.is_wall or end.is_wall:
            raise ConfigurationError("Start and end nodes cannot be walls.")
        strategy = self._resolve(algorithm)

        if not self._lock.acquire(blocking=False):
            raise RunInProgressError("A search is already running")

        try:
            logger.info(
                f"Running {strategy.name}: {start.position} -> {end.position} "
                f"on {grid.rows}x{grid.cols} grid"
            )

            started = time.perf_counter()
            trace = strategy.run(grid, start, end)
            execution_time_ms = (time.perf_counter() - started) * 1000

            path = reconstruct_path(grid, end)
            result = SearchResult(
                algorithm=strategy.name,
                start=start.position,
                end=end.position,
                visited=tuple(node.position for node in trace),
                path=tuple(node.position for node in path),
                path_found=end.is_visited,
                execution_time_ms=execution_time_ms,
            )
        finally:
            self._lock.release()

        if result.path_found:
            logger.info(
                f"{strategy.name}: path of {result.path_length} moves, "
                f"{result.nodes_visited} nodes visited in {execution_time_ms:.2f}ms"
            )
        else:
            logger.warning(
                f"{strategy.name}: no path from {start.position} to {end.position} "
                f"({result.nodes_visited} nodes visited)"
            )

        return result

    def run(self, grid: Grid, algorithm: str | SearchAlgorithm) -> SearchResult:
        """
        Run a search and queue its playback on the scheduler.

        Raises:
            ConfigurationError: Missing start/end or unknown algorithm
            RunInProgressError: A search is running or a playback is still pending
        """
        if not self.scheduler.is_idle:
            raise RunInProgressError(
                f"Previous playback still has {self.scheduler.pending} pending events"
            )

        result = self.search(grid, algorithm)
        self.scheduler.schedule_result(result)
        return result
