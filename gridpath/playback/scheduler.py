"""
Playback scheduler: turns a visitation trace and a path into timed events.

Events are queued against a logical clock instead of real timers, so the
same run always produces the same timeline. Callers either advance the
clock themselves (tests, step-through), drain everything at once (the web
UI ships the list to the browser), or play it back in real time.

Timeline for a trace of N nodes and a path of M nodes:

    visited[i]  at  i * visited_delay_ms                 (i < N)
    stats       at  (N - 1) * visited_delay_ms            (right after visited[N-1])
    path[j]     at  (N - 1) * visited_delay_ms + j * path_delay_ms   (j < M)
"""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from gridpath.config import PATH_DELAY_MS, VISITED_DELAY_MS
from gridpath.errors import RunInProgressError
from gridpath.grid.model import Node
from gridpath.playback.events import PathEvent, PlaybackEvent, StatsEvent, VisitedEvent

if TYPE_CHECKING:
    from gridpath.run.state import SearchResult

logger = logging.getLogger(__name__)

EventHandler = Callable[[PlaybackEvent], None]


def _as_position(cell: Node | tuple[int, int]) -> tuple[int, int]:
    if isinstance(cell, Node):
        return cell.position
    row, col = cell
    return int(row), int(col)


def build_timeline(
    visited: Iterable[Node | tuple[int, int]],
    path: Iterable[Node | tuple[int, int]],
    execution_time_ms: float,
    path_found: bool = True,
    visited_delay_ms: float = VISITED_DELAY_MS,
    path_delay_ms: float = PATH_DELAY_MS,
) -> list[PlaybackEvent]:
    """
    Build the ordered event list for one run.

    The positions are copied out of the nodes here, so later changes to
    the grid cannot alter the timeline.

    Args:
        visited: Visitation trace (nodes or (row, col) pairs)
        path: Path from start to end (nodes or (row, col) pairs)
        execution_time_ms: Measured search time reported in the stats event
        path_found: False when the end node was never reached; the path
            phase is then left empty and path_length reported as 0
        visited_delay_ms: Spacing between visited events
        path_delay_ms: Spacing between path events

    Returns:
        Events in firing order
    """
    visited_cells = [_as_position(cell) for cell in visited]
    path_cells = [_as_position(cell) for cell in path] if path_found else []

    events: list[PlaybackEvent] = [
        VisitedEvent(row, col, at_ms=i * visited_delay_ms)
        for i, (row, col) in enumerate(visited_cells)
    ]

    phase_two_start = max(len(visited_cells) - 1, 0) * visited_delay_ms
    events.append(
        StatsEvent(
            nodes_visited=len(visited_cells),
            path_length=max(len(path_cells) - 1, 0),
            execution_time_ms=execution_time_ms,
            path_found=path_found,
            at_ms=phase_two_start,
        )
    )
    events.extend(
        PathEvent(row, col, at_ms=phase_two_start + j * path_delay_ms)
        for j, (row, col) in enumerate(path_cells)
    )
    return events


class PlaybackScheduler:
    """
    Event queue with a logical millisecond clock.

    Only one playback may be queued at a time: scheduling while events
    are still pending raises RunInProgressError. Events fire in strictly
    increasing scheduled order; events with equal times fire in the order
    they were scheduled.
    """

    def __init__(
        self,
        visited_delay_ms: float = VISITED_DELAY_MS,
        path_delay_ms: float = PATH_DELAY_MS,
    ) -> None:
        self.visited_delay_ms = visited_delay_ms
        self.path_delay_ms = path_delay_ms
        self._queue: list[tuple[float, int, PlaybackEvent]] = []
        self._counter = itertools.count()
        self._now_ms = 0.0
        self._origin_ms = 0.0

    @property
    def now_ms(self) -> float:
        """Logical clock, relative to the start of the current playback."""
        return self._now_ms - self._origin_ms

    @property
    def pending(self) -> int:
        return len(self._queue)

    @property
    def is_idle(self) -> bool:
        return not self._queue

    def schedule(
        self,
        visited: Iterable[Node | tuple[int, int]],
        path: Iterable[Node | tuple[int, int]],
        execution_time_ms: float,
        path_found: bool = True,
    ) -> list[PlaybackEvent]:
        """
        Queue the two playback phases for a run.

        Returns:
            The queued events in firing order

        Raises:
            RunInProgressError: If a previous playback has not finished
        """
        if self._queue:
            raise RunInProgressError(
                f"Previous playback still has {len(self._queue)} pending events"
            )

        events = build_timeline(
            visited,
            path,
            execution_time_ms,
            path_found=path_found,
            visited_delay_ms=self.visited_delay_ms,
            path_delay_ms=self.path_delay_ms,
        )

        self._origin_ms = self._now_ms
        for event in events:
            heapq.heappush(self._queue, (self._origin_ms + event.at_ms, next(self._counter), event))

        logger.debug(f"Scheduled {len(events)} playback events")
        return events

    def schedule_result(self, result: SearchResult) -> list[PlaybackEvent]:
        """Queue playback for a finished search."""
        return self.schedule(
            result.visited,
            result.path,
            result.execution_time_ms,
            path_found=result.path_found,
        )

    def advance(self, ms: float, handler: EventHandler | None = None) -> list[PlaybackEvent]:
        """
        Move the clock forward and fire every event that has come due.

        Returns:
            The fired events, in order
        """
        if ms < 0:
            raise ValueError(f"Cannot move the clock backwards ({ms} ms)")

        self._now_ms += ms
        fired = []
        while self._queue and self._queue[0][0] <= self._now_ms:
            _, _, event = heapq.heappop(self._queue)
            fired.append(event)
            if handler is not None:
                handler(event)
        return fired

    def drain(self, handler: EventHandler | None = None) -> list[PlaybackEvent]:
        """Fire everything that is queued, moving the clock to the last event."""
        if not self._queue:
            return []
        last_ms = max(due for due, _, _ in self._queue)
        return self.advance(last_ms - self._now_ms, handler)

    def play(
        self,
        handler: EventHandler,
        speed: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """
        Fire queued events in real time.

        Args:
            handler: Called once per event
            speed: Playback speed multiplier (2.0 = twice as fast)
            sleep: Blocking sleep in seconds (injectable for tests)

        Returns:
            Number of events fired
        """
        if speed <= 0:
            raise ValueError(f"Playback speed must be positive, got {speed}")

        fired = 0
        while self._queue:
            due = self._queue[0][0]
            wait_ms = due - self._now_ms
            if wait_ms > 0:
                sleep(wait_ms / 1000 / speed)
            fired += len(self.advance(max(wait_ms, 0), handler))
        return fired
