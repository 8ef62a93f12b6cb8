"""
Playback module.

Turns search output into timed visual events:
- VisitedEvent / PathEvent / StatsEvent: Events for the presentation layer
- build_timeline: Pure timeline construction
- PlaybackScheduler: Logical-clock event queue (advance, drain, play)
"""

from gridpath.playback.events import PathEvent, PlaybackEvent, StatsEvent, VisitedEvent
from gridpath.playback.scheduler import PlaybackScheduler, build_timeline

__all__ = [
    "PathEvent",
    "PlaybackEvent",
    "StatsEvent",
    "VisitedEvent",
    "PlaybackScheduler",
    "build_timeline",
]
