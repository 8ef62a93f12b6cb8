"""
Run module.

Provides search execution and its record:
- SearchEngine: Validates, times and snapshots a search, then queues playback
- SearchResult: Immutable record of a finished search
"""

from gridpath.run.engine import SearchEngine
from gridpath.run.state import SearchResult

__all__ = [
    "SearchEngine",
    "SearchResult",
]
