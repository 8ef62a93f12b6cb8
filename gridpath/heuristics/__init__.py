"""
Heuristics module.

Provides distance estimates used to guide A*:
- manhattan: Admissible and consistent for 4-way unit-cost movement
"""

from gridpath.heuristics.manhattan import manhattan

__all__ = ["manhattan"]
