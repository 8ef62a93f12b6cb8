"""
Grid Pathfinding Visualizer.

Runs breadth-first search, Dijkstra and A* over a fixed 2-D grid and
turns the resulting search trace into a timed playback of visual events.
"""

__version__ = "0.1.0"
