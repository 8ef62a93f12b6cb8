"""
Pathfinding Visualizer - Flask entry point.

Features:
- Click to place start, end and walls on a 20x20 grid
- Visualize BFS, Dijkstra or A* with animated playback
- Nodes visited, path length and search time

Run with:
    python app.py
"""

import logging

from gridpath.config import FLASK_PORT, LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL
from ui.flask_app import app

if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    app.run(host="0.0.0.0", port=FLASK_PORT)
