"""
Configuration constants for the grid pathfinding visualizer.

All tunable parameters are defined here. Values can be overridden through
environment variables (or a .env file in the project root).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of gridpath/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Grid Configuration
# =============================================================================

# Default grid dimensions (the browser grid is always this size)
GRID_ROWS = int(os.environ.get("GRIDPATH_ROWS", "20"))
GRID_COLS = int(os.environ.get("GRIDPATH_COLS", "20"))

# Fraction of cells turned into walls by the random grid generator
DEFAULT_WALL_DENSITY = 0.25

# ASCII grid symbols
CELL_OPEN = "."
CELL_WALL = "#"
CELL_START = "S"
CELL_END = "E"
CELL_VISITED = "o"
CELL_PATH = "*"

# =============================================================================
# Algorithm Configuration
# =============================================================================

# Algorithm used when none is selected
DEFAULT_ALGORITHM = "bfs"

# Cost of moving between two orthogonally adjacent cells
EDGE_COST = 1

# =============================================================================
# Playback Configuration
# =============================================================================

# Delay between consecutive "visited" events (milliseconds)
VISITED_DELAY_MS = int(os.environ.get("GRIDPATH_VISITED_DELAY_MS", "20"))

# Delay between consecutive "on path" events (milliseconds)
PATH_DELAY_MS = int(os.environ.get("GRIDPATH_PATH_DELAY_MS", "50"))

# =============================================================================
# Web UI Configuration
# =============================================================================

FLASK_PORT = int(os.environ.get("FLASK_PORT", "5000"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
