"""
Configuration constants for the graph search library.

All paths, defaults, and tunable search parameters are defined here.
Scripts may override the log level through the LOG_LEVEL environment variable.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of graphsearch/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (example graph files for the CLI)
DATA_DIR = PROJECT_ROOT / "data"

# Graph file extensions understood by the loader
MSGPACK_SUFFIXES = (".msgpack", ".mpk")
JSON_SUFFIXES = (".json",)

# =============================================================================
# Graph Configuration
# =============================================================================

# Weight used when add_edge() is called without one
DEFAULT_EDGE_WEIGHT = 1

# =============================================================================
# Search Configuration
# =============================================================================

# BFS maximum depth (None = explore the whole component)
BFS_MAX_DEPTH = None

# Weighted A*: f(n) = g(n) + ASTAR_WEIGHT * h(n)
# 1.0 keeps A* optimal under an admissible heuristic; > 1 is faster but greedy
ASTAR_WEIGHT = 1.0

# Maximum A* expansions before giving up (None = unbounded)
ASTAR_MAX_EXPANSIONS = None

# =============================================================================
# CLI Configuration
# =============================================================================

# Grid used by scripts/find_path.py when no graph file is given
DEFAULT_GRID_SIZE = (10, 10)

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Same format as every script in scripts/
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
