"""
Configuration constants for the maze pathfinder.

All paths, cell codes, output markers, and tunable settings are defined here.
Environment overrides are read from os.environ (the CLI loads .env first).
"""

import logging
import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of mazewalk/
PROJECT_ROOT = Path(__file__).parent.parent

# Sample maze files shipped with the project
MAPS_DIR = PROJECT_ROOT / "maps"

# Optional environment file picked up by the CLI
ENV_FILE = PROJECT_ROOT / ".env"

# =============================================================================
# Cell Codes
# =============================================================================

OPEN_CHAR = "."
WALL_CHAR = "@"
START_CHAR = "W"
GOAL_CHAR = "$"
WALKWAY_CHAR = "|"

# Filler for cells a coordinate file does not mention
DEFAULT_CELL_CHAR = OPEN_CHAR

# numpy dtype for grid storage (one unicode character per cell)
GRID_DTYPE = "<U1"

# =============================================================================
# Output Configuration
# =============================================================================

# Marks intermediate path cells in map output
PATH_MARKER = "+"

# Printed when no strategy reaches a goal
NO_PATH_MESSAGE = "The Wolverine Store is closed."

# Printed by --Time (seconds, 9 decimal places)
RUNTIME_FORMAT = "Total Runtime: {seconds:.9f} seconds"

# =============================================================================
# Logging Configuration
# =============================================================================

# Environment variable holding the log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL_ENV = "MAZEWALK_LOG_LEVEL"

# Used when the variable is unset or names no known level
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


# =============================================================================
# Validation Helpers
# =============================================================================

def list_sample_maps() -> list[Path]:
    """Return the sample maze files, sorted by name."""
    if not MAPS_DIR.exists():
        return []
    return sorted(MAPS_DIR.glob("*.txt"))


def get_log_level() -> int:
    """
    Resolve the log level from the environment.

    Read at call time so a .env loaded by the CLI is honoured. Unknown
    level names fall back to DEFAULT_LOG_LEVEL.
    """
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level
