"""
Configuration constants for the grid pathfinder.

Paths are derived from the package location; tunables can be overridden
through PATHFINDER_* environment variables or --name=value arguments.
"""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

# =============================================================================
# Paths
# =============================================================================

PACKAGE_DIR = Path(__file__).resolve().parent
MAP_DIR = PACKAGE_DIR / "maps"
MAP_FILES = {
    "open_field":    MAP_DIR / "open_field.json",
    "wall_with_gap": MAP_DIR / "wall_with_gap.json",
    "walled_off":    MAP_DIR / "walled_off.json",
}
# relative to the working directory
SAVE_PATH = Path(os.getenv("PATHFINDER_SAVE_PATH") or "pathfinder_layout.json")


# =============================================================================
# Environment helpers
# =============================================================================

def env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %d", name, raw, default)
        return default
    if value < minimum:
        logger.warning("%s=%d is below %d; using %d", name, value, minimum, default)
        return default
    return value


def env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


def resolve_arg(name: str, argv: Optional[List[str]] = None) -> Optional[str]:
    """Value of the last --name=value in argv, or None."""
    value = None
    prefix = f"--{name}="
    for arg in (sys.argv[1:] if argv is None else argv):
        if arg.startswith(prefix):
            value = arg.split("=", 1)[1]
    return value


def resolve_flag(name: str, argv: Optional[List[str]] = None) -> bool:
    return f"--{name}" in (sys.argv[1:] if argv is None else argv)


# =============================================================================
# Grid
# =============================================================================

GRID_SIZE = env_int("PATHFINDER_GRID_SIZE", 20, minimum=2)


def default_markers(size: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """Start and finish on the middle row, a quarter in from each side."""
    row = size // 2
    return (row, size // 4), (row, (3 * size) // 4)


DEFAULT_START, DEFAULT_FINISH = default_markers(GRID_SIZE)

# =============================================================================
# Viewer
# =============================================================================

STEPS_PER_SEC = env_int("PATHFINDER_STEPS_PER_SEC", 30)
MAX_STEPS_PER_SEC = 240
ANIMATE = env_flag("PATHFINDER_ANIMATE", True)

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv("PATHFINDER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(level=(level or LOG_LEVEL), format=LOG_FORMAT)
