"""
python -m pathfinder [--map=NAME|PATH] [--headless]

NAME is one of the bundled maps (config.MAP_FILES); anything else is read
as a path to a JSON map file. Without --map the default empty grid is used.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from pathfinder import config
from pathfinder.core.maps import load_map
from pathfinder.core.types import Grid

logger = logging.getLogger("pathfinder")


def resolve_grid(map_arg: Optional[str]) -> Tuple[Optional[Grid], str]:
    if not map_arg:
        return None, "custom"
    if map_arg in config.MAP_FILES:
        return load_map(config.MAP_FILES[map_arg]), map_arg
    return load_map(Path(map_arg)), "custom"


def main(argv: Optional[List[str]] = None) -> int:
    config.configure_logging()
    try:
        grid, map_key = resolve_grid(config.resolve_arg("map", argv))
    except (OSError, ValueError) as ex:
        logger.error("Failed to load map: %s", ex)
        return 2

    if config.resolve_flag("headless", argv):
        from pathfinder.app.console import run_console
        from pathfinder.app.session import default_grid
        return run_console(grid if grid is not None else default_grid())

    from pathfinder.app.viewer import main as viewer_main
    viewer_main(grid, map_key=map_key)
    return 0


if __name__ == "__main__":
    sys.exit(main())
