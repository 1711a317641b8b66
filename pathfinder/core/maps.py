"""
Grid layouts on disk and as text.

JSON map files:
    {"width": W, "height": H, "start": [r, c], "finish": [r, c],
     "cells": [[0|1, ...], ...]}        # cells[row][col], 1 = wall

ASCII grids (one line per row):
    .  open     #  wall     S  start     F  finish
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from pathfinder.core.types import Cell, Grid, OPEN, WALL

logger = logging.getLogger(__name__)

ASCII_OPEN = "."
ASCII_WALL = "#"
ASCII_START = "S"
ASCII_FINISH = "F"
ASCII_VISITED = "o"
ASCII_PATH = "*"


def load_map(path: Union[str, Path]) -> Grid:
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as ex:
            raise ValueError(f"{path}: not valid JSON ({ex})") from ex
    grid = grid_from_dict(data)
    logger.info("Loaded %dx%d map from %s", grid.height, grid.width, path)
    return grid


def _coord(value, name: str) -> Cell:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{name} must be a [row, col] pair, got {value!r}")
    for v in value:
        # bool is an int subclass; JSON true/false is not a coordinate
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"{name} coordinates must be integers, got {value!r}")
    return tuple(value)


def grid_from_dict(data: dict) -> Grid:
    try:
        width = int(data["width"])
        height = int(data["height"])
        start = _coord(data["start"], "start")
        finish = _coord(data["finish"], "finish")
        cells = [[WALL if v else OPEN for v in row] for row in data["cells"]]
        grid = Grid(width, height, cells, start, finish)
    except (KeyError, TypeError) as ex:
        raise ValueError(f"malformed map: {ex!r}") from ex
    # markers always sit on open cells
    grid.cells[grid.start[0]][grid.start[1]] = OPEN
    grid.cells[grid.finish[0]][grid.finish[1]] = OPEN
    return grid


def grid_to_dict(grid: Grid) -> dict:
    return {
        "width": grid.width,
        "height": grid.height,
        "start": list(grid.start),
        "finish": list(grid.finish),
        "cells": [list(r) for r in grid.cells],
    }


def save_map(grid: Grid, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(grid_to_dict(grid), f, indent=1)
    logger.info("Saved %dx%d map to %s", grid.height, grid.width, path)
    return path


def parse_ascii(text: str) -> Grid:
    rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if not rows:
        raise ValueError("empty ASCII grid")
    width = len(rows[0])
    if any(len(r) != width for r in rows):
        raise ValueError("ASCII grid rows differ in length")

    start: Optional[Cell] = None
    finish: Optional[Cell] = None
    cells = []
    for r, line in enumerate(rows):
        row = []
        for c, ch in enumerate(line):
            if ch == ASCII_WALL:
                row.append(WALL)
                continue
            if ch == ASCII_START:
                if start is not None:
                    raise ValueError("more than one start in ASCII grid")
                start = (r, c)
            elif ch == ASCII_FINISH:
                if finish is not None:
                    raise ValueError("more than one finish in ASCII grid")
                finish = (r, c)
            elif ch != ASCII_OPEN:
                raise ValueError(f"unexpected character {ch!r} at {(r, c)}")
            row.append(OPEN)
        cells.append(row)

    if start is None or finish is None:
        raise ValueError("ASCII grid needs exactly one S and one F")
    return Grid(width, len(rows), cells, start, finish)


def render_ascii(grid: Grid, visited: Iterable[Cell] = (), path: Iterable[Cell] = ()) -> str:
    """Draw the grid, overlaying visited cells and then the path."""
    canvas = [[ASCII_WALL if v == WALL else ASCII_OPEN for v in row] for row in grid.cells]
    for r, c in visited:
        canvas[r][c] = ASCII_VISITED
    for r, c in path:
        canvas[r][c] = ASCII_PATH
    canvas[grid.start[0]][grid.start[1]] = ASCII_START
    canvas[grid.finish[0]][grid.finish[1]] = ASCII_FINISH
    return "\n".join("".join(row) for row in canvas)
