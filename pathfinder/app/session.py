"""
Editing + playback state behind the viewer, free of any pygame calls.

The viewer forwards mouse/keyboard input here and draws whatever
``visited_shown`` / ``path_shown`` currently hold.
"""

import logging
from typing import List, Optional

from pathfinder import config
from pathfinder.core.dijkstra import search
from pathfinder.core.types import Cell, Grid, SearchResult

logger = logging.getLogger(__name__)

NODE_TYPES = ("wall", "start", "finish")


def default_grid(size: Optional[int] = None) -> Grid:
    size = size or config.GRID_SIZE
    start, finish = config.default_markers(size)
    return Grid.empty(size, size, start, finish)


class VisualizerSession:
    def __init__(self, grid: Optional[Grid] = None, *, animate: bool = config.ANIMATE,
                 steps_per_sec: int = config.STEPS_PER_SEC):
        self.grid = grid if grid is not None else default_grid()
        self.node_type = "wall"
        self.mouse_pressed = False
        self.animate = animate
        self.steps_per_sec = steps_per_sec

        self.result: Optional[SearchResult] = None
        self.visited_shown: List[Cell] = []
        self.path_shown: List[Cell] = []
        self.state = "Idle"    # Idle | Running | Done | No path
        self._cursor = 0

    # ---------- editing ----------
    def set_node_type(self, node_type: str) -> None:
        if node_type not in NODE_TYPES:
            raise ValueError(f"unknown node type {node_type!r}; expected one of {NODE_TYPES}")
        self.node_type = node_type

    def mouse_down(self, cell: Cell) -> bool:
        if not self.grid.in_bounds(cell):
            return False
        if self.node_type == "wall":
            changed = self.grid.toggle_wall(cell)
            self.mouse_pressed = True
        elif self.node_type == "start":
            changed = self.grid.place_start(cell)
        else:
            changed = self.grid.place_finish(cell)
        if changed:
            self.clear_path()
        return changed

    def mouse_enter(self, cell: Cell) -> bool:
        """Drag painting: toggles walls only while the button is held."""
        if not self.mouse_pressed or self.node_type != "wall":
            return False
        changed = self.grid.toggle_wall(cell)
        if changed:
            self.clear_path()
        return changed

    def mouse_up(self) -> None:
        self.mouse_pressed = False

    def clear_grid(self) -> None:
        self.grid = default_grid(self.grid.height if self.grid.height == self.grid.width else None)
        self.clear_path()

    def load_grid(self, grid: Grid) -> None:
        self.grid = grid
        self.clear_path()

    def clear_path(self) -> None:
        self.result = None
        self.visited_shown = []
        self.path_shown = []
        self.state = "Idle"
        self._cursor = 0

    # ---------- playback ----------
    def visualize(self) -> SearchResult:
        """Search a snapshot of the grid; reveal instantly or queue for advance()."""
        self.clear_path()
        self.result = search(self.grid.copy())
        logger.info("Search %s: visited %d cells, path %s",
                    self.result.status, len(self.result.visited),
                    self.result.steps if self.result.reachable else "-")
        if self.animate:
            self.state = "Running"
        else:
            self.advance(len(self.result.visited) + len(self.result.path))
        return self.result

    def advance(self, n: int = 1) -> bool:
        """Reveal the next n cells (visited first, then path). True when finished."""
        if self.result is None:
            return True
        visited, path = self.result.visited, self.result.path
        total = len(visited) + len(path)
        end = min(total, self._cursor + max(0, n))
        for i in range(self._cursor, end):
            if i < len(visited):
                self.visited_shown.append(visited[i])
            else:
                self.path_shown.append(path[i - len(visited)])
        self._cursor = end
        if self._cursor >= total:
            self.state = "Done" if self.result.reachable else "No path"
            return True
        return False

    @property
    def finished(self) -> bool:
        return self.state in ("Done", "No path")

    # ---------- speed ----------
    def bump_speed(self, dv: int) -> None:
        self.steps_per_sec = int(max(1, min(config.MAX_STEPS_PER_SEC, self.steps_per_sec + dv)))

    def metrics(self) -> dict:
        res = self.result
        return {
            "visited": len(self.visited_shown),
            "visited_total": len(res.visited) if res else 0,
            "path_len": len(self.path_shown),
            "steps": res.steps if res is not None and res.reachable else None,
            "walls": self.grid.width * self.grid.height - self.grid.passable_count(),
        }
