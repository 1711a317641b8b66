#!/usr/bin/env python3
"""
Unweighted shortest-path search on a 4-connected grid, one finalization
per step() so the viewer can animate it.

Implements the algorithm API expected by the viewer/session:
- init(grid, start, finish) - reset() - step() -> StepResult - run() -> SearchResult

Selection order (frontier heap entries are (distance, row, col)):
- lowest distance first, ties in row-major order, so output is reproducible.

All edges cost 1, so a cell's distance is fixed the first time it is
reached. Weighted edges would need real relaxation with stale-entry
skipping; this class does not do that.
"""

import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from pathfinder.core.types import Cell, Grid, SearchResult, StepResult

logger = logging.getLogger(__name__)


@dataclass
class ShortestPathSearch:
    name: str = "Dijkstra"

    # Internal state, keyed by cell; the grid itself is never written to
    grid: Optional[Grid] = None
    start: Optional[Cell] = None
    finish: Optional[Cell] = None
    frontier: List[Tuple[int, int, int]] = field(default_factory=list)  # (dist, row, col)
    distance: Dict[Cell, int] = field(default_factory=dict)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    finalized: Set[Cell] = field(default_factory=set)
    visited: List[Cell] = field(default_factory=list)
    done: bool = False
    no_path: bool = False

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Optional[Cell] = None, finish: Optional[Cell] = None) -> None:
        """Bind to a grid; start/finish default to the grid's markers."""
        start = tuple(start) if start is not None else grid.start
        finish = tuple(finish) if finish is not None else grid.finish
        if not grid.in_bounds(start):
            raise ValueError(f"start {start} is outside the {grid.height}x{grid.width} grid")
        if not grid.in_bounds(finish):
            raise ValueError(f"finish {finish} is outside the {grid.height}x{grid.width} grid")
        self.grid = grid
        self.start = start
        self.finish = finish
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed with the start cell."""
        if self.grid is None:
            return
        self.frontier.clear()
        self.distance.clear()
        self.parent.clear()
        self.finalized.clear()
        self.visited = []
        self.done = False
        self.no_path = False

        # a blocked start reaches nothing, unless it is also the finish
        if self.grid.is_block(self.start) and self.start != self.finish:
            return
        r, c = self.start
        self.distance[self.start] = 0
        heapq.heappush(self.frontier, (0, r, c))

    # -------------------- helpers --------------------

    def _neighbors4(self, c: Cell) -> List[Cell]:
        """Orthogonal neighbours that are open and not yet finalized."""
        out: List[Cell] = []
        for n in self.grid.neighbors4(c):
            if n not in self.finalized and not self.grid.is_block(n):
                out.append(n)
        return out

    def reconstruct_path(self, end: Cell) -> List[Cell]:
        return reconstruct_path(self.parent, end)

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Finalize ONE cell:
          - Pop the closest unfinalized cell.
          - If it is the finish, reconstruct and stop.
          - Else give every unreached open neighbour distance + 1.
        """
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self.reconstruct_path(self.finish)
            return StepResult(status="done", path=path, metrics=self._metrics(path_len=len(path)))

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if not self.frontier:
            self.no_path = True
            logger.debug("%s: finish %s unreachable after %d visits",
                         self.name, self.finish, len(self.visited))
            return StepResult(status="no_path", metrics=self._metrics())

        d_u, r, c = heapq.heappop(self.frontier)
        u = (r, c)
        self.finalized.add(u)
        self.visited.append(u)

        if u == self.finish:
            self.done = True
            path = self.reconstruct_path(u)
            logger.debug("%s: reached %s at distance %d after %d visits",
                         self.name, u, d_u, len(self.visited))
            return StepResult(status="done", visited=[u], current=u, path=path,
                              metrics=self._metrics(path_len=len(path)))

        reached_now: List[Cell] = []
        for v in self._neighbors4(u):
            # first reach wins: with unit costs BFS order already gives the minimum
            if v in self.distance:
                continue
            self.distance[v] = d_u + 1
            self.parent[v] = u
            heapq.heappush(self.frontier, (d_u + 1, v[0], v[1]))
            reached_now.append(v)

        return StepResult(status="running", visited=[u], reached=reached_now, current=u,
                          metrics=self._metrics())

    def run(self) -> SearchResult:
        """Step until the search finishes and return the tagged outcome."""
        if self.grid is None:
            raise ValueError("search is not bound to a grid; call init() first")
        res = self.step()
        while res.status == "running":
            res = self.step()
        return self.result()

    def result(self) -> SearchResult:
        reachable = self.done
        return SearchResult(
            status="reachable" if reachable else "unreachable",
            start=self.start,
            finish=self.finish,
            visited=list(self.visited),
            path=self.reconstruct_path(self.finish) if reachable else [],
            distance=dict(self.distance),
            parent=dict(self.parent),
        )

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "visited": len(self.visited),
            "frontier": len(self.frontier),
            "path_len": path_len,
        }


def reconstruct_path(parent: Dict[Cell, Cell], finish: Cell) -> List[Cell]:
    """Walk predecessor links back from finish.

    The first element is the origin of the chain. For a finish the search
    never reached that is the finish itself, not the start.
    """
    path: List[Cell] = []
    cur: Optional[Cell] = finish
    while cur is not None:
        path.append(cur)
        cur = parent.get(cur)
    path.reverse()
    return path


def search(grid: Grid, start: Optional[Cell] = None, finish: Optional[Cell] = None) -> SearchResult:
    """Run a complete search; ``result.visited`` is the visited order."""
    algo = ShortestPathSearch()
    algo.init(grid, start, finish)
    return algo.run()
