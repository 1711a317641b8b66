"""Headless rendering of one search, for terminals and CI logs."""

import sys
from typing import TextIO

from pathfinder.core.dijkstra import search
from pathfinder.core.maps import render_ascii
from pathfinder.core.types import Grid, SearchResult


def summary(result: SearchResult) -> str:
    if result.reachable:
        return (f"reachable: {result.start} -> {result.finish} in {result.steps} steps, "
                f"{len(result.visited)} cells visited")
    return (f"unreachable: {result.start} -> {result.finish}, "
            f"{len(result.visited)} cells visited")


def run_console(grid: Grid, out: TextIO = sys.stdout) -> int:
    """Print the grid with visited (o) and path (*) overlays; 0 if reachable."""
    result = search(grid)
    out.write(render_ascii(grid, result.visited, result.path) + "\n")
    out.write(summary(result) + "\n")
    return 0 if result.reachable else 1
