from pathfinder.core.types import Cell, Grid, SearchResult, StepResult
from pathfinder.core.dijkstra import ShortestPathSearch, reconstruct_path, search

__all__ = [
    "Cell",
    "Grid",
    "SearchResult",
    "StepResult",
    "ShortestPathSearch",
    "reconstruct_path",
    "search",
]
