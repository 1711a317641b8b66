# pathfinder/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any

Cell = Tuple[int, int]  # (row, col)

OPEN = 0
WALL = 1


@dataclass
class Grid:
    width: int
    height: int
    cells: List[List[int]]             # [row][col]
    start: Cell
    finish: Cell

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid must be at least 1x1, got {self.height}x{self.width}")
        if len(self.cells) != self.height or any(len(r) != self.width for r in self.cells):
            raise ValueError("cells size mismatch")
        self.start = tuple(self.start)
        self.finish = tuple(self.finish)
        if not self.in_bounds(self.start):
            raise ValueError(f"start {self.start} out of bounds")
        if not self.in_bounds(self.finish):
            raise ValueError(f"finish {self.finish} out of bounds")

    @classmethod
    def empty(cls, height: int, width: int, start: Cell, finish: Cell) -> "Grid":
        cells = [[OPEN] * width for _ in range(height)]
        return cls(width, height, cells, start, finish)

    def copy(self) -> "Grid":
        return Grid(self.width, self.height, [list(r) for r in self.cells], self.start, self.finish)

    def in_bounds(self, c: Cell) -> bool:
        r, col = c
        return 0 <= r < self.height and 0 <= col < self.width

    def is_block(self, c: Cell) -> bool:
        r, col = c
        return self.cells[r][col] == WALL

    def neighbors4(self, c: Cell) -> List[Cell]:
        """In-bounds orthogonal neighbours in up, down, left, right order."""
        r, col = c
        out: List[Cell] = []
        for n in ((r - 1, col), (r + 1, col), (r, col - 1), (r, col + 1)):
            if self.in_bounds(n):
                out.append(n)
        return out

    def passable_count(self) -> int:
        return sum(1 for row in self.cells for v in row if v != WALL)

    # -------------------- editing --------------------

    def set_wall(self, c: Cell, blocked: bool = True) -> bool:
        """Set or clear a wall. Start and finish cells can never hold one."""
        if not self.in_bounds(c) or c == self.start or c == self.finish:
            return False
        r, col = c
        self.cells[r][col] = WALL if blocked else OPEN
        return True

    def toggle_wall(self, c: Cell) -> bool:
        if not self.in_bounds(c):
            return False
        return self.set_wall(c, not self.is_block(c))

    def place_start(self, c: Cell) -> bool:
        if not self.in_bounds(c) or c == self.finish:
            return False
        r, col = c
        self.cells[r][col] = OPEN
        self.start = c
        return True

    def place_finish(self, c: Cell) -> bool:
        if not self.in_bounds(c) or c == self.start:
            return False
        r, col = c
        self.cells[r][col] = OPEN
        self.finish = c
        return True

    def clear_walls(self) -> None:
        for row in self.cells:
            row[:] = [OPEN] * self.width


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path"
    visited: List[Cell] = field(default_factory=list)   # finalized this step
    reached: List[Cell] = field(default_factory=list)   # first reached this step
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchResult:
    """Outcome of one complete search.

    ``status`` is ``"reachable"`` or ``"unreachable"``; ``path`` is empty
    unless the finish was reached. ``distance`` and ``parent`` are the
    per-search tables the path was reconstructed from.
    """
    status: str
    start: Cell
    finish: Cell
    visited: List[Cell] = field(default_factory=list)
    path: List[Cell] = field(default_factory=list)
    distance: Dict[Cell, int] = field(default_factory=dict)
    parent: Dict[Cell, Cell] = field(default_factory=dict)

    @property
    def reachable(self) -> bool:
        return self.status == "reachable"

    @property
    def steps(self) -> Optional[int]:
        """Number of moves on the path, None when unreachable."""
        return len(self.path) - 1 if self.path else None
