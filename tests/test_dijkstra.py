"""
Unit tests for the shortest-path search and path reconstruction.
"""

import pytest

from pathfinder.core.dijkstra import ShortestPathSearch, reconstruct_path, search
from pathfinder.core.maps import parse_ascii
from pathfinder.core.types import Grid

LAYOUTS = [
    """
    S...#....
    .##.#.##.
    .#..#..#.
    .#.###.#.
    .......#F
    """,
    """
    S#.......
    .#.#####.
    .#.#...#.
    ...#.#.#.
    ####.#...
    F....#.##
    """,
    """
    ..#..
    .S#F.
    ..#..
    .....
    """,
]


def _manhattan(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class TestScenarios:
    """Fixed grids with known answers."""

    def test_open_grid_corner_to_corner(self, open_grid):
        """5x5 open grid (0,0)->(4,4) gives 9 cells, 8 steps."""
        result = search(open_grid)
        assert result.reachable
        assert len(result.path) == 9
        assert result.steps == 8
        assert result.path[0] == (0, 0)
        assert result.path[-1] == (4, 4)

    def test_start_equals_finish(self):
        """Identical start and finish visit and return only that cell."""
        grid = Grid.empty(3, 3, (1, 1), (1, 1))
        result = search(grid)
        assert result.visited == [(1, 1)]
        assert result.path == [(1, 1)]
        assert result.steps == 0

    def test_full_wall_row_blocks_finish(self, walled_row_grid):
        """Finish is never visited and the chain does not start at start."""
        result = search(walled_row_grid)
        assert not result.reachable
        assert result.path == []
        assert walled_row_grid.finish not in result.visited
        chain = reconstruct_path(result.parent, walled_row_grid.finish)
        assert chain[0] != walled_row_grid.start
        assert chain == [walled_row_grid.finish]
        # only the two rows above the wall are reachable
        assert len(result.visited) == 10

    def test_single_gap_is_used(self, gap_row_grid):
        """Path routes through the only gap in the wall row."""
        result = search(gap_row_grid)
        assert result.reachable
        assert (2, 3) in result.path
        assert result.steps == 8

    def test_row_major_tie_break(self):
        """Equal distances are finalized in row-major order."""
        grid = Grid.empty(2, 2, (0, 0), (1, 1))
        result = search(grid)
        assert result.visited == [(0, 0), (0, 1), (1, 0), (1, 1)]
        assert result.path == [(0, 0), (0, 1), (1, 1)]

    def test_stops_at_finish(self):
        """Cells farther than the finish are never visited."""
        grid = Grid.empty(1, 6, (0, 0), (0, 2))
        result = search(grid)
        assert result.visited == [(0, 0), (0, 1), (0, 2)]

    def test_blocked_finish_unreachable(self, open_grid):
        """A walled finish is exhausted around, never visited."""
        open_grid.cells[2][2] = 1
        result = search(open_grid, finish=(2, 2))
        assert not result.reachable
        assert (2, 2) not in result.visited
        assert len(result.visited) == 24

    def test_blocked_start_reaches_nothing(self, open_grid):
        """A walled start has no reachable cells at all."""
        open_grid.cells[0][0] = 1
        result = search(open_grid)
        assert result.status == "unreachable"
        assert result.visited == []

    def test_blocked_start_equal_to_finish(self, open_grid):
        """start == finish is visited even when that cell is a wall."""
        open_grid.cells[1][1] = 1
        result = search(open_grid, start=(1, 1), finish=(1, 1))
        assert result.reachable
        assert result.visited == [(1, 1)]
        assert result.path == [(1, 1)]

    def test_out_of_bounds_raises(self, open_grid):
        """Start or finish outside the grid is rejected."""
        with pytest.raises(ValueError):
            search(open_grid, start=(5, 0))
        with pytest.raises(ValueError):
            search(open_grid, finish=(0, -1))


class TestProperties:
    """Invariants that hold on every layout."""

    @pytest.mark.parametrize("start,finish", [((0, 0), (4, 4)), ((2, 2), (0, 4)), ((4, 0), (4, 3)), ((1, 3), (3, 0))])
    def test_open_grid_path_is_manhattan(self, start, finish):
        """Without walls the number of steps equals the Manhattan distance."""
        grid = Grid.empty(5, 5, start, finish)
        result = search(grid)
        assert result.steps == _manhattan(start, finish)

    @pytest.mark.parametrize("layout", LAYOUTS)
    def test_path_moves_one_orthogonal_step(self, layout):
        """Consecutive path cells are orthogonal neighbours on open cells."""
        grid = parse_ascii(layout)
        result = search(grid)
        assert result.reachable
        for a, b in zip(result.path, result.path[1:]):
            assert _manhattan(a, b) == 1
            assert not grid.is_block(b)

    @pytest.mark.parametrize("layout", LAYOUTS)
    def test_visited_unique_and_bounded(self, layout):
        """Visited order has no duplicates and never exceeds open cells."""
        grid = parse_ascii(layout)
        result = search(grid)
        assert len(result.visited) == len(set(result.visited))
        assert len(result.visited) <= grid.passable_count()

    @pytest.mark.parametrize("layout", LAYOUTS)
    def test_visited_in_distance_order(self, layout):
        """Cells are finalized in non-decreasing distance."""
        grid = parse_ascii(layout)
        result = search(grid)
        dists = [result.distance[c] for c in result.visited]
        assert dists == sorted(dists)
        assert result.distance[grid.finish] == result.steps

    def test_repeated_searches_identical(self, gap_row_grid):
        """The grid is not used as scratch space, so no reset is needed."""
        before = [list(r) for r in gap_row_grid.cells]
        first = search(gap_row_grid)
        second = search(gap_row_grid)
        assert first.visited == second.visited
        assert first.path == second.path
        assert gap_row_grid.cells == before


class TestReconstructPath:
    """Walking predecessor links."""

    def test_chain_from_parents(self):
        """Chain is returned origin-first."""
        parent = {(0, 1): (0, 0), (0, 2): (0, 1)}
        assert reconstruct_path(parent, (0, 2)) == [(0, 0), (0, 1), (0, 2)]

    def test_unreached_finish_is_single_cell(self):
        """A finish with no predecessor yields just itself."""
        assert reconstruct_path({}, (3, 3)) == [(3, 3)]


class TestStepwise:
    """The init/reset/step API the viewer animates."""

    def test_idle_before_init(self):
        """Stepping without a grid reports idle."""
        assert ShortestPathSearch().step().status == "idle"

    def test_run_without_grid_raises(self):
        """run() needs a bound grid."""
        with pytest.raises(ValueError):
            ShortestPathSearch().run()

    def test_steps_until_done(self, open_grid):
        """One finalization per step, then done stays done."""
        algo = ShortestPathSearch()
        algo.init(open_grid)
        running = 0
        res = algo.step()
        while res.status == "running":
            assert len(res.visited) == 1
            running += 1
            res = algo.step()
        assert res.status == "done"
        assert running == 24
        assert res.path[-1] == (4, 4)
        again = algo.step()
        assert again.status == "done"
        assert again.path == res.path
        assert again.metrics["path_len"] == 9

    def test_first_step_reaches_neighbours(self, open_grid):
        """The start's open neighbours are reached in up, down, left, right order."""
        open_grid.start = (2, 2)
        algo = ShortestPathSearch()
        algo.init(open_grid)
        res = algo.step()
        assert res.current == (2, 2)
        assert res.reached == [(1, 2), (3, 2), (2, 1), (2, 3)]

    def test_no_path_is_sticky(self, walled_row_grid):
        """After exhausting the frontier every step reports no_path."""
        algo = ShortestPathSearch()
        algo.init(walled_row_grid)
        result = algo.run()
        assert result.status == "unreachable"
        assert algo.step().status == "no_path"

    def test_reset_restarts(self, open_grid):
        """reset() restores the seeded state."""
        algo = ShortestPathSearch()
        algo.init(open_grid)
        first = algo.run()
        algo.reset()
        assert algo.visited == []
        assert algo.distance == {(0, 0): 0}
        assert algo.run().visited == first.visited
