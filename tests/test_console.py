"""
Tests for headless mode and the module entry point.
"""

import io

from pathfinder.__main__ import main
from pathfinder.app.console import run_console, summary
from pathfinder.core.dijkstra import search


class TestConsole:
    """run_console() output."""

    def test_reachable_output(self, open_grid):
        """Prints the drawn grid and a summary, returns 0."""
        out = io.StringIO()
        assert run_console(open_grid, out=out) == 0
        lines = out.getvalue().splitlines()
        assert lines[0].startswith("S")
        assert lines[4].endswith("F")
        assert lines[-1].startswith("reachable: (0, 0) -> (4, 4) in 8 steps")

    def test_unreachable_output(self, walled_row_grid):
        """Unreachable finish returns 1."""
        out = io.StringIO()
        assert run_console(walled_row_grid, out=out) == 1
        assert "unreachable" in out.getvalue()

    def test_summary_counts_visits(self, gap_row_grid):
        result = search(gap_row_grid)
        assert f"{len(result.visited)} cells visited" in summary(result)


class TestMain:
    """python -m pathfinder --headless."""

    def test_headless_bundled_map(self, capsys):
        assert main(["--headless", "--map=wall_with_gap"]) == 0
        assert "in 24 steps" in capsys.readouterr().out

    def test_headless_walled_off(self, capsys):
        assert main(["--headless", "--map=walled_off"]) == 1

    def test_headless_default_grid(self, capsys):
        assert main(["--headless"]) == 0
        assert "reachable" in capsys.readouterr().out

    def test_missing_map_file(self, tmp_path):
        """An unreadable map exits with status 2."""
        assert main(["--headless", f"--map={tmp_path / 'missing.json'}"]) == 2
