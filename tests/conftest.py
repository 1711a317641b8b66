"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path

import pytest

from pathfinder.core.maps import parse_ascii
from pathfinder.core.types import Grid


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def open_grid() -> Grid:
    """5x5 grid without walls, start top-left, finish bottom-right."""
    return Grid.empty(5, 5, (0, 0), (4, 4))


@pytest.fixture
def walled_row_grid() -> Grid:
    """A full wall row separates start from finish."""
    return parse_ascii(
        """
        S....
        .....
        #####
        .....
        ....F
        """
    )


@pytest.fixture
def gap_row_grid() -> Grid:
    """A wall row with a single gap at (2, 3)."""
    return parse_ascii(
        """
        S....
        .....
        ###.#
        .....
        ....F
        """
    )
