"""
Smoke tests for the pygame viewer on the SDL dummy video driver.
"""

import pytest

pygame = pytest.importorskip("pygame")

from pathfinder.app.session import VisualizerSession  # noqa: E402
from pathfinder.core.types import Grid  # noqa: E402


@pytest.fixture
def viewer(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    from pathfinder.app.viewer import Viewer

    session = VisualizerSession(Grid.empty(6, 6, (0, 0), (5, 5)), animate=False)
    v = Viewer(session)
    yield v
    pygame.quit()


class TestViewer:
    """Headless construction, input mapping and one frame of drawing."""

    def test_cell_at_round_trip(self, viewer):
        """The centre of a drawn cell maps back to that cell."""
        assert viewer.cell_at(viewer._cell_rect((2, 3)).center) == (2, 3)
        assert viewer.cell_at((0, 0)) is None

    def test_keys_switch_node_type(self, viewer):
        viewer._handle_key(pygame.K_s)
        assert viewer.session.node_type == "start"
        assert viewer.btn_start.active
        viewer._handle_key(pygame.K_w)
        assert viewer.session.node_type == "wall"

    def test_click_paints_wall(self, viewer):
        pos = viewer._cell_rect((1, 1)).center
        viewer._handle_mouse(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1))
        viewer._handle_mouse(pygame.event.Event(pygame.MOUSEMOTION, pos=pos, rel=(0, 0), buttons=(1, 0, 0)))
        viewer._handle_mouse(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1))
        assert viewer.grid.is_block((1, 1))

    def test_visualize_and_draw(self, viewer):
        viewer._handle_key(pygame.K_SPACE)
        assert viewer.session.state == "Done"
        viewer._draw()

    def test_switch_map(self, viewer):
        viewer._switch_map("walled_off")
        assert viewer.selected_map_key == "walled_off"
        assert (viewer.grid.height, viewer.grid.width) == (20, 20)

    def test_button_colors_follow_theme(self, viewer):
        """Button fills come from the theme for idle, hover and active."""
        from pathfinder.app import theme_skin as THEME

        btn = viewer.btn_wall
        assert btn.fill() == THEME.BTN_ACTIVE
        viewer._set_node_type("start")
        assert btn.fill() == THEME.BTN_IDLE
        btn.hover = True
        assert btn.fill() == THEME.BTN_HOVER
