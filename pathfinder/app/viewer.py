# pathfinder/app/viewer.py
#!/usr/bin/env python3
"""
Grid Pathfinder Viewer — paint walls, place start/finish, run the search

- Mouse:
    click / drag  -> paint walls, or place start / finish (see node type)
- Keyboard:
    [SPACE]      -> visualize
    [W]/[S]/[F]  -> node type: wall / start / finish
    [A]          -> animation on/off
    [X]          -> clear path
    [C]          -> clear grid
    [1]/[2]/[3]  -> load map
    [P]          -> save layout
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit
"""

import logging
import sys
import time
from typing import Callable, List, Optional, Tuple

import pygame

from pathfinder import config
from pathfinder.app import theme_skin as THEME
from pathfinder.app.session import VisualizerSession
from pathfinder.core.maps import load_map, save_map
from pathfinder.core.types import Cell, Grid

logger = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 360            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 28
FONT_NAME = None  # default pygame font
MAP_KEYS = list(config.MAP_FILES)


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback: Callable[[], None], *,
                 togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    @property
    def lit(self) -> bool:
        return self.active and self.togglable

    def fill(self) -> Tuple[int, int, int, int]:
        if self.lit:
            return THEME.BTN_ACTIVE
        return THEME.BTN_HOVER if self.hover else THEME.BTN_IDLE

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        pygame.draw.rect(base, self.fill(), base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)
        if self.lit:
            pygame.draw.rect(screen, THEME.BTN_BORDER_ON, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, THEME.BTN_TEXT)
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, session: VisualizerSession, map_key: str = "custom"):
        pygame.init()

        self.session = session
        self.selected_map_key = map_key
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        grid = session.grid
        self.cell_size = self._auto_cell_size(grid)
        grid_px_w = GRID_MARGIN*2 + grid.width * self.cell_size
        grid_px_h = GRID_MARGIN*2 + grid.height * self.cell_size
        win_w = grid_px_w + PANEL_W
        win_h = max(grid_px_h, 640)

        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Grid Pathfinder")

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

        self.clock = pygame.time.Clock()
        self._last_step_t = 0.0
        self._last_drag_cell: Optional[Cell] = None

    @property
    def grid(self) -> Grid:
        return self.session.grid

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)

        cs_by_w = avail_w // self.grid.width
        cs_by_h = avail_h // self.grid.height
        self.cell_size = int(max(6, min(cs_by_w, cs_by_h)))

        grid_plate_w = self.grid.width * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = self.grid.height * self.cell_size + 2 * GRID_MARGIN

        left_x = max(0, (win_w - (grid_plate_w + PANEL_W)) // 2)
        top_y  = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN,
                             self.canvas_rect.y + GRID_MARGIN)

        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right),
                                       win_h)
        self._build_buttons()

    def _auto_cell_size(self, grid: Grid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(10, min(CELL_SIZE_DEFAULT, target_h // grid.height))

    def cell_at(self, pos: Tuple[int, int]) -> Optional[Cell]:
        """Grid cell under a window pixel, or None outside the grid."""
        ox, oy = self._grid_origin
        x, y = pos
        if x < ox or y < oy:
            return None
        cell = ((y - oy) // self.cell_size, (x - ox) // self.cell_size)
        return cell if self.grid.in_bounds(cell) else None

    # ---------- loop ----------
    def run(self):
        while True:
            self._handle_events()
            if self.session.state == "Running":
                self._tick_playback()
            self._draw()
            self.clock.tick(60)

    def _tick_playback(self):
        t0 = time.time()
        elapsed = t0 - self._last_step_t
        step_interval = 1.0 / max(1, self.session.steps_per_sec)
        if elapsed >= step_interval:
            # catch up when steps/sec exceeds the frame rate
            n = max(1, int(elapsed / step_interval)) if self._last_step_t else 1
            self._last_step_t = t0
            self.session.advance(min(n, self.session.steps_per_sec))

    def _quit(self):
        pygame.quit()
        sys.exit(0)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self._quit()
            elif e.type == pygame.KEYDOWN:
                self._handle_key(e.key)
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                self._handle_mouse(e)

    def _handle_key(self, key: int):
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._quit()
        elif key == pygame.K_SPACE:
            self._visualize()
        elif key == pygame.K_w:
            self._set_node_type("wall")
        elif key == pygame.K_s:
            self._set_node_type("start")
        elif key == pygame.K_f:
            self._set_node_type("finish")
        elif key == pygame.K_a:
            self._toggle_animate()
        elif key == pygame.K_x:
            self._clear_path()
        elif key == pygame.K_c:
            self._clear_grid()
        elif key == pygame.K_p:
            self._save_layout()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self.session.bump_speed(+5)
        elif key in (pygame.K_MINUS, pygame.K_UNDERSCORE, pygame.K_KP_MINUS):
            self.session.bump_speed(-5)
        elif key in (pygame.K_1, pygame.K_2, pygame.K_3):
            idx = key - pygame.K_1
            if idx < len(MAP_KEYS):
                self._switch_map(MAP_KEYS[idx])

    def _handle_mouse(self, e: pygame.event.Event):
        for b in self._buttons:
            if b.handle_mouse(e):
                return
        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
            cell = self.cell_at(e.pos)
            self._last_drag_cell = cell
            if cell is not None:
                self.session.mouse_down(cell)
        elif e.type == pygame.MOUSEMOTION:
            cell = self.cell_at(e.pos)
            if cell is not None and cell != self._last_drag_cell:
                self._last_drag_cell = cell
                self.session.mouse_enter(cell)
        elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
            self._last_drag_cell = None
            self.session.mouse_up()

    # ---------- actions ----------
    def _visualize(self):
        self.session.visualize()
        self._last_step_t = 0.0

    def _set_node_type(self, node_type: str):
        self.session.set_node_type(node_type)
        self._refresh_active_states()

    def _toggle_animate(self):
        self.session.animate = not self.session.animate
        self._refresh_active_states()

    def _clear_path(self):
        self.session.clear_path()

    def _clear_grid(self):
        self.session.clear_grid()
        self.selected_map_key = "custom"
        self._layout(*self.screen.get_size())

    def _switch_map(self, key: str):
        if key not in config.MAP_FILES:
            return
        try:
            self.session.load_grid(load_map(config.MAP_FILES[key]))
        except (OSError, ValueError) as ex:
            logger.error("Failed to load map %s: %s", key, ex)
            return
        self.selected_map_key = key
        pygame.display.set_caption(f"Grid Pathfinder — {key}")
        self._layout(*self.screen.get_size())

    def _save_layout(self):
        try:
            save_map(self.grid, config.SAVE_PATH)
        except OSError as ex:
            logger.error("Failed to save layout to %s: %s", config.SAVE_PATH, ex)

    # ---------- drawing ----------
    def _draw(self):
        THEME.draw_backdrop(self.screen)
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _cell_rect(self, cell: Cell) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = cell
        return pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)

    def _draw_grid(self):
        cs = self.cell_size
        for row in range(self.grid.height):
            for col in range(self.grid.width):
                rect = self._cell_rect((row, col))
                color = THEME.WALL_DARK if self.grid.cells[row][col] else THEME.OPEN_GRAY
                pygame.draw.rect(self.screen, color, rect)
                pygame.draw.rect(self.screen, THEME.GRID_LINE, rect, 1)

        # overlays
        overlay = pygame.Surface((cs, cs), pygame.SRCALPHA)
        overlay.fill(THEME.VISITED_A)
        for cell in self.session.visited_shown:
            self.screen.blit(overlay, self._cell_rect(cell).topleft)

        pts = [self._cell_rect(c).center for c in self.session.path_shown]
        THEME.draw_path(self.screen, pts, self.session.finished)

        self._draw_badge(self.grid.start, THEME.START_BLUE, "S")
        self._draw_badge(self.grid.finish, THEME.FINISH_RED, "F")

    def _draw_badge(self, cell: Cell, color: Tuple[int, int, int], label: str):
        rect = self._cell_rect(cell)
        pygame.draw.circle(self.screen, color, rect.center, max(4, self.cell_size//2 - 2))
        txt = self.font_small.render(label, True, THEME.WHITE)
        self.screen.blit(txt, txt.get_rect(center=rect.center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8
        half = (w - 8) // 2

        def add(label, cb, rect, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, rect, cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Visualize", self._visualize, pygame.Rect(x, y, w, h)); y += h + gap
        add("Clear Path", self._clear_path, pygame.Rect(x, y, half, h))
        add("Clear Grid", self._clear_grid, pygame.Rect(x + half + 8, y, half, h)); y += h + gap

        third = (w - 16) // 3
        for i, node_type in enumerate(("wall", "start", "finish")):
            add(node_type.capitalize(), lambda t=node_type: self._set_node_type(t),
                pygame.Rect(x + i * (third + 8), y, third, h),
                togglable=True, store_as=f"btn_{node_type}")
        y += h + gap

        add("Animate", self._toggle_animate, pygame.Rect(x, y, w, h),
            togglable=True, store_as="btn_animate"); y += h + gap
        add("Speed −", lambda: self.session.bump_speed(-5), pygame.Rect(x, y, half, h))
        add("Speed +", lambda: self.session.bump_speed(+5), pygame.Rect(x + half + 8, y, half, h))
        y += h + gap

        for i, key in enumerate(MAP_KEYS):
            add(f"Map {i + 1}: {key.replace('_', ' ')}", lambda k=key: self._switch_map(k),
                pygame.Rect(x, y, w, h), togglable=True, store_as=f"btn_map_{key}")
            y += h + gap
        add("Save Layout", self._save_layout, pygame.Rect(x, y, w, h))

        self._refresh_active_states()

    def _refresh_active_states(self):
        for node_type in ("wall", "start", "finish"):
            btn = getattr(self, f"btn_{node_type}", None)
            if btn:
                btn.set_active(self.session.node_type == node_type)
        if hasattr(self, "btn_animate"):
            self.btn_animate.set_active(self.session.animate)
        for key in MAP_KEYS:
            btn = getattr(self, f"btn_map_{key}", None)
            if btn:
                btn.set_active(self.selected_map_key == key)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band
        THEME.glass_panel(self.screen, rb.inflate(-8, -8))
        THEME.draw_card(self.screen, pygame.Rect(rb.x + 10, rb.y + 10, rb.width - 20, 210))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=THEME.TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=THEME.ACCENT_GOLD)
        m = self.session.metrics()
        line(f"State: {self.session.state}")
        line(f"Visited: {m['visited']} / {m['visited_total']}")
        line(f"Path Len: {m['path_len']}")
        line(f"Walls: {m['walls']}")
        line("-" * 26)
        line(f"Mode: {self.session.node_type}   Map: {self.selected_map_key}")
        line(f"Speed: {self.session.steps_per_sec} steps/s")

        for b in self._buttons:
            b.draw(self.screen, self.font_small)


# ---------- main ----------
def main(grid: Optional[Grid] = None, map_key: str = "custom"):
    Viewer(VisualizerSession(grid), map_key=map_key).run()
