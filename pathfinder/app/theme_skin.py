# pathfinder/app/theme_skin.py
"""
Dark skin for the viewer (visuals only; no logic)
- Backdrop: vertical dark gradient, cached by window size
- Panel: frosted glass underlay behind the metrics card and buttons
- Path: neon line, width pulse while revealing, colour pulse when done

The viewer stays the source of truth for state and interactivity; every
function here only reads what it is given.
"""

from __future__ import annotations
import math, time
from typing import Dict, List, Tuple
import pygame

# ---- palette ----
BLACK         = (0, 0, 0)
WHITE         = (255, 255, 255)
TEXT_LIGHT    = (230, 235, 240)
ACCENT_GOLD   = (255, 210, 0)
OPEN_GRAY     = (214, 218, 224)
WALL_DARK     = (34, 40, 52)
GRID_LINE     = (150, 156, 166)
START_BLUE    = (70, 130, 180)
FINISH_RED    = (220, 50, 47)
VISITED_A     = (0, 150, 255, 110)
PATH_NEON     = (255, 220, 60)

# panel colors
PANEL_FILL    = (18, 20, 28, 190)
PANEL_SHADOW  = (0, 0, 0, 140)
CARD_BG       = (24, 28, 36, 220)
CARD_HI       = (255, 255, 255, 18)

# button colors
BTN_IDLE      = (36, 40, 48, 220)
BTN_HOVER     = (46, 50, 60, 230)
BTN_ACTIVE    = (58, 86, 160, 235)
BTN_BORDER_ON = (120, 170, 255, 255)
BTN_TEXT      = (235, 238, 242)

# caches
_gradient_by_size: Dict[Tuple[int, int], pygame.Surface] = {}


# ---------- helpers ----------
def _rounded_rect(surface: pygame.Surface, rect: pygame.Rect, color, radius=16, width=0):
    pygame.draw.rect(surface, color, rect, width=width, border_radius=radius)


def glass_panel(screen: pygame.Surface, rect: pygame.Rect,
                fill_rgba=PANEL_FILL, shadow_rgba=PANEL_SHADOW):
    if rect.width <= 0 or rect.height <= 0:
        return
    shadow = pygame.Surface((rect.width + 18, rect.height + 18), pygame.SRCALPHA)
    _rounded_rect(shadow, pygame.Rect(9, 9, rect.width, rect.height), shadow_rgba, radius=20)
    screen.blit(shadow, (rect.x - 9, rect.y - 9))
    card = pygame.Surface(rect.size, pygame.SRCALPHA)
    _rounded_rect(card, pygame.Rect(0, 0, rect.width, rect.height), fill_rgba, radius=20)
    # subtle top sheen
    hi = pygame.Surface((rect.width, max(18, rect.height // 12)), pygame.SRCALPHA)
    pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=18)
    card.blit(hi, (0, 0))
    screen.blit(card, rect.topleft)


def draw_backdrop(screen: pygame.Surface):
    """Dark vertical gradient, rebuilt only when the window size changes."""
    size = screen.get_size()
    surf = _gradient_by_size.get(size)
    if surf is None:
        w, h = size
        surf = pygame.Surface(size)
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = (
                int(top[0] + (bot[0]-top[0]) * t),
                int(top[1] + (bot[1]-top[1]) * t),
                int(top[2] + (bot[2]-top[2]) * t),
            )
            pygame.draw.line(surf, c, (0, y), (w, y))
        _gradient_by_size.clear()
        _gradient_by_size[size] = surf
    screen.blit(surf, (0, 0))


def draw_path(screen: pygame.Surface, pts: List[Tuple[int, int]], finished: bool):
    if len(pts) < 2:
        return
    t = time.time()
    if finished:
        # pulse gold <-> white
        k = 0.5 * (1.0 + math.sin(t * 6.0))
        col = tuple(int(PATH_NEON[i] * (1 - k) + WHITE[i] * k) for i in range(3))
        width = 6
    else:
        col = PATH_NEON
        width = max(4, int(4 + 1.2 * abs(math.sin(t * 2.0))))

    glow = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    pygame.draw.lines(glow, (col[0], col[1], col[2], 70), False, pts, width + 3)
    screen.blit(glow, (0, 0), special_flags=pygame.BLEND_ADD)
    pygame.draw.lines(screen, col, False, pts, width)


def draw_card(screen: pygame.Surface, rect: pygame.Rect):
    card = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
    hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
    pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
    card.blit(hi, (0, 0))
    screen.blit(card, rect.topleft)
