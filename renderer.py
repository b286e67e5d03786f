from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List

import pygame

from grid import GridModel, Point, cell_rect
from path_utils import asset_path
from snake_state import GameStatus
from theme import Theme
from ui_common import draw_game_over_ui, draw_text

logger = logging.getLogger(__name__)

FONT_FILE = asset_path("fonts", "Poppins-Regular.ttf")
FONT_CANDIDATES = ("Poppins", "Segoe UI", "Helvetica", "Arial")
HINT_TEXT = "T: Theme | F: Fullscreen"
GAME_OVER_HINT = "ESC: quit"
PULSE_STEP = 0.1
PULSE_AMPLITUDE = 0.12
GLOW_ALPHA = 70


def load_game_font(size: int) -> pygame.font.Font:
    """Load Poppins if bundled or installed, otherwise fall back to pygame's default font."""
    if FONT_FILE.exists():
        try:
            return pygame.font.Font(FONT_FILE.as_posix(), size)
        except OSError:
            logger.warning("Could not load %s, trying system fonts", FONT_FILE)

    for candidate in FONT_CANDIDATES:
        font_name = pygame.font.match_font(candidate)
        if font_name:
            return pygame.font.Font(font_name, size)

    return pygame.font.Font(None, size)


@dataclass
class Fonts:
    score: pygame.font.Font
    hint: pygame.font.Font
    title: pygame.font.Font

    @classmethod
    def load(cls) -> "Fonts":
        return cls(score=load_game_font(18), hint=load_game_font(14), title=load_game_font(36))


@dataclass
class RenderState:
    """Per-window drawing state that has no effect on the game itself."""

    fonts: Fonts
    pulse: float = 0.0
    frames: int = field(default=0)


def draw_background(surface: pygame.Surface, theme: Theme) -> None:
    surface.fill(pygame.Color(theme.background))


def draw_grid(surface: pygame.Surface, grid: GridModel, theme: Theme) -> None:
    """Stroke cell borders over the whole grid, outer edges included."""
    color = pygame.Color(theme.grid_line)
    for x in range(0, grid.width + 1, grid.cell_size):
        pygame.draw.line(surface, color, (x, 0), (x, grid.height), 1)
    for y in range(0, grid.height + 1, grid.cell_size):
        pygame.draw.line(surface, color, (0, y), (grid.width, y), 1)


def draw_rounded_cell(surface: pygame.Surface, point: Point, cell_size: int, color: pygame.Color) -> None:
    inset = max(1, cell_size // 25)
    pygame.draw.rect(surface, color, pygame.Rect(cell_rect(point, cell_size, inset)), border_radius=max(2, cell_size // 5))


def draw_glow(surface: pygame.Surface, point: Point, cell_size: int, color: pygame.Color) -> None:
    # canvas shadowBlur 대신 반투명 사각형을 한 겹 더 깐다.
    spread = max(2, cell_size // 6)
    glow = pygame.Surface((cell_size + spread * 2, cell_size + spread * 2), pygame.SRCALPHA)
    pygame.draw.rect(glow, (color.r, color.g, color.b, GLOW_ALPHA), glow.get_rect(), border_radius=cell_size // 3)
    surface.blit(glow, (point[0] - spread, point[1] - spread))


def draw_snake(surface: pygame.Surface, body: List[Point], cell_size: int, theme: Theme) -> None:
    """Draw each segment as a rounded cell; the head (last segment) gets its own colour."""
    body_color = pygame.Color(theme.body)
    head_color = pygame.Color(theme.head)
    for segment in body:
        draw_glow(surface, segment, cell_size, body_color)
    for idx, segment in enumerate(body):
        color = head_color if idx == len(body) - 1 else body_color
        draw_rounded_cell(surface, segment, cell_size, color)


def draw_food(surface: pygame.Surface, food: Point, cell_size: int, theme: Theme, pulse: float) -> None:
    scale = 1 + math.sin(pulse) * PULSE_AMPLITUDE
    radius = max(1, int(cell_size * 0.36 * scale))
    center = (food[0] + cell_size // 2, food[1] + cell_size // 2)
    pygame.draw.circle(surface, pygame.Color(theme.food), center, radius)


def draw_hud(surface: pygame.Surface, fonts: Fonts, score: int, theme: Theme) -> None:
    color = pygame.Color(theme.text)
    draw_text(surface, fonts.score, f"Score: {score}", (20, 12), color=color)
    draw_text(surface, fonts.hint, HINT_TEXT, (20, 36), color=color)


def render_frame(
    surface: pygame.Surface,
    state: RenderState,
    *,
    body: List[Point],
    food: Point,
    score: int,
    status: GameStatus,
    theme: Theme,
    grid: GridModel,
) -> None:
    """Draw one full frame. Nothing here feeds back into the game state."""
    draw_background(surface, theme)
    draw_grid(surface, grid, theme)
    draw_snake(surface, body, grid.cell_size, theme)

    state.pulse += PULSE_STEP
    state.frames += 1
    draw_food(surface, food, grid.cell_size, theme, state.pulse)

    draw_hud(surface, state.fonts, score, theme)

    if status is GameStatus.OVER:
        draw_game_over_ui(
            surface,
            font_title=state.fonts.title,
            font_small=state.fonts.score,
            score=score,
            hint=GAME_OVER_HINT,
        )
