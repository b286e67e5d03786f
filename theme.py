from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from grid import GridModel, Size, snap_to_cells

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Theme:
    """Named colour palette used by the renderer."""

    name: str
    background: str
    grid_line: str
    body: str
    head: str
    food: str
    text: str


THEMES: Dict[str, Theme] = {
    "dark": Theme(
        name="dark",
        background="#0f172a",
        grid_line="#1e293b",
        body="#22c55e",
        head="#4ade80",
        food="#ef4444",
        text="#e5e7eb",
    ),
    "light": Theme(
        name="light",
        background="#ecfeff",
        grid_line="#cbd5e1",
        body="#0f766e",
        head="#14b8a6",
        food="#dc2626",
        text="#0f172a",
    ),
}


class ThemeAndViewport:
    """Display settings shared by the whole window: palette and canvas size.

    Game logic never reads this; only the renderer and the session that
    resizes the window do.
    """

    def __init__(self, cell_size: int, default_size: Size, theme_name: str = "dark") -> None:
        if theme_name not in THEMES:
            raise ValueError(f"unknown theme {theme_name!r}")
        self.cell_size = cell_size
        self.default_size = snap_to_cells(default_size[0], default_size[1], cell_size)
        self.size: Size = self.default_size
        self.fullscreen = False
        self.theme_name = theme_name

    @property
    def theme(self) -> Theme:
        return THEMES[self.theme_name]

    @property
    def grid(self) -> GridModel:
        return GridModel.from_canvas(self.size[0], self.size[1], self.cell_size)

    def toggle_theme(self) -> Theme:
        names: Tuple[str, ...] = tuple(THEMES)
        self.theme_name = names[(names.index(self.theme_name) + 1) % len(names)]
        logger.info("Theme switched to %s", self.theme_name)
        return self.theme

    def toggle_fullscreen(self, screen_size: Size) -> Size:
        """Enter or leave fullscreen and return the new canvas size.

        Snake and food are not moved; after shrinking they may sit outside
        the new bounds.
        """
        if self.fullscreen:
            self.fullscreen = False
            self.size = self.default_size
        else:
            self.fullscreen = True
            self.size = snap_to_cells(screen_size[0], screen_size[1], self.cell_size)
        logger.info("Viewport %s at %dx%d", "fullscreen" if self.fullscreen else "windowed", *self.size)
        return self.size
