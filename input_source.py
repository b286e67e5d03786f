from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

import pygame


class Intent(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TOGGLE_THEME = "toggle_theme"
    TOGGLE_FULLSCREEN = "toggle_fullscreen"
    QUIT = "quit"

    @property
    def is_direction(self) -> bool:
        return self in (Intent.UP, Intent.DOWN, Intent.LEFT, Intent.RIGHT)


KEY_TO_INTENT: Dict[int, Intent] = {
    pygame.K_UP: Intent.UP,
    pygame.K_w: Intent.UP,
    pygame.K_DOWN: Intent.DOWN,
    pygame.K_s: Intent.DOWN,
    pygame.K_LEFT: Intent.LEFT,
    pygame.K_a: Intent.LEFT,
    pygame.K_RIGHT: Intent.RIGHT,
    pygame.K_d: Intent.RIGHT,
    pygame.K_t: Intent.TOGGLE_THEME,
    pygame.K_f: Intent.TOGGLE_FULLSCREEN,
    pygame.K_ESCAPE: Intent.QUIT,
}


def translate_event(event: pygame.event.Event) -> Optional[Intent]:
    """Map a pygame event to a game intent, or None when the game does not care."""
    if event.type == pygame.QUIT:
        return Intent.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_TO_INTENT.get(event.key)
    return None
