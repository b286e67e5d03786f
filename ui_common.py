from __future__ import annotations

import pygame


def draw_overlay(surface: pygame.Surface, *, alpha: int = 180) -> None:
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, max(0, min(255, alpha))))
    surface.blit(overlay, (0, 0))


def draw_text(surface: pygame.Surface, font: pygame.font.Font, text: str, pos: tuple[int, int], *, color) -> pygame.Rect:
    rendered = font.render(text, True, color)
    return surface.blit(rendered, pos)


def draw_text_center(surface: pygame.Surface, font: pygame.font.Font, text: str, y: int, *, color=(255, 255, 255)) -> None:
    rendered = font.render(text, True, color)
    rect = rendered.get_rect(center=(surface.get_width() // 2, y))
    surface.blit(rendered, rect)


def draw_game_over_ui(
    surface: pygame.Surface,
    *,
    font_title: pygame.font.Font,
    font_small: pygame.font.Font,
    score: int,
    hint: str,
) -> None:
    """Darken the frame and print the game-over banner with the final score."""
    draw_overlay(surface, alpha=180)

    _, h = surface.get_size()
    draw_text_center(surface, font_title, "GAME OVER", h // 2)
    draw_text_center(surface, font_small, f"Score: {score}", h // 2 + 40)
    draw_text_center(surface, font_small, hint, h // 2 + 66, color=(200, 200, 200))
