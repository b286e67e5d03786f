from types import SimpleNamespace

import pygame

import snake_game
from settings import GameConfig


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=0, unicode="", scancode=0)


def test_window_loop_handles_toggles_and_quit(monkeypatch):
    # One batch of events per frame: fullscreen, theme, fullscreen back, then ESC.
    frames = [[_key(pygame.K_f)], [_key(pygame.K_t)], [_key(pygame.K_f)], [_key(pygame.K_ESCAPE)]]
    monkeypatch.setattr(pygame.event, "get", lambda *a, **kw: frames.pop(0) if frames else [])
    monkeypatch.setattr(pygame.display, "Info", lambda: SimpleNamespace(current_w=1366, current_h=768))

    modes = []
    real_set_display_mode = snake_game._set_display_mode

    def recording_set_display_mode(viewport):
        modes.append((viewport.size, viewport.fullscreen, viewport.theme_name))
        return real_set_display_mode(viewport)

    monkeypatch.setattr(snake_game, "_set_display_mode", recording_set_display_mode)

    snake_game.run_game(GameConfig())

    assert frames == []
    assert modes == [
        ((700, 400), False, "dark"),
        ((1350, 750), True, "dark"),
        ((700, 400), False, "light"),
    ]


def test_window_close_ends_loop(monkeypatch):
    monkeypatch.setattr(pygame.event, "get", lambda *a, **kw: [pygame.event.Event(pygame.QUIT)])
    assert snake_game.run_game(GameConfig(), theme="light") == 0
