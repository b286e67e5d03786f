from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Optional

import pygame

from food import spawn_food
from game_clock import GameClock
from grid import GridModel, Point, Size
from input_source import Intent, translate_event
from renderer import Fonts, RenderState, render_frame
from settings import GameConfig
from snake_state import Direction, SnakeState, TickResult
from speed import next_interval
from theme import ThemeAndViewport

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Snake"
INTENT_TO_DIRECTION = {
    Intent.UP: Direction.UP,
    Intent.DOWN: Direction.DOWN,
    Intent.LEFT: Direction.LEFT,
    Intent.RIGHT: Direction.RIGHT,
}

RenderFn = Callable[["GameSession"], None]


@dataclass
class GameSession:
    """Everything one game owns: snake, food, speed, clock and display settings.

    Nothing is kept in module globals, so a session can be driven tick by
    tick without a window (``render`` is optional).
    """

    config: GameConfig
    viewport: ThemeAndViewport
    snake: SnakeState
    food: Point
    interval_ms: int
    clock: GameClock = field(default_factory=GameClock)
    rng: random.Random = field(default_factory=random.Random)
    renderer: Optional[RenderFn] = None
    dirty: bool = True

    @classmethod
    def create(
        cls,
        config: GameConfig,
        *,
        rng: Optional[random.Random] = None,
        food: Optional[Point] = None,
        theme_name: Optional[str] = None,
    ) -> "GameSession":
        config.validate()
        rng = rng or random.Random()
        viewport = ThemeAndViewport(
            config.cell_size,
            (config.default_width, config.default_height),
            theme_name or config.default_theme,
        )
        snake = SnakeState.new(config.start, Direction.from_name(config.start_direction))
        if food is None:
            # 첫 먹이도 뱀 위치를 피하지 않는다.
            food = spawn_food(viewport.grid, rng)
        return cls(
            config=config,
            viewport=viewport,
            snake=snake,
            food=food,
            interval_ms=config.initial_interval_ms,
            rng=rng,
        )

    @property
    def grid(self) -> GridModel:
        return self.viewport.grid

    def start(self) -> None:
        logger.info(
            "Game started on %dx%d grid (%d ms/tick)", self.grid.columns, self.grid.rows, self.interval_ms
        )
        self.clock.start(self.interval_ms, self._on_tick)

    def handle_intent(self, intent: Intent, screen_size: Size) -> Optional[Size]:
        """Apply a player intent; return the new canvas size if the viewport changed."""
        logger.debug("Intent %s", intent.value)
        if intent.is_direction:
            self.snake.set_direction(INTENT_TO_DIRECTION[intent])
            return None
        if intent is Intent.TOGGLE_THEME:
            self.viewport.toggle_theme()
            self.dirty = True
            return None
        if intent is Intent.TOGGLE_FULLSCREEN:
            size = self.viewport.toggle_fullscreen(screen_size)
            self.dirty = True
            return size
        return None

    def update(self) -> bool:
        """Run one simulation step. Returns False once the game is over."""
        if self.snake.is_over:
            return False
        result = self.snake.tick(self.grid, self.food)
        if result is TickResult.GREW:
            self.food = spawn_food(self.grid, self.rng)
            self._recompute_speed()
            logger.info("Score %d, length %d", self.snake.score, len(self.snake.body))
        elif result.is_collision:
            logger.info("Game over (%s) with score %d", result.value, self.snake.score)
        self.dirty = True
        return not self.snake.is_over

    def render(self) -> None:
        if self.renderer is not None:
            self.renderer(self)
        self.dirty = False

    def _recompute_speed(self) -> None:
        interval = next_interval(
            self.interval_ms,
            self.snake.score,
            self.config.speed_floor_ms,
            self.config.speed_step_ms,
            self.config.score_threshold,
        )
        if interval == self.interval_ms:
            return
        logger.info("Speed up: %d -> %d ms/tick", self.interval_ms, interval)
        self.interval_ms = interval
        if self.clock.running:
            self.clock.reschedule(interval)

    def _on_tick(self) -> bool:
        keep_going = self.update()
        self.render()
        return keep_going


def _set_display_mode(viewport: ThemeAndViewport) -> pygame.Surface:
    flags = pygame.FULLSCREEN if viewport.fullscreen else 0
    return pygame.display.set_mode(viewport.size, flags)


def run_game(config: Optional[GameConfig] = None, *, fullscreen: bool = False, theme: Optional[str] = None, quit_on_exit: bool = True) -> int:
    """Open the window and play until the player quits. Returns the final score."""
    config = config or GameConfig()
    pygame.init()
    pygame.display.set_caption(WINDOW_TITLE)
    # set_mode 이전에 읽어야 데스크톱 해상도가 나온다.
    info = pygame.display.Info()
    screen_size: Size = (info.current_w, info.current_h)
    if screen_size[0] < config.cell_size or screen_size[1] < config.cell_size:
        # 더미 드라이버 등에서는 해상도를 알 수 없다.
        logger.warning("Desktop size unknown (%dx%d), fullscreen uses the default size", *screen_size)
        screen_size = (config.default_width, config.default_height)

    session = GameSession.create(config, theme_name=theme)
    if fullscreen:
        session.viewport.toggle_fullscreen(screen_size)
    screen = _set_display_mode(session.viewport)
    render_state = RenderState(fonts=Fonts.load())

    def _draw(current: GameSession) -> None:
        render_frame(
            screen,
            render_state,
            body=current.snake.body,
            food=current.food,
            score=current.snake.score,
            status=current.snake.status,
            theme=current.viewport.theme,
            grid=current.grid,
        )

    session.renderer = _draw
    session.start()
    clock = pygame.time.Clock()

    running = True
    while running:
        delta_ms = clock.tick(config.fps)

        for event in pygame.event.get():
            intent = translate_event(event)
            if intent is None:
                continue
            if intent is Intent.QUIT:
                running = False
                break
            new_size = session.handle_intent(intent, screen_size)
            if new_size is not None:
                screen = _set_display_mode(session.viewport)

        if not running:
            break

        # 입력은 틱 사이에서만 반영되고, 틱은 그 다음에 돈다.
        session.clock.advance(delta_ms)
        if session.dirty:
            session.render()
        pygame.display.flip()

    session.clock.stop()
    logger.info("Window closed with score %d", session.snake.score)
    if quit_on_exit:
        pygame.quit()
    return session.snake.score


if __name__ == "__main__":
    run_game()
