from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Tuple

CELL_SIZE = 50
DEFAULT_WIDTH = 700
DEFAULT_HEIGHT = 400
INITIAL_INTERVAL_MS = 220
SPEED_STEP_MS = 15
SPEED_FLOOR_MS = 80
SCORE_THRESHOLD = 3  # 3점마다 속도 증가
FPS = 60
THEME_NAMES = ("dark", "light")
DIRECTION_NAMES = ("up", "down", "left", "right")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class GameConfig:
    """Fixed tuning constants of one game, grouped so they can be passed around."""

    cell_size: int = CELL_SIZE
    default_width: int = DEFAULT_WIDTH
    default_height: int = DEFAULT_HEIGHT
    initial_interval_ms: int = INITIAL_INTERVAL_MS
    speed_step_ms: int = SPEED_STEP_MS
    speed_floor_ms: int = SPEED_FLOOR_MS
    score_threshold: int = SCORE_THRESHOLD
    fps: int = FPS
    start: Tuple[int, int] = field(default=(0, 0))
    start_direction: str = "right"
    default_theme: str = "dark"

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Build a config, letting SNAKE_* environment variables override defaults."""
        base = cls()
        config = replace(
            base,
            cell_size=_env_int("SNAKE_CELL_SIZE", base.cell_size),
            default_width=_env_int("SNAKE_WIDTH", base.default_width),
            default_height=_env_int("SNAKE_HEIGHT", base.default_height),
            initial_interval_ms=_env_int("SNAKE_INTERVAL_MS", base.initial_interval_ms),
            default_theme=os.getenv("SNAKE_THEME", base.default_theme).strip().lower() or base.default_theme,
        )
        config.validate()
        return config

    def validate(self) -> None:
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.default_width < self.cell_size or self.default_height < self.cell_size:
            raise ValueError(
                f"default size {self.default_width}x{self.default_height} is smaller than one cell ({self.cell_size})"
            )
        if self.speed_step_ms < 0:
            raise ValueError("speed_step_ms must not be negative")
        if self.score_threshold <= 0:
            raise ValueError("score_threshold must be positive")
        if self.fps <= 0:
            raise ValueError("fps must be positive")
        if not 0 < self.speed_floor_ms <= self.initial_interval_ms:
            raise ValueError(
                f"speed_floor_ms ({self.speed_floor_ms}) must be in (0, initial_interval_ms={self.initial_interval_ms}]"
            )
        if self.default_theme not in THEME_NAMES:
            raise ValueError(f"unknown theme {self.default_theme!r}, expected one of {THEME_NAMES}")
        if self.start_direction not in DIRECTION_NAMES:
            raise ValueError(f"unknown start direction {self.start_direction!r}")
        x, y = self.start
        width = self.default_width // self.cell_size * self.cell_size
        height = self.default_height // self.cell_size * self.cell_size
        if x % self.cell_size or y % self.cell_size or not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"start cell {self.start} is not a cell of the {width}x{height} grid")
