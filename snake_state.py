from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from grid import GridModel, Point

logger = logging.getLogger(__name__)


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        return cls[name.strip().upper()]


class GameStatus(Enum):
    RUNNING = "running"
    OVER = "over"


class TickResult(Enum):
    MOVED = "moved"
    GREW = "grew"
    COLLIDED_WALL = "collided_wall"
    COLLIDED_SELF = "collided_self"

    @property
    def is_collision(self) -> bool:
        return self in (TickResult.COLLIDED_WALL, TickResult.COLLIDED_SELF)


@dataclass
class SnakeState:
    """Body, heading, score and status of the snake.

    The body is ordered tail first, so ``body[-1]`` is the head. Direction
    changes are buffered in ``pending_direction`` and only applied when the
    next tick starts.
    """

    body: List[Point]
    direction: Direction = Direction.RIGHT
    pending_direction: Optional[Direction] = None
    score: int = 0
    status: GameStatus = GameStatus.RUNNING
    last_result: Optional[TickResult] = field(default=None)

    def __post_init__(self) -> None:
        if not self.body:
            raise ValueError("snake body must not be empty")
        if self.status is GameStatus.OVER and (self.last_result is None or not self.last_result.is_collision):
            raise ValueError("a finished snake needs the collision that ended it as last_result")

    @classmethod
    def new(cls, start: Point = (0, 0), direction: Direction = Direction.RIGHT) -> "SnakeState":
        return cls(body=[start], direction=direction)

    @property
    def head(self) -> Point:
        return self.body[-1]

    @property
    def is_over(self) -> bool:
        return self.status is GameStatus.OVER

    def set_direction(self, requested: Direction) -> bool:
        """Queue a heading for the next tick. Reversals and post-game input are ignored."""
        if self.is_over or requested is self.direction.opposite:
            logger.debug("Ignoring direction %s (current=%s, status=%s)", requested.name, self.direction.name, self.status.value)
            return False
        self.pending_direction = requested
        return True

    def next_head(self, cell_size: int) -> Point:
        dx, dy = self.direction.vector
        x, y = self.head
        return (x + dx * cell_size, y + dy * cell_size)

    def tick(self, grid: GridModel, food: Point) -> TickResult:
        """Advance the snake by one cell and report what happened.

        Collision is checked against the whole body as it was before the move,
        tail included. Eating food keeps the tail, so the snake grows by one.
        """
        if self.is_over:
            # 게임오버 이후의 틱은 아무것도 바꾸지 않는다.
            return self.last_result

        if self.pending_direction is not None:
            self.direction = self.pending_direction
            self.pending_direction = None

        new_head = self.next_head(grid.cell_size)

        if not grid.contains(new_head):
            return self._finish(TickResult.COLLIDED_WALL)
        if new_head in self.body:
            return self._finish(TickResult.COLLIDED_SELF)

        self.body.append(new_head)
        if new_head == food:
            self.score += 1
            self.last_result = TickResult.GREW
        else:
            self.body.pop(0)
            self.last_result = TickResult.MOVED
        return self.last_result

    def _finish(self, result: TickResult) -> TickResult:
        self.status = GameStatus.OVER
        self.last_result = result
        return result
