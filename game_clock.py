from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)

TickFn = Callable[[], bool]


class ClockState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class GameClock:
    """Fixed-interval tick driver fed by the frame loop.

    The frame loop reports elapsed milliseconds through ``advance``; the clock
    calls ``on_tick`` once per full interval, never twice in one frame. There
    is only ever one timer: ``reschedule`` drops the accumulated time of the
    old one before the new interval starts counting. ``on_tick`` returns False
    when the game is over, which stops the clock for good.
    """

    def __init__(self) -> None:
        self.state = ClockState.STOPPED
        self.interval_ms: Optional[int] = None
        self.tick_count = 0
        self._elapsed_ms = 0.0
        self._on_tick: Optional[TickFn] = None
        self._finished = False

    @property
    def running(self) -> bool:
        return self.state is ClockState.RUNNING

    @property
    def finished(self) -> bool:
        return self._finished

    def start(self, interval_ms: int, on_tick: TickFn) -> None:
        if self._finished:
            raise RuntimeError("clock was stopped at game over and cannot be restarted")
        self._check_interval(interval_ms)
        self._on_tick = on_tick
        self._arm(interval_ms)
        logger.debug("Clock started at %d ms", interval_ms)

    def reschedule(self, interval_ms: int) -> None:
        """Replace the running timer with one using interval_ms."""
        if not self.running:
            raise RuntimeError("cannot reschedule a stopped clock")
        self._check_interval(interval_ms)
        previous = self.interval_ms
        self._arm(interval_ms)
        logger.debug("Clock rescheduled %s -> %d ms", previous, interval_ms)

    reconfigure = reschedule

    def stop(self) -> None:
        if self.running:
            logger.debug("Clock stopped after %d ticks", self.tick_count)
        self.state = ClockState.STOPPED
        self._elapsed_ms = 0.0
        self._finished = True

    def advance(self, elapsed_ms: float) -> int:
        """Account for elapsed_ms of wall time and fire the tick if one is due.

        At most one tick fires per call, so a slow frame never turns into a
        burst of moves without input in between. Returns the number of ticks
        fired (0 or 1).
        """
        if not self.running or self.interval_ms is None or self._on_tick is None:
            return 0
        self._elapsed_ms += max(0.0, elapsed_ms)
        if self._elapsed_ms < self.interval_ms:
            return 0
        # 밀린 시간은 최대 한 틱 분량까지만 남긴다.
        self._elapsed_ms = min(self._elapsed_ms - self.interval_ms, float(self.interval_ms))
        self.tick_count += 1
        # reschedule()가 콜백 안에서 불리면 _arm()이 누적 시간을 0으로 되돌린다.
        if not self._on_tick():
            self.stop()
        return 1

    def _arm(self, interval_ms: int) -> None:
        self.interval_ms = interval_ms
        self._elapsed_ms = 0.0
        self.state = ClockState.RUNNING

    @staticmethod
    def _check_interval(interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError(f"tick interval must be positive, got {interval_ms}")
