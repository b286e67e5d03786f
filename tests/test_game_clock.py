import pytest

from game_clock import ClockState, GameClock


def test_fires_once_per_interval():
    clock = GameClock()
    ticks = []
    clock.start(100, lambda: ticks.append(1) or True)
    assert clock.advance(99) == 0
    assert clock.advance(1) == 1
    assert clock.advance(150) == 1
    # 50 ms carried over from the previous frame.
    assert clock.advance(50) == 1
    assert len(ticks) == 3


def test_slow_frame_fires_a_single_tick():
    clock = GameClock()
    ticks = []
    clock.start(100, lambda: ticks.append(1) or True)
    assert clock.advance(700) == 1
    # Backlog is capped at one interval: one more tick is owed, then it waits.
    assert clock.advance(0) == 1
    assert clock.advance(0) == 0
    assert clock.advance(99) == 0
    assert clock.advance(1) == 1
    assert len(ticks) == 3


def test_game_over_stops_for_good():
    clock = GameClock()
    calls = []

    def on_tick():
        calls.append(1)
        return len(calls) < 2

    clock.start(100, on_tick)
    assert clock.advance(1000) == 1
    assert clock.running
    assert clock.advance(1000) == 1
    assert clock.state is ClockState.STOPPED
    assert clock.finished
    assert clock.advance(1000) == 0
    with pytest.raises(RuntimeError):
        clock.start(100, on_tick)


def test_reschedule_drops_partial_time():
    clock = GameClock()
    ticks = []
    clock.start(220, lambda: ticks.append(1) or True)
    clock.advance(200)
    clock.reschedule(205)
    assert clock.advance(204) == 0
    assert clock.advance(1) == 1
    assert clock.interval_ms == 205


def test_reschedule_from_inside_tick_restarts_timing():
    clock = GameClock()
    ticks = []

    def on_tick():
        ticks.append(clock.interval_ms)
        if len(ticks) == 1:
            clock.reschedule(50)
        return True

    clock.start(100, on_tick)
    # First tick fires at 100 and swaps the timer; leftover 400 ms is dropped.
    assert clock.advance(500) == 1
    assert clock.advance(50) == 1
    assert ticks == [100, 50]


def test_stop_is_terminal():
    clock = GameClock()
    clock.start(100, lambda: True)
    clock.stop()
    assert clock.advance(1000) == 0
    with pytest.raises(RuntimeError):
        clock.reschedule(50)


def test_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        GameClock().start(0, lambda: True)
