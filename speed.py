from __future__ import annotations


def next_interval(current: int, score: int, floor: int, step: int, threshold: int = 3) -> int:
    """Return the tick interval to use after reaching score.

    The interval shrinks by step each time score hits a positive multiple of
    threshold, but never below floor.
    """
    if score > 0 and score % threshold == 0 and current - step >= floor:
        return current - step
    return current
