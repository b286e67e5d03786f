from __future__ import annotations

import random
from typing import Protocol

from grid import GridModel, Point


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def spawn_food(grid: GridModel, rng: RandomSource = random) -> Point:
    """Pick a random cell of the grid for the next food item.

    Each axis is drawn independently and uniformly. Cells occupied by the
    snake are not excluded, so food can appear under the body.
    """
    x = rng.randrange(grid.columns) * grid.cell_size
    y = rng.randrange(grid.rows) * grid.cell_size
    return (x, y)
