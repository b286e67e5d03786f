import random

from food import spawn_food
from grid import GridModel


def test_food_lands_on_a_cell_inside_the_grid(grid, rng):
    for _ in range(500):
        x, y = spawn_food(grid, rng)
        assert grid.contains((x, y))
        assert x % grid.cell_size == 0
        assert y % grid.cell_size == 0


def test_every_cell_is_reachable(rng):
    grid = GridModel(150, 100, 50)
    seen = {spawn_food(grid, rng) for _ in range(500)}
    assert seen == {(x, y) for x in (0, 50, 100) for y in (0, 50)}


def test_same_seed_same_sequence(grid):
    a = [spawn_food(grid, random.Random(7)) for _ in range(3)]
    b = [spawn_food(grid, random.Random(7)) for _ in range(3)]
    assert a == b


def test_food_may_land_on_the_snake():
    # Known quirk: occupancy is not checked. On a one-cell grid the only
    # possible food cell is the one the snake sits on.
    grid = GridModel(50, 50, 50)
    snake_body = [(0, 0)]
    assert spawn_food(grid, random.Random(0)) in snake_body
