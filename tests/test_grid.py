import pytest

from grid import GridModel, cell_rect, snap_to_cells


def test_default_canvas_is_14_by_8_cells(grid):
    assert grid.columns == 14
    assert grid.rows == 8
    assert grid.size == (700, 400)


def test_contains_is_half_open(grid):
    assert grid.contains((0, 0))
    assert grid.contains((650, 350))
    assert not grid.contains((700, 0))
    assert not grid.contains((0, 400))
    assert not grid.contains((-50, 0))


def test_snap_to_cells_rounds_down():
    assert snap_to_cells(1920, 1080, 50) == (1900, 1050)
    assert snap_to_cells(700, 400, 50) == (700, 400)


def test_from_canvas_snaps_odd_sizes():
    grid = GridModel.from_canvas(725, 449, 50)
    assert grid.size == (700, 400)


@pytest.mark.parametrize("width,height,cell", [(30, 400, 50), (700, 400, 0)])
def test_snap_rejects_unusable_sizes(width, height, cell):
    with pytest.raises(ValueError):
        snap_to_cells(width, height, cell)


def test_cell_rect_applies_inset():
    assert cell_rect((150, 100), 50, inset=2) == (152, 102, 46, 46)
