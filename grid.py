from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Point = Tuple[int, int]
Size = Tuple[int, int]


def snap_to_cells(width: int, height: int, cell_size: int) -> Size:
    """Return the largest multiples of cell_size that fit in width x height."""
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    snapped = (width // cell_size * cell_size, height // cell_size * cell_size)
    if snapped[0] <= 0 or snapped[1] <= 0:
        raise ValueError(f"{width}x{height} canvas cannot hold a single {cell_size}px cell")
    return snapped


@dataclass(frozen=True)
class GridModel:
    """Discrete coordinate space of the playfield.

    Coordinates stay in pixel units (x, y) that are exact multiples of
    cell_size, so the renderer can draw them without conversion.
    """

    width: int
    height: int
    cell_size: int

    @classmethod
    def from_canvas(cls, width: int, height: int, cell_size: int) -> "GridModel":
        snapped_width, snapped_height = snap_to_cells(width, height, cell_size)
        return cls(snapped_width, snapped_height, cell_size)

    @property
    def columns(self) -> int:
        return self.width // self.cell_size

    @property
    def rows(self) -> int:
        return self.height // self.cell_size

    @property
    def size(self) -> Size:
        return (self.width, self.height)

    def contains(self, point: Point) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height


def cell_rect(point: Point, cell_size: int, inset: int = 0) -> Tuple[int, int, int, int]:
    """Return an (x, y, w, h) box for the cell at point, shrunk by inset on each side."""
    x, y = point
    side = max(1, cell_size - inset * 2)
    return (x + inset, y + inset, side, side)
