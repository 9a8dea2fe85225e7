"""Spatial binning: an acceleration structure for fast particle lookups."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from wrach.models import Vec2

SpatialBinCoord = tuple[int, int]
Viewport = tuple[float, float, float, float]


@dataclass
class PackedData:
    """Particles packed contiguously by cell, with cumulative per-cell offsets.

    ``indices`` starts with two zeros; each following item is the offset at which
    the next cell's particles begin, so a cell's count is the difference of
    neighbouring items.
    """

    indices: list[int] = field(default_factory=list)
    positions: list[Vec2] = field(default_factory=list)
    velocities: list[Vec2] = field(default_factory=list)


class SpatialBin:
    """A grid of square cells covering the viewport."""

    def __init__(self, cell_size: int, viewport: Viewport) -> None:
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.cell_size = cell_size
        self.viewport: Viewport = tuple(float(v) for v in viewport)  # type: ignore[assignment]
        if len(self.viewport) != 4:
            raise ValueError("viewport must have exactly four components")
        self.grid_dimensions: tuple[int, int] = (0, 0)
        self._update_grid_size()

    def get_cell_coord(self, position: Vec2) -> SpatialBinCoord:
        """Return the coordinate of the cell containing ``position``."""
        return (
            math.floor(position.x / self.cell_size),
            math.floor(position.y / self.cell_size),
        )

    def get_active_cells(self) -> tuple[list[SpatialBinCoord], tuple[int, int]]:
        """Return the cells needed for one frame, row by row, and the grid size."""
        x0, y0, x1, y1 = self.viewport
        left, bottom = self.get_cell_coord(Vec2(x0, y0))
        right, top = self.get_cell_coord(Vec2(x1, y1))
        rows = range(bottom, top + 1)
        columns = range(left, right + 1)
        cells = [(x, y) for y in rows for x in columns]
        width = len(columns) if rows else 0
        return cells, (width, len(rows))

    def _update_grid_size(self) -> None:
        _, self.grid_dimensions = self.get_active_cells()

    def create_packed_data(self, store: Any) -> PackedData:
        """Pack the particles of ``store`` that lie in the active cells.

        ``store`` must expose ``hashmap``, a mapping from cell coordinate to an
        object with ``positions`` and ``velocities`` lists.
        """
        cells, _ = self.get_active_cells()
        packed = PackedData(indices=[0, 0])
        current = 0
        for cell in cells:
            particles = store.hashmap.get(cell)
            if particles is None:
                packed.indices.append(current)
                continue
            current += len(particles.positions)
            packed.indices.append(current)
            packed.positions.extend(particles.positions)
            packed.velocities.extend(particles.velocities)
        return packed