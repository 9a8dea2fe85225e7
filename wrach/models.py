"""Core value types shared by the simulation: vectors, configuration and particles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Iterator

SPATIAL_BIN_CELL_SIZE = 3
"""The size of a single spatial bin cell, measured along one side of the square."""


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def distance(self, other: Vec2) -> float:
        """Return the Euclidean distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass
class WorldSettings:
    """Settings the physics step needs about the simulated world."""

    view_dimensions: Vec2 = field(default_factory=Vec2)
    """Dimensions of the view onto the simulation."""
    view_anchor: Vec2 = field(default_factory=Vec2)
    """Position of the viewport, measured from the bottom-left corner."""
    grid_dimensions: tuple[int, int] = (0, 0)
    """Width and height of the spatial bin grid, in cells."""
    cell_size: int = 0
    """The size of a spatial bin cell."""
    particles_in_frame_count: int = 0
    """Number of particles simulated in the current frame."""


@dataclass(frozen=True)
class WrachConfig:
    """User-definable configuration for a simulation."""

    dimensions: tuple[int, int] = (480, 352)
    """Dimensions of the realtime view onto the simulation."""
    boundaries_as_dimensions: bool = False
    """Whether particles are limited to within the viewport dimensions."""
    cell_size: int = SPATIAL_BIN_CELL_SIZE
    """Size of a spatial binning cell, in multiples of a particle's size."""


@dataclass(frozen=True)
class Particle:
    """A particle to insert into the simulation."""

    position: Vec2
    velocity: Vec2