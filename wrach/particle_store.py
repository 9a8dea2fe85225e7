"""A store of all known particles, keyed by spatial bin cell."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from wrach.models import Particle, Vec2
from wrach.spatial_bin import PackedData, SpatialBin, SpatialBinCoord, Viewport

_U32_MAX = 2**32 - 1
_EXTRA_PERCENT = 10


@dataclass
class ParticleData:
    """Particles of one cell, with positions and velocities kept in separate lists."""

    positions: list[Vec2] = field(default_factory=list)
    velocities: list[Vec2] = field(default_factory=list)


class ParticleStore:
    """All active particle data, grouped by the spatial bin cell they lie in."""

    def __init__(self, cell_size: int, viewport: Viewport) -> None:
        self.spatial_bin = SpatialBin(cell_size, viewport)
        self.hashmap: dict[SpatialBinCoord, ParticleData] = {}
        self.particles_in_frame_count = 0
        self.cells_to_read_from_gpu: list[SpatialBinCoord] = []

    def add_particle(self, particle: Particle) -> None:
        """Add a particle to the cell its position falls in."""
        cell = self.spatial_bin.get_cell_coord(particle.position)
        entry = self.hashmap.setdefault(cell, ParticleData())
        entry.positions.append(particle.position)
        entry.velocities.append(particle.velocity)

    def add_particles_to_cell(self, cell: SpatialBinCoord, particles: ParticleData) -> None:
        """Put ``particles`` in ``cell``, replacing whatever was there."""
        self.hashmap[cell] = particles

    def remove(self, cell: SpatialBinCoord) -> None:
        """Forget all particles of ``cell``; a missing cell is ignored."""
        self.hashmap.pop(cell, None)

    def create_packed_data(self) -> PackedData:
        """Pack the particles in and around the viewport and record their count."""
        data = self.spatial_bin.create_packed_data(self)
        count = len(data.positions)
        if count > _U32_MAX:
            raise OverflowError("More particles than fit into u32")
        self.particles_in_frame_count = count
        return data

    def max_particles_per_frame(self) -> int:
        """Upper bound of particles in one frame, with a margin for over-packed cells."""
        cells, _ = self.spatial_bin.get_active_cells()
        normal = len(cells) * self.spatial_bin.cell_size**2
        one_percent = math.ceil(normal / 100)
        return normal + _EXTRA_PERCENT * one_percent