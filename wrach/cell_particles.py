"""Interactions between the particles of one spatial bin cell."""

from __future__ import annotations

from typing import MutableSequence, Sequence

from wrach.body import Body
from wrach.models import SPATIAL_BIN_CELL_SIZE, Vec2, WorldSettings

CELL_LEEWAY = 1.0
"""Extra room for over-packed cells, as a multiple of the cell's area."""

MAX_PARTICLES_IN_CELL = int(SPATIAL_BIN_CELL_SIZE**2 * CELL_LEEWAY)
"""The largest number of particles handled together in one cell."""

MIN_DISTANCE = 1.0
"""The minimum distance allowed between particles."""

_ZERO_DISTANCE_SUBSTITUTE = 0.0001


class CellParticles:
    """The particles of one cell, loaded locally so pairs can be checked cheaply."""

    def __init__(
        self,
        start: int,
        all_count: int,
        positions: Sequence[Vec2],
        velocities: Sequence[Vec2],
    ) -> None:
        self.count = min(all_count, MAX_PARTICLES_IN_CELL)
        self.bodies = [
            Body.load(index, positions, velocities)
            for index in range(start, start + self.count)
        ]

    def pairs(self) -> None:
        """Push apart every unique pair of particles that are too close together."""
        for left_index, left in enumerate(self.bodies):
            for right in self.bodies[left_index + 1 :]:
                distance = left.position.distance(right.position)
                if distance > MIN_DISTANCE:
                    continue
                if distance == 0.0:
                    distance = _ZERO_DISTANCE_SUBSTITUTE
                self._push_apart(distance, left, right)

    @staticmethod
    def _push_apart(distance: float, left: Body, right: Body) -> None:
        force = 0.5 * (MIN_DISTANCE - distance) / distance
        offset = (right.position - left.position) * force
        left.position = left.position - offset
        right.position = right.position + offset

    def finish(
        self,
        settings: WorldSettings,
        positions: MutableSequence[Vec2],
        velocities: MutableSequence[Vec2],
    ) -> None:
        """Integrate, enforce limits and write every particle back to the buffers."""
        for body in self.bodies:
            body.integrate()
            body.enforce_limits(settings)
            body.write(positions, velocities)