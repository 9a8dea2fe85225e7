"""A single particle as seen by the physics step, and what can be done to it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import MutableSequence, Sequence

from wrach.models import Vec2, WorldSettings

MAX_VELOCITY = 1.0
"""The largest speed a particle may have along either axis."""


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class Body:
    """A particle loaded from the frame buffers, remembering where it came from."""

    index: int = 0
    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)

    @classmethod
    def load(
        cls,
        index: int,
        positions: Sequence[Vec2],
        velocities: Sequence[Vec2],
    ) -> Body:
        """Read the particle at ``index`` from the position and velocity buffers."""
        return cls(index=index, position=positions[index], velocity=velocities[index])

    def enforce_limits(self, settings: WorldSettings) -> None:
        """Keep the particle inside the viewport and under the maximum speed."""
        self.enforce_boundaries(settings)
        self.enforce_velocity()

    def enforce_boundaries(self, settings: WorldSettings) -> None:
        """Clamp the position to the viewport, reflecting velocity off any edge hit."""
        left = settings.view_anchor.x
        bottom = settings.view_anchor.y
        right = left + settings.view_dimensions.x
        top = bottom + settings.view_dimensions.y

        x, y = self.position
        vx, vy = self.velocity

        if x > right:
            x = right
            vx = -vx
        if x < left:
            x = left
            vx = -vx
        if y > top:
            y = top
            vy = -vy
        if y < bottom:
            y = bottom
            vy = -vy

        self.position = Vec2(x, y)
        self.velocity = Vec2(vx, vy)

    def enforce_velocity(self) -> None:
        """Clamp each velocity component to the maximum speed."""
        self.velocity = Vec2(
            _clamp(self.velocity.x, -MAX_VELOCITY, MAX_VELOCITY),
            _clamp(self.velocity.y, -MAX_VELOCITY, MAX_VELOCITY),
        )

    def integrate(self) -> None:
        """Move the particle by its velocity."""
        self.position = self.position + self.velocity

    def write(
        self,
        positions: MutableSequence[Vec2],
        velocities: MutableSequence[Vec2],
    ) -> None:
        """Store the particle back into the buffers at its own index."""
        positions[self.index] = self.position
        velocities[self.index] = self.velocity