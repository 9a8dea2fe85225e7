"""The unit of work of a physics step: one spatial bin cell and its particles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import MutableSequence, Sequence

from wrach.body import Body
from wrach.cell_particles import CellParticles
from wrach.models import Vec2, WorldSettings

PREFIX_SUM_HACK = 1
"""Offset added to cell indices: the prefix sum shifts its items one to the right."""


@dataclass
class World:
    """Everything needed to simulate the particles of one cell in a frame."""

    current_cell: int
    settings: WorldSettings
    indices: MutableSequence[int]
    positions_input: Sequence[Vec2]
    positions_output: MutableSequence[Vec2]
    velocities_input: Sequence[Vec2]
    velocities_output: MutableSequence[Vec2]

    def physics_for_cell(self) -> None:
        """Do physics on every particle of the current cell and write the results out."""
        width, height = self.settings.grid_dimensions
        total_cells = width * height + PREFIX_SUM_HACK
        last_cell = total_cells - 1
        if self.current_cell > last_cell:
            return

        start, all_count = self._particle_range()

        particles = CellParticles(
            start, all_count, self.positions_input, self.velocities_input
        )
        particles.pairs()
        particles.finish(self.settings, self.positions_output, self.velocities_output)

        self._handle_overflown_particles(start, particles.count, all_count)
        self._clear_cells_for_next_frame(last_cell)

    def _particle_range(self) -> tuple[int, int]:
        """Return where the cell's particles start and how many there are."""
        start = self.indices[self.current_cell]
        marker = self.indices[self.current_cell + 1]
        if marker < start:
            raise ValueError(
                f"cell {self.current_cell} has a negative particle count "
                f"({start} to {marker})"
            )
        return start, marker - start

    def _handle_overflown_particles(
        self, start: int, handled_count: int, all_count: int
    ) -> None:
        """Integrate and write out particles beyond the per-cell limit."""
        for index in range(start + handled_count, start + all_count):
            body = Body.load(index, self.positions_input, self.velocities_input)
            body.integrate()
            body.enforce_limits(self.settings)
            body.write(self.positions_output, self.velocities_output)

    def _clear_cells_for_next_frame(self, last_cell: int) -> None:
        """Zero this cell's index, and the trailing guard item after the last cell."""
        self.indices[self.current_cell] = 0
        if self.current_cell == last_cell:
            self.indices[self.current_cell + 1] = 0


def run_physics(
    invocation_id: int,
    settings: WorldSettings,
    indices: MutableSequence[int],
    positions_input: Sequence[Vec2],
    positions_output: MutableSequence[Vec2],
    velocities_input: Sequence[Vec2],
    velocities_output: MutableSequence[Vec2],
) -> None:
    """Run the physics step for the cell handled by invocation ``invocation_id``."""
    world = World(
        current_cell=invocation_id + PREFIX_SUM_HACK,
        settings=settings,
        indices=indices,
        positions_input=positions_input,
        positions_output=positions_output,
        velocities_input=velocities_input,
        velocities_output=velocities_output,
    )
    world.physics_for_cell()