# wrach

A small 2D pixel physics simulation. Every particle has a position and a
velocity. The world is divided into a grid of square cells, called spatial
bins. Particles are packed cell by cell into flat buffers. The physics step
then works on one cell at a time:

1. Particles in the cell that are closer than `MIN_DISTANCE` (1.0) are pushed apart.
2. Every particle moves by its velocity.
3. A particle that crosses an edge of the viewport is clamped back onto the edge, and the matching velocity component is reversed.
4. Each velocity component is clamped to ±1.0.

The package uses only the standard library.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Modules

- `wrach.models`
  - `Vec2`: an immutable 2D vector. It supports `+`, `-`, unary `-`, scalar `*`, `distance()` and unpacking (`x, y = v`).
  - `WrachConfig`: the user settings. `dimensions` defaults to `(480, 352)`, `boundaries_as_dimensions` to `False`, and `cell_size` to `SPATIAL_BIN_CELL_SIZE`, which is 3.
  - `WorldSettings`: what the physics step reads. It holds the view dimensions, the view anchor, the grid dimensions, the cell size and the number of particles in the frame.
  - `Particle`: a position and a velocity.
- `wrach.spatial_bin`
  - `SpatialBin` maps a position to the coordinate of its cell (`get_cell_coord`). It lists the cells covering the viewport row by row, together with the grid size (`get_active_cells`).
  - `SpatialBin.create_packed_data` packs a store's particles into `PackedData`. That object holds `indices`, `positions` and `velocities`.
- `wrach.particle_store`
  - `ParticleStore` keeps `ParticleData` per cell in `hashmap` and supports adding and removing particles.
  - `create_packed_data` packs the particles of the active cells and records how many there are in `particles_in_frame_count`.
  - `max_particles_per_frame` gives an upper bound: `cell_size²` per active cell, plus 10 %.
- `wrach.state`
  - `WrachState` holds a config, a `ParticleStore`, a `WorldSettings`, a `PackedData` and a queue of `GPUUpload` items.
  - Each `GPUUpload` is tagged with an `UploadKind`: `PACKED_DATA` or `SETTINGS`.
  - `add_particles` stores the particles. It then queues the repacked data, followed by a copy of the settings with the particle count updated.
- `wrach.body.Body`: a single particle loaded from the buffers at an index. It has `integrate`, `enforce_boundaries`, `enforce_velocity`, `enforce_limits` and `write`.
- `wrach.cell_particles.CellParticles`
  - Holds the particles of one cell, up to `MAX_PARTICLES_IN_CELL` (9).
  - `pairs()` pushes close pairs apart.
  - `finish()` integrates each particle, enforces the limits and writes the results out.
- `wrach.cell`
  - `World.physics_for_cell` runs the step for one cell. Particles beyond the per-cell limit are only integrated and limited.
  - After running, it zeroes that cell's entry in `indices`. The last cell also zeroes the guard entry after it.
  - `run_physics(invocation_id, ...)` runs cell `invocation_id + 1`.

## The packed layout

`indices` starts with two zeros. After those comes one entry per active cell, holding the running total of particles up to and including that cell. The particles of cell `k`, counted from 1, are therefore at `positions[indices[k]:indices[k + 1]]`.

## Example

```python
from wrach.cell import run_physics
from wrach.models import Particle, Vec2, WorldSettings, WrachConfig
from wrach.state import WrachState

state = WrachState(WrachConfig(dimensions=(10, 10), cell_size=3))
state.add_particles([
    Particle(position=Vec2(5.0, 5.0), velocity=Vec2(0.5, 0.5)),
    Particle(position=Vec2(5.2, 5.1), velocity=Vec2(-0.5, 0.1)),
])

packed = state.particle_store.create_packed_data()
grid = state.particle_store.spatial_bin.grid_dimensions
settings = WorldSettings(
    view_dimensions=Vec2(10.0, 10.0),
    view_anchor=Vec2(0.0, 0.0),
    grid_dimensions=grid,
    cell_size=3,
    particles_in_frame_count=len(packed.positions),
)

indices = list(packed.indices)
positions_out = list(packed.positions)
velocities_out = list(packed.velocities)
width, height = grid
for invocation_id in range(width * height):
    run_physics(
        invocation_id, settings, indices,
        packed.positions, positions_out,
        packed.velocities, velocities_out,
    )

print(positions_out)
print(velocities_out)
```

Cells must be run in ascending order. Each call zeroes its own entry in `indices`, and the next cell still needs the entry that follows.

## What the package does not do

- It draws nothing and opens no window. It uses no GPU.
- There is no frame loop. `WrachState` only queues `GPUUpload` items. Nothing in the package consumes that queue, and nothing writes the results of `run_physics` back into the `ParticleStore` or into `WrachState.packed_data`. The caller does that, as in the example above.
- `WrachState.shader_settings` starts with zero view dimensions. `add_particles` updates only its particle count, so the caller has to fill in the view and grid fields before running physics.
- `WrachConfig.boundaries_as_dimensions` and `ParticleStore.cells_to_read_from_gpu` are stored, but nothing reads them.
- There is no command-line program, and particles are not saved to disk.

## Running the tests

```
pytest
```