"""Simulation state: configuration, particle store and pending GPU uploads."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from typing import Iterable, Union

from wrach.models import Particle, WorldSettings, WrachConfig
from wrach.particle_store import ParticleStore
from wrach.spatial_bin import PackedData


class UploadKind(enum.Enum):
    """The kinds of data that are uploaded to the GPU."""

    PACKED_DATA = "packed_data"
    SETTINGS = "settings"


_PAYLOAD_TYPES = {
    UploadKind.PACKED_DATA: PackedData,
    UploadKind.SETTINGS: WorldSettings,
}


@dataclass(frozen=True)
class GPUUpload:
    """A piece of data queued for upload to the GPU."""

    kind: UploadKind
    payload: Union[PackedData, WorldSettings]

    def __post_init__(self) -> None:
        expected = _PAYLOAD_TYPES[self.kind]
        if not isinstance(self.payload, expected):
            raise TypeError(
                f"{self.kind.name} upload needs a {expected.__name__}, "
                f"got {type(self.payload).__name__}"
            )


class WrachState:
    """All state of a simulation."""

    def __init__(self, config: WrachConfig) -> None:
        width, height = config.dimensions
        viewport = (0.0, 0.0, float(width), float(height))
        self.config = config
        self.shader_settings = WorldSettings()
        self.particle_store = ParticleStore(config.cell_size, viewport)
        self.packed_data = PackedData()
        self.gpu_uploads: list[GPUUpload] = field(default_factory=list).default_factory()  # type: ignore[misc]

    def gpu_upload(self, upload: GPUUpload) -> None:
        """Queue ``upload`` to be sent to the GPU."""
        self.gpu_uploads.append(upload)

    def add_particles(self, particles: Iterable[Particle]) -> None:
        """Add particles and queue the repacked data and settings for upload."""
        for particle in particles:
            self.particle_store.add_particle(particle)

        packed = self.particle_store.create_packed_data()
        self.gpu_upload(GPUUpload(UploadKind.PACKED_DATA, packed))

        self.shader_settings.particles_in_frame_count = (
            self.particle_store.particles_in_frame_count
        )
        self.gpu_upload(
            GPUUpload(UploadKind.SETTINGS, dataclasses.replace(self.shader_settings))
        )