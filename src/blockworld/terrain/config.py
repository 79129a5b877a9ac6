"""Terrain generation configuration models."""

from pydantic import BaseModel, Field


class NoiseChannelConfig(BaseModel):
    """Where and how densely one noise field is sampled."""

    base_x: float = Field(default=0.0, description="Noise-space X offset")
    base_y: float = Field(default=0.0, description="Noise-space Y offset")
    grain: float = Field(default=0.05, description="Noise-space step per grid cell")


class ElevationConfig(BaseModel):
    """Scaling from raw terrain noise to the terrain number."""

    noise: NoiseChannelConfig = Field(default_factory=NoiseChannelConfig)
    amplitude: float = Field(
        default=1.0, description="Noise multiplier (0 is treated as 1)"
    )
    offset: float = Field(default=0.0, description="Added after scaling")


class SteppedBandConfig(BaseModel):
    """Staircase elevation parameters for one band."""

    bottom: float = Field(description="Terrain number mapped to the first step")
    top: float = Field(description="Terrain number one band-width above bottom")
    step_size: float = Field(description="Elevation gained per step")
    steps: float = Field(description="Number of steps across bottom..top")
    elevation_min: float = Field(description="Elevation of the first step")


class ClassificationConfig(BaseModel):
    """Band thresholds and per-band elevation rules."""

    mountain_start: int = Field(default=90, description="Terrain number where mountains begin")
    hills_start: int = Field(default=60, description="Terrain number where hills begin")
    valley_start: int = Field(default=20, description="Terrain number where plains begin")
    water_level: int = Field(
        default=5, description="Terrain numbers at or below this are water"
    )

    mountains: SteppedBandConfig = Field(
        default_factory=lambda: SteppedBandConfig(
            bottom=60, top=90, step_size=1.0, steps=10, elevation_min=-0.5
        )
    )
    hills: SteppedBandConfig = Field(
        default_factory=lambda: SteppedBandConfig(
            bottom=60, top=90, step_size=0.5, steps=10, elevation_min=4.0
        )
    )
    plains: SteppedBandConfig = Field(
        default_factory=lambda: SteppedBandConfig(
            bottom=20, top=60, step_size=0.5, steps=5, elevation_min=1.5
        )
    )
    valley_elevation: float = Field(default=1.0, description="Fixed valley elevation")
    water_elevation: float = Field(default=0.5, description="Fixed water elevation")
    high_mountain_elevation: float = Field(
        default=12.0, description="Mountains above this are high mountain blocks"
    )


class VegetationConfig(BaseModel):
    """Vegetation noise channel and density model."""

    noise: NoiseChannelConfig = Field(
        default_factory=lambda: NoiseChannelConfig(base_x=1000.5, base_y=2000.5, grain=0.2)
    )
    frequency: float = Field(
        default=0.45, description="Noise samples above this are never wooded"
    )
    density: float = Field(
        default=0.8, ge=0.0, le=1.0, description="Overall vegetation abundance"
    )
    max_elevation: float = Field(
        default=7.0, description="No vegetation above this elevation"
    )


class PlacementConfig(BaseModel):
    """Mapping from grid cells to scene positions."""

    block_scale: float = Field(default=0.1, description="Scene units per grid cell")
    base_height: float = Field(default=0.0, description="Scene height of elevation 0")
    object_lift: float = Field(
        default=1.0, description="Elevation added for objects standing on a block"
    )
    jitter: float = Field(
        default=0.03, ge=0.0, description="Max horizontal vegetation offset"
    )
    overlay_range: int | None = Field(
        default=None,
        ge=0,
        description="Overlay half-width around origin (None = half the grid range)",
    )
    vegetation_variants: int = Field(
        default=1, ge=1, description="Number of interchangeable vegetation models"
    )


class TerrainConfig(BaseModel):
    """Complete terrain generation configuration."""

    seed: int = Field(default=42, description="Seed for noise and random draws")
    range: int = Field(default=64, ge=1, description="Grid spans [-range, range) per axis")

    elevation: ElevationConfig = Field(default_factory=ElevationConfig)
    classification: ClassificationConfig = Field(default_factory=ClassificationConfig)
    vegetation: VegetationConfig = Field(default_factory=VegetationConfig)
    placement: PlacementConfig = Field(default_factory=PlacementConfig)
