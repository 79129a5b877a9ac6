"""Procedural block terrain generation package.

This package turns coherent noise into banded, stepped terrain blocks,
decides vegetation per cell and emits placement requests for each block.
"""

from .classification import Classification, ElevationClassifier, stepped_elevation
from .config import (
    ClassificationConfig,
    ElevationConfig,
    NoiseChannelConfig,
    PlacementConfig,
    SteppedBandConfig,
    TerrainConfig,
    VegetationConfig,
)
from .generator import GenerationResult, TerrainGenerator, generate_terrain
from .noise import NoiseField, SimplexNoiseField
from .objects import (
    ObjectCollector,
    ObjectKind,
    PlacedObject,
    PlacementSink,
    world_position,
)
from .vegetation import VegetationModel

__all__ = [
    "Classification",
    "ClassificationConfig",
    "ElevationClassifier",
    "ElevationConfig",
    "GenerationResult",
    "NoiseChannelConfig",
    "NoiseField",
    "ObjectCollector",
    "ObjectKind",
    "PlacedObject",
    "PlacementConfig",
    "PlacementSink",
    "SimplexNoiseField",
    "SteppedBandConfig",
    "TerrainConfig",
    "TerrainGenerator",
    "VegetationConfig",
    "VegetationModel",
    "generate_terrain",
    "stepped_elevation",
    "world_position",
]
