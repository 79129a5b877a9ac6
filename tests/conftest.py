"""Shared test fixtures for terrain tests."""

import pytest

from blockworld.store import TerrainStore
from blockworld.terrain.config import TerrainConfig

TERRAIN_BASE_X = 0.0
VEGETATION_BASE_X = 1000.0


class FixedNoiseField:
    """Noise stub returning one value for terrain and one for vegetation.

    Channels are told apart by their base_x, so configs built with
    stub_config() route each channel to the right value.
    """

    def __init__(self, terrain: float, vegetation: float = 0.99) -> None:
        self.terrain = terrain
        self.vegetation = vegetation
        self.calls: list[tuple[float, float, float, int, int]] = []

    def sample(
        self, base_x: float, base_y: float, grain: float, i: int, j: int
    ) -> float:
        self.calls.append((base_x, base_y, grain, i, j))
        if base_x == VEGETATION_BASE_X:
            return self.vegetation
        return self.terrain


def stub_config(**overrides) -> TerrainConfig:
    """4x4 TerrainConfig whose noise channels FixedNoiseField can tell apart.

    Dict overrides are merged into the matching section, anything else
    replaces the field.
    """
    data: dict = {
        "seed": 3,
        "range": 2,
        "elevation": {
            "noise": {"base_x": TERRAIN_BASE_X, "base_y": 0.0, "grain": 0.1},
        },
        "vegetation": {
            "noise": {"base_x": VEGETATION_BASE_X, "base_y": 500.0, "grain": 0.1},
        },
    }
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(data.get(key), dict):
            data[key] = {**data[key], **value}
        else:
            data[key] = value
    return TerrainConfig.model_validate(data)


@pytest.fixture
def store() -> TerrainStore:
    """Empty terrain store."""
    return TerrainStore()


@pytest.fixture
def small_config() -> TerrainConfig:
    """4x4 grid with separable noise channels."""
    return stub_config()


@pytest.fixture
def make_noise() -> type[FixedNoiseField]:
    """Factory for fixed-value noise fields."""
    return FixedNoiseField


@pytest.fixture
def make_config():
    """Factory for stub-friendly configs; see stub_config."""
    return stub_config
