"""Coherent noise sampling for terrain and vegetation fields.

Both fields are read from the same underlying 2D simplex noise. They stay
independent because each channel samples it at its own offset and grain.
"""

import math
from typing import Protocol

from opensimplex import OpenSimplex

# Largest float below 1.0, keeps samples in [0, 1)
_MAX_SAMPLE = math.nextafter(1.0, 0.0)


class NoiseField(Protocol):
    """Deterministic 2D noise sampled at integer grid indices."""

    def sample(
        self, base_x: float, base_y: float, grain: float, i: int, j: int
    ) -> float:
        """Sample the field at (base_x + grain * i, base_y + grain * j).

        Returns:
            Noise value in [0, 1).
        """
        ...


class SimplexNoiseField:
    """NoiseField backed by OpenSimplex noise."""

    def __init__(self, seed: int) -> None:
        """Initialize SimplexNoiseField.

        Args:
            seed: Seed for the permutation table.
        """
        self.seed = seed
        self._simplex = OpenSimplex(seed)

    def sample(
        self, base_x: float, base_y: float, grain: float, i: int, j: int
    ) -> float:
        x = base_x + grain * i
        y = base_y + grain * j
        value = 0.5 * (self._simplex.noise2(x, y) + 1.0)
        return min(max(value, 0.0), _MAX_SAMPLE)
