"""Vegetation presence model."""

import numpy as np

from ..exceptions import ConfigurationError
from .config import VegetationConfig


class VegetationModel:
    """Decides per cell whether vegetation grows there.

    Cells above max_elevation or with a vegetation sample above frequency are
    rejected outright. Remaining cells are a Bernoulli trial whose weight
    falls off linearly from frequency up to max_elevation, scaled by density.
    """

    def __init__(self, config: VegetationConfig, rng: np.random.Generator) -> None:
        """Initialize VegetationModel.

        Args:
            config: Vegetation parameters.
            rng: Random source for the Bernoulli draw.

        Raises:
            ConfigurationError: If max_elevation does not exceed frequency.
        """
        if config.max_elevation <= config.frequency:
            raise ConfigurationError(
                f"Vegetation max_elevation ({config.max_elevation}) must exceed "
                f"frequency ({config.frequency})"
            )
        self.config = config
        self.rng = rng

    def wooded_probability(self, elevation: float, sample: float) -> float:
        """Probability that a cell is wooded, before the random draw."""
        config = self.config
        if elevation > config.max_elevation or sample > config.frequency:
            return 0.0

        falloff = (elevation - config.frequency) / (
            config.max_elevation - config.frequency
        )
        # p exceeds 1 below frequency; only the product is bounded
        p = 1.0 - falloff
        return min(max(p * config.density, 0.0), 1.0)

    def is_wooded(self, elevation: float, sample: float) -> bool:
        """Decide vegetation for one cell.

        Rejected cells do not consume a random draw.
        """
        config = self.config
        if elevation > config.max_elevation:
            return False
        if sample > config.frequency:
            return False
        return bool(self.rng.random() < self.wooded_probability(elevation, sample))
