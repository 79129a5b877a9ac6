"""Elevation banding: water, valley, plains, hills, mountains."""

import math
from dataclasses import dataclass

from ..block_types import Band, BlockKind
from ..exceptions import ConfigurationError
from .config import ClassificationConfig, ElevationConfig, SteppedBandConfig


@dataclass(frozen=True)
class Classification:
    """Band, block kind and elevation chosen for one noise sample."""

    band: Band
    block_kind: BlockKind
    elevation: float
    terrain_number: int


def stepped_elevation(terrain_number: float, band: SteppedBandConfig) -> float:
    """Quantize a terrain number into one of the band's plateaus.

    Args:
        terrain_number: Discretized terrain value.
        band: Stepping parameters of the band containing terrain_number.

    Returns:
        elevation_min plus a whole number of step_size increments.

    Raises:
        ConfigurationError: If the band has zero width.
    """
    width = band.top - band.bottom
    if width == 0:
        raise ConfigurationError(
            f"Band width is zero (bottom == top == {band.bottom})"
        )
    step = math.floor(band.steps * (terrain_number - band.bottom) / width)
    return band.elevation_min + band.step_size * step


class ElevationClassifier:
    """Maps raw terrain noise to a band, block kind and elevation."""

    def __init__(
        self, elevation: ElevationConfig, classification: ClassificationConfig
    ) -> None:
        """Initialize ElevationClassifier.

        Args:
            elevation: Amplitude and offset applied to raw samples.
            classification: Thresholds and band elevation rules.

        Raises:
            ConfigurationError: If a stepped band has zero width or any
                band can produce a negative elevation.
        """
        self.elevation = elevation
        self.config = classification

        for name in ("mountains", "hills", "plains"):
            band: SteppedBandConfig = getattr(classification, name)
            if band.top == band.bottom:
                raise ConfigurationError(
                    f"{name} band has zero width (bottom == top == {band.bottom})"
                )

        self._check_non_negative()

    def _check_non_negative(self) -> None:
        """Reject bands that can yield negative elevations.

        Negative values would collide with the store's UNKNOWN_ALTITUDE.
        """
        config = self.config
        spans = {
            "mountains": (config.mountain_start, None),
            "hills": (config.hills_start, config.mountain_start - 1),
            "plains": (config.valley_start, config.hills_start - 1),
        }
        lowest = {
            "valley_elevation": config.valley_elevation,
            "water_elevation": config.water_elevation,
        }
        for name, (first, last) in spans.items():
            band: SteppedBandConfig = getattr(config, name)
            if last is None:
                rising = band.step_size * band.steps / (band.top - band.bottom) >= 0
                if not rising:
                    raise ConfigurationError(
                        f"{name} band descends without bound above {first}"
                    )
                lowest[name] = stepped_elevation(first, band)
            elif last >= first:
                lowest[name] = min(
                    stepped_elevation(first, band), stepped_elevation(last, band)
                )

        for name, value in lowest.items():
            if value < 0:
                raise ConfigurationError(
                    f"{name} can reach elevation {value}; elevations must be >= 0"
                )

    def terrain_number(self, raw: float) -> int:
        """Scale, offset and discretize a raw noise sample."""
        amplitude = self.elevation.amplitude or 1.0
        value = raw * amplitude + self.elevation.offset
        return math.floor(value * 100)

    def band_for(self, terrain_number: int) -> Band:
        """Select the band owning terrain_number.

        Lower bounds are inclusive except the valley/water split, where
        water_level itself is water.
        """
        config = self.config
        if terrain_number >= config.mountain_start:
            return Band.MOUNTAINS
        if terrain_number >= config.hills_start:
            return Band.HILLS
        if terrain_number >= config.valley_start:
            return Band.PLAINS
        if terrain_number > config.water_level:
            return Band.VALLEY
        return Band.WATER

    def classify(self, raw: float) -> Classification:
        """Classify one raw terrain noise sample."""
        number = self.terrain_number(raw)
        band = self.band_for(number)
        config = self.config

        if band == Band.MOUNTAINS:
            elevation = stepped_elevation(number, config.mountains)
            if elevation > config.high_mountain_elevation:
                kind = BlockKind.MOUNTAIN_HIGH
            else:
                kind = BlockKind.MOUNTAIN_LOW
        elif band == Band.HILLS:
            elevation = stepped_elevation(number, config.hills)
            kind = BlockKind.HILLS
        elif band == Band.PLAINS:
            elevation = stepped_elevation(number, config.plains)
            kind = BlockKind.PLAINS
        elif band == Band.VALLEY:
            elevation = config.valley_elevation
            kind = BlockKind.VALLEY
        else:
            elevation = config.water_elevation
            kind = BlockKind.WATER

        return Classification(
            band=band,
            block_kind=kind,
            elevation=float(elevation),
            terrain_number=number,
        )
