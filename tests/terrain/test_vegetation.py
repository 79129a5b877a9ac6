"""Tests for the vegetation model."""

from unittest.mock import MagicMock

import numpy as np
import pytest

from blockworld.exceptions import ConfigurationError
from blockworld.terrain.config import VegetationConfig
from blockworld.terrain.vegetation import VegetationModel


def _always_accepting_rng() -> MagicMock:
    rng = MagicMock()
    rng.random.return_value = 0.0
    return rng


class TestCeiling:
    """Cells above max_elevation are never wooded."""

    @pytest.mark.parametrize("elevation", [7.01, 7.5, 9.5, 100.0])
    @pytest.mark.parametrize("sample", [0.0, 0.1, 0.3])
    def test_rejected_without_draw(self, elevation: float, sample: float) -> None:
        rng = _always_accepting_rng()
        model = VegetationModel(
            VegetationConfig(frequency=0.3, density=1.0, max_elevation=7.0), rng
        )
        assert model.is_wooded(elevation, sample) is False
        assert model.wooded_probability(elevation, sample) == 0.0
        rng.random.assert_not_called()

    def test_at_ceiling_has_zero_weight(self) -> None:
        model = VegetationModel(
            VegetationConfig(frequency=0.3, density=1.0, max_elevation=7.0),
            _always_accepting_rng(),
        )
        assert model.wooded_probability(7.0, 0.1) == 0.0
        assert model.is_wooded(7.0, 0.1) is False


class TestFrequencyGate:
    """Samples above frequency are never wooded."""

    def test_sample_above_frequency(self) -> None:
        rng = _always_accepting_rng()
        model = VegetationModel(
            VegetationConfig(frequency=0.3, density=1.0, max_elevation=7.0), rng
        )
        for elevation in (0.5, 1.0, 3.0, 6.5):
            assert model.is_wooded(elevation, 0.9) is False
        rng.random.assert_not_called()

    def test_sample_at_frequency_is_eligible(self) -> None:
        rng = _always_accepting_rng()
        model = VegetationModel(
            VegetationConfig(frequency=0.3, density=1.0, max_elevation=7.0), rng
        )
        assert model.is_wooded(1.0, 0.3) is True
        rng.random.assert_called_once()


class TestDensityWeight:
    """Tests for the linear falloff weight."""

    def test_midpoint_weight(self) -> None:
        model = VegetationModel(
            VegetationConfig(frequency=0.3, density=1.0, max_elevation=7.0),
            _always_accepting_rng(),
        )
        assert model.wooded_probability(3.65, 0.1) == pytest.approx(0.5)

    def test_lowlands_denser(self) -> None:
        model = VegetationModel(
            VegetationConfig(frequency=0.3, density=1.0, max_elevation=7.0),
            _always_accepting_rng(),
        )
        weights = [model.wooded_probability(e, 0.1) for e in (1.0, 2.0, 4.0, 6.0)]
        assert weights == sorted(weights, reverse=True)

    def test_weight_below_frequency_scales_by_density(self) -> None:
        """Below frequency the falloff exceeds 1 before density applies."""
        config = VegetationConfig(frequency=0.9, density=0.5, max_elevation=7.0)
        rng = MagicMock()
        rng.random.return_value = 0.51
        model = VegetationModel(config, rng)

        # p = 1 - (0.5 - 0.9) / (7.0 - 0.9)
        assert model.wooded_probability(0.5, 0.1) == pytest.approx(0.5327868852459017)
        assert model.is_wooded(0.5, 0.1) is True

    def test_weight_product_capped_at_one(self) -> None:
        model = VegetationModel(
            VegetationConfig(frequency=0.5, density=1.0, max_elevation=7.0),
            _always_accepting_rng(),
        )
        assert model.wooded_probability(0.0, 0.1) == 1.0

    def test_density_scales_weight(self) -> None:
        model = VegetationModel(
            VegetationConfig(frequency=0.3, density=0.5, max_elevation=7.0),
            _always_accepting_rng(),
        )
        assert model.wooded_probability(3.65, 0.1) == pytest.approx(0.25)

    def test_draw_must_be_below_weight(self) -> None:
        rng = MagicMock()
        rng.random.return_value = 0.6
        model = VegetationModel(
            VegetationConfig(frequency=0.3, density=1.0, max_elevation=7.0), rng
        )
        assert model.is_wooded(3.65, 0.1) is False
        rng.random.return_value = 0.4
        assert model.is_wooded(3.65, 0.1) is True


class TestBernoulli:
    """Eligible cells are wooded at rate p * density."""

    def test_observed_rate(self) -> None:
        model = VegetationModel(
            VegetationConfig(frequency=0.3, density=0.5, max_elevation=7.0),
            np.random.default_rng(1234),
        )
        trials = 20000
        hits = sum(model.is_wooded(3.65, 0.1) for _ in range(trials))
        assert abs(hits / trials - 0.25) < 0.02

    def test_zero_density_never_wooded(self) -> None:
        model = VegetationModel(
            VegetationConfig(frequency=0.3, density=0.0, max_elevation=7.0),
            np.random.default_rng(99),
        )
        assert not any(model.is_wooded(1.0, 0.0) for _ in range(1000))

    def test_seeded_rng_reproducible(self) -> None:
        config = VegetationConfig(frequency=0.3, density=0.7, max_elevation=7.0)
        a = VegetationModel(config, np.random.default_rng(5))
        b = VegetationModel(config, np.random.default_rng(5))
        draws_a = [a.is_wooded(2.0, 0.2) for _ in range(200)]
        draws_b = [b.is_wooded(2.0, 0.2) for _ in range(200)]
        assert draws_a == draws_b


class TestMisconfiguration:
    """max_elevation must exceed frequency."""

    @pytest.mark.parametrize("max_elevation", [0.5, 0.2, -1.0])
    def test_rejected(self, max_elevation: float) -> None:
        with pytest.raises(ConfigurationError):
            VegetationModel(
                VegetationConfig(frequency=0.5, max_elevation=max_elevation),
                np.random.default_rng(0),
            )
