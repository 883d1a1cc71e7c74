"""Tests for the atmosphere data model."""

import dataclasses

import numpy as np
import pytest

from skylut.atmosphere.profiles import earth_profile, earth_spectral_atmosphere
from skylut.models import (
    AtmosphereParameters,
    DensityProfile,
    DensityProfileLayer,
    SpectralAtmosphere,
)


def _with(atmosphere: AtmosphereParameters, **changes) -> AtmosphereParameters:
    return dataclasses.replace(atmosphere, **changes)


class TestDensityProfile:
    """Test the fixed two-layer density profile."""

    def test_default_profile_has_two_empty_layers(self):
        profile = DensityProfile()

        assert len(profile.layers) == 2
        assert profile.layers[0] == DensityProfileLayer()
        assert profile.layers[1] == DensityProfileLayer()

    def test_rejects_wrong_layer_count(self):
        with pytest.raises(ValueError):
            DensityProfile(layers=(DensityProfileLayer(),))

        with pytest.raises(ValueError):
            DensityProfile(layers=(DensityProfileLayer(),) * 3)

    def test_from_layers_pads_below(self):
        """A single layer becomes the upper layer, as for Rayleigh and Mie."""
        layer = DensityProfileLayer(0.0, 1.0, -0.125, 0.0, 0.0)

        profile = DensityProfile.from_layers([layer])

        assert profile.layers == (DensityProfileLayer(), layer)

    def test_from_layers_with_no_layers(self):
        profile = DensityProfile.from_layers([])

        assert profile == DensityProfile()

    def test_from_layers_rejects_three_layers(self):
        with pytest.raises(ValueError):
            DensityProfile.from_layers([DensityProfileLayer()] * 3)

    def test_exponential(self):
        profile = DensityProfile.exponential(8.0)

        assert profile.layers[1].exp_term == 1.0
        assert profile.layers[1].exp_scale == -0.125
        assert profile.layers[0] == DensityProfileLayer()

    def test_layers_are_immutable(self):
        layer = DensityProfileLayer(1.0, 1.0, 0.0, 0.0, 0.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            layer.width = 2.0


class TestAtmosphereParameters:
    """Test invariants enforced on construction."""

    def test_rgb_fields_are_tuples(self):
        atmosphere = _with(earth_profile, ground_albedo=np.array([0.2, 0.3, 0.4]))

        assert atmosphere.ground_albedo == (0.2, 0.3, 0.4)
        assert isinstance(atmosphere.ground_albedo, tuple)

    def test_rejects_inverted_radii(self):
        with pytest.raises(ValueError, match="bottom_radius"):
            _with(earth_profile, bottom_radius=6420.0, top_radius=6360.0)

    def test_rejects_equal_radii(self):
        with pytest.raises(ValueError):
            _with(earth_profile, top_radius=earth_profile.bottom_radius)

    def test_rejects_negative_coefficients(self):
        with pytest.raises(ValueError, match="mie_extinction"):
            _with(earth_profile, mie_extinction=(0.1, -0.1, 0.1))

    def test_rejects_mu_s_min_out_of_range(self):
        with pytest.raises(ValueError, match="mu_s_min"):
            _with(earth_profile, mu_s_min=-1.5)

    def test_rejects_wrong_component_count(self):
        with pytest.raises(ValueError, match="3 components"):
            _with(earth_profile, rayleigh_scattering=(0.1, 0.2))

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            earth_profile.top_radius = 7000.0


class TestSpectralAtmosphere:
    """Test validation of wavelength-sampled datasets."""

    def test_earth_dataset_shape(self):
        spectral = earth_spectral_atmosphere()

        assert len(spectral.wavelengths) == 48
        assert spectral.wavelengths[0] == 360.0
        assert spectral.wavelengths[-1] == 830.0
        assert len(spectral.absorption_extinction) == 48

    def test_rejects_mismatched_lengths(self):
        spectral = earth_spectral_atmosphere()

        with pytest.raises(ValueError, match="same length"):
            dataclasses.replace(spectral, ground_albedo=np.full(3, 0.1))

    def test_rejects_unsorted_wavelengths(self):
        spectral = earth_spectral_atmosphere()

        with pytest.raises(ValueError, match="ascending"):
            dataclasses.replace(spectral, wavelengths=spectral.wavelengths[::-1])

    def test_is_spectral_atmosphere(self):
        assert isinstance(earth_spectral_atmosphere(), SpectralAtmosphere)
