"""Derivation of RGB atmosphere parameters from a wavelength-sampled dataset."""

import math
from typing import Sequence, Tuple

import numpy as np

from ..models.atmosphere import AtmosphereParameters, DensityProfile, DensityProfileLayer
from ..models.spectral import SpectralAtmosphere

# Wavelengths (nm) standing in for the red, green and blue channels.
LAMBDA_R = 680.0
LAMBDA_G = 550.0
LAMBDA_B = 440.0

RGB_WAVELENGTHS = (LAMBDA_R, LAMBDA_G, LAMBDA_B)


def interpolate(
    wavelengths: Sequence[float], values: Sequence[float], wavelength: float
) -> float:
    """Linearly interpolate a sampled spectrum at wavelength.

    Wavelengths outside the table take the first or last sample.
    """
    wavelengths = np.asarray(wavelengths, dtype=np.float64)
    values = np.asarray(values, dtype=np.float64)
    if len(wavelengths) != len(values):
        raise ValueError("wavelengths and values must have same length")
    return float(np.interp(wavelength, wavelengths, values))


def _resample(
    spectral: SpectralAtmosphere,
    values: np.ndarray,
    lambdas: Tuple[float, float, float],
    scale: float,
) -> Tuple[float, float, float]:
    return tuple(
        interpolate(spectral.wavelengths, values, wavelength) * scale
        for wavelength in lambdas
    )


def _scale_layer(layer: DensityProfileLayer, length_unit: float) -> DensityProfileLayer:
    return DensityProfileLayer(
        width=layer.width / length_unit,
        exp_term=layer.exp_term,
        exp_scale=layer.exp_scale * length_unit,
        linear_term=layer.linear_term * length_unit,
        constant_term=layer.constant_term,
    )


def _scale_profile(
    layers: Sequence[DensityProfileLayer], length_unit: float
) -> DensityProfile:
    return DensityProfile.from_layers(
        [_scale_layer(layer, length_unit) for layer in layers]
    )


def derive_atmosphere_parameters(
    spectral: SpectralAtmosphere,
    lambdas: Tuple[float, float, float] = RGB_WAVELENGTHS,
) -> AtmosphereParameters:
    """Resample a spectral atmosphere at three wavelengths.

    Lengths are converted from meters to the dataset's length unit:
    radii and layer widths are divided by it, inverse lengths (exp_scale,
    linear_term and every scattering or extinction coefficient) are
    multiplied by it.

    Args:
        spectral: Wavelength-sampled atmosphere in meters
        lambdas: Wavelengths (nm) for the R, G and B channels

    Returns:
        AtmosphereParameters in the dataset's length unit
    """
    unit = spectral.length_unit_in_meters

    return AtmosphereParameters(
        solar_irradiance=_resample(spectral, spectral.solar_irradiance, lambdas, 1.0),
        sun_angular_radius=spectral.sun_angular_radius,
        bottom_radius=spectral.bottom_radius / unit,
        top_radius=spectral.top_radius / unit,
        rayleigh_density=_scale_profile(spectral.rayleigh_density, unit),
        rayleigh_scattering=_resample(
            spectral, spectral.rayleigh_scattering, lambdas, unit
        ),
        mie_density=_scale_profile(spectral.mie_density, unit),
        mie_scattering=_resample(spectral, spectral.mie_scattering, lambdas, unit),
        mie_extinction=_resample(spectral, spectral.mie_extinction, lambdas, unit),
        mie_phase_function_g=spectral.mie_phase_function_g,
        absorption_density=_scale_profile(spectral.absorption_density, unit),
        absorption_extinction=_resample(
            spectral, spectral.absorption_extinction, lambdas, unit
        ),
        ground_albedo=_resample(spectral, spectral.ground_albedo, lambdas, 1.0),
        mu_s_min=math.cos(spectral.max_sun_zenith_angle),
    )
