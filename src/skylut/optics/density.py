"""Altitude-dependent density of the atmospheric constituents."""

import numpy as np

from ..models.atmosphere import DensityProfile, DensityProfileLayer
from ..numerics import as_output, clamp


def get_layer_density(layer: DensityProfileLayer, altitude):
    """Density of a single layer at altitude, clamped to [0, 1].

    Rays through the planet reach large negative altitudes where the
    exponential term overflows to inf; the clamp maps it to 1.
    """
    with np.errstate(over="ignore"):
        density = (
            layer.exp_term * np.exp(layer.exp_scale * altitude)
            + layer.linear_term * altitude
            + layer.constant_term
        )
    return as_output(clamp(density, 0.0, 1.0))


def get_profile_density(profile: DensityProfile, altitude):
    """Density of a two-layer profile at altitude.

    Layer 0 applies strictly below its width, layer 1 everywhere else.
    """
    lower, upper = profile.layers
    if np.ndim(altitude) == 0:
        layer = lower if altitude < lower.width else upper
        return get_layer_density(layer, altitude)

    return np.where(
        altitude < lower.width,
        get_layer_density(lower, altitude),
        get_layer_density(upper, altitude),
    )
