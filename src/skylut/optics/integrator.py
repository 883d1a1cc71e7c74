"""Optical length integration along a ray to the top of the atmosphere."""

import numpy as np

from ..geometry.intersection import distance_to_top_atmosphere_boundary
from ..models.atmosphere import AtmosphereParameters, DensityProfile
from ..numerics import as_output, require
from .density import get_profile_density

# Number of trapezoid intervals; samples are taken at both ends of each.
SAMPLE_COUNT = 500


def _trapezoid_weights(sample_count: int) -> np.ndarray:
    weights = np.ones(sample_count + 1)
    weights[0] = 0.5
    weights[-1] = 0.5
    return weights


_TRAPEZOID_WEIGHTS = _trapezoid_weights(SAMPLE_COUNT)


def require_r_mu(atmosphere: AtmosphereParameters, r, mu) -> None:
    """Check that (r, mu) describe a ray starting inside the atmosphere."""
    require(
        (r >= atmosphere.bottom_radius) & (r <= atmosphere.top_radius),
        "r must lie in [bottom_radius, top_radius]",
    )
    require((mu >= -1.0) & (mu <= 1.0), "mu must lie in [-1, 1]")


def compute_optical_length_to_top_atmosphere_boundary(
    atmosphere: AtmosphereParameters,
    profile: DensityProfile,
    r,
    mu,
):
    """Integrate the profile density from (r, mu) to the top of the atmosphere.

    Uses the composite trapezoidal rule with SAMPLE_COUNT intervals
    (SAMPLE_COUNT + 1 samples, endpoints weighted 0.5). The real-time shader
    that reads the LUT evaluates the same rule, so sample count and weights
    must not change.

    Args:
        atmosphere: Atmosphere geometry (radii)
        profile: Density profile of one constituent
        r: Distance of the ray origin from the planet center
        mu: Cosine of the ray zenith angle

    Returns:
        Optical length in the atmosphere's length unit; a float for scalar
        inputs, an array with the broadcast shape of r and mu otherwise
    """
    require_r_mu(atmosphere, r, mu)

    # Trailing axis runs over the samples along each ray.
    r = np.asarray(r, dtype=np.float64)[..., np.newaxis]
    mu = np.asarray(mu, dtype=np.float64)[..., np.newaxis]

    dx = distance_to_top_atmosphere_boundary(atmosphere, r, mu) / float(SAMPLE_COUNT)
    d_i = np.arange(SAMPLE_COUNT + 1, dtype=np.float64) * dx
    r_i = np.sqrt(d_i * d_i + 2.0 * r * mu * d_i + r * r)
    y_i = get_profile_density(profile, r_i - atmosphere.bottom_radius)

    return as_output(np.sum(y_i * _TRAPEZOID_WEIGHTS * dx, axis=-1))
