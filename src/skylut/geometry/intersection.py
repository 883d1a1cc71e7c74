"""Ray/sphere intersections against the ground and the top of the atmosphere.

A ray is given by the radius r of its origin and the cosine mu of the angle
between the local zenith and the ray direction. Inputs may be floats or
broadcastable numpy arrays.
"""

import numpy as np

from ..models.atmosphere import AtmosphereParameters
from ..numerics import as_output, clamp_distance, require, safe_sqrt


def _require_cosine(mu) -> None:
    require((mu >= -1.0) & (mu <= 1.0), "mu must lie in [-1, 1]")


def distance_to_top_atmosphere_boundary(atmosphere: AtmosphereParameters, r, mu):
    """Distance along the ray to the outer atmosphere sphere."""
    require(r <= atmosphere.top_radius, "r must not exceed top_radius")
    _require_cosine(mu)
    discriminant = r * r * (mu * mu - 1.0) + atmosphere.top_radius * atmosphere.top_radius
    return as_output(clamp_distance(-r * mu + safe_sqrt(discriminant)))


def distance_to_bottom_atmosphere_boundary(atmosphere: AtmosphereParameters, r, mu):
    """Distance along the ray to the ground sphere."""
    require(r >= atmosphere.bottom_radius, "r must not be below bottom_radius")
    _require_cosine(mu)
    discriminant = (
        r * r * (mu * mu - 1.0) + atmosphere.bottom_radius * atmosphere.bottom_radius
    )
    return as_output(clamp_distance(-r * mu - safe_sqrt(discriminant)))


def ray_intersects_ground(atmosphere: AtmosphereParameters, r, mu):
    """Whether the ray points downward and reaches the ground sphere."""
    require(r >= atmosphere.bottom_radius, "r must not be below bottom_radius")
    _require_cosine(mu)
    discriminant = (
        r * r * (mu * mu - 1.0) + atmosphere.bottom_radius * atmosphere.bottom_radius
    )
    hits = np.logical_and(mu < 0.0, discriminant >= 0.0)
    if np.ndim(hits) == 0:
        return bool(hits)
    return hits
