"""Mapping between transmittance texture coordinates and (r, mu) rays.

Texture coordinates do not map linearly to (r, mu). The vertical coordinate
is linear in rho, the distance to the horizon at ground level, and the
horizontal coordinate is linear in d, the distance to the top of the
atmosphere between its minimum (zenith) and maximum (horizon) values for the
given r. This concentrates texels near the horizon, where transmittance
varies fastest. The real-time renderer applies the inverse mapping when
sampling the LUT, so both directions here must stay in exact agreement with
it.
"""

from typing import Tuple

import numpy as np

from ..geometry.intersection import distance_to_top_atmosphere_boundary
from ..models.atmosphere import AtmosphereParameters
from ..numerics import as_output, clamp_cosine, require, safe_sqrt

TRANSMITTANCE_TEXTURE_WIDTH = 256
TRANSMITTANCE_TEXTURE_HEIGHT = 64


def get_texture_coord_from_unit_range(x, texture_size: int):
    """Map x in [0, 1] to the centers of the first and last texels."""
    return 0.5 / texture_size + x * (1.0 - 1.0 / texture_size)


def get_unit_range_from_texture_coord(u, texture_size: int):
    """Inverse of get_texture_coord_from_unit_range."""
    return (u - 0.5 / texture_size) / (1.0 - 1.0 / texture_size)


def _horizon_distance(atmosphere: AtmosphereParameters) -> float:
    # From the ground-level horizon point to the top of the atmosphere.
    return float(
        np.sqrt(
            atmosphere.top_radius * atmosphere.top_radius
            - atmosphere.bottom_radius * atmosphere.bottom_radius
        )
    )


def get_r_mu_from_transmittance_texture_uv(
    atmosphere: AtmosphereParameters,
    uv,
    width: int = TRANSMITTANCE_TEXTURE_WIDTH,
    height: int = TRANSMITTANCE_TEXTURE_HEIGHT,
) -> Tuple[float, float]:
    """Recover the ray (r, mu) represented by texture coordinates uv.

    Args:
        atmosphere: Atmosphere geometry
        uv: Texture coordinates in [0, 1], last axis holding (u, v)
        width: Texture width in texels
        height: Texture height in texels

    Returns:
        (r, mu) as floats, or arrays with the leading shape of uv
    """
    uv = np.asarray(uv, dtype=np.float64)
    require((uv >= 0.0) & (uv <= 1.0), "uv must lie in [0, 1]")

    x_mu = get_unit_range_from_texture_coord(uv[..., 0], width)
    x_r = get_unit_range_from_texture_coord(uv[..., 1], height)

    H = _horizon_distance(atmosphere)
    rho = H * x_r
    r = np.sqrt(rho * rho + atmosphere.bottom_radius * atmosphere.bottom_radius)

    d_min = atmosphere.top_radius - r
    d_max = rho + H
    d = d_min + x_mu * (d_max - d_min)

    with np.errstate(divide="ignore", invalid="ignore"):
        mu = np.where(d == 0.0, 1.0, (H * H - rho * rho - d * d) / (2.0 * r * d))
    mu = clamp_cosine(mu)

    return as_output(r), as_output(mu)


def get_transmittance_texture_uv_from_r_mu(
    atmosphere: AtmosphereParameters,
    r,
    mu,
    width: int = TRANSMITTANCE_TEXTURE_WIDTH,
    height: int = TRANSMITTANCE_TEXTURE_HEIGHT,
) -> np.ndarray:
    """Texture coordinates of the texel storing the ray (r, mu).

    This is the lookup performed by the consumer of the LUT.

    Returns:
        Array of shape (..., 2) holding (u, v)
    """
    require(
        (r >= atmosphere.bottom_radius) & (r <= atmosphere.top_radius),
        "r must lie in [bottom_radius, top_radius]",
    )
    require((mu >= -1.0) & (mu <= 1.0), "mu must lie in [-1, 1]")

    H = _horizon_distance(atmosphere)
    rho = safe_sqrt(r * r - atmosphere.bottom_radius * atmosphere.bottom_radius)

    d = distance_to_top_atmosphere_boundary(atmosphere, r, mu)
    d_min = atmosphere.top_radius - r
    d_max = rho + H
    x_mu = (d - d_min) / (d_max - d_min)
    x_r = rho / H

    return np.stack(
        [
            get_texture_coord_from_unit_range(x_mu, width),
            get_texture_coord_from_unit_range(x_r, height),
        ],
        axis=-1,
    )
