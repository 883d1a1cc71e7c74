"""Transmittance from a point inside the atmosphere to its top boundary."""

import numpy as np

from ..models.atmosphere import AtmosphereParameters
from ..texture.parameterization import (
    TRANSMITTANCE_TEXTURE_HEIGHT,
    TRANSMITTANCE_TEXTURE_WIDTH,
    get_r_mu_from_transmittance_texture_uv,
)
from .integrator import (
    compute_optical_length_to_top_atmosphere_boundary,
    require_r_mu,
)


def compute_transmittance_to_top_atmosphere_boundary(
    atmosphere: AtmosphereParameters, r, mu
) -> np.ndarray:
    """RGB transmittance along the ray (r, mu) up to the top of the atmosphere.

    Rayleigh scattering does not absorb, so its scattering coefficient is also
    its extinction coefficient.

    Returns:
        Array of shape (..., 3) with values in (0, 1]
    """
    require_r_mu(atmosphere, r, mu)

    rayleigh_length = compute_optical_length_to_top_atmosphere_boundary(
        atmosphere, atmosphere.rayleigh_density, r, mu
    )
    mie_length = compute_optical_length_to_top_atmosphere_boundary(
        atmosphere, atmosphere.mie_density, r, mu
    )
    ozone_length = compute_optical_length_to_top_atmosphere_boundary(
        atmosphere, atmosphere.absorption_density, r, mu
    )

    rayleigh_term = np.asarray(atmosphere.rayleigh_scattering) * np.asarray(
        rayleigh_length
    )[..., np.newaxis]
    mie_term = np.asarray(atmosphere.mie_extinction) * np.asarray(mie_length)[
        ..., np.newaxis
    ]
    ozone_term = np.asarray(atmosphere.absorption_extinction) * np.asarray(
        ozone_length
    )[..., np.newaxis]

    return np.exp(-(rayleigh_term + mie_term + ozone_term))


def compute_transmittance_to_top_atmosphere_boundary_texture(
    atmosphere: AtmosphereParameters,
    frag_coord,
    width: int = TRANSMITTANCE_TEXTURE_WIDTH,
    height: int = TRANSMITTANCE_TEXTURE_HEIGHT,
) -> np.ndarray:
    """Transmittance stored in the texel at frag_coord = (x, y) pixel coordinates."""
    frag_coord = np.asarray(frag_coord, dtype=np.float64)
    uv = frag_coord / np.array([width, height], dtype=np.float64)
    r, mu = get_r_mu_from_transmittance_texture_uv(atmosphere, uv, width, height)
    return compute_transmittance_to_top_atmosphere_boundary(atmosphere, r, mu)
