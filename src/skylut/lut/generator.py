"""Transmittance LUT generation."""

from typing import Callable, Optional

import numpy as np

from ..models.atmosphere import AtmosphereParameters
from ..optics.transmittance import (
    compute_transmittance_to_top_atmosphere_boundary_texture,
)
from ..texture.parameterization import (
    TRANSMITTANCE_TEXTURE_HEIGHT,
    TRANSMITTANCE_TEXTURE_WIDTH,
)


def generate_transmittance_lut(
    atmosphere: AtmosphereParameters,
    width: int = TRANSMITTANCE_TEXTURE_WIDTH,
    height: int = TRANSMITTANCE_TEXTURE_HEIGHT,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> np.ndarray:
    """Compute the transmittance of every texel.

    Texel (row i, column j) is evaluated at pixel coordinates (j, i); the
    half-texel correction lives in the uv mapping. Texels are independent,
    so each row is evaluated as one vectorized batch.

    Args:
        atmosphere: Atmosphere to precompute
        width: Texture width in texels
        height: Texture height in texels
        progress_callback: Optional callable invoked as (rows_done, height)

    Returns:
        Flat row-major float32 buffer of length width * height * 3
    """
    if width < 2 or height < 2:
        raise ValueError("LUT width and height must be at least 2 texels")

    buffer = np.empty(width * height * 3, dtype=np.float32)
    columns = np.arange(width, dtype=np.float64)

    for i in range(height):
        frag_coord = np.stack([columns, np.full(width, float(i))], axis=-1)
        row = compute_transmittance_to_top_atmosphere_boundary_texture(
            atmosphere, frag_coord, width, height
        )
        start = i * width * 3
        buffer[start : start + width * 3] = row.reshape(-1)

        if progress_callback is not None:
            progress_callback(i + 1, height)

    return buffer


def lut_to_image(buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    """View a flat LUT buffer as a (height, width, 3) image."""
    if buffer.size != width * height * 3:
        raise ValueError(
            f"LUT buffer has {buffer.size} values, expected {width * height * 3}"
        )
    return buffer.reshape(height, width, 3)
