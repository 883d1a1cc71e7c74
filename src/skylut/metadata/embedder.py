"""LUT image output: float OpenEXR for the renderer, PNG preview with metadata."""

from typing import Dict, Optional

import numpy as np
import OpenEXR
from PIL import Image, PngImagePlugin

from .. import __version__
from ..color.encoding import linear_to_srgb, linear_to_srgb_8bit
from ..errors import ImageWriteError
from ..lut.generator import lut_to_image
from ..models.atmosphere import AtmosphereParameters

LUT_FILENAME = "LUT.exr"
PREVIEW_FILENAME = "LUT_preview.png"


def write_lut_exr(buffer: np.ndarray, width: int, height: int, output_path: str) -> None:
    """Save a flat RGB LUT buffer as a 32-bit float OpenEXR image.

    Values are stored unquantized so transmittance close to 1.0 keeps its
    precision.

    Args:
        buffer: Flat row-major RGB buffer of length width * height * 3
        width: Image width in texels
        height: Image height in texels
        output_path: Destination file path

    Raises:
        ImageWriteError: If the file cannot be written
    """
    pixels = np.ascontiguousarray(
        lut_to_image(np.asarray(buffer, dtype=np.float32), width, height)
    )

    header = {
        "compression": OpenEXR.ZIP_COMPRESSION,
        "type": OpenEXR.scanlineimage,
    }
    channels = {"RGB": pixels}

    try:
        with OpenEXR.File(header, channels) as exr_file:
            exr_file.write(str(output_path))
    except (OSError, RuntimeError, ValueError) as e:
        raise ImageWriteError(str(output_path), str(e)) from e


def read_lut_exr(image_path: str) -> np.ndarray:
    """Load an RGB OpenEXR image as a (height, width, 3) float32 array."""
    with OpenEXR.File(str(image_path)) as exr_file:
        pixels = exr_file.channels()["RGB"].pixels
    return np.asarray(pixels, dtype=np.float32)


def write_lut_preview(
    buffer: np.ndarray,
    width: int,
    height: int,
    atmosphere: AtmosphereParameters,
    output_path: str,
) -> None:
    """Save an 8-bit sRGB PNG preview of the LUT with embedded metadata.

    Args:
        buffer: Flat row-major RGB buffer of length width * height * 3
        width: Image width in texels
        height: Image height in texels
        atmosphere: Atmosphere the LUT was computed for
        output_path: Destination file path

    Raises:
        ImageWriteError: If the file cannot be written
    """
    image_linear = lut_to_image(np.asarray(buffer, dtype=np.float32), width, height)
    image_8bit = linear_to_srgb_8bit(linear_to_srgb(image_linear))

    png_info = PngImagePlugin.PngInfo()
    for key, value in _atmosphere_to_metadata_dict(atmosphere).items():
        png_info.add_text(key, value)
    png_info.add_text("lut_size", f"{width}x{height}")

    image = Image.fromarray(image_8bit)
    try:
        image.save(str(output_path), "PNG", pnginfo=png_info)
    except OSError as e:
        raise ImageWriteError(str(output_path), str(e)) from e


def _format_rgb(rgb) -> str:
    return ",".join(f"{c:.6g}" for c in rgb)


def _atmosphere_to_metadata_dict(atmosphere: AtmosphereParameters) -> Dict[str, str]:
    """Convert the atmosphere to PNG text chunk values.

    Args:
        atmosphere: Atmosphere parameters

    Returns:
        Dictionary with string values for PNG text chunks
    """
    return {
        "generator": f"skylut-{__version__}",
        "bottom_radius": str(atmosphere.bottom_radius),
        "top_radius": str(atmosphere.top_radius),
        "sun_angular_radius": str(atmosphere.sun_angular_radius),
        "rayleigh_scattering": _format_rgb(atmosphere.rayleigh_scattering),
        "mie_extinction": _format_rgb(atmosphere.mie_extinction),
        "absorption_extinction": _format_rgb(atmosphere.absorption_extinction),
        "mie_phase_function_g": str(atmosphere.mie_phase_function_g),
        "mu_s_min": str(atmosphere.mu_s_min),
    }


def extract_metadata(image_path: str) -> Optional[Dict[str, str]]:
    """Extract metadata from a PNG preview.

    Args:
        image_path: Path to PNG file

    Returns:
        Dictionary of metadata key-value pairs, or None if no metadata found
    """
    try:
        image = Image.open(image_path)
    except FileNotFoundError:
        return None

    metadata = {}
    if hasattr(image, "text"):
        for key, value in image.text.items():
            metadata[key] = value

    return metadata if metadata else None
