from .glsl import format_atmosphere_parameters, format_glsl_header
from .model import RGB_WAVELENGTHS, derive_atmosphere_parameters, interpolate

__all__ = [
    "RGB_WAVELENGTHS",
    "derive_atmosphere_parameters",
    "format_atmosphere_parameters",
    "format_glsl_header",
    "interpolate",
]
