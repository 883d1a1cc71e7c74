"""GLSL source text for an AtmosphereParameters constant.

The renderer's shader declares its atmosphere as a literal constant; this
module prints that constant. Scalars use six decimals, matching C's "%f".
"""

from typing import Tuple

from ..models.atmosphere import AtmosphereParameters, DensityProfile, DensityProfileLayer
from ..models.spectral import SpectralAtmosphere
from .model import RGB_WAVELENGTHS, derive_atmosphere_parameters


def _scalar(value: float) -> str:
    return f"{value:f}"


def _vec3(rgb) -> str:
    return "vec3(" + ",".join(_scalar(c) for c in rgb) + ")"


def _layer(layer: DensityProfileLayer) -> str:
    return (
        "DensityProfileLayer("
        + ",".join(
            _scalar(v)
            for v in (
                layer.width,
                layer.exp_term,
                layer.exp_scale,
                layer.linear_term,
                layer.constant_term,
            )
        )
        + ")"
    )


def _profile(profile: DensityProfile) -> str:
    layers = ",".join(_layer(layer) for layer in profile.layers)
    return f"DensityProfile(DensityProfileLayer[{len(profile.layers)}]({layers}))"


def format_atmosphere_parameters(atmosphere: AtmosphereParameters) -> str:
    """Format an atmosphere as a GLSL `const AtmosphereParameters` declaration."""
    fields = [
        _vec3(atmosphere.solar_irradiance),
        _scalar(atmosphere.sun_angular_radius),
        _scalar(atmosphere.bottom_radius),
        _scalar(atmosphere.top_radius),
        _profile(atmosphere.rayleigh_density),
        _vec3(atmosphere.rayleigh_scattering),
        _profile(atmosphere.mie_density),
        _vec3(atmosphere.mie_scattering),
        _vec3(atmosphere.mie_extinction),
        _scalar(atmosphere.mie_phase_function_g),
        _profile(atmosphere.absorption_density),
        _vec3(atmosphere.absorption_extinction),
        _vec3(atmosphere.ground_albedo),
        _scalar(atmosphere.mu_s_min),
    ]
    return (
        "const AtmosphereParameters ATMOSPHERE = AtmosphereParameters(\n"
        + ",\n".join(fields)
        + ");\n"
    )


def format_glsl_header(
    spectral: SpectralAtmosphere,
    lambdas: Tuple[float, float, float] = RGB_WAVELENGTHS,
) -> str:
    """Derive RGB parameters at lambdas and format them as GLSL."""
    return format_atmosphere_parameters(derive_atmosphere_parameters(spectral, lambdas))
