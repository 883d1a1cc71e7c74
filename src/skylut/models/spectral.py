from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .atmosphere import DensityProfileLayer

_PER_WAVELENGTH_FIELDS = (
    "solar_irradiance",
    "rayleigh_scattering",
    "mie_scattering",
    "mie_extinction",
    "absorption_extinction",
    "ground_albedo",
)


@dataclass(frozen=True, eq=False)
class SpectralAtmosphere:
    """Wavelength-sampled atmosphere, lengths in meters.

    Per-wavelength quantities are sampled at `wavelengths` (nm, ascending).
    Density layers may number fewer than two.
    """

    wavelengths: np.ndarray
    solar_irradiance: np.ndarray
    sun_angular_radius: float
    bottom_radius: float
    top_radius: float
    rayleigh_density: Tuple[DensityProfileLayer, ...]
    rayleigh_scattering: np.ndarray
    mie_density: Tuple[DensityProfileLayer, ...]
    mie_scattering: np.ndarray
    mie_extinction: np.ndarray
    mie_phase_function_g: float
    absorption_density: Tuple[DensityProfileLayer, ...]
    absorption_extinction: np.ndarray
    ground_albedo: np.ndarray
    max_sun_zenith_angle: float
    length_unit_in_meters: float = 1000.0

    def __post_init__(self):
        wavelengths = np.asarray(self.wavelengths, dtype=np.float64)
        if wavelengths.ndim != 1 or len(wavelengths) == 0:
            raise ValueError("wavelengths must be a non-empty 1-D sequence")
        if np.any(np.diff(wavelengths) <= 0):
            raise ValueError("wavelengths must be strictly ascending")
        object.__setattr__(self, "wavelengths", wavelengths)

        for name in _PER_WAVELENGTH_FIELDS:
            values = np.asarray(getattr(self, name), dtype=np.float64)
            if len(values) != len(wavelengths):
                raise ValueError(f"wavelengths and {name} must have same length")
            object.__setattr__(self, name, values)

        for name in ("rayleigh_density", "mie_density", "absorption_density"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
