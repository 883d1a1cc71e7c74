from .atmosphere import AtmosphereParameters, DensityProfile, DensityProfileLayer
from .spectral import SpectralAtmosphere

__all__ = [
    "AtmosphereParameters",
    "DensityProfile",
    "DensityProfileLayer",
    "SpectralAtmosphere",
]
