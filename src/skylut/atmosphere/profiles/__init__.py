from .earth import earth_profile, earth_spectral_atmosphere
from .toy import toy_profile

__all__ = [
    "earth_profile",
    "earth_spectral_atmosphere",
    "toy_profile",
]
