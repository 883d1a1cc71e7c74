from ..errors import AtmosphereProfileError
from ..models.atmosphere import AtmosphereParameters
from .profiles import earth_profile, toy_profile

ATMOSPHERE_PRESETS: dict[str, AtmosphereParameters] = {
    "earth": earth_profile,
    "toy": toy_profile,
}


def get_atmosphere(name: str) -> AtmosphereParameters:
    """Get a preset atmosphere by name.

    Args:
        name: Preset name (case-insensitive)

    Returns:
        AtmosphereParameters of the preset

    Raises:
        AtmosphereProfileError: If the name is not a known preset
    """
    profile = ATMOSPHERE_PRESETS.get(name.lower())

    if profile is None:
        raise AtmosphereProfileError(name, list(ATMOSPHERE_PRESETS.keys()))

    return profile
