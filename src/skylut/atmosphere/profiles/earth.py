"""Earth atmosphere: literal RGB parameters and the spectral dataset behind them."""

import numpy as np

from ...models.atmosphere import AtmosphereParameters, DensityProfile, DensityProfileLayer
from ...models.spectral import SpectralAtmosphere
from ...units import deg, km, m, nm

# RGB parameters used to compute the LUT, in kilometers. They agree with
# derive_atmosphere_parameters(earth_spectral_atmosphere()) to six decimals.
earth_profile = AtmosphereParameters(
    solar_irradiance=(1.5, 1.5, 1.5),
    sun_angular_radius=0.004675,
    bottom_radius=6360.0,
    top_radius=6420.0,
    rayleigh_density=DensityProfile(
        layers=(
            DensityProfileLayer(),
            DensityProfileLayer(0.0, 1.0, -0.125, 0.0, 0.0),
        )
    ),
    rayleigh_scattering=(0.005802, 0.013558, 0.033100),
    mie_density=DensityProfile(
        layers=(
            DensityProfileLayer(),
            DensityProfileLayer(0.0, 1.0, -0.833333, 0.0, 0.0),
        )
    ),
    mie_scattering=(0.003996, 0.003996, 0.003996),
    mie_extinction=(0.004440, 0.004440, 0.004440),
    mie_phase_function_g=0.8,
    absorption_density=DensityProfile(
        layers=(
            DensityProfileLayer(25.0, 0.0, 0.0, 0.066667, -0.666667),
            DensityProfileLayer(0.0, 0.0, 0.0, -0.066667, 2.666667),
        )
    ),
    absorption_extinction=(0.000650, 0.001881, 0.000085),
    ground_albedo=(0.1, 0.1, 0.1),
    mu_s_min=-0.207912,
)

LAMBDA_MIN = 360
LAMBDA_MAX = 830

# ASTM G-173 extraterrestrial spectrum averaged over 10 nm bins starting at
# each wavelength, in W.m^-2.nm^-1.
SOLAR_IRRADIANCE = np.array([
    1.11776, 1.14259, 1.01249, 1.14716, 1.72765, 1.73054, 1.6887, 1.61253,
    1.91198, 2.03474, 2.02042, 2.02212, 1.93377, 1.95809, 1.91686, 1.8298,
    1.8685, 1.8931, 1.85149, 1.8504, 1.8341, 1.8345, 1.8147, 1.78158, 1.7533,
    1.6965, 1.68194, 1.64654, 1.6048, 1.52143, 1.55622, 1.5113, 1.474, 1.4482,
    1.41018, 1.36775, 1.34188, 1.31429, 1.28303, 1.26758, 1.2367, 1.2082,
    1.18737, 1.14683, 1.12362, 1.1058, 1.07124, 1.04992,
])

# Ozone absorption cross section at 233K (IUP Bremen, 2011), averaged over the
# same 10 nm bins, in m^2.
OZONE_CROSS_SECTION = np.array([
    1.18e-27, 2.182e-28, 2.818e-28, 6.636e-28, 1.527e-27, 2.763e-27, 5.52e-27,
    8.451e-27, 1.582e-26, 2.316e-26, 3.669e-26, 4.924e-26, 7.752e-26, 9.016e-26,
    1.48e-25, 1.602e-25, 2.139e-25, 2.755e-25, 3.091e-25, 3.5e-25, 4.266e-25,
    4.672e-25, 4.398e-25, 4.701e-25, 5.019e-25, 4.305e-25, 3.74e-25, 3.215e-25,
    2.662e-25, 2.238e-25, 1.852e-25, 1.473e-25, 1.209e-25, 9.423e-26, 7.455e-26,
    6.566e-26, 5.105e-26, 4.15e-26, 4.228e-26, 3.237e-26, 2.451e-26, 2.801e-26,
    2.534e-26, 1.624e-26, 1.465e-26, 2.078e-26, 1.383e-26, 7.105e-27,
])

# Molecules per m^2.
DOBSON_UNIT = 2.687e20
# 300 DU spread over the ozone tent profile, whose integral is 15 km.
MAX_OZONE_NUMBER_DENSITY = 300.0 * DOBSON_UNIT / 15000.0

CONSTANT_SOLAR_IRRADIANCE = 1.5
BOTTOM_RADIUS = 6360.0 * km
TOP_RADIUS = 6420.0 * km
RAYLEIGH = 1.24062e-6
RAYLEIGH_SCALE_HEIGHT = 8.0 * km
MIE_SCALE_HEIGHT = 1.2 * km
MIE_ANGSTROM_ALPHA = 0.0
MIE_ANGSTROM_BETA = 5.328e-3
MIE_SINGLE_SCATTERING_ALBEDO = 0.9
MIE_PHASE_FUNCTION_G = 0.8
GROUND_ALBEDO = 0.1
MAX_SUN_ZENITH_ANGLE = 102.0 * deg
SUN_ANGULAR_RADIUS = 0.00935 / 2.0
LENGTH_UNIT_IN_METERS = 1000.0 * m


def ozone_layers() -> tuple[DensityProfileLayer, DensityProfileLayer]:
    """Ozone density rising linearly from 0 at 10 km to 1 at 25 km, back to 0 at 40 km."""
    return (
        DensityProfileLayer(25.0 * km, 0.0, 0.0, 1.0 / (15.0 * km), -2.0 / 3.0),
        DensityProfileLayer(0.0, 0.0, 0.0, -1.0 / (15.0 * km), 8.0 / 3.0),
    )


def earth_spectral_atmosphere(
    use_constant_solar_irradiance: bool = True,
) -> SpectralAtmosphere:
    """Earth sampled every 10 nm from 360 to 830 nm, lengths in meters.

    Args:
        use_constant_solar_irradiance: Use a flat 1.5 W.m^-2.nm^-1 sun instead
            of the measured spectrum. The flat sun is not physically realistic
            but is what the shader parameters were generated with.
    """
    wavelengths = np.arange(LAMBDA_MIN, LAMBDA_MAX + 1, 10, dtype=np.float64) * nm
    # Angstrom and Rayleigh laws take wavelengths in micrometers.
    lambda_um = wavelengths * 1e-3

    mie = MIE_ANGSTROM_BETA / MIE_SCALE_HEIGHT * np.power(lambda_um, -MIE_ANGSTROM_ALPHA)
    if use_constant_solar_irradiance:
        solar_irradiance = np.full(len(wavelengths), CONSTANT_SOLAR_IRRADIANCE)
    else:
        solar_irradiance = SOLAR_IRRADIANCE

    return SpectralAtmosphere(
        wavelengths=wavelengths,
        solar_irradiance=solar_irradiance,
        sun_angular_radius=SUN_ANGULAR_RADIUS,
        bottom_radius=BOTTOM_RADIUS,
        top_radius=TOP_RADIUS,
        rayleigh_density=(
            DensityProfileLayer(0.0, 1.0, -1.0 / RAYLEIGH_SCALE_HEIGHT, 0.0, 0.0),
        ),
        rayleigh_scattering=RAYLEIGH * np.power(lambda_um, -4),
        mie_density=(DensityProfileLayer(0.0, 1.0, -1.0 / MIE_SCALE_HEIGHT, 0.0, 0.0),),
        mie_scattering=mie * MIE_SINGLE_SCATTERING_ALBEDO,
        mie_extinction=mie,
        mie_phase_function_g=MIE_PHASE_FUNCTION_G,
        absorption_density=ozone_layers(),
        absorption_extinction=MAX_OZONE_NUMBER_DENSITY * OZONE_CROSS_SECTION,
        ground_albedo=np.full(len(wavelengths), GROUND_ALBEDO),
        max_sun_zenith_angle=MAX_SUN_ZENITH_ANGLE,
        length_unit_in_meters=LENGTH_UNIT_IN_METERS,
    )
