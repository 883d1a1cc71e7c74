"""Small test planet with a thick, ozone-free atmosphere, in kilometers."""

import math

from ...models.atmosphere import AtmosphereParameters, DensityProfile
from ...units import deg

toy_profile = AtmosphereParameters(
    solar_irradiance=(123.0, 123.0, 123.0),
    sun_angular_radius=0.00935 / 2.0,
    bottom_radius=1000.0,
    top_radius=1500.0,
    rayleigh_density=DensityProfile.exponential(60.0),
    rayleigh_scattering=(0.001, 0.001, 0.001),
    mie_density=DensityProfile.exponential(30.0),
    mie_scattering=(0.0015, 0.0015, 0.0015),
    mie_extinction=(0.002, 0.002, 0.002),
    mie_phase_function_g=0.8,
    absorption_density=DensityProfile(),
    absorption_extinction=(0.0, 0.0, 0.0),
    ground_albedo=(0.1, 0.1, 0.1),
    mu_s_min=math.cos(102.0 * deg),
)
