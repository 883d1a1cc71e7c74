from dataclasses import dataclass, field
from typing import Sequence, Tuple

RGB = Tuple[float, float, float]

LAYER_COUNT = 2


@dataclass(frozen=True)
class DensityProfileLayer:
    """One altitude band of a density profile.

    Density at altitude h is exp_term * exp(exp_scale * h) + linear_term * h
    + constant_term, clamped to [0, 1]. The width of the top layer is ignored.
    """

    width: float = 0.0
    exp_term: float = 0.0
    exp_scale: float = 0.0
    linear_term: float = 0.0
    constant_term: float = 0.0


@dataclass(frozen=True)
class DensityProfile:
    """Two stacked layers: layers[0] below layers[0].width, layers[1] above."""

    layers: Tuple[DensityProfileLayer, DensityProfileLayer] = field(
        default_factory=lambda: (DensityProfileLayer(), DensityProfileLayer())
    )

    def __post_init__(self):
        object.__setattr__(self, "layers", tuple(self.layers))
        if len(self.layers) != LAYER_COUNT:
            raise ValueError(
                f"DensityProfile needs exactly {LAYER_COUNT} layers, got {len(self.layers)}"
            )

    @classmethod
    def from_layers(cls, layers: Sequence[DensityProfileLayer]) -> "DensityProfile":
        """Build a profile from up to two layers, padding empty layers below."""
        layers = list(layers)
        if len(layers) > LAYER_COUNT:
            raise ValueError(
                f"At most {LAYER_COUNT} density layers are supported, got {len(layers)}"
            )
        while len(layers) < LAYER_COUNT:
            layers.insert(0, DensityProfileLayer())
        return cls(layers=tuple(layers))

    @classmethod
    def exponential(cls, scale_height: float) -> "DensityProfile":
        """Pure exponential decay in the upper layer, as used for Rayleigh and Mie."""
        return cls.from_layers(
            [DensityProfileLayer(exp_term=1.0, exp_scale=-1.0 / scale_height)]
        )


@dataclass(frozen=True)
class AtmosphereParameters:
    """Physical description of one atmosphere, in a single length unit.

    Scattering and extinction coefficients are the values at the altitude
    where the species density is maximal; the coefficient at altitude h is
    the coefficient times the profile density at h.
    """

    solar_irradiance: RGB
    sun_angular_radius: float
    bottom_radius: float
    top_radius: float
    rayleigh_density: DensityProfile
    rayleigh_scattering: RGB
    mie_density: DensityProfile
    mie_scattering: RGB
    mie_extinction: RGB
    mie_phase_function_g: float
    absorption_density: DensityProfile
    absorption_extinction: RGB
    ground_albedo: RGB
    mu_s_min: float

    def __post_init__(self):
        for name in (
            "solar_irradiance",
            "rayleigh_scattering",
            "mie_scattering",
            "mie_extinction",
            "absorption_extinction",
            "ground_albedo",
        ):
            value = tuple(float(v) for v in getattr(self, name))
            if len(value) != 3:
                raise ValueError(f"{name} must have 3 components, got {len(value)}")
            object.__setattr__(self, name, value)

        if not self.bottom_radius < self.top_radius:
            raise ValueError(
                f"bottom_radius ({self.bottom_radius}) must be less than "
                f"top_radius ({self.top_radius})"
            )

        for name in (
            "rayleigh_scattering",
            "mie_scattering",
            "mie_extinction",
            "absorption_extinction",
        ):
            if min(getattr(self, name)) < 0.0:
                raise ValueError(f"{name} must be non-negative")

        if not -1.0 <= self.mu_s_min <= 1.0:
            raise ValueError(f"mu_s_min ({self.mu_s_min}) must lie in [-1, 1]")
