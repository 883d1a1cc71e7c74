"""Transmittance lookup-texture precomputation for atmospheric scattering."""

__version__ = "0.1.0"
