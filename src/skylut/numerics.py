"""Scalar clamping helpers shared by the geometry and optics code.

All helpers accept floats or numpy arrays.
"""

import numpy as np


def require(condition, message: str) -> None:
    """Raise ValueError unless every element of condition holds."""
    if not np.all(condition):
        raise ValueError(message)


def clamp(x, lower, upper):
    """Clamp x to [lower, upper] in single precision, widened back to float64."""
    with np.errstate(over="ignore"):
        clamped = np.clip(np.float32(x), np.float32(lower), np.float32(upper))
    return clamped.astype(np.float64)


def clamp_cosine(mu):
    return clamp(mu, -1.0, 1.0)


def clamp_distance(d):
    return np.maximum(d, 0.0)


def clamp_radius(atmosphere, r):
    return clamp(r, atmosphere.bottom_radius, atmosphere.top_radius)


def safe_sqrt(a):
    """Square root of a, with negative rounding noise treated as zero."""
    return np.sqrt(np.maximum(a, 0.0))


def as_output(value):
    """Return a Python float for 0-d results, the array otherwise."""
    if np.ndim(value) == 0:
        return float(value)
    return value
