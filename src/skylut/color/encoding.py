"""Linear to sRGB encoding for LUT previews."""

import numpy as np


def linear_to_srgb(linear_rgb: np.ndarray) -> np.ndarray:
    """Apply sRGB gamma encoding.

    sRGB transfer function (IEC 61966-2-1:1999):
    - If linear <= 0.0031308: 12.92 * linear
    - Otherwise: 1.055 * linear^(1/2.4) - 0.055

    Args:
        linear_rgb: Linear values, nominally in [0, 1]

    Returns:
        np.ndarray: Gamma-encoded sRGB values in [0, 1]
    """
    threshold = 0.0031308
    a = 12.92
    b = 1.055
    c = 1.0 / 2.4
    d = 0.055

    linear_rgb = np.clip(np.asarray(linear_rgb, dtype=np.float64), 0.0, None)
    result = np.where(
        linear_rgb <= threshold, a * linear_rgb, b * np.power(linear_rgb, c) - d
    )

    return np.clip(result, 0.0, 1.0)


def linear_to_srgb_8bit(srgb_normalized: np.ndarray) -> np.ndarray:
    """Convert normalized sRGB values to 8-bit integer range.

    Args:
        srgb_normalized: sRGB values in [0, 1] range

    Returns:
        np.ndarray: sRGB values scaled to 8-bit range [0, 255]
    """
    return np.clip(srgb_normalized * 255.0 + 0.5, 0, 255).astype(np.uint8)
