from .encoding import linear_to_srgb, linear_to_srgb_8bit

__all__ = [
    "linear_to_srgb",
    "linear_to_srgb_8bit",
]
