"""sRGB colour-space conversion."""


def srgb_to_linear(c: float) -> float:
    """Convert one sRGB channel in [0, 1] to linear light."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4