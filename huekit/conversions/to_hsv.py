from ..channels import round_half_up
from ..types.channel_type import HUE_360
from ..types.color_types import UnitTriple
from .to_hsl import rgb_hue


def unit_rgb_to_hsv(r: float, g: float, b: float) -> UnitTriple:
    """
    Convert RGB to HSV.

    Value is the largest channel; saturation is the chroma relative to it and
    is 0 for black.

    Args:
        r, g, b: components in [0, 1]

    Returns:
        (hue [0,360), saturation [0,1], value [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    saturation = 0.0 if max_c == 0 else delta / max_c

    return rgb_hue(r, g, b, max_c, delta), saturation, max_c


def rgb_to_hsv(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Convert 8-bit RGB to integer HSV (degrees, percent, percent)."""
    h, s, v = unit_rgb_to_hsv(r / 255, g / 255, b / 255)
    return round_half_up(h) % HUE_360, round_half_up(s * 100), round_half_up(v * 100)
