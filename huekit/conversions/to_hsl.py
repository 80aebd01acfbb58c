from ..channels import round_half_up
from ..types.channel_type import HUE_360
from ..types.color_types import UnitTriple


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % HUE_360


def rgb_hue(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """
    Hue in degrees from the standard 6-sector formula.

    Shared by the HSL and HSV transforms, which only differ in how they
    derive saturation and the third channel. Achromatic input has hue 0.
    """
    if delta == 0:
        return 0.0
    if max_c == r:
        hue = 60 * (((g - b) / delta) % 6)
    elif max_c == g:
        hue = 60 * (((b - r) / delta) + 2)
    else:
        hue = 60 * (((r - g) / delta) + 4)
    return normalize_hue(hue)


def unit_rgb_to_hsl(r: float, g: float, b: float) -> UnitTriple:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        saturation = 0.0
    else:
        saturation = delta / (1 - abs(2 * lightness - 1))

    return rgb_hue(r, g, b, max_c, delta), saturation, lightness


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Convert 8-bit RGB to integer HSL (degrees, percent, percent)."""
    h, s, l = unit_rgb_to_hsl(r / 255, g / 255, b / 255)
    return round_half_up(h) % HUE_360, round_half_up(s * 100), round_half_up(l * 100)
