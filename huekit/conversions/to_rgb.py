import math

from ..channels import round_half_up, truncate
from ..types.channel_type import HUE_360
from ..types.color_types import ByteTriple, UnitTriple


def _sector_rgb(h: float, c: float, x: float) -> UnitTriple:
    """Place chroma ``c`` and secondary ``x`` according to the hue sector."""
    hue_section = int(math.floor((h % HUE_360) / 60))

    if hue_section == 0:
        return c, x, 0.0
    elif hue_section == 1:
        return x, c, 0.0
    elif hue_section == 2:
        return 0.0, c, x
    elif hue_section == 3:
        return 0.0, x, c
    elif hue_section == 4:
        return x, 0.0, c
    else:
        return c, 0.0, x


def hsl_to_unit_rgb(h: float, s: float, l: float) -> UnitTriple:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees (any value, wrapped into [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs(((h % HUE_360) / 60) % 2 - 1))
    m = l - c / 2
    r, g, b = _sector_rgb(h, c, x)
    return r + m, g + m, b + m


def hsv_to_unit_rgb(h: float, s: float, v: float) -> UnitTriple:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in degrees
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    c = v * s
    x = c * (1 - abs(((h % HUE_360) / 60) % 2 - 1))
    m = v - c
    r, g, b = _sector_rgb(h, c, x)
    return r + m, g + m, b + m


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> UnitTriple:
    """Convert CMYK in [0, 1] to RGB in [0, 1]."""
    t = 1.0 - k
    return (1.0 - c) * t, (1.0 - m) * t, (1.0 - y) * t


def unit_rgb_to_bytes(r: float, g: float, b: float) -> ByteTriple:
    """Scale RGB in [0, 1] to 8-bit channels, rounding half up."""
    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)


def _hsl_bytes(r: float, g: float, b: float) -> ByteTriple:
    # green truncates, red and blue round
    return round_half_up(r * 255), truncate(g * 255), round_half_up(b * 255)


def hsl_to_rgb(h: int, s: int, l: int) -> ByteTriple:
    """Convert integer HSL (degrees, percent, percent) to 8-bit RGB."""
    return _hsl_bytes(*hsl_to_unit_rgb(h, s / 100, l / 100))


def hsv_to_rgb(h: int, s: int, v: int) -> ByteTriple:
    """Convert integer HSV (degrees, percent, percent) to 8-bit RGB."""
    return unit_rgb_to_bytes(*hsv_to_unit_rgb(h, s / 100, v / 100))


def cmyk_to_rgb(c: int, m: int, y: int, k: int) -> ByteTriple:
    """Convert integer CMYK percentages to 8-bit RGB."""
    return unit_rgb_to_bytes(*cmyk_to_unit_rgb(c / 100, m / 100, y / 100, k / 100))


def flatten_alpha(r: int, g: int, b: int, a: float) -> ByteTriple:
    """
    Composite a translucent color over white.

    Each channel becomes ``channel * a + 255 * (1 - a)``, truncated. An
    opaque color comes back unchanged.
    """
    if a >= 1.0:
        return r, g, b
    return (
        truncate(r * a + 255 * (1 - a)),
        truncate(g * a + 255 * (1 - a)),
        truncate(b * a + 255 * (1 - a)),
    )
