from __future__ import annotations
from typing import Literal, Tuple

Scalar = int | float
ByteTriple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, float]
UnitTriple = Tuple[float, float, float]
ChannelTuple = Tuple[Scalar, ...]
ColorSpace = Literal["hex", "rgb", "rgba", "hsl", "hsla", "hsv", "cmyk"]

COLOR_SPACES: Tuple[ColorSpace, ...] = ("hex", "rgb", "rgba", "hsl", "hsla", "hsv", "cmyk")
HUE_SPACES = {"hsl", "hsla", "hsv"}
ALPHA_SPACES = {"hex", "rgba", "hsla"}

OPAQUE = 1.0


def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space carries a hue channel (HSL, HSLA or HSV).

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES


def is_alpha_space(color_space: str) -> bool:
    """Check if the given color space stores an alpha channel."""
    return color_space.lower() in ALPHA_SPACES


def normalize_space(color_space: str) -> ColorSpace:
    """Lower-case a color space name and reject unknown ones."""
    space = color_space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown color space: {color_space}")
    return space  # type: ignore[return-value]
