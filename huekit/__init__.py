"""Huekit: color parsing, conversion and manipulation across seven formats."""

from .colors import (
    ColorBase,
    Hex,
    RGB,
    RGBA,
    HSL,
    HSLA,
    HSV,
    CMYK,
    parse_color,
    get_color_class,
    get_default_rng,
    seed_default_rng,
)
from .parsing import ParseError
from .conversions import (
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    unit_rgb_to_cmyk,
    cmyk_to_unit_rgb,
    convert,
)

__version__ = "0.1.0"

__all__ = [
    # core color types
    "ColorBase",
    "Hex",
    "RGB",
    "RGBA",
    "HSL",
    "HSLA",
    "HSV",
    "CMYK",
    # helpers
    "parse_color",
    "get_color_class",
    "get_default_rng",
    "seed_default_rng",
    "ParseError",
    # conversions
    "unit_rgb_to_hsl",
    "hsl_to_unit_rgb",
    "unit_rgb_to_hsv",
    "hsv_to_unit_rgb",
    "unit_rgb_to_cmyk",
    "cmyk_to_unit_rgb",
    "convert",
]
