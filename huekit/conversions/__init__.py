"""
Huekit Color Space Conversions
==============================

Numeric transformations between the seven supported formats. Every format
maps to and from an RGBA pivot ``(r, g, b, a)`` with 8-bit color channels and
a unit alpha.

Two layers
----------
Float engine (unit inputs/outputs, no rounding):
    unit_rgb_to_hsl(r, g, b)        -> (h°, s, l)
    hsl_to_unit_rgb(h, s, l)        -> (r, g, b)
    unit_rgb_to_hsv(r, g, b)        -> (h°, s, v)
    hsv_to_unit_rgb(h, s, v)        -> (r, g, b)
    unit_rgb_to_cmyk(r, g, b)       -> (c, m, y, k)
    cmyk_to_unit_rgb(c, m, y, k)    -> (r, g, b)

Integer layer used by the color classes (quantizes at the boundary):
    rgb_to_hsl / hsl_to_rgb
    rgb_to_hsv / hsv_to_rgb
    rgb_to_cmyk / cmyk_to_rgb
    flatten_alpha(r, g, b, a)       composite over white
    rgb_to_hex_digits / hex_digits_to_rgba

High-Level API
--------------
    to_pivot(channels, space)
    from_pivot(rgba, space)
    convert(channels, from_space, to_space)

Examples
--------
>>> from huekit.conversions import convert, rgb_to_hsl
>>> rgb_to_hsl(43, 196, 138)
(157, 64, 47)
>>> convert((100, 34, 53, 38), "cmyk", "rgb")
(0, 104, 74)
"""

# RGB -> HSL / HSV / CMYK
from .to_hsl import unit_rgb_to_hsl, rgb_to_hsl, normalize_hue
from .to_hsv import unit_rgb_to_hsv, rgb_to_hsv
from .to_cmyk import unit_rgb_to_cmyk, rgb_to_cmyk

# HSL / HSV / CMYK -> RGB
from .to_rgb import (
    hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    cmyk_to_unit_rgb,
    unit_rgb_to_bytes,
    hsl_to_rgb,
    hsv_to_rgb,
    cmyk_to_rgb,
    flatten_alpha,
)

# Hex digits
from .to_hex import rgb_to_hex_digits, hex_digits_to_rgba, alpha_to_byte

# High-level API
from .wrapper import convert, to_pivot, from_pivot, BASE_SPACE

__all__ = [
    # Float engine
    'unit_rgb_to_hsl',
    'hsl_to_unit_rgb',
    'unit_rgb_to_hsv',
    'hsv_to_unit_rgb',
    'unit_rgb_to_cmyk',
    'cmyk_to_unit_rgb',
    'unit_rgb_to_bytes',
    'normalize_hue',

    # Integer layer
    'rgb_to_hsl',
    'hsl_to_rgb',
    'rgb_to_hsv',
    'hsv_to_rgb',
    'rgb_to_cmyk',
    'cmyk_to_rgb',
    'flatten_alpha',

    # Hex
    'rgb_to_hex_digits',
    'hex_digits_to_rgba',
    'alpha_to_byte',

    # High-level API
    'convert',
    'to_pivot',
    'from_pivot',
    'BASE_SPACE',
]
