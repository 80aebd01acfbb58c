"""
Huekit Color Classes
====================

Seven mutable color classes sharing one ``ColorBase``. Each stores its own
channels and reaches every other format through the RGBA pivot.

Usage
-----
>>> from huekit.colors import Hex
>>> color = Hex("#2bc48a").to_rgb()
>>> str(color.set_red(255))
'rgb(255,196,138)'
>>> str(color.to_rgba().set_alpha(0.5).to_hsl().set_hue(240))
'hsl(240,100%,88%)'

Color Classes
-------------
    - Hex:  #RRGGBB / #RRGGBBAA, read-only channels
    - RGB:  red, green, blue (0-255)
    - RGBA: RGB plus alpha (0.0-1.0)
    - HSL:  hue (degrees), saturation, lightness (percent)
    - HSLA: HSL plus alpha
    - HSV:  hue (degrees), saturation, value (percent)
    - CMYK: cyan, magenta, yellow, black (percent)

Notes
-----
- Channels are clamped on construction and in setters; hue wraps
- Setters update the receiver and return it
- Conversion methods are attached in ``color``, algebra in ``algebra``
"""

from .color_base import ColorBase
from .hex import Hex
from .rgb import RGB, RGBA
from .hsl import HSL, HSLA
from .hsv import HSV
from .cmyk import CMYK
from .color import color_convert, get_color_class, parse_color, convert_color, unified_space_to_class
from .algebra import get_default_rng, seed_default_rng, DARK_THRESHOLD, DEFAULT_MIX_WEIGHT


__all__ = [
    'ColorBase',
    'Hex',
    'RGB',
    'RGBA',
    'HSL',
    'HSLA',
    'HSV',
    'CMYK',
    'color_convert',
    'get_color_class',
    'parse_color',
    'convert_color',
    'unified_space_to_class',
    'get_default_rng',
    'seed_default_rng',
    'DARK_THRESHOLD',
    'DEFAULT_MIX_WEIGHT',
]
