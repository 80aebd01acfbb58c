"""
Parsing and canonical rendering of color notations.

Grammar (whitespace around separators is tolerated, names are
case-insensitive)::

    #RGB | #RRGGBB | #RRGGBBAA
    rgb(r,g,b)            rgba(r,g,b,a)
    hsl(h,s%,l%)          hsla(h,s%,l%,a)
    hsv(h,s%,v%)
    cmyk(c,m,y,k)

Malformed literals raise ``ParseError``. Numbers that are merely out of range
are accepted and clamped by the color classes.
"""

from .errors import ParseError
from .parsers import parse_hex, parse_functional, parse_channels, detect_space
from .formatters import format_channels, format_hex, FORMATTERS

__all__ = [
    'ParseError',
    'parse_hex',
    'parse_functional',
    'parse_channels',
    'detect_space',
    'format_channels',
    'format_hex',
    'FORMATTERS',
]
