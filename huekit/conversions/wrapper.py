from typing import Callable, Dict

from ..types.color_types import ChannelTuple, ColorSpace, RGBATuple, OPAQUE, is_alpha_space, normalize_space
from .to_rgb import hsl_to_rgb, hsv_to_rgb, cmyk_to_rgb, flatten_alpha
from .to_hsl import rgb_to_hsl
from .to_hsv import rgb_to_hsv
from .to_cmyk import rgb_to_cmyk

# Channels of every space -> (r, g, b, a)
TO_PIVOT: Dict[str, Callable[[ChannelTuple], RGBATuple]] = {
    "hex":  lambda c: (int(c[0]), int(c[1]), int(c[2]), float(c[3])),
    "rgb":  lambda c: (int(c[0]), int(c[1]), int(c[2]), OPAQUE),
    "rgba": lambda c: (int(c[0]), int(c[1]), int(c[2]), float(c[3])),
    "hsl":  lambda c: (*hsl_to_rgb(c[0], c[1], c[2]), OPAQUE),
    "hsla": lambda c: (*hsl_to_rgb(c[0], c[1], c[2]), float(c[3])),
    "hsv":  lambda c: (*hsv_to_rgb(c[0], c[1], c[2]), OPAQUE),
    "cmyk": lambda c: (*cmyk_to_rgb(c[0], c[1], c[2], c[3]), OPAQUE),
}

# (r, g, b, a) -> channels of every space; spaces without alpha flatten first
FROM_PIVOT: Dict[str, Callable[[RGBATuple], ChannelTuple]] = {
    "hex":  lambda p: (p[0], p[1], p[2], p[3]),
    "rgb":  lambda p: flatten_alpha(*p),
    "rgba": lambda p: (p[0], p[1], p[2], p[3]),
    "hsl":  lambda p: rgb_to_hsl(*flatten_alpha(*p)),
    "hsla": lambda p: (*rgb_to_hsl(p[0], p[1], p[2]), p[3]),
    "hsv":  lambda p: rgb_to_hsv(*flatten_alpha(*p)),
    "cmyk": lambda p: rgb_to_cmyk(*flatten_alpha(*p)),
}

# Spaces sharing channel geometry; alpha is the only difference
BASE_SPACE: Dict[str, str] = {
    "hex": "rgb",
    "rgb": "rgb",
    "rgba": "rgb",
    "hsl": "hsl",
    "hsla": "hsl",
    "hsv": "hsv",
    "cmyk": "cmyk",
}


def to_pivot(channels: ChannelTuple, space: ColorSpace) -> RGBATuple:
    """Map a channel tuple of ``space`` to the (r, g, b, a) pivot."""
    return TO_PIVOT[normalize_space(space)](tuple(channels))


def from_pivot(rgba: RGBATuple, space: ColorSpace) -> ChannelTuple:
    """Map an (r, g, b, a) pivot to a channel tuple of ``space``."""
    return tuple(FROM_PIVOT[normalize_space(space)](tuple(rgba)))


def _same_geometry(channels: ChannelTuple, from_space: str, to_space: str) -> ChannelTuple | None:
    """
    Copy channels between spaces of one geometry (RGB/RGBA/Hex, HSL/HSLA).

    Returns None when the source is translucent and the target has no alpha:
    that case needs flattening through the pivot.
    """
    alpha = float(channels[3]) if is_alpha_space(from_space) else OPAQUE
    base = tuple(channels[:3])
    if is_alpha_space(to_space):
        return base + (alpha,)
    if alpha >= OPAQUE:
        return base
    return None


def convert(
    channels: ChannelTuple,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> ChannelTuple:
    """
    Convert a channel tuple between any two color spaces.

    Conversions go through the RGBA pivot. Spaces that share a geometry
    (HSL -> HSLA, RGB -> RGBA) copy their channels so no rounding is
    introduced. Never fails for in-range input.
    """
    fs, ts = normalize_space(from_space), normalize_space(to_space)
    if fs == ts:
        return tuple(channels)

    if BASE_SPACE[fs] == BASE_SPACE[ts]:
        copied = _same_geometry(tuple(channels), fs, ts)
        if copied is not None:
            return copied

    return from_pivot(to_pivot(channels, fs), ts)
