"""
Color algebra shared by every color class.

All operations work on the RGBA pivot and convert the result back into the
receiver's class. They return a new color unless ``inplace=True`` is passed,
in which case the receiver is updated and returned.
"""

from __future__ import annotations
from typing import Optional

import numpy as np

from ..channels import clamp_fraction, clamp_byte, clamp_percent, clamp_unit, round_half_up, truncate, wrap_hue
from ..conversions import unit_rgb_to_hsl, hsl_to_unit_rgb, unit_rgb_to_bytes, flatten_alpha
from ..types.channel_type import ChannelKind, channel_random_bounds, channel_maxima, ALPHA_DECIMALS
from .color_base import ColorBase
from .color import parse_color

# Brightness below this is dark; the midpoint of the 0-255 channel range
DARK_THRESHOLD = 127.5
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])
DEFAULT_MIX_WEIGHT = 0.5

_default_rng: np.random.Generator = np.random.default_rng()


def get_default_rng() -> np.random.Generator:
    """Generator used by ``random`` when none is passed."""
    return _default_rng


def seed_default_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Replace the default generator with a freshly seeded one."""
    global _default_rng
    _default_rng = np.random.default_rng(seed)
    return _default_rng


def _finish(self: ColorBase, result: ColorBase, inplace: bool) -> ColorBase:
    if inplace:
        return self._replace(result)
    return result


def brightness(self: ColorBase) -> float:
    """Perceived brightness in [0, 255] of the color flattened over white."""
    rgb = np.array(flatten_alpha(*self.rgba), dtype=float)
    return float(np.dot(LUMA_WEIGHTS, rgb))


def is_dark(self: ColorBase) -> bool:
    return brightness(self) < DARK_THRESHOLD


def is_light(self: ColorBase) -> bool:
    return not is_dark(self)


def grayscale(self: ColorBase, *, inplace: bool = False) -> ColorBase:
    """Replace red, green and blue with their luma; alpha is kept."""
    r, g, b, a = self.rgba
    y = clamp_byte(round_half_up(float(np.dot(LUMA_WEIGHTS, (r, g, b)))))
    return _finish(self, self.from_rgba((y, y, y, a)), inplace)


def negate(self: ColorBase, *, inplace: bool = False) -> ColorBase:
    """
    Invert red, green and blue (``255 - channel``); alpha is kept.

    HSL and HSLA are negated in place on the hue circle: the hue turns by 180
    degrees and lightness mirrors, so negating twice gives back the same
    channels.
    """
    if self.base_space == "hsl":
        h, s, l = self.channels[:3]
        if s:
            h = wrap_hue(h + 180)
        negated = self.__class__(h, s, 100 - l, *self.channels[3:])
    else:
        r, g, b, a = self.rgba
        negated = self.from_rgba((255 - r, 255 - g, 255 - b, a))
    return _finish(self, negated, inplace)


def mix(
    self: ColorBase,
    other: ColorBase | str,
    weight: Optional[float] = None,
    *,
    inplace: bool = False,
) -> ColorBase:
    """
    Linearly interpolate towards ``other`` in the RGBA pivot.

    Each channel becomes ``self + (other - self) * weight``. Red, green and
    blue are truncated, alpha stays a float. The result has the receiver's
    class; classes without alpha get the mix flattened over white.

    Args:
        other: Color instance or any parsable notation
        weight: Share of ``other`` in [0, 1]; ``None`` means 0.5. Values
            outside the range are clamped with a warning.
        inplace: Update the receiver instead of returning a new color

    >>> from huekit import RGBA, HSL
    >>> str(RGBA(255, 255, 255, 1.0).mix(HSL(0, 0, 0)))
    'rgba(127,127,127,1.00)'
    """
    if isinstance(other, str):
        other = parse_color(other)
    w = DEFAULT_MIX_WEIGHT if weight is None else clamp_fraction(weight, "Mix weight")

    if other == self or w == 0.0:
        result = self.copy()
    elif w == 1.0:
        result = other.convert(self.space)
    else:
        start = np.array(self.rgba, dtype=float)
        end = np.array(other.rgba, dtype=float)
        mixed = start + (end - start) * w
        r, g, b = (truncate(v) for v in mixed[:3])
        result = self.from_rgba((r, g, b, float(mixed[3])))
    return _finish(self, result, inplace)


def _shift_lightness(self: ColorBase, delta: float, inplace: bool) -> ColorBase:
    if self.base_space == "hsl":
        h, s, l = self.channels[:3]
        l = clamp_percent(l + round_half_up(delta * channel_maxima[ChannelKind.PERCENT]))
        return _finish(self, self.__class__(h, s, l, *self.channels[3:]), inplace)

    r, g, b, a = self.rgba
    h, s, l = unit_rgb_to_hsl(r / 255, g / 255, b / 255)
    rgb = unit_rgb_to_bytes(*hsl_to_unit_rgb(h, s, clamp_unit(l + delta)))
    return _finish(self, self.from_rgba((*rgb, a)), inplace)


def lighten(self: ColorBase, ratio: float, *, inplace: bool = False) -> ColorBase:
    """Raise HSL lightness by ``ratio`` (a fraction of full lightness)."""
    return _shift_lightness(self, clamp_fraction(ratio, "Lighten ratio"), inplace)


def darken(self: ColorBase, ratio: float, *, inplace: bool = False) -> ColorBase:
    """Lower HSL lightness by ``ratio`` (a fraction of full lightness)."""
    return _shift_lightness(self, -clamp_fraction(ratio, "Darken ratio"), inplace)


def random(cls: type[ColorBase], rng: Optional[np.random.Generator] = None) -> ColorBase:
    """
    Draw every channel uniformly from its range.

    Integer channels use ``rng.integers``; alpha is ``rng.random()`` rounded
    to two decimals. Pass a seeded ``numpy.random.Generator`` for
    reproducible colors, otherwise the module default is used.
    """
    if rng is None:
        rng = get_default_rng()
    values = []
    for kind in cls.channel_kinds:
        if kind is ChannelKind.UNIT:
            values.append(round(float(rng.random()), ALPHA_DECIMALS))
        else:
            values.append(int(rng.integers(0, channel_random_bounds[kind])))
    return cls(*values)


ColorBase.brightness = brightness
ColorBase.is_dark = is_dark
ColorBase.is_light = is_light
ColorBase.grayscale = grayscale
ColorBase.negate = negate
ColorBase.mix = mix
ColorBase.lighten = lighten
ColorBase.darken = darken
ColorBase.random = classmethod(random)  # type: ignore[assignment]
