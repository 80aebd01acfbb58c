"""
Channel model: clamping, wrapping and rounding rules shared by every format.

Every channel belongs to one of four kinds (see ``ChannelKind``):

- BYTE     integer 0-255 (red, green, blue)
- DEGREES  integer hue, cyclic over 360
- PERCENT  integer 0-100 (saturation, lightness, value, CMYK inks)
- UNIT     float 0.0-1.0 (alpha)

Out-of-range input is never rejected: linear channels saturate at the nearest
bound, hue wraps.
"""

from __future__ import annotations
import math
import warnings
from typing import Sequence, Tuple

from boundednumbers import clamp
from boundednumbers.functions import cyclic_wrap_float

from .types.channel_type import ChannelKind, channel_maxima, HUE_360, ALPHA_DECIMALS
from .types.color_types import Scalar


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    if value < 0:
        return -round_half_up(-value)
    return int(math.floor(value + 0.5))


def truncate(value: float) -> int:
    """Drop the fractional part, ignoring float noise below 1e-9."""
    return int(math.floor(round(value, 9)))


def wrap_hue(value: Scalar) -> int:
    """Wrap a hue angle into [0, 360) and cast to int (370 -> 10, -10 -> 350).

    A non-finite angle has no position on the circle and maps to 0.
    """
    if not math.isfinite(value):
        return 0
    return int(cyclic_wrap_float(float(value), 0.0, float(HUE_360))) % HUE_360


def clamp_byte(value: Scalar) -> int:
    return int(clamp(value, 0, channel_maxima[ChannelKind.BYTE]))


def clamp_percent(value: Scalar) -> int:
    return int(clamp(value, 0, channel_maxima[ChannelKind.PERCENT]))


def clamp_unit(value: Scalar) -> float:
    return float(clamp(float(value), 0.0, 1.0))


_normalizers = {
    ChannelKind.BYTE: clamp_byte,
    ChannelKind.DEGREES: wrap_hue,
    ChannelKind.PERCENT: clamp_percent,
    ChannelKind.UNIT: clamp_unit,
}


def normalize_channel(value: Scalar, kind: ChannelKind) -> Scalar:
    """Bring a raw number into the valid range of its channel kind."""
    return _normalizers[kind](value)


def normalize_channels(values: Sequence[Scalar], kinds: Sequence[ChannelKind]) -> Tuple[Scalar, ...]:
    if len(values) != len(kinds):
        raise ValueError(f"Expected {len(kinds)} channels, got {len(values)}")
    return tuple(normalize_channel(v, k) for v, k in zip(values, kinds))


def format_alpha(alpha: float) -> str:
    """Render alpha with exactly two decimals."""
    return f"{alpha:.{ALPHA_DECIMALS}f}"


def clamp_fraction(value: Scalar, name: str) -> float:
    """
    Clamp a mixing weight or lightness ratio into [0, 1].

    Values outside the range are accepted but produce a ``UserWarning``.
    """
    fraction = float(value)
    if not 0.0 <= fraction <= 1.0:
        warnings.warn(
            f"{name} {fraction} is outside [0, 1] and was clamped.",
            UserWarning,
            stacklevel=3,
        )
        fraction = clamp_unit(fraction)
    return fraction
