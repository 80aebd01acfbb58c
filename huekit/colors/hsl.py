from typing import ClassVar, Tuple
from ..types.channel_type import ChannelKind
from ..types.color_types import ColorSpace
from ._descriptors import ChannelDescriptor
from .color_base import ColorBase

DEGREES = ChannelKind.DEGREES
PERCENT = ChannelKind.PERCENT


class HSL(ColorBase):
    """
    Hue in degrees, saturation and lightness in percent.

    Hue wraps around the circle (``HSL(400, 50, 50).hue == 40``); saturation
    and lightness clamp to [0, 100].
    """
    __slots__ = ()

    space:         ClassVar[ColorSpace] = "hsl"
    channel_names: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "lightness")
    channel_kinds: ClassVar[Tuple[ChannelKind, ...]] = (DEGREES, PERCENT, PERCENT)

    hue = ChannelDescriptor(0)
    saturation = ChannelDescriptor(1)
    lightness = ChannelDescriptor(2)

    def set_hue(self, hue: int) -> "HSL":
        return self._set_channel(0, hue)

    def set_saturation(self, saturation: int) -> "HSL":
        return self._set_channel(1, saturation)

    def set_lightness(self, lightness: int) -> "HSL":
        return self._set_channel(2, lightness)


class HSLA(ColorBase):
    """HSL plus alpha in [0, 1]."""
    __slots__ = ()

    space:         ClassVar[ColorSpace] = "hsla"
    channel_names: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "lightness", "alpha")
    channel_kinds: ClassVar[Tuple[ChannelKind, ...]] = (DEGREES, PERCENT, PERCENT, ChannelKind.UNIT)

    hue = ChannelDescriptor(0)
    saturation = ChannelDescriptor(1)
    lightness = ChannelDescriptor(2)
    alpha = ChannelDescriptor(3)

    def set_hue(self, hue: int) -> "HSLA":
        return self._set_channel(0, hue)

    def set_saturation(self, saturation: int) -> "HSLA":
        return self._set_channel(1, saturation)

    def set_lightness(self, lightness: int) -> "HSLA":
        return self._set_channel(2, lightness)

    def set_alpha(self, alpha: float) -> "HSLA":
        return self._set_channel(3, alpha)
