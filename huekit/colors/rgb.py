from typing import ClassVar, Tuple
from ..types.channel_type import ChannelKind
from ..types.color_types import ColorSpace
from ._descriptors import ChannelDescriptor
from .color_base import ColorBase

BYTE = ChannelKind.BYTE


class RGB(ColorBase):
    """
    8-bit red, green and blue.

    >>> rgb = RGB("rgb(43,196,138)")
    >>> str(rgb.set_green(255))
    'rgb(43,255,138)'
    """
    __slots__ = ()

    space:         ClassVar[ColorSpace] = "rgb"
    channel_names: ClassVar[Tuple[str, ...]] = ("red", "green", "blue")
    channel_kinds: ClassVar[Tuple[ChannelKind, ...]] = (BYTE, BYTE, BYTE)

    red = ChannelDescriptor(0)
    green = ChannelDescriptor(1)
    blue = ChannelDescriptor(2)

    def set_red(self, red: int) -> "RGB":
        return self._set_channel(0, red)

    def set_green(self, green: int) -> "RGB":
        return self._set_channel(1, green)

    def set_blue(self, blue: int) -> "RGB":
        return self._set_channel(2, blue)


class RGBA(ColorBase):
    """
    8-bit red, green and blue plus alpha in [0, 1].

    >>> rgba = RGBA(125, 60, 98, 0.8)
    >>> str(rgba.set_alpha(0.5))
    'rgba(125,60,98,0.50)'
    """
    __slots__ = ()

    space:         ClassVar[ColorSpace] = "rgba"
    channel_names: ClassVar[Tuple[str, ...]] = ("red", "green", "blue", "alpha")
    channel_kinds: ClassVar[Tuple[ChannelKind, ...]] = (BYTE, BYTE, BYTE, ChannelKind.UNIT)

    red = ChannelDescriptor(0)
    green = ChannelDescriptor(1)
    blue = ChannelDescriptor(2)
    alpha = ChannelDescriptor(3)

    def set_red(self, red: int) -> "RGBA":
        return self._set_channel(0, red)

    def set_green(self, green: int) -> "RGBA":
        return self._set_channel(1, green)

    def set_blue(self, blue: int) -> "RGBA":
        return self._set_channel(2, blue)

    def set_alpha(self, alpha: float) -> "RGBA":
        return self._set_channel(3, alpha)
