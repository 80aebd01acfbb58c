from typing import ClassVar, Tuple
from ..types.channel_type import ChannelKind
from ..types.color_types import ColorSpace
from ._descriptors import ChannelDescriptor
from .color_base import ColorBase


class HSV(ColorBase):
    """Hue in degrees, saturation and value in percent."""
    __slots__ = ()

    space:         ClassVar[ColorSpace] = "hsv"
    channel_names: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "value")
    channel_kinds: ClassVar[Tuple[ChannelKind, ...]] = (
        ChannelKind.DEGREES, ChannelKind.PERCENT, ChannelKind.PERCENT
    )

    hue = ChannelDescriptor(0)
    saturation = ChannelDescriptor(1)
    value = ChannelDescriptor(2)

    def set_hue(self, hue: int) -> "HSV":
        return self._set_channel(0, hue)

    def set_saturation(self, saturation: int) -> "HSV":
        return self._set_channel(1, saturation)

    def set_value(self, value: int) -> "HSV":
        return self._set_channel(2, value)
