from typing import ClassVar, Tuple
from ..types.channel_type import ChannelKind
from ..types.color_types import ColorSpace
from ._descriptors import ChannelDescriptor
from .color_base import ColorBase

PERCENT = ChannelKind.PERCENT


class CMYK(ColorBase):
    """
    Cyan, magenta, yellow and black ink coverage in percent.

    >>> str(CMYK(100, 34, 53, 38).to_hex())
    '#00684A'
    """
    __slots__ = ()

    space:         ClassVar[ColorSpace] = "cmyk"
    channel_names: ClassVar[Tuple[str, ...]] = ("cyan", "magenta", "yellow", "black")
    channel_kinds: ClassVar[Tuple[ChannelKind, ...]] = (PERCENT, PERCENT, PERCENT, PERCENT)

    cyan = ChannelDescriptor(0)
    magenta = ChannelDescriptor(1)
    yellow = ChannelDescriptor(2)
    black = ChannelDescriptor(3)

    def set_cyan(self, cyan: int) -> "CMYK":
        return self._set_channel(0, cyan)

    def set_magenta(self, magenta: int) -> "CMYK":
        return self._set_channel(1, magenta)

    def set_yellow(self, yellow: int) -> "CMYK":
        return self._set_channel(2, yellow)

    def set_black(self, black: int) -> "CMYK":
        return self._set_channel(3, black)
