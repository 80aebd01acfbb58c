from typing import ClassVar, Tuple
from ..conversions.to_hex import rgb_to_hex_digits, alpha_to_byte
from ..parsing.formatters import format_hex
from ..types.channel_type import ChannelKind
from ..types.color_types import ColorSpace
from ._descriptors import ChannelDescriptor
from .color_base import ColorBase

BYTE = ChannelKind.BYTE


class Hex(ColorBase):
    """
    Hexadecimal encoding of an RGB color with optional alpha.

    Parses ``#RGB``, ``#RRGGBB`` and ``#RRGGBBAA`` and renders uppercase.
    The alpha byte is only rendered when the color is translucent; use
    ``to_hex_alpha`` (``#RRGGBBAA``) or ``to_alpha_hex`` (``#AARRGGBB``) to
    always get eight digits.

    >>> Hex("#FAC") == Hex("#FFAACC")
    True
    >>> str(Hex("#ffdfac").to_rgba().set_alpha(0.5).to_hex())
    '#FFDFAC80'
    """
    __slots__ = ()

    space:         ClassVar[ColorSpace] = "hex"
    channel_names: ClassVar[Tuple[str, ...]] = ("red", "green", "blue", "alpha")
    channel_kinds: ClassVar[Tuple[ChannelKind, ...]] = (BYTE, BYTE, BYTE, ChannelKind.UNIT)

    red = ChannelDescriptor(0, readonly=True)
    green = ChannelDescriptor(1, readonly=True)
    blue = ChannelDescriptor(2, readonly=True)
    alpha = ChannelDescriptor(3, readonly=True)

    @property
    def digits(self) -> str:
        """Hex digits without the leading ``#``, alpha included when translucent."""
        return rgb_to_hex_digits(*self._channels)

    def to_hex_alpha(self) -> str:
        """Render ``#RRGGBBAA`` even for opaque colors."""
        return format_hex(self._channels, force_alpha=True)

    def to_alpha_hex(self) -> str:
        """Render ``#AARRGGBB``, alpha byte first, even for opaque colors."""
        r, g, b, a = self._channels
        return f"#{alpha_to_byte(a):02X}" + rgb_to_hex_digits(r, g, b)
