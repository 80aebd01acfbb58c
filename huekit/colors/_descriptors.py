"""Property descriptors for color channels."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class ChannelDescriptor:
    """Descriptor exposing one channel of a color by name.

    Reads return the stored channel value. Writes go through the owner's
    ``_set_channel`` so the channel rule (clamp or hue wrap) is applied.

    Args:
        index: Position of the channel in the color's channel tuple
        readonly: If True, raises AttributeError on set attempts

    Example:
        class RGB(ColorBase):
            red = ChannelDescriptor(0)
            green = ChannelDescriptor(1)
            blue = ChannelDescriptor(2)
    """

    def __init__(self, index: int, *, readonly: bool = False):
        self.index = index
        self.readonly = readonly
        self.public_name: str = f"channel{index}"  # Overwritten by __set_name__

    def __set_name__(self, owner: type, name: str) -> None:
        self.public_name = name

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return obj._channels[self.index]

    def __set__(self, obj: Any, value: Any) -> None:
        if self.readonly:
            raise AttributeError(
                f"'{self.public_name}' is read-only on {obj.__class__.__name__}"
            )
        obj._set_channel(self.index, value)

    def __repr__(self) -> str:
        flags = " readonly" if self.readonly else ""
        return f"<ChannelDescriptor '{self.public_name}' [{self.index}]{flags}>"
