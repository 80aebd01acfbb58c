from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Tuple, Union

import numpy as np

from ..channels import normalize_channel, normalize_channels
from ..conversions import to_pivot, from_pivot, BASE_SPACE
from ..parsing import parse_channels, format_channels
from ..types.channel_type import ChannelKind
from ..types.color_types import ChannelTuple, ColorSpace, RGBATuple, Scalar, OPAQUE, is_alpha_space, is_hue_space


class ColorBase:
    """
    Shared behaviour of the seven color classes.

    A subclass declares its color space, channel names and channel kinds;
    the base class handles validation, parsing, rendering and the RGBA pivot.
    Conversion methods are attached in ``colors.color`` and algebra in
    ``colors.algebra``.

    Values are mutable: setters update the receiver and return it so calls
    can be chained.
    """
    __slots__ = ('_channels',)

    space:         ClassVar[ColorSpace]
    channel_names: ClassVar[Tuple[str, ...]]
    channel_kinds: ClassVar[Tuple[ChannelKind, ...]]
    num_channels:  ClassVar[int] = 0
    has_alpha:     ClassVar[bool] = False
    has_hue:       ClassVar[bool] = False
    base_space:    ClassVar[str]

    # Attached by colors.color
    convert: Callable[[ColorBase, ColorSpace], ColorBase]
    to_hex:  Callable[[ColorBase], Any]
    to_rgb:  Callable[[ColorBase], Any]
    to_rgba: Callable[[ColorBase], Any]
    to_hsl:  Callable[[ColorBase], Any]
    to_hsla: Callable[[ColorBase], Any]
    to_hsv:  Callable[[ColorBase], Any]
    to_cmyk: Callable[[ColorBase], Any]

    # Attached by colors.algebra
    brightness: Callable[[ColorBase], float]
    is_dark:    Callable[[ColorBase], bool]
    is_light:   Callable[[ColorBase], bool]
    grayscale:  Callable[..., ColorBase]
    negate:     Callable[..., ColorBase]
    mix:        Callable[..., ColorBase]
    lighten:    Callable[..., ColorBase]
    darken:     Callable[..., ColorBase]
    random:     Callable[..., ColorBase]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if 'space' in cls.__dict__:
            cls.num_channels = len(cls.channel_kinds)
            cls.has_alpha = is_alpha_space(cls.space)
            cls.has_hue = is_hue_space(cls.space)
            cls.base_space = BASE_SPACE[cls.space]

    def __init__(self, *channels: Union[Scalar, ChannelTuple, str]) -> None:
        # ---- Handle text and tuple input ----
        if len(channels) == 1 and isinstance(channels[0], str):
            channels = parse_channels(channels[0], self.space)
        elif len(channels) == 1 and isinstance(channels[0], (tuple, list, np.ndarray)):
            channels = tuple(channels[0])

        # ---- Omitted alpha means opaque ----
        if self.has_alpha and len(channels) == self.num_channels - 1:
            channels = tuple(channels) + (OPAQUE,)

        if len(channels) != self.num_channels:
            raise ValueError(
                f"{self.space} expects {self.num_channels} channels "
                f"{self.channel_names}, got {len(channels)}"
            )
        self._channels = normalize_channels(channels, self.channel_kinds)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_tuple(cls, values: ChannelTuple):
        """Build from a channel tuple; out-of-range values are clamped."""
        return cls(*values)

    @classmethod
    def from_string(cls, text: str):
        """Parse the canonical notation of this space; raises ParseError."""
        return cls(*parse_channels(text, cls.space))

    @classmethod
    def from_rgba(cls, rgba: RGBATuple):
        """Build from an (r, g, b, a) pivot tuple."""
        return cls(*from_pivot(rgba, cls.space))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def channels(self) -> ChannelTuple:
        return self._channels

    @property
    def rgba(self) -> RGBATuple:
        """The (r, g, b, a) pivot of this color."""
        return to_pivot(self._channels, self.space)

    @property
    def alpha_value(self) -> float:
        """Alpha of the color; 1.0 for spaces without alpha."""
        return float(self._channels[-1]) if self.has_alpha else OPAQUE

    # ------------------ MUTATION ------------------
    def _set_channel(self, index: int, value: Scalar):
        channels = list(self._channels)
        channels[index] = normalize_channel(value, self.channel_kinds[index])
        self._channels = tuple(channels)
        return self

    def _replace(self, other: ColorBase):
        """Take over the channels of ``other`` (same class) and return self."""
        self._channels = other._channels
        return self

    def copy(self):
        return self.__class__(*self._channels)

    # ------------------ DUNDER ------------------
    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._channels)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._channels == other._channels  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return format_channels(self._channels, self.space)

    def __repr__(self) -> str:
        args = ", ".join(repr(v) for v in self._channels)
        return f"{self.__class__.__name__}({args})"


def build_registry(*classes: type[ColorBase]) -> dict[str, type[ColorBase]]:
    return {cls.space: cls for cls in classes}
