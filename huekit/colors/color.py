from __future__ import annotations
from .color_base import ColorBase, build_registry
from .hex import Hex
from .rgb import RGB, RGBA
from .hsl import HSL, HSLA
from .hsv import HSV
from .cmyk import CMYK
from ..conversions import convert
from ..parsing import detect_space
from ..types.color_types import ColorSpace, normalize_space

unified_space_to_class: dict[str, type[ColorBase]] = build_registry(Hex, RGB, RGBA, HSL, HSLA, HSV, CMYK)


def get_color_class(color_space: str) -> type[ColorBase]:
    """Return the color class registered for ``color_space`` (case-insensitive)."""
    return unified_space_to_class[normalize_space(color_space)]


def color_convert(self: ColorBase, to_space: ColorSpace) -> ColorBase:
    """
    Convert this color to another color space.

    Conversion goes through the RGBA pivot. Alpha is carried into Hex, RGBA
    and HSLA; other targets are flattened over white. Converting to the
    receiver's own space returns a copy.

    Args:
        to_space: Target color space ("hex", "rgb", "rgba", "hsl", "hsla",
            "hsv" or "cmyk")

    Returns:
        New ColorBase instance in the target space
    """
    cls = get_color_class(to_space)
    result = convert(self.channels, self.space, cls.space)
    return cls(*result)


def to_hex(self: ColorBase) -> Hex:
    return self.convert("hex")  # type: ignore[return-value]


def to_rgb(self: ColorBase) -> RGB:
    return self.convert("rgb")  # type: ignore[return-value]


def to_rgba(self: ColorBase) -> RGBA:
    return self.convert("rgba")  # type: ignore[return-value]


def to_hsl(self: ColorBase) -> HSL:
    return self.convert("hsl")  # type: ignore[return-value]


def to_hsla(self: ColorBase) -> HSLA:
    return self.convert("hsla")  # type: ignore[return-value]


def to_hsv(self: ColorBase) -> HSV:
    return self.convert("hsv")  # type: ignore[return-value]


def to_cmyk(self: ColorBase) -> CMYK:
    return self.convert("cmyk")  # type: ignore[return-value]


ColorBase.convert = color_convert
ColorBase.to_hex = to_hex
ColorBase.to_rgb = to_rgb
ColorBase.to_rgba = to_rgba
ColorBase.to_hsl = to_hsl
ColorBase.to_hsla = to_hsla
ColorBase.to_hsv = to_hsv
ColorBase.to_cmyk = to_cmyk


def parse_color(text: str) -> ColorBase:
    """
    Parse any supported notation, picking the class from its prefix.

    >>> parse_color("hsl(157,64%,47%)")
    HSL(157, 64, 47)
    >>> parse_color("#FAC")
    Hex(255, 170, 204, 1.0)

    Raises:
        ParseError: If the notation is unknown or malformed
    """
    space = detect_space(text)
    return unified_space_to_class[space].from_string(text)


def convert_color(value: ColorBase | str, color_space: str) -> ColorBase:
    """Coerce a color instance or notation string into ``color_space``."""
    if isinstance(value, str):
        value = parse_color(value)
    return value.convert(color_space)  # type: ignore[arg-type]
