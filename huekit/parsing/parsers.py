"""
Text grammars for every color notation.

Parsers only check the shape of the literal and turn its fields into numbers;
range handling (clamping, hue wrapping) is left to the color classes.
"""

from __future__ import annotations
import re
from typing import Dict, Tuple

from ..conversions.to_hex import hex_digits_to_rgba
from ..types.color_types import ChannelTuple, ColorSpace, COLOR_SPACES
from .errors import ParseError

_FUNCTIONAL_RE = re.compile(r"^\s*([a-z]+)\s*\((.*)\)\s*$", re.IGNORECASE | re.DOTALL)
_HEX_RE = re.compile(r"^\s*#(\S*)\s*$")
_HEX_DIGITS_RE = re.compile(r"^[0-9a-fA-F]+$")
_INT_RE = re.compile(r"^[+-]?\d+$")
_PERCENT_RE = re.compile(r"^([+-]?\d+)\s*%?$")
_REAL_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")

HEX_LENGTHS = (3, 6, 8)

# Field grammar per functional notation: "int", "percent" (int, optional %) or "real"
FIELD_SPECS: Dict[str, Tuple[str, ...]] = {
    "rgb":  ("int", "int", "int"),
    "rgba": ("int", "int", "int", "real"),
    "hsl":  ("int", "percent", "percent"),
    "hsla": ("int", "percent", "percent", "real"),
    "hsv":  ("int", "percent", "percent"),
    "cmyk": ("percent", "percent", "percent", "percent"),
}


def _parse_field(text: str, field: str, kind: str) -> int | float:
    value = field.strip()
    if kind == "int":
        if not _INT_RE.match(value):
            raise ParseError(text, f"expected an integer, got {value!r}")
        return int(value)
    if kind == "percent":
        m = _PERCENT_RE.match(value)
        if not m:
            raise ParseError(text, f"expected an integer percentage, got {value!r}")
        return int(m.group(1))
    if not _REAL_RE.match(value):
        raise ParseError(text, f"expected a number, got {value!r}")
    return float(value)


def parse_hex(text: str) -> Tuple[int, int, int, float]:
    """
    Parse ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` (case-insensitive).

    Returns:
        (r, g, b, a) with alpha in [0, 1]

    Raises:
        ParseError: missing ``#``, bad digit count or non-hex digit
    """
    m = _HEX_RE.match(text)
    if not m:
        raise ParseError(text, "hex color must start with '#'")
    digits = m.group(1)
    if len(digits) not in HEX_LENGTHS:
        raise ParseError(text, f"hex color needs 3, 6 or 8 digits, got {len(digits)}")
    if not _HEX_DIGITS_RE.match(digits):
        raise ParseError(text, "invalid hex digit")
    return hex_digits_to_rgba(digits)


def parse_functional(text: str, space: str) -> ChannelTuple:
    """
    Parse a functional notation such as ``rgb(43, 196, 138)``.

    Args:
        text: Literal to parse
        space: Expected notation name (``rgb``, ``rgba``, ``hsl``, ``hsla``,
            ``hsv`` or ``cmyk``)

    Returns:
        Raw field values, ints for integer fields and floats for alpha

    Raises:
        ParseError: wrong prefix, wrong field count or non-numeric field
    """
    fields_spec = FIELD_SPECS[space]
    m = _FUNCTIONAL_RE.match(text)
    if not m or m.group(1).lower() != space:
        raise ParseError(text, f"expected '{space}(...)'")
    fields = m.group(2).split(",")
    if len(fields) != len(fields_spec):
        raise ParseError(text, f"{space} takes {len(fields_spec)} fields, got {len(fields)}")
    return tuple(_parse_field(text, f, kind) for f, kind in zip(fields, fields_spec))


def parse_channels(text: str, space: ColorSpace) -> ChannelTuple:
    """Parse ``text`` as a literal of the given space."""
    if space == "hex":
        return parse_hex(text)
    return parse_functional(text, space)


def detect_space(text: str) -> ColorSpace:
    """
    Identify the notation of a color literal from its prefix.

    Raises:
        ParseError: the prefix is not a known notation
    """
    if not isinstance(text, str):
        raise ParseError(repr(text), "color literal must be a string")
    stripped = text.strip()
    if stripped.startswith("#"):
        return "hex"
    m = _FUNCTIONAL_RE.match(stripped)
    if m:
        name = m.group(1).lower()
        if name in COLOR_SPACES and name != "hex":
            return name  # type: ignore[return-value]
    raise ParseError(text, "unknown color notation")
