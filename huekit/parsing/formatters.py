from typing import Callable, Dict

from ..channels import format_alpha
from ..conversions.to_hex import rgb_to_hex_digits
from ..types.color_types import ChannelTuple


def format_hex(channels: ChannelTuple, *, force_alpha: bool = False) -> str:
    r, g, b, a = channels
    return "#" + rgb_to_hex_digits(r, g, b, a, force_alpha=force_alpha)


def format_rgb(channels: ChannelTuple) -> str:
    r, g, b = channels
    return f"rgb({r},{g},{b})"


def format_rgba(channels: ChannelTuple) -> str:
    r, g, b, a = channels
    return f"rgba({r},{g},{b},{format_alpha(a)})"


def format_hsl(channels: ChannelTuple) -> str:
    h, s, l = channels
    return f"hsl({h},{s}%,{l}%)"


def format_hsla(channels: ChannelTuple) -> str:
    h, s, l, a = channels
    return f"hsla({h},{s}%,{l}%,{format_alpha(a)})"


def format_hsv(channels: ChannelTuple) -> str:
    h, s, v = channels
    return f"hsv({h},{s}%,{v}%)"


def format_cmyk(channels: ChannelTuple) -> str:
    c, m, y, k = channels
    return f"cmyk({c},{m},{y},{k})"


FORMATTERS: Dict[str, Callable[[ChannelTuple], str]] = {
    "hex": format_hex,
    "rgb": format_rgb,
    "rgba": format_rgba,
    "hsl": format_hsl,
    "hsla": format_hsla,
    "hsv": format_hsv,
    "cmyk": format_cmyk,
}


def format_channels(channels: ChannelTuple, space: str) -> str:
    """Render a channel tuple in the canonical notation of ``space``."""
    return FORMATTERS[space](channels)
