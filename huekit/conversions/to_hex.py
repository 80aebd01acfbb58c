from ..channels import round_half_up
from ..types.color_types import OPAQUE


def alpha_to_byte(a: float) -> int:
    """Scale alpha in [0, 1] to a byte, rounding half up."""
    return round_half_up(a * 255)


def rgb_to_hex_digits(r: int, g: int, b: int, a: float = OPAQUE, *, force_alpha: bool = False) -> str:
    """
    Encode channels as uppercase hex digits (no leading ``#``).

    The alpha byte is appended after blue (``RRGGBBAA``) and only emitted when
    the color is translucent or ``force_alpha`` is set.
    """
    digits = f"{r:02X}{g:02X}{b:02X}"
    if force_alpha or a != OPAQUE:
        digits += f"{alpha_to_byte(a):02X}"
    return digits


def hex_digits_to_rgba(digits: str) -> tuple[int, int, int, float]:
    """
    Decode 3, 6 or 8 hex digits into (r, g, b, a).

    The shorthand form doubles each digit (``FAC`` -> ``FFAACC``). In the
    8-digit form the last two digits hold alpha as a byte. The caller
    guarantees the digit count and alphabet.
    """
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else OPAQUE
    return r, g, b, a
