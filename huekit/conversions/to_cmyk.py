from ..channels import round_half_up


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """
    Convert RGB in [0, 1] to CMYK in [0, 1].

    Pure black has k == 1; its inks are reported as 0 instead of dividing
    by zero.
    """
    k = 1.0 - max(r, g, b)
    if k == 1.0:
        return 0.0, 0.0, 0.0, k
    t = 1.0 - k
    return (1.0 - r - k) / t, (1.0 - g - k) / t, (1.0 - b - k) / t, k


def rgb_to_cmyk(r: int, g: int, b: int) -> tuple[int, int, int, int]:
    """Convert 8-bit RGB to integer CMYK percentages."""
    c, m, y, k = unit_rgb_to_cmyk(r / 255, g / 255, b / 255)
    return (
        round_half_up(c * 100),
        round_half_up(m * 100),
        round_half_up(y * 100),
        round_half_up(k * 100),
    )
