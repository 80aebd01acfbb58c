from huekit.conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
    rgb_to_cmyk,
    cmyk_to_rgb,
    flatten_alpha,
    rgb_to_hex_digits,
    hex_digits_to_rgba,
    alpha_to_byte,
)
from tests.samples import byte_grid


def test_rgb_to_hsl_known_values():
    assert rgb_to_hsl(43, 196, 138) == (157, 64, 47)
    assert rgb_to_hsl(255, 225, 196) == (29, 100, 88)
    assert rgb_to_hsl(255, 255, 255) == (0, 0, 100)
    assert rgb_to_hsl(0, 0, 0) == (0, 0, 0)


def test_rgb_to_hsv_known_values():
    assert rgb_to_hsv(43, 196, 138) == (157, 78, 77)
    assert rgb_to_hsv(74, 204, 155) == (157, 64, 80)


def test_rgb_to_cmyk_known_values():
    assert rgb_to_cmyk(43, 196, 138) == (78, 0, 30, 23)
    assert rgb_to_cmyk(74, 204, 155) == (64, 0, 24, 20)
    assert rgb_to_cmyk(0, 0, 0) == (0, 0, 0, 100)


def test_hsl_to_rgb_known_values():
    assert hsl_to_rgb(240, 100, 88) == (194, 193, 255)
    assert hsl_to_rgb(125, 60, 75) == (153, 229, 159)
    assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
    assert hsl_to_rgb(197, 100, 50) == (0, 182, 255)


def test_hsv_to_rgb_known_values():
    assert hsv_to_rgb(0, 100, 100) == (255, 0, 0)
    assert hsv_to_rgb(0, 0, 0) == (0, 0, 0)
    assert hsv_to_rgb(120, 100, 100) == (0, 255, 0)


def test_hsv_grays_stay_gray():
    assert hsv_to_rgb(0, 0, 27) == (69, 69, 69)
    for v in range(0, 101):
        r, g, b = hsv_to_rgb(200, 0, v)
        assert r == g == b


def test_cmyk_to_rgb_known_values():
    assert cmyk_to_rgb(100, 34, 53, 38) == (0, 104, 74)
    assert cmyk_to_rgb(100, 29, 0, 0) == (0, 181, 255)
    assert cmyk_to_rgb(0, 0, 0, 100) == (0, 0, 0)


def test_flatten_alpha_over_white():
    assert flatten_alpha(255, 196, 138, 0.5) == (255, 225, 196)
    assert flatten_alpha(43, 196, 138, 0.85) == (74, 204, 155)
    assert flatten_alpha(0, 0, 0, 0.0) == (255, 255, 255)
    assert flatten_alpha(12, 34, 56, 1.0) == (12, 34, 56)


def test_hex_digits():
    assert rgb_to_hex_digits(0, 104, 74) == "00684A"
    assert rgb_to_hex_digits(0, 104, 74, force_alpha=True) == "00684AFF"
    assert rgb_to_hex_digits(255, 223, 172, 0.5) == "FFDFAC80"
    assert alpha_to_byte(0.85) == 217


def test_hex_shorthand_expands():
    assert hex_digits_to_rgba("FAC") == hex_digits_to_rgba("FFAACC") == (255, 170, 204, 1.0)


def test_hex_round_trip_is_exact():
    for r, g, b in byte_grid:
        assert hex_digits_to_rgba(rgb_to_hex_digits(r, g, b)) == (r, g, b, 1.0)


def test_hex_alpha_byte_round_trip():
    for byte in (0, 1, 127, 128, 217, 254, 255):
        digits = f"102030{byte:02X}"
        r, g, b, a = hex_digits_to_rgba(digits)
        assert rgb_to_hex_digits(r, g, b, a, force_alpha=True) == digits
