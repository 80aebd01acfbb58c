import warnings

import numpy as np
import pytest

from huekit import Hex, RGB, RGBA, HSL, HSLA, HSV, CMYK, seed_default_rng, get_default_rng
from huekit.colors.algebra import DARK_THRESHOLD

ALL_CLASSES = [Hex, RGB, RGBA, HSL, HSLA, HSV, CMYK]
EXACT_NEGATE_CLASSES = [Hex, RGB, RGBA, HSL, HSLA]


# ------------------ BRIGHTNESS ------------------
def test_dark_and_light_extremes():
    assert RGB(0, 0, 0).is_dark()
    assert RGB(255, 255, 255).is_light()
    assert RGB(127, 127, 127).is_dark()
    assert RGB(128, 128, 128).is_light()
    assert DARK_THRESHOLD == 127.5


def test_transparent_color_is_light():
    assert RGBA(0, 0, 0, 0.0).is_light()
    assert RGBA(0, 0, 0, 1.0).is_dark()


def test_brightness_weights():
    assert RGB(255, 0, 0).brightness() == pytest.approx(76.245)
    assert RGB(0, 255, 0).brightness() == pytest.approx(149.685)
    assert RGB(0, 0, 255).brightness() == pytest.approx(29.07)


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_dark_light_exclusive(cls, rng):
    for _ in range(100):
        color = cls.random(rng)
        assert color.is_dark() != color.is_light()


# ------------------ GRAYSCALE ------------------
def test_grayscale():
    assert RGB(255, 0, 0).grayscale() == RGB(76, 76, 76)
    assert str(RGBA(255, 0, 0, 0.5).grayscale()) == "rgba(76,76,76,0.50)"
    assert HSL(0, 100, 50).grayscale() == HSL(0, 0, 30)


def test_grayscale_is_pure():
    red = RGB(255, 0, 0)
    red.grayscale()
    assert red == RGB(255, 0, 0)


# ------------------ NEGATE ------------------
def test_negate():
    assert RGB(43, 196, 138).negate() == RGB(212, 59, 117)
    assert Hex("#2bc48a").negate().digits == "D43B75"
    assert RGBA(0, 0, 0, 0.3).negate() == RGBA(255, 255, 255, 0.3)
    assert HSL(157, 64, 47).negate() == HSL(337, 64, 53)
    assert HSL(0, 0, 30).negate() == HSL(0, 0, 70)


def test_negate_hsl_matches_rgb_negation():
    assert HSL(0, 100, 50).negate().to_rgb() == RGB(0, 255, 255)


@pytest.mark.parametrize("cls", EXACT_NEGATE_CLASSES)
def test_negate_involution(cls, rng):
    for _ in range(100):
        color = cls.random(rng)
        assert color.negate().negate() == color


# ------------------ MIX ------------------
def test_mix_scenarios():
    white = RGBA(255, 255, 255, 1.0)
    assert str(white.mix(HSL(0, 0, 0), None)) == "rgba(127,127,127,1.00)"
    assert str(white.mix(HSL(0, 0, 0), 0.35)) == "rgba(165,165,165,1.00)"
    assert str(HSL(0, 0, 0).mix(white)) == "hsl(0,0%,50%)"


def test_mix_default_weight_is_half():
    a, b = RGB(10, 20, 30), RGB(200, 100, 0)
    assert a.mix(b) == a.mix(b, 0.5) == RGB(105, 60, 15)


def test_mix_accepts_notation():
    assert RGB(0, 0, 0).mix("#FFFFFF") == RGB(127, 127, 127)


def test_mix_interpolates_alpha():
    mixed = RGBA(0, 0, 0, 0.0).mix(RGBA(0, 0, 0, 1.0))
    assert mixed.alpha == 0.5


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_mix_identities(cls, rng):
    for _ in range(30):
        a = cls.random(rng)
        b = cls.random(rng)
        w = float(rng.random())
        assert a.mix(a.copy(), w) == a
        assert a.mix(b, 0.0) == a
        assert a.mix(b, 1.0) == b


def test_mix_weight_out_of_range_warns():
    with pytest.warns(UserWarning):
        mixed = RGB(0, 0, 0).mix(RGB(255, 255, 255), 1.5)
    assert mixed == RGB(255, 255, 255)


def test_mix_weight_in_range_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        RGB(0, 0, 0).mix(RGB(255, 255, 255), 0.25)


# ------------------ LIGHTEN / DARKEN ------------------
def test_lighten_darken_hsl():
    assert HSL(0, 100, 50).lighten(0.2) == HSL(0, 100, 70)
    assert HSL(0, 100, 50).darken(0.2) == HSL(0, 100, 30)
    assert HSL(0, 100, 50).darken(0.6) == HSL(0, 100, 0)
    assert HSLA(0, 100, 50, 0.4).lighten(0.7) == HSLA(0, 100, 100, 0.4)


def test_lighten_darken_rgb():
    assert RGB(0, 0, 0).lighten(0.5) == RGB(128, 128, 128)
    assert RGB(255, 255, 255).darken(1.0) == RGB(0, 0, 0)
    assert RGB(255, 0, 0).lighten(0.25) == RGB(255, 128, 128)
    assert RGBA(255, 0, 0, 0.5).lighten(0.25) == RGBA(255, 128, 128, 0.5)


def test_lighten_zero_keeps_rgb():
    assert RGB(43, 196, 138).lighten(0.0) == RGB(43, 196, 138)


def test_lighten_ratio_out_of_range_warns():
    with pytest.warns(UserWarning):
        out = HSL(0, 100, 50).lighten(2)
    assert out == HSL(0, 100, 100)
    with pytest.warns(UserWarning):
        out = HSL(0, 100, 50).darken(-1)
    assert out == HSL(0, 100, 50)


# ------------------ INPLACE ------------------
def test_inplace_updates_receiver():
    color = RGB(255, 0, 0)
    out = color.negate(inplace=True)
    assert out is color
    assert color == RGB(0, 255, 255)

    hsl = HSL(0, 100, 50)
    assert hsl.lighten(0.1, inplace=True) is hsl
    assert hsl.lightness == 60

    rgba = RGBA(0, 0, 0, 1.0)
    rgba.mix(RGBA(255, 255, 255, 1.0), inplace=True).grayscale(inplace=True)
    assert rgba == RGBA(127, 127, 127, 1.0)


# ------------------ RANDOM ------------------
@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_random_in_range(cls, rng):
    for _ in range(50):
        color = cls.random(rng)
        assert isinstance(color, cls)
        assert color == cls(*color.channels)
        if cls.has_alpha:
            a = color.channels[-1]
            assert 0.0 <= a <= 1.0
            assert round(a, 2) == a


def test_random_reproducible_with_seeded_generator():
    a = RGBA.random(np.random.default_rng(7))
    b = RGBA.random(np.random.default_rng(7))
    assert a == b


def test_default_generator_can_be_seeded():
    seed_default_rng(3)
    first = [HSV.random() for _ in range(5)]
    seed_default_rng(3)
    second = [HSV.random() for _ in range(5)]
    assert first == second
    assert isinstance(get_default_rng(), np.random.Generator)
