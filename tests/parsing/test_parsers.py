import pytest

from huekit.parsing import ParseError, parse_channels, parse_hex, parse_functional, detect_space


def test_parse_functional_notations():
    assert parse_functional("rgb(43,196,138)", "rgb") == (43, 196, 138)
    assert parse_functional("rgba(43,196,138,0.85)", "rgba") == (43, 196, 138, 0.85)
    assert parse_functional("hsl(157,64%,47%)", "hsl") == (157, 64, 47)
    assert parse_functional("hsla(157,64%,47%,.5)", "hsla") == (157, 64, 47, 0.5)
    assert parse_functional("hsv(157,78%,77%)", "hsv") == (157, 78, 77)
    assert parse_functional("cmyk(78,0,30,23)", "cmyk") == (78, 0, 30, 23)


def test_whitespace_and_case_are_tolerated():
    assert parse_functional("  HSL( 157 , 64 % , 47% ) ", "hsl") == (157, 64, 47)
    assert parse_functional("Rgba(1, 2, 3, 1)", "rgba") == (1, 2, 3, 1.0)


def test_percent_sign_is_optional():
    assert parse_functional("hsl(157,64,47)", "hsl") == (157, 64, 47)
    assert parse_functional("cmyk(78%,0%,30%,23%)", "cmyk") == (78, 0, 30, 23)


def test_out_of_range_numbers_are_not_rejected():
    assert parse_functional("rgb(300,-5,128)", "rgb") == (300, -5, 128)
    assert parse_functional("hsl(-10,50%,50%)", "hsl") == (-10, 50, 50)


def test_parse_hex():
    assert parse_hex("#2bc48a") == (43, 196, 138, 1.0)
    assert parse_hex("#FAC") == parse_hex("#FFAACC")
    r, g, b, a = parse_hex(" #2BC48A80 ")
    assert (r, g, b) == (43, 196, 138)
    assert a == 128 / 255


@pytest.mark.parametrize(
    "text",
    ["2bc48a", "#12345", "#1234567", "#GGGGGG", "#", "# 2bc48a"],
)
def test_bad_hex_raises(text):
    with pytest.raises(ParseError):
        parse_hex(text)


@pytest.mark.parametrize(
    "text, space",
    [
        ("rgb(1,2)", "rgb"),
        ("rgb(1,2,3,4)", "rgb"),
        ("rgb(a,2,3)", "rgb"),
        ("rgb(1.5,2,3)", "rgb"),
        ("rgb(1,,3)", "rgb"),
        ("rgba(1,2,3,x)", "rgba"),
        ("hsl(1,2%%,3%)", "hsl"),
        ("hsl(1,2,3)", "rgb"),
        ("rgb 1,2,3", "rgb"),
        ("", "cmyk"),
    ],
)
def test_bad_functional_raises(text, space):
    with pytest.raises(ParseError):
        parse_functional(text, space)


def test_parse_channels_dispatches_on_space():
    assert parse_channels("#000", "hex") == (0, 0, 0, 1.0)
    assert parse_channels("hsv(1,2%,3%)", "hsv") == (1, 2, 3)


def test_detect_space():
    assert detect_space("#abc") == "hex"
    assert detect_space(" HSLA(1,2%,3%,0.5)") == "hsla"
    assert detect_space("cmyk(1,2,3,4)") == "cmyk"


@pytest.mark.parametrize("text", ["lab(1,2,3)", "red", "hex(1,2,3)", ""])
def test_detect_space_rejects_unknown(text):
    with pytest.raises(ParseError):
        detect_space(text)


def test_detect_space_rejects_non_strings():
    with pytest.raises(ParseError):
        detect_space(42)


def test_parse_error_carries_context():
    with pytest.raises(ParseError) as info:
        parse_functional("rgb(1,2)", "rgb")
    err = info.value
    assert isinstance(err, ValueError)
    assert err.text == "rgb(1,2)"
    assert err.reason == "rgb takes 3 fields, got 2"
    assert str(err) == "rgb takes 3 fields, got 2: 'rgb(1,2)'"
