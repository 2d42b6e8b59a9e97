import warnings
import pytest
from rgbacolor import (
    RgbaColor,
    ColorParser,
    ColorParseWarning,
    DefaultColor,
    RegexPartsExtractor,
    SplitPartsExtractor,
    parse_color,
)
from rgbacolor.parsing import parse_int, parse_float

BLACK = RgbaColor(0, 0, 0)
WHITE = RgbaColor(255, 255, 255)

extractors = pytest.mark.parametrize("extractor", [RegexPartsExtractor(), SplitPartsExtractor()])


def test_hex():
    parser = ColorParser()
    assert parser.parse("#ff0000") == RgbaColor(255, 0, 0)
    assert parser.parse("#336699") == RgbaColor(51, 102, 153)
    assert parser.parse("#ABCDEF") == RgbaColor(171, 205, 239)

def test_short_hex_doubles_digits():
    assert parse_color("#f00") == RgbaColor(255, 0, 0)
    assert parse_color("#abc") == RgbaColor(170, 187, 204)

def test_hex_invalid_digits_become_zero():
    assert parse_color("#zz0000") == RgbaColor(0, 0, 0)
    assert parse_color("#1g0000") == RgbaColor(1, 0, 0)

@pytest.mark.parametrize("text", ["#", "#12345", "#1234567", "#ffff"])
def test_hex_bad_length_gives_default(text):
    with pytest.warns(ColorParseWarning):
        assert ColorParser(default=DefaultColor.WHITE).parse(text) == WHITE

@extractors
def test_rgb(extractor):
    parser = ColorParser(extractor)
    assert parser.parse("rgb(10, 20, 30)") == RgbaColor(10, 20, 30)
    assert parser.parse("rgb(10,20,30)") == RgbaColor(10, 20, 30)
    assert parser.parse("  RGB( 255 , 128 , 0 )  ") == RgbaColor(255, 128, 0)

@extractors
def test_rgb_clamps_values(extractor):
    assert ColorParser(extractor).parse("rgb(10, 999, 30)") == RgbaColor(10, 255, 30)

@extractors
def test_rgba(extractor):
    parser = ColorParser(extractor)
    assert parser.parse("rgba(10, 20, 30, 0.5)") == RgbaColor(10, 20, 30, 0.5)
    assert parser.parse("rgba(10,20,30,.25)").alpha == 0.25
    assert parser.parse("rgba(10,20,30,1)").alpha == 1.0

@extractors
def test_hsl(extractor):
    parser = ColorParser(extractor)
    assert parser.parse("hsl(120, 100%, 25%)") == RgbaColor(0, 128, 0)
    assert parser.parse("hsl(210,50%,40%)") == RgbaColor(51, 102, 153)
    assert parser.parse("hsl(400, 100%, 50%)") == RgbaColor.from_hsl(40, 100, 50)

@extractors
def test_hsla(extractor):
    parser = ColorParser(extractor)
    assert parser.parse("hsla(0, 100%, 50%, 0.25)") == RgbaColor(255, 0, 0, 0.25)
    # alpha is clamped
    assert parser.parse("hsla(0, 100%, 50%, 2)").alpha == 1.0

@extractors
@pytest.mark.parametrize("text", ["rgb(1, 2)", "rgba(1, 2, 3)", "hsl(1, 2%)", "hsla(1, 2%, 3%)", "rgb 1 2 3"])
def test_wrong_arity_gives_default(extractor, text):
    with pytest.warns(ColorParseWarning):
        assert ColorParser(extractor).parse(text) == BLACK

def test_split_extractor_takes_signed_parts():
    parser = ColorParser(SplitPartsExtractor())
    assert parser.parse("rgb(-5, 300, 7)") == RgbaColor(0, 255, 7)

def test_split_extractor_non_numeric_parts_are_zero():
    parser = ColorParser(SplitPartsExtractor())
    assert parser.parse("rgb(a, b, 7)") == RgbaColor(0, 0, 7)

@pytest.mark.parametrize("text", ["", "blue", "transparent", "cmyk(0, 0, 0, 0)"])
def test_unknown_gives_default(text):
    with pytest.warns(ColorParseWarning):
        assert parse_color(text) == BLACK
    with pytest.warns(ColorParseWarning):
        assert ColorParser(default=DefaultColor.WHITE).parse(text) == WHITE
    with pytest.warns(ColorParseWarning):
        assert ColorParser(default="white").parse(text) == WHITE

def test_custom_default_color():
    fallback = RgbaColor(1, 2, 3, 0.5)
    with pytest.warns(ColorParseWarning):
        assert ColorParser(default=fallback).parse("nope") is fallback

def test_warning_can_be_silenced():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        warnings.simplefilter("ignore", ColorParseWarning)
        assert parse_color("nope") == BLACK

def test_valid_text_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        parse_color("#fff")
        parse_color("hsla(0, 0%, 0%, 0.1)")

def test_rgbacolor_parse():
    assert RgbaColor.parse("#f00") == RgbaColor(255, 0, 0)
    parser = ColorParser(SplitPartsExtractor(), default=DefaultColor.WHITE)
    with pytest.warns(ColorParseWarning):
        assert RgbaColor.parse("rgb()", parser) == WHITE

def test_parse_requires_str():
    with pytest.raises(TypeError):
        parse_color(None)

def test_parse_int():
    assert parse_int("20") == 20
    assert parse_int(" 20px") == 20
    assert parse_int("50%") == 50
    assert parse_int("-7") == -7
    assert parse_int("abc") == 0
    assert parse_int("ff", 16) == 255
    assert parse_int("zz", 16) == 0

def test_parse_float():
    assert parse_float("0.5") == 0.5
    assert parse_float(" .25") == 0.25
    assert parse_float("1") == 1.0
    assert parse_float("x") == 0.0

@pytest.mark.parametrize("parse", [
    parse_color,
    RgbaColor.parse,
    ColorParser().parse,
    ColorParser().parse_rgb,
])
def test_warning_points_at_caller(parse):
    with pytest.warns(ColorParseWarning) as record:
        parse("rgb(1, 2)")
    assert record[0].filename == __file__
