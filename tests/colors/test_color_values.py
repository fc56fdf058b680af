from swatchlab.colors import (
    HexColor, RGBColor, HSLColor, CMYKColor, OKLCHColor,
    is_hex, is_rgb, is_hsl, is_cmyk, is_oklch, space_of, get_color_class,
)
from swatchlab.types import ColorSpace, is_hue_space
import pytest


def test_values_are_immutable():
    red = RGBColor(255, 0, 0)
    with pytest.raises(AttributeError):
        red.r = 0
    with pytest.raises(AttributeError):
        red.alpha = 0.5
    with pytest.raises(AttributeError):
        red.extra = 1
    with pytest.raises(AttributeError):
        del red.g
    assert red.channels == (255, 0, 0)


def test_value_equality_and_hash():
    assert RGBColor(1, 2, 3) == RGBColor(1, 2, 3)
    assert RGBColor(1, 2, 3) != RGBColor(1, 2, 3, alpha=0.5)
    assert RGBColor(1, 2, 3) != HSLColor(1, 2, 3)
    assert len({RGBColor(1, 2, 3), RGBColor(1, 2, 3), CMYKColor(0, 0, 0, 0)}) == 2


def test_with_alpha_returns_new_value():
    red = RGBColor(255, 0, 0)
    translucent = red.with_alpha(0.5)
    assert translucent.alpha == 0.5
    assert red.alpha is None
    assert translucent.channels == red.channels
    assert translucent.with_alpha(None) == red


def test_replace():
    hsl = HSLColor(120, 50, 50, alpha=0.3)
    darker = hsl.replace(l=20)
    assert darker == HSLColor(120, 50, 20, alpha=0.3)
    with pytest.raises(TypeError):
        hsl.replace(v=10)


def test_opacity():
    assert RGBColor(0, 0, 0).is_opaque
    assert RGBColor(0, 0, 0, alpha=1.0).is_opaque
    assert RGBColor(0, 0, 0, alpha=1.0).has_alpha
    assert not RGBColor(0, 0, 0, alpha=0.99).is_opaque


def test_hex_digits_expand_shorthand():
    assert HexColor("#F0a").digits == "ff00aa"
    assert HexColor("#12ABef").digits == "12abef"


def test_constructors_do_not_clamp():
    odd = RGBColor(300, -5, 12.5)
    assert odd.channels == (300, -5, 12.5)
    assert CMYKColor(150, 0, 0, 0).c == 150


def test_oklch_undefined_hue():
    gray = OKLCHColor(0.6, 0.0)
    assert gray.h is None
    assert gray.is_achromatic
    assert not OKLCHColor(0.6, 0.1, 200).is_achromatic


def test_oklch_nan_hue_is_normalized():
    with pytest.warns(DeprecationWarning):
        gray = OKLCHColor(0.5, 0.0, float("nan"))
    assert gray.h is None
    assert gray == OKLCHColor(0.5, 0.0, None)


def test_discriminants():
    samples = [HexColor("#fff"), RGBColor(0, 0, 0), HSLColor(0, 0, 0), CMYKColor(0, 0, 0, 0), OKLCHColor(0, 0)]
    checks = [is_hex, is_rgb, is_hsl, is_cmyk, is_oklch]
    for i, color in enumerate(samples):
        for j, check in enumerate(checks):
            assert check(color) == (i == j)


def test_space_tags():
    assert space_of(HexColor("#fff")) == ColorSpace.HEX
    assert space_of(OKLCHColor(0.5, 0.1, 10)) == ColorSpace.OKLCH
    assert get_color_class("cmyk") is CMYKColor
    assert get_color_class(ColorSpace.HSL) is HSLColor
    with pytest.raises(TypeError):
        space_of((255, 0, 0))
    with pytest.raises(ValueError):
        get_color_class("hsv")


def test_to_shorthand():
    assert RGBColor(255, 255, 255).to("hex") == HexColor("#ffffff")


def test_hue_spaces():
    assert HSLColor(0, 0, 0).has_hue
    assert OKLCHColor(0.5, 0.0, None).has_hue
    assert not RGBColor(0, 0, 0).has_hue
    assert is_hue_space("HSL") and is_hue_space("oklch")
    assert not is_hue_space("cmyk")
