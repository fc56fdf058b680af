from swatchlab.colors import HexColor, RGBColor, HSLColor, CMYKColor, OKLCHColor
from swatchlab.conversions import hex_to_rgb, hsl_to_rgb, cmyk_to_rgb, oklch_to_rgb
from color_samples import samples_rgb_hsl, samples_rgb_cmyk, samples_rgb_oklch
import pytest


def test_hex_shorthand_matches_full_form():
    assert hex_to_rgb(HexColor("#fff")) == RGBColor(255, 255, 255)
    assert hex_to_rgb(HexColor("#ffffff")) == RGBColor(255, 255, 255)
    assert hex_to_rgb(HexColor("#f0a")) == hex_to_rgb(HexColor("#ff00aa"))


def test_hex_is_case_insensitive():
    assert hex_to_rgb(HexColor("#AbCdEf")) == RGBColor(0xab, 0xcd, 0xef)


def test_hex_alpha_is_carried():
    assert hex_to_rgb(HexColor("#000", alpha=0.25)).alpha == 0.25


def test_malformed_hex_raises():
    for token in ("#ggg", "fff", "#12345"):
        with pytest.raises(ValueError):
            hex_to_rgb(HexColor(token))


def test_hsl_to_rgb_samples():
    for rgb, (h, s, l) in samples_rgb_hsl.items():
        assert hsl_to_rgb(HSLColor(h, s, l)).channels == rgb


def test_hsl_hue_wraps():
    assert hsl_to_rgb(HSLColor(360, 100, 50)) == hsl_to_rgb(HSLColor(0, 100, 50))
    assert hsl_to_rgb(HSLColor(480, 100, 50)) == hsl_to_rgb(HSLColor(120, 100, 50))
    assert hsl_to_rgb(HSLColor(-120, 100, 50)) == hsl_to_rgb(HSLColor(240, 100, 50))


def test_hsl_output_is_integer():
    rgb = hsl_to_rgb(HSLColor(17.3, 42.1, 63.9))
    assert all(isinstance(v, int) for v in rgb.channels)


def test_cmyk_to_rgb_samples():
    for rgb, cmyk in samples_rgb_cmyk.items():
        assert cmyk_to_rgb(CMYKColor(*cmyk)).channels == rgb


def test_oklch_to_rgb_samples():
    for rgb, (l, c, h) in samples_rgb_oklch.items():
        out = oklch_to_rgb(OKLCHColor(l, c, h))
        for got, expected in zip(out.channels, rgb):
            assert abs(got - expected) <= 1


def test_oklch_undefined_hue_is_gray():
    gray = oklch_to_rgb(OKLCHColor(0.6, 0.0, None))
    assert gray.r == gray.g == gray.b


def test_oklch_out_of_gamut_is_clipped():
    vivid = oklch_to_rgb(OKLCHColor(0.9, 0.4, 300))
    assert all(0 <= v <= 255 for v in vivid.channels)
    assert oklch_to_rgb(OKLCHColor(1.2, 0.0, None)) == RGBColor(255, 255, 255)
    assert oklch_to_rgb(OKLCHColor(-0.1, 0.0, None)) == RGBColor(0, 0, 0)


def test_permissive_hsl_input():
    # Out-of-range input is not rejected; it just produces out-of-range output
    rgb = hsl_to_rgb(HSLColor(0, 100, 150))
    assert max(rgb.channels) > 255
