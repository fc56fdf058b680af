from swatchlab.colors import RGBColor
from swatchlab.conversions import convert_color
from color_samples import rgb_grid

rgb_tolerance = 1


def _assert_round_trip(space):
    for r, g, b in rgb_grid:
        original = RGBColor(r, g, b)
        back = convert_color(convert_color(original, space), "rgb")
        assert abs(back.r - r) <= rgb_tolerance, (space, original, back)
        assert abs(back.g - g) <= rgb_tolerance, (space, original, back)
        assert abs(back.b - b) <= rgb_tolerance, (space, original, back)


def test_round_trip_rgb_hsl():
    _assert_round_trip("hsl")


def test_round_trip_rgb_oklch():
    _assert_round_trip("oklch")


def test_round_trip_rgb_cmyk():
    _assert_round_trip("cmyk")


def test_round_trip_rgb_hex_is_exact():
    for r, g, b in rgb_grid:
        original = RGBColor(r, g, b)
        assert convert_color(convert_color(original, "hex"), "rgb") == original


def test_round_trip_keeps_alpha():
    color = RGBColor(12, 34, 56, alpha=0.7)
    for space in ("hex", "hsl", "cmyk", "oklch"):
        assert convert_color(convert_color(color, space), "rgb").alpha == 0.7
