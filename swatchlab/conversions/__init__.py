"""
swatchlab color space conversions
=================================

Scalar converters between the five color variants, plus vectorized numpy
versions for batch work. RGB is the pivot: every cross-space conversion is
``source -> RGB -> target``.

RGB pivots:
    hex_to_rgb / rgb_to_hex
    hsl_to_rgb / rgb_to_hsl
    cmyk_to_rgb / rgb_to_cmyk
    oklch_to_rgb / rgb_to_oklch

High-level API:
    convert_color(color, target_space)
        Any variant to any other.
    np_convert(values, from_space, to_space)
        (..., 3) arrays between RGB (0-255 floats), HSL and OKLCH.
    color_to_css(color)
        CSS Color 4 text.

Only RGB channel outputs are rounded (to the nearest integer); HSL, CMYK and
OKLCH results keep float precision so round trips stay within one unit.

Examples
--------
>>> from swatchlab.colors import RGBColor
>>> from swatchlab.conversions import convert_color
>>> convert_color(RGBColor(255, 0, 0), "hex")
HexColor(value='#ff0000')
>>> convert_color(RGBColor(128, 128, 128), "oklch").h is None
True
"""

from .to_rgb import (
    hex_to_rgb,
    hsl_to_rgb,
    cmyk_to_rgb,
    oklch_to_rgb,
    hsl_to_unit_rgb,
    oklch_to_unit_rgb,
    np_hsl_to_unit_rgb,
    np_oklch_to_unit_rgb,
)
from .from_rgb import (
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_cmyk,
    rgb_to_oklch,
    unit_rgb_to_hsl,
    unit_rgb_to_oklch,
    np_unit_rgb_to_hsl,
    np_unit_rgb_to_oklch,
)
from .gamma import srgb_to_linear, linear_to_srgb
from .oklab import linear_srgb_to_oklab, oklab_to_linear_srgb, oklab_to_oklch, oklch_to_oklab
from .wrapper import convert_color, to_rgb, to_hex_token, np_convert
from .css import color_to_css

__all__ = [
    'hex_to_rgb', 'hsl_to_rgb', 'cmyk_to_rgb', 'oklch_to_rgb',
    'hsl_to_unit_rgb', 'oklch_to_unit_rgb',
    'np_hsl_to_unit_rgb', 'np_oklch_to_unit_rgb',
    'rgb_to_hex', 'rgb_to_hsl', 'rgb_to_cmyk', 'rgb_to_oklch',
    'unit_rgb_to_hsl', 'unit_rgb_to_oklch',
    'np_unit_rgb_to_hsl', 'np_unit_rgb_to_oklch',
    'srgb_to_linear', 'linear_to_srgb',
    'linear_srgb_to_oklab', 'oklab_to_linear_srgb', 'oklab_to_oklch', 'oklch_to_oklab',
    'convert_color', 'to_rgb', 'to_hex_token', 'np_convert',
    'color_to_css',
]
