"""
swatchlab color values
======================

Five immutable color variants forming a closed union, ``Color``:

- HexColor(value, alpha=None): ``#rgb`` or ``#rrggbb`` token
- RGBColor(r, g, b, alpha=None): channels 0-255
- HSLColor(h, s, l, alpha=None): hue 0-360, saturation/lightness 0-100
- CMYKColor(c, m, y, k, alpha=None): 0-100 each
- OKLCHColor(l, c, h=None, alpha=None): lightness 0-1, chroma 0-0.4,
  hue 0-360 or ``None`` when achromatic

Values never change after construction; ``with_alpha`` and ``replace``
return new values. Constructors do not validate or clamp; use the
``validate_*`` predicates to check ranges.

>>> from swatchlab.colors import RGBColor, validate_rgb
>>> red = RGBColor(255, 0, 0)
>>> red.with_alpha(0.5)
RGBColor(r=255, g=0, b=0, alpha=0.5)
>>> validate_rgb(256, 0, 0)
False
"""

from .color_base import ColorBase
from .hex import HexColor
from .rgb import RGBColor, WHITE, BLACK
from .hsl import HSLColor
from .cmyk import CMYKColor
from .oklch import OKLCHColor
from .color import (
    Color,
    color_classes,
    get_color_class,
    space_of,
    is_hex, is_rgb, is_hsl, is_cmyk, is_oklch,
)
from .validation import (
    validate_hex,
    validate_rgb,
    validate_hsl,
    validate_cmyk,
    validate_oklch,
    validate_alpha,
    validate_color,
)
from .metadata import ColorWithMetadata, generate_color_id

__all__ = [
    'ColorBase',
    'HexColor', 'RGBColor', 'HSLColor', 'CMYKColor', 'OKLCHColor',
    'WHITE', 'BLACK',
    'Color', 'color_classes', 'get_color_class', 'space_of',
    'is_hex', 'is_rgb', 'is_hsl', 'is_cmyk', 'is_oklch',
    'validate_hex', 'validate_rgb', 'validate_hsl', 'validate_cmyk',
    'validate_oklch', 'validate_alpha', 'validate_color',
    'ColorWithMetadata', 'generate_color_id',
]
