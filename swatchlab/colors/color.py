from __future__ import annotations
from typing import Dict, Union
from ..types.color_types import ColorSpace, to_color_space
from .color_base import ColorBase
from .hex import HexColor
from .rgb import RGBColor
from .hsl import HSLColor
from .cmyk import CMYKColor
from .oklch import OKLCHColor

Color = Union[HexColor, RGBColor, HSLColor, CMYKColor, OKLCHColor]

color_classes: Dict[ColorSpace, type] = {
    cls.space: cls
    for cls in (HexColor, RGBColor, HSLColor, CMYKColor, OKLCHColor)
}


def get_color_class(color_space: Union[ColorSpace, str]) -> type:
    return color_classes[to_color_space(color_space)]


def space_of(color: object) -> ColorSpace:
    """
    Return the discriminant of a color value.

    Raises:
        TypeError: if ``color`` is not one of the five variants.
    """
    if isinstance(color, ColorBase) and type(color) in color_classes.values():
        return color.space
    raise TypeError(f"Expected a color value, got {type(color).__name__}")


def is_hex(color: object) -> bool:
    return isinstance(color, HexColor)


def is_rgb(color: object) -> bool:
    return isinstance(color, RGBColor)


def is_hsl(color: object) -> bool:
    return isinstance(color, HSLColor)


def is_cmyk(color: object) -> bool:
    return isinstance(color, CMYKColor)


def is_oklch(color: object) -> bool:
    return isinstance(color, OKLCHColor)
