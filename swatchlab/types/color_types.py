from __future__ import annotations
from enum import Enum
from typing import Dict, Optional, Tuple, Union
import math

Scalar = Union[int, float]
Hue = Optional[float]  # None means achromatic


class ColorSpace(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    CMYK = "cmyk"
    OKLCH = "oklch"


HUE_SPACES = {ColorSpace.HSL, ColorSpace.OKLCH}

HUE_360 = 360.0

# Below this OKLCH chroma the hue carries no information.
ACHROMATIC_CHROMA = 1e-4

# Inclusive (min, max) per channel, in constructor order.
channel_ranges: Dict[ColorSpace, Tuple[Tuple[float, float], ...]] = {
    ColorSpace.RGB: ((0, 255), (0, 255), (0, 255)),
    ColorSpace.HSL: ((0, 360), (0, 100), (0, 100)),
    ColorSpace.CMYK: ((0, 100), (0, 100), (0, 100), (0, 100)),
    ColorSpace.OKLCH: ((0, 1), (0, 0.4), (0, 360)),
}

ALPHA_RANGE = (0.0, 1.0)


def to_color_space(space: Union[ColorSpace, str]) -> ColorSpace:
    """
    Coerce a string or ColorSpace into a ColorSpace.

    Raises:
        ValueError: if the name is not one of the five supported spaces.
    """
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(str(space).lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {space!r}") from None


def is_hue_space(color_space: Union[ColorSpace, str]) -> bool:
    """Check if the given color space carries a hue channel (HSL or OKLCH)."""
    return to_color_space(color_space) in HUE_SPACES


def is_undefined_hue(h: Hue) -> bool:
    """True for the achromatic hue, whether given as None or a legacy NaN."""
    return h is None or (isinstance(h, float) and math.isnan(h))
