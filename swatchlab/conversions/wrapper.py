from typing import Callable, Dict, Union
import numpy as np
from numpy import ndarray as NDArray

from ..colors.color import Color, space_of
from ..colors.rgb import RGBColor
from ..types.color_types import ColorSpace, to_color_space

from .to_rgb import hex_to_rgb, hsl_to_rgb, cmyk_to_rgb, oklch_to_rgb, np_hsl_to_unit_rgb, np_oklch_to_unit_rgb
from .from_rgb import (
    rgb_to_hex, rgb_to_hsl, rgb_to_cmyk, rgb_to_oklch, rgb_identity,
    np_unit_rgb_to_hsl, np_unit_rgb_to_oklch,
)
from .numbers import CHANNEL_MAX

# Every space maps to RGB and back; RGB is the pivot for all cross-space pairs.
TO_RGB: Dict[ColorSpace, Callable[..., RGBColor]] = {
    ColorSpace.HEX: hex_to_rgb,
    ColorSpace.RGB: rgb_identity,
    ColorSpace.HSL: hsl_to_rgb,
    ColorSpace.CMYK: cmyk_to_rgb,
    ColorSpace.OKLCH: oklch_to_rgb,
}

FROM_RGB: Dict[ColorSpace, Callable[[RGBColor], Color]] = {
    ColorSpace.HEX: rgb_to_hex,
    ColorSpace.RGB: rgb_identity,
    ColorSpace.HSL: rgb_to_hsl,
    ColorSpace.CMYK: rgb_to_cmyk,
    ColorSpace.OKLCH: rgb_to_oklch,
}


def to_rgb(color: Color) -> RGBColor:
    return TO_RGB[space_of(color)](color)


def to_hex_token(color: Color) -> str:
    """Normalized ``#rrggbb`` for any variant; ``#ABC`` becomes ``#aabbcc``."""
    return rgb_to_hex(to_rgb(color)).value


def convert_color(color: Color, target_space: Union[ColorSpace, str]) -> Color:
    """
    Convert a color value into ``target_space``.

    Same-space conversion returns the value itself (values are immutable).
    Everything else goes source -> RGB -> target. Alpha is carried through.

    Raises:
        TypeError: if ``color`` is not a color value.
        ValueError: if ``target_space`` is unknown, or a hex token is malformed.
    """
    target = to_color_space(target_space)
    source = space_of(color)
    if source == target:
        return color
    return FROM_RGB[target](TO_RGB[source](color))


# Array conversions: RGB arrays hold 0-255 floats, HSL holds (deg, %, %),
# OKLCH holds (L, C, deg) with NaN for an undefined hue.
def _np_rgb_to(space: ColorSpace, rgb: NDArray) -> NDArray:
    unit = np.asarray(rgb, dtype=float) / CHANNEL_MAX
    if space == ColorSpace.RGB:
        return unit * CHANNEL_MAX
    if space == ColorSpace.HSL:
        hsl = np_unit_rgb_to_hsl(unit[..., 0], unit[..., 1], unit[..., 2])
        return hsl * np.array([1.0, 100.0, 100.0])
    if space == ColorSpace.OKLCH:
        return np_unit_rgb_to_oklch(unit)
    raise ValueError(f"Array conversion does not support {space.value!r}")


def _np_to_rgb(space: ColorSpace, values: NDArray) -> NDArray:
    values = np.asarray(values, dtype=float)
    if space == ColorSpace.RGB:
        return values
    if space == ColorSpace.HSL:
        unit = np_hsl_to_unit_rgb(values[..., 0], values[..., 1] / 100, values[..., 2] / 100)
        return unit * CHANNEL_MAX
    if space == ColorSpace.OKLCH:
        return np.clip(np_oklch_to_unit_rgb(values), 0.0, 1.0) * CHANNEL_MAX
    raise ValueError(f"Array conversion does not support {space.value!r}")


def np_convert(
    values: NDArray,
    from_space: Union[ColorSpace, str],
    to_space: Union[ColorSpace, str],
) -> NDArray:
    """
    Vectorized conversion between RGB, HSL and OKLCH for arrays of shape (..., 3).

    RGB output is left as unrounded floats; round with ``np.rint`` if needed.
    """
    fs, ts = to_color_space(from_space), to_color_space(to_space)
    if fs == ts:
        return np.asarray(values, dtype=float)
    return _np_rgb_to(ts, _np_to_rgb(fs, values))
