import numpy as np
from numpy import ndarray as NDArray
from ..colors.hex import HexColor
from ..colors.rgb import RGBColor
from ..colors.hsl import HSLColor
from ..colors.cmyk import CMYKColor
from ..colors.oklch import OKLCHColor
from ..types.color_types import HUE_360
from .gamma import srgb_to_linear, np_srgb_to_linear
from .oklab import linear_srgb_to_oklab, oklab_to_oklch, np_linear_srgb_to_oklab, np_oklab_to_oklch
from .numbers import round_channel


def rgb_to_hex(color: RGBColor) -> HexColor:
    r, g, b = (int(round_channel(v)) for v in color.channels)
    return HexColor(f"#{r:02x}{g:02x}{b:02x}", alpha=color.alpha)


def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return 0.0, 0.0, lightness

    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    if max_c == r:
        hue = (60 * ((g - b) / delta) + HUE_360) % HUE_360
    elif max_c == g:
        hue = (60 * ((b - r) / delta) + 120) % HUE_360
    else:
        hue = (60 * ((r - g) / delta) + 240) % HUE_360

    return hue, saturation, lightness


def rgb_to_hsl(color: RGBColor) -> HSLColor:
    h, s, l = unit_rgb_to_hsl(*color.unit_values)
    return HSLColor(h, s * 100, l * 100, alpha=color.alpha)


def rgb_to_cmyk(color: RGBColor) -> CMYKColor:
    r, g, b = color.unit_values
    k = 1 - max(r, g, b)
    if k == 1:
        c = m = y = 0.0
    else:
        c = (1 - r - k) / (1 - k)
        m = (1 - g - k) / (1 - k)
        y = (1 - b - k) / (1 - k)
    return CMYKColor(c * 100, m * 100, y * 100, k * 100, alpha=color.alpha)


def unit_rgb_to_oklch(r: float, g: float, b: float):
    """Gamma-encoded sRGB in [0, 1] to (L, C, h); h is None when achromatic."""
    lab = linear_srgb_to_oklab(srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    return oklab_to_oklch(*lab)


def rgb_to_oklch(color: RGBColor) -> OKLCHColor:
    l, c, h = unit_rgb_to_oklch(*color.unit_values)
    return OKLCHColor(l, c, h, alpha=color.alpha)


def rgb_identity(color: RGBColor) -> RGBColor:
    return color


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros_like(lightness)
    mask = delta > 0
    saturation[mask] = delta[mask] / (1 - np.abs(2 * lightness[mask] - 1))

    hue = np.zeros_like(max_c)
    mask_r = mask & (max_c == r)
    mask_g = mask & (max_c == g) & ~mask_r
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = (60 * ((g[mask_r] - b[mask_r]) / delta[mask_r]) + HUE_360) % HUE_360
    hue[mask_g] = (60 * ((b[mask_g] - r[mask_g]) / delta[mask_g]) + 120) % HUE_360
    hue[mask_b] = (60 * ((r[mask_b] - g[mask_b]) / delta[mask_b]) + 240) % HUE_360

    return np.stack([hue, saturation, lightness], axis=-1)


def np_unit_rgb_to_oklch(rgb: NDArray) -> NDArray:
    """Vectorized gamma-encoded sRGB (..., 3) to OKLCH; achromatic hue is NaN."""
    return np_oklab_to_oklch(np_linear_srgb_to_oklab(np_srgb_to_linear(rgb)))
