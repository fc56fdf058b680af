"""
OKLab / OKLCH math (Björn Ottosson, 2020).

Linear sRGB -> LMS -> cube root -> OKLab, and back. OKLCH is the polar form
of OKLab with the hue in degrees; a chroma below ``ACHROMATIC_CHROMA`` has no
meaningful hue and is reported as ``None`` (``NaN`` in array results).
"""
from typing import Tuple
import math
import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import ACHROMATIC_CHROMA, Hue, HUE_360

LINEAR_SRGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

LMS_TO_OKLAB = np.array([
    [0.2104542553,  0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050,  0.4505937099],
    [0.0259040371,  0.7827717662, -0.8086757660],
])

OKLAB_TO_LMS = np.array([
    [1.0,  0.3963377774,  0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

LMS_TO_LINEAR_SRGB = np.array([
    [ 4.0767416621, -3.3077115913,  0.2309699292],
    [-1.2684380046,  2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147,  1.7076147010],
])


def linear_srgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    lms = LINEAR_SRGB_TO_LMS @ np.array([r, g, b], dtype=float)
    lab = LMS_TO_OKLAB @ np.cbrt(lms)
    return float(lab[0]), float(lab[1]), float(lab[2])


def oklab_to_linear_srgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    lms_ = OKLAB_TO_LMS @ np.array([L, a, b], dtype=float)
    rgb = LMS_TO_LINEAR_SRGB @ (lms_ ** 3)
    return float(rgb[0]), float(rgb[1]), float(rgb[2])


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, Hue]:
    """Rectangular to polar. Hue is ``None`` when chroma is ~0, never 0."""
    c = math.hypot(a, b)
    if c < ACHROMATIC_CHROMA:
        return L, c, None
    h = math.degrees(math.atan2(b, a)) % HUE_360
    return L, c, h


def oklch_to_oklab(L: float, c: float, h: Hue) -> Tuple[float, float, float]:
    """Polar to rectangular; an undefined hue puts the color on the gray axis."""
    if h is None or math.isnan(h):
        return L, 0.0, 0.0
    h_rad = math.radians(h)
    return L, c * math.cos(h_rad), c * math.sin(h_rad)


def np_linear_srgb_to_oklab(rgb: NDArray) -> NDArray:
    """
    Vectorized: linear sRGB to OKLab.

    Args:
        rgb: array of shape (..., 3), linear-light channels

    Returns:
        array of shape (..., 3): (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=float)
    lms = rgb @ LINEAR_SRGB_TO_LMS.T
    return np.cbrt(lms) @ LMS_TO_OKLAB.T


def np_oklab_to_linear_srgb(lab: NDArray) -> NDArray:
    lab = np.asarray(lab, dtype=float)
    lms_ = lab @ OKLAB_TO_LMS.T
    return (lms_ ** 3) @ LMS_TO_LINEAR_SRGB.T


def np_oklab_to_oklch(lab: NDArray) -> NDArray:
    lab = np.asarray(lab, dtype=float)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    c = np.hypot(a, b)
    h = np.degrees(np.arctan2(b, a)) % HUE_360
    h = np.where(c < ACHROMATIC_CHROMA, np.nan, h)
    return np.stack([L, c, h], axis=-1)


def np_oklch_to_oklab(lch: NDArray) -> NDArray:
    lch = np.asarray(lch, dtype=float)
    L, c, h = lch[..., 0], lch[..., 1], lch[..., 2]
    h_rad = np.radians(np.nan_to_num(h, nan=0.0))
    c = np.where(np.isnan(h), 0.0, c)
    return np.stack([L, c * np.cos(h_rad), c * np.sin(h_rad)], axis=-1)
