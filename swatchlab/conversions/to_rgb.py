import numpy as np
from numpy import ndarray as NDArray
from ..colors.hex import HexColor
from ..colors.rgb import RGBColor
from ..colors.hsl import HSLColor
from ..colors.cmyk import CMYKColor
from ..colors.oklch import OKLCHColor
from ..colors.validation import validate_hex
from ..types.color_types import HUE_360
from .gamma import linear_to_srgb, np_linear_to_srgb
from .oklab import oklab_to_linear_srgb, oklch_to_oklab, np_oklab_to_linear_srgb, np_oklch_to_oklab
from .numbers import round_channel, clip_channel, CHANNEL_MAX


def hex_to_rgb(color: HexColor) -> RGBColor:
    """
    Parse a ``#rgb`` or ``#rrggbb`` token. Shorthand nibbles are doubled.

    Raises:
        ValueError: if the token is not valid hex.
    """
    if not validate_hex(color.value):
        raise ValueError(f"Invalid hex color token: {color.value!r}")
    digits = color.digits
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return RGBColor(r, g, b, alpha=color.alpha)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if s == 0:
        return l, l, l
    h = (h % HUE_360) / HUE_360
    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return (
        _hue_to_channel(p, q, h + 1 / 3),
        _hue_to_channel(p, q, h),
        _hue_to_channel(p, q, h - 1 / 3),
    )


def hsl_to_rgb(color: HSLColor) -> RGBColor:
    r, g, b = hsl_to_unit_rgb(color.h, color.s / 100, color.l / 100)
    return RGBColor(
        round_channel(r * CHANNEL_MAX),
        round_channel(g * CHANNEL_MAX),
        round_channel(b * CHANNEL_MAX),
        alpha=color.alpha,
    )


def cmyk_to_rgb(color: CMYKColor) -> RGBColor:
    c, m, y, k = (v / 100 for v in color.channels)
    return RGBColor(
        round_channel(CHANNEL_MAX * (1 - c) * (1 - k)),
        round_channel(CHANNEL_MAX * (1 - m) * (1 - k)),
        round_channel(CHANNEL_MAX * (1 - y) * (1 - k)),
        alpha=color.alpha,
    )


def oklch_to_unit_rgb(l: float, c: float, h) -> tuple[float, float, float]:
    """OKLCH to gamma-encoded sRGB in [0, 1] (unclipped)."""
    lin = oklab_to_linear_srgb(*oklch_to_oklab(l, c, h))
    return tuple(linear_to_srgb(v) for v in lin)  # type: ignore[return-value]


def oklch_to_rgb(color: OKLCHColor) -> RGBColor:
    """OKLCH to RGB; out-of-gamut results are clipped to 0-255."""
    r, g, b = oklch_to_unit_rgb(color.l, color.c, color.h)
    return RGBColor(
        clip_channel(r * CHANNEL_MAX),
        clip_channel(g * CHANNEL_MAX),
        clip_channel(b * CHANNEL_MAX),
        alpha=color.alpha,
    )


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % HUE_360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    m1 = l + s * np.where(l < 0.5, l, 1 - l)
    m2 = m1 - (m1 - l) * 2 * np.abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    hue_section = np.floor(h / 60).astype(int)
    # (r, g, b) picks per sector: 0 -> m1, 1 -> m2, 2 -> low
    picks = {
        0: (m1, m2, low),
        1: (m2, m1, low),
        2: (low, m1, m2),
        3: (low, m2, m1),
        4: (m2, low, m1),
        5: (m1, low, m2),
    }
    r = np.array(low, copy=True)
    g = np.array(low, copy=True)
    b = np.array(low, copy=True)
    for section, (pr, pg, pb) in picks.items():
        mask = hue_section == section
        r[mask] = pr[mask]
        g[mask] = pg[mask]
        b[mask] = pb[mask]

    return np.stack([r, g, b], axis=-1)


def np_oklch_to_unit_rgb(lch: NDArray) -> NDArray:
    """Vectorized OKLCH (..., 3) to unclipped gamma-encoded sRGB in [0, 1]."""
    return np_linear_to_srgb(np_oklab_to_linear_srgb(np_oklch_to_oklab(lch)))
