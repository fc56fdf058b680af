"""sRGB transfer functions (IEC 61966-2-1), scalar and vectorized."""
import numpy as np
from numpy import ndarray as NDArray

# Decode threshold on the encoded side, encode threshold on the linear side.
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308


def srgb_to_linear(value: float) -> float:
    """Gamma-decode one channel in [0, 1] to linear light."""
    if value <= SRGB_DECODE_THRESHOLD:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def linear_to_srgb(value: float) -> float:
    """Gamma-encode one linear-light channel back to display sRGB."""
    if value <= SRGB_ENCODE_THRESHOLD:
        return 12.92 * value
    return 1.055 * value ** (1 / 2.4) - 0.055


def np_srgb_to_linear(values: NDArray) -> NDArray:
    values = np.asarray(values, dtype=float)
    return np.where(
        values <= SRGB_DECODE_THRESHOLD,
        values / 12.92,
        ((np.maximum(values, SRGB_DECODE_THRESHOLD) + 0.055) / 1.055) ** 2.4,
    )


def np_linear_to_srgb(values: NDArray) -> NDArray:
    values = np.asarray(values, dtype=float)
    return np.where(
        values <= SRGB_ENCODE_THRESHOLD,
        12.92 * values,
        1.055 * np.maximum(values, SRGB_ENCODE_THRESHOLD) ** (1 / 2.4) - 0.055,
    )
