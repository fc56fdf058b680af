"""
Range predicates for color channels.

None of these raise and none of them clamp; they answer "is this in range"
so callers can filter input before handing it to the conversion functions,
which are permissive.
"""
from __future__ import annotations
import re
from numbers import Real
from typing import Any, Sequence, Tuple
from ..types.color_types import ColorSpace, ALPHA_RANGE, channel_ranges, is_undefined_hue
from .color_base import ColorBase

_HEX_PATTERN = re.compile(r'#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})')


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _in_range(value: Any, bounds: Tuple[float, float]) -> bool:
    if not _is_number(value):
        return False
    lo, hi = bounds
    return lo <= value <= hi  # NaN compares False


def _all_in_range(values: Sequence[Any], space: ColorSpace) -> bool:
    return all(_in_range(v, b) for v, b in zip(values, channel_ranges[space]))


def validate_hex(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return _HEX_PATTERN.fullmatch(value) is not None


def validate_rgb(r: Any, g: Any, b: Any) -> bool:
    return _all_in_range((r, g, b), ColorSpace.RGB)


def validate_hsl(h: Any, s: Any, l: Any) -> bool:
    return _all_in_range((h, s, l), ColorSpace.HSL)


def validate_cmyk(c: Any, m: Any, y: Any, k: Any) -> bool:
    return _all_in_range((c, m, y, k), ColorSpace.CMYK)


def validate_oklch(l: Any, c: Any, h: Any) -> bool:
    l_range, c_range, h_range = channel_ranges[ColorSpace.OKLCH]
    if not (_in_range(l, l_range) and _in_range(c, c_range)):
        return False
    return is_undefined_hue(h) or _in_range(h, h_range)


def validate_alpha(alpha: Any = None) -> bool:
    if alpha is None:
        return True
    return _in_range(alpha, ALPHA_RANGE)


_validators = {
    ColorSpace.HEX: validate_hex,
    ColorSpace.RGB: validate_rgb,
    ColorSpace.HSL: validate_hsl,
    ColorSpace.CMYK: validate_cmyk,
    ColorSpace.OKLCH: validate_oklch,
}


def validate_color(color: Any) -> bool:
    """Validate every channel of a color value plus its alpha."""
    if not isinstance(color, ColorBase):
        return False
    return _validators[color.space](*color.channels) and validate_alpha(color.alpha)
