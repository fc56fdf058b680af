"""CSS Color 4 text for each color variant."""
from typing import Callable, Dict
from ..colors.color import Color, space_of
from ..colors.color_base import ColorBase
from ..types.color_types import ColorSpace
from .to_rgb import hex_to_rgb, cmyk_to_rgb


def format_number(value: float, digits: int = 2) -> str:
    """Fixed-point with at most ``digits`` decimals, trailing zeros stripped."""
    value = round(float(value), digits) + 0.0  # folds -0.0 into 0.0
    text = f"{value:.{digits}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def _translucent(color: ColorBase) -> bool:
    return color.alpha is not None and color.alpha < 1


def _rgb_string(r, g, b, alpha) -> str:
    channels = ", ".join(format_number(v) for v in (r, g, b))
    if alpha is not None and alpha < 1:
        return f"rgba({channels}, {format_number(alpha, 3)})"
    return f"rgb({channels})"


def _hex_css(color) -> str:
    if _translucent(color):
        rgb = hex_to_rgb(color)
        return _rgb_string(rgb.r, rgb.g, rgb.b, color.alpha)
    return color.value


def _rgb_css(color) -> str:
    return _rgb_string(color.r, color.g, color.b, color.alpha)


def _hsl_css(color) -> str:
    body = f"{format_number(color.h)}, {format_number(color.s)}%, {format_number(color.l)}%"
    if _translucent(color):
        return f"hsla({body}, {format_number(color.alpha, 3)})"
    return f"hsl({body})"


def _cmyk_css(color) -> str:
    # CSS has no device-cmyk support in browsers yet; emit the RGB equivalent
    rgb = cmyk_to_rgb(color)
    return _rgb_string(rgb.r, rgb.g, rgb.b, color.alpha)


def _oklch_css(color) -> str:
    hue = "none" if color.h is None else format_number(color.h)
    body = f"{format_number(color.l, 4)} {format_number(color.c, 4)} {hue}"
    if _translucent(color):
        return f"oklch({body} / {format_number(color.alpha, 3)})"
    return f"oklch({body})"


CSS_WRITERS: Dict[ColorSpace, Callable[..., str]] = {
    ColorSpace.HEX: _hex_css,
    ColorSpace.RGB: _rgb_css,
    ColorSpace.HSL: _hsl_css,
    ColorSpace.CMYK: _cmyk_css,
    ColorSpace.OKLCH: _oklch_css,
}


def color_to_css(color: Color) -> str:
    """
    Return the canonical CSS string for a color.

    Alpha is only written when present and below 1:
    ``rgb(255, 0, 0)`` / ``rgba(255, 0, 0, 0.5)``, ``hsl(0, 100%, 50%)``,
    ``#ff0000``, ``oklch(0.628 0.2577 29.23)``. CMYK is written as ``rgb(...)``.
    """
    return CSS_WRITERS[space_of(color)](color)
