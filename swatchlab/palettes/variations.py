from __future__ import annotations
from typing import List
from boundednumbers.functions import clamp
from ..colors.color import Color
from ..colors.oklch import OKLCHColor
from ..conversions.wrapper import convert_color
from ..types.color_types import ColorSpace
from .harmony import GeneratedPalette, PaletteType, generate_palette

LIGHTNESS_STEP = 0.1
CHROMA_STEP = 0.02


def lighter(color: OKLCHColor, step: int) -> OKLCHColor:
    return OKLCHColor(
        float(clamp(color.l + LIGHTNESS_STEP * step, 0.0, 1.0)),
        max(0.0, color.c - CHROMA_STEP * step),
        color.h,
        alpha=color.alpha,
    )


def darker(color: OKLCHColor, step: int) -> OKLCHColor:
    return OKLCHColor(
        float(clamp(color.l - LIGHTNESS_STEP * step, 0.0, 1.0)),
        max(0.0, color.c - CHROMA_STEP * step),
        color.h,
        alpha=color.alpha,
    )


def generate_palette_with_variations(
    base: Color,
    palette_type: PaletteType | str,
    variations: int = 2,
) -> GeneratedPalette:
    """
    Harmony palette plus lighter/darker steps of every member.

    The result starts with ``base``; then, for each palette color and each
    step ``i`` in ``1..variations``, a lighter (+0.1·i lightness) and a darker
    (-0.1·i) OKLCH point, both with chroma reduced by 0.02·i. Lightness is
    clamped to [0, 1] and chroma to [0, ∞).
    """
    if variations < 0:
        raise ValueError(f"variations must be >= 0, got {variations}")
    palette = generate_palette(base, palette_type)

    colors: List[Color] = [base]
    for member in palette.colors:
        oklch = convert_color(member, ColorSpace.OKLCH)
        for step in range(1, variations + 1):
            colors.append(lighter(oklch, step))  # type: ignore[arg-type]
            colors.append(darker(oklch, step))  # type: ignore[arg-type]

    return GeneratedPalette(palette.type, tuple(colors))
