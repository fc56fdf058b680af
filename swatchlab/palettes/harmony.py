"""
Hue-rotation palettes in OKLCH.

Each generator converts the base color to OKLCH, rotates the hue by fixed
offsets and keeps lightness, chroma and alpha. The base entry is returned as
given; the rotated entries are ``OKLCHColor`` values.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Sequence, Tuple
from boundednumbers.functions import cyclic_wrap_float
from ..colors.color import Color
from ..colors.oklch import OKLCHColor
from ..conversions.wrapper import convert_color
from ..types.color_types import ColorSpace, ACHROMATIC_CHROMA, HUE_360


class PaletteType(str, Enum):
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    ANALOGOUS = "analogous"


# Offsets in degrees; 0 marks where the base color sits.
HARMONY_OFFSETS: Dict[PaletteType, Tuple[float, ...]] = {
    PaletteType.COMPLEMENTARY: (0, 180),
    PaletteType.TRIADIC: (0, 120, 240),
    PaletteType.TETRADIC: (0, 90, 180, 270),
    PaletteType.ANALOGOUS: (-30, 0, 30),
}


@dataclass(frozen=True)
class GeneratedPalette:
    type: PaletteType
    colors: Tuple[Color, ...]

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self):
        return iter(self.colors)


def rotate_hue(color: OKLCHColor, degrees: float) -> OKLCHColor:
    """
    Rotate an OKLCH color's hue, wrapping into [0, 360).

    An undefined hue rotates from 0. When the chroma is below the achromatic
    threshold the result keeps the undefined hue.
    """
    if abs(color.c) < ACHROMATIC_CHROMA:
        return OKLCHColor(color.l, color.c, None, alpha=color.alpha)
    base_hue = 0.0 if color.h is None else color.h
    hue = float(cyclic_wrap_float(base_hue + degrees, 0.0, HUE_360))
    if hue >= HUE_360:
        hue -= HUE_360
    return OKLCHColor(color.l, color.c, hue, alpha=color.alpha)


def _harmony(base: Color, palette_type: PaletteType, offsets: Sequence[float]) -> GeneratedPalette:
    oklch = convert_color(base, ColorSpace.OKLCH)
    colors = tuple(
        base if offset == 0 else rotate_hue(oklch, offset)  # type: ignore[arg-type]
        for offset in offsets
    )
    return GeneratedPalette(palette_type, colors)


def generate_complementary(base: Color) -> GeneratedPalette:
    """Base plus the color opposite it on the wheel (+180°)."""
    return _harmony(base, PaletteType.COMPLEMENTARY, HARMONY_OFFSETS[PaletteType.COMPLEMENTARY])


def generate_triadic(base: Color) -> GeneratedPalette:
    """Base plus +120° and +240°."""
    return _harmony(base, PaletteType.TRIADIC, HARMONY_OFFSETS[PaletteType.TRIADIC])


def generate_tetradic(base: Color) -> GeneratedPalette:
    """Base plus +90°, +180° and +270°."""
    return _harmony(base, PaletteType.TETRADIC, HARMONY_OFFSETS[PaletteType.TETRADIC])


def generate_analogous(base: Color) -> GeneratedPalette:
    """-30°, base, +30°: the base sits in the middle."""
    return _harmony(base, PaletteType.ANALOGOUS, HARMONY_OFFSETS[PaletteType.ANALOGOUS])


PALETTE_GENERATORS = {
    PaletteType.COMPLEMENTARY: generate_complementary,
    PaletteType.TRIADIC: generate_triadic,
    PaletteType.TETRADIC: generate_tetradic,
    PaletteType.ANALOGOUS: generate_analogous,
}


def generate_palette(base: Color, palette_type) -> GeneratedPalette:
    """
    Raises:
        ValueError: if ``palette_type`` is not a PaletteType name.
    """
    return PALETTE_GENERATORS[PaletteType(palette_type)](base)


def generate_all_palettes(base: Color) -> Dict[PaletteType, GeneratedPalette]:
    return {palette_type: generate(base) for palette_type, generate in PALETTE_GENERATORS.items()}
