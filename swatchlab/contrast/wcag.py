"""
WCAG 2.1 contrast math.

Relative luminance linearises each sRGB channel with the 0.04045 threshold
and weights it 0.2126 / 0.7152 / 0.0722; the contrast ratio is
``(L_lighter + 0.05) / (L_darker + 0.05)`` and lies in [1, 21].
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from ..colors.color import Color
from ..conversions.gamma import srgb_to_linear
from ..conversions.wrapper import to_rgb

LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)
FLARE = 0.05

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5


class ComplianceLevel(str, Enum):
    AAA = "AAA"
    AA = "AA"
    FAIL = "Fail"


@dataclass(frozen=True)
class ContrastResult:
    ratio: float
    passes_aa: bool
    passes_aa_large: bool
    passes_aaa: bool
    passes_aaa_large: bool
    level: ComplianceLevel
    level_large: ComplianceLevel


def relative_luminance(color: Color) -> float:
    rgb = to_rgb(color)
    r, g, b = (srgb_to_linear(v) for v in rgb.unit_values)
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * r + wg * g + wb * b


def get_contrast_ratio(color_a: Color, color_b: Color) -> float:
    """Contrast ratio between two colors; symmetric, 1 (identical) to 21 (black/white)."""
    la = relative_luminance(color_a)
    lb = relative_luminance(color_b)
    lighter, darker = max(la, lb), min(la, lb)
    return (lighter + FLARE) / (darker + FLARE)


def _level(ratio: float, aa: float, aaa: float) -> ComplianceLevel:
    if ratio >= aaa:
        return ComplianceLevel.AAA
    if ratio >= aa:
        return ComplianceLevel.AA
    return ComplianceLevel.FAIL


def evaluate_ratio(ratio: float) -> ContrastResult:
    """Apply the WCAG 2.1 thresholds (inclusive) to a precomputed ratio."""
    return ContrastResult(
        ratio=ratio,
        passes_aa=ratio >= AA_NORMAL,
        passes_aa_large=ratio >= AA_LARGE,
        passes_aaa=ratio >= AAA_NORMAL,
        passes_aaa_large=ratio >= AAA_LARGE,
        level=_level(ratio, AA_NORMAL, AAA_NORMAL),
        level_large=_level(ratio, AA_LARGE, AAA_LARGE),
    )


def check_contrast(foreground: Color, background: Color) -> ContrastResult:
    return evaluate_ratio(get_contrast_ratio(foreground, background))


def format_contrast_ratio(ratio: float) -> str:
    """``4.5`` -> ``"4.50:1"``."""
    return f"{ratio:.2f}:1"
