from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
from ..colors.color import Color
from ..colors.rgb import RGBColor, WHITE, BLACK
from .wcag import ContrastResult, check_contrast, AA_LARGE, AA_NORMAL, AAA_NORMAL

VERY_LOW_CONTRAST = "Very low contrast. Text will be difficult to read."
LARGE_TEXT_ONLY = "Use large text (18pt+) or bold text (14pt+) for minimum readability."
MEETS_AA = "Meets AA standards. Use normal text size."
MEETS_AAA = "Meets AAA standards. Excellent contrast."
USE_WHITE_TEXT = "Use white/light text on this background."
USE_BLACK_TEXT = "Use black/dark text on this background."


@dataclass(frozen=True)
class ContrastScorecard:
    white_on_color: ContrastResult
    black_on_color: ContrastResult
    recommendations: Tuple[str, ...]

    @property
    def white_is_better(self) -> bool:
        return self.white_on_color.ratio > self.black_on_color.ratio

    @property
    def best_text_color(self) -> RGBColor:
        return WHITE if self.white_is_better else BLACK

    @property
    def best_result(self) -> ContrastResult:
        return self.white_on_color if self.white_is_better else self.black_on_color


def _band_message(ratio: float) -> str:
    if ratio < AA_LARGE:
        return VERY_LOW_CONTRAST
    if ratio < AA_NORMAL:
        return LARGE_TEXT_ONLY
    if ratio < AAA_NORMAL:
        return MEETS_AA
    return MEETS_AAA


def generate_contrast_scorecard(background: Color) -> ContrastScorecard:
    """
    Audit white and black text against ``background``.

    Recommendations are the band message for the better of the two, then
    which text color to use. Ties go to black.
    """
    white_on_color = check_contrast(WHITE, background)
    black_on_color = check_contrast(BLACK, background)

    white_better = white_on_color.ratio > black_on_color.ratio
    best = white_on_color if white_better else black_on_color

    recommendations = (
        _band_message(best.ratio),
        USE_WHITE_TEXT if white_better else USE_BLACK_TEXT,
    )
    return ContrastScorecard(white_on_color, black_on_color, recommendations)
