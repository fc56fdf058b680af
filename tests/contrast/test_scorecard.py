from swatchlab.colors import HexColor, RGBColor, WHITE, BLACK
from swatchlab.contrast import generate_contrast_scorecard
from swatchlab.contrast.scorecard import (
    _band_message,
    VERY_LOW_CONTRAST,
    LARGE_TEXT_ONLY,
    MEETS_AA,
    MEETS_AAA,
    USE_WHITE_TEXT,
    USE_BLACK_TEXT,
)
import pytest


def test_white_background_wants_black_text():
    card = generate_contrast_scorecard(WHITE)
    assert card.recommendations == (MEETS_AAA, USE_BLACK_TEXT)
    assert card.best_text_color == BLACK
    assert card.black_on_color.ratio == pytest.approx(21.0)
    assert card.white_on_color.ratio == pytest.approx(1.0)


def test_black_background_wants_white_text():
    card = generate_contrast_scorecard(BLACK)
    assert card.recommendations == (MEETS_AAA, USE_WHITE_TEXT)
    assert card.white_is_better
    assert card.best_text_color == WHITE
    assert card.best_result is card.white_on_color


def test_mid_gray_background():
    card = generate_contrast_scorecard(HexColor("#777777"))
    assert card.black_on_color.ratio == pytest.approx(4.69, abs=1e-2)
    assert card.white_on_color.ratio == pytest.approx(4.48, abs=1e-2)
    assert card.recommendations == (MEETS_AA, USE_BLACK_TEXT)


def test_blue_background_wants_white_text():
    card = generate_contrast_scorecard(RGBColor(0, 0, 255))
    assert card.white_on_color.ratio == pytest.approx(8.59, abs=1e-2)
    assert card.recommendations == (MEETS_AAA, USE_WHITE_TEXT)


def test_band_messages():
    assert _band_message(1.0) == VERY_LOW_CONTRAST
    assert _band_message(2.99) == VERY_LOW_CONTRAST
    assert _band_message(3.0) == LARGE_TEXT_ONLY
    assert _band_message(4.49) == LARGE_TEXT_ONLY
    assert _band_message(4.5) == MEETS_AA
    assert _band_message(6.99) == MEETS_AA
    assert _band_message(7.0) == MEETS_AAA
