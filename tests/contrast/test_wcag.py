from swatchlab.colors import HexColor, RGBColor, HSLColor, WHITE, BLACK
from swatchlab.contrast import (
    ComplianceLevel,
    relative_luminance,
    get_contrast_ratio,
    evaluate_ratio,
    check_contrast,
    format_contrast_ratio,
)
from color_samples import contrast_pairs
import pytest


def test_luminance_endpoints():
    assert relative_luminance(BLACK) == 0.0
    assert relative_luminance(WHITE) == pytest.approx(1.0)
    assert relative_luminance(RGBColor(255, 0, 0)) == pytest.approx(0.2126)
    assert relative_luminance(RGBColor(0, 255, 0)) == pytest.approx(0.7152)
    assert relative_luminance(RGBColor(0, 0, 255)) == pytest.approx(0.0722)


def test_luminance_accepts_any_variant():
    assert relative_luminance(HexColor("#fff")) == pytest.approx(1.0)
    assert relative_luminance(HSLColor(0, 0, 0)) == 0.0


def test_ratio_is_symmetric_and_bounded():
    for a, b in contrast_pairs:
        ratio = get_contrast_ratio(a, b)
        assert ratio == get_contrast_ratio(b, a)
        assert 1.0 <= ratio <= 21.0


def test_ratio_of_color_with_itself_is_one():
    for a, b in contrast_pairs:
        assert get_contrast_ratio(a, a) == pytest.approx(1.0)
        assert get_contrast_ratio(b, b) == pytest.approx(1.0)


def test_black_on_white_is_maximum():
    result = check_contrast(BLACK, WHITE)
    assert result.ratio == pytest.approx(21.0)
    assert result.passes_aa and result.passes_aaa
    assert result.level is ComplianceLevel.AAA
    assert result.level_large is ComplianceLevel.AAA


def test_known_grays_on_white():
    # #777 just misses AA; #767676 is the lightest gray that passes.
    fails = check_contrast(HexColor("#777"), WHITE)
    assert fails.ratio == pytest.approx(4.478, abs=1e-3)
    assert not fails.passes_aa
    assert fails.passes_aa_large
    assert fails.level is ComplianceLevel.FAIL
    assert fails.level_large is ComplianceLevel.AA

    passes = check_contrast(HexColor("#767676"), WHITE)
    assert passes.ratio == pytest.approx(4.542, abs=1e-3)
    assert passes.passes_aa
    assert passes.passes_aaa_large
    assert not passes.passes_aaa
    assert passes.level is ComplianceLevel.AA
    assert passes.level_large is ComplianceLevel.AAA


def test_red_on_white():
    result = check_contrast(RGBColor(255, 0, 0), WHITE)
    assert result.ratio == pytest.approx(3.998, abs=1e-3)
    assert result.passes_aa_large
    assert not result.passes_aa


def test_thresholds_are_inclusive():
    assert evaluate_ratio(4.5).passes_aa
    assert evaluate_ratio(4.5).passes_aaa_large
    assert not evaluate_ratio(4.499999).passes_aa
    assert evaluate_ratio(3.0).passes_aa_large
    assert not evaluate_ratio(2.999999).passes_aa_large
    assert evaluate_ratio(7.0).passes_aaa
    assert not evaluate_ratio(6.999999).passes_aaa


def test_levels():
    assert evaluate_ratio(2.0).level is ComplianceLevel.FAIL
    assert evaluate_ratio(2.0).level_large is ComplianceLevel.FAIL
    assert evaluate_ratio(5.0).level is ComplianceLevel.AA
    assert evaluate_ratio(8.0).level is ComplianceLevel.AAA
    assert ComplianceLevel.FAIL.value == "Fail"


def test_format_contrast_ratio():
    assert format_contrast_ratio(4.5) == "4.50:1"
    assert format_contrast_ratio(21) == "21.00:1"
    assert format_contrast_ratio(3.99847) == "4.00:1"
