from .wcag import (
    ComplianceLevel,
    ContrastResult,
    relative_luminance,
    get_contrast_ratio,
    evaluate_ratio,
    check_contrast,
    format_contrast_ratio,
    AA_NORMAL, AA_LARGE, AAA_NORMAL, AAA_LARGE,
)
from .scorecard import ContrastScorecard, generate_contrast_scorecard

__all__ = [
    'ComplianceLevel', 'ContrastResult',
    'relative_luminance', 'get_contrast_ratio', 'evaluate_ratio',
    'check_contrast', 'format_contrast_ratio',
    'AA_NORMAL', 'AA_LARGE', 'AAA_NORMAL', 'AAA_LARGE',
    'ContrastScorecard', 'generate_contrast_scorecard',
]
