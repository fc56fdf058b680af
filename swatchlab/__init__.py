"""
swatchlab - Color Values, Contrast Auditing and Swatch Export
=============================================================

A pure color science library: immutable color values in five
representations, conversion between them, WCAG 2.1 contrast checks,
perceptual palette generation and palette export.

Key Features
------------
- Five immutable color variants: Hex, RGB, HSL, CMYK, OKLCH
- Range validators that never raise
- Conversion through RGB, with OKLab math per Björn Ottosson
- Explicit achromatic hue (``None``) instead of a NaN sentinel
- WCAG 2.1 relative luminance, contrast ratio and AA/AAA levels
- Complementary, triadic, tetradic and analogous palettes in OKLCH
- Color-blindness previews (protanopia, deuteranopia, tritanopia)
- Export to CSS variables, Tailwind config, JSON and Adobe Swatch Exchange

Quick Start
-----------
>>> from swatchlab import RGBColor, HexColor, convert_color, check_contrast
>>>
>>> red = RGBColor(255, 0, 0)
>>> convert_color(HexColor("#fff"), "rgb")
RGBColor(r=255, g=255, b=255)
>>>
>>> result = check_contrast(RGBColor(0, 0, 0), RGBColor(255, 255, 255))
>>> round(result.ratio, 2)
21.0
>>>
>>> from swatchlab import generate_triadic, export_colors
>>> palette = generate_triadic(red)
>>> data = export_colors("ase", palette.colors, "brand")

Modules
-------
- colors: the color variants, validators and metadata records
- conversions: scalar and vectorized conversions, CSS strings
- contrast: WCAG 2.1 math and the contrast scorecard
- palettes: hue-rotation palettes and lightness variations
- simulation: color-blindness previews
- export: CSS / Tailwind / JSON / ASE exporters
"""

from .colors import (
    ColorBase,
    HexColor, RGBColor, HSLColor, CMYKColor, OKLCHColor,
    WHITE, BLACK,
    Color,
    is_hex, is_rgb, is_hsl, is_cmyk, is_oklch,
    validate_hex, validate_rgb, validate_hsl, validate_cmyk,
    validate_oklch, validate_alpha, validate_color,
    ColorWithMetadata, generate_color_id,
)
from .conversions import convert_color, to_rgb, np_convert, color_to_css
from .contrast import (
    ComplianceLevel,
    ContrastResult,
    ContrastScorecard,
    relative_luminance,
    get_contrast_ratio,
    evaluate_ratio,
    check_contrast,
    format_contrast_ratio,
    generate_contrast_scorecard,
)
from .palettes import (
    PaletteType,
    GeneratedPalette,
    generate_complementary,
    generate_triadic,
    generate_tetradic,
    generate_analogous,
    generate_palette,
    generate_all_palettes,
    generate_palette_with_variations,
)
from .simulation import ColorBlindnessType, simulate_color_blindness, simulate_palette
from .export import (
    ExportFormat,
    ExportArtifact,
    export_colors,
    export_filename,
    export_mime_type,
    create_export,
)
from .types import ColorSpace

__version__ = "1.0.0"

__all__ = [
    # Color values
    "ColorBase",
    "HexColor", "RGBColor", "HSLColor", "CMYKColor", "OKLCHColor",
    "WHITE", "BLACK",
    "Color", "ColorSpace",

    # Discriminants and validators
    "is_hex", "is_rgb", "is_hsl", "is_cmyk", "is_oklch",
    "validate_hex", "validate_rgb", "validate_hsl", "validate_cmyk",
    "validate_oklch", "validate_alpha", "validate_color",

    # Metadata
    "ColorWithMetadata", "generate_color_id",

    # Conversions
    "convert_color", "to_rgb", "np_convert", "color_to_css",

    # Contrast
    "ComplianceLevel", "ContrastResult", "ContrastScorecard",
    "relative_luminance", "get_contrast_ratio", "evaluate_ratio",
    "check_contrast", "format_contrast_ratio", "generate_contrast_scorecard",

    # Palettes
    "PaletteType", "GeneratedPalette",
    "generate_complementary", "generate_triadic", "generate_tetradic",
    "generate_analogous", "generate_palette", "generate_all_palettes",
    "generate_palette_with_variations",

    # Simulation
    "ColorBlindnessType", "simulate_color_blindness", "simulate_palette",

    # Export
    "ExportFormat", "ExportArtifact",
    "export_colors", "export_filename", "export_mime_type", "create_export",

    # Version
    "__version__",
]
