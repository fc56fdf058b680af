from .harmony import (
    PaletteType,
    GeneratedPalette,
    HARMONY_OFFSETS,
    rotate_hue,
    generate_complementary,
    generate_triadic,
    generate_tetradic,
    generate_analogous,
    generate_palette,
    generate_all_palettes,
)
from .variations import generate_palette_with_variations

__all__ = [
    'PaletteType', 'GeneratedPalette', 'HARMONY_OFFSETS', 'rotate_hue',
    'generate_complementary', 'generate_triadic', 'generate_tetradic',
    'generate_analogous', 'generate_palette', 'generate_all_palettes',
    'generate_palette_with_variations',
]
