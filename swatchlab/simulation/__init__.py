from .color_blindness import (
    ColorBlindnessType,
    DEFICIENCY_MATRICES,
    simulate_color_blindness,
    simulate_palette,
)

__all__ = ['ColorBlindnessType', 'DEFICIENCY_MATRICES', 'simulate_color_blindness', 'simulate_palette']
