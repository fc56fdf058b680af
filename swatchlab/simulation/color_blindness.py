"""
Dichromacy simulation on sRGB channels.

The 3x3 matrices are the commonly used Brettel-derived approximations for
protanopia, deuteranopia and tritanopia, applied to gamma-encoded 0-255
channels. They are a preview aid, not a physiological model.
"""
from __future__ import annotations
from enum import Enum
from typing import Dict, List, Sequence, Union
import numpy as np
from ..colors.color import Color
from ..colors.rgb import RGBColor
from ..conversions.numbers import clip_channel
from ..conversions.wrapper import to_rgb


class ColorBlindnessType(str, Enum):
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"


DEFICIENCY_MATRICES: Dict[ColorBlindnessType, np.ndarray] = {
    ColorBlindnessType.PROTANOPIA: np.array([
        [0.56667, 0.43333, 0.0],
        [0.55833, 0.44167, 0.0],
        [0.0,     0.24167, 0.75833],
    ]),
    ColorBlindnessType.DEUTERANOPIA: np.array([
        [0.625, 0.375, 0.0],
        [0.7,   0.3,   0.0],
        [0.0,   0.3,   0.7],
    ]),
    ColorBlindnessType.TRITANOPIA: np.array([
        [0.95, 0.05,    0.0],
        [0.0,  0.43333, 0.56667],
        [0.0,  0.475,   0.525],
    ]),
}


def simulate_color_blindness(
    color: Color,
    deficiency: Union[ColorBlindnessType, str],
) -> RGBColor:
    """
    Return how ``color`` appears under ``deficiency``, as RGB. Alpha is kept.

    Raises:
        ValueError: for an unknown deficiency name.
    """
    matrix = DEFICIENCY_MATRICES[ColorBlindnessType(deficiency)]
    rgb = to_rgb(color)
    simulated = matrix @ np.array(rgb.channels, dtype=float)
    r, g, b = (clip_channel(float(v)) for v in simulated)
    return RGBColor(r, g, b, alpha=rgb.alpha)


def simulate_palette(
    colors: Sequence[Color],
    deficiency: Union[ColorBlindnessType, str],
) -> List[RGBColor]:
    return [simulate_color_blindness(color, deficiency) for color in colors]
