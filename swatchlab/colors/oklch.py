from typing import ClassVar, Optional, Tuple
import math
import warnings
from ..types.color_types import ColorSpace, Hue, Scalar, ACHROMATIC_CHROMA
from .color_base import ColorBase


class OKLCHColor(ColorBase):
    """
    Polar OKLab: lightness 0-1, chroma 0-0.4 (soft ceiling), hue in degrees.

    ``h`` is ``None`` for achromatic colors. A NaN hue is still accepted for
    compatibility and is stored as ``None``.
    """
    __slots__ = ('l', 'c', 'h')
    space:  ClassVar[ColorSpace] = ColorSpace.OKLCH
    fields: ClassVar[Tuple[str, ...]] = ('l', 'c', 'h')

    l: Scalar
    c: Scalar
    h: Hue

    def __init__(self, l: Scalar, c: Scalar, h: Hue = None, alpha: Optional[float] = None) -> None:
        if h is not None and isinstance(h, float) and math.isnan(h):
            warnings.warn(
                "NaN hue is deprecated for achromatic OKLCH colors; pass h=None instead.",
                DeprecationWarning,
                stacklevel=2,
            )
            h = None
        self.l = l
        self.c = c
        self.h = h
        self.alpha = alpha
        self._freeze()

    @property
    def is_achromatic(self) -> bool:
        return self.h is None or abs(self.c) < ACHROMATIC_CHROMA
