from typing import ClassVar, Optional, Tuple
from ..types.color_types import ColorSpace, Scalar
from .color_base import ColorBase


class HSLColor(ColorBase):
    """Hue in degrees (wraps at 360), saturation and lightness in percent."""
    __slots__ = ('h', 's', 'l')
    space:  ClassVar[ColorSpace] = ColorSpace.HSL
    fields: ClassVar[Tuple[str, ...]] = ('h', 's', 'l')

    h: Scalar
    s: Scalar
    l: Scalar

    def __init__(self, h: Scalar, s: Scalar, l: Scalar, alpha: Optional[float] = None) -> None:
        self.h = h
        self.s = s
        self.l = l
        self.alpha = alpha
        self._freeze()
