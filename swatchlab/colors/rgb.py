from typing import ClassVar, Optional, Tuple
from ..types.color_types import ColorSpace, Scalar
from .color_base import ColorBase


class RGBColor(ColorBase):
    __slots__ = ('r', 'g', 'b')
    space:  ClassVar[ColorSpace] = ColorSpace.RGB
    fields: ClassVar[Tuple[str, ...]] = ('r', 'g', 'b')

    r: Scalar
    g: Scalar
    b: Scalar

    def __init__(self, r: Scalar, g: Scalar, b: Scalar, alpha: Optional[float] = None) -> None:
        self.r = r
        self.g = g
        self.b = b
        self.alpha = alpha
        self._freeze()

    @property
    def unit_values(self) -> Tuple[float, float, float]:
        """Channels scaled to 0.0-1.0."""
        return (self.r / 255, self.g / 255, self.b / 255)


WHITE = RGBColor(255, 255, 255)
BLACK = RGBColor(0, 0, 0)
