from typing import ClassVar, Optional, Tuple
from ..types.color_types import ColorSpace, Scalar
from .color_base import ColorBase


class CMYKColor(ColorBase):
    __slots__ = ('c', 'm', 'y', 'k')
    space:  ClassVar[ColorSpace] = ColorSpace.CMYK
    fields: ClassVar[Tuple[str, ...]] = ('c', 'm', 'y', 'k')

    c: Scalar
    m: Scalar
    y: Scalar
    k: Scalar

    def __init__(
        self,
        c: Scalar,
        m: Scalar,
        y: Scalar,
        k: Scalar,
        alpha: Optional[float] = None,
    ) -> None:
        self.c = c
        self.m = m
        self.y = y
        self.k = k
        self.alpha = alpha
        self._freeze()
