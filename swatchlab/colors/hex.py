from typing import ClassVar, Optional, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase


class HexColor(ColorBase):
    """
    A ``#RGB`` / ``#RRGGBB`` token. Alpha is held separately and is never
    encoded into the token itself.
    """
    __slots__ = ('value',)
    space:  ClassVar[ColorSpace] = ColorSpace.HEX
    fields: ClassVar[Tuple[str, ...]] = ('value',)

    value: str

    def __init__(self, value: str, alpha: Optional[float] = None) -> None:
        self.value = value
        self.alpha = alpha
        self._freeze()

    @property
    def digits(self) -> str:
        """Six lowercase hex digits, expanding the 3-digit shorthand."""
        token = self.value.lstrip('#')
        if len(token) == 3:
            token = ''.join(ch * 2 for ch in token)
        return token.lower()
