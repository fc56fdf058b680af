from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import random
import string
import time
from .color_base import ColorBase

_BASE36 = string.digits + string.ascii_lowercase


def _now_ms() -> int:
    return int(time.time() * 1000)


def generate_color_id() -> str:
    """Return an id of the form ``color-<epoch ms>-<9 base36 chars>``."""
    suffix = ''.join(random.choices(_BASE36, k=9))
    return f"color-{_now_ms()}-{suffix}"


@dataclass(frozen=True)
class ColorWithMetadata:
    """A color paired with caller-side bookkeeping; the library keeps no registry."""
    color: ColorBase
    id: str
    name: Optional[str] = None
    created_at: int = field(default_factory=_now_ms)

    @classmethod
    def create(cls, color: ColorBase, name: Optional[str] = None) -> "ColorWithMetadata":
        return cls(color=color, id=generate_color_id(), name=name)

    def renamed(self, name: Optional[str]) -> "ColorWithMetadata":
        return ColorWithMetadata(self.color, self.id, name, self.created_at)
