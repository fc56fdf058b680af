from __future__ import annotations
from typing import Any, ClassVar, Optional, Tuple
from ..types.color_types import ColorSpace, HUE_SPACES


class ColorBase:
    """
    Immutable value base shared by the five color variants.

    Subclasses list their channel attributes in ``fields`` and in their own
    ``__slots__``; ``__init__`` assigns them and then calls ``_freeze``.
    Equality and hashing are by value (space, channels, alpha).
    """
    __slots__ = ('alpha', '_is_frozen')  # no __dict__ → no stray attributes

    space:  ClassVar[ColorSpace]
    fields: ClassVar[Tuple[str, ...]] = ()

    alpha: Optional[float]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def _freeze(self) -> None:
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def channels(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, f) for f in self.fields)

    @property
    def has_alpha(self) -> bool:
        """True when an explicit alpha was given (even 1.0)."""
        return self.alpha is not None

    @property
    def is_opaque(self) -> bool:
        return self.alpha is None or self.alpha >= 1

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.space in HUE_SPACES

    # ------------------ DERIVED VALUES ------------------
    def with_alpha(self, alpha: Optional[float]):
        """Return a copy with ``alpha`` replaced (``None`` removes it)."""
        return self.__class__(*self.channels, alpha=alpha)

    def replace(self, **changes: Any):
        """Return a copy with the named channels replaced."""
        unknown = set(changes) - set(self.fields) - {'alpha'}
        if unknown:
            raise TypeError(f"{self.__class__.__name__} has no channel(s) {sorted(unknown)}")
        values = {f: getattr(self, f) for f in self.fields}
        values['alpha'] = self.alpha
        values.update(changes)
        return self.__class__(**values)

    def to(self, target_space):
        """Shorthand for ``convert_color(self, target_space)``."""
        from ..conversions.wrapper import convert_color  # local import to avoid cycles
        return convert_color(self, target_space)

    # ------------------ VALUE SEMANTICS ------------------
    def _key(self) -> Tuple[Any, ...]:
        return (self.space, self.channels, self.alpha)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        parts = [f"{f}={getattr(self, f)!r}" for f in self.fields]
        if self.alpha is not None:
            parts.append(f"alpha={self.alpha!r}")
        return f"{self.__class__.__name__}({', '.join(parts)})"
