"""Base capability shared by every border shape."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .edge_insets import EdgeInsetsGeometry


class ShapeBorder(ABC):
    """Outline of a shape that can be combined with, and animated towards, others.

    Subclasses describe how much room the border takes (``dimensions``), how
    to scale it, and optionally how to add it to or interpolate it with other
    borders.  ``add`` and the ``lerp_*`` hooks return ``None`` when the pair
    is not something the subclass understands.
    """

    @property
    @abstractmethod
    def dimensions(self) -> EdgeInsetsGeometry:
        """Insets occupied by the border."""

    @abstractmethod
    def scale(self, t: float) -> "ShapeBorder":
        """Return a copy with its visual weight multiplied by ``t``."""

    def add(self, other: "ShapeBorder", reversed: bool = False) -> Optional["ShapeBorder"]:
        return None

    def __add__(self, other: object) -> "ShapeBorder":
        if not isinstance(other, ShapeBorder):
            return NotImplemented
        result = self.add(other)
        if result is None:
            result = other.add(self, reversed=True)
        if result is None:
            raise TypeError(f"{self} and {other} cannot be combined into a single border")
        return result

    def lerp_from(self, a: Optional["ShapeBorder"], t: float) -> Optional["ShapeBorder"]:
        if a is None:
            return self.scale(t)
        return None

    def lerp_to(self, b: Optional["ShapeBorder"], t: float) -> Optional["ShapeBorder"]:
        if b is None:
            return self.scale(1.0 - t)
        return None

    @staticmethod
    def lerp(a: Optional["ShapeBorder"], b: Optional["ShapeBorder"], t: float) -> Optional["ShapeBorder"]:
        result = None
        if b is not None:
            result = b.lerp_from(a, t)
        if result is None and a is not None:
            result = a.lerp_to(b, t)
        if result is not None:
            return result
        return a if t < 0.5 else b
