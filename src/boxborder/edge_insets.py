"""Inset values describing how much room each edge of a border occupies.

``EdgeInsets`` is keyed by screen geometry and ``EdgeInsetsDirectional`` by
reading direction.  Mapping start/end onto left/right needs a text direction,
which is owned by the layout code consuming these values.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


class EdgeInsetsGeometry(ABC):
    @property
    @abstractmethod
    def horizontal(self) -> float:
        """Total inset along the horizontal axis."""

    @property
    @abstractmethod
    def vertical(self) -> float:
        """Total inset along the vertical axis."""


@dataclass(frozen=True)
class EdgeInsets(EdgeInsetsGeometry):
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    ZERO: ClassVar["EdgeInsets"]

    @classmethod
    def from_ltrb(cls, left: float, top: float, right: float, bottom: float) -> "EdgeInsets":
        return cls(left, top, right, bottom)

    @classmethod
    def all(cls, value: float) -> "EdgeInsets":
        return cls(value, value, value, value)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    def __add__(self, other: object) -> "EdgeInsets":
        if not isinstance(other, EdgeInsets):
            return NotImplemented
        return EdgeInsets(
            self.left + other.left,
            self.top + other.top,
            self.right + other.right,
            self.bottom + other.bottom,
        )

    def __mul__(self, factor: float) -> "EdgeInsets":
        return EdgeInsets(self.left * factor, self.top * factor, self.right * factor, self.bottom * factor)


@dataclass(frozen=True)
class EdgeInsetsDirectional(EdgeInsetsGeometry):
    start: float = 0.0
    top: float = 0.0
    end: float = 0.0
    bottom: float = 0.0

    ZERO: ClassVar["EdgeInsetsDirectional"]

    @classmethod
    def from_steb(cls, start: float, top: float, end: float, bottom: float) -> "EdgeInsetsDirectional":
        return cls(start, top, end, bottom)

    @property
    def horizontal(self) -> float:
        return self.start + self.end

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    def __add__(self, other: object) -> "EdgeInsetsDirectional":
        if not isinstance(other, EdgeInsetsDirectional):
            return NotImplemented
        return EdgeInsetsDirectional(
            self.start + other.start,
            self.top + other.top,
            self.end + other.end,
            self.bottom + other.bottom,
        )

    def __mul__(self, factor: float) -> "EdgeInsetsDirectional":
        return EdgeInsetsDirectional(
            self.start * factor, self.top * factor, self.end * factor, self.bottom * factor
        )


EdgeInsets.ZERO = EdgeInsets()
EdgeInsetsDirectional.ZERO = EdgeInsetsDirectional()
