"""A single edge of a box border."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, Optional

from .color import BLACK, Color


class BorderStyle(Enum):
    NONE = "none"
    SOLID = "solid"


@dataclass(frozen=True)
class BorderSide:
    """Colour, width and style of one side of a box.

    A side with ``style=NONE`` and zero width is the empty side; it merges
    with anything and is what the other side fades into during interpolation.
    """

    color: Color = BLACK
    width: float = 1.0
    style: BorderStyle = BorderStyle.SOLID

    NONE: ClassVar["BorderSide"]

    def __post_init__(self) -> None:
        if not self.width >= 0.0:
            raise ValueError(f"border width must be non-negative, got {self.width}")

    @property
    def is_none(self) -> bool:
        return self.style is BorderStyle.NONE and self.width == 0.0

    def copy_with(
        self,
        color: Optional[Color] = None,
        width: Optional[float] = None,
        style: Optional[BorderStyle] = None,
    ) -> "BorderSide":
        return replace(
            self,
            color=self.color if color is None else color,
            width=self.width if width is None else width,
            style=self.style if style is None else style,
        )

    def scale(self, t: float) -> "BorderSide":
        return BorderSide(
            color=self.color,
            width=max(0.0, self.width * t),
            style=BorderStyle.NONE if t <= 0.0 else self.style,
        )

    # ------------------------------------------------------------------
    # Combination
    # ------------------------------------------------------------------
    @staticmethod
    def can_merge(a: "BorderSide", b: "BorderSide") -> bool:
        if a.is_none or b.is_none:
            return True
        return a.style is b.style and a.color == b.color

    @staticmethod
    def merge(a: "BorderSide", b: "BorderSide") -> "BorderSide":
        assert BorderSide.can_merge(a, b), f"cannot merge {a} with {b}"
        if a.is_none and b.is_none:
            return BorderSide.NONE
        if a.is_none:
            return b
        if b.is_none:
            return a
        return BorderSide(color=a.color, width=a.width + b.width, style=a.style)

    @staticmethod
    def lerp(a: "BorderSide", b: "BorderSide", t: float) -> "BorderSide":
        if t == 0.0:
            return a
        if t == 1.0:
            return b
        width = a.width + (b.width - a.width) * t
        if width < 0.0:
            return BorderSide.NONE
        if a.style is b.style:
            return BorderSide(color=Color.lerp(a.color, b.color, t), width=width, style=a.style)
        # An absent side contributes its colour at zero alpha.
        colour_a = a.color if a.style is BorderStyle.SOLID else a.color.with_alpha(0)
        colour_b = b.color if b.style is BorderStyle.SOLID else b.color.with_alpha(0)
        return BorderSide(
            color=Color.lerp(colour_a, colour_b, t),
            width=width,
            style=BorderStyle.SOLID,
        )

    def __str__(self) -> str:
        return f"BorderSide({self.color}, {float(self.width):g}, {self.style.value})"


BorderSide.NONE = BorderSide(width=0.0, style=BorderStyle.NONE)
