"""Four-sided borders for rectangular boxes.

Two representations exist:

* :class:`Border` keys its sides by screen geometry (top, right, bottom, left).
* :class:`BorderDirectional` keys its sides by reading direction
  (top, start, end, bottom).

Neither can be converted into the other without knowing the text direction,
so combining or animating between them follows the rules implemented by
:meth:`BorderDirectional.add` and :meth:`BoxBorder.lerp`.  All values are
immutable; every operation returns a fresh border.
"""
from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from enum import Enum
import logging
from typing import List, Optional

from .border_side import BorderSide, BorderStyle
from .color import BLACK, Color
from .edge_insets import EdgeInsets, EdgeInsetsDirectional
from .errors import BorderInvariantError
from .shape_border import ShapeBorder

logger = logging.getLogger(__name__)


class BoxShape(Enum):
    RECTANGLE = "rectangle"
    CIRCLE = "circle"


class BoxBorder(ShapeBorder):
    """Common interface of the two four-sided border representations."""

    @property
    @abstractmethod
    def top(self) -> BorderSide:
        ...

    @property
    @abstractmethod
    def bottom(self) -> BorderSide:
        ...

    @property
    @abstractmethod
    def is_uniform(self) -> bool:
        """Whether all four sides share colour, width and style."""

    @abstractmethod
    def scale(self, t: float) -> "BoxBorder":
        ...

    @staticmethod
    def lerp(a: Optional["BoxBorder"], b: Optional["BoxBorder"], t: float) -> Optional["BoxBorder"]:
        """Interpolate between two borders whose kinds may differ.

        ``None`` stands for a border whose sides are all absent.  Between a
        :class:`Border` and a :class:`BorderDirectional` that both carry
        lateral sides, the result switches kind at ``t == 0.5``; the lateral
        sides shrink to nothing over the first half and grow back over the
        second, while top and bottom interpolate over the whole range.
        """
        if isinstance(a, (Border, type(None))) and isinstance(b, (Border, type(None))):
            return Border.lerp(a, b, t)
        if isinstance(a, (BorderDirectional, type(None))) and isinstance(b, (BorderDirectional, type(None))):
            return BorderDirectional.lerp(a, b, t)
        if isinstance(b, Border) and isinstance(a, BorderDirectional):
            a, b, t = b, a, 1.0 - t
        if isinstance(a, Border) and isinstance(b, BorderDirectional):
            none = BorderSide.NONE
            if b.start == none and b.end == none:
                logger.debug("lerp: directional border has no lateral sides, staying geometric")
                return Border(
                    top=BorderSide.lerp(a.top, b.top, t),
                    right=BorderSide.lerp(a.right, none, t),
                    bottom=BorderSide.lerp(a.bottom, b.bottom, t),
                    left=BorderSide.lerp(a.left, none, t),
                )
            if a.left == none and a.right == none:
                logger.debug("lerp: geometric border has no lateral sides, staying directional")
                return BorderDirectional(
                    top=BorderSide.lerp(a.top, b.top, t),
                    start=BorderSide.lerp(none, b.start, t),
                    end=BorderSide.lerp(none, b.end, t),
                    bottom=BorderSide.lerp(a.bottom, b.bottom, t),
                )
            logger.debug("lerp: switching border kind at t=0.5 (t=%s)", t)
            if t < 0.5:
                return Border(
                    top=BorderSide.lerp(a.top, b.top, t),
                    right=BorderSide.lerp(a.right, none, t * 2.0),
                    bottom=BorderSide.lerp(a.bottom, b.bottom, t),
                    left=BorderSide.lerp(a.left, none, t * 2.0),
                )
            return BorderDirectional(
                top=BorderSide.lerp(a.top, b.top, t),
                start=BorderSide.lerp(none, b.start, (t - 0.5) * 2.0),
                end=BorderSide.lerp(none, b.end, (t - 0.5) * 2.0),
                bottom=BorderSide.lerp(a.bottom, b.bottom, t),
            )
        raise BorderInvariantError(
            f"cannot interpolate between {type(a).__name__} and {type(b).__name__}"
        )


def _describe(kind: str, sides: List[tuple]) -> str:
    arguments = [f"{name}: {side}" for name, side in sides if side != BorderSide.NONE]
    return f"{kind}({', '.join(arguments)})"


@dataclass(frozen=True)
class Border(BoxBorder):
    """Border whose sides are fixed to the top, right, bottom and left edges."""

    top: BorderSide = BorderSide.NONE
    right: BorderSide = BorderSide.NONE
    bottom: BorderSide = BorderSide.NONE
    left: BorderSide = BorderSide.NONE

    @classmethod
    def all(
        cls,
        color: Color = BLACK,
        width: float = 1.0,
        style: BorderStyle = BorderStyle.SOLID,
    ) -> "Border":
        return cls.from_border_side(BorderSide(color=color, width=width, style=style))

    @classmethod
    def from_border_side(cls, side: BorderSide) -> "Border":
        return cls(top=side, right=side, bottom=side, left=side)

    @property
    def dimensions(self) -> EdgeInsets:
        return EdgeInsets.from_ltrb(self.left.width, self.top.width, self.right.width, self.bottom.width)

    @property
    def is_uniform(self) -> bool:
        top = self.top
        return all(
            side.color == top.color and side.width == top.width and side.style is top.style
            for side in (self.right, self.bottom, self.left)
        )

    def add(self, other: ShapeBorder, reversed: bool = False) -> Optional["Border"]:
        if not isinstance(other, Border):
            return None
        if (
            BorderSide.can_merge(self.top, other.top)
            and BorderSide.can_merge(self.right, other.right)
            and BorderSide.can_merge(self.bottom, other.bottom)
            and BorderSide.can_merge(self.left, other.left)
        ):
            return Border.merge(self, other)
        logger.debug("add: %s and %s have conflicting sides", self, other)
        return None

    def lerp_from(self, a: Optional[ShapeBorder], t: float) -> Optional[ShapeBorder]:
        if isinstance(a, Border):
            return Border.lerp(a, self, t)
        return super().lerp_from(a, t)

    def lerp_to(self, b: Optional[ShapeBorder], t: float) -> Optional[ShapeBorder]:
        if isinstance(b, Border):
            return Border.lerp(self, b, t)
        return super().lerp_to(b, t)

    def scale(self, t: float) -> "Border":
        return Border(
            top=self.top.scale(t),
            right=self.right.scale(t),
            bottom=self.bottom.scale(t),
            left=self.left.scale(t),
        )

    @staticmethod
    def lerp(a: Optional["Border"], b: Optional["Border"], t: float) -> Optional["Border"]:
        if a is None and b is None:
            return None
        if a is None:
            return b.scale(t)
        if b is None:
            return a.scale(1.0 - t)
        return Border(
            top=BorderSide.lerp(a.top, b.top, t),
            right=BorderSide.lerp(a.right, b.right, t),
            bottom=BorderSide.lerp(a.bottom, b.bottom, t),
            left=BorderSide.lerp(a.left, b.left, t),
        )

    @staticmethod
    def merge(a: "Border", b: "Border") -> "Border":
        assert BorderSide.can_merge(a.top, b.top)
        assert BorderSide.can_merge(a.right, b.right)
        assert BorderSide.can_merge(a.bottom, b.bottom)
        assert BorderSide.can_merge(a.left, b.left)
        return Border(
            top=BorderSide.merge(a.top, b.top),
            right=BorderSide.merge(a.right, b.right),
            bottom=BorderSide.merge(a.bottom, b.bottom),
            left=BorderSide.merge(a.left, b.left),
        )

    def __str__(self) -> str:
        if self.is_uniform:
            return f"Border.all({self.top})"
        return _describe(
            "Border",
            [("top", self.top), ("right", self.right), ("bottom", self.bottom), ("left", self.left)],
        )


@dataclass(frozen=True)
class BorderDirectional(BoxBorder):
    """Border whose lateral sides follow the reading direction.

    ``start`` is the left edge in left-to-right text and the right edge in
    right-to-left text; ``end`` is the opposite edge.
    """

    top: BorderSide = BorderSide.NONE
    start: BorderSide = BorderSide.NONE
    end: BorderSide = BorderSide.NONE
    bottom: BorderSide = BorderSide.NONE

    @property
    def dimensions(self) -> EdgeInsetsDirectional:
        return EdgeInsetsDirectional.from_steb(self.start.width, self.top.width, self.end.width, self.bottom.width)

    @property
    def is_uniform(self) -> bool:
        top = self.top
        return all(
            side.color == top.color and side.width == top.width and side.style is top.style
            for side in (self.start, self.end, self.bottom)
        )

    def add(self, other: ShapeBorder, reversed: bool = False) -> Optional[BoxBorder]:
        if isinstance(other, BorderDirectional):
            if (
                BorderSide.can_merge(self.top, other.top)
                and BorderSide.can_merge(self.start, other.start)
                and BorderSide.can_merge(self.end, other.end)
                and BorderSide.can_merge(self.bottom, other.bottom)
            ):
                return BorderDirectional.merge(self, other)
            logger.debug("add: %s and %s have conflicting sides", self, other)
            return None
        if isinstance(other, Border):
            if not BorderSide.can_merge(other.top, self.top) or not BorderSide.can_merge(
                other.bottom, self.bottom
            ):
                logger.debug("add: top/bottom of %s and %s cannot merge", self, other)
                return None
            if self.start != BorderSide.NONE or self.end != BorderSide.NONE:
                if other.left != BorderSide.NONE or other.right != BorderSide.NONE:
                    # start/end cannot be matched to left/right without a text direction.
                    logger.debug("add: both %s and %s have lateral sides", self, other)
                    return None
                return BorderDirectional(
                    top=BorderSide.merge(other.top, self.top),
                    start=self.start,
                    end=self.end,
                    bottom=BorderSide.merge(other.bottom, self.bottom),
                )
            return Border(
                top=BorderSide.merge(other.top, self.top),
                right=other.right,
                bottom=BorderSide.merge(other.bottom, self.bottom),
                left=other.left,
            )
        return None

    def lerp_from(self, a: Optional[ShapeBorder], t: float) -> Optional[ShapeBorder]:
        if isinstance(a, BorderDirectional):
            return BorderDirectional.lerp(a, self, t)
        return super().lerp_from(a, t)

    def lerp_to(self, b: Optional[ShapeBorder], t: float) -> Optional[ShapeBorder]:
        if isinstance(b, BorderDirectional):
            return BorderDirectional.lerp(self, b, t)
        return super().lerp_to(b, t)

    def scale(self, t: float) -> "BorderDirectional":
        return BorderDirectional(
            top=self.top.scale(t),
            start=self.start.scale(t),
            end=self.end.scale(t),
            bottom=self.bottom.scale(t),
        )

    @staticmethod
    def lerp(
        a: Optional["BorderDirectional"], b: Optional["BorderDirectional"], t: float
    ) -> Optional["BorderDirectional"]:
        if a is None and b is None:
            return None
        if a is None:
            return b.scale(t)
        if b is None:
            return a.scale(1.0 - t)
        return BorderDirectional(
            top=BorderSide.lerp(a.top, b.top, t),
            start=BorderSide.lerp(a.start, b.start, t),
            end=BorderSide.lerp(a.end, b.end, t),
            bottom=BorderSide.lerp(a.bottom, b.bottom, t),
        )

    @staticmethod
    def merge(a: "BorderDirectional", b: "BorderDirectional") -> "BorderDirectional":
        assert BorderSide.can_merge(a.top, b.top)
        assert BorderSide.can_merge(a.start, b.start)
        assert BorderSide.can_merge(a.end, b.end)
        assert BorderSide.can_merge(a.bottom, b.bottom)
        return BorderDirectional(
            top=BorderSide.merge(a.top, b.top),
            start=BorderSide.merge(a.start, b.start),
            end=BorderSide.merge(a.end, b.end),
            bottom=BorderSide.merge(a.bottom, b.bottom),
        )

    def __str__(self) -> str:
        return _describe(
            "BorderDirectional",
            [("top", self.top), ("start", self.start), ("end", self.end), ("bottom", self.bottom)],
        )
