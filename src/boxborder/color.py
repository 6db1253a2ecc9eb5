"""Colour values used by border sides.

Colours are immutable RGBA dataclasses so they can be shared freely between
border values, hashed, and compared structurally.  Interpolation truncates
each channel towards zero and clamps it into ``0..255``.
"""
from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Dict, Iterable

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{6})([0-9a-fA-F]{2})?")


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _lerp_channel(a: int, b: int, t: float) -> int:
    return int(_clamp(int(a + (b - a) * t), 0, 255))


@dataclass(frozen=True)
class Color:
    """Immutable RGBA colour; ``a`` is the alpha channel."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", int(_clamp(self.r, 0, 255)))
        object.__setattr__(self, "g", int(_clamp(self.g, 0, 255)))
        object.__setattr__(self, "b", int(_clamp(self.b, 0, 255)))
        object.__setattr__(self, "a", int(_clamp(self.a, 0, 255)))

    @property
    def opacity(self) -> float:
        return self.a / 255.0

    # ------------------------------------------------------------------
    # Derived colours
    # ------------------------------------------------------------------
    def with_alpha(self, a: int) -> "Color":
        return Color(self.r, self.g, self.b, a)

    def with_opacity(self, opacity: float) -> "Color":
        return self.with_alpha(round(255.0 * _clamp(opacity, 0.0, 1.0)))

    def mix(self, other: "Color", ratio: float = 0.5) -> "Color":
        return Color.lerp(self, other, _clamp(ratio, 0.0, 1.0))

    @staticmethod
    def lerp(a: "Color", b: "Color", t: float) -> "Color":
        return Color(
            _lerp_channel(a.r, b.r, t),
            _lerp_channel(a.g, b.g, t),
            _lerp_channel(a.b, b.b, t),
            _lerp_channel(a.a, b.a, t),
        )

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------
    @classmethod
    def from_hex(cls, text: str) -> "Color":
        match = _HEX_PATTERN.fullmatch(text.strip())
        if not match:
            raise ValueError(f"invalid hex colour '{text}'")
        rgb, alpha = match.groups()
        return cls(
            int(rgb[0:2], 16),
            int(rgb[2:4], 16),
            int(rgb[4:6], 16),
            int(alpha, 16) if alpha else 255,
        )

    @property
    def rgb_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        if self.a == 255:
            return self.rgb_hex
        return f"{self.rgb_hex}{self.a:02x}"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0)


class ColorPalette:
    """Palette of named colours used when reading textual border notation."""

    def __init__(self) -> None:
        self._base = self._build_base_palette()
        self._custom: Dict[str, Color] = {}

    @staticmethod
    def _build_base_palette() -> Dict[str, Color]:
        values = {
            "black": (0, 0, 0),
            "white": (255, 255, 255),
            "red": (255, 0, 0),
            "green": (0, 128, 0),
            "blue": (0, 0, 255),
            "yellow": (255, 255, 0),
            "orange": (255, 165, 0),
            "purple": (128, 0, 128),
            "pink": (255, 192, 203),
            "gray": (128, 128, 128),
            "grey": (128, 128, 128),
        }
        base = {name: Color(*rgb) for name, rgb in values.items()}
        base["transparent"] = TRANSPARENT
        return base

    # ------------------------------------------------------------------
    def get(self, name: str) -> Color:
        key = name.lower()
        if key in self._custom:
            return self._custom[key]
        if key in self._base:
            return self._base[key]
        raise KeyError(f"unknown colour '{name}'")

    def define(self, name: str, colour: Color) -> None:
        self._custom[name.lower()] = colour

    def resolve(self, spec: str) -> Color:
        """Return the colour for a palette name or a hex literal."""
        text = spec.strip()
        if text.startswith("#") or _HEX_PATTERN.fullmatch(text):
            return Color.from_hex(text)
        return self.get(text)

    def list_names(self) -> Iterable[str]:
        yield from self._base.keys()
        yield from self._custom.keys()
