"""Box border values.

Immutable four-sided borders in two representations, geometric
(:class:`Border`) and reading-direction relative (:class:`BorderDirectional`),
with merging, scaling and interpolation between them.
"""
from __future__ import annotations

__version__ = "0.1.0"

from .border_side import BorderSide, BorderStyle
from .box_border import Border, BorderDirectional, BoxBorder, BoxShape
from .color import BLACK, TRANSPARENT, WHITE, Color, ColorPalette
from .edge_insets import EdgeInsets, EdgeInsetsDirectional, EdgeInsetsGeometry
from .errors import BorderInvariantError, BorderSpecError, ConfigError
from .parsing import format_border, format_side, parse_border, parse_side
from .shape_border import ShapeBorder

__all__ = [
    "BLACK",
    "Border",
    "BorderDirectional",
    "BorderInvariantError",
    "BorderSide",
    "BorderSpecError",
    "BorderStyle",
    "BoxBorder",
    "BoxShape",
    "Color",
    "ColorPalette",
    "ConfigError",
    "EdgeInsets",
    "EdgeInsetsDirectional",
    "EdgeInsetsGeometry",
    "ShapeBorder",
    "TRANSPARENT",
    "WHITE",
    "format_border",
    "format_side",
    "parse_border",
    "parse_side",
]
