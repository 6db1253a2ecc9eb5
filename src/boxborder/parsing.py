"""Read and write borders in a compact textual notation.

Supported forms:

- ``top=red 2; left=#00ff00 1.5 solid; right=none``
- ``all=white 2`` (every side; combine with ``start``/``end`` for a
  directional border)
- ``{"top": {"color": "red", "width": 2}, "start": "blue 1"}``
- ``none`` (a border without sides)

A side is written ``<colour> [width] [solid|none]`` in any order.  Colours
are palette names or ``#rrggbb``/``#rrggbbaa`` literals.  Using ``start`` or
``end`` yields a :class:`BorderDirectional`; mixing them with ``left`` or
``right`` is rejected.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Optional

from .border_side import BorderSide, BorderStyle
from .box_border import Border, BorderDirectional, BoxBorder
from .color import BLACK, Color, ColorPalette
from .errors import BorderSpecError

logger = logging.getLogger(__name__)

_GEOMETRIC_KEYS = ("top", "right", "bottom", "left")
_DIRECTIONAL_KEYS = ("top", "start", "end", "bottom")
_KNOWN_KEYS = {"top", "right", "bottom", "left", "start", "end", "all"}

_DEFAULT_PALETTE = ColorPalette()


def parse_side(text: str, palette: Optional[ColorPalette] = None) -> BorderSide:
    tokens = text.split()
    if not tokens or [token.lower() for token in tokens] == ["none"]:
        return BorderSide.NONE

    colour: Color = BLACK
    width: Optional[float] = None
    style = BorderStyle.SOLID
    for token in tokens:
        lowered = token.lower()
        if lowered in ("solid", "none"):
            style = BorderStyle(lowered)
            continue
        number = _parse_number(token)
        if number is not None:
            width = number
            continue
        colour = _coerce_colour(token, palette)

    if width is None:
        width = 0.0 if style is BorderStyle.NONE else 1.0
    try:
        return BorderSide(color=colour, width=width, style=style)
    except ValueError as exc:
        raise BorderSpecError(str(exc)) from exc


def parse_border(text: str, palette: Optional[ColorPalette] = None) -> BoxBorder:
    source = text.strip()
    if not source:
        raise BorderSpecError("empty border specification")
    if source.lower() == "none":
        return Border()

    if source.startswith("{"):
        entries = _entries_from_json(source, palette)
    else:
        entries = _entries_from_pairs(source, palette)

    unknown = set(entries) - _KNOWN_KEYS
    if unknown:
        raise BorderSpecError(f"unknown border side(s): {', '.join(sorted(unknown))}")

    directional = "start" in entries or "end" in entries
    if directional and ("left" in entries or "right" in entries):
        raise BorderSpecError("cannot mix left/right with start/end in one border")

    fill = entries.pop("all", BorderSide.NONE)
    keys = _DIRECTIONAL_KEYS if directional else _GEOMETRIC_KEYS
    sides = {key: entries.get(key, fill) for key in keys}
    border = BorderDirectional(**sides) if directional else Border(**sides)
    logger.debug("parsed %r as %s", text, border)
    return border


def format_side(side: BorderSide) -> str:
    if side == BorderSide.NONE:
        return "none"
    return f"{side.color} {_format_width(side.width)} {side.style.value}"


def format_border(border: BoxBorder) -> str:
    if isinstance(border, Border):
        sides = [("top", border.top), ("right", border.right), ("bottom", border.bottom), ("left", border.left)]
    else:
        sides = [("top", border.top), ("start", border.start), ("end", border.end), ("bottom", border.bottom)]

    directional = isinstance(border, BorderDirectional)
    if not directional and all(side == BorderSide.NONE for _, side in sides):
        return "none"
    if not directional and border.is_uniform:
        return f"all={format_side(border.top)}"
    entries = [f"{name}={format_side(side)}" for name, side in sides if side != BorderSide.NONE]
    if directional and border.start == BorderSide.NONE and border.end == BorderSide.NONE:
        # Without a start/end entry the text would read back as a Border.
        entries.append("start=none")
    return "; ".join(entries)


# Internal helpers ------------------------------------------------------

def _entries_from_pairs(source: str, palette: Optional[ColorPalette]) -> Dict[str, BorderSide]:
    entries: Dict[str, BorderSide] = {}
    for part in re.split(r"[;,]", source):
        part = part.strip()
        if not part:
            continue
        if "=" not in part:
            raise BorderSpecError(f"expected side=value, got '{part}'")
        key, raw_val = part.split("=", 1)
        entries[key.strip().lower()] = parse_side(raw_val, palette)
    return entries


def _entries_from_json(source: str, palette: Optional[ColorPalette]) -> Dict[str, BorderSide]:
    try:
        parsed = json.loads(source)
    except json.JSONDecodeError as exc:
        raise BorderSpecError(f"invalid JSON border: {exc}") from exc
    if not isinstance(parsed, dict):
        raise BorderSpecError("JSON border must be an object")
    return {str(key).lower(): _side_from_value(value, palette) for key, value in parsed.items()}


def _side_from_value(value: Any, palette: Optional[ColorPalette]) -> BorderSide:
    if value is None:
        return BorderSide.NONE
    if isinstance(value, str):
        return parse_side(value, palette)
    if isinstance(value, dict):
        colour_spec = value.get("color", value.get("colour"))
        colour = BLACK if colour_spec is None else _coerce_colour(str(colour_spec), palette)
        style_name = str(value.get("style", "solid")).lower()
        if style_name not in ("solid", "none"):
            raise BorderSpecError(f"unknown border style '{style_name}'")
        style = BorderStyle(style_name)
        default_width = 0.0 if style is BorderStyle.NONE else 1.0
        try:
            return BorderSide(color=colour, width=float(value.get("width", default_width)), style=style)
        except (TypeError, ValueError) as exc:
            raise BorderSpecError(f"invalid border side {value!r}: {exc}") from exc
    raise BorderSpecError(f"unsupported border side value: {value!r}")


def _coerce_colour(spec: str, palette: Optional[ColorPalette]) -> Color:
    try:
        return (palette or _DEFAULT_PALETTE).resolve(spec)
    except (KeyError, ValueError) as exc:
        raise BorderSpecError(f"unknown colour '{spec}'") from exc


def _parse_number(raw: str) -> Optional[float]:
    try:
        return float(raw)
    except ValueError:
        return None


def _format_width(width: float) -> str:
    short = f"{float(width):g}"
    if float(short) == width:
        return short
    return repr(float(width))
