"""Conversion of theme styles and pane rectangles to cell terms."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .rect import Rect

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class ThemeColor:
    """A theme colour with channels in [0, 1]."""

    r: float
    g: float
    b: float


@dataclass(frozen=True)
class ThemeStyle:
    fg: ThemeColor | None = None
    bg: ThemeColor | None = None


@dataclass(frozen=True)
class CellStyle:
    """Foreground and background of a cell as 8-bit RGB triples."""

    fg: RGB | None = None
    bg: RGB | None = None


def _channel(value: float) -> int:
    scaled = value * 255.0
    if math.isnan(scaled):
        return 0
    return int(min(max(scaled, 0.0), 255.0))


def color_to_rgb(color: ThemeColor) -> RGB:
    """8-bit RGB of ``color``; channels are truncated and saturated."""
    return (_channel(color.r), _channel(color.g), _channel(color.b))


def _optional_rgb(color: ThemeColor | None) -> RGB | None:
    return None if color is None else color_to_rgb(color)


def convert_style(style: ThemeStyle) -> CellStyle:
    return CellStyle(fg=_optional_rgb(style.fg), bg=_optional_rgb(style.bg))


def convert_style_colors(style: ThemeStyle) -> tuple[RGB | None, RGB | None]:
    """The foreground and background of ``style`` as a pair."""
    return (_optional_rgb(style.fg), _optional_rgb(style.bg))


def to_cell_rect(rect) -> Rect:
    """Convert a pane rectangle (attributes or a 4-sequence) to a cell Rect.

    Raises ValueError if a coordinate does not fit in 16 bits.
    """
    if hasattr(rect, "x"):
        x, y, width, height = rect.x, rect.y, rect.width, rect.height
    else:
        x, y, width, height = rect
    return Rect(int(x), int(y), int(width), int(height))


def from_cell_rect(rect: Rect) -> tuple[int, int, int, int]:
    """The ``(x, y, width, height)`` of a cell Rect."""
    return (rect.x, rect.y, rect.width, rect.height)