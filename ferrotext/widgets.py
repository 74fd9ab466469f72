"""Simple widgets drawn into a ScreenBuffer."""

from __future__ import annotations

from collections.abc import Sequence

from .cell_grid import ScreenBuffer, _symbol_width
from .line_ending import split_lines
from .rect import Rect
from .style import CellStyle
from .text_metrics import text_width

SPLASH = r"""
╭────────────────────────────────────╮
│     ______               _ __      │
│    / ____/__  __________(_) /____  │
│   / /_  / _ \/ ___/ ___/ / __/ _ \ │
│  / __/ /  __/ /  / /  / / /_/  __/ │
│ /_/    \___/_/  /_/  /_/\__/\___/  │
│                                    │
│      Command palette CTRL + P      │
│       Browse files CTRL + O        │
│           Quit CTRL + Q            │
╰────────────────────────────────────╯
"""

_COMPLETER_PADDING = 8
_COMPLETER_MAX_ROWS = 10


def _clear(buf: ScreenBuffer, area: Rect) -> None:
    inner = area.clamp_within(buf.area)
    for y in range(inner.top(), inner.bottom()):
        for x in range(inner.left(), inner.right()):
            buf.get(x, y).reset()


def render_background(buf: ScreenBuffer, style: CellStyle) -> None:
    """Blank every cell of ``buf`` and give it ``style``."""
    buf.set_style(buf.area, style)
    for cell in buf.content:
        cell.symbol = " "


def render_splash(buf: ScreenBuffer, area: Rect, style: CellStyle) -> None:
    """Draw the splash banner centred in ``area`` if it is wide enough."""
    lines = SPLASH.splitlines()
    width = max((_symbol_width(line) for line in lines), default=0)
    left = max(area.width - width, 0) // 2
    top = max(area.height - len(lines), 0) // 2
    if area.width < width:
        return
    for i, line in enumerate(lines):
        buf.set_string(area.left() + left, area.top() + top + i, line, style)


def render_centered_text(
    buf: ScreenBuffer, area: Rect, text: str, style: CellStyle
) -> None:
    """Draw ``text`` centred in ``area``."""
    if area.area() == 0:
        return
    lines = split_lines(text)
    top_padding = max(area.height // 2 - (len(lines) & 0xFFFF) // 2, 0)
    width = text_width(text, 0)
    left_padding = max(area.width // 2 - (width & 0xFFFF) // 2, 0)
    for i, y in enumerate(range(area.y + top_padding, area.y + area.height)):
        if i >= len(lines):
            break
        buf.set_stringn(
            area.x + left_padding, y, lines[i], area.width - left_padding, style
        )


def completer_layout(
    area: Rect, options: Sequence[str]
) -> tuple[int, int, int] | None:
    """``(column_width, columns, rows)`` for completion options, or None if there are none."""
    if not options:
        return None
    widest = max(_symbol_width(option) for option in options) + _COMPLETER_PADDING
    columns = max(area.width // widest, 1)
    rows = min(max(min(len(options) // columns, _COMPLETER_MAX_ROWS), 1), area.height)
    return widest, columns, rows


def render_completer(
    buf: ScreenBuffer,
    area: Rect,
    options: Sequence[str],
    current: int | None,
    style: CellStyle,
    selected_style: CellStyle,
) -> None:
    """Draw completion options in columns at the bottom of ``area``.

    Options fill each column top to bottom; the option at ``current`` is
    drawn with ``selected_style``.
    """
    layout = completer_layout(area, options)
    if layout is None:
        return
    widest, columns, rows = layout
    completer_area = Rect(area.x, area.bottom() - rows, area.width, rows)
    _clear(buf, completer_area)
    buf.set_style(completer_area, style)

    for row in range(rows):
        for col in range(columns):
            index = col * rows + row
            if index >= len(options):
                break
            y = area.bottom() - rows + row
            x = area.left() + widest * col
            option_style = selected_style if index == current else style
            buf.set_stringn(x, y, options[index], widest, option_style)