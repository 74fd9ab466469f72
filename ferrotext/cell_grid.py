"""A grid of terminal cells laid out on a pixel surface, plus a plain cell buffer."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, replace

from wcwidth import wcwidth

from .graphemes import graphemes
from .quads import Quad, QuadBatch
from .rect import Rect
from .style import RGB, CellStyle

CURSOR_COLOR: RGB = (82, 139, 255)
CURSOR_WIDTH = 2.0
DEFAULT_FG: RGB = (0, 0, 0)
DEFAULT_BG: RGB = (255, 255, 255)

_U16_MAX = 0xFFFF


def _symbol_width(symbol: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in symbol)


def _saturate_u16(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), float(_U16_MAX)))


@dataclass
class Cell:
    """One terminal cell: a symbol, optional colours and display modifiers."""

    symbol: str = " "
    fg: RGB | None = None
    bg: RGB | None = None
    reversed: bool = False
    slow_blink: bool = False

    def reset(self) -> None:
        self.symbol = " "
        self.fg = None
        self.bg = None
        self.reversed = False
        self.slow_blink = False


def _patch(cell: Cell, style: CellStyle) -> None:
    if style.fg is not None:
        cell.fg = style.fg
    if style.bg is not None:
        cell.bg = style.bg


@dataclass(frozen=True)
class WindowSize:
    columns: int
    rows: int
    pixel_width: int
    pixel_height: int


class ScreenBuffer:
    """Cells covering a rectangular area, addressed by absolute coordinates."""

    def __init__(self, area: Rect) -> None:
        self.area = area
        self.content: list[Cell] = [Cell() for _ in range(area.area())]

    def _index(self, x: int, y: int) -> int:
        if not self.area.contains(x, y):
            raise IndexError(f"position ({x}, {y}) outside {self.area}")
        return (y - self.area.y) * self.area.width + (x - self.area.x)

    def get(self, x: int, y: int) -> Cell:
        return self.content[self._index(x, y)]

    def set_string(self, x: int, y: int, text: str, style: CellStyle) -> int:
        """Write ``text`` from (x, y) up to the right edge; returns the end column."""
        return self.set_stringn(x, y, text, _U16_MAX, style)

    def set_stringn(
        self, x: int, y: int, text: str, max_width: int, style: CellStyle
    ) -> int:
        """Write at most ``max_width`` columns of ``text``; returns the end column.

        Graphemes holding control characters and zero-width graphemes are skipped.
        """
        remaining = min(max_width, max(self.area.right() - x, 0))
        for grapheme in graphemes(text):
            if any(ch.isprintable() is False and wcwidth(ch) < 0 for ch in grapheme):
                continue
            width = _symbol_width(grapheme)
            if width == 0:
                continue
            if width > remaining:
                break
            cell = self.get(x, y)
            cell.symbol = grapheme
            _patch(cell, style)
            for offset in range(1, width):
                self.get(x + offset, y).reset()
            x += width
            remaining -= width
        return x

    def set_style(self, area: Rect, style: CellStyle) -> None:
        """Apply the colours of ``style`` to every cell of ``area`` inside the buffer."""
        inner = area.clamp_within(self.area)
        for y in range(inner.top(), inner.bottom()):
            for x in range(inner.left(), inner.right()):
                _patch(self.get(x, y), style)

    def row_text(self, y: int) -> str:
        """The symbols of row ``y`` joined together."""
        return "".join(
            self.get(x, y).symbol for x in range(self.area.left(), self.area.right())
        )


class CellGrid:
    """Cells sized to fit a pixel surface, turned into coloured quads and text runs."""

    def __init__(
        self, width: float, height: float, cell_width: float, cell_height: float
    ) -> None:
        self._check_cell_size(cell_width, cell_height)
        self.width = float(width)
        self.height = float(height)
        self.cell_width = float(cell_width)
        self.cell_height = float(cell_height)
        self.background = QuadBatch(width, height)
        self.overlay = QuadBatch(width, height)
        self.redraw = True
        self.columns = 0
        self.lines = 0
        self.cells: list[list[Cell]] = []
        self._rebuild()

    @staticmethod
    def _check_cell_size(cell_width: float, cell_height: float) -> None:
        if not (cell_width > 0 and cell_height > 0):
            raise ValueError("cell width and height must be positive")

    def _rebuild(self) -> None:
        self.columns = _saturate_u16(self.width / self.cell_width)
        self.lines = _saturate_u16(self.height / self.cell_height)
        self.cells = [[Cell() for _ in range(self.columns)] for _ in range(self.lines)]

    def resize(self, width: float, height: float) -> None:
        """Fit the grid to a new surface size; all cells start blank."""
        self.background.resize(width, height)
        self.overlay.resize(width, height)
        self.width = float(width)
        self.height = float(height)
        self._rebuild()
        self.clear()

    def set_cell_size(self, cell_width: float, cell_height: float) -> None:
        """Change the cell size and refit the grid."""
        self._check_cell_size(cell_width, cell_height)
        self.cell_width = float(cell_width)
        self.cell_height = float(cell_height)
        self.resize(self.width, self.height)

    def draw(self, content: Iterable[tuple[int, int, Cell]]) -> None:
        """Store ``(column, line, cell)`` updates; a wide symbol blanks the next cell."""
        for column, line, cell in content:
            if not (0 <= line < self.lines and 0 <= column < self.columns):
                raise IndexError(f"cell ({column}, {line}) outside the grid")
            row = self.cells[line]
            row[column] = replace(cell)
            if _symbol_width(cell.symbol) > 1 and column + 1 < len(row):
                following = row[column + 1]
                following.reset()
                following.symbol = ""
            self.redraw = True

    def clear(self) -> None:
        for row in self.cells:
            for cell in row:
                cell.reset()

    def window_size(self) -> WindowSize:
        return WindowSize(
            self.columns,
            self.lines,
            _saturate_u16(self.width),
            _saturate_u16(self.height),
        )

    def size(self) -> tuple[int, int]:
        """``(columns, lines)`` of the grid."""
        return (self.columns, self.lines)

    def prepare(
        self, default_fg: RGB = DEFAULT_FG, default_bg: RGB = DEFAULT_BG
    ) -> list[list[tuple[str, RGB]]]:
        """Fill the quad batches and return each line as ``(symbol, fg)`` runs.

        Every cell gets a background quad; blinking cells also get a thin
        cursor bar in the overlay batch.
        """
        self.background.clear()
        self.overlay.clear()
        lines: list[list[tuple[str, RGB]]] = []
        for line_idx, row in enumerate(self.cells):
            runs: list[tuple[str, RGB]] = []
            y = line_idx * self.cell_height
            for col_idx, cell in enumerate(row):
                fg = cell.fg if cell.fg is not None else default_fg
                bg = cell.bg if cell.bg is not None else default_bg
                if cell.reversed:
                    fg, bg = bg, fg
                symbol_width = _symbol_width(cell.symbol)
                runs.append((cell.symbol, fg))
                x = col_idx * self.cell_width
                self.background.push_quad(
                    Quad(
                        x,
                        y,
                        self.cell_width * symbol_width,
                        self.cell_height * symbol_width,
                    ),
                    bg,
                )
                if cell.slow_blink:
                    self.overlay.push_quad(
                        Quad(x, y, CURSOR_WIDTH, self.cell_height), CURSOR_COLOR
                    )
            lines.append(runs)
        self.background.prepare()
        self.overlay.prepare()
        return lines