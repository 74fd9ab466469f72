import pytest

from ferrotext.cell_grid import CURSOR_COLOR, Cell, CellGrid, ScreenBuffer, WindowSize
from ferrotext.rect import Rect
from ferrotext.srgb import srgb_to_linear
from ferrotext.style import CellStyle

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def test_cell_reset_restores_defaults():
    cell = Cell("x", fg=RED, bg=BLUE, reversed=True, slow_blink=True)
    cell.reset()
    assert cell == Cell()
    assert cell.symbol == " "


def test_set_stringn_writes_and_returns_end_column():
    buf = ScreenBuffer(Rect(0, 0, 10, 2))
    end = buf.set_stringn(1, 0, "abc", 10, CellStyle(fg=RED))
    assert end == 1 + len("abc")
    assert buf.row_text(0) == " abc      "
    assert buf.get(2, 0).fg == RED
    assert buf.get(0, 0).fg is None


def test_set_stringn_respects_max_width_and_edge():
    buf = ScreenBuffer(Rect(0, 0, 5, 1))
    buf.set_stringn(0, 0, "abcdef", 2, CellStyle())
    assert buf.row_text(0) == "ab   "
    buf.set_string(3, 0, "xyz", CellStyle())
    assert buf.row_text(0) == "ab xy"


def test_wide_grapheme_takes_two_cells():
    buf = ScreenBuffer(Rect(0, 0, 4, 1))
    buf.set_string(0, 0, "xxxx", CellStyle())
    end = buf.set_string(0, 0, "世", CellStyle())
    assert end == 2
    assert buf.get(0, 0).symbol == "世"
    assert buf.get(1, 0).symbol == " "


def test_control_characters_are_skipped():
    buf = ScreenBuffer(Rect(0, 0, 4, 1))
    buf.set_string(0, 0, "a\nb", CellStyle())
    assert buf.row_text(0) == "ab  "


def test_set_style_is_clipped_to_buffer():
    buf = ScreenBuffer(Rect(0, 0, 3, 3))
    buf.set_style(Rect(1, 1, 10, 10), CellStyle(bg=BLUE))
    assert buf.get(2, 2).bg == BLUE
    assert buf.get(1, 1).bg == BLUE
    assert buf.get(0, 0).bg is None


def test_get_outside_raises():
    buf = ScreenBuffer(Rect(2, 2, 3, 3))
    with pytest.raises(IndexError):
        buf.get(0, 0)
    with pytest.raises(IndexError):
        buf.get(5, 2)


def test_grid_size_fits_surface():
    grid = CellGrid(100.0, 45.0, 7.0, 18.0)
    columns, lines = grid.size()
    assert columns * 7.0 <= 100.0 < (columns + 1) * 7.0
    assert lines * 18.0 <= 45.0 < (lines + 1) * 18.0
    assert len(grid.cells) == lines
    assert all(len(row) == columns for row in grid.cells)


def test_window_size_reports_pixels_and_cells():
    grid = CellGrid(100.0, 45.0, 7.0, 18.0)
    size = grid.window_size()
    assert size == WindowSize(grid.columns, grid.lines, 100, 45)


def test_invalid_cell_size_raises():
    with pytest.raises(ValueError):
        CellGrid(100.0, 100.0, 0.0, 10.0)
    grid = CellGrid(100.0, 100.0, 10.0, 10.0)
    with pytest.raises(ValueError):
        grid.set_cell_size(10.0, -1.0)


def test_draw_stores_copy_and_sets_redraw():
    grid = CellGrid(40.0, 40.0, 10.0, 10.0)
    grid.redraw = False
    cell = Cell("a", fg=RED)
    grid.draw([(1, 2, cell)])
    cell.symbol = "z"
    assert grid.cells[2][1].symbol == "a"
    assert grid.cells[2][1].fg == RED
    assert grid.redraw is True


def test_draw_wide_symbol_blanks_next_cell():
    grid = CellGrid(40.0, 40.0, 10.0, 10.0)
    grid.draw([(1, 0, Cell("q", fg=RED))])
    grid.draw([(0, 0, Cell("世"))])
    assert grid.cells[0][1].symbol == ""
    assert grid.cells[0][1].fg is None


def test_draw_outside_raises():
    grid = CellGrid(40.0, 40.0, 10.0, 10.0)
    with pytest.raises(IndexError):
        grid.draw([(grid.columns, 0, Cell("a"))])


def test_resize_rebuilds_blank_cells():
    grid = CellGrid(40.0, 40.0, 10.0, 10.0)
    grid.draw([(0, 0, Cell("a"))])
    grid.resize(80.0, 20.0)
    columns, lines = grid.size()
    assert columns * 10.0 <= 80.0 < (columns + 1) * 10.0
    assert lines * 10.0 <= 20.0 < (lines + 1) * 10.0
    assert all(cell == Cell() for row in grid.cells for cell in row)


def test_set_cell_size_refits_grid():
    grid = CellGrid(60.0, 60.0, 10.0, 10.0)
    before = grid.size()
    grid.set_cell_size(20.0, 30.0)
    assert grid.size()[0] < before[0]
    assert grid.size()[1] < before[1]


def test_clear_resets_cells():
    grid = CellGrid(30.0, 30.0, 10.0, 10.0)
    grid.draw([(2, 2, Cell("a", bg=BLUE))])
    grid.clear()
    assert grid.cells[2][2] == Cell()


def test_prepare_runs_and_background_quads():
    grid = CellGrid(30.0, 20.0, 10.0, 10.0)
    grid.draw([(0, 0, Cell("h", fg=RED)), (1, 0, Cell("i"))])
    lines = grid.prepare((1, 2, 3), (4, 5, 6))
    assert len(lines) == grid.lines
    assert "".join(symbol for symbol, _ in lines[0]) == "hi "
    assert lines[0][0][1] == RED
    assert lines[0][1][1] == (1, 2, 3)
    assert len(grid.background.vertices) == 4 * grid.columns * grid.lines
    assert grid.background.num_indices == 6 * grid.columns * grid.lines
    assert grid.overlay.vertices == []


def test_prepare_reversed_swaps_colors():
    grid = CellGrid(10.0, 10.0, 10.0, 10.0)
    grid.draw([(0, 0, Cell("a", fg=RED, bg=BLUE, reversed=True))])
    lines = grid.prepare()
    assert lines[0][0][1] == BLUE
    vertex = grid.background.vertices[0]
    assert vertex.r == pytest.approx(srgb_to_linear(1.0))
    assert vertex.b == pytest.approx(0.0)


def test_prepare_slow_blink_adds_cursor_bar():
    grid = CellGrid(20.0, 10.0, 10.0, 10.0)
    grid.draw([(1, 0, Cell("a", slow_blink=True))])
    grid.prepare()
    assert len(grid.overlay.vertices) == 4
    first = grid.overlay.vertices[0]
    assert first.x == pytest.approx(grid.cell_width)
    assert first.r == pytest.approx(srgb_to_linear(CURSOR_COLOR[0] / 255.0))
    assert first.b == pytest.approx(srgb_to_linear(CURSOR_COLOR[2] / 255.0))


def test_prepare_is_repeatable():
    grid = CellGrid(20.0, 20.0, 10.0, 10.0)
    grid.prepare()
    count = len(grid.background.vertices)
    grid.prepare()
    assert len(grid.background.vertices) == count