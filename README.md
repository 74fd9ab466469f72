# ferrotext

Building blocks for a text editor that draws into a grid of character cells.
The package covers the fiddly parts of handling Unicode text and laying it
out on screen. All text functions work on plain Python strings. Char indices
count code points and byte indices count UTF-8 bytes.

## Modules

- `ferrotext.line_ending`: the `LineEnding` enum (`CRLF`, `LF`, `VT`, `FF`,
  `CR`, `NEL`, `LS`, `PS`) and line helpers: `split_lines`, `line_to_char`,
  `get_line_ending`, `get_line_ending_of_str`, `auto_detect_line_ending`,
  `line_end_char_index`, `line_without_line_ending`,
  `rope_end_without_line_ending`.
- `ferrotext.chars`: `categorize_char` returns a `CharCategory` (`WORD`,
  `WHITESPACE`, `EOL`, `PUNCTUATION`, `UNKNOWN`). Also provides
  `char_is_word`, `char_is_whitespace`, `char_is_punctuation` and
  `char_is_line_ending`.
- `ferrotext.graphemes`: `graphemes` iterates over grapheme clusters. There are
  next/previous/nth boundary functions by char or byte index,
  `is_grapheme_boundary`, and the `ensure_grapheme_boundary_*` functions.
  `grapheme_width` measures width with tab stops every `TAB_WIDTH` (4)
  columns.
- `ferrotext.text_metrics`: `text_width`, `last_n_columns`, `is_whitespace`,
  `is_word_text`, `end_of_line_byte` / `end_of_line_char`,
  `get_text_start_col`, `get_text_start_byte`, `get_text_end_col`,
  `byte_to_col`, `byte_to_point` and `trim_start_whitespace`.
- `ferrotext.point`: `Point(line, column)`, ordered by line and then column.
  It supports `+` and `-`, and `Point.at(column, line)` builds one.
- `ferrotext.rect`: `Rect` with 16-bit coordinates. It has `left`, `right`,
  `top`, `bottom`, `area`, `contains`, `intersects` and `clamp_within`.
- `ferrotext.vec1`: `Vec1`, a list that always holds at least one element.
- `ferrotext.trim`: `trim_path` strips a prefix, such as a home directory,
  from a path.
- `ferrotext.keys`: the `KeyCode`, `KeyKind`, `MediaKeyCode`,
  `ModifierKeyCode` and `KeyModifiers` types. `convert_keycode` and
  `convert_modifier` convert terminal key codes and modifier bit masks into
  these types.
- `ferrotext.gui_keys`: `convert_named_key` maps windowing-system key names
  (`"ArrowLeft"`, `"Escape"`, `"F1"` … `"F24"`) to a `KeyCode`. Tab with
  SHIFT held becomes BackTab.
- `ferrotext.style`: `ThemeColor` / `ThemeStyle` use float channels.
  `convert_style` turns a theme style into a `CellStyle` with 8-bit RGB
  values. Also provides `to_cell_rect` and `from_cell_rect`.
- `ferrotext.srgb`: `srgb_to_linear` converts one sRGB channel.
- `ferrotext.event_loop`: `TuiEventLoop` runs a handler for each of these
  events in turn: `StartOfEvents`, every pending `InputEvent`, every pending
  `AppEvent`, then `Render`. The handler returns a `ControlFlow`: `poll()`,
  `wait()`, `wait_max(seconds)` or `exit()`. Input comes from a `read_input`
  callable, which runs on a background thread. `TuiEventLoopProxy` and
  `CallbackProxy` let other code send events and request renders.
- `ferrotext.quads`: `QuadBatch` collects coloured `Quad`s. Its `prepare()`
  packs the projection matrix, vertices (linear-light RGBA) and indices as
  little-endian bytes.
- `ferrotext.cell_grid`: `Cell`, and `ScreenBuffer`, a cell buffer with
  `set_string`, `set_stringn`, `set_style` and `row_text`. `CellGrid` sizes a
  grid of cells to a pixel surface. Its `prepare()` fills background and
  cursor quad batches and returns the text runs of each line.
- `ferrotext.widgets`: functions that draw into a `ScreenBuffer`:
  `render_background`, `render_splash`, `render_centered_text` and
  `render_completer` (with `completer_layout`).
- `ferrotext.alloc_stats`: `AllocationTracker` is a thread-safe tally of
  allocations, bytes in use and allocations per phase.

## Installation

```
pip install ferrotext
```

## Examples

```python
from ferrotext.line_ending import LineEnding, auto_detect_line_ending
from ferrotext.graphemes import grapheme_width, next_grapheme_boundary
from ferrotext.vec1 import Vec1

auto_detect_line_ending("one\r\ntwo\r\n")    # LineEnding.CRLF
grapheme_width("\t", 1)                      # 3: the tab runs to the next stop at column 4
next_grapheme_boundary("e\u0301x", 0)        # 2: the accent belongs to the "e"

stack = Vec1(1)
stack.append(2)
stack.pop()                                  # 2
stack.pop()                                  # None: the first element always stays
```

```python
from ferrotext.keys import KeyModifiers, convert_keycode, convert_modifier
from ferrotext.gui_keys import convert_named_key

str(convert_keycode(("F", 5)))                    # "F5"
convert_modifier(0b11)                            # KeyModifiers.SHIFT | KeyModifiers.CONTROL
convert_named_key("Tab", KeyModifiers.SHIFT)      # KeyCode(kind=KeyKind.BACK_TAB, value=None)
```

```python
from ferrotext.cell_grid import ScreenBuffer
from ferrotext.rect import Rect
from ferrotext.style import CellStyle
from ferrotext.widgets import render_centered_text

Rect(0, 0, 10, 10).clamp_within(Rect(5, 5, 10, 10))   # Rect(x=5, y=5, width=5, height=5)

buf = ScreenBuffer(Rect(0, 0, 20, 3))
render_centered_text(buf, buf.area, "hi", CellStyle(fg=(255, 255, 255)))
buf.row_text(1).strip()                               # "hi"
```

## What it does not do

This is a library, not an editor. It has no command to run and opens no
window or terminal. It also has no text buffers, no editing commands, no key
bindings and no theme files. `QuadBatch` and `CellGrid` produce data ready
for drawing, but nothing in the package draws it on a GPU or shapes glyphs
with fonts.

## Running the tests

From a checkout of the source:

```
pip install -e ".[test]"
pytest
```