"""Grapheme cluster boundaries and display widths over plain strings.

Char indices count code points; byte indices count UTF-8 bytes.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterator
from itertools import accumulate

import regex
from wcwidth import wcwidth

TAB_WIDTH = 4

_GRAPHEME = regex.compile(r"\X")


def tab_width_at(visual_x: int, tab_width: int) -> int:
    """Width of a tab that starts at visual column ``visual_x``."""
    return tab_width - (visual_x % tab_width)


def grapheme_width(grapheme: str, current_col: int) -> int:
    """Display width of one grapheme placed at column ``current_col``.

    ASCII graphemes are one column wide, except tabs which reach the next
    tab stop. Every other grapheme is at least one column wide.
    """
    if not grapheme:
        raise ValueError("grapheme must not be empty")
    first = grapheme[0]
    if ord(first) <= 127:
        if first == "\t":
            return tab_width_at(current_col, TAB_WIDTH)
        return 1
    width = sum(max(wcwidth(ch), 0) for ch in grapheme)
    return max(width, 1)


def graphemes(text: str) -> Iterator[str]:
    """Yield the extended grapheme clusters of ``text`` in order."""
    for match in _GRAPHEME.finditer(text):
        yield match.group()


def _char_boundaries(text: str) -> list[int]:
    return [0, *accumulate(len(g) for g in graphemes(text))]


def _byte_boundaries(text: str) -> list[int]:
    return [0, *accumulate(len(g.encode("utf-8")) for g in graphemes(text))]


def _check_char_idx(text: str, char_idx: int) -> None:
    if not 0 <= char_idx <= len(text):
        raise IndexError(f"char index {char_idx} out of range for length {len(text)}")


def _check_byte_idx(text: str, byte_idx: int) -> int:
    total = len(text.encode("utf-8"))
    if not 0 <= byte_idx <= total:
        raise IndexError(f"byte index {byte_idx} out of range for length {total}")
    return total


def _nth_next(bounds: list[int], idx: int, n: int, end: int) -> int:
    for _ in range(n):
        pos = bisect_right(bounds, idx)
        if pos >= len(bounds):
            return end
        idx = bounds[pos]
    return idx


def _nth_prev(bounds: list[int], idx: int, n: int) -> int:
    for _ in range(n):
        pos = bisect_left(bounds, idx) - 1
        if pos < 0:
            return 0
        idx = bounds[pos]
    return idx


def nth_prev_grapheme_boundary(text: str, char_idx: int, n: int) -> int:
    """Char index of the ``n``-th grapheme boundary before ``char_idx``."""
    _check_char_idx(text, char_idx)
    return _nth_prev(_char_boundaries(text), char_idx, n)


def prev_grapheme_boundary(text: str, char_idx: int) -> int:
    """Char index of the grapheme boundary before ``char_idx``."""
    return nth_prev_grapheme_boundary(text, char_idx, 1)


def nth_next_grapheme_boundary(text: str, char_idx: int, n: int) -> int:
    """Char index of the ``n``-th grapheme boundary after ``char_idx``."""
    _check_char_idx(text, char_idx)
    return _nth_next(_char_boundaries(text), char_idx, n, len(text))


def next_grapheme_boundary(text: str, char_idx: int) -> int:
    """Char index of the grapheme boundary after ``char_idx``."""
    return nth_next_grapheme_boundary(text, char_idx, 1)


def ensure_grapheme_boundary_next(text: str, char_idx: int) -> int:
    """``char_idx`` if it is a boundary, else the next boundary."""
    if char_idx == 0:
        return char_idx
    _check_char_idx(text, char_idx)
    return next_grapheme_boundary(text, char_idx - 1)


def ensure_grapheme_boundary_prev(text: str, char_idx: int) -> int:
    """``char_idx`` if it is a boundary, else the previous boundary."""
    _check_char_idx(text, char_idx)
    if char_idx == len(text):
        return char_idx
    return prev_grapheme_boundary(text, char_idx + 1)


def is_grapheme_boundary(text: str, char_idx: int) -> bool:
    """Whether char index ``char_idx`` lies on a grapheme boundary."""
    _check_char_idx(text, char_idx)
    bounds = _char_boundaries(text)
    pos = bisect_left(bounds, char_idx)
    return pos < len(bounds) and bounds[pos] == char_idx


def is_grapheme_boundary_byte(text: str, byte_idx: int) -> bool:
    """Whether byte index ``byte_idx`` lies on a grapheme boundary."""
    _check_byte_idx(text, byte_idx)
    bounds = _byte_boundaries(text)
    pos = bisect_left(bounds, byte_idx)
    return pos < len(bounds) and bounds[pos] == byte_idx


def nth_next_grapheme_boundary_byte(text: str, byte_idx: int, n: int) -> int:
    """Byte index of the ``n``-th grapheme boundary after ``byte_idx``."""
    total = _check_byte_idx(text, byte_idx)
    return _nth_next(_byte_boundaries(text), byte_idx, n, total)


def nth_prev_grapheme_boundary_byte(text: str, byte_idx: int, n: int) -> int:
    """Byte index of the ``n``-th grapheme boundary before ``byte_idx``."""
    _check_byte_idx(text, byte_idx)
    return _nth_prev(_byte_boundaries(text), byte_idx, n)


def next_grapheme_boundary_byte(text: str, byte_idx: int) -> int:
    """Byte index of the grapheme boundary after ``byte_idx``."""
    return nth_next_grapheme_boundary_byte(text, byte_idx, 1)


def prev_grapheme_boundary_byte(text: str, byte_idx: int) -> int:
    """Byte index of the grapheme boundary before ``byte_idx``."""
    return nth_prev_grapheme_boundary_byte(text, byte_idx, 1)


def ensure_grapheme_boundary_next_byte(text: str, byte_idx: int) -> int:
    """``byte_idx`` if it is a boundary, else the next boundary in bytes."""
    if byte_idx == 0:
        return byte_idx
    if is_grapheme_boundary_byte(text, byte_idx):
        return byte_idx
    return next_grapheme_boundary_byte(text, byte_idx)