"""Display columns, whitespace and line positions measured over plain strings.

Char indices count code points; byte indices count UTF-8 bytes.
"""

from __future__ import annotations

import unicodedata
from bisect import bisect_right
from itertools import accumulate

from .chars import CharCategory, categorize_char
from .graphemes import grapheme_width, graphemes
from .line_ending import line_to_char, line_without_line_ending, split_lines
from .point import Point

_WORD_CATEGORIES = frozenset({"Pc", "Lu", "Lt", "Ll", "Mn", "Nd", "Nl", "Lo"})
_WHITESPACE_CATEGORIES = frozenset({CharCategory.WHITESPACE, CharCategory.EOL})


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _line(text: str, line_idx: int) -> str:
    lines = split_lines(text)
    if not 0 <= line_idx < len(lines):
        raise IndexError(f"line index {line_idx} out of range for {len(lines)} lines")
    return lines[line_idx]


def text_width(text: str, current_col: int = 0) -> int:
    """Display width of ``text`` when it starts at column ``current_col``."""
    width = 0
    for grapheme in graphemes(text):
        width += grapheme_width(grapheme, current_col + width)
    return width


def last_n_columns(text: str, n: int) -> str:
    """The tail of ``text`` that fits in its last ``n`` display columns."""
    left = max(text_width(text, 0) - n, 0)
    width = 0
    start = 0
    for grapheme in graphemes(text):
        if width >= left:
            break
        width += text_width(grapheme, width)
        start += len(grapheme)
    return text[start:]


def is_whitespace(text: str) -> bool:
    """Whether every character of ``text`` is Unicode whitespace."""
    return all(categorize_char(ch) in _WHITESPACE_CATEGORIES for ch in text)


def is_word_text(text: str) -> bool:
    """Whether every character of ``text`` belongs to a word."""
    return all(unicodedata.category(ch) in _WORD_CATEGORIES for ch in text)


def end_of_line_byte(text: str, line_idx: int) -> int:
    """Byte index just past line ``line_idx``, line ending included."""
    line = _line(text, line_idx)
    start = _utf8_len(text[: line_to_char(text, line_idx)])
    return start + _utf8_len(line)


def end_of_line_char(text: str, line_idx: int) -> int:
    """Char index just past line ``line_idx``, line ending included."""
    line = _line(text, line_idx)
    return line_to_char(text, line_idx) + len(line)


def starts_with_char(text: str, ch: str) -> bool:
    """Whether the first character of ``text`` is ``ch``."""
    return bool(text) and text[0] == ch


def get_text_start_col(text: str, line_idx: int) -> int:
    """Display column where the text of a line starts after its indentation."""
    width = 0
    for grapheme in graphemes(line_without_line_ending(text, line_idx)):
        if not is_whitespace(grapheme):
            break
        width += text_width(grapheme, width)
    return width


def get_text_start_byte(text: str, line_idx: int) -> int:
    """Byte length of a line's leading whitespace."""
    length = 0
    for grapheme in graphemes(line_without_line_ending(text, line_idx)):
        if not is_whitespace(grapheme):
            break
        length += _utf8_len(grapheme)
    return length


def get_text_end_col(text: str, line_idx: int) -> int:
    """Display column just past the last non-whitespace grapheme of a line."""
    width = 0
    text_end = 0
    for grapheme in graphemes(line_without_line_ending(text, line_idx)):
        width += text_width(grapheme, width)
        if not is_whitespace(grapheme):
            text_end = width
    return text_end


def byte_to_col(text: str, byte_idx: int) -> int:
    """Display column of the grapheme that holds byte ``byte_idx``."""
    consumed = 0
    width = 0
    for grapheme in graphemes(text):
        if consumed >= byte_idx:
            break
        width += text_width(grapheme, width)
        consumed += _utf8_len(grapheme)
    return width


def byte_to_point(text: str, byte_idx: int) -> Point:
    """Line and display column of byte ``byte_idx``."""
    total = _utf8_len(text)
    if not 0 <= byte_idx <= total:
        raise IndexError(f"byte index {byte_idx} out of range for length {total}")
    lines = split_lines(text)
    starts = [0, *accumulate(_utf8_len(line) for line in lines)][:-1]
    line_idx = bisect_right(starts, byte_idx) - 1
    column = byte_to_col(lines[line_idx], byte_idx - starts[line_idx])
    return Point(line=line_idx, column=column)


def trim_start_whitespace(text: str) -> str:
    """``text`` without its leading whitespace graphemes."""
    start = 0
    for grapheme in graphemes(text):
        if not is_whitespace(grapheme):
            break
        start += len(grapheme)
    return text[start:]