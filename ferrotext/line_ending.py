"""Unicode line endings and line-oriented helpers over plain strings."""

from __future__ import annotations

import re
import sys
from enum import Enum
from itertools import islice

_LINE_BREAK = re.compile("\r\n|[\n\x0b\x0c\r\x85\u2028\u2029]")


class LineEnding(Enum):
    """One of the valid Unicode line endings."""

    CRLF = "\r\n"
    LF = "\n"
    VT = "\x0b"
    FF = "\x0c"
    CR = "\r"
    NEL = "\x85"
    LS = "\u2028"
    PS = "\u2029"

    def len_chars(self) -> int:
        """Number of characters the line ending occupies."""
        return 2 if self is LineEnding.CRLF else 1

    def as_str(self) -> str:
        return self.value

    @staticmethod
    def from_char(ch: str) -> LineEnding | None:
        """The single-character line ending ``ch`` is, or None."""
        if len(ch) != 1 or ch == "\r\n":
            return None
        return _BY_TEXT.get(ch)

    @staticmethod
    def from_str(text: str) -> LineEnding | None:
        """The line ending ``text`` is exactly, or None."""
        return _BY_TEXT.get(text)


_BY_TEXT = {ending.value: ending for ending in LineEnding}

DEFAULT_LINE_ENDING = LineEnding.CRLF if sys.platform == "win32" else LineEnding.LF


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines, each keeping its line ending.

    A text ending in a line break (or an empty text) has a final empty line.
    """
    lines = []
    start = 0
    for match in _LINE_BREAK.finditer(text):
        lines.append(text[start:match.end()])
        start = match.end()
    lines.append(text[start:])
    return lines


def _line(text: str, line_idx: int) -> str:
    lines = split_lines(text)
    if not 0 <= line_idx < len(lines):
        raise IndexError(f"line index {line_idx} out of range for {len(lines)} lines")
    return lines[line_idx]


def line_to_char(text: str, line_idx: int) -> int:
    """Char index where line ``line_idx`` starts; one past the last line gives the length."""
    lines = split_lines(text)
    if not 0 <= line_idx <= len(lines):
        raise IndexError(f"line index {line_idx} out of range for {len(lines)} lines")
    if line_idx == len(lines):
        return len(text)
    return sum(len(line) for line in lines[:line_idx])


def str_is_line_ending(text: str) -> bool:
    return LineEnding.from_str(text) is not None


def auto_detect_line_ending(text: str) -> LineEnding | None:
    """Detect the line ending used by ``text`` from its first 100 lines."""
    ignored = {LineEnding.VT, LineEnding.FF, LineEnding.PS}
    for line in islice(split_lines(text), 100):
        ending = get_line_ending(line)
        if ending is not None and ending not in ignored:
            return ending
    return None


def get_line_ending(line: str) -> LineEnding | None:
    """The line ending at the end of ``line``, if any."""
    return LineEnding.from_str(line[-2:]) or LineEnding.from_str(line[-1:])


def get_line_ending_of_str(line: str) -> LineEnding | None:
    """The line ending at the end of ``line``, checked by suffix."""
    for ending in LineEnding:
        if line.endswith(ending.value):
            return ending
    return None


def line_end_char_index(text: str, line_idx: int) -> int:
    """Char index of the end of a line, not counting its line ending."""
    ending = get_line_ending(_line(text, line_idx))
    return line_to_char(text, line_idx + 1) - (ending.len_chars() if ending else 0)


def line_without_line_ending(text: str, line_idx: int) -> str:
    """Line ``line_idx`` of ``text`` without its line ending."""
    start = line_to_char(text, line_idx)
    end = line_end_char_index(text, line_idx)
    return text[start:end]


def rope_end_without_line_ending(text: str) -> int:
    """Char index of the end of ``text``, not counting a final line ending."""
    ending = get_line_ending(text)
    return len(text) - (ending.len_chars() if ending else 0)