"""Classification of single characters."""

from __future__ import annotations

import unicodedata
from enum import Enum

from .line_ending import LineEnding


class CharCategory(Enum):
    WHITESPACE = "whitespace"
    EOL = "eol"
    WORD = "word"
    PUNCTUATION = "punctuation"
    UNKNOWN = "unknown"


# Characters carrying the Unicode White_Space property.
_UNICODE_WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680\u2028\u2029\u202f\u205f\u3000"
    + "".join(chr(cp) for cp in range(0x2000, 0x200B))
)

_EDITOR_WHITESPACE = frozenset(
    "\t \xa0\u180e\u202f\u205f\u3000\ufeff"
    + "".join(chr(cp) for cp in range(0x2000, 0x200C))
)

_PUNCTUATION_CATEGORIES = frozenset(
    {"Po", "Ps", "Pe", "Pi", "Pf", "Pc", "Pd", "Sm", "Sc", "Sk"}
)


def categorize_char(ch: str) -> CharCategory:
    if char_is_line_ending(ch):
        return CharCategory.EOL
    if ch in _UNICODE_WHITESPACE:
        return CharCategory.WHITESPACE
    if char_is_word(ch):
        return CharCategory.WORD
    if char_is_punctuation(ch):
        return CharCategory.PUNCTUATION
    return CharCategory.UNKNOWN


def char_is_line_ending(ch: str) -> bool:
    """Whether ``ch`` is a line ending."""
    return LineEnding.from_char(ch) is not None


def char_is_whitespace(ch: str) -> bool:
    """Whether ``ch`` is non-line-break whitespace."""
    return ch in _EDITOR_WHITESPACE


def char_is_punctuation(ch: str) -> bool:
    return unicodedata.category(ch) in _PUNCTUATION_CATEGORIES


def char_is_word(ch: str) -> bool:
    return ch == "_" or unicodedata.category(ch)[0] in ("L", "N")