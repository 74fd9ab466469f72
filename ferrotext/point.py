"""A position in text, ordered by line and then column."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Point:
    # Field order matters: comparison is by line first.
    line: int = 0
    column: int = 0

    @classmethod
    def at(cls, column: int, line: int) -> Point:
        """Build a point from a column and a line."""
        return cls(line=line, column=column)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.line + other.line, self.column + other.column)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.line - other.line, self.column - other.column)