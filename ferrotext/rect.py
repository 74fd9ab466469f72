"""Rectangles of terminal cells."""

from __future__ import annotations

from dataclasses import dataclass

_MAX = 0xFFFF


@dataclass(frozen=True)
class Rect:
    """A rectangle of cells with 16-bit unsigned coordinates."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("x", "y", "width", "height"):
            value = getattr(self, name)
            if not 0 <= value <= _MAX:
                raise ValueError(f"{name}={value} outside 0..{_MAX}")

    def left(self) -> int:
        return self.x

    def right(self) -> int:
        return min(self.x + self.width, _MAX)

    def top(self) -> int:
        return self.y

    def bottom(self) -> int:
        return min(self.y + self.height, _MAX)

    def area(self) -> int:
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        return self.left() <= x < self.right() and self.top() <= y < self.bottom()

    def intersects(self, other: Rect) -> bool:
        return (
            self.x < other.right()
            and self.right() > other.x
            and self.y < other.bottom()
            and self.bottom() > other.y
        )

    def clamp_within(self, outer: Rect) -> Rect:
        """The part of this rectangle that lies inside ``outer``."""
        left = max(self.left(), outer.left())
        right = min(self.right(), outer.right())
        top = max(self.top(), outer.top())
        bottom = min(self.bottom(), outer.bottom())
        return Rect(left, top, max(right - left, 0), max(bottom - top, 0))