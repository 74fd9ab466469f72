"""A list that always holds at least one element."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Vec1(Generic[T]):
    """A non-empty list; operations never remove the first element."""

    __slots__ = ("_items",)

    def __init__(self, first: T) -> None:
        self._items: list[T] = [first]

    @classmethod
    def from_list(cls, items: Iterable[T]) -> Vec1[T]:
        """Build from ``items``; raises ValueError if there are none."""
        values = list(items)
        if not values:
            raise ValueError("Vec1 requires at least one element")
        vec = cls.__new__(cls)
        vec._items = values
        return vec

    @classmethod
    def from_list_or_default(cls, items: Iterable[T], default: T) -> Vec1[T]:
        """Build from ``items``, or hold only ``default`` if there are none."""
        values = list(items)
        return cls.from_list(values) if values else cls(default)

    def clear(self) -> None:
        """Remove every element but the first."""
        self._items = self._items[:1]

    def append(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T | None:
        """Remove and return the last element, or None if only one is left."""
        if len(self._items) == 1:
            return None
        return self._items.pop()

    def first(self) -> T:
        return self._items[0]

    def end(self) -> T:
        return self._items[-1]

    def remove(self, index: int) -> T | None:
        """Remove the element at ``index``; the first one and missing ones give None."""
        if index == 0 or not 0 <= index < len(self._items):
            return None
        return self._items.pop(index)

    def replace_with(self, items: Iterable[T]) -> None:
        """Replace all elements with ``items`` unless ``items`` is empty."""
        values = list(items)
        if values:
            self._items = values

    def to_list(self) -> list[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            values = list(value)
            if len(values) != len(self._items[index]):
                raise ValueError("slice assignment must not change the length")
            self._items[index] = values
        else:
            self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec1):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return repr(self._items)