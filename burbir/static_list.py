"""Integer list with a fixed capacity, kept contiguous from the front."""

from __future__ import annotations

from typing import Iterable, Optional, Union

CAPACITY = 10


class StaticList:
    """At most CAPACITY integers in order."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        items = [int(value) for value in values]
        if len(items) > CAPACITY:
            raise OverflowError(f"at most {CAPACITY} values fit, got {len(items)}")
        self._items = items

    @classmethod
    def read(cls, tokens: Iterable[Union[int, str]]) -> "StaticList":
        """Read a count (repeated until 0..CAPACITY) and then that many values."""
        numbers = (int(token) for token in tokens)
        try:
            count = next(numbers)
            while not 0 <= count <= CAPACITY:
                count = next(numbers)
            return cls([next(numbers) for _ in range(count)])
        except StopIteration:
            raise ValueError("input ended before the list was complete") from None

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> int:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StaticList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"StaticList({self._items!r})"

    def is_empty(self) -> bool:
        """True if the list holds nothing."""
        return not self._items

    def is_full(self) -> bool:
        """True if the list holds CAPACITY values."""
        return len(self._items) == CAPACITY

    def is_index_valid(self, index: int) -> bool:
        """True if ``index`` lies within the capacity."""
        return 0 <= index < CAPACITY

    def is_index_effective(self, index: int) -> bool:
        """True if ``index`` points at a stored value."""
        return 0 <= index < len(self._items)

    def plus_minus(self, other: "StaticList", plus: bool) -> "StaticList":
        """Element-wise sum (``plus``) or difference of two lists of equal length."""
        if len(self) != len(other):
            raise ValueError("lists must have the same length")
        if plus:
            return StaticList(a + b for a, b in zip(self._items, other._items))
        return StaticList(a - b for a, b in zip(self._items, other._items))

    def index_of(self, value: int) -> Optional[int]:
        """Smallest index holding ``value``, or None."""
        try:
            return self._items.index(value)
        except ValueError:
            return None

    def extremes(self) -> tuple[int, int]:
        """(largest, smallest) value."""
        if not self._items:
            raise ValueError("extremes of an empty list")
        return max(self._items), min(self._items)

    def insert_first(self, value: int) -> None:
        """Put ``value`` at the front."""
        self.insert_at(value, 0)

    def insert_at(self, value: int, index: int) -> None:
        """Put ``value`` at ``index``, shifting later values back."""
        if self.is_full():
            raise OverflowError("list is full")
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert index {index} outside 0..{len(self._items)}")
        self._items.insert(index, value)

    def insert_last(self, value: int) -> None:
        """Put ``value`` at the end."""
        self.insert_at(value, len(self._items))

    def delete_first(self) -> int:
        """Remove and return the first value."""
        return self.delete_at(0)

    def delete_at(self, index: int) -> int:
        """Remove and return the value at ``index``."""
        if not self.is_index_effective(index):
            raise IndexError(f"delete index {index} outside the list")
        return self._items.pop(index)

    def delete_last(self) -> int:
        """Remove and return the last value."""
        return self.delete_at(len(self._items) - 1)

    def sort(self, ascending: bool = True) -> None:
        """Sort in place, ascending or descending."""
        self._items.sort(reverse=not ascending)

    def render(self) -> str:
        """The values as "[e1,e2,...,en]"."""
        return "[" + ",".join(str(value) for value in self._items) + "]"