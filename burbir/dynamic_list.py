"""Integer list with a capacity that can grow and shrink, kept contiguous from the front."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union


class DynamicList:
    """Integers in order, at most ``capacity`` of them until the capacity is changed."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[int] = []

    @classmethod
    def _from_values(cls, values: Iterable[int], capacity: int) -> "DynamicList":
        result = cls(capacity)
        result._items = list(values)
        return result

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> int:
        if not self.is_index_effective(index):
            raise IndexError(f"index {index} outside the list")
        return self._items[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"DynamicList({self._items!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        """True if the list holds nothing."""
        return not self._items

    def is_full(self) -> bool:
        """True if the list holds ``capacity`` values."""
        return len(self._items) == self.capacity

    def is_index_valid(self, index: int) -> bool:
        """True if ``index`` lies within the capacity."""
        return 0 <= index < self.capacity

    def is_index_effective(self, index: int) -> bool:
        """True if ``index`` points at a stored value."""
        return 0 <= index < len(self._items)

    def read(self, tokens: Iterable[Union[int, str]]) -> None:
        """Replace the contents: a count (repeated until 0..capacity), then that many values."""
        numbers = (int(token) for token in tokens)
        try:
            count = next(numbers)
            while not 0 <= count <= self.capacity:
                count = next(numbers)
            self._items = [next(numbers) for _ in range(count)]
        except StopIteration:
            raise ValueError("input ended before the list was complete") from None

    def render(self) -> str:
        """The values as "[e1,e2,...,en]"."""
        return "[" + ",".join(str(value) for value in self._items) + "]"

    def plus_minus(self, other: "DynamicList", plus: bool) -> "DynamicList":
        """Element-wise sum (``plus``) or difference of two lists of equal length."""
        if len(self) != len(other):
            raise ValueError("lists must have the same length")
        if plus:
            values = (a + b for a, b in zip(self._items, other._items))
        else:
            values = (a - b for a, b in zip(self._items, other._items))
        return DynamicList._from_values(values, self.capacity)

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

    def copy(self) -> "DynamicList":
        """An independent list with the same values and capacity."""
        return DynamicList._from_values(self._items, self.capacity)

    def total(self) -> int:
        """Sum of the values; 0 for an empty list."""
        return sum(self._items)

    def count(self, value: int) -> int:
        """How many times ``value`` occurs."""
        return self._items.count(value)

    def sort(self, ascending: bool = True) -> None:
        """Sort in place, ascending or descending."""
        self._items.sort(reverse=not ascending)

    def insert_last(self, value: int) -> None:
        """Put ``value`` at the end."""
        if self.is_full():
            raise OverflowError("list is full")
        self._items.append(value)

    def delete_last(self) -> int:
        """Remove and return the last value."""
        if not self._items:
            raise IndexError("delete from an empty list")
        return self._items.pop()

    def expand(self, amount: int) -> None:
        """Raise the capacity by ``amount``."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        self.capacity += amount

    def shrink(self, amount: int) -> None:
        """Lower the capacity by ``amount``; the stored values must still fit."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        new_capacity = self.capacity - amount
        if new_capacity <= 0 or new_capacity < len(self._items):
            raise ValueError(
                f"cannot shrink capacity {self.capacity} by {amount} "
                f"while holding {len(self._items)} values"
            )
        self.capacity = new_capacity

    def compress(self) -> None:
        """Make the capacity equal to the number of stored values."""
        if not self._items:
            raise ValueError("cannot compress an empty list")
        self.capacity = len(self._items)