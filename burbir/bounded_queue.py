"""First-in first-out queue of integers with a fixed capacity."""

from __future__ import annotations

from collections import deque

DEFAULT_CAPACITY = 100


class BoundedQueue:
    """A FIFO queue that holds at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """True if the queue holds nothing."""
        return not self._items

    def is_full(self) -> bool:
        """True if the queue holds ``capacity`` values."""
        return len(self._items) == self.capacity

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the tail."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the head value."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def render(self) -> str:
        """The values as "[e1,e2,...,en]" followed by a newline."""
        return "[" + ",".join(str(value) for value in self._items) + "]\n"