"""Friend requests ordered by the requester's friend count."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class FriendRequest:
    """A request from ``name``, who has ``friend_count`` friends."""

    friend_count: int
    name: str


def _render_entry(request: FriendRequest) -> str:
    return f"\n| {request.name}\n| Jumlah teman: {request.friend_count}\n"


class FriendRequestQueue:
    """Bounded priority queue: more friends first, equal counts in arrival order."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[FriendRequest] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[FriendRequest]:
        return iter(self._items)

    def is_empty(self) -> bool:
        """True if there are no requests."""
        return not self._items

    def is_full(self) -> bool:
        """True if the queue holds ``capacity`` requests."""
        return len(self._items) == self.capacity

    def push(self, request: FriendRequest) -> None:
        """Add a request behind every request with at least as many friends."""
        if self.is_full():
            raise OverflowError("friend request queue is full")
        position = next(
            (
                index
                for index, queued in enumerate(self._items)
                if queued.friend_count < request.friend_count
            ),
            len(self._items),
        )
        self._items.insert(position, request)

    def pop(self) -> FriendRequest:
        """Remove and return the top request."""
        if not self._items:
            raise IndexError("pop from an empty friend request queue")
        return self._items.pop(0)

    def top(self) -> FriendRequest:
        """The top request, left in place."""
        if not self._items:
            raise IndexError("no friend requests")
        return self._items[0]

    def render_top(self) -> str:
        """Text describing the top request."""
        request = self.top()
        return f"\nPermintaan pertemanan teratas dari {request.name}\n" + _render_entry(request)

    def render(self) -> str:
        """Text listing every request in order."""
        return "".join(_render_entry(request) for request in self._items) + "\n"