"""Disjoint-set grouping of accounts into friend circles."""

from __future__ import annotations

GROUP_CAPACITY = 20


class FriendGroups:
    """Union-find over account ids 0..capacity-1; each id starts in its own group."""

    def __init__(self, capacity: int = GROUP_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.parent: list[int] = list(range(capacity))

    def _check(self, account_id: int) -> None:
        if not 0 <= account_id < len(self.parent):
            raise IndexError(f"account id {account_id} outside 0..{len(self.parent) - 1}")

    def find(self, account_id: int) -> int:
        """The representative of the group that holds ``account_id``."""
        self._check(account_id)
        while self.parent[account_id] != account_id:
            account_id = self.parent[account_id]
        return account_id

    def union(self, first_id: int, second_id: int) -> None:
        """Merge the two groups; the second group's representative leads."""
        first_rep = self.find(first_id)
        second_rep = self.find(second_id)
        self.parent[first_rep] = second_rep