"""Directed friendship matrix between accounts."""

from __future__ import annotations

GRAPH_CAPACITY = 20


class FriendGraph:
    """Square matrix where entry (i, j) means account i reaches out to account j.

    Two accounts are friends when the entries hold in both directions.
    """

    capacity = GRAPH_CAPACITY

    def __init__(self, size: int) -> None:
        self._check_size(size)
        self._rows: list[list[bool]] = [[False] * size for _ in range(size)]

    @property
    def size(self) -> int:
        """Number of accounts the matrix covers."""
        return len(self._rows)

    def _check_size(self, size: int) -> None:
        if not 0 <= size <= self.capacity:
            raise ValueError(f"size must be between 0 and {self.capacity}, got {size}")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"account index {index} outside 0..{self.size - 1}")

    def set(self, i: int, j: int, value: bool) -> None:
        """Set entry (i, j)."""
        self._check_index(i)
        self._check_index(j)
        self._rows[i][j] = bool(value)

    def render(self) -> str:
        """The matrix as rows of 0 and 1 separated by single blanks."""
        return "".join(
            " ".join("1" if cell else "0" for cell in row) + "\n" for row in self._rows
        )

    def are_friends(self, first_id: int, second_id: int) -> bool:
        """True if both accounts point at each other."""
        return self.has_requested(first_id, second_id) and self.has_requested(
            second_id, first_id
        )

    def has_requested(self, first_id: int, second_id: int) -> bool:
        """True if the first account points at the second."""
        self._check_index(first_id)
        self._check_index(second_id)
        return self._rows[first_id][second_id]

    def resize(self, new_size: int) -> None:
        """Change the size; entries added by growing start out False."""
        self._check_size(new_size)
        rows = [row[:new_size] for row in self._rows[:new_size]]
        for row in rows:
            row.extend([False] * (new_size - len(row)))
        rows.extend([False] * new_size for _ in range(new_size - len(rows)))
        self._rows = rows

    def count_friends(self, account_id: int) -> int:
        """Number of accounts this account points at, itself included."""
        self._check_index(account_id)
        return sum(self._rows[account_id])

    def count_mutual(self, account_id: int) -> int:
        """Number of other accounts linked to this one in both directions."""
        self._check_index(account_id)
        return sum(
            1
            for other, outgoing in enumerate(self._rows[account_id])
            if other != account_id and outgoing and self._rows[other][account_id]
        )