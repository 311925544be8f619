"""Bounded list of accounts with lookups by id, name and password."""

from __future__ import annotations

from typing import Iterator, Optional

from burbir.account import Account

LIST_CAPACITY = 20


class AccountList:
    """Accounts kept contiguously; full once it holds ``capacity - 1`` accounts."""

    def __init__(self, capacity: int = LIST_CAPACITY) -> None:
        if capacity <= 1:
            raise ValueError("capacity must be greater than 1")
        self.capacity = capacity
        self._items: list[Account] = []

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Account:
        return self._items[index]

    def __iter__(self) -> Iterator[Account]:
        return iter(self._items)

    def is_empty(self) -> bool:
        """True if the list holds no accounts."""
        return not self._items

    def is_full(self) -> bool:
        """True once one slot below capacity is taken."""
        return len(self._items) == self.capacity - 1

    def _check_room(self) -> None:
        if self.is_full():
            raise OverflowError("account list is full")

    def insert_first(self, account: Account) -> None:
        """Put ``account`` at the front."""
        self.insert_at(account, 0)

    def insert_at(self, account: Account, index: int) -> None:
        """Put ``account`` at ``index``, shifting later accounts back."""
        self._check_room()
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert index {index} outside 0..{len(self._items)}")
        self._items.insert(index, account)

    def insert_last(self, account: Account) -> None:
        """Put ``account`` at the end."""
        self._check_room()
        self._items.append(account)

    def delete_first(self) -> Account:
        """Remove and return the first account."""
        return self.delete_at(0)

    def delete_at(self, index: int) -> Account:
        """Remove and return the account at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"delete index {index} outside the list")
        return self._items.pop(index)

    def delete_last(self) -> Account:
        """Remove and return the last account."""
        return self.delete_at(len(self._items) - 1)

    def _index_where(self, predicate) -> Optional[int]:
        return next(
            (index for index, account in enumerate(self._items) if predicate(account)),
            None,
        )

    def index_by_id(self, account_id: int) -> Optional[int]:
        """Position of the account with this id, or None."""
        return self._index_where(lambda account: account.id == account_id)

    def index_by_name(self, name: str) -> Optional[int]:
        """Position of the account with this username, or None."""
        return self._index_where(lambda account: account.username == name)

    def index_by_password(self, password: str) -> Optional[int]:
        """Position of the first account with this password, or None."""
        return self._index_where(lambda account: account.password == password)

    def render(self) -> str:
        """Every account's description between square brackets."""
        return "[" + "".join(account.render() for account in self._items) + "]"