"""User accounts."""

from __future__ import annotations

from dataclasses import dataclass, field

from burbir.friend_requests import FriendRequestQueue
from burbir.profile import Profile

MAX_ACCOUNTS = 20
FRIEND_REQUEST_CAPACITY = 19

PUBLIC_WORD = "Publik"
PRIVATE_WORD = "Privat"


def _new_request_queue() -> FriendRequestQueue:
    return FriendRequestQueue(FRIEND_REQUEST_CAPACITY)


@dataclass
class Account:
    """An account with its profile and pending friend requests."""

    id: int = 0
    username: str = field(default_factory=str)
    password: str = field(default_factory=str)
    profile: Profile = field(default_factory=Profile)
    friend_requests: FriendRequestQueue = field(default_factory=_new_request_queue)

    def render(self) -> str:
        """Text describing the account."""
        return (
            f"ID: {self.id}\n"
            + self.profile.render(self.username)
            + f"Username: {self.username}"
            + f"Password: {self.password}"
        )


def visibility_from_word(word: str) -> bool:
    """True for "Publik", False for "Privat"."""
    if word == PUBLIC_WORD:
        return True
    if word == PRIVATE_WORD:
        return False
    raise ValueError(f"expected {PUBLIC_WORD} or {PRIVATE_WORD}, got {word!r}")


def visibility_to_word(public: bool) -> str:
    """"Publik" for a public account, "Privat" otherwise."""
    return PUBLIC_WORD if public else PRIVATE_WORD