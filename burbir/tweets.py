"""Tweets and the growable list that stores them by id."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from burbir.account import Account
from burbir.timestamp import Timestamp

UNSET_ID = -1


def nearest_two_power(value: int) -> int:
    """Twice the largest power of two not above ``value``; 0 for 0."""
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")
    if value == 0:
        return 0
    return 1 << value.bit_length()


@dataclass
class Tweet:
    """A post: its text, author, likes, time and hashtag."""

    text: str
    author: Optional[Account] = None
    id: int = UNSET_ID
    like_count: int = 0
    timestamp: Timestamp = field(default_factory=Timestamp.now)
    tag: str = ""

    def render(self) -> str:
        """Text describing the tweet."""
        if self.author is None:
            raise ValueError("tweet has no author")
        return (
            f"| ID = {self.id}\n"
            f"| {self.author.username}\n"
            f"| {self.timestamp.render()}\n"
            f"| {self.text}\n"
            f"| Disukai : {self.like_count}"
        )


class TweetList:
    """Tweets stored under ids 1..len; grows when it runs out of room."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Optional[Tweet]] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """True if no id is in use."""
        return not self._items

    def is_full(self) -> bool:
        """True if every slot up to the capacity is in use."""
        return len(self._items) == self.capacity

    def append(self, tweet: Tweet) -> None:
        """Store ``tweet`` after the last used id, doubling the capacity if full."""
        if self.is_full():
            self.capacity *= 2
        self._items.append(tweet)

    def put(self, tweet: Tweet, tweet_id: int) -> None:
        """Store ``tweet`` under ``tweet_id``, growing the list to reach it."""
        if tweet_id < 1:
            raise IndexError(f"tweet id must be at least 1, got {tweet_id}")
        if tweet_id > self.capacity:
            self.capacity = nearest_two_power(tweet_id)
        if tweet_id > len(self._items):
            self._items.extend([None] * (tweet_id - len(self._items)))
        self._items[tweet_id - 1] = tweet

    def contains(self, tweet_id: int) -> bool:
        """True if ``tweet_id`` lies within the ids in use."""
        return 1 <= tweet_id <= len(self._items)

    def get(self, tweet_id: int) -> Tweet:
        """The tweet stored under ``tweet_id``."""
        if not self.contains(tweet_id):
            raise IndexError(f"no tweet id {tweet_id}")
        tweet = self._items[tweet_id - 1]
        if tweet is None:
            raise LookupError(f"nothing stored under tweet id {tweet_id}")
        return tweet