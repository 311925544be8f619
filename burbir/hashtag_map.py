"""Open-addressing map from hashtags to the tweets that carry them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from burbir.tweets import Tweet
from burbir.words import word_to_int

INITIAL_CAPACITY = 3


def hash_tag(tag: str, capacity: int) -> int:
    """Home slot of ``tag`` in a table of ``capacity`` slots."""
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    return word_to_int(tag) % capacity


@dataclass
class _Slot:
    key: int
    tag: str
    tweets: list[Tweet] = field(default_factory=list)


class HashtagMap:
    """Hashtag to tweets, newest first, with linear probing."""

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._slots: list[Optional[_Slot]] = [None] * capacity

    @property
    def capacity(self) -> int:
        """Number of slots in the table."""
        return len(self._slots)

    def __len__(self) -> int:
        return sum(1 for slot in self._slots if slot is not None)

    def find_slot(self, tag: str) -> int:
        """Slot that holds ``tag``, or the first free slot probed for it."""
        start = hash_tag(tag, self.capacity)
        for step in range(self.capacity):
            index = (start + step) % self.capacity
            slot = self._slots[index]
            if slot is None or slot.tag == tag:
                return index
        raise OverflowError("hashtag map is full")

    def insert(self, tweet: Tweet) -> None:
        """File ``tweet`` under its hashtag, ahead of earlier tweets."""
        if not tweet.tag:
            raise ValueError("tweet has no hashtag")
        index = self.find_slot(tweet.tag)
        slot = self._slots[index]
        if slot is None:
            slot = _Slot(hash_tag(tweet.tag, self.capacity), tweet.tag)
            self._slots[index] = slot
        slot.tweets.insert(0, tweet)

    def get(self, tag: str) -> list[Tweet]:
        """Tweets with ``tag``, newest first; empty if none."""
        try:
            index = self.find_slot(tag)
        except OverflowError:
            return []
        slot = self._slots[index]
        return list(slot.tweets) if slot is not None else []

    def is_full(self) -> bool:
        """True if every slot holds a hashtag."""
        return all(slot is not None for slot in self._slots)

    def rehash(self) -> None:
        """Double the table and file every tweet again."""
        old_slots = [slot for slot in self._slots if slot is not None]
        self._slots = [None] * (2 * self.capacity)
        for slot in old_slots:
            for tweet in reversed(slot.tweets):
                self.insert(tweet)