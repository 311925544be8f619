"""Data structures for a small terminal social network: words, profiles, friends, tweets, lists and matrices."""

__version__ = "0.1.0"

__all__ = [
    "account",
    "account_list",
    "bounded_queue",
    "colors",
    "dynamic_list",
    "foo",
    "friend_graph",
    "friend_groups",
    "friend_requests",
    "hashtag_map",
    "matrix",
    "photo",
    "profile",
    "static_list",
    "timestamp",
    "tweets",
    "words",
]