# burbir

Building blocks for a small terminal social network, written as plain Python
objects. Functions and methods named `render` return strings instead of
printing, so the caller decides where output goes.

## Installation

Install the package with pip. The `test` extra adds pytest for running the
test suite in `tests/`.

## Modules

| Module | Main names | Purpose |
| --- | --- | --- |
| `burbir.words` | `WordReader`, `word_to_int`, `int_to_word`, `cap_word`, `word_to_char`, `word_after_first_space`, `split_trailing_int` | Reads words and whole lines from a text stream that ends at `;` (or at the end of the stream), plus small text helpers |
| `burbir.colors` | `Color`, `colored`, `red`, `green`, `blue` | Wraps a single character in ANSI colour codes |
| `burbir.foo` | `Foo` | A one-integer counter with `add`, `subtract` and `render` |
| `burbir.timestamp` | `Timestamp`, `parse_date`, `parse_time` | Date and time of a post; parses `dd/mm/yyyy` and `hh:mm:ss`, renders `dd/mm/yyyy hh:mm:ss` |
| `burbir.photo` | `ProfilePhoto` | A 5×5 grid of coloured symbols, red `*` by default |
| `burbir.profile` | `Profile`, `is_weton_valid`, `is_phone_valid` | Bio (cut to 135 characters), phone number, weton, public/private visibility and photo |
| `burbir.friend_requests` | `FriendRequest`, `FriendRequestQueue` | Bounded priority queue: more friends first, ties in arrival order |
| `burbir.account` | `Account`, `visibility_from_word`, `visibility_to_word` | A user account with profile and pending friend requests; `"Publik"`/`"Privat"` conversion |
| `burbir.bounded_queue` | `BoundedQueue` | FIFO queue of integers with a fixed capacity (100 by default) |
| `burbir.friend_graph` | `FriendGraph` | Directed friendship matrix of up to 20 accounts; friends when linked both ways |
| `burbir.friend_groups` | `FriendGroups` | Union-find grouping of account ids |
| `burbir.account_list` | `AccountList` | Bounded list of accounts with lookups by id, username and password |
| `burbir.tweets` | `Tweet`, `TweetList`, `nearest_two_power` | Tweets and a growable list addressed by tweet id (starting at 1) |
| `burbir.hashtag_map` | `HashtagMap`, `hash_tag` | Open-addressing map from hashtag to tweets, newest first |
| `burbir.static_list` | `StaticList` | Integer list holding at most 10 values |
| `burbir.dynamic_list` | `DynamicList` | Integer list with an explicit capacity that can be expanded, shrunk or compressed |
| `burbir.matrix` | `Matrix`, `is_index_valid` | Integer matrices: `+`, `-`, `*`, negation, modular product, determinant, transpose and shape tests |

Operations that cannot be carried out raise exceptions: a full queue or list
raises `OverflowError`, taking from an empty one raises `IndexError`, and bad
arguments raise `ValueError`.

## Examples

Read words from input that ends at `;`:

```python
import io
from burbir.words import WordReader

reader = WordReader(io.StringIO("hello brave world;"))
print(list(reader.words()))   # ['hello', 'brave', 'world']
```

Track friendships:

```python
from burbir.friend_graph import FriendGraph

graph = FriendGraph(3)
graph.set(0, 1, True)
graph.set(1, 0, True)
print(graph.are_friends(0, 1))   # True
print(graph.render(), end="")
# 0 1 0
# 1 0 0
# 0 0 0
```

Keep friend requests ordered by how many friends the sender has:

```python
from burbir.friend_requests import FriendRequest, FriendRequestQueue

queue = FriendRequestQueue(5)
queue.push(FriendRequest(friend_count=2, name="Ana"))
queue.push(FriendRequest(friend_count=7, name="Budi"))
print(queue.pop().name)   # Budi
```

Work with matrices:

```python
from burbir.matrix import Matrix

m = Matrix([[1, 2], [3, 4]])
print(m.determinant())        # -2.0
print((m * m).render(), end="")
# 7 10
# 15 22
```

## What the package does not do

burbir is a library of data structures only. It has no command-line program,
no interactive menu for signing up, posting or managing friends, and no
saving or loading of accounts, tweets or graphs to files. An application built
on it has to supply those parts itself.