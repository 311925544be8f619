import pytest

from burbir.friend_requests import FriendRequest, FriendRequestQueue


def _names(queue):
    return [request.name for request in queue]


def test_new_queue_is_empty():
    queue = FriendRequestQueue(3)
    assert queue.is_empty() is True
    assert len(queue) == 0


def test_ordered_by_friend_count_descending():
    queue = FriendRequestQueue(5)
    for count, name in [(2, "b"), (7, "a"), (4, "c")]:
        queue.push(FriendRequest(count, name))
    counts = [request.friend_count for request in queue]
    assert counts == sorted(counts, reverse=True)
    assert _names(queue) == ["a", "c", "b"]


def test_equal_counts_keep_arrival_order():
    queue = FriendRequestQueue(5)
    queue.push(FriendRequest(3, "first"))
    queue.push(FriendRequest(3, "second"))
    queue.push(FriendRequest(3, "third"))
    assert _names(queue) == ["first", "second", "third"]


def test_pop_returns_top_first():
    queue = FriendRequestQueue(4)
    queue.push(FriendRequest(1, "low"))
    queue.push(FriendRequest(9, "high"))
    assert queue.pop() == FriendRequest(9, "high")
    assert queue.pop() == FriendRequest(1, "low")
    assert queue.is_empty() is True


def test_full_queue_rejects_push():
    queue = FriendRequestQueue(2)
    queue.push(FriendRequest(1, "a"))
    queue.push(FriendRequest(2, "b"))
    assert queue.is_full() is True
    with pytest.raises(OverflowError):
        queue.push(FriendRequest(3, "c"))


def test_pop_and_top_on_empty_queue():
    queue = FriendRequestQueue(2)
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.top()


def test_render_top():
    queue = FriendRequestQueue(2)
    queue.push(FriendRequest(5, "Tuan Hak"))
    assert queue.render_top() == (
        "\nPermintaan pertemanan teratas dari Tuan Hak\n\n| Tuan Hak\n| Jumlah teman: 5\n"
    )


def test_render_lists_all():
    queue = FriendRequestQueue(3)
    queue.push(FriendRequest(1, "x"))
    queue.push(FriendRequest(2, "y"))
    assert queue.render() == "\n| y\n| Jumlah teman: 2\n\n| x\n| Jumlah teman: 1\n\n"


def test_zero_capacity_rejected():
    with pytest.raises(ValueError):
        FriendRequestQueue(0)