import pytest

from burbir.bounded_queue import BoundedQueue


def _filled():
    queue = BoundedQueue()
    for i in range(1, 6):
        queue.enqueue(i * 10)
    return queue


def test_new_queue_is_empty():
    assert BoundedQueue().is_empty() is True


def test_enqueue_render():
    assert _filled().render() == "[10,20,30,40,50]\n"


def test_dequeue():
    queue = _filled()
    assert queue.dequeue() == 10
    assert queue.render() == "[20,30,40,50]\n"


def test_new_queue_is_not_full():
    assert BoundedQueue().is_full() is False


def test_length():
    assert len(_filled()) == 5


def test_empty_render():
    assert BoundedQueue().render() == "[]\n"


def test_full_queue():
    queue = BoundedQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.is_full() is True
    with pytest.raises(OverflowError):
        queue.enqueue(3)


def test_fifo_after_wrapping():
    queue = BoundedQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    queue.enqueue(3)
    assert [queue.dequeue(), queue.dequeue()] == [2, 3]
    assert queue.is_empty() is True


def test_dequeue_empty():
    with pytest.raises(IndexError):
        BoundedQueue().dequeue()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedQueue(0)