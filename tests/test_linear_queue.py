import pytest

from dsakit.linear_queue import LinearQueue, QueueEmptyError, QueueFullError


def test_fifo_order():
    queue = LinearQueue(5)
    for item in [10, 20, 30]:
        queue.enqueue(item)
    assert list(queue) == [10, 20, 30]
    assert [queue.dequeue() for _ in range(3)] == [10, 20, 30]
    assert queue.is_empty()


def test_new_queue_is_empty():
    queue = LinearQueue(3)
    assert queue.is_empty()
    assert len(queue) == 0
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_full_after_capacity_items():
    queue = LinearQueue(2)
    queue.enqueue("a")
    queue.enqueue("b")
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue("c")


def test_dequeued_slots_are_not_reused():
    queue = LinearQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(3)
    assert list(queue) == [2]


def test_len_tracks_contents():
    queue = LinearQueue(4)
    queue.enqueue(1)
    queue.enqueue(2)
    queue.dequeue()
    assert len(queue) == 1


def test_empty_after_draining_full_queue():
    queue = LinearQueue(1)
    queue.enqueue(7)
    assert queue.dequeue() == 7
    assert queue.is_empty() and queue.is_full()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


@pytest.mark.parametrize("capacity", [0, -3])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        LinearQueue(capacity)