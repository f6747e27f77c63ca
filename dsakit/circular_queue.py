"""A fixed-size circular FIFO queue backed by a ring buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from dsakit.linear_queue import QueueEmptyError, QueueFullError

T = TypeVar("T")


class CircularQueue(Generic[T]):
    """A queue of at most ``capacity`` items whose slots wrap around."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._ring: list[T | None] = [None] * capacity
        self._front = 0
        self._count = 0

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the rear."""
        if self.is_full():
            raise QueueFullError("Queue is full")
        self._ring[(self._front + self._count) % self.capacity] = item
        self._count += 1

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty")
        item = self._ring[self._front]
        self._ring[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._count -= 1
        return item  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        for offset in range(self._count):
            yield self._ring[(self._front + offset) % self.capacity]  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"CircularQueue(capacity={self.capacity!r}, items={list(self)!r})"