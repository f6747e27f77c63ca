"""A fixed-size linear (non-circular) FIFO queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueFullError(Exception):
    """Raised when enqueueing onto a full queue."""


class QueueEmptyError(Exception):
    """Raised when dequeueing from an empty queue."""


class LinearQueue(Generic[T]):
    """A queue over ``capacity`` slots that are used once each.

    Slots freed by dequeueing are not reused: once ``capacity`` items have been
    enqueued the queue reports full, whatever has been removed since.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[T] = []
        self._front = 0

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the rear."""
        if self.is_full():
            raise QueueFullError("Queue is full")
        self._slots.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty")
        item = self._slots[self._front]
        self._front += 1
        return item

    def is_empty(self) -> bool:
        return self._front >= len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) >= self.capacity

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        return iter(self._slots[self._front:])

    def __repr__(self) -> str:
        return f"LinearQueue(capacity={self.capacity!r}, items={list(self)!r})"