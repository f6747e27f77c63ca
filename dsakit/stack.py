"""A bounded LIFO stack and the operator helpers used by expression conversion."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping or peeking an empty stack."""


class Stack(Generic[T]):
    """A stack holding at most ``capacity`` items; ``None`` means unbounded."""

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Put ``item`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError("Stack is full. Cannot push.")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("Stack is empty. Cannot pop.")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError("Stack is empty. Cannot peek.")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self.capacity is not None and len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity!r}, items={list(self)!r})"


def is_operator(char: str) -> bool:
    """Return True if ``char`` is one of the binary operators + - * / ^."""
    return char in _PRECEDENCE


def precedence(op: str) -> int:
    """Return the binding strength of ``op``: 1 for + -, 2 for * /, 3 for ^, else -1."""
    return _PRECEDENCE.get(op, -1)