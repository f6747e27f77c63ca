"""A singly linked list with key- and position-based insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class EmptyListError(Exception):
    """Raised when an operation needs at least one node and the list has none."""


class NodeNotFoundError(Exception):
    """Raised when a key is missing or the node next to it does not exist."""


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList(Generic[T]):
    """A singly linked list.

    Keys are matched against node values, first occurrence first. Positions are
    1-based; a position below 1 refers to the first node.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        tail: _Node | None = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _pairs(self) -> Iterator[tuple[_Node | None, _Node]]:
        """Yield (previous node, node) for every node from the head."""
        prev: _Node | None = None
        node = self._head
        while node is not None:
            yield prev, node
            prev, node = node, node.next

    def _require_items(self, action: str) -> None:
        if self._head is None:
            raise EmptyListError(f"List is empty. Cannot {action}.")

    def _find(self, key: T) -> tuple[_Node | None, _Node]:
        for prev, node in self._pairs():
            if node.value == key:
                return prev, node
        raise NodeNotFoundError("Key not found in the list.")

    def _locate(self, position: int) -> tuple[_Node | None, _Node]:
        for index, (prev, node) in enumerate(self._pairs(), start=1):
            if index >= position:
                return prev, node
        raise IndexError("Position exceeds the size of the list.")

    def _link_after(self, prev: _Node | None, value: T) -> None:
        if prev is None:
            self._head = _Node(value, self._head)
        else:
            prev.next = _Node(value, prev.next)
        self._size += 1

    def _unlink(self, prev: _Node | None, node: _Node) -> T:
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        self._size -= 1
        return node.value

    def insert_at_end(self, value: T) -> None:
        """Append ``value`` after the last node."""
        last: _Node | None = None
        for _, last in self._pairs():
            pass
        self._link_after(last, value)

    def insert_at_beginning(self, value: T) -> None:
        """Put ``value`` in front of the first node."""
        self._link_after(None, value)

    def insert_after(self, key: T, value: T) -> None:
        """Insert ``value`` right after the first node holding ``key``."""
        self._require_items("insert after")
        _, node = self._find(key)
        self._link_after(node, value)

    def insert_before(self, key: T, value: T) -> None:
        """Insert ``value`` right before the first node holding ``key``."""
        self._require_items("insert before")
        prev, _ = self._find(key)
        self._link_after(prev, value)

    def insert_after_position(self, position: int, value: T) -> None:
        """Insert ``value`` after the node at ``position``."""
        self._require_items("insert after position")
        _, node = self._locate(position)
        self._link_after(node, value)

    def insert_before_position(self, position: int, value: T) -> None:
        """Insert ``value`` before the node at ``position``; the first position is refused."""
        self._require_items("insert before position")
        prev, _ = self._locate(position)
        if prev is None:
            raise IndexError("Cannot insert before the first position.")
        self._link_after(prev, value)

    def delete_at_end(self) -> T:
        """Remove and return the last value."""
        self._require_items("delete from the end")
        last: tuple[_Node | None, _Node] | None = None
        for last in self._pairs():
            pass
        assert last is not None
        return self._unlink(*last)

    def delete_at_beginning(self) -> T:
        """Remove and return the first value."""
        self._require_items("delete from the beginning")
        assert self._head is not None
        return self._unlink(None, self._head)

    def delete_after(self, key: T) -> T:
        """Remove and return the value following the first node holding ``key``."""
        self._require_items("delete after")
        _, node = self._find(key)
        if node.next is None:
            raise NodeNotFoundError("No node to delete after the key.")
        return self._unlink(node, node.next)

    def delete_before(self, key: T) -> T:
        """Remove and return the value preceding the first node holding ``key``."""
        self._require_items("delete before")
        grand: _Node | None = None
        for prev, node in self._pairs():
            if node.value == key:
                if prev is None:
                    raise NodeNotFoundError("No element before the first node to delete.")
                return self._unlink(grand, prev)
            grand = prev
        raise NodeNotFoundError("Key not found in the list.")

    def delete_after_position(self, position: int) -> T:
        """Remove and return the value following the node at ``position``."""
        self._require_items("delete after position")
        _, node = self._locate(position)
        if node.next is None:
            raise IndexError("No node to delete after this position.")
        return self._unlink(node, node.next)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate over the values from head to tail."""
        for _, node in self._pairs():
            yield node.value

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"