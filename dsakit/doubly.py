"""A doubly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["DoublyLinkedList"]


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """A doubly linked list whose positions are counted from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``.

        Position ``len(self) + 1`` appends; anything beyond raises IndexError.
        """
        if position < 1 or position > self._size + 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.push_front(value)
            return
        if position == self._size + 1:
            self.push_back(value)
            return
        previous = self._node_at(position - 2)
        following = previous.next
        assert following is not None
        node = _Node(value, previous, following)
        previous.next = node
        following.prev = node
        self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at 1-based ``position``."""
        if self._head is None:
            raise IndexError("delete from empty list")
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        node = self._node_at(position - 1)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"