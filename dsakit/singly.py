"""A singly linked list with positional insertion, deletion and deduplication."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any

__all__ = ["SinglyLinkedList"]


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class SinglyLinkedList:
    """A singly linked list whose positions are counted from 1."""

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
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value)
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
        if position < 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.push_front(value)
            return
        if position > self._size + 1:
            raise IndexError(f"position {position} out of range")
        if position == self._size + 1:
            self.push_back(value)
            return
        previous = self._node_at(position - 2)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at 1-based ``position``."""
        if self._head is None:
            raise IndexError("delete from empty list")
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            node = self._head
            self._head = node.next
            if self._head is None:
                self._tail = None
        else:
            previous = self._node_at(position - 2)
            node = previous.next
            assert node is not None
            previous.next = node.next
            if node is self._tail:
                self._tail = previous
        self._size -= 1
        return node.value

    def remove(self, value: Any) -> bool:
        """Remove the first element equal to ``value``; report whether one was found."""
        previous: _Node | None = None
        current = self._head
        while current is not None and current.value != value:
            previous, current = current, current.next
        if current is None:
            return False
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        if current is self._tail:
            self._tail = previous
        self._size -= 1
        return True

    def dedupe_sorted(self) -> None:
        """Collapse runs of equal adjacent elements into one."""
        current = self._head
        while current is not None and current.next is not None:
            if current.value == current.next.value:
                current.next = current.next.next
                self._size -= 1
            else:
                current = current.next
        self._tail = current

    def dedupe(self) -> None:
        """Keep only the first occurrence of every value, in order."""
        current = self._head
        while current is not None:
            previous = current
            while previous.next is not None:
                if previous.next.value == current.value:
                    previous.next = previous.next.next
                    self._size -= 1
                else:
                    previous = previous.next
            self._tail = previous
            current = current.next

    def sort(self) -> None:
        """Sort the values in place with a bubble sort over the nodes."""
        if self._size < 2:
            return
        end: _Node | None = None
        swapped = True
        while swapped:
            swapped = False
            node = self._head
            assert node is not None
            while node.next is not end:
                following = node.next
                assert following is not None
                if node.value > following.value:
                    node.value, following.value = following.value, node.value
                    swapped = True
                node = following
            end = node

    def from_middle(self) -> list[Any]:
        """Return the values from the middle node to the end.

        The middle node is number ``len(self) // 2`` counted from 1, or the
        first node for lists shorter than two.
        """
        if self._head is None:
            return []
        start = max(self._size // 2, 1) - 1
        return list(islice(self, start, None))

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"