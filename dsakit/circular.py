"""A circular singly linked list addressed through its tail node."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["CircularLinkedList"]


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class CircularLinkedList:
    """A circular list; iteration starts at the tail node and goes once round."""

    def __init__(self) -> None:
        self._tail: _Node | None = None
        self._size = 0

    def insert_after(self, element: Any, value: Any) -> None:
        """Insert ``value`` right after the first node holding ``element``.

        The search starts at the tail. In an empty list ``element`` is ignored
        and ``value`` becomes the only node.
        """
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
            self._size = 1
            return
        anchor = self._tail
        for _ in range(self._size):
            if anchor.value == element:
                break
            assert anchor.next is not None
            anchor = anchor.next
        else:
            raise ValueError(f"{element!r} is not in the list")
        node.next = anchor.next
        anchor.next = node
        self._size += 1

    def delete(self, value: Any) -> None:
        """Remove the first node holding ``value``, searching from after the tail."""
        if self._tail is None:
            raise ValueError("delete from empty list")
        previous = self._tail
        current = previous.next
        assert current is not None
        for _ in range(self._size):
            if current.value == value:
                break
            previous = current
            assert current.next is not None
            current = current.next
        else:
            raise ValueError(f"{value!r} is not in the list")
        if self._size == 1:
            self._tail = None
        else:
            previous.next = current.next
            if current is self._tail:
                self._tail = previous
        current.next = None
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        node = self._tail
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"