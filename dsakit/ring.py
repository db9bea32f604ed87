"""Fixed-capacity containers backed by a circular buffer or a bounded list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["ArrayDeque", "CircularQueue", "ArrayStack"]

DEFAULT_QUEUE_CAPACITY = 1000


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be positive, got {capacity}")
    return capacity


class ArrayDeque:
    """A double-ended queue of bounded capacity stored in a ring buffer."""

    def __init__(self, capacity: int) -> None:
        self._slots: list[Any] = [None] * _check_capacity(capacity)
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _index(self, offset: int) -> int:
        return (self._front + offset) % self.capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        if self.is_full():
            raise OverflowError("deque is full")
        self._front = self._index(-1)
        self._slots[self._front] = value
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Insert ``value`` after the last element."""
        if self.is_full():
            raise OverflowError("deque is full")
        self._slots[self._index(self._size)] = value
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self.is_empty():
            raise IndexError("pop from empty deque")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = self._index(1)
        self._size -= 1
        return value

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self.is_empty():
            raise IndexError("pop from empty deque")
        index = self._index(self._size - 1)
        value = self._slots[index]
        self._slots[index] = None
        self._size -= 1
        return value

    def peek_front(self) -> Any:
        """Return the first element without removing it."""
        if self.is_empty():
            raise IndexError("peek at empty deque")
        return self._slots[self._front]

    def peek_back(self) -> Any:
        """Return the last element without removing it."""
        if self.is_empty():
            raise IndexError("peek at empty deque")
        return self._slots[self._index(self._size - 1)]

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._size):
            yield self._slots[self._index(offset)]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"


class CircularQueue:
    """A first-in first-out queue of bounded capacity in a ring buffer."""

    def __init__(self, capacity: int = DEFAULT_QUEUE_CAPACITY) -> None:
        self._ring = ArrayDeque(capacity)

    @property
    def capacity(self) -> int:
        return self._ring.capacity

    def is_empty(self) -> bool:
        return self._ring.is_empty()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise OverflowError when full."""
        if self._ring.is_full():
            raise OverflowError("circular queue is full")
        self._ring.push_back(value)

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if self._ring.is_empty():
            raise IndexError("dequeue from empty circular queue")
        return self._ring.pop_front()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._ring)

    def __len__(self) -> int:
        return len(self._ring)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"


class ArrayStack:
    """A last-in first-out stack that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise OverflowError when full."""
        if len(self._items) >= self._capacity:
            raise OverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"