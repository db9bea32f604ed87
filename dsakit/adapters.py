"""Queues built from stacks, stacks built from queues, and queue exercises."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

__all__ = [
    "TwoStackQueue",
    "QueueStack",
    "reverse_queue",
    "reverse_queue_by_rotation",
    "next_higher_peaks",
    "run_queries",
]


class TwoStackQueue:
    """A FIFO queue made of an inbox stack and an outbox stack."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def _shift(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._inbox.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front element."""
        self._shift()
        if not self._outbox:
            raise IndexError("dequeue from empty queue")
        return self._outbox.pop()

    def front(self) -> Any:
        """Return the front element without removing it."""
        self._shift()
        if not self._outbox:
            raise IndexError("front of empty queue")
        return self._outbox[-1]

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox

    def __iter__(self) -> Iterator[Any]:
        yield from reversed(self._outbox)
        yield from self._inbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class QueueStack:
    """A LIFO stack kept in a single queue, newest element at the front."""

    def __init__(self) -> None:
        self._queue: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Put ``value`` on top by enqueueing and rotating it to the front."""
        self._queue.append(value)
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def is_empty(self) -> bool:
        return not self._queue

    def __iter__(self) -> Iterator[Any]:
        """Yield elements from top to bottom."""
        return iter(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def reverse_queue(queue: Iterable[Any]) -> deque[Any]:
    """Return a new queue with the elements in reverse order, using a stack."""
    stack = list(queue)
    result: deque[Any] = deque()
    while stack:
        result.append(stack.pop())
    return result


def reverse_queue_by_rotation(queue: Iterable[Any]) -> deque[Any]:
    """Return a reversed queue, rotating each new element to the front."""
    result: deque[Any] = deque()
    for value in queue:
        result.append(value)
        for _ in range(len(result) - 1):
            result.append(result.popleft())
    return result


def next_higher_peaks(heights: Sequence[Any]) -> list[Any]:
    """For each height, the first strictly higher one to its right, or None."""
    result: list[Any] = [None] * len(heights)
    pending: list[int] = []
    for index, height in enumerate(heights):
        while pending and height > heights[pending[-1]]:
            result[pending.pop()] = height
        pending.append(index)
    return result


def run_queries(queries: Iterable[Sequence[Any]]) -> list[Any]:
    """Run queue queries and collect the answers to the front lookups.

    ``(1, n)`` enqueues ``n``; ``(2,)`` dequeues if the queue is not empty;
    ``(3,)`` records the front element, or None when the queue is empty.
    Other query kinds are ignored.
    """
    queue: deque[Any] = deque()
    answers: list[Any] = []
    for kind, *args in queries:
        if kind == 1:
            if len(args) != 1:
                raise ValueError("enqueue query needs exactly one value")
            queue.append(args[0])
        elif kind == 2:
            if queue:
                queue.popleft()
        elif kind == 3:
            answers.append(queue[0] if queue else None)
    return answers