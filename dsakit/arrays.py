"""Basic array operations: searching, insertion, deletion and joining."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "binary_search",
    "linear_search",
    "delete_at",
    "insert_at",
    "concatenate",
    "common_elements",
]


def binary_search(values: Sequence[Any], item: Any) -> int | None:
    """Return an index of ``item`` in the sorted ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == item:
            return mid
        if values[mid] > item:
            high = mid - 1
        else:
            low = mid + 1
    return None


def linear_search(values: Iterable[Any], item: Any) -> int | None:
    """Return the index of the first occurrence of ``item``, or None."""
    return next((i for i, value in enumerate(values) if value == item), None)


def delete_at(values: Iterable[Any], index: int) -> list[Any]:
    """Return a copy of ``values`` without the element at ``index``.

    An index past the end leaves the copy unchanged; a negative index
    raises IndexError.
    """
    if index < 0:
        raise IndexError(f"negative index {index}")
    items = list(values)
    if index < len(items):
        del items[index]
    return items


def insert_at(values: Iterable[Any], index: int, item: Any) -> list[Any]:
    """Return a copy of ``values`` with ``item`` inserted at ``index``."""
    items = list(values)
    if not 0 <= index <= len(items):
        raise IndexError(f"index {index} out of range for length {len(items)}")
    items.insert(index, item)
    return items


def concatenate(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Return the elements of ``first`` followed by those of ``second``."""
    return [*first, *second]


def common_elements(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Return the distinct values present in both inputs, ascending."""
    return sorted(set(first) & set(second))