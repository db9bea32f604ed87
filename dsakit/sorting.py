"""Classic sorting algorithms.

Each function takes an iterable and returns a new sorted list, leaving
the input untouched. The counting-based sorts accept only non-negative
integers.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge",
    "merge_sort",
    "quick_sort",
    "counting_sort",
    "radix_sort",
    "bucket_sort",
    "push_zeros_to_end",
]


def _non_negative_ints(values: Iterable[int], name: str) -> list[int]:
    items = list(values)
    for value in items:
        if value < 0:
            raise ValueError(f"{name} requires non-negative integers, got {value!r}")
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs.

    Stops early once a full pass makes no swap.
    """
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def merge(left: Iterable[Any], right: Iterable[Any]) -> list[Any]:
    """Merge two sorted sequences into one sorted list.

    On ties the element from ``left`` comes first, so merging is stable.
    """
    a, b = list(left), list(right)
    result: list[Any] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] <= b[j]:
            result.append(a[i])
            i += 1
        else:
            result.append(b[j])
            j += 1
    result.extend(a[i:])
    result.extend(b[j:])
    return result


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    index = low - 1
    for i in range(low, high):
        if items[i] <= pivot:
            index += 1
            items[i], items[index] = items[index], items[i]
    index += 1
    items[high], items[index] = items[index], items[high]
    return index


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quick sort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by tallying each value."""
    items = _non_negative_ints(values, "counting_sort")
    if not items:
        return []
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort for non-negative integers."""
    items = _non_negative_ints(values, "radix_sort")
    if not items:
        return []
    largest = max(items)
    place = 1
    while largest // place > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // place) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        place *= 10
    return items


def bucket_sort(values: Iterable[int]) -> list[int]:
    """Bucket sort of non-negative integers into buckets of width ten."""
    items = _non_negative_ints(values, "bucket_sort")
    if not items:
        return []
    buckets: list[list[int]] = [[] for _ in range(max(items) // 10 + 1)]
    for value in items:
        buckets[value // 10].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def push_zeros_to_end(values: Iterable[Any]) -> list[Any]:
    """Move every zero to the end, keeping the other elements in order."""
    items = list(values)
    return [x for x in items if x != 0] + [x for x in items if x == 0]