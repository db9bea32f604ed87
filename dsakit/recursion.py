"""Small recursive problems: Josephus, Tower of Hanoi, Collatz and friends."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

__all__ = [
    "even_indices_reversed",
    "josephus",
    "plane_regions",
    "hanoi_moves",
    "collatz_sequence",
]


def even_indices_reversed(values: Sequence[Any]) -> list[Any]:
    """Elements at even indices, last one first."""
    return list(values[::2])[::-1]


def josephus(people: int) -> int:
    """1-based survivor position when every second person is eliminated."""
    if people < 1:
        raise ValueError(f"need at least one person, got {people}")
    if people == 1:
        return 1
    if people % 2 == 0:
        return 2 * josephus(people // 2) - 1
    return 2 * josephus(people // 2) + 1


def plane_regions(lines: int) -> int:
    """Largest number of regions ``lines`` straight cuts divide a plane into."""
    if lines < 0:
        raise ValueError(f"number of lines must not be negative, got {lines}")
    regions = 1
    for line in range(1, lines + 1):
        regions += line
    return regions


def _hanoi(disks: int, source: Any, spare: Any, target: Any) -> Iterator[tuple[Any, Any]]:
    if disks == 1:
        yield (source, target)
        return
    yield from _hanoi(disks - 1, source, target, spare)
    yield (source, target)
    yield from _hanoi(disks - 1, spare, source, target)


def hanoi_moves(
    disks: int, source: Any = 1, spare: Any = 2, target: Any = 3
) -> list[tuple[Any, Any]]:
    """Moves, as ``(from, to)`` pegs, that shift ``disks`` disks to ``target``."""
    if disks < 1:
        raise ValueError(f"need at least one disk, got {disks}")
    return list(_hanoi(disks, source, spare, target))


def collatz_sequence(start: int) -> list[int]:
    """The Collatz sequence from ``start`` down to 1, both included."""
    if start < 1:
        raise ValueError(f"start must be positive, got {start}")
    sequence = [start]
    value = start
    while value != 1:
        value = value // 2 if value % 2 == 0 else 3 * value + 1
        sequence.append(value)
    return sequence