"""Short competitive-programming problems solved by sorting or counting."""

from __future__ import annotations

import bisect
from collections import Counter
from collections.abc import Iterable, Sequence

__all__ = [
    "advantages",
    "wealthy_count",
    "max_barrel_amount",
    "can_defeat_dragons",
    "median_of_three",
    "tree_distance_squared",
    "helpful_maths",
    "running_medians",
    "meeting_distance",
    "candies_to_eat",
    "can_reduce_to_one",
    "find_triple",
    "min_coins_to_take",
]


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def advantages(strengths: Iterable[int]) -> list[int]:
    """Each participant's strength minus the strongest of the others."""
    values = list(strengths)
    if len(values) < 2:
        raise ValueError("need at least two participants")
    ordered = sorted(values)
    best, runner_up = ordered[-1], ordered[-2]
    return [v - runner_up if v == best else v - best for v in values]


def wealthy_count(savings: Iterable[int], threshold: int) -> int:
    """How many people can end up with at least ``threshold`` after redistribution.

    Taking the richest ``j`` people and sharing their savings equally, every
    ``j`` whose average reaches the threshold counts.
    """
    total = 0
    count = 0
    for people, amount in enumerate(sorted(savings, reverse=True), start=1):
        total += amount
        if total >= threshold * people:
            count += 1
    return count


def max_barrel_amount(amounts: Iterable[int], pours: int) -> int:
    """Largest amount in one barrel after pouring ``pours`` others into it."""
    ordered = sorted(amounts, reverse=True)
    if not ordered:
        raise ValueError("need at least one barrel")
    if not 0 <= pours < len(ordered):
        raise ValueError(f"pours must be between 0 and {len(ordered) - 1}, got {pours}")
    return sum(ordered[: pours + 1])


def can_defeat_dragons(strength: int, dragons: Iterable[tuple[int, int]]) -> bool:
    """Whether all dragons fall when fought weakest first.

    Each dragon is ``(strength, bonus)``; beating one needs strictly more
    strength and adds its bonus.
    """
    for dragon_strength, bonus in sorted(dragons):
        if strength > dragon_strength:
            strength += bonus
        else:
            return False
    return True


def median_of_three(a: int, b: int, c: int) -> int:
    """The middle value of three."""
    return sorted((a, b, c))[1]


def tree_distance_squared(sticks: Iterable[int]) -> int:
    """Squared distance reached by alternating horizontal and vertical sticks.

    The shorter half of the sticks goes one way, the longer half the other.
    """
    ordered = sorted(sticks)
    middle = len(ordered) // 2
    short, long = sum(ordered[:middle]), sum(ordered[middle:])
    return short * short + long * long


def helpful_maths(expression: str) -> str:
    """Rearrange the summands of a ``+``-joined sum into ascending order."""
    terms = sorted(c for c in expression if c != "+")
    if not terms:
        raise ValueError("expression has no summands")
    return "+".join(terms)


def running_medians(numbers: Iterable[int]) -> list[int]:
    """Median of every prefix; an even count averages the middle pair, truncated."""
    seen: list[int] = []
    medians: list[int] = []
    for number in numbers:
        bisect.insort(seen, number)
        half = len(seen) // 2
        if len(seen) % 2:
            medians.append(seen[half])
        else:
            medians.append(_truncating_div(seen[half] + seen[half - 1], 2))
    return medians


def meeting_distance(a: int, b: int, c: int) -> int:
    """Total distance three friends on a line walk to meet at one point."""
    high, middle, low = sorted((a, b, c), reverse=True)
    return (high - middle) + (middle - low)


def candies_to_eat(counts: Iterable[int]) -> int:
    """Candies to eat so that every box holds as few as the smallest one."""
    ordered = sorted(counts)
    if not ordered:
        raise ValueError("need at least one box")
    smallest = ordered[0]
    return sum(count - smallest for count in ordered[1:])


def can_reduce_to_one(values: Sequence[int]) -> bool:
    """Whether removing the smaller of two values differing by at most one,
    over and over, can leave a single element."""
    ordered = sorted(values)
    remaining = len(ordered)
    for previous, current in zip(ordered, ordered[1:]):
        if current - previous <= 1:
            remaining -= 1
    return remaining == 1


def find_triple(values: Iterable[int]) -> int | None:
    """Smallest value occurring at least three times, or None."""
    counts = Counter(values)
    return min((value for value, count in counts.items() if count >= 3), default=None)


def min_coins_to_take(coins: Iterable[int]) -> int:
    """Fewest coins whose sum strictly exceeds the sum of the rest."""
    ordered = sorted(coins, reverse=True)
    total = sum(ordered)
    taken = 0
    count = 0
    for coin in ordered:
        taken += coin
        count += 1
        if 2 * taken > total:
            break
    return count