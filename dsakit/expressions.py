"""Stack exercises: expression conversion and evaluation, text checks, hulls."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = [
    "Point",
    "backspace_equal",
    "is_palindrome",
    "convex_hull",
    "evaluate_postfix",
    "precedence",
    "infix_to_postfix",
    "infix_to_prefix",
    "unique_descending",
    "reverse_string",
    "is_balanced",
]

_PAIRS = {")": "(", "}": "{", "]": "["}


@dataclass(frozen=True, order=True)
class Point:
    """A point in the integer plane; points order by x, then y."""

    x: int
    y: int


def _typed_text(text: str) -> str:
    stack: list[str] = []
    for char in text:
        if char != "#":
            stack.append(char)
        elif stack:
            stack.pop()
    return "".join(stack)


def backspace_equal(first: str, second: str) -> bool:
    """Whether two strings match once every ``#`` erases the character before it."""
    return _typed_text(first) == _typed_text(second)


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def _cross(origin: Point, a: Point, b: Point) -> int:
    return (a.x - origin.x) * (b.y - origin.y) - (a.y - origin.y) * (b.x - origin.x)


def convex_hull(points: Iterable[Point | tuple[int, int]]) -> list[Point]:
    """Scan the points sorted by x then y, dropping every counter-clockwise turn.

    The chain kept runs from the smallest to the largest point and turns
    only clockwise or goes straight, which traces the upper hull.
    """
    ordered = sorted(p if isinstance(p, Point) else Point(*p) for p in points)
    hull: list[Point] = []
    for point in ordered:
        while len(hull) >= 2:
            top = hull.pop()
            if _cross(hull[-1], top, point) <= 0:
                hull.append(top)
                break
        hull.append(point)
    return hull


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Each operator combines the top of the stack with the value beneath
    it, top first: ``93-`` computes ``3 - 9``. Division truncates toward
    zero. The value left on top of the stack is returned.
    """
    stack: list[int] = []
    for char in expression:
        if char.isascii() and char.isdigit():
            stack.append(int(char))
            continue
        if len(stack) < 2:
            raise ValueError(f"invalid expression {expression!r}: missing operand")
        current = stack.pop()
        below = stack.pop()
        if char == "+":
            stack.append(current + below)
        elif char == "-":
            stack.append(current - below)
        elif char == "*":
            stack.append(current * below)
        elif char == "/":
            if below == 0:
                raise ZeroDivisionError(f"division by zero in {expression!r}")
            stack.append(_truncating_div(current, below))
        else:
            raise ValueError(f"invalid expression {expression!r}: unknown operator {char!r}")
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def precedence(operator: str) -> int:
    """Binding strength of an operator: ``^`` 3, ``* /`` 2, ``+ -`` 1, else -1."""
    if operator == "^":
        return 3
    if operator in ("*", "/"):
        return 2
    if operator in ("+", "-"):
        return 1
    return -1


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _shunt(expression: str) -> str:
    stack: list[str] = []
    output: list[str] = []
    for char in expression:
        if _is_operand(char):
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            rank = precedence(char)
            while (
                stack
                and stack[-1] != "("
                and (
                    precedence(stack[-1]) > rank
                    or (precedence(stack[-1]) == rank and char != "^")
                )
            ):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix; ``^`` is right-associative."""
    return _shunt(expression)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix by converting its mirror image."""
    swap = str.maketrans("()", ")(")
    mirrored = expression[::-1].translate(swap)
    return _shunt(mirrored)[::-1]


def unique_descending(text: str) -> str:
    """Distinct characters of ``text``, stacked in descending order and popped.

    Popping the stack yields them in ascending order.
    """
    stack: list[str] = []
    for char in sorted(text, reverse=True):
        if not stack or stack[-1] != char:
            stack.append(char)
    return "".join(reversed(stack))


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing it onto a stack and popping it off."""
    stack = list(text)
    return "".join(stack.pop() for _ in range(len(stack)))


def is_balanced(expression: str) -> bool:
    """Whether every ``)``, ``}`` and ``]`` closes the latest open bracket.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    for char in expression:
        if char in "({[":
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack