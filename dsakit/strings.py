"""Elementary string operations with 1-based positions."""

from __future__ import annotations

__all__ = [
    "delete_range",
    "find_pattern",
    "merge",
    "substring",
    "length",
    "latin_plural",
]


def _check_start(text: str, position: int, length: int) -> int:
    if position < 1:
        raise IndexError(f"position {position} must be at least 1")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    start = position - 1
    if start > len(text):
        raise IndexError(f"position {position} out of range for length {len(text)}")
    return start


def delete_range(text: str, position: int, length: int) -> str:
    """Remove ``length`` characters starting at 1-based ``position``.

    A range running past the end removes everything from ``position`` on.
    """
    start = _check_start(text, position, length)
    return text[:start] + text[start + length:]


def find_pattern(pattern: str, text: str) -> int | None:
    """Index of the first occurrence of ``pattern`` in ``text``, or None."""
    for index in range(len(text) - len(pattern) + 1):
        if text.startswith(pattern, index):
            return index
    return None


def merge(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return f"{first}{second}"


def substring(text: str, position: int, length: int) -> str:
    """Return ``length`` characters starting at 1-based ``position``."""
    start = _check_start(text, position, length)
    if start + length > len(text):
        raise IndexError(
            f"range {position}..{position + length - 1} out of range for length {len(text)}"
        )
    return text[start:start + length]


def length(text: str) -> int:
    """Number of characters before the first NUL, or of the whole text."""
    end = text.find("\0")
    return len(text) if end < 0 else end


def latin_plural(word: str) -> str:
    """Turn a word ending in ``us`` into its plural ending in ``i``."""
    if not word.endswith("us"):
        raise ValueError(f"{word!r} does not end in 'us'")
    return word[:-2] + "i"