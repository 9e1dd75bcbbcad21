"""Slicing, searching, replacing and trimming of strings, plus a growable builder."""

from __future__ import annotations

from typing import List, TypeVar

S = TypeVar("S", str, bytes)

_MIN_BUILDER_CAPACITY = 128


def _strip_spaces(s: S, left: bool, right: bool) -> S:
    """Remove space characters from the chosen ends of ``s``."""
    space = b" " if isinstance(s, (bytes, bytearray)) else " "
    if left:
        s = s.lstrip(space)
    if right:
        s = s.rstrip(space)
    return s


def string_view(s: S, start: int, count: int) -> S:
    """Return ``count`` items of ``s`` from ``start``; the whole range must lie inside ``s``."""
    if not 0 <= start < len(s):
        raise IndexError(
            f"string_view start_index {start} out of range for string count {len(s)}"
        )
    if count <= 0:
        raise ValueError("string_view count must be more than 0")
    if start + count > len(s):
        raise IndexError("string_view start_index + count is out of range")
    return s[start:start + count]


def find_from_left(s: S, sub: S) -> int:
    """Index of the first occurrence of ``sub`` in ``s``, or -1."""
    if not sub:
        raise ValueError("cannot search for an empty string")
    return s.find(sub)


def find_from_right(s: S, sub: S) -> int:
    """Index of the last occurrence of ``sub`` in ``s``, or -1."""
    if not sub:
        raise ValueError("cannot search for an empty string")
    return s.rfind(sub)


def string_replace_all(s: S, old: S, new: S) -> S:
    """Replace every non-overlapping ``old`` in ``s``, scanning left to right."""
    if not s:
        return s[:0]
    if not old:
        raise ValueError("the string to replace must not be empty")
    return s.replace(old, new)


def trim_left(s: S) -> S:
    """Strip leading spaces (only the space character)."""
    return _strip_spaces(s, left=True, right=False)


def trim_right(s: S) -> S:
    """Strip trailing spaces (only the space character)."""
    return _strip_spaces(s, left=False, right=True)


def trim(s: S) -> S:
    """Strip leading and trailing spaces."""
    return _strip_spaces(s, left=True, right=True)


class StringBuilder:
    """Accumulates text, tracking a reserved capacity that grows geometrically."""

    def __init__(self, reserved_capacity: int = _MIN_BUILDER_CAPACITY) -> None:
        self._parts: List[str] = []
        self._count = 0
        self._capacity = 0
        self.reserve(max(reserved_capacity, _MIN_BUILDER_CAPACITY))

    @property
    def capacity(self) -> int:
        return self._capacity

    def reserve(self, required_capacity: int) -> None:
        """Make sure at least ``required_capacity`` characters fit."""
        if self._capacity >= required_capacity:
            return
        self._capacity = max(self._capacity * 2, int(required_capacity * 1.5))

    def append(self, s: str) -> None:
        """Add ``s`` to the end of the text."""
        self.reserve(self._count + len(s))
        self._parts.append(s)
        self._count += len(s)

    def getvalue(self) -> str:
        """Return all text appended so far."""
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __len__(self) -> int:
        return self._count

    def __str__(self) -> str:
        return self.getvalue()