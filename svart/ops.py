"""Interval operations on half-open coordinate pairs."""

from __future__ import annotations


def is_empty(start: int, end: int) -> bool:
    """Return True when the interval ``[start, end)`` has no length."""
    return end - start == 0


def overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    """Return True when interval ``a`` overlaps interval ``b``.

    Two empty intervals overlap only when they sit at the same position.
    """
    if is_empty(a_start, a_end) and is_empty(b_start, b_end):
        return a_start == b_end and b_start == a_end
    return a_start < b_end and b_start < a_end


def contains(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    """Return True when interval ``a`` fully contains interval ``b``."""
    return a_start <= b_start and b_end <= a_end


class Located:
    """Mixin for objects that have ``start`` and ``end`` coordinates."""

    start: int
    end: int

    def coordinates(self) -> tuple[int, int]:
        """Return the ``(start, end)`` pair."""
        return self.start, self.end

    def contains(self, other: Located) -> bool:
        """Return True when ``other`` lies fully within this object."""
        return contains(self.start, self.end, other.start, other.end)

    def overlaps(self, other: Located) -> bool:
        """Return True when ``other`` overlaps this object."""
        return overlaps(self.start, self.end, other.start, other.end)

    def span(self) -> int:
        """Return the number of units between start and end."""
        return self.end - self.start

    def is_empty(self) -> bool:
        """Return True when the span is zero."""
        return self.span() == 0