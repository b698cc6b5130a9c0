"""Coordinate systems, interval bounds and confidence intervals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from svart.errors import IllegalValueError


class Bound(Enum):
    """Whether an interval end includes its coordinate."""

    OPEN = "open"
    CLOSED = "closed"

    def is_open(self) -> bool:
        return self is Bound.OPEN

    def is_closed(self) -> bool:
        return self is Bound.CLOSED


class CoordinateSystem(Enum):
    """The pair of start and end bounds used to express coordinates."""

    FULLY_CLOSED = (Bound.CLOSED, Bound.CLOSED)
    LEFT_OPEN = (Bound.OPEN, Bound.CLOSED)
    RIGHT_OPEN = (Bound.CLOSED, Bound.OPEN)
    FULLY_OPEN = (Bound.OPEN, Bound.OPEN)

    @classmethod
    def zero_based(cls) -> CoordinateSystem:
        return cls.LEFT_OPEN

    @classmethod
    def one_based(cls) -> CoordinateSystem:
        return cls.FULLY_CLOSED

    def is_one_based(self) -> bool:
        return self is CoordinateSystem.FULLY_CLOSED

    def is_zero_based(self) -> bool:
        return self is CoordinateSystem.LEFT_OPEN

    def start_bound(self) -> Bound:
        return self.value[0]

    def end_bound(self) -> Bound:
        return self.value[1]

    def start_delta(self, target: CoordinateSystem) -> int:
        """Amount to add to a start coordinate to express it in ``target``."""
        if target.start_bound() is self.start_bound():
            return 0
        return 1 if self.start_bound().is_open() else -1

    def end_delta(self, target: CoordinateSystem) -> int:
        """Amount to add to an end coordinate to express it in ``target``."""
        if target.end_bound() is self.end_bound():
            return 0
        return -1 if self.end_bound().is_open() else 1


@dataclass
class ConfidenceInterval:
    """Non-negative uncertainty around a position; zero on both sides is precise."""

    upper_bound: int = 0
    lower_bound: int = 0

    def __post_init__(self) -> None:
        if self.upper_bound < 0 or self.lower_bound < 0:
            raise IllegalValueError("Confidence interval bounds must not be negative.")

    @classmethod
    def imprecise(cls, upper_bound: int, lower_bound: int) -> ConfidenceInterval:
        return cls(upper_bound=upper_bound, lower_bound=lower_bound)

    @classmethod
    def precise(cls) -> ConfidenceInterval:
        return cls(upper_bound=0, lower_bound=0)

    def is_precise(self) -> bool:
        return self.upper_bound == 0 and self.lower_bound == 0

    def to_precise(self) -> None:
        """Make this interval precise in place."""
        self.upper_bound = 0
        self.lower_bound = 0

    @staticmethod
    def swap_and_invert(left: ConfidenceInterval, right: ConfidenceInterval) -> None:
        """Swap the bounds of both intervals, then exchange the intervals, in place."""
        left_upper, left_lower = left.upper_bound, left.lower_bound
        right_upper, right_lower = right.upper_bound, right.lower_bound
        left.upper_bound, left.lower_bound = right_lower, right_upper
        right.upper_bound, right.lower_bound = left_lower, left_upper