"""A plain coordinate region."""

from __future__ import annotations

from dataclasses import dataclass

from svart.errors import IllegalValueError
from svart.ops import Located


@dataclass(frozen=True, order=True)
class Region(Located):
    """An interval between ``start`` and ``end``; start must not exceed end."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise IllegalValueError("Region start must not be greater than end.")