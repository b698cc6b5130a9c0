"""Strand of a genomic sequence."""

from __future__ import annotations

from enum import Enum

from svart.errors import IllegalValueError

_PARSE_ERROR = "Could not parse value for strand."

_FORWARD_NAMES = frozenset({"+", "POS", "POSITIVE", "FWD", "FORWARD"})
_REVERSE_NAMES = frozenset({"-", "NEG", "NEGATIVE", "REV", "REVERSE"})


class Strand(Enum):
    """Forward (``+``) or reverse (``-``) strand."""

    FORWARD = "+"
    REVERSE = "-"

    def is_forward(self) -> bool:
        return self is Strand.FORWARD

    def is_reverse(self) -> bool:
        return self is Strand.REVERSE

    def opposite(self) -> Strand:
        """Return the other strand."""
        return Strand.REVERSE if self is Strand.FORWARD else Strand.FORWARD

    @classmethod
    def parse(cls, value: str) -> Strand:
        """Parse a symbol (``+``/``-``) or a name such as ``pos`` or ``reverse``."""
        key = value.upper()
        if key in _FORWARD_NAMES:
            return cls.FORWARD
        if key in _REVERSE_NAMES:
            return cls.REVERSE
        raise IllegalValueError(_PARSE_ERROR)

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Strand):
            return NotImplemented
        return self is Strand.FORWARD and other is Strand.REVERSE