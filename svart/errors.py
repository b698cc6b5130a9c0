"""Exceptions raised by the package."""

from __future__ import annotations


class SvartError(Exception):
    """Base class of all errors raised by the package."""

    def __str__(self) -> str:
        return "Other error"


class IllegalValueError(SvartError, ValueError):
    """Raised when a value cannot be accepted or parsed."""

    def __init__(self, cause: str) -> None:
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"Illegal value error: {self.cause}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IllegalValueError):
            return NotImplemented
        return self.cause == other.cause

    def __hash__(self) -> int:
        return hash((IllegalValueError, self.cause))