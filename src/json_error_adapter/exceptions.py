"""
Custom exception classes for the JSON error adapter.

Package operations report failures as ``(value, StructuredError)`` tuples.
These exceptions serve callers that would rather raise at a boundary.
"""

from __future__ import annotations

from typing import Optional, Tuple, TypeVar

from json_error_adapter.schemas import StructuredError

T = TypeVar("T")


class JsonErrorAdapterError(Exception):
    """Base exception for all adapter errors."""
    pass


class StructuredErrorRaised(JsonErrorAdapterError):
    """A structured error promoted to an exception."""

    def __init__(self, error: StructuredError):
        self.error = error
        super().__init__(f"[{error.code.value}] {error.message}")

    @property
    def http_status(self) -> int:
        return self.error.http_status


def unwrap(result: Tuple[Optional[T], Optional[StructuredError]]) -> T:
    """Return the value of a result tuple or raise its error."""
    value, error = result
    if error is not None:
        raise StructuredErrorRaised(error)
    return value  # type: ignore[return-value]


__all__ = ["JsonErrorAdapterError", "StructuredErrorRaised", "unwrap"]
