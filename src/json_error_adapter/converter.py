"""Converters turning parse failures into ``StructuredError`` values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar, Union

from json_error_adapter.classification import kind_for
from json_error_adapter.failures import classify_exception
from json_error_adapter.schemas import (
    ConverterSettings,
    ParseFailure,
    ParseFailureCategory,
    StructuredError,
)

F = TypeVar("F")


class ErrorConverter(ABC, Generic[F]):
    """Interface shared by every adapter producing structured errors.

    Downstream code (HTTP handlers, log writers) depends on this interface
    only, so adapters for other error sources plug in without changes.
    """

    @abstractmethod
    def convert(
        self,
        failure: F,
        message: str = "",
        context: Optional[Mapping[str, Any]] = None,
    ) -> StructuredError:
        """Return a new structured error describing ``failure``."""


class JsonErrorConverter(ErrorConverter[Union[ParseFailure, BaseException]]):
    """Classify JSON parse failures into structured errors.

    Conversion is total: unknown categories resolve to the fallback kind.
    The converter never logs and never mutates its inputs.
    """

    def __init__(self, settings: Optional[ConverterSettings] = None) -> None:
        self.settings = settings or ConverterSettings()

    def convert(
        self,
        failure: Union[ParseFailure, BaseException],
        message: str = "",
        context: Optional[Mapping[str, Any]] = None,
    ) -> StructuredError:
        if isinstance(failure, BaseException):
            failure = classify_exception(failure)
        elif not isinstance(failure, ParseFailure):
            raise TypeError(f"Expected ParseFailure or exception, got {type(failure).__name__}")

        kind = kind_for(failure.category)
        return StructuredError(
            code=kind.code,
            kind=kind.name,
            http_status=kind.http_status,
            message=message or self._default_message(failure, kind.default_message),
            context=self._merge_context(failure, context or {}),
            severity=kind.severity,
        )

    def _default_message(self, failure: ParseFailure, builtin: str) -> str:
        if isinstance(failure.category, ParseFailureCategory):
            return self.settings.message_for(failure.category) or builtin
        return builtin

    def _merge_context(self, failure: ParseFailure, context: Mapping[str, Any]) -> Dict[str, Any]:
        merged: Dict[str, Any] = dict(context)
        if self.settings.include_diagnostics:
            # Caller-supplied values take precedence over derived diagnostics.
            merged.setdefault(self.settings.line_key, failure.line)
            merged.setdefault(self.settings.column_key, failure.column)
            merged.setdefault(self.settings.detail_key, failure.description)
        if self.settings.sort_context_keys:
            return {key: merged[key] for key in sorted(merged)}
        return merged


_default_converter = JsonErrorConverter()


def convert(
    failure: Union[ParseFailure, BaseException],
    message: str = "",
    context: Optional[Mapping[str, Any]] = None,
) -> StructuredError:
    """Convert with the default-configured ``JsonErrorConverter``."""
    return _default_converter.convert(failure, message, context)


__all__ = ["ErrorConverter", "JsonErrorConverter", "convert"]
