"""JSON Engine: parse, validate and report failures as structured errors."""

from __future__ import annotations

import json
from typing import Any, Callable, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from json_error_adapter.converter import ErrorConverter, JsonErrorConverter
from json_error_adapter.failures import CLASSIFIABLE_EXCEPTIONS, INPUT_TYPE_EXCEPTIONS
from json_error_adapter.schemas import SCHEMA_REGISTRY, ParseFailure, ParseFailureCategory, StructuredError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

_converter = JsonErrorConverter()


def convert_result(
    parse: Callable[[], T],
    context: Optional[Mapping[str, Any]] = None,
    message: str = "",
    *,
    converter: Optional[ErrorConverter] = None,
) -> Tuple[Optional[T], Optional[StructuredError]]:
    """Run ``parse`` and convert a parse failure into a structured error.

    Returns (value, None) on success, (None, StructuredError) on failure.
    Exceptions that are not parse failures, TypeError included, propagate
    unchanged. Passing something other than a callable raises TypeError.

    Examples:
        >>> value, err = convert_result(lambda: json.loads(text))
        >>> if err:
        ...     return None, err
    """
    return _run(parse, context, message, converter or _converter, CLASSIFIABLE_EXCEPTIONS)


def _run(parse, context, message, converter, catch):
    if not callable(parse):
        raise TypeError(f"parse must be a zero-argument callable, got {type(parse).__name__}")
    try:
        return parse(), None
    except catch as exc:
        return None, converter.convert(exc, message, context)


def loads(
    text: Any,
    context: Optional[Mapping[str, Any]] = None,
    message: str = "",
) -> Tuple[Any | None, StructuredError | None]:
    """Parse JSON text (str, bytes or bytearray).

    Any other input type is reported as a data mismatch.
    """
    return _run(lambda: json.loads(text), context, message, _converter, INPUT_TYPE_EXCEPTIONS)


def load_model(
    model: Type[M],
    text: Any,
    context: Optional[Mapping[str, Any]] = None,
    message: str = "",
) -> Tuple[M | None, StructuredError | None]:
    """Parse JSON text straight into a pydantic model.

    Malformed text maps to syntax/EOF errors; well-formed text that does not
    fit the model maps to a data mismatch.
    """
    return _run(lambda: model.model_validate_json(text), context, message, _converter, INPUT_TYPE_EXCEPTIONS)


def validate(schema_name: str, payload: Any) -> Tuple[Any | None, StructuredError | None]:
    """Validate an already-parsed payload against a registered schema."""
    model = SCHEMA_REGISTRY.get(schema_name)
    if model is None:
        failure = ParseFailure(
            category=ParseFailureCategory.DATA,
            description=f"Unknown schema '{schema_name}'",
        )
        return None, _converter.convert(failure, context={"schema": schema_name})
    try:
        return model.model_validate(payload), None
    except ValidationError as exc:
        return None, _converter.convert(exc, context={"schema": schema_name})


__all__ = ["convert_result", "loads", "load_model", "validate"]
