"""Classification table mapping parse failure categories to error kinds."""

from __future__ import annotations

from typing import Dict, Mapping, Union

from json_error_adapter.schemas import ErrorCode, ErrorKind, ParseFailureCategory, Severity


ERROR_KINDS: Mapping[ParseFailureCategory, ErrorKind] = {
    ParseFailureCategory.SYNTAX: ErrorKind(
        code=ErrorCode.SYNTAX,
        name="JsonSyntax",
        http_status=400,
        default_message="Invalid JSON syntax",
        description="Syntax Error",
    ),
    ParseFailureCategory.EOF: ErrorKind(
        code=ErrorCode.EOF,
        name="JsonEof",
        http_status=400,
        default_message="Unexpected end of JSON input",
        description="Reached the end of the input data",
    ),
    ParseFailureCategory.DATA: ErrorKind(
        code=ErrorCode.DATA,
        name="JsonData",
        http_status=400,
        default_message="JSON data type mismatch",
        description="Invalid JSON data",
    ),
    ParseFailureCategory.IO: ErrorKind(
        code=ErrorCode.IO,
        name="JsonIo",
        http_status=500,
        default_message="I/O error while reading JSON",
        description="IO Error",
        severity=Severity.CRITICAL,
    ),
}

FALLBACK_KIND = ErrorKind(
    code=ErrorCode.UNKNOWN,
    name="JsonUnknown",
    http_status=500,
    default_message="Unknown JSON error",
    description="Unrecognized parse failure",
    severity=Severity.CRITICAL,
)


def kind_for(category: Union[ParseFailureCategory, str]) -> ErrorKind:
    """Return the error kind for a category, or the fallback when unknown."""
    if isinstance(category, ParseFailureCategory):
        return ERROR_KINDS.get(category, FALLBACK_KIND)
    try:
        return ERROR_KINDS.get(ParseFailureCategory(category), FALLBACK_KIND)
    except ValueError:
        return FALLBACK_KIND


def kinds_by_code() -> Dict[ErrorCode, ErrorKind]:
    """Index every kind, fallback included, by its error code."""
    index = {kind.code: kind for kind in ERROR_KINDS.values()}
    index[FALLBACK_KIND.code] = FALLBACK_KIND
    return index


__all__ = ["ERROR_KINDS", "FALLBACK_KIND", "kind_for", "kinds_by_code"]
