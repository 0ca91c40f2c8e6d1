"""Classify exceptions raised while parsing JSON into ``ParseFailure`` values.

Supported sources:
- ``json.JSONDecodeError`` from the standard library decoder
- pydantic ``ValidationError`` from ``model_validate_json`` / ``model_validate``
- ``UnicodeDecodeError`` for undecodable input bytes
- ``OSError`` for reads that fail before parsing starts
- ``TypeError`` for values of the wrong type handed to the parser (only
  where the caller opts in, see ``INPUT_TYPE_EXCEPTIONS``)

Anything else is reported with the ``unknown`` category so the converter
resolves it to the fallback kind.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Tuple

from pydantic import ValidationError

from json_error_adapter.schemas import ParseFailure, ParseFailureCategory

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "unknown"

CLASSIFIABLE_EXCEPTIONS: Tuple[type, ...] = (
    json.JSONDecodeError,
    ValidationError,
    UnicodeDecodeError,
    OSError,
)

# A wrong input type is a data error only where the input is the JSON
# document itself; elsewhere TypeError is a programming error.
INPUT_TYPE_EXCEPTIONS: Tuple[type, ...] = CLASSIFIABLE_EXCEPTIONS + (TypeError,)

_POSITION_RE = re.compile(r"at line (\d+) column (\d+)")
_INVALID_JSON_PREFIX = "Invalid JSON: "


def classify_exception(exc: BaseException) -> ParseFailure:
    """Build a ``ParseFailure`` describing ``exc``.

    Order matters: ``JSONDecodeError`` and ``UnicodeDecodeError`` are both
    ``ValueError`` subclasses and must be checked before any broader type.
    """
    if isinstance(exc, json.JSONDecodeError):
        return _from_decode_error(exc)
    if isinstance(exc, ValidationError):
        return _from_validation_error(exc)
    if isinstance(exc, UnicodeDecodeError):
        return ParseFailure(
            category=ParseFailureCategory.SYNTAX,
            line=0,
            column=exc.start + 1,
            description=str(exc),
        )
    if isinstance(exc, OSError):
        return ParseFailure(category=ParseFailureCategory.IO, description=str(exc))
    if isinstance(exc, TypeError):
        return ParseFailure(category=ParseFailureCategory.DATA, description=str(exc))

    logger.warning("Unrecognized parse failure %s; using fallback category", type(exc).__name__)
    return ParseFailure(category=UNKNOWN_CATEGORY, description=f"{type(exc).__name__}: {exc}")


def _from_decode_error(exc: json.JSONDecodeError) -> ParseFailure:
    document = exc.doc if isinstance(exc.doc, str) else ""
    truncated = exc.pos >= len(document.rstrip()) or exc.msg.startswith("Unterminated string")
    return ParseFailure(
        category=ParseFailureCategory.EOF if truncated else ParseFailureCategory.SYNTAX,
        line=exc.lineno,
        column=exc.colno,
        description=str(exc),
    )


def _from_validation_error(exc: ValidationError) -> ParseFailure:
    errors = exc.errors()
    first: Dict[str, Any] = errors[0] if errors else {}

    if first.get("type") == "json_invalid":
        detail = str((first.get("ctx") or {}).get("error", first.get("msg", "")))
        if detail.startswith(_INVALID_JSON_PREFIX):
            detail = detail[len(_INVALID_JSON_PREFIX):]
        line, column = _position(detail)
        category = ParseFailureCategory.EOF if detail.startswith("EOF while parsing") else ParseFailureCategory.SYNTAX
        return ParseFailure(category=category, line=line, column=column, description=detail)

    return ParseFailure(
        category=ParseFailureCategory.DATA,
        description=_describe_mismatches(errors),
    )


def _position(detail: str) -> Tuple[int, int]:
    match = _POSITION_RE.search(detail)
    if match is None:
        return 0, 0
    return int(match.group(1)), int(match.group(2))


def _describe_mismatches(errors: List[Dict[str, Any]]) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(item) for item in error.get("loc", ())) or "<root>"
        parts.append(f"{location}: {error.get('msg', '')}")
    return "; ".join(parts)


__all__ = ["CLASSIFIABLE_EXCEPTIONS", "INPUT_TYPE_EXCEPTIONS", "UNKNOWN_CATEGORY", "classify_exception"]
