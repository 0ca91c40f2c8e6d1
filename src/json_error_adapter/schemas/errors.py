"""Structured error shapes produced by the converters."""

from __future__ import annotations

import copy
import json
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from pydantic import Field, field_serializer, field_validator

from .base import SchemaBase, Severity


class ErrorCode(str, Enum):
    SYNTAX = "JSON-ERR-SYNTAX"
    EOF = "JSON-ERR-EOF"
    DATA = "JSON-ERR-DATA"
    IO = "JSON-ERR-IO"
    UNKNOWN = "JSON-ERR-UNKNOWN"


class ErrorKind(SchemaBase):
    """One row of the classification table."""

    code: ErrorCode
    name: str
    http_status: int = Field(ge=100, le=599)
    default_message: str
    description: str = Field(default="")
    severity: Severity = Field(default=Severity.ERROR)


class StructuredError(SchemaBase):
    """Machine- and human-readable error record.

    ``context`` is a read-only deep copy of the mapping it was built from and
    keeps that mapping's order, so serialized output is deterministic.
    """

    code: ErrorCode
    kind: str
    http_status: int = Field(ge=100, le=599)
    message: str
    context: Mapping[str, Any] = Field(default_factory=lambda: MappingProxyType({}))
    severity: Severity = Field(default=Severity.ERROR)

    @field_validator("context")
    @classmethod
    def _freeze_context(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return _frozen(value)

    @field_serializer("context")
    def _serialize_context(self, value: Mapping[str, Any]) -> Dict[str, Any]:
        return dict(value)

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.http_status < 500

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def with_context(self, extra: Mapping[str, Any]) -> "StructuredError":
        """Return a copy whose context is extended by ``extra``.

        Keys already present keep their current values. A context that was in
        lexical key order stays in lexical key order.
        """
        keys = list(self.context)
        context = dict(self.context)
        for key, value in extra.items():
            context.setdefault(key, value)
        if keys == sorted(keys):
            context = {key: context[key] for key in sorted(context)}
        return self.model_copy(update={"context": _frozen(context)})


def _frozen(value: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(copy.deepcopy(dict(value)))
