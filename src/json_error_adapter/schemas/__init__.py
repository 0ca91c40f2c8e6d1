"""Schema exports."""

from .base import SchemaBase, Severity
from .config import ConverterSettings
from .errors import ErrorCode, ErrorKind, StructuredError
from .failure import ParseFailure, ParseFailureCategory
from .registry import SCHEMA_REGISTRY, get_schema_json

__all__ = [
    "SchemaBase",
    "Severity",
    "ConverterSettings",
    "ErrorCode",
    "ErrorKind",
    "StructuredError",
    "ParseFailure",
    "ParseFailureCategory",
    "SCHEMA_REGISTRY",
    "get_schema_json",
]
