"""Schema registry and JSON Schema export."""

from __future__ import annotations

from typing import Dict, Type

from .config import ConverterSettings
from .errors import ErrorKind, StructuredError
from .failure import ParseFailure

SchemaType = Type


SCHEMA_REGISTRY: Dict[str, SchemaType] = {
    "parse_failure": ParseFailure,
    "error_kind": ErrorKind,
    "structured_error": StructuredError,
    "converter_settings": ConverterSettings,
}


def get_schema_json(name: str) -> Dict:
    """Return JSON Schema for a registered schema name."""
    if name not in SCHEMA_REGISTRY:
        raise KeyError(f"Schema '{name}' is not registered")
    model = SCHEMA_REGISTRY[name]
    return model.model_json_schema()
