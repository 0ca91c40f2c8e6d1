"""Configuration loader for converter settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Tuple

import yaml

from json_error_adapter.converter import JsonErrorConverter
from json_error_adapter.json_engine import convert_result, validate
from json_error_adapter.schemas import (
    ConverterSettings,
    ParseFailure,
    ParseFailureCategory,
    StructuredError,
)

logger = logging.getLogger(__name__)

_converter = JsonErrorConverter()


def load_converter_settings(
    path: Optional[Path],
    *,
    required: bool = False,
) -> Tuple[Optional[ConverterSettings], Optional[StructuredError]]:
    """Load converter settings from a YAML or JSON file.

    A missing optional file yields default settings. Files ending in
    ``.yaml``/``.yml`` are read with PyYAML, anything else as JSON.
    """
    if path is None and required:
        raise TypeError("path is required when required=True")
    if path is None or not path.exists():
        if required:
            failure = ParseFailure(
                category=ParseFailureCategory.IO,
                description=f"Settings file not found: {path}",
            )
            return None, _converter.convert(failure, context={"path": str(path)})
        if path is not None:
            logger.warning("Settings file %s not found; using defaults", path)
        return ConverterSettings(), None

    context = {"path": str(path)}
    text, err = convert_result(lambda: path.read_text(encoding="utf-8"), context)
    if err:
        return None, err

    payload, err = _parse(path, text, context)
    if err:
        return None, err

    settings, err = validate("converter_settings", payload or {})
    if err:
        logger.warning("Invalid converter settings in %s: %s", path.name, err.context.get("detail"))
        return None, err.with_context(context)
    return settings, None


def _parse(path: Path, text: str, context: dict):
    if path.suffix.lower() in {".yaml", ".yml"}:
        try:
            return yaml.safe_load(text), None
        except yaml.YAMLError as exc:
            return None, _converter.convert(_from_yaml_error(exc), "Failed to parse settings", context)
    return convert_result(lambda: json.loads(text), context, "Failed to parse settings")


def _from_yaml_error(exc: yaml.YAMLError) -> ParseFailure:
    mark = getattr(exc, "problem_mark", None)
    if mark is None:
        return ParseFailure(category=ParseFailureCategory.SYNTAX, description=str(exc))
    # PyYAML marks are 0-based.
    return ParseFailure(
        category=ParseFailureCategory.SYNTAX,
        line=mark.line + 1,
        column=mark.column + 1,
        description=str(exc),
    )


__all__ = ["load_converter_settings"]
