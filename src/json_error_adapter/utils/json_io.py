"""JSON I/O utilities.

Safe helpers for reading and writing JSON files. Failures come back as
``StructuredError`` values carrying the file path in their context, so file
problems and parse problems are reported the same way.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Tuple

from json_error_adapter.converter import convert
from json_error_adapter.json_engine import convert_result
from json_error_adapter.schemas import StructuredError


def read_json_safe(
    path: Path,
    default: Any = None,
    encoding: str = "utf-8"
) -> Tuple[Any, Optional[StructuredError]]:
    """Read JSON content safely, returning data and an optional error.

    Args:
        path: Path to the JSON file to read.
        default: Value returned in place of data when reading or parsing fails.
        encoding: Text encoding for the file read.

    Returns:
        Tuple of (data, error):
        - data: Parsed JSON value if successful, otherwise ``default``.
        - error: None if successful; a JSON-ERR-IO error when the file cannot
          be read, or a syntax/EOF error when its content is not valid JSON.

    Examples:
        >>> data, err = read_json_safe(Path("config.json"), default={})
        >>> if err:
        ...     print(err.code, err.context["path"])
    """
    context = {"path": str(path)}
    text, err = convert_result(lambda: path.read_text(encoding=encoding), context)
    if err:
        return default, err

    data, err = convert_result(lambda: json.loads(text), context)
    if err:
        return default, err
    return data, None


def write_json_safe(
    path: Path,
    data: Any,
    indent: int = 2,
    ensure_ascii: bool = False,
    encoding: str = "utf-8"
) -> Tuple[bool, Optional[StructuredError]]:
    """Write JSON data to file, creating parent directories as needed.

    Values that cannot be serialized are reported as JSON-ERR-DATA, write
    failures as JSON-ERR-IO.
    """
    context = {"path": str(path)}
    try:
        text = json.dumps(data, indent=indent, ensure_ascii=ensure_ascii)
    except TypeError as exc:
        return False, convert(exc, context=context)

    def _write() -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text + "\n", encoding=encoding)

    _, err = convert_result(_write, context)
    if err:
        return False, err
    return True, None


__all__ = ["read_json_safe", "write_json_safe"]
