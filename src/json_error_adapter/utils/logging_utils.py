"""Logging utilities.

Persist structured errors as JSON lines, with size-based rotation of the
log file. Each line is the output of ``StructuredError.to_json()`` with an
optional ``logged_at`` timestamp.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
from zoneinfo import ZoneInfo

from json_error_adapter.json_engine import convert_result, load_model
from json_error_adapter.schemas import StructuredError

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(ZoneInfo("UTC")).isoformat()


def append_json_line(path: Path, record: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """Serialize ``record`` as one JSON line and append it to ``path``."""
    line = json.dumps(record, ensure_ascii=False, separators=(",", ":"))
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
    except OSError as exc:
        return False, f"Failed to append error record to {path}: {exc}"
    return True, None


def append_error_record(
    path: Path,
    error: StructuredError,
    *,
    timestamp: bool = True,
    max_size: Optional[int] = None,
    keep_count: int = 3,
) -> Tuple[bool, Optional[str]]:
    """Append one structured error to a JSON-lines log.

    When ``max_size`` is given the log is rotated before writing if it has
    grown past that many bytes.
    """
    if max_size is not None:
        rotated, rotate_err, _ = rotate_log_if_needed(path, max_size, keep_count)
        if not rotated:
            logger.warning("Error log rotation failed: %s", rotate_err)

    record: Dict[str, Any] = error.to_dict()
    if timestamp:
        record["logged_at"] = _now_iso()
    return append_json_line(path, record)


def rotate_log_if_needed(
    path: Path,
    max_size: int,
    keep_count: int = 3,
) -> Tuple[bool, Optional[str], Dict[str, Any]]:
    """Rotate the log file when it exceeds ``max_size`` bytes.

    Archives get numeric suffixes (.1 newest); at most ``keep_count`` are kept.

    Returns:
        Tuple of (success, error_message, metadata). Metadata carries
        'status' and, after a rotation, 'rotated_to'.
    """
    metadata: Dict[str, Any] = {"path": str(path), "max_size": max_size, "keep_count": keep_count}

    if keep_count < 1:
        return (False, "keep_count must be >= 1", metadata)

    if not path.exists():
        metadata["status"] = "Log absent; nothing to rotate"
        return (True, None, metadata)

    try:
        current_size = path.stat().st_size
    except OSError as exc:
        return (False, f"Failed to stat log {path}: {exc}", metadata)
    if current_size <= max_size:
        metadata["size"] = current_size
        metadata["status"] = "Log size within threshold"
        return (True, None, metadata)

    try:
        for slot in range(keep_count - 1, 0, -1):
            src = path.parent / f"{path.name}.{slot}"
            if src.exists():
                src.replace(path.parent / f"{path.name}.{slot + 1}")
        first_archive = path.parent / f"{path.name}.1"
        path.replace(first_archive)
    except OSError as exc:
        return (False, f"Failed to rotate log {path}: {exc}", metadata)

    metadata["rotated_to"] = str(first_archive)
    metadata["status"] = "Log rotated"
    return (True, None, metadata)


def read_error_records(path: Path) -> Tuple[list, Optional[StructuredError]]:
    """Load every structured error from a JSON-lines log.

    Lines that fail to parse stop the read; the error carries the line number
    of the log file in its context.
    """
    if not path.exists():
        return [], None
    text, err = convert_result(lambda: path.read_text(encoding="utf-8"), {"path": str(path)})
    if err:
        return [], err

    records = []
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        record, err = load_model(StructuredError, line, {"path": str(path), "log_line": number})
        if err:
            return records, err
        records.append(record)
    return records, None


__all__ = ["append_json_line", "append_error_record", "rotate_log_if_needed", "read_error_records"]
