"""Utility modules for the JSON error adapter."""

from .json_io import (
    read_json_safe,
    write_json_safe,
)

from .logging_utils import (
    append_json_line,
    append_error_record,
    rotate_log_if_needed,
    read_error_records,
)

__all__ = [
    # JSON I/O utils
    "read_json_safe",
    "write_json_safe",
    # Error log utils
    "append_json_line",
    "append_error_record",
    "rotate_log_if_needed",
    "read_error_records",
]
