"""JSON error adapter package root.

Classifies JSON parsing failures into ``StructuredError`` values carrying a
stable code, an HTTP-equivalent status, a message and a context mapping.
The public API is re-exported here; callers should not need to import from
submodules.
"""

__version__ = "0.1.0"

from json_error_adapter.classification import ERROR_KINDS, FALLBACK_KIND, kind_for  # noqa: F401
from json_error_adapter.config_loader import load_converter_settings  # noqa: F401
from json_error_adapter.converter import ErrorConverter, JsonErrorConverter, convert  # noqa: F401
from json_error_adapter.exceptions import JsonErrorAdapterError, StructuredErrorRaised, unwrap  # noqa: F401
from json_error_adapter.failures import classify_exception  # noqa: F401
from json_error_adapter.json_engine import convert_result, load_model, loads, validate  # noqa: F401
from json_error_adapter.schemas import *  # noqa: F401,F403
from json_error_adapter.schemas import __all__ as SCHEMA_EXPORTS

__all__ = [
    "__version__",
    "ERROR_KINDS",
    "FALLBACK_KIND",
    "kind_for",
    "load_converter_settings",
    "ErrorConverter",
    "JsonErrorConverter",
    "convert",
    "JsonErrorAdapterError",
    "StructuredErrorRaised",
    "unwrap",
    "classify_exception",
    "convert_result",
    "load_model",
    "loads",
    "validate",
] + SCHEMA_EXPORTS
