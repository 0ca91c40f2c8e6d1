import json

import pytest

from json_error_adapter.converter import ErrorConverter, JsonErrorConverter, convert
from json_error_adapter.schemas import (
    ConverterSettings,
    ErrorCode,
    ParseFailure,
    ParseFailureCategory,
    Severity,
    StructuredError,
)


def _failure(category, line=3, column=7, description="problem here") -> ParseFailure:
    return ParseFailure(category=category, line=line, column=column, description=description)


@pytest.mark.parametrize(
    "category, code, status",
    [
        (ParseFailureCategory.SYNTAX, ErrorCode.SYNTAX, 400),
        (ParseFailureCategory.EOF, ErrorCode.EOF, 400),
        (ParseFailureCategory.DATA, ErrorCode.DATA, 400),
        (ParseFailureCategory.IO, ErrorCode.IO, 500),
    ],
)
def test_code_and_status_per_category(category, code, status) -> None:
    err = convert(_failure(category))
    assert isinstance(err, StructuredError)
    assert err.code == code
    assert err.http_status == status


def test_empty_message_uses_default() -> None:
    err = convert(_failure(ParseFailureCategory.EOF), "")
    assert err.message == "Unexpected end of JSON input"


def test_caller_message_used_verbatim() -> None:
    err = convert(_failure(ParseFailureCategory.DATA), "  Payload rejected!  ")
    assert err.message == "  Payload rejected!  "


def test_context_merge_adds_diagnostics() -> None:
    caller = {"input": "{", "request_id": 12}
    err = convert(_failure(ParseFailureCategory.SYNTAX), "bad", caller)
    assert err.message == "bad"
    assert err.http_status == 400
    assert err.context == {
        "column": 7,
        "detail": "problem here",
        "input": "{",
        "line": 3,
        "request_id": 12,
    }
    assert caller == {"input": "{", "request_id": 12}


def test_caller_context_wins_over_diagnostics() -> None:
    err = convert(_failure(ParseFailureCategory.SYNTAX), context={"line": "caller", "detail": None})
    assert err.context["line"] == "caller"
    assert err.context["detail"] is None
    assert err.context["column"] == 7


def test_context_sorted_by_default() -> None:
    err = convert(_failure(ParseFailureCategory.SYNTAX), context={"zeta": 1, "alpha": 2})
    assert list(err.context) == ["alpha", "column", "detail", "line", "zeta"]


def test_insertion_order_when_sorting_disabled() -> None:
    converter = JsonErrorConverter(ConverterSettings(sort_context_keys=False))
    err = converter.convert(_failure(ParseFailureCategory.SYNTAX), context={"zeta": 1, "alpha": 2})
    assert list(err.context) == ["zeta", "alpha", "line", "column", "detail"]


def test_custom_reserved_keys() -> None:
    settings = ConverterSettings(line_key="json_line", column_key="json_col", detail_key="reason")
    err = JsonErrorConverter(settings).convert(_failure(ParseFailureCategory.EOF))
    assert err.context == {"json_col": 7, "json_line": 3, "reason": "problem here"}


def test_diagnostics_can_be_disabled() -> None:
    settings = ConverterSettings(include_diagnostics=False)
    err = JsonErrorConverter(settings).convert(_failure(ParseFailureCategory.EOF), context={"a": 1})
    assert err.context == {"a": 1}


def test_default_message_override() -> None:
    settings = ConverterSettings(default_messages={"syntax": "Request body is not JSON"})
    converter = JsonErrorConverter(settings)
    assert converter.convert(_failure(ParseFailureCategory.SYNTAX)).message == "Request body is not JSON"
    assert converter.convert(_failure(ParseFailureCategory.EOF)).message == "Unexpected end of JSON input"


def test_unknown_category_never_aborts() -> None:
    err = convert(_failure("stack_overflow"), context={"input": "[[[["})
    assert err.code == ErrorCode.UNKNOWN
    assert err.http_status == 500
    assert err.message == "Unknown JSON error"
    assert err.severity == Severity.CRITICAL
    assert err.context["input"] == "[[[["


def test_convert_accepts_exceptions() -> None:
    with pytest.raises(json.JSONDecodeError) as info:
        json.loads("invalid json")
    err = convert(info.value, "Failed to parse JSON", {"input": "invalid json"})
    assert err.code == ErrorCode.SYNTAX
    assert err.kind == "JsonSyntax"
    assert err.context["line"] == 1
    assert err.context["column"] == 1


def test_convert_rejects_other_inputs() -> None:
    with pytest.raises(TypeError):
        convert("not a failure")  # type: ignore[arg-type]


def test_error_converter_is_pluggable() -> None:
    class KeyErrorConverter(ErrorConverter[KeyError]):
        def convert(self, failure, message="", context=None):
            return JsonErrorConverter().convert(
                ParseFailure(category=ParseFailureCategory.DATA, description=f"missing key {failure}"),
                message,
                context,
            )

    converters = [JsonErrorConverter(), KeyErrorConverter()]
    failures = [_failure(ParseFailureCategory.SYNTAX), KeyError("id")]
    codes = [c.convert(f).code for c, f in zip(converters, failures)]
    assert codes == [ErrorCode.SYNTAX, ErrorCode.DATA]

    with pytest.raises(TypeError):
        ErrorConverter()  # type: ignore[abstract]


def test_converted_context_is_detached_from_caller() -> None:
    nested = {"ids": [1]}
    err = convert(_failure(ParseFailureCategory.SYNTAX, line=1, column=1), context={"req": nested})
    nested["ids"].append(2)
    with pytest.raises(TypeError):
        err.context["line"] = 999  # type: ignore[index]
    assert err.context["line"] == 1
    assert err.context["req"] == {"ids": [1]}


def test_with_context_after_convert_stays_sorted() -> None:
    err = convert(_failure(ParseFailureCategory.SYNTAX), context={"b": 1}).with_context({"a": 0})
    assert list(err.context) == ["a", "b", "column", "detail", "line"]
