import json_error_adapter


def test_public_api_exports() -> None:
    for name in json_error_adapter.__all__:
        assert hasattr(json_error_adapter, name), name


def test_version_string() -> None:
    assert isinstance(json_error_adapter.__version__, str)
