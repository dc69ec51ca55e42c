"""Unit tests for the exception hierarchy."""

from halmeta.exceptions import (
    ConfigLoadError,
    HalMetadataError,
    InvalidConfigError,
    NotFoundError,
)


def test_hierarchy() -> None:
    for error_cls in (InvalidConfigError, NotFoundError, ConfigLoadError):
        assert issubclass(error_cls, HalMetadataError)


def test_invalid_config_renders_code_and_context() -> None:
    error = InvalidConfigError("boom", entry_index=0, field_name="url")
    assert str(error) == "[INVALID_CONFIG] boom (Context: entry_index=0, field_name=url)"
    assert error.message == "boom"


def test_invalid_config_without_context() -> None:
    assert str(InvalidConfigError("boom")) == "[INVALID_CONFIG] boom"


def test_recovery_hints() -> None:
    assert "'route'" in InvalidConfigError("x", field_name="route").get_recovery_hint()
    assert "metadata map" in InvalidConfigError("x").get_recovery_hint()
