"""Unit tests for ServiceContainer."""

from __future__ import annotations

import logging

import pytest

from halmeta.core.container import ServiceContainer
from halmeta.core.protocols import Container
from halmeta.exceptions import NotFoundError


def test_set_has_get() -> None:
    container = ServiceContainer().set("config", {"metadataMap": []})
    assert container.has("config")
    assert container.get("config") == {"metadataMap": []}
    assert isinstance(container, Container)


def test_get_unknown_service_raises() -> None:
    with pytest.raises(NotFoundError, match="not registered") as exc:
        ServiceContainer().get("config")
    assert "[NOT_FOUND]" in str(exc.value)
    assert "identifier=config" in str(exc.value)


def test_set_overwrite_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    container = ServiceContainer({"config": {}})
    container.set("config", {"metadataMap": []})
    assert any("Overwriting" in r.message for r in caplog.records)
