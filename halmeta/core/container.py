"""Minimal in-memory service container."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from halmeta.exceptions import NotFoundError
from halmeta.io.config_loader import ConfigLoader

logger = logging.getLogger(__name__)

CONFIG_SERVICE = "config"


class ServiceContainer:
    """
    Dictionary-backed implementation of the Container protocol.

    Intended for bootstrap code and tests; applications with their own
    DI container only need to expose ``has`` and ``get``.
    """

    def __init__(self, services: dict[str, Any] | None = None) -> None:
        self._services: dict[str, Any] = dict(services or {})
        self._logger = logger.getChild(self.__class__.__name__)

    @classmethod
    def from_config_file(cls, path: str | Path) -> ServiceContainer:
        """Create a container exposing a configuration file as ``config``."""
        return cls({CONFIG_SERVICE: ConfigLoader.load(path)})

    @classmethod
    def from_config_files(cls, *paths: str | Path) -> ServiceContainer:
        """Create a container exposing the merged fragments as ``config``."""
        return cls({CONFIG_SERVICE: ConfigLoader.load_all(*paths)})

    def set(self, name: str, service: Any) -> ServiceContainer:
        if name in self._services:
            self._logger.warning(f"Overwriting existing service '{name}'")
        self._services[name] = service
        return self

    def has(self, name: str) -> bool:
        return name in self._services

    def get(self, name: str) -> Any:
        if name not in self._services:
            raise NotFoundError(
                f"Service '{name}' is not registered in the container",
                identifier=name,
            )
        return self._services[name]
