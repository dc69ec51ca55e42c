"""Read HAL metadata configuration fragments from YAML or JSON files."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from halmeta.exceptions import ConfigLoadError

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def _parse_yaml(text: str) -> Any:
    return _yaml.load(text)


def _parse_json(text: str) -> Any:
    return json.loads(text)


def merge_configs(base: Mapping[str, Any], other: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge two configuration fragments into a new mapping.

    Nested mappings are merged key by key and lists are concatenated, so
    ``metadataMap`` entries from every fragment are kept. Any other value
    in ``other`` replaces the one in ``base``.
    """
    merged = dict(base)
    for key, value in other.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_configs(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            merged[key] = current + value
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """
    Loads the application configuration consumed by MetadataMapFactory.

    A configuration may be split across several fragments, e.g. one file
    per module each contributing its own ``metadataMap`` entries.
    """

    parsers: dict[str, Callable[[str], Any]] = {
        ".yaml": _parse_yaml,
        ".yml": _parse_yaml,
        ".json": _parse_json,
    }

    @classmethod
    def load(cls, path: str | Path) -> dict[str, Any]:
        """
        Load a single configuration fragment.

        Raises:
            ConfigLoadError: If the file is missing, has an unknown suffix,
                cannot be parsed or does not hold a mapping
        """
        file_path = Path(path)
        if not file_path.is_file():
            logger.error(f"HAL configuration not found: {file_path}")
            raise ConfigLoadError(
                f"HAL configuration not found: {file_path}", path=str(file_path)
            )

        parser = cls.parsers.get(file_path.suffix.lower())
        if parser is None:
            raise ConfigLoadError(
                f"Cannot read HAL configuration from '{file_path.suffix}' files; "
                f"expected one of {', '.join(sorted(cls.parsers))}",
                path=str(file_path),
            )

        try:
            data = parser(file_path.read_text(encoding="utf-8"))
        except (YAMLError, ValueError) as e:
            raise ConfigLoadError(
                f"Invalid HAL configuration in {file_path.name}: {e}",
                path=str(file_path),
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigLoadError(
                f"HAL configuration in {file_path.name} must be a mapping, "
                f"received {type(data).__name__}",
                path=str(file_path),
            )

        entries = data.get("metadataMap")
        logger.debug(
            f"Loaded {file_path.name} "
            f"({len(entries) if isinstance(entries, (list, dict)) else 0} "
            "metadata entries)"
        )
        return data

    @classmethod
    def load_all(cls, *paths: str | Path) -> dict[str, Any]:
        """Load several fragments and merge them in order."""
        config: dict[str, Any] = {}
        for path in paths:
            config = merge_configs(config, cls.load(path))
        logger.info(f"Merged HAL configuration from {len(paths)} file(s)")
        return config
