"""Registry of metadata types addressable from configuration."""

import logging
from typing import Any

from halmeta.exceptions import InvalidConfigError
from halmeta.models.base_metadata import AbstractMetadata, class_identifier

logger = logging.getLogger(__name__)

CLASS_KEY = "__class__"


class MetadataTypeRegistry:
    """
    Registry mapping metadata tags to their metadata classes.

    Configuration entries name their metadata type by tag in the
    ``__class__`` element; the four built-in types are registered under
    their class names.
    """

    def __init__(self):
        """Initialize the type registry."""
        self._types: dict[str, type[AbstractMetadata]] = {}
        self._logger = logger.getChild(self.__class__.__name__)

    @classmethod
    def default(cls) -> "MetadataTypeRegistry":
        """Create a registry holding the built-in metadata types."""
        from halmeta.models import (
            RouteBasedCollectionMetadata,
            RouteBasedResourceMetadata,
            UrlBasedCollectionMetadata,
            UrlBasedResourceMetadata,
        )

        registry = cls()
        for metadata_class in (
            UrlBasedResourceMetadata,
            UrlBasedCollectionMetadata,
            RouteBasedResourceMetadata,
            RouteBasedCollectionMetadata,
        ):
            registry.register(metadata_class.__name__, metadata_class)
        return registry

    def register(self, tag: str, metadata_class: type[AbstractMetadata]) -> None:
        """
        Register a metadata class under a tag.

        Args:
            tag: The tag used in configuration (e.g., 'UrlBasedResourceMetadata')
            metadata_class: The metadata class to register

        Raises:
            InvalidConfigError: If tag is empty or metadata_class is not metadata
        """
        if not isinstance(tag, str) or not tag.strip():
            raise InvalidConfigError("Metadata tag cannot be empty")

        self._ensure_metadata_class(metadata_class)

        if tag in self._types:
            self._logger.warning(
                f"Overwriting existing metadata type registration for tag '{tag}'"
            )

        self._types[tag] = metadata_class
        self._logger.info(
            f"Registered metadata type '{metadata_class.__name__}' for tag '{tag}'"
        )

    def resolve(self, value: Any) -> tuple[str, type[AbstractMetadata]]:
        """
        Resolve the ``__class__`` element of a configuration entry.

        Args:
            value: A registered tag or a metadata class

        Returns:
            Tuple of (tag, metadata class)

        Raises:
            InvalidConfigError: If the tag is unknown, the value is neither a
                tag nor a class, or the class is not a metadata type
        """
        if isinstance(value, str):
            if value not in self._types:
                available = ", ".join(self.get_available_tags()) or "none"
                raise InvalidConfigError(
                    f'Invalid metadata class provided: "{value}" is not a '
                    f"registered metadata type. Available types: {available}",
                    field_name=CLASS_KEY,
                )
            return value, self._types[value]

        if isinstance(value, type):
            self._ensure_metadata_class(value)
            return self.tag_for(value), value

        raise InvalidConfigError(
            "Invalid metadata class provided: expected a metadata tag or class, "
            f"received {type(value).__name__}",
            field_name=CLASS_KEY,
        )

    def tag_for(self, metadata_class: type) -> str:
        """
        Return the tag a class is registered under.

        Unregistered classes fall back to their fully-qualified identifier,
        so they never collide with a built-in tag.
        """
        for tag, registered in self._types.items():
            if registered is metadata_class:
                return tag
        return class_identifier(metadata_class)

    def is_registered(self, tag: str) -> bool:
        """Check if a tag is registered."""
        return tag in self._types

    def get_available_tags(self) -> list[str]:
        """Return the sorted list of registered tags."""
        return sorted(self._types.keys())

    @staticmethod
    def _ensure_metadata_class(metadata_class: Any) -> None:
        if not isinstance(metadata_class, type) or not issubclass(
            metadata_class, AbstractMetadata
        ):
            name = (
                class_identifier(metadata_class)
                if isinstance(metadata_class, type)
                else repr(metadata_class)
            )
            raise InvalidConfigError(
                f'Metadata class "{name}" does not extend '
                f"{AbstractMetadata.__name__}",
                field_name=CLASS_KEY,
            )

    def __len__(self) -> int:
        """Return the number of registered metadata types."""
        return len(self._types)

    def __contains__(self, tag: str) -> bool:
        """Check if a tag is registered (supports 'in' operator)."""
        return self.is_registered(tag)


# Global type registry instance
_global_registry = MetadataTypeRegistry.default()


def get_global_type_registry() -> MetadataTypeRegistry:
    """Get the process-wide registry of built-in metadata types."""
    return _global_registry
