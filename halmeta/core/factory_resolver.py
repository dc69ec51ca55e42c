"""Resolution of metadata factories from defaults and configuration overrides."""

import inspect
import logging
from collections.abc import Mapping
from typing import Any

from halmeta.exceptions import InvalidConfigError
from halmeta.factories import (
    AbstractMetadataFactory,
    RouteBasedCollectionMetadataFactory,
    RouteBasedResourceMetadataFactory,
    UrlBasedCollectionMetadataFactory,
    UrlBasedResourceMetadataFactory,
)

from .protocols import MetadataFactory

logger = logging.getLogger(__name__)

# Factories addressable by name from configuration files.
BUILTIN_FACTORIES: dict[str, type[AbstractMetadataFactory]] = {
    factory.__name__: factory
    for factory in (
        UrlBasedResourceMetadataFactory,
        UrlBasedCollectionMetadataFactory,
        RouteBasedResourceMetadataFactory,
        RouteBasedCollectionMetadataFactory,
    )
}


def _binds_factory_signature(value: Any) -> bool:
    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError):
        return False

    try:
        signature.bind(None, "", {})
    except TypeError:
        return False
    return True


class FactoryResolver:
    """
    Resolves the factory used to create each metadata type.

    Holds the default tag-to-factory table; per-build overrides from
    configuration take precedence over it. Resolution has no side effects.
    """

    def __init__(self, defaults: Mapping[str, Any] | None = None):
        """
        Initialize the resolver.

        Args:
            defaults: Initial tag-to-factory table
        """
        self._defaults: dict[str, MetadataFactory] = {}
        self._logger = logger.getChild(self.__class__.__name__)
        for tag, factory in (defaults or {}).items():
            self.register_default(tag, factory)

    @classmethod
    def default(cls) -> "FactoryResolver":
        """Create a resolver holding the factories of the built-in types."""
        return cls(
            {
                factory.metadata_class.__name__: factory
                for factory in BUILTIN_FACTORIES.values()
            }
        )

    def register_default(self, tag: str, factory: Any) -> None:
        """
        Register the default factory for a metadata tag.

        Args:
            tag: The metadata tag
            factory: A factory instance, factory class, callable or the name
                of a built-in factory

        Raises:
            InvalidConfigError: If the factory does not implement MetadataFactory
        """
        if tag in self._defaults:
            self._logger.warning(
                f"Overwriting existing default factory for tag '{tag}'"
            )

        self._defaults[tag] = self._coerce(tag, factory)
        self._logger.info(f"Registered default factory for tag '{tag}'")

    def resolve(
        self, tag: str, overrides: Mapping[str, Any] | None = None
    ) -> MetadataFactory:
        """
        Get the factory for a metadata tag.

        Args:
            tag: The metadata tag to look up
            overrides: Tag-to-factory table taken from configuration

        Returns:
            The configured override if any, otherwise the default factory

        Raises:
            InvalidConfigError: If no factory is known for the tag, or the
                override does not implement MetadataFactory
        """
        if overrides and tag in overrides:
            return self._coerce(tag, overrides[tag])

        if tag in self._defaults:
            return self._defaults[tag]

        raise InvalidConfigError(
            f'Unable to create metadata of type "{tag}"; please provide a factory '
            "in your configuration",
            field_name="metadata-factories",
        )

    def has_default(self, tag: str) -> bool:
        """Check if a default factory is registered for a tag."""
        return tag in self._defaults

    @staticmethod
    def is_valid_factory(value: Any) -> bool:
        """
        Check if a value can serve as a metadata factory.

        Accepts AbstractMetadataFactory instances and concrete subclasses
        declaring a ``metadata_class``, the names of built-in factories, and
        callables accepting ``(container, requested_name, metadata)``.
        """
        if isinstance(value, str):
            return value in BUILTIN_FACTORIES
        if isinstance(value, type):
            return (
                issubclass(value, AbstractMetadataFactory)
                and not inspect.isabstract(value)
                and value.is_concrete()
            )
        if isinstance(value, AbstractMetadataFactory):
            return True
        return callable(value) and _binds_factory_signature(value)

    def _coerce(self, tag: str, value: Any) -> MetadataFactory:
        if not self.is_valid_factory(value):
            name = value if isinstance(value, str) else getattr(
                value, "__qualname__", type(value).__qualname__
            )
            raise InvalidConfigError(
                f'Metadata factory for "{tag}", "{name}", is not a valid metadata '
                f"factory class; does not implement {MetadataFactory.__name__}",
                field_name="metadata-factories",
            )

        if isinstance(value, str):
            value = BUILTIN_FACTORIES[value]
        if isinstance(value, type):
            return value()
        return value


# Global factory resolver instance
_global_resolver = FactoryResolver.default()


def get_global_factory_resolver() -> FactoryResolver:
    """Get the process-wide resolver holding the built-in default factories."""
    return _global_resolver
