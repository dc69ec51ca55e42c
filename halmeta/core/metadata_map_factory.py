"""Build a MetadataMap from the application configuration."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from halmeta.exceptions import InvalidConfigError
from halmeta.factories import AbstractMetadataFactory
from halmeta.models.base_metadata import AbstractMetadata

from .container import CONFIG_SERVICE
from .factory_resolver import FactoryResolver, get_global_factory_resolver
from .metadata_map import MetadataMap
from .protocols import Container
from .type_registry import CLASS_KEY, MetadataTypeRegistry, get_global_type_registry

logger = logging.getLogger(__name__)

METADATA_MAP_KEY = "metadataMap"
HAL_CONFIG_KEY = "mezzio-hal"
METADATA_FACTORIES_KEY = "metadata-factories"


class MetadataMapFactory:
    """
    Validates the metadata configuration and builds the metadata map.

    Each entry of ``metadataMap`` names its metadata type in ``__class__``;
    the matching factory is looked up in the ``metadata-factories`` overrides
    first and in the default table second, then called with the remaining
    fields. The first invalid entry aborts the build.

    Subclasses can override create_metadata() to handle extra types
    without registering a factory.
    """

    def __init__(
        self,
        type_registry: MetadataTypeRegistry | None = None,
        factory_resolver: FactoryResolver | None = None,
    ):
        """
        Initialize the map factory.

        Args:
            type_registry: Registry resolving ``__class__`` elements; defaults
                to the global registry of built-in types
            factory_resolver: Resolver holding the default factories; defaults
                to the global resolver
        """
        if type_registry is None:
            type_registry = get_global_type_registry()
        if factory_resolver is None:
            factory_resolver = get_global_factory_resolver()

        self._types = type_registry
        self._resolver = factory_resolver
        self._logger = logger.getChild(self.__class__.__name__)

    def __call__(self, container: Container) -> MetadataMap:
        """
        Build the metadata map from the container's ``config`` service.

        Returns an empty map when the container has no configuration.
        """
        if not container.has(CONFIG_SERVICE):
            self._logger.debug("No configuration service; returning empty map")
            return MetadataMap()

        return self.build(container.get(CONFIG_SERVICE), container)

    def build(
        self, config: Mapping[str, Any] | None, container: Container | None = None
    ) -> MetadataMap:
        """
        Build a metadata map from a configuration mapping.

        The ``metadataMap`` container and the ``mezzio-hal`` factory table
        are both validated before any entry, so a malformed factory table
        fails the build even when ``metadataMap`` is empty.

        Args:
            config: The application configuration
            container: Container handed over to the metadata factories

        Returns:
            The populated metadata map

        Raises:
            InvalidConfigError: On the first invalid element encountered
        """
        metadata_map = MetadataMap()
        if config is None:
            return metadata_map

        if not isinstance(config, Mapping):
            raise InvalidConfigError(
                "Invalid configuration; expected an array, received "
                f"{type(config).__name__}"
            )

        if METADATA_MAP_KEY not in config:
            self._logger.debug(f"No '{METADATA_MAP_KEY}' entry; returning empty map")
            return metadata_map

        entries = self._get_entries(config[METADATA_MAP_KEY])
        overrides = self._get_factory_overrides(config)

        self._logger.info(f"Building metadata map from {len(entries)} entries")
        for index, entry in enumerate(entries):
            try:
                metadata_map.add(
                    self._create_from_entry(container, index, entry, overrides)
                )
            except InvalidConfigError as e:
                self._logger.error(f"Invalid metadata map entry #{index}: {e.message}")
                raise

        self._logger.info(
            f"Metadata map built with {len(metadata_map)} registered classes"
        )
        return metadata_map

    def create_metadata(
        self,
        container: Container | None,
        tag: str,
        metadata_class: type[AbstractMetadata],
        fields: Mapping[str, Any],
        factory_overrides: Mapping[str, Any],
    ) -> AbstractMetadata:
        """
        Create the metadata for a single, already resolved entry.

        Built-in factories are bound to ``metadata_class`` so that subclasses
        of a built-in record are created with their own type.

        Args:
            container: Container handed over to the factory
            tag: Tag of the metadata type
            metadata_class: Class resolved from the ``__class__`` element
            fields: Entry fields without ``__class__``
            factory_overrides: Tag-to-factory overrides from configuration

        Returns:
            The created metadata record

        Raises:
            InvalidConfigError: If the factory cannot create ``metadata_class``
        """
        factory = self._resolver.resolve(tag, factory_overrides)
        if isinstance(factory, AbstractMetadataFactory):
            factory = factory.for_class(metadata_class)
        return factory(container, tag, fields)

    def _create_from_entry(
        self,
        container: Container | None,
        index: int,
        entry: Any,
        overrides: Mapping[str, Any],
    ) -> AbstractMetadata:
        if not isinstance(entry, Mapping):
            raise InvalidConfigError(
                "Invalid metadata item configuration; expected an array, received "
                f"{type(entry).__name__}",
                entry_index=index,
            )

        if CLASS_KEY not in entry:
            raise InvalidConfigError(
                f'Invalid metadata item configuration; missing "{CLASS_KEY}" element',
                entry_index=index,
                field_name=CLASS_KEY,
            )

        tag, metadata_class = self._types.resolve(entry[CLASS_KEY])
        fields = {key: value for key, value in entry.items() if key != CLASS_KEY}

        self._logger.debug(f"Creating {tag} metadata")
        metadata = self.create_metadata(container, tag, metadata_class, fields, overrides)

        if not isinstance(metadata, AbstractMetadata):
            raise InvalidConfigError(
                f'Metadata factory for "{tag}" returned {type(metadata).__name__}; '
                f"expected an instance of {AbstractMetadata.__name__}"
            )
        return metadata

    @staticmethod
    def _get_entries(value: Any) -> list[Any]:
        if isinstance(value, Mapping):
            return list(value.values())
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            return list(value)
        raise InvalidConfigError(
            f"Invalid '{METADATA_MAP_KEY}' configuration; expected an array of "
            f"class-to-metadata mappings, received {type(value).__name__}",
            field_name=METADATA_MAP_KEY,
        )

    def _get_factory_overrides(self, config: Mapping[str, Any]) -> dict[str, Any]:
        hal_config = config.get(HAL_CONFIG_KEY) or {}
        if not isinstance(hal_config, Mapping):
            raise InvalidConfigError(
                f"Invalid '{HAL_CONFIG_KEY}' configuration; expected an array, "
                f"received {type(hal_config).__name__}",
                field_name=HAL_CONFIG_KEY,
            )

        factories = hal_config.get(METADATA_FACTORIES_KEY) or {}
        if not isinstance(factories, Mapping):
            raise InvalidConfigError(
                f"Invalid '{HAL_CONFIG_KEY}.{METADATA_FACTORIES_KEY}' configuration; "
                f"expected an array, received {type(factories).__name__}",
                field_name=METADATA_FACTORIES_KEY,
            )

        # Class keys are addressed by the tag they resolve to.
        return {
            self._types.tag_for(key) if isinstance(key, type) else key: factory
            for key, factory in factories.items()
        }
