"""Registry associating classes with their HAL metadata."""

import logging
from typing import Any

from halmeta.exceptions import InvalidConfigError, NotFoundError
from halmeta.models.base_metadata import AbstractMetadata, class_identifier

logger = logging.getLogger(__name__)


class MetadataMap:
    """
    Map of class identifiers to the metadata describing how to render them.

    Built once by a map builder and treated as read-only afterwards. ``add``
    stays available for late registration; callers sharing a map across
    threads must synchronise such calls themselves.
    """

    def __init__(self):
        """Initialize an empty metadata map."""
        self._map: dict[str, AbstractMetadata] = {}
        self._logger = logger.getChild(self.__class__.__name__)

    def add(self, metadata: AbstractMetadata) -> None:
        """
        Register metadata under the class it describes.

        A later registration for the same class replaces the earlier one.

        Args:
            metadata: The metadata record to register

        Raises:
            InvalidConfigError: If ``metadata`` is not a metadata record
        """
        if not isinstance(metadata, AbstractMetadata):
            raise InvalidConfigError(
                f"Cannot add {type(metadata).__name__} to metadata map; "
                f"does not extend {AbstractMetadata.__name__}"
            )

        cls = metadata.get_class()
        if cls in self._map:
            self._logger.warning(f"Overwriting existing metadata for class '{cls}'")

        self._map[cls] = metadata
        self._logger.debug(
            f"Registered {metadata.__class__.__name__} for class '{cls}'"
        )

    def has(self, cls: Any) -> bool:
        """
        Check if metadata is registered for a class.

        Args:
            cls: A class object or class identifier

        Returns:
            True if metadata exists for the class, False otherwise
        """
        try:
            return class_identifier(cls) in self._map
        except ValueError:
            return False

    def get(self, cls: Any) -> AbstractMetadata:
        """
        Get the metadata registered for a class.

        Args:
            cls: A class object or class identifier

        Returns:
            The registered metadata record

        Raises:
            NotFoundError: If no metadata is registered for the class
        """
        try:
            identifier = class_identifier(cls)
        except ValueError:
            identifier = repr(cls)

        if identifier in self._map:
            return self._map[identifier]

        raise NotFoundError(
            f'Unable to retrieve metadata for "{identifier}"; not in metadata map',
            identifier=identifier,
        )

    def get_registered_classes(self) -> list[str]:
        """Return the sorted identifiers of all registered classes."""
        return sorted(self._map.keys())

    def __len__(self) -> int:
        """Return the number of registered classes."""
        return len(self._map)

    def __contains__(self, cls: Any) -> bool:
        """Check if a class is registered (supports 'in' operator)."""
        return self.has(cls)
