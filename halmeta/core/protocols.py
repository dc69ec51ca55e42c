from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from halmeta.core.metadata_map import MetadataMap
    from halmeta.models.base_metadata import AbstractMetadata


@runtime_checkable
class Container(Protocol):
    """Defines the contract of the hosting service container."""

    def has(self, name: str) -> bool:
        """Checks whether a service named ``name`` is available."""
        ...

    def get(self, name: str) -> Any:
        """Returns the service registered under ``name``."""
        ...


@runtime_checkable
class MetadataFactory(Protocol):
    """Defines the contract for creating one metadata record from config."""

    def __call__(
        self,
        container: Container | None,
        requested_name: str,
        metadata: Mapping[str, Any],
    ) -> "AbstractMetadata":
        """
        Create a metadata record.

        Args:
            container: The hosting container, when one is available
            requested_name: Tag of the metadata type being created
            metadata: Configuration fields, without the ``__class__`` element

        Returns:
            The created metadata record

        Raises:
            InvalidConfigError: If a required element is missing or invalid
        """
        ...


class MetadataMapBuilder(Protocol):
    """Defines the contract for anything able to produce a metadata map."""

    def __call__(self, container: Container) -> "MetadataMap":
        """Build a metadata map from the configuration held by ``container``."""
        ...
