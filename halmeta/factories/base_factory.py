"""Base implementation for metadata factories."""

import logging
from abc import ABC
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import ValidationError

from halmeta.exceptions import InvalidConfigError
from halmeta.models.base_metadata import AbstractMetadata, class_identifier

if TYPE_CHECKING:
    from halmeta.core.protocols import Container

logger = logging.getLogger(__name__)


class AbstractMetadataFactory(ABC):
    """
    Base class for factories turning one configuration entry into metadata.

    Subclasses declare:
    - metadata_class: The metadata model created by default
    - required_keys: Elements that must be present, checked in order
    - optional_keys: Elements falling back to the model defaults when absent

    Subclasses can optionally override:
    - _collect_fields(): Custom selection of the fields passed to the model
    """

    metadata_class: ClassVar[type[AbstractMetadata]]
    required_keys: ClassVar[tuple[str, ...]] = ()
    optional_keys: ClassVar[tuple[str, ...]] = ()

    def __init__(self, metadata_class: type[AbstractMetadata] | None = None):
        """
        Initialize the factory.

        Args:
            metadata_class: Metadata model to create instead of the default,
                typically a subclass registered under its own tag
        """
        if metadata_class is not None:
            self.metadata_class = metadata_class
        if not isinstance(getattr(self, "metadata_class", None), type):
            raise TypeError(
                f"{self.__class__.__name__} does not declare a metadata_class"
            )
        self._logger = logger.getChild(self.__class__.__name__)

    @classmethod
    def is_concrete(cls) -> bool:
        """Check if the factory class declares the metadata model it creates."""
        return isinstance(getattr(cls, "metadata_class", None), type)

    def for_class(
        self, metadata_class: type[AbstractMetadata]
    ) -> "AbstractMetadataFactory":
        """
        Get a factory creating ``metadata_class``.

        Args:
            metadata_class: The metadata class resolved from configuration

        Returns:
            This factory when it already creates ``metadata_class``, otherwise
            a copy of it bound to ``metadata_class``

        Raises:
            InvalidConfigError: If ``metadata_class`` does not extend the
                model this factory creates
        """
        if metadata_class is self.metadata_class:
            return self

        if not issubclass(metadata_class, self.metadata_class):
            raise InvalidConfigError(
                f"{self.__class__.__name__} cannot create "
                f'"{class_identifier(metadata_class)}"; does not extend '
                f"{self.metadata_class.__name__}",
                field_name="metadata-factories",
            )
        return type(self)(metadata_class)

    def __call__(
        self,
        container: "Container | None",
        requested_name: str,
        metadata: Mapping[str, Any],
    ) -> AbstractMetadata:
        """
        Create a metadata record from a configuration entry.

        Args:
            container: The hosting container (unused by built-in factories)
            requested_name: Tag of the metadata type being created
            metadata: Configuration fields, without the ``__class__`` element

        Returns:
            The created metadata record

        Raises:
            InvalidConfigError: If a required element is missing or a field
                has an invalid value
        """
        for key in self.required_keys:
            if metadata.get(key) is None:
                raise InvalidConfigError(
                    f'Unable to create {requested_name} metadata; missing "{key}" '
                    "element",
                    field_name=key,
                )

        fields = self._collect_fields(metadata)

        ignored = sorted(set(metadata) - set(fields))
        if ignored:
            self._logger.debug(
                f"Ignoring unknown elements for {requested_name}: {', '.join(ignored)}"
            )

        try:
            return self.metadata_class(**fields)
        except ValidationError as e:
            locations = [
                ".".join(str(part) for part in error["loc"]) for error in e.errors()
            ]
            raise InvalidConfigError(
                f"Unable to create {requested_name} metadata; invalid "
                f"{', '.join(locations)} element: {e}",
                field_name=locations[0] if locations else None,
            ) from e

    def _collect_fields(self, metadata: Mapping[str, Any]) -> dict[str, Any]:
        """Pick the known, non-null elements out of the configuration entry."""
        fields = {key: metadata[key] for key in self.required_keys}
        for key in self.optional_keys:
            if metadata.get(key) is not None:
                fields[key] = metadata[key]
        return fields
