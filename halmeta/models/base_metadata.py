from __future__ import annotations

from abc import abstractmethod
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


def class_identifier(value: Any) -> str:
    """
    Normalise a class reference into the identifier used as a map key.

    Class objects become ``"<module>.<qualname>"``; non-empty strings are
    returned untouched.

    Raises:
        ValueError: If the value is neither a class nor a non-empty string
    """
    if isinstance(value, type):
        return f"{value.__module__}.{value.__qualname__}"
    if isinstance(value, str) and value.strip():
        return value
    raise ValueError(
        f"Expected a class or a non-empty class identifier, got {value!r}"
    )


class PaginationParamType(str, Enum):
    """Where the pagination parameter is injected when generating links."""

    PLACEHOLDER = "placeholder"
    QUERY = "query"


class AbstractMetadata(BaseModel):
    """
    Root of every metadata record.

    A record describes how one class is rendered as a HAL resource. Records
    are immutable once created.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @abstractmethod
    def get_class(self) -> str:
        """Return the identifier of the class this metadata describes."""


class AbstractResourceMetadata(AbstractMetadata):
    """Metadata for a single resource extracted from an object."""

    resource_class: str = Field(
        ...,
        description="Identifier of the class rendered as a resource.",
    )
    extractor: str = Field(
        ...,
        description="Name of the extractor service used to pull object data.",
    )

    @field_validator("resource_class", mode="before")
    @classmethod
    def _normalise_class(cls, v: Any) -> str:
        return class_identifier(v)

    def get_class(self) -> str:
        return self.resource_class


class AbstractCollectionMetadata(AbstractMetadata):
    """Metadata for a paginated collection embedded under a relation."""

    TYPE_PLACEHOLDER: ClassVar[PaginationParamType] = PaginationParamType.PLACEHOLDER
    TYPE_QUERY: ClassVar[PaginationParamType] = PaginationParamType.QUERY

    collection_class: str = Field(
        ...,
        description="Identifier of the collection class.",
    )
    collection_relation: str = Field(
        ...,
        description="Relation name under which collection items are embedded.",
    )
    pagination_param: str = Field(
        default="page",
        description="Name of the parameter carrying the page number.",
    )
    pagination_param_type: PaginationParamType = Field(
        default=PaginationParamType.QUERY,
        description=(
            "Whether the pagination parameter is a route placeholder "
            "or a query string argument."
        ),
    )

    @field_validator("collection_class", mode="before")
    @classmethod
    def _normalise_class(cls, v: Any) -> str:
        return class_identifier(v)

    def get_class(self) -> str:
        return self.collection_class
