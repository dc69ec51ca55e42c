from pydantic import Field

from .base_metadata import AbstractCollectionMetadata, AbstractResourceMetadata


class UrlBasedResourceMetadata(AbstractResourceMetadata):
    """Resource whose self link is a fixed URL."""

    url: str = Field(..., description="Absolute or relative URL of the resource.")


class UrlBasedCollectionMetadata(AbstractCollectionMetadata):
    """
    Collection whose self link is a fixed URL.

    Pagination links are derived from ``url`` by injecting
    ``pagination_param`` according to ``pagination_param_type``.
    """

    url: str = Field(..., description="Absolute or relative URL of the collection.")
