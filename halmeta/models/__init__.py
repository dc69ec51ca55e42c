from .base_metadata import (
    AbstractCollectionMetadata,
    AbstractMetadata,
    AbstractResourceMetadata,
    PaginationParamType,
    class_identifier,
)
from .route_based import RouteBasedCollectionMetadata, RouteBasedResourceMetadata
from .url_based import UrlBasedCollectionMetadata, UrlBasedResourceMetadata

__all__ = [
    "AbstractMetadata",
    "AbstractResourceMetadata",
    "AbstractCollectionMetadata",
    "PaginationParamType",
    "class_identifier",
    "UrlBasedResourceMetadata",
    "UrlBasedCollectionMetadata",
    "RouteBasedResourceMetadata",
    "RouteBasedCollectionMetadata",
]
