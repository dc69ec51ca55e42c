"""Built-in factories for the metadata types shipped with hal-metadata."""

from .base_factory import AbstractMetadataFactory
from .route_based import (
    RouteBasedCollectionMetadataFactory,
    RouteBasedResourceMetadataFactory,
)
from .url_based import UrlBasedCollectionMetadataFactory, UrlBasedResourceMetadataFactory

__all__ = [
    "AbstractMetadataFactory",
    "UrlBasedResourceMetadataFactory",
    "UrlBasedCollectionMetadataFactory",
    "RouteBasedResourceMetadataFactory",
    "RouteBasedCollectionMetadataFactory",
]
