"""Build and query the registry of HAL rendering metadata."""

from .core import (
    Container,
    FactoryResolver,
    MetadataFactory,
    MetadataMap,
    MetadataMapBuilder,
    MetadataMapFactory,
    MetadataTypeRegistry,
    ServiceContainer,
)
from .exceptions import (
    ConfigLoadError,
    HalMetadataError,
    InvalidConfigError,
    NotFoundError,
)
from .factories import AbstractMetadataFactory
from .models import (
    AbstractCollectionMetadata,
    AbstractMetadata,
    AbstractResourceMetadata,
    PaginationParamType,
    RouteBasedCollectionMetadata,
    RouteBasedResourceMetadata,
    UrlBasedCollectionMetadata,
    UrlBasedResourceMetadata,
)

__all__ = [
    "AbstractMetadata",
    "AbstractResourceMetadata",
    "AbstractCollectionMetadata",
    "PaginationParamType",
    "UrlBasedResourceMetadata",
    "UrlBasedCollectionMetadata",
    "RouteBasedResourceMetadata",
    "RouteBasedCollectionMetadata",
    "AbstractMetadataFactory",
    "Container",
    "MetadataFactory",
    "MetadataMapBuilder",
    "ServiceContainer",
    "FactoryResolver",
    "MetadataTypeRegistry",
    "MetadataMap",
    "MetadataMapFactory",
    "HalMetadataError",
    "InvalidConfigError",
    "NotFoundError",
    "ConfigLoadError",
]
