"""Metadata map construction: registries, resolver, container and builder."""

from .container import ServiceContainer
from .factory_resolver import FactoryResolver, get_global_factory_resolver
from .metadata_map import MetadataMap
from .metadata_map_factory import MetadataMapFactory
from .protocols import Container, MetadataFactory, MetadataMapBuilder
from .type_registry import MetadataTypeRegistry, get_global_type_registry

__all__ = [
    "Container",
    "MetadataFactory",
    "MetadataMapBuilder",
    "ServiceContainer",
    "FactoryResolver",
    "MetadataTypeRegistry",
    "MetadataMap",
    "MetadataMapFactory",
    "get_global_factory_resolver",
    "get_global_type_registry",
]
