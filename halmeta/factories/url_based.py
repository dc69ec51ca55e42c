from halmeta.models import UrlBasedCollectionMetadata, UrlBasedResourceMetadata

from .base_factory import AbstractMetadataFactory


class UrlBasedResourceMetadataFactory(AbstractMetadataFactory):
    """Creates UrlBasedResourceMetadata from configuration."""

    metadata_class = UrlBasedResourceMetadata
    required_keys = ("resource_class", "url", "extractor")


class UrlBasedCollectionMetadataFactory(AbstractMetadataFactory):
    """Creates UrlBasedCollectionMetadata from configuration."""

    metadata_class = UrlBasedCollectionMetadata
    required_keys = ("collection_class", "collection_relation", "url")
    optional_keys = ("pagination_param", "pagination_param_type")
