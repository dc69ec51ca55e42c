from halmeta.models import RouteBasedCollectionMetadata, RouteBasedResourceMetadata

from .base_factory import AbstractMetadataFactory


class RouteBasedResourceMetadataFactory(AbstractMetadataFactory):
    """Creates RouteBasedResourceMetadata from configuration."""

    metadata_class = RouteBasedResourceMetadata
    required_keys = ("resource_class", "route", "extractor")
    optional_keys = (
        "resource_identifier",
        "route_params",
        "identifiers_to_placeholders_mapping",
    )


class RouteBasedCollectionMetadataFactory(AbstractMetadataFactory):
    """Creates RouteBasedCollectionMetadata from configuration."""

    metadata_class = RouteBasedCollectionMetadata
    required_keys = ("collection_class", "collection_relation", "route")
    optional_keys = (
        "pagination_param",
        "pagination_param_type",
        "route_params",
        "query_string_arguments",
    )
