"""
Unit tests for metadata models (halmeta/models)
"""

import pytest
from pydantic import ValidationError

from halmeta.models import (
    AbstractCollectionMetadata,
    AbstractMetadata,
    PaginationParamType,
    RouteBasedCollectionMetadata,
    RouteBasedResourceMetadata,
    UrlBasedCollectionMetadata,
    UrlBasedResourceMetadata,
    class_identifier,
)

# ---------------------------------------------------------------------------
#                                FIXTURES
# ---------------------------------------------------------------------------


class Invoice:
    pass


@pytest.fixture
def route_resource() -> RouteBasedResourceMetadata:
    return RouteBasedResourceMetadata(
        resource_class=Invoice,
        route="invoice",
        extractor="ObjectProperty",
        route_params={"version": "2"},
    )


# ---------------------------------------------------------------------------
#                                TESTS
# ---------------------------------------------------------------------------


def test_class_identifier_normalises_classes() -> None:
    assert class_identifier(Invoice) == f"{__name__}.Invoice"
    assert class_identifier("app.Invoice") == "app.Invoice"


@pytest.mark.parametrize("value", ["", "  ", None, 3])
def test_class_identifier_rejects_invalid_values(value) -> None:
    with pytest.raises(ValueError):
        class_identifier(value)


def test_abstract_metadata_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        AbstractMetadata()


def test_url_resource_accepts_class_objects() -> None:
    metadata = UrlBasedResourceMetadata(
        resource_class=Invoice, url="/invoices", extractor="ObjectProperty"
    )
    assert metadata.get_class() == class_identifier(Invoice)


def test_url_collection_defaults() -> None:
    metadata = UrlBasedCollectionMetadata(
        collection_class="app.Invoices", collection_relation="invoice", url="/i"
    )
    assert metadata.pagination_param == "page"
    assert metadata.pagination_param_type is PaginationParamType.QUERY
    assert metadata.get_class() == "app.Invoices"


def test_collection_type_constants_alias_enum() -> None:
    assert AbstractCollectionMetadata.TYPE_PLACEHOLDER == "placeholder"
    assert AbstractCollectionMetadata.TYPE_QUERY == "query"


def test_invalid_pagination_type_rejected() -> None:
    with pytest.raises(ValidationError):
        UrlBasedCollectionMetadata(
            collection_class="app.Invoices",
            collection_relation="invoice",
            url="/i",
            pagination_param_type="fragment",
        )


def test_route_resource_defaults() -> None:
    metadata = RouteBasedResourceMetadata(
        resource_class="app.Invoice", route="invoice", extractor="ObjectProperty"
    )
    assert metadata.resource_identifier == "id"
    assert metadata.route_params == {}
    assert metadata.identifiers_to_placeholders_mapping == {}


def test_route_collection_defaults() -> None:
    metadata = RouteBasedCollectionMetadata(
        collection_class="app.Invoices", collection_relation="invoice", route="i"
    )
    assert metadata.route_params == {}
    assert metadata.query_string_arguments == {}
    assert metadata.pagination_param == "page"


def test_string_maps_are_copied() -> None:
    params = {"b": "1", "a": "2"}
    metadata = RouteBasedCollectionMetadata(
        collection_class="app.Invoices",
        collection_relation="invoice",
        route="i",
        route_params=params,
    )
    params["c"] = "3"
    assert list(metadata.route_params) == ["b", "a"]


def test_string_maps_reject_non_string_values() -> None:
    with pytest.raises(ValidationError):
        RouteBasedResourceMetadata(
            resource_class="app.Invoice",
            route="invoice",
            extractor="ObjectProperty",
            route_params={"version": ["2"]},
        )


def test_metadata_is_immutable(route_resource: RouteBasedResourceMetadata) -> None:
    with pytest.raises(ValidationError):
        route_resource.route = "other"


def test_unknown_fields_rejected() -> None:
    with pytest.raises(ValidationError):
        UrlBasedResourceMetadata(
            resource_class="app.Invoice", url="/i", extractor="x", route="nope"
        )


def test_with_route_params_returns_copy(
    route_resource: RouteBasedResourceMetadata,
) -> None:
    updated = route_resource.with_route_params({"version": "3"})

    assert updated.route_params == {"version": "3"}
    assert route_resource.route_params == {"version": "2"}
    assert updated.route == route_resource.route
    assert isinstance(updated, RouteBasedResourceMetadata)


def test_collection_with_route_params_returns_copy() -> None:
    metadata = RouteBasedCollectionMetadata(
        collection_class="app.Invoices",
        collection_relation="invoice",
        route="i",
        pagination_param_type="placeholder",
    )
    updated = metadata.with_route_params({"page": "2"})

    assert updated.route_params == {"page": "2"}
    assert updated.pagination_param_type is PaginationParamType.PLACEHOLDER
    assert metadata.route_params == {}
