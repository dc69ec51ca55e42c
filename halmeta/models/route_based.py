from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from .base_metadata import AbstractCollectionMetadata, AbstractResourceMetadata


def _copy_string_map(v: Any) -> Any:
    # Keep insertion order; type checking is left to pydantic.
    if isinstance(v, dict):
        return dict(v)
    return v


class RouteBasedResourceMetadata(AbstractResourceMetadata):
    """
    Resource whose self link is generated from a named route.

    The resource identifier is read from the extracted object and injected
    into the route, optionally alongside extra route parameters.
    """

    route: str = Field(..., description="Name of the route used for the self link.")
    resource_identifier: str = Field(
        default="id",
        description="Property of the resource holding its identifier.",
    )
    route_params: dict[str, str] = Field(
        default_factory=dict,
        description="Static parameters passed to the route.",
    )
    identifiers_to_placeholders_mapping: dict[str, str] = Field(
        default_factory=dict,
        description="Map of resource properties to route placeholders.",
    )

    @field_validator("route_params", "identifiers_to_placeholders_mapping", mode="before")
    @classmethod
    def _copy_maps(cls, v: Any) -> Any:
        return _copy_string_map(v)

    def with_route_params(self, route_params: dict[str, str]) -> RouteBasedResourceMetadata:
        """Return a copy using the given route parameters."""
        return self.model_validate(
            {**self.model_dump(), "route_params": route_params}
        )


class RouteBasedCollectionMetadata(AbstractCollectionMetadata):
    """Collection whose self and pagination links are generated from a route."""

    route: str = Field(..., description="Name of the route used for the self link.")
    route_params: dict[str, str] = Field(
        default_factory=dict,
        description="Static parameters passed to the route.",
    )
    query_string_arguments: dict[str, str] = Field(
        default_factory=dict,
        description="Query string arguments appended to generated links.",
    )

    @field_validator("route_params", "query_string_arguments", mode="before")
    @classmethod
    def _copy_maps(cls, v: Any) -> Any:
        return _copy_string_map(v)

    def with_route_params(self, route_params: dict[str, str]) -> RouteBasedCollectionMetadata:
        """Return a copy using the given route parameters."""
        return self.model_validate(
            {**self.model_dump(), "route_params": route_params}
        )
