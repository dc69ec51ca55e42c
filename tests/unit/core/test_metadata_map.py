"""Unit tests for MetadataMap."""

from __future__ import annotations

import logging

import pytest

from halmeta.core.metadata_map import MetadataMap
from halmeta.exceptions import InvalidConfigError, NotFoundError
from halmeta.models import UrlBasedResourceMetadata


class Author:
    pass


def make_metadata(url: str = "/authors") -> UrlBasedResourceMetadata:
    return UrlBasedResourceMetadata(
        resource_class=Author, url=url, extractor="ObjectProperty"
    )


class TestRegistry:
    def test_add_and_get(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG)
        metadata_map = MetadataMap()
        metadata = make_metadata()
        metadata_map.add(metadata)

        assert metadata_map.get(Author) is metadata
        assert any("Registered" in r.message for r in caplog.records)

    def test_has_accepts_class_or_identifier(self) -> None:
        metadata_map = MetadataMap()
        metadata_map.add(make_metadata())

        assert metadata_map.has(Author)
        assert metadata_map.has(f"{Author.__module__}.Author")
        assert Author in metadata_map
        assert not metadata_map.has("other.Author")
        assert not metadata_map.has("")
        assert not metadata_map.has(None)

    def test_add_overwrites_and_logs_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING)
        metadata_map = MetadataMap()
        metadata_map.add(make_metadata("/first"))
        metadata_map.add(make_metadata("/second"))

        assert len(metadata_map) == 1
        assert metadata_map.get(Author).url == "/second"
        assert any("Overwriting" in r.message for r in caplog.records)

    def test_add_rejects_non_metadata(self) -> None:
        with pytest.raises(InvalidConfigError, match="does not extend"):
            MetadataMap().add({"url": "/nope"})  # type: ignore[arg-type]

    def test_get_registered_classes_is_sorted(self) -> None:
        metadata_map = MetadataMap()
        metadata_map.add(
            UrlBasedResourceMetadata(resource_class="b.B", url="/b", extractor="x")
        )
        metadata_map.add(
            UrlBasedResourceMetadata(resource_class="a.A", url="/a", extractor="x")
        )
        assert metadata_map.get_registered_classes() == ["a.A", "b.B"]


class TestLookupFailures:
    def test_get_unknown_class_raises_not_found(self) -> None:
        with pytest.raises(NotFoundError, match="not in metadata map") as exc:
            MetadataMap().get(Author)
        assert exc.value.error_code == "NOT_FOUND"
        assert exc.value.context["identifier"].endswith("Author")

    def test_get_invalid_identifier_raises_not_found(self) -> None:
        with pytest.raises(NotFoundError):
            MetadataMap().get(42)
