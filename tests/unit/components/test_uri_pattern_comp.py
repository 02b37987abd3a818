"""Unit tests for URI pattern parsing and substitution."""

import pytest

from pagemap.components.discovery.uri_pattern_comp import (
    build_full_uri,
    fill_uri,
    normalize_uri,
    parse_parameters,
    strip_parameters,
)
from pagemap.helpers.exceptions import UrlGenerationError

pytestmark = pytest.mark.unit


class TestParseParameters:
    def test_required_and_optional(self) -> None:
        assert parse_parameters("/products/{id}/{slug?}") == (("id", "slug"), ("id",))

    def test_static_uri_has_none(self) -> None:
        assert parse_parameters("/about") == ((), ())


class TestNormalizeUri:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("", "/"),
            ("/", "/"),
            ("users", "/users"),
            ("/users/", "/users"),
            ("//admin///users", "/admin/users"),
        ],
    )
    def test_normalization(self, raw: str, expected: str) -> None:
        assert normalize_uri(raw) == expected


class TestBuildFullUri:
    def test_prefix_and_pattern_join(self) -> None:
        assert build_full_uri("/admin", "/dashboard") == "/admin/dashboard"

    def test_prefix_with_trailing_slash(self) -> None:
        assert build_full_uri("/admin/", "users") == "/admin/users"

    def test_root_pattern_in_empty_prefix_zone(self) -> None:
        assert build_full_uri("", "/") == "/"

    def test_root_pattern_in_prefixed_zone(self) -> None:
        assert build_full_uri("/account", "/") == "/account"


class TestStripParameters:
    def test_parameter_segments_removed(self) -> None:
        assert strip_parameters("/users/{user}/edit") == ["users", "edit"]


class TestFillUri:
    def test_fills_required(self) -> None:
        path, used = fill_uri("/admin/users/{user}", {"user": 5})
        assert path == "/admin/users/5"
        assert used == {"user"}

    def test_missing_optional_is_dropped(self) -> None:
        path, used = fill_uri("/products/{id}/{slug?}", {"id": 3})
        assert path == "/products/3"
        assert used == {"id"}

    def test_missing_required_raises(self) -> None:
        with pytest.raises(UrlGenerationError, match="user"):
            fill_uri("/admin/users/{user}", {})
