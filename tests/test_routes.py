"""Tests for route classification and URL building."""

import pytest

from habitica.config import API_VERSION_PREFIX
from habitica.routes import (
    TOP_LEVEL_ROUTES,
    build_url,
    is_top_level,
    normalize_endpoint,
    normalize_route,
    route_prefix,
)


class TestIsTopLevel:
    """Tests for the top-level allow-list."""

    @pytest.mark.parametrize("segment", TOP_LEVEL_ROUTES)
    def test_allow_listed_segments(self, segment):
        assert is_top_level(f"/{segment}")

    @pytest.mark.parametrize(
        "route",
        [
            "/export/history.csv",
            "/export/userdata.json",
            "/email/unsubscribe",
            "/qr-code/user/1234",
            "/paypal/checkout",
            "/iap/android/verify",
            "/logout?redirect=home",
        ],
    )
    def test_allow_listed_segments_with_more_path(self, route):
        assert is_top_level(route)

    @pytest.mark.parametrize(
        "route",
        [
            "/user",
            "/user/tasks",
            "/tasks/user",
            "/exports",
            "/logouts",
            "/Logout",
            "/user/logout",
            "logout",
            "",
            "/",
        ],
    )
    def test_versioned_routes(self, route):
        assert not is_top_level(route)


class TestRoutePrefix:
    """Tests for prefix selection."""

    def test_top_level_has_no_prefix(self):
        assert route_prefix("/logout") == ""

    def test_versioned_prefix(self):
        assert route_prefix("/user") == API_VERSION_PREFIX
        assert API_VERSION_PREFIX == "/api/v3"


class TestNormalize:
    """Tests for endpoint and route normalization."""

    def test_strips_trailing_slash(self):
        assert normalize_endpoint("https://x.com/") == "https://x.com"

    def test_keeps_endpoint_without_slash(self):
        assert normalize_endpoint("https://x.com") == "https://x.com"

    def test_idempotent(self):
        once = normalize_endpoint("https://x.com/")
        assert normalize_endpoint(once) == once

    def test_strips_only_one_slash(self):
        assert normalize_endpoint("https://x.com//") == "https://x.com/"

    def test_route_gets_leading_slash(self):
        assert normalize_route("user") == "/user"
        assert normalize_route("/user") == "/user"


class TestBuildUrl:
    """Tests for full URL construction."""

    def test_versioned_url(self):
        assert build_url("https://habitica.com", "/user") == "https://habitica.com/api/v3/user"

    def test_top_level_url(self):
        assert build_url("https://habitica.com", "/logout") == "https://habitica.com/logout"

    def test_route_without_slash(self):
        assert build_url("https://habitica.com", "group") == "https://habitica.com/api/v3/group"
        assert build_url("https://habitica.com", "export/avatar") == "https://habitica.com/export/avatar"
