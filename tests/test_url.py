"""Tests for dedata.utils.url: host, path, and second-level domain helpers."""

from __future__ import annotations

import pytest

from dedata.utils.url import (
    extract_host,
    extract_path,
    get_second_level_domain,
    host_matches_suffix,
    is_first_party,
)

# ── extract_host ────────────────────────────────────────────────


class TestExtractHost:
    """Tests for extract_host()."""

    def test_simple_url(self) -> None:
        assert extract_host("https://api.vendor.io/v1/pairs") == "api.vendor.io"

    def test_strips_leading_www(self) -> None:
        assert extract_host("https://www.convexfinance.com/stake") == "convexfinance.com"

    def test_keeps_inner_www(self) -> None:
        assert extract_host("https://api.www.example.com/") == "api.www.example.com"

    def test_drops_port(self) -> None:
        assert extract_host("https://example.com:8080/path") == "example.com"

    def test_lowercases(self) -> None:
        assert extract_host("https://API.Vendor.IO/x") == "api.vendor.io"

    @pytest.mark.parametrize("url", ["", "not a url", "/relative/path", "data:text/plain,hi"])
    def test_unparseable_returns_none(self, url: str) -> None:
        assert extract_host(url) is None

    def test_invalid_ipv6_returns_none(self) -> None:
        assert extract_host("https://[::1/path") is None


# ── extract_path ────────────────────────────────────────────────


class TestExtractPath:
    """Tests for extract_path()."""

    def test_ignores_query(self) -> None:
        assert extract_path("https://api.vendor.io/v1/pairs?x=1") == "/v1/pairs"

    def test_missing_path_is_root(self) -> None:
        assert extract_path("https://api.vendor.io") == "/"
        assert extract_path("https://api.vendor.io?x=1") == "/"

    def test_relative_path_unchanged(self) -> None:
        assert extract_path("/v1/pairs?x=1") == "/v1/pairs"

    def test_invalid_url(self) -> None:
        assert extract_path("https://[::1/path") == ""


# ── get_second_level_domain ─────────────────────────────────────


class TestGetSecondLevelDomain:
    """Tests for get_second_level_domain()."""

    def test_subdomain(self) -> None:
        assert get_second_level_domain("api.example.com") == "example.com"

    def test_already_second_level(self) -> None:
        assert get_second_level_domain("example.com") == "example.com"

    def test_single_label(self) -> None:
        assert get_second_level_domain("localhost") == "localhost"

    def test_two_part_tld_is_not_special(self) -> None:
        assert get_second_level_domain("api.example.co.uk") == "co.uk"


# ── is_first_party / host_matches_suffix ───────────────────────


class TestIsFirstParty:
    """Tests for is_first_party()."""

    def test_same_second_level(self) -> None:
        assert is_first_party("api.example.com", "https://app.example.com") is True

    def test_www_site(self) -> None:
        assert is_first_party("api.convexfinance.com", "https://www.convexfinance.com/stake") is True

    def test_different_domain(self) -> None:
        assert is_first_party("api.vendor.io", "https://app.example.com") is False

    def test_unparseable_site(self) -> None:
        assert is_first_party("api.vendor.io", "nonsense") is False


class TestHostMatchesSuffix:
    """Tests for host_matches_suffix()."""

    def test_exact(self) -> None:
        assert host_matches_suffix("sentry.io", ("sentry.io",))

    def test_subdomain(self) -> None:
        assert host_matches_suffix("o1.ingest.sentry.io", ("sentry.io",))

    def test_no_match(self) -> None:
        assert not host_matches_suffix("api.vendor.io", ("sentry.io", "doubleclick.net"))
