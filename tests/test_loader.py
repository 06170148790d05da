"""Tests for dedata.data.loader: shipped site list and ignore list."""

from __future__ import annotations

from unittest import mock

import pydantic
import pytest

from dedata.browser import resource_filter
from dedata.browser import session as browser_session
from dedata.data import loader
from dedata.models import intercept


class TestGetTargetSites:
    def test_loads_dashboards(self) -> None:
        sites = loader.get_target_sites()
        assert len(sites) == 7
        assert sites[0].url == "https://info.uniswap.org/"
        assert all(s.label for s in sites)

    def test_cached(self) -> None:
        assert loader.get_target_sites() is loader.get_target_sites()


class TestGetIgnoredSuffixes:
    def test_union_of_lists(self) -> None:
        suffixes = loader.get_ignored_suffixes()
        for expected in ("google-analytics.com", "doubleclick.net", "sentry.io", "unpkg.com"):
            assert expected in suffixes


class TestValidateSites:
    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError, match="At least one"):
            loader.validate_sites([])

    @pytest.mark.parametrize("url", ["info.uniswap.org", "ftp://example.com", "https://"])
    def test_malformed_rejected(self, url: str) -> None:
        with pytest.raises(ValueError, match="Invalid target site URL"):
            loader.validate_sites([intercept.TargetSite(url=url)])

    def test_valid_returned_as_tuple(self, example_site: intercept.TargetSite) -> None:
        assert loader.validate_sites([example_site]) == (example_site,)


class TestLoadJson:
    def test_missing_file(self) -> None:
        with pytest.raises(FileNotFoundError):
            loader._load_json("missing.json")


class TestGetDefaultConfig:
    def test_assembles_config(self) -> None:
        config = loader.get_default_config()
        assert config.sites == loader.get_target_sites()
        assert config.abort_suffixes == resource_filter.ABORT_RESOURCE_SUFFIXES
        assert config.navigation_timeout_ms > 0

    def test_timeout_default_shared_with_session(self) -> None:
        config = intercept.InterceptionConfig(sites=(), ignored_suffixes=(), abort_suffixes=())
        assert config.navigation_timeout_ms == browser_session.DEFAULT_NAVIGATION_TIMEOUT_MS


class TestIgnoredSuffixValidation:
    def test_non_string_entry_rejected(self) -> None:
        with (
            mock.patch.object(loader, "_ignored_suffixes", None),
            mock.patch.object(loader, "_load_json", return_value=["sentry.io", 3]),
        ):
            with pytest.raises(pydantic.ValidationError):
                loader.get_ignored_suffixes()

    def test_entries_normalised(self) -> None:
        with (
            mock.patch.object(loader, "_ignored_suffixes", None),
            mock.patch.object(loader, "_load_json", return_value=[" Sentry.IO ", ""]),
        ):
            assert loader.get_ignored_suffixes() == ("sentry.io",)
