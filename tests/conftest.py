"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

from dedata.models import intercept
from dedata.utils import logger


@pytest.fixture(autouse=True)
def _fresh_log_buffer() -> None:
    """Start every test with an empty log buffer bound to this context."""
    logger.clear_log_buffer()


# ── Target Sites ────────────────────────────────────────────────


@pytest.fixture()
def example_site() -> intercept.TargetSite:
    """A dashboard hosted on a subdomain of example.com."""
    return intercept.TargetSite(url="https://app.example.com", label="Example")


@pytest.fixture()
def vendor_site() -> intercept.TargetSite:
    """A second dashboard on an unrelated domain."""
    return intercept.TargetSite(url="https://www.dashboard.fi/stats", label="Dashboard")


@pytest.fixture()
def sample_config(
    example_site: intercept.TargetSite,
    vendor_site: intercept.TargetSite,
) -> intercept.InterceptionConfig:
    """A two-site configuration ignoring a couple of analytics domains."""
    return intercept.InterceptionConfig(
        sites=(example_site, vendor_site),
        ignored_suffixes=("google-analytics.com", "sentry.io"),
        abort_suffixes=(".png", ".jpg", ".css", ".svg", ".ico"),
        navigation_timeout_ms=1000,
    )

