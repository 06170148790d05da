"""Pydantic models for target sites, captured requests, and grouped results."""

from __future__ import annotations

import pydantic

from dedata.utils import serialization

DEFAULT_NAVIGATION_TIMEOUT_MS = 60000


class TargetSite(pydantic.BaseModel):
    """A dashboard configured for inspection."""

    model_config = pydantic.ConfigDict(frozen=True)

    url: str
    label: str | None = None


class InterceptionConfig(pydantic.BaseModel):
    """Static configuration for one inventory run."""

    model_config = pydantic.ConfigDict(frozen=True)

    sites: tuple[TargetSite, ...]
    ignored_suffixes: tuple[str, ...]
    abort_suffixes: tuple[str, ...]
    navigation_timeout_ms: int = DEFAULT_NAVIGATION_TIMEOUT_MS


class CapturedSet(pydantic.BaseModel):
    """Unique data-fetch URLs observed for one site, in first-capture order."""

    model_config = pydantic.ConfigDict(frozen=True)

    site_url: str
    urls: tuple[str, ...] = ()


class SessionOutcome(pydantic.BaseModel):
    """Outcome of one capture session: either a captured set or an error."""

    model_config = pydantic.ConfigDict(frozen=True)

    site_url: str
    captured: CapturedSet | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.captured is not None


class DomainGroup(pydantic.BaseModel):
    """Captured URLs for one site that share a host."""

    domain: str
    data_urls: list[str] = pydantic.Field(default_factory=list)


class SiteResult(pydantic.BaseModel):
    """Grouped, filtered data dependencies of one target site."""

    site: TargetSite
    data_url_groups: list[DomainGroup] = pydantic.Field(default_factory=list)


# ── API projections ─────────────────────────────────────────────


class InterceptedUrl(pydantic.BaseModel):
    """A single captured URL tagged with its domain."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True
    )

    domain: str
    url: str


class SiteInterceptedUrls(pydantic.BaseModel):
    """Flat view: every surviving URL for one site."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True
    )

    site_url: str
    intercepted_urls: list[InterceptedUrl] = pydantic.Field(default_factory=list)


class DataUrlGroup(pydantic.BaseModel):
    """One domain's URLs in the grouped view."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True
    )

    domain: str
    data_urls: list[str] = pydantic.Field(default_factory=list)


class SiteDataUrlGroups(pydantic.BaseModel):
    """Grouped view: domain groups for one site."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True
    )

    site_url: str
    label: str | None = None
    data_url_groups: list[DataUrlGroup] = pydantic.Field(default_factory=list)


class SiteSummary(pydantic.BaseModel):
    """A configured site as exposed by the sites endpoint."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel, populate_by_name=True
    )

    site_url: str
    label: str | None = None
