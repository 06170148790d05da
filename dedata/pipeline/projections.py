"""
API-facing views of a run result.

Pure functions with no side-effects.  The flat view lists every
surviving URL with its domain; the grouped view keeps the domain
buckets used by the dashboard page.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pydantic

from dedata.models import intercept


def to_intercepted_urls(
    run_result: Sequence[intercept.SiteResult],
) -> list[intercept.SiteInterceptedUrls]:
    """Flatten each site's domain groups into ``{domain, url}`` pairs."""
    return [
        intercept.SiteInterceptedUrls(
            site_url=result.site.url,
            intercepted_urls=[
                intercept.InterceptedUrl(domain=group.domain, url=url)
                for group in result.data_url_groups
                for url in group.data_urls
            ],
        )
        for result in run_result
    ]


def to_data_url_groups(
    run_result: Sequence[intercept.SiteResult],
) -> list[intercept.SiteDataUrlGroups]:
    """Project each site's domain groups into the grouped view."""
    return [
        intercept.SiteDataUrlGroups(
            site_url=result.site.url,
            label=result.site.label,
            data_url_groups=[
                intercept.DataUrlGroup(domain=group.domain, data_urls=list(group.data_urls))
                for group in result.data_url_groups
            ],
        )
        for result in run_result
    ]


def dump_camel(models: Sequence[pydantic.BaseModel]) -> list[dict[str, Any]]:
    """Serialize models to JSON-ready dicts with camelCase keys."""
    return [m.model_dump(by_alias=True, mode="json") for m in models]
