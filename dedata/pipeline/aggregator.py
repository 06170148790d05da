"""
Concurrent capture across all target sites.

One capture task per site, all started together.  A failing site is
logged and left out of the result; it never cancels or fails its
siblings.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable

from dedata.browser import session as browser_session
from dedata.models import intercept
from dedata.utils import errors, logger

log = logger.create_logger("Aggregator")

CaptureFn = Callable[[intercept.TargetSite], Awaitable[intercept.CapturedSet]]


def _distinct_sites(sites: Iterable[intercept.TargetSite]) -> list[intercept.TargetSite]:
    """Drop repeated site URLs, keeping the first occurrence."""
    seen: set[str] = set()
    distinct: list[intercept.TargetSite] = []
    for site in sites:
        if site.url in seen:
            log.debug("Skipping duplicate site", {"url": site.url})
            continue
        seen.add(site.url)
        distinct.append(site)
    return distinct


async def capture_all(
    sites: Iterable[intercept.TargetSite],
    *,
    capture: CaptureFn = browser_session.capture_site,
) -> list[intercept.SessionOutcome]:
    """Run one capture per site concurrently and collect every outcome.

    Args:
        sites: Target sites in configured order.
        capture: Coroutine function capturing a single site.

    Returns:
        One outcome per distinct site, in configured order.
    """
    distinct = _distinct_sites(sites)
    results = await asyncio.gather(
        *(capture(site) for site in distinct),
        return_exceptions=True,
    )

    outcomes: list[intercept.SessionOutcome] = []
    for site, result in zip(distinct, results, strict=True):
        if isinstance(result, BaseException):
            message = errors.get_error_message(result)
            log.error("Failed to capture site", {"url": site.url, "error": message})
            outcomes.append(intercept.SessionOutcome(site_url=site.url, error=message))
        else:
            outcomes.append(intercept.SessionOutcome(site_url=site.url, captured=result))
    return outcomes


async def collect_captured_urls(
    sites: Iterable[intercept.TargetSite],
    *,
    capture: CaptureFn = browser_session.capture_site,
) -> dict[str, tuple[str, ...]]:
    """Map each successfully captured site URL to its captured URLs."""
    outcomes = await capture_all(sites, capture=capture)
    return {
        outcome.site_url: outcome.captured.urls
        for outcome in outcomes
        if outcome.captured is not None
    }
