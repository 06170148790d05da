"""
One inventory run: capture every configured site, then group.

Thin orchestrator over ``aggregator`` (concurrent browser sessions)
and ``domain_groups`` (pure filtering and grouping).
"""

from __future__ import annotations

import functools

from dedata.analysis import domain_groups
from dedata.browser import session as browser_session
from dedata.data import loader
from dedata.models import intercept
from dedata.pipeline import aggregator
from dedata.utils import logger

log = logger.create_logger("Inventory")


async def run_inventory(
    config: intercept.InterceptionConfig | None = None,
    *,
    capture: aggregator.CaptureFn | None = None,
) -> list[intercept.SiteResult]:
    """Capture and group the data requests of every configured site.

    Always completes; sites whose session failed are absent from the
    result and reported through the log.  The log buffer is reset
    first, so it only ever holds the latest run.

    Args:
        config: Run configuration.  Defaults to the shipped data files.
        capture: Per-site capture coroutine.  Defaults to a real
            headless browser session using *config*'s timeout and
            abort suffixes.

    Returns:
        One ``SiteResult`` per successfully captured site, in
        configured order.
    """
    config = config or loader.get_default_config()
    if capture is None:
        capture = functools.partial(
            browser_session.capture_site,
            timeout_ms=config.navigation_timeout_ms,
            abort_suffixes=config.abort_suffixes,
        )

    logger.clear_log_buffer()
    log.section("Data API Inventory")
    log.info("Starting run", {"sites": len(config.sites)})
    log.start_timer("inventory")

    captured = await aggregator.collect_captured_urls(config.sites, capture=capture)
    result = domain_groups.build_run_result(config.sites, captured, config.ignored_suffixes)

    log.end_timer("inventory", "Inventory complete")
    failed = len({s.url for s in config.sites}) - len(captured)
    if failed:
        log.warn("Some sites could not be captured", {"failed": failed, "succeeded": len(result)})
    else:
        log.success("All sites captured", {"sites": len(result)})
    return result
