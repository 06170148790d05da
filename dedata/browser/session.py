"""
Browser session management for concurrent request capture.

Each InterceptionSession owns its own Playwright instance, browser,
context and page, so several dashboards can be captured at once
without sharing any state.
"""

from __future__ import annotations

from playwright import async_api

from dedata.browser import resource_filter
from dedata.models import intercept
from dedata.utils import errors, logger

log = logger.create_logger("InterceptionSession")

# ============================================================================
# Constants
# ============================================================================

DEFAULT_NAVIGATION_TIMEOUT_MS = intercept.DEFAULT_NAVIGATION_TIMEOUT_MS
MAX_CAPTURED_URLS = 5000

_LAUNCH_ARGS = [
    "--no-first-run",
    "--no-default-browser-check",
    "--disable-extensions",
]


class SessionError(Exception):
    """A capture session could not complete for one site."""

    def __init__(self, site_url: str, message: str) -> None:
        super().__init__(f"{site_url}: {message}")
        self.site_url = site_url


class InterceptionSession:
    """
    Manages an isolated browser session that records data requests for one site.
    """

    def __init__(
        self,
        abort_suffixes: tuple[str, ...] = resource_filter.ABORT_RESOURCE_SUFFIXES,
    ) -> None:
        """Initialise a new session with an empty accumulator."""
        self._abort_suffixes = abort_suffixes
        self._playwright: async_api.Playwright | None = None
        self._browser: async_api.Browser | None = None
        self._context: async_api.BrowserContext | None = None
        self._page: async_api.Page | None = None

        # dict keys keep first-capture order with set semantics
        self._captured: dict[str, None] = {}
        self._handled: set[async_api.Request] = set()
        self._aborted_count = 0
        self._cap_reached = False

    # ==========================================================================
    # Browser Lifecycle
    # ==========================================================================

    async def launch(self) -> None:
        """Launch headless Chromium and install the interception route."""
        if self._browser:
            raise RuntimeError("Browser session already launched")

        log.debug("Launching browser")
        self._playwright = await async_api.async_playwright().start()
        self._browser = await self._playwright.chromium.launch(
            headless=True,
            args=_LAUNCH_ARGS,
        )
        self._context = await self._browser.new_context(java_script_enabled=True)
        self._page = await self._context.new_page()
        await self._page.route("**/*", self._on_route)

    async def _on_route(self, route: async_api.Route) -> None:
        """Resolve one intercepted request exactly once."""
        request = route.request
        decision = resource_filter.decide(
            request.url,
            request.resource_type,
            already_handled=request in self._handled,
            abort_suffixes=self._abort_suffixes,
        )
        if decision is None:
            return
        self._handled.add(request)

        if decision.captures and request.url not in self._captured:
            if len(self._captured) < MAX_CAPTURED_URLS:
                self._captured[request.url] = None
            elif not self._cap_reached:
                self._cap_reached = True
                log.warn("Captured URL limit reached, dropping further URLs", {"limit": MAX_CAPTURED_URLS})

        try:
            if decision.forwards:
                await route.continue_()
            else:
                self._aborted_count += 1
                await route.abort()
        except async_api.Error as exc:
            # Page or context closed while the request was in flight.
            log.debug("Route resolution failed", {"url": request.url, "error": errors.get_error_message(exc)})

    # ==========================================================================
    # Navigation
    # ==========================================================================

    async def navigate(
        self,
        url: str,
        timeout_ms: int = DEFAULT_NAVIGATION_TIMEOUT_MS,
    ) -> None:
        """Navigate to *url* and wait until the network has gone quiet.

        Raises:
            SessionError: If navigation fails or times out.
        """
        if not self._page:
            raise RuntimeError("No browser session active")

        log.debug("Navigating", {"url": url, "timeout": timeout_ms})
        try:
            response = await self._page.goto(url, wait_until="networkidle", timeout=timeout_ms)
        except async_api.Error as exc:
            raise SessionError(url, errors.get_error_message(exc)) from exc

        if response is not None and response.status >= 400:
            # The page may still render and fetch its data; keep what was captured.
            log.warn("Document returned error status", {"url": url, "statusCode": response.status})

        final_url = self._page.url
        if final_url != url:
            log.info("Redirected", {"from": url, "to": final_url})

    # ==========================================================================
    # Data Capture
    # ==========================================================================

    def captured(self, site_url: str) -> intercept.CapturedSet:
        """Return an immutable snapshot of the URLs captured so far."""
        return intercept.CapturedSet(site_url=site_url, urls=tuple(self._captured))

    @property
    def aborted_count(self) -> int:
        """Number of static-asset requests aborted in this session."""
        return self._aborted_count

    # ==========================================================================
    # Cleanup
    # ==========================================================================

    async def close(self) -> None:
        """Close the browser and clean up all resources."""
        log.debug("Closing browser session")
        self._page = None

        if self._context:
            try:
                await self._context.close()
            except Exception as exc:
                log.debug("Context close error (non-fatal)", {"error": str(exc)})
            self._context = None

        if self._browser:
            try:
                await self._browser.close()
            except Exception as exc:
                log.debug("Browser close error (non-fatal)", {"error": str(exc)})
            self._browser = None

        if self._playwright:
            try:
                await self._playwright.stop()
            except Exception as exc:
                log.debug("Playwright stop error (non-fatal)", {"error": str(exc)})
            self._playwright = None

        self._handled.clear()


async def capture_site(
    site: intercept.TargetSite,
    *,
    timeout_ms: int = DEFAULT_NAVIGATION_TIMEOUT_MS,
    abort_suffixes: tuple[str, ...] = resource_filter.ABORT_RESOURCE_SUFFIXES,
) -> intercept.CapturedSet:
    """Capture the data requests one site issues while loading.

    The browser is always closed before this returns or raises.
    """
    session = InterceptionSession(abort_suffixes=abort_suffixes)
    try:
        await session.launch()
        await session.navigate(site.url, timeout_ms=timeout_ms)
        captured = session.captured(site.url)
        log.info(
            "Captured data requests",
            {"url": site.url, "count": len(captured.urls), "aborted": session.aborted_count},
        )
        return captured
    finally:
        await session.close()
