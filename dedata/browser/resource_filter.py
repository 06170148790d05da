"""
Per-request interception policy.

Decides, from a request's URL and Playwright resource type, whether the
request is aborted, forwarded, or captured and forwarded.  Pure: the
side-effecting abort/continue call lives in the session adapter.
"""

from __future__ import annotations

import enum

from dedata.utils import url as url_mod

# Never include ".js": scripts must load or the page fires no data requests.
ABORT_RESOURCE_SUFFIXES: tuple[str, ...] = (
    ".png",
    ".jpg",
    ".css",
    ".svg",
    ".ico",
)

CAPTURED_RESOURCE_TYPES = frozenset({"fetch", "xhr"})


class Decision(enum.Enum):
    """What to do with an intercepted request."""

    ABORT = "abort"
    CAPTURE_AND_FORWARD = "capture_and_forward"
    FORWARD_ONLY = "forward_only"

    @property
    def forwards(self) -> bool:
        return self is not Decision.ABORT

    @property
    def captures(self) -> bool:
        return self is Decision.CAPTURE_AND_FORWARD


def is_static_asset(url: str, abort_suffixes: tuple[str, ...] = ABORT_RESOURCE_SUFFIXES) -> bool:
    """Check whether the path of *url* ends with a static-asset suffix."""
    path = url_mod.extract_path(url).lower()
    return bool(path) and path.endswith(abort_suffixes)


def decide(
    url: str,
    resource_type: str,
    *,
    already_handled: bool = False,
    abort_suffixes: tuple[str, ...] = ABORT_RESOURCE_SUFFIXES,
) -> Decision | None:
    """Classify one intercepted request.

    Args:
        url: The request URL.
        resource_type: Playwright resource type (``"fetch"``,
            ``"xhr"``, ``"script"``, ``"document"``, ...).
        already_handled: Whether another handler already resolved
            this request.
        abort_suffixes: Lowercase path suffixes to abort.

    Returns:
        The decision, or ``None`` when the request is already
        handled and must be left alone.
    """
    if already_handled:
        return None
    if is_static_asset(url, abort_suffixes):
        return Decision.ABORT
    if resource_type in CAPTURED_RESOURCE_TYPES:
        return Decision.CAPTURE_AND_FORWARD
    return Decision.FORWARD_ONLY
