"""
URL and domain utility functions for request grouping.
"""

from __future__ import annotations

from urllib import parse


def extract_host(url: str) -> str | None:
    """Return the lowercased hostname of *url* with a leading ``www.`` removed.

    Returns ``None`` when the URL has no parseable host (relative
    paths, ``data:`` URLs, garbage input).
    """
    try:
        hostname = parse.urlparse(url).hostname
    except ValueError:
        return None
    if not hostname:
        return None
    return hostname.removeprefix("www.")


def extract_path(url: str) -> str:
    """Return the path component of *url* (empty string when unparseable).

    A URL with a host but no path has the root path ``/``, so
    ``https://a.io?x=1`` and ``https://a.io/?x=2`` share a path.
    """
    try:
        parsed = parse.urlparse(url)
    except ValueError:
        return ""
    if parsed.netloc:
        return parsed.path or "/"
    return parsed.path


def get_second_level_domain(host: str) -> str:
    """Return the last two dot-separated labels of *host*.

    ``api.example.com`` becomes ``example.com``.  Single-label hosts
    such as ``localhost`` are returned unchanged.

    Args:
        host: A hostname like ``"api.vendor.io"``.

    Returns:
        The second-level domain, e.g. ``"vendor.io"``.
    """
    return ".".join(host.lower().split(".")[-2:])


def is_first_party(host: str, site_url: str) -> bool:
    """Determine whether *host* belongs to the same second-level domain as *site_url*."""
    site_host = extract_host(site_url)
    if site_host is None:
        return False
    return get_second_level_domain(host) == get_second_level_domain(site_host)


def host_matches_suffix(host: str, suffixes: tuple[str, ...] | list[str]) -> bool:
    """Check whether *host* ends with any of *suffixes*."""
    return any(host.endswith(suffix) for suffix in suffixes)
