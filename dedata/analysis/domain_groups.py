"""
Noise filtering and domain grouping of captured data requests.

Pure functions: given the same captured URLs they always produce the
same groups, in the same order.

Per site the steps are:

1. drop URLs on ignored analytics/CDN domains (and unparseable URLs)
2. group the rest by host, ``www.`` stripped, in first-seen order
3. drop groups on the site's own second-level domain
4. collapse each group's URLs to one per path
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from dedata.models import intercept
from dedata.utils import url as url_mod


def remove_ignored(urls: Iterable[str], ignored_suffixes: Sequence[str]) -> list[str]:
    """Drop URLs whose host ends with an ignored suffix or cannot be parsed."""
    suffixes = tuple(ignored_suffixes)
    kept: list[str] = []
    for url in urls:
        host = url_mod.extract_host(url)
        if host is None or url_mod.host_matches_suffix(host, suffixes):
            continue
        kept.append(url)
    return kept


def group_by_domain(urls: Iterable[str]) -> list[intercept.DomainGroup]:
    """Bucket URLs by host, preserving first-seen order of hosts and URLs."""
    groups: dict[str, intercept.DomainGroup] = {}
    for url in urls:
        host = url_mod.extract_host(url)
        if host is None:
            continue
        group = groups.get(host)
        if group is None:
            groups[host] = group = intercept.DomainGroup(domain=host)
        group.data_urls.append(url)
    return list(groups.values())


def exclude_first_party(
    groups: Iterable[intercept.DomainGroup], site_url: str
) -> list[intercept.DomainGroup]:
    """Drop groups that share the site's second-level domain."""
    return [g for g in groups if not url_mod.is_first_party(g.domain, site_url)]


def dedupe_by_path(urls: Iterable[str]) -> list[str]:
    """Keep the first URL for each distinct path, ignoring query strings."""
    seen: set[str] = set()
    distinct: list[str] = []
    for url in urls:
        path = url_mod.extract_path(url)
        if path in seen:
            continue
        seen.add(path)
        distinct.append(url)
    return distinct


def group_site_urls(
    site_url: str,
    urls: Iterable[str],
    ignored_suffixes: Sequence[str],
) -> list[intercept.DomainGroup]:
    """Turn one site's captured URLs into its external domain groups."""
    groups = exclude_first_party(group_by_domain(remove_ignored(urls, ignored_suffixes)), site_url)
    return [
        intercept.DomainGroup(domain=g.domain, data_urls=dedupe_by_path(g.data_urls))
        for g in groups
    ]


def build_run_result(
    sites: Iterable[intercept.TargetSite],
    captured: Mapping[str, Sequence[str]],
    ignored_suffixes: Sequence[str],
) -> list[intercept.SiteResult]:
    """Build the run result in configured site order.

    Sites missing from *captured* (their session failed) get no entry.
    """
    results: list[intercept.SiteResult] = []
    emitted: set[str] = set()
    for site in sites:
        if site.url not in captured or site.url in emitted:
            continue
        emitted.add(site.url)
        results.append(
            intercept.SiteResult(
                site=site,
                data_url_groups=group_site_urls(site.url, captured[site.url], ignored_suffixes),
            )
        )
    return results
