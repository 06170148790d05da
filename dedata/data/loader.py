"""
Data loader for the target site list and ignored-domain reference data.

The JSON data files live alongside this module.  Each is loaded once,
validated into Pydantic models, and cached for the life of the process.
"""

from __future__ import annotations

import json
import pathlib
from typing import Any
from urllib import parse

import pydantic

from dedata.browser import resource_filter
from dedata.models import intercept

# Resolve path to the data directory (same directory as this module)
_DATA_DIR = pathlib.Path(__file__).resolve().parent

_sites_adapter = pydantic.TypeAdapter(list[intercept.TargetSite])
_suffixes_adapter = pydantic.TypeAdapter(list[str])

# ============================================================================
# JSON File Loading
# ============================================================================


def _load_json(relative_path: str) -> Any:
    """Load and parse a JSON file relative to the data directory.

    Raises:
        FileNotFoundError: If the JSON file does not exist.
        json.JSONDecodeError: If the file contains invalid JSON.
    """
    full_path = _DATA_DIR / relative_path
    if not full_path.exists():
        raise FileNotFoundError(f"Data file not found: {relative_path}")
    with open(full_path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as exc:
            raise json.JSONDecodeError(
                f"Invalid JSON in {relative_path}: {exc.msg}",
                exc.doc,
                exc.pos,
            ) from exc


# ============================================================================
# Validation
# ============================================================================


def validate_sites(sites: list[intercept.TargetSite]) -> tuple[intercept.TargetSite, ...]:
    """Check the target site list before it reaches the capture engine.

    Raises:
        ValueError: If the list is empty or a site URL is not an
            absolute http(s) URL.
    """
    if not sites:
        raise ValueError("At least one target site must be configured")
    for site in sites:
        parsed = parse.urlparse(site.url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ValueError(f"Invalid target site URL: {site.url!r}")
    return tuple(sites)


# ============================================================================
# Cached Accessors
# ============================================================================


_sites: tuple[intercept.TargetSite, ...] | None = None
_ignored_suffixes: tuple[str, ...] | None = None


def get_target_sites() -> tuple[intercept.TargetSite, ...]:
    """Get the configured dashboards (lazy loaded and cached)."""
    global _sites
    if _sites is None:
        _sites = validate_sites(_sites_adapter.validate_python(_load_json("sites.json")))
    return _sites


def get_ignored_suffixes() -> tuple[str, ...]:
    """Get the analytics/CDN domain suffixes to drop (lazy loaded and cached)."""
    global _ignored_suffixes
    if _ignored_suffixes is None:
        raw = _suffixes_adapter.validate_python(_load_json("ignored-domains.json"))
        _ignored_suffixes = tuple(s.strip().lower() for s in raw if s.strip())
    return _ignored_suffixes


def get_default_config() -> intercept.InterceptionConfig:
    """Assemble the default run configuration from the shipped data files."""
    return intercept.InterceptionConfig(
        sites=get_target_sites(),
        ignored_suffixes=get_ignored_suffixes(),
        abort_suffixes=resource_filter.ABORT_RESOURCE_SUFFIXES,
    )
