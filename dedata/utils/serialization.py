"""Shared serialization helpers for camelCase conversion.

Used by the Pydantic model configs so that API payloads keep the
``siteUrl`` / ``dataUrlGroups`` field names the dashboard page expects.
"""

from __future__ import annotations


def snake_to_camel(name: str) -> str:
    """Convert a snake_case string to camelCase.

    Args:
        name: A snake_case identifier such as ``"data_url_groups"``.

    Returns:
        The camelCase equivalent, e.g. ``"dataUrlGroups"``.
    """
    head, *rest = name.split("_")
    return head + "".join(w.capitalize() for w in rest)
