"""Tests for dedata.pipeline.projections: flat and grouped API views."""

from __future__ import annotations

import json

import pytest

from dedata.models import intercept
from dedata.pipeline import projections


@pytest.fixture()
def run_result(example_site: intercept.TargetSite) -> list[intercept.SiteResult]:
    return [
        intercept.SiteResult(
            site=example_site,
            data_url_groups=[
                intercept.DomainGroup(
                    domain="api.vendor.io",
                    data_urls=["https://api.vendor.io/v1/pairs", "https://api.vendor.io/v1/tokens"],
                ),
                intercept.DomainGroup(domain="graph.other.net", data_urls=["https://graph.other.net/q"]),
            ],
        )
    ]


class TestToInterceptedUrls:
    def test_flattens_groups(self, run_result: list[intercept.SiteResult]) -> None:
        flat = projections.to_intercepted_urls(run_result)
        assert len(flat) == 1
        assert [(u.domain, u.url) for u in flat[0].intercepted_urls] == [
            ("api.vendor.io", "https://api.vendor.io/v1/pairs"),
            ("api.vendor.io", "https://api.vendor.io/v1/tokens"),
            ("graph.other.net", "https://graph.other.net/q"),
        ]

    def test_camel_case_payload(self, run_result: list[intercept.SiteResult]) -> None:
        payload = projections.dump_camel(projections.to_intercepted_urls(run_result))
        assert payload[0]["siteUrl"] == "https://app.example.com"
        assert payload[0]["interceptedUrls"][0] == {
            "domain": "api.vendor.io",
            "url": "https://api.vendor.io/v1/pairs",
        }
        json.dumps(payload)


class TestToDataUrlGroups:
    def test_keeps_groups(self, run_result: list[intercept.SiteResult]) -> None:
        payload = projections.dump_camel(projections.to_data_url_groups(run_result))
        assert payload == [
            {
                "siteUrl": "https://app.example.com",
                "label": "Example",
                "dataUrlGroups": [
                    {
                        "domain": "api.vendor.io",
                        "dataUrls": ["https://api.vendor.io/v1/pairs", "https://api.vendor.io/v1/tokens"],
                    },
                    {"domain": "graph.other.net", "dataUrls": ["https://graph.other.net/q"]},
                ],
            }
        ]

    def test_empty(self) -> None:
        assert projections.to_data_url_groups([]) == []
