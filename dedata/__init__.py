"""
dedata: data-API inventory for DeFi analytics dashboards.

Drives a headless browser to each configured dashboard, records the
``fetch``/``xhr`` requests it issues, and groups them by domain.
"""

__version__ = "0.1.0"
