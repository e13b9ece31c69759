"""Pytest hooks and fixtures."""

import os

import pytest


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line(
        "markers",
        "requires_dashd: needs a running dashd reachable through DASHD_URI (skipped when unset)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip requires_dashd tests unless DASHD_URI points at a daemon."""
    if os.environ.get("DASHD_URI"):
        return
    skip = pytest.mark.skip(reason="Requires a dashd instance (set DASHD_URI, DASHD_USER, DASHD_PASSWORD)")
    for item in items:
        if "requires_dashd" in item.keywords:
            item.add_marker(skip)
