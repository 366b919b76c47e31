"""Pytest configuration and fixtures.

Provides environment isolation and settings-cache hygiene. All fixtures here
are autouse unless noted.
"""

from __future__ import annotations

import logging
import os

import pytest

from resolute.config import reset_settings_cache

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from reading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr("resolute.config._read_dotenv", dict)


@pytest.fixture(autouse=True)
def isolate_resolute_env(request, monkeypatch):
    """Clear RESOLUTE_* variables so settings start from defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("RESOLUTE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-resolve environment settings for every test."""
    reset_settings_cache()
    yield
    reset_settings_cache()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def resolute_debug_logs(caplog):
    """Capture DEBUG records from the resolute logger (opt-in)."""
    caplog.set_level(logging.DEBUG, logger="resolute")
    return caplog
