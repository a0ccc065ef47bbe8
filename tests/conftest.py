"""
Shared test fixtures for chestmeta tests.
Patches the config module so tests never read a real .env or leak runtime flags.
"""

import os
import sys

import pytest

# Add project root to path so imports work without an install
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state."""
    from chestmeta import config

    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "UNNAMED_NAME", "Chest")
    monkeypatch.setattr(config, "DEFAULT_LOCATION", "")
    monkeypatch.setattr(config, "TAG_LOG_ENABLED", False)
    monkeypatch.setattr(config, "MCP_RESPONSE_MODE", "legacy")
    monkeypatch.setattr(config, "RUNTIME_QUIET", False)
    monkeypatch.setattr(config, "RUNTIME_VERBOSE", False)
