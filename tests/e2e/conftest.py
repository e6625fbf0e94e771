"""E2E test configuration and fixtures."""
from __future__ import annotations

import random
from datetime import datetime, timezone

import pytest
from starlette.testclient import TestClient

from ultimate_mcp_server.config import Config
from ultimate_mcp_server.mcp_server import create_app
from ultimate_mcp_server.primitives import _runtime

# Monday, mid-day UTC
FIXED_NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def app():
    """The MCP application with default config and the full tool registry."""
    return create_app(Config())


@pytest.fixture(scope="session")
def client(app):
    """HTTP client talking to the app in-process."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def frozen_now(monkeypatch):
    """Pin the tools' clock to FIXED_NOW."""
    monkeypatch.setattr(_runtime, "utc_now", lambda: FIXED_NOW)
    return FIXED_NOW


@pytest.fixture
def seeded_rng(monkeypatch):
    """Replace the tools' random source with a seeded one."""
    rng = random.Random(1234)
    monkeypatch.setattr(_runtime, "rng", lambda: rng)
    return rng
