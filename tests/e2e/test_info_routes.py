"""Tests for the landing page, /health and /tools."""
from __future__ import annotations

from starlette.testclient import TestClient

from ultimate_mcp_server.config import Config
from ultimate_mcp_server.mcp_server import create_app
from ultimate_mcp_server.primitives import CATEGORY_PACKAGES


EXPECTED_CATEGORIES = [
    ("Text & Content", 20),
    ("Data & Math", 15),
    ("Web & Research", 12),
    ("Date & Time", 10),
    ("Business & Finance", 12),
    ("Developer Tools", 11),
    ("AI Prompts", 10),
]


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client, frozen_now):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        body = response.json()
        assert body == {
            "status": "healthy",
            "server": "Ultimate All-in-One MCP Server",
            "version": "1.0.0",
            "timestamp": "2024-01-15T12:00:00.000Z",
            "tools_available": 90,
            "categories": [name for name, _ in EXPECTED_CATEGORIES],
        }

    def test_health_is_get_only(self, client):
        assert client.post("/health").status_code == 405

    def test_info_routes_follow_configured_origins(self):
        config = Config(cors_origins=["https://a.example"])
        with TestClient(create_app(config)) as client:
            health = client.get("/health", headers={"Origin": "https://a.example"})
            catalog = client.get("/tools", headers={"Origin": "https://b.example"})
        assert health.headers["access-control-allow-origin"] == "https://a.example"
        assert health.headers["vary"] == "Origin"
        assert "access-control-allow-origin" not in catalog.headers


class TestToolCatalog:
    """Tests for GET /tools."""

    def test_grouped_by_category(self, client):
        body = client.get("/tools").json()
        assert body["total_tools"] == 90
        assert [(c["category"], c["count"]) for c in body["categories"]] == EXPECTED_CATEGORIES
        assert len(CATEGORY_PACKAGES) == len(EXPECTED_CATEGORIES)

    def test_catalog_matches_tools_list(self, client):
        body = client.get("/tools").json()
        catalog_names = [name for c in body["categories"] for name in c["tools"]]
        listed = client.post("/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "tools/list"}).json()
        assert catalog_names == [t["name"] for t in listed["result"]["tools"]]


class TestLandingPage:
    """Tests for GET /."""

    def test_html_page(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        page = response.text
        assert "<title>Ultimate All-in-One MCP Server</title>" in page
        assert "90 tools in 7 categories" in page
        assert "Text &amp; Content" in page
        assert "curl -X POST http://127.0.0.1:3000/mcp" in page
