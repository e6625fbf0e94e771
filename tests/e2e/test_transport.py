"""Tests for the HTTP layer around the MCP endpoint: verbs, CORS and body parsing."""
from __future__ import annotations

from starlette.testclient import TestClient

from ultimate_mcp_server.config import Config
from ultimate_mcp_server.mcp_server import McpServer, create_app

from .helpers import MCP_PATH

PARSE_ERROR_BODY = {"jsonrpc": "2.0", "error": {"code": -32700, "message": "Parse error"}}


class TestCors:
    """CORS headers on the MCP route."""

    def test_preflight(self, client):
        response = client.options(MCP_PATH)
        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"
        assert response.headers["access-control-allow-headers"] == "Content-Type"

    def test_post_carries_cors_headers(self, client):
        response = client.post(MCP_PATH, json={"jsonrpc": "2.0", "id": 1, "method": "initialize"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_listed_origin_echoed(self):
        """With several configured origins, only the caller's own origin is sent back."""
        config = Config(cors_origins=["https://a.example", "https://b.example"])
        with TestClient(create_app(config)) as client:
            preflight = client.options(MCP_PATH, headers={"Origin": "https://b.example"})
            post = client.post(
                MCP_PATH,
                json={"jsonrpc": "2.0", "id": 1, "method": "initialize"},
                headers={"Origin": "https://a.example"},
            )
        assert preflight.headers["access-control-allow-origin"] == "https://b.example"
        assert preflight.headers["vary"] == "Origin"
        assert post.headers["access-control-allow-origin"] == "https://a.example"

    def test_unlisted_origin_gets_no_allow_origin(self):
        config = Config(cors_origins=["https://a.example", "https://b.example"])
        with TestClient(create_app(config)) as client:
            response = client.options(MCP_PATH, headers={"Origin": "https://evil.example"})
            no_origin = client.options(MCP_PATH)
        assert response.status_code == 200
        assert "access-control-allow-origin" not in response.headers
        assert "access-control-allow-origin" not in no_origin.headers
        assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"

    def test_wildcard_ignores_request_origin(self, client):
        response = client.options(MCP_PATH, headers={"Origin": "https://a.example"})
        assert response.headers["access-control-allow-origin"] == "*"
        assert "vary" not in response.headers


class TestVerbs:
    """Only POST and OPTIONS reach the MCP route."""

    def test_get_not_allowed(self, client):
        response = client.get(MCP_PATH)
        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}
        assert response.headers["access-control-allow-origin"] == "*"

    def test_put_and_delete_not_allowed(self, client):
        assert client.put(MCP_PATH, json={}).status_code == 405
        assert client.delete(MCP_PATH).status_code == 405


class TestBodyParsing:
    """Bodies that are not a JSON object never reach the processor."""

    def test_malformed_json(self, client):
        response = client.post(MCP_PATH, content=b"{not json", headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json() == PARSE_ERROR_BODY

    def test_empty_body(self, client):
        response = client.post(MCP_PATH, content=b"")
        assert response.status_code == 400
        assert response.json() == PARSE_ERROR_BODY

    def test_array_body(self, client):
        """Batches are not supported; an array is rejected like bad JSON."""
        response = client.post(MCP_PATH, json=[{"jsonrpc": "2.0", "id": 1, "method": "initialize"}])
        assert response.status_code == 400
        assert response.json() == PARSE_ERROR_BODY

    def test_nan_constant_rejected(self, client):
        response = client.post(MCP_PATH, content=b'{"id": NaN, "method": "initialize"}')
        assert response.status_code == 400

    def test_parse_error_carries_cors_headers(self, client):
        response = client.post(MCP_PATH, content=b"oops")
        assert response.headers["access-control-allow-origin"] == "*"

    def test_protocol_errors_use_status_200(self, client):
        response = client.post(MCP_PATH, json={"jsonrpc": "2.0", "id": 1, "method": "nope"})
        assert response.status_code == 200
        assert response.json()["error"]["code"] == -32601


class TestRouting:
    """The MCP route follows Config.http_path."""

    def test_custom_path(self):
        config = Config(http_path="/rpc/")
        with TestClient(create_app(config)) as client:
            response = client.post("/rpc", json={"jsonrpc": "2.0", "id": 1, "method": "initialize"})
            assert response.status_code == 200
            assert response.json()["result"]["serverInfo"]["name"] == config.server_name
            assert client.post(MCP_PATH, json={"jsonrpc": "2.0", "id": 1, "method": "initialize"}).status_code == 404

    def test_unknown_path(self, client):
        assert client.post("/not-here", json={}).status_code == 404

    def test_server_builds_app_once(self):
        server = McpServer(Config())
        assert server.app is server.app
        assert len(server.app.state.registry) == 90
