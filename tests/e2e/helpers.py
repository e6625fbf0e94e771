"""Helper functions for E2E tests that speak JSON-RPC to the in-process app."""
from __future__ import annotations

import json
from typing import Any

MCP_PATH = "/mcp"

OMIT = object()


def rpc(client, method: Any, params: Any = None, request_id: Any = 1) -> dict[str, Any]:
    """POST one JSON-RPC request and return the decoded response envelope.

    Args:
        client: Starlette TestClient bound to the app
        method: MCP method (e.g., "tools/list", "tools/call")
        params: Optional params object; omitted from the request when None
        request_id: Request id; pass OMIT to leave it out

    Raises:
        AssertionError: If the HTTP status is not 200.
    """
    body: dict[str, Any] = {"jsonrpc": "2.0", "method": method}
    if request_id is not OMIT:
        body["id"] = request_id
    if params is not None:
        body["params"] = params

    response = client.post(MCP_PATH, json=body)
    assert response.status_code == 200, response.text
    return response.json()


def call_tool_raw(client, name: str, args: dict[str, Any] | None = None) -> dict[str, Any]:
    """Call a tool and return the full response envelope."""
    return rpc(client, "tools/call", {"name": name, "arguments": args or {}})


def call_tool(client, name: str, args: dict[str, Any] | None = None) -> dict[str, Any]:
    """Call an MCP tool and return its result.

    Args:
        client: Starlette TestClient bound to the app
        name: Tool name (e.g., "word_count")
        args: Tool arguments as dict

    Returns:
        Tool result, decoded from the text content block of the envelope.
    """
    envelope = call_tool_raw(client, name, args)
    assert "error" not in envelope, envelope.get("error")
    content = envelope["result"]["content"]
    assert len(content) == 1
    assert content[0]["type"] == "text"
    return json.loads(content[0]["text"])


def tool_error(client, name: str, args: dict[str, Any] | None = None) -> dict[str, Any]:
    """Call a tool that is expected to fail and return the JSON-RPC error object."""
    envelope = call_tool_raw(client, name, args)
    assert "result" not in envelope, envelope.get("result")
    return envelope["error"]


def list_tools(client) -> list[dict[str, Any]]:
    """List all available MCP tools.

    Returns:
        List of tool definitions.
    """
    return rpc(client, "tools/list")["result"]["tools"]
