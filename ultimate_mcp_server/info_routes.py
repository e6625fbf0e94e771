"""Informational HTTP routes: landing page, health check and tool catalog.

These routes read the same registry and config as the MCP endpoint (from
app.state) and never touch the request processor.
"""

import html
from typing import Any

from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse
from starlette.routing import Route

from .config import Config
from .cors import cors_headers
from .handler_registry import ToolRegistry
from .primitives import _runtime
from .primitives._helpers import iso_string


def _state(request: Request) -> tuple[Config, ToolRegistry]:
    return request.app.state.config, request.app.state.registry


async def health(request: Request) -> JSONResponse:
    config, registry = _state(request)
    return JSONResponse({
        "status": "healthy",
        "server": config.server_name,
        "version": config.server_version,
        "timestamp": iso_string(_runtime.utc_now()),
        "tools_available": len(registry),
        "categories": list(registry.categories()),
    }, headers=cors_headers(request, "GET"))


def tool_catalog(config: Config, registry: ToolRegistry) -> dict[str, Any]:
    """Tool names grouped by category, in registry order."""
    return {
        "server": config.server_name,
        "version": config.server_version,
        "total_tools": len(registry),
        "categories": [
            {"category": category, "count": len(names), "tools": names}
            for category, names in registry.categories().items()
        ],
    }


async def tools(request: Request) -> JSONResponse:
    return JSONResponse(tool_catalog(*_state(request)), headers=cors_headers(request, "GET"))


_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
<style>
  body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif; background: #0a0a0f; color: #e0e0f0; margin: 0; }}
  header {{ background: linear-gradient(135deg, #1a1a2e, #0f3460); padding: 48px 20px; text-align: center; }}
  .container {{ max-width: 960px; margin: 0 auto; padding: 32px 20px; }}
  .endpoint, .card {{ background: #0e1628; border: 1px solid #1e3a5f; border-radius: 8px; padding: 12px 16px; margin: 8px 0; }}
  .method {{ color: #ff6b6b; font-weight: bold; margin-right: 8px; font-family: monospace; }}
  code, pre {{ color: #a0e4ff; }}
</style>
</head>
<body>
<header>
  <h1>{title}</h1>
  <p>{total} tools in {category_count} categories. Version {version}.</p>
</header>
<div class="container">
  <h2>Endpoints</h2>
  <div class="endpoint"><span class="method">POST</span><code>{mcp_route}</code> MCP protocol endpoint</div>
  <div class="endpoint"><span class="method">GET</span><code>/health</code> Health check</div>
  <div class="endpoint"><span class="method">GET</span><code>/tools</code> List all tools</div>
  <h2>Tool Categories</h2>
{cards}
  <h2>Quick Start</h2>
  <pre>curl -X POST http://{host}:{port}{mcp_route} -H 'Content-Type: application/json' \\
  -d '{{"jsonrpc": "2.0", "id": 1, "method": "tools/list"}}'</pre>
</div>
</body>
</html>
"""


async def landing_page(request: Request) -> HTMLResponse:
    config, registry = _state(request)
    categories = registry.categories()
    cards = "\n".join(
        f'  <div class="card"><strong>{html.escape(category)}</strong> ({len(names)} tools): '
        f'{html.escape(", ".join(names))}</div>'
        for category, names in categories.items()
    )
    return HTMLResponse(_PAGE.format(
        title=html.escape(config.server_name),
        total=len(registry),
        category_count=len(categories),
        version=html.escape(config.server_version),
        mcp_route=html.escape(config.mcp_route),
        host=html.escape(config.http_host),
        port=config.http_port,
        cards=cards,
    ))


def info_routes() -> list[Route]:
    return [
        Route("/", landing_page, methods=["GET"]),
        Route("/health", health, methods=["GET"]),
        Route("/tools", tools, methods=["GET"]),
    ]
