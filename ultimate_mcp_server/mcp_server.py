"""HTTP transport for the MCP endpoint.

This module builds the Starlette application that exposes the request
processor over HTTP and runs it with uvicorn.

Architecture:
    - One route at Config.mcp_route ("/mcp" by default) accepts POST and OPTIONS
    - Info routes ("/", "/health", "/tools") come from info_routes.py
    - The request processor and registry are built once and stored on app.state
    - Tool handlers are synchronous and bounded, so the endpoint calls the
      processor inline instead of handing work to a thread

Transport errors:
    - Any verb other than POST or OPTIONS -> 405 {"error": "Method not allowed"}
    - A body that is not a JSON object -> 400 with a -32700 "Parse error"
      envelope; the processor never sees it
"""

import json
import logging
from typing import Any, Optional

import uvicorn
from starlette.applications import Starlette
from starlette.endpoints import HTTPEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from .config import Config
from .cors import cors_headers
from .handler_registry import ToolRegistry, build_registry
from .info_routes import info_routes
from .models import PARSE_ERROR, JsonRpcResponse
from .request_processor import RequestProcessor

logger = logging.getLogger(__name__)

_ALLOWED_METHODS = "POST, OPTIONS"


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


class McpEndpoint(HTTPEndpoint):
    """POST /mcp runs one request through the processor; OPTIONS answers CORS preflight."""

    async def post(self, request: Request) -> Response:
        processor: RequestProcessor = request.app.state.processor
        headers = cors_headers(request, _ALLOWED_METHODS)

        body = await request.body()
        try:
            payload = json.loads(body, parse_constant=_reject_constant)
        except ValueError as e:
            logger.warning("Rejected MCP request body: %s", e)
            return _parse_error(headers)
        if not isinstance(payload, dict):
            logger.warning("Rejected MCP request body: expected a JSON object, got %s", type(payload).__name__)
            return _parse_error(headers)

        return JSONResponse(processor.process(payload), headers=headers)

    async def options(self, request: Request) -> Response:
        return Response(status_code=200, headers=cors_headers(request, _ALLOWED_METHODS))

    async def method_not_allowed(self, request: Request) -> Response:
        return JSONResponse(
            {"error": "Method not allowed"},
            status_code=405,
            headers=cors_headers(request, _ALLOWED_METHODS),
        )


def _parse_error(headers: dict[str, str]) -> Response:
    envelope = JsonRpcResponse.failure(None, PARSE_ERROR, "Parse error").to_dict()
    return JSONResponse(envelope, status_code=400, headers=headers)


def create_app(config: Optional[Config] = None, registry: Optional[ToolRegistry] = None) -> Starlette:
    """Build the ASGI application.

    Args:
        config: Server configuration, defaults when None.
        registry: Tool registry to serve, the full built-in registry when None.

    Returns:
        Starlette app with the MCP route and the info routes.
    """
    config = config or Config()
    registry = registry if registry is not None else build_registry()

    app = Starlette(routes=[Route(config.mcp_route, McpEndpoint), *info_routes()])
    app.state.config = config
    app.state.registry = registry
    app.state.processor = RequestProcessor(registry, config)
    logger.debug("MCP endpoint mounted at %s with %d tools", config.mcp_route, len(registry))
    return app


class McpServer:
    """Serves the MCP application with uvicorn.

    Attributes:
        _config: Server configuration (host, port, route, log level)
        _app: The Starlette application, built on first use
    """

    def __init__(self, config: Config, registry: Optional[ToolRegistry] = None) -> None:
        self._config = config
        self._registry = registry
        self._app: Optional[Starlette] = None

    @property
    def app(self) -> Starlette:
        if self._app is None:
            self._app = create_app(self._config, self._registry)
        return self._app

    def run(self) -> None:
        """Serve until interrupted. Blocks the calling thread."""
        server = uvicorn.Server(
            uvicorn.Config(
                self.app,
                host=self._config.http_host,
                port=self._config.http_port,
                log_level=self._config.log_level.lower(),
            )
        )
        logger.info(
            "Serving %s on http://%s:%d%s",
            self._config.server_name,
            self._config.http_host,
            self._config.http_port,
            self._config.mcp_route,
        )
        server.run()
