"""Request processor that turns decoded MCP requests into response envelopes.

This module provides the RequestProcessor class, the protocol core of the
server. It recognises three methods and nothing else:

    initialize  -> fixed server metadata
    tools/list  -> every registered tool, in registration order
    tools/call  -> run one tool and wrap its result as a text content block

Error Handling:
    - process() never raises. Unknown methods, unknown tools and handler
      exceptions are all encoded in the "error" member of the envelope.
    - A handler exception affects only its own call; nothing is retried.
    - Transport problems (bad JSON, wrong HTTP verb) are handled before a
      request ever reaches this module, see mcp_server.py.
"""

import json
import logging
from typing import Any, Callable

from mcp.types import Implementation, InitializeResult, ServerCapabilities, TextContent, ToolsCapability

from .config import Config
from .handler_registry import ToolRegistry
from .models import (
    METHOD_NOT_FOUND,
    TOOL_EXECUTION_ERROR,
    JsonRpcRequest,
    JsonRpcResponse,
)

logger = logging.getLogger(__name__)


class RequestProcessor:
    """Dispatches MCP requests against a tool registry.

    The processor holds no per-request state, so one instance can serve any
    number of concurrent requests.

    Usage:
        >>> processor = RequestProcessor(build_registry(), Config())
        >>> processor.process({"method": "tools/list", "id": 1})
        {'jsonrpc': '2.0', 'id': 1, 'result': {'tools': [...]}}

    Attributes:
        _registry: Read-only tool registry shared with the info routes.
        _config: Supplies the server name, version and protocol version.
    """

    def __init__(self, registry: ToolRegistry, config: Config) -> None:
        self._registry = registry
        self._config = config
        self._methods: dict[str, Callable[[JsonRpcRequest], JsonRpcResponse]] = {
            "initialize": self._initialize,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
        }

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def process(self, body: dict[str, Any]) -> dict[str, Any]:
        """Process one decoded request object and return the response envelope.

        Args:
            body: The JSON object sent by the client.

        Returns:
            A JSON-serializable envelope with "jsonrpc", the echoed "id" (when
            the request had one) and exactly one of "result" or "error".
        """
        request = JsonRpcRequest.model_validate(body)
        logger.debug("MCP request: method=%r id=%r", request.method, request.id)

        method = self._methods.get(request.method) if isinstance(request.method, str) else None
        if method is None:
            logger.warning("Unknown MCP method: %r", request.method)
            response = JsonRpcResponse.failure(
                request, METHOD_NOT_FOUND, f"Unknown method: {request.method}"
            )
        else:
            response = method(request)
        return response.to_dict()

    def _initialize(self, request: JsonRpcRequest) -> JsonRpcResponse:
        result = InitializeResult(
            protocolVersion=self._config.protocol_version,
            capabilities=ServerCapabilities(tools=ToolsCapability()),
            serverInfo=Implementation(
                name=self._config.server_name,
                version=self._config.server_version,
            ),
        )
        return JsonRpcResponse.success(request, _dump(result))

    def _list_tools(self, request: JsonRpcRequest) -> JsonRpcResponse:
        tools = [definition.to_listing() for definition in self._registry]
        return JsonRpcResponse.success(request, {"tools": tools})

    def _call_tool(self, request: JsonRpcRequest) -> JsonRpcResponse:
        params = request.params if isinstance(request.params, dict) else {}
        name = params.get("name")

        tool = self._registry.get(name)
        if tool is None:
            logger.warning("Unknown tool requested: %r", name)
            return JsonRpcResponse.failure(request, METHOD_NOT_FOUND, f"Unknown tool: {name}")

        arguments = params.get("arguments") or {}
        try:
            result = tool.handler(arguments)
            text = json.dumps(result, indent=2, ensure_ascii=False, allow_nan=False)
        except Exception as e:
            # The handler wrapper has already logged the traceback
            logger.warning("Tool %s failed: %s", tool.name, e)
            return JsonRpcResponse.failure(request, TOOL_EXECUTION_ERROR, str(e) or type(e).__name__)

        content = TextContent(type="text", text=text)
        return JsonRpcResponse.success(request, {"content": [_dump(content)]})


def _dump(model: Any) -> dict[str, Any]:
    return model.model_dump(by_alias=True, exclude_none=True)
