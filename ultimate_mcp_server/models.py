"""JSON-RPC envelope models for the MCP endpoint.

The request id is opaque: whatever the client sent (number, string, null) is
echoed back, and a request without an id gets a response without one. The
models therefore rely on pydantic's "fields set" tracking rather than on
None defaults to tell an absent id from an explicit null.
"""

from __future__ import annotations

from typing import Any

from mcp.types import METHOD_NOT_FOUND, PARSE_ERROR
from pydantic import BaseModel, ConfigDict

JSONRPC_VERSION = "2.0"

# JSON-RPC codes reused by the protocol. -32000 is the first code of the
# implementation-defined server error range.
TOOL_EXECUTION_ERROR = -32000

__all__ = [
    "JSONRPC_VERSION",
    "METHOD_NOT_FOUND",
    "PARSE_ERROR",
    "TOOL_EXECUTION_ERROR",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
]


class JsonRpcRequest(BaseModel):
    """An incoming request envelope.

    Unknown top-level keys are ignored. Every field is kept as loose data, so
    validating a decoded JSON object never fails: the dispatcher, not the
    model, decides what a malformed ``method`` or ``params`` means. The
    ``jsonrpc`` member is accepted whatever its value and never checked.
    """

    model_config = ConfigDict(extra="ignore")

    jsonrpc: Any = JSONRPC_VERSION
    method: Any = None
    id: Any = None
    params: Any = None

    @property
    def has_id(self) -> bool:
        return "id" in self.model_fields_set


class JsonRpcError(BaseModel):
    """A JSON-RPC error object."""

    code: int
    message: str


class JsonRpcResponse(BaseModel):
    """A response envelope carrying exactly one of ``result`` or ``error``."""

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @classmethod
    def success(cls, request: JsonRpcRequest, result: dict[str, Any]) -> JsonRpcResponse:
        return cls(jsonrpc=JSONRPC_VERSION, result=result, **_echo_id(request))

    @classmethod
    def failure(cls, request: JsonRpcRequest | None, code: int, message: str) -> JsonRpcResponse:
        return cls(
            jsonrpc=JSONRPC_VERSION,
            error=JsonRpcError(code=code, message=message),
            **_echo_id(request),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize only the fields that were set, keeping an explicit null id."""
        return self.model_dump(exclude_unset=True)


def _echo_id(request: JsonRpcRequest | None) -> dict[str, Any]:
    if request is not None and request.has_id:
        return {"id": request.id}
    return {}
