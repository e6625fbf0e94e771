from typing import Any, Callable, Mapping, Optional
from functools import wraps
import inspect
import keyword
import logging

from .handler_registry import ToolDefinition, register_definition
from .handler_wrappers import _error_handler

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Tool - Decorator class that registers functions as MCP tools
# ------------------------------------------------------------------------------
# Usage:
#   @Tool(
#       "tool_name",
#       "Text & Content",
#       "Description for the client",
#       {"type": "object", "properties": {...}, "required": [...]},
#   )
#   def my_tool(text: str, limit: int = 3) -> dict:
#       ...
#
# Parameters:
#   - name: Unique tool identifier exposed to MCP clients
#   - category: Group shown as "[category] " in front of the description
#   - description: Shown to the client to understand when/how to use the tool
#   - input_schema: Declared argument contract (advisory, not validated)
#
# What happens at import time:
#   1. Wraps function with _bind_arguments (drops unknown argument names)
#   2. Wraps with _error_handler (logs exceptions, formats HandlerError)
#   3. Registers a ToolDefinition in the handler registry
#
# Defaults live in the function signature, not in the schema: the schema's
# "default" entries only document them.
# ------------------------------------------------------------------------------
class Tool:
    def __init__(
        self,
        name: str,
        category: str,
        description: str,
        input_schema: Optional[Mapping[str, Any]] = None,
        handler: Optional[Callable[..., Any]] = None,
    ):
        self.name = name
        self.category = category
        self.description = description
        self.input_schema = input_schema or {"type": "object", "properties": {}}

        # Support both @Tool(...) decorator and Tool(..., handler=fn) direct call
        if handler is not None:
            self._register(handler)

    # Called when used as @Tool(...) decorator
    def __call__(self, func: Callable[..., Any]) -> Callable[..., Any]:
        self._register(func)
        return func  # Return original so it can be called directly for testing

    def _register(self, func: Callable[..., Any]) -> None:
        # Stack wrappers from inside out
        # Execution order: _error_handler -> _bind_arguments -> func
        wrapped = _bind_arguments(func, self.name)
        wrapped = _error_handler(wrapped)

        register_definition(
            ToolDefinition(
                name=self.name,
                category=self.category,
                description=self.description,
                input_schema=self.input_schema,
                handler=wrapped,
            )
        )


# ------------------------------------------------------------------------------
# _bind_arguments - Map an argument mapping onto the handler's parameters
# ------------------------------------------------------------------------------
# MCP clients send arguments as a JSON object. Keys that are Python keywords
# ("from") are passed as "<key>_" ("from_"). Keys the handler does not accept
# are dropped, unless the handler takes **kwargs. Missing required keys are
# left for Python to report as a TypeError.
# ------------------------------------------------------------------------------
def _bind_arguments(func: Callable[..., Any], tool_name: str) -> Callable[..., Any]:
    sig = inspect.signature(func)
    accepts_any = any(p.kind is inspect.Parameter.VAR_KEYWORD for p in sig.parameters.values())

    @wraps(func)
    def wrapper(arguments: Mapping[str, Any]) -> Any:
        kwargs: dict[str, Any] = {}
        for key, value in arguments.items():
            param = f"{key}_" if keyword.iskeyword(key) else key
            if accepts_any or param in sig.parameters:
                kwargs[param] = value
            else:
                logger.debug("Ignoring unknown argument %r for tool %s", key, tool_name)
        return func(**kwargs)

    return wrapper
