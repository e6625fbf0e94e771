# handler_wrappers.py
"""Shared error type and wrapper for tool handlers.

Error Handling Strategy:
    Handler functions can raise HandlerError for structured errors with hints,
    or any other exception for unexpected failures. The _error_handler wrapper
    logs both, folds hints/context into the message of a HandlerError, and
    re-raises. RequestProcessor catches whatever comes out and turns it into a
    -32000 protocol error carrying the message.

    Recoverable input problems (bad URL, bad JSON, unknown unit, ...) are not
    raised at all: those handlers return an ordinary result with an "error"
    key, which the dispatcher passes through as a successful call.
"""

from typing import Any, Callable, Optional
from functools import wraps
import logging

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# HandlerError - Custom exception for handler failures with structured error info
# ------------------------------------------------------------------------------
# Raise this in tool functions to return a clean error to the MCP client.
# - message: What went wrong
# - hint: Actionable suggestion for the client (optional)
# - **data: Extra context like the offending value (optional)
#
# Example: raise HandlerError("Unknown case type", hint="Use one of: upper, lower", case_type="wavy")
# ------------------------------------------------------------------------------
class HandlerError(Exception):
    """Structured error for tool handlers.

    Raise this exception to signal an error to the MCP client with optional
    hints and additional context data. The error message will be formatted
    with hints and context, then re-raised as a plain Exception for
    RequestProcessor to catch and encode.

    Args:
        message: Description of what went wrong
        hint: Actionable suggestion for the client (optional)
        **data: Extra context like the offending value (optional)

    Example:
        raise HandlerError(
            "Unknown operation",
            hint="Use one of: percent_of, what_percent",
            operation="double",
        )
    """
    def __init__(self, message: str, hint: Optional[str] = None, **data: Any):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.data = data


# ------------------------------------------------------------------------------
# _error_handler - Outermost wrapper that logs exceptions
# ------------------------------------------------------------------------------
# Catches HandlerError and formats message with hints/context, then re-raises.
# Other exceptions are logged with traceback and re-raised unchanged so the
# client sees the original message (e.g. "division by zero").
# ------------------------------------------------------------------------------
def _error_handler(func: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap a handler to log exceptions and format error messages.

    Args:
        func: The handler function to wrap

    Returns:
        Wrapped function that formats and re-raises exceptions
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HandlerError as e:
            logger.warning("Handler error: %s (hint: %s)", e.message, e.hint)
            msg = e.message
            if e.hint:
                msg += f" (hint: {e.hint})"
            if e.data:
                msg += f" (context: {e.data})"
            raise Exception(msg) from e
        except Exception as e:
            logger.exception("Unexpected handler error: %s", e)
            raise

    return wrapper
