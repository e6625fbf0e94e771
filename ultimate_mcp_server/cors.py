"""CORS headers shared by the MCP route and the info routes.

Access-Control-Allow-Origin carries a single origin or "*". With
Config.cors_origins == ["*"] every response allows any origin; with a list of
origins, a request's Origin header is echoed back only when it is listed, and
responses say "Vary: Origin" so caches keep them apart.
"""

from typing import Optional

from starlette.requests import Request

from .config import Config


def allowed_origin(config: Config, origin: Optional[str]) -> Optional[str]:
    """Value for Access-Control-Allow-Origin, or None when ``origin`` may not call us."""
    if "*" in config.cors_origins:
        return "*"
    if origin is not None and origin in config.cors_origins:
        return origin
    return None


def cors_headers(request: Request, methods: str) -> dict[str, str]:
    """CORS response headers for ``request``.

    Args:
        request: The incoming request; its app carries the Config.
        methods: Value for Access-Control-Allow-Methods, e.g. "POST, OPTIONS".
    """
    config: Config = request.app.state.config
    headers = {
        "Access-Control-Allow-Methods": methods,
        "Access-Control-Allow-Headers": "Content-Type",
    }
    origin = allowed_origin(config, request.headers.get("origin"))
    if origin is not None:
        headers["Access-Control-Allow-Origin"] = origin
    if "*" not in config.cors_origins:
        headers["Vary"] = "Origin"
    return headers
