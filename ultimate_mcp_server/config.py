"""Configuration management for the Ultimate MCP Server.

This module provides the configuration dataclass and a manager that loads
settings from an optional JSON file, merged over the built-in defaults.
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@dataclass
class Config:
    """
    Server configuration.

    All fields have sensible defaults - the server works without any
    configuration file. Only the transport and the ``initialize`` metadata
    read these values; tool handlers never do.
    """

    # HTTP settings
    http_port: int = 3000
    http_host: str = "127.0.0.1"
    http_path: str = "mcp"

    # Origins allowed to call the server from a browser. ["*"] allows every
    # origin; otherwise a request's Origin is echoed back only when listed.
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    # Metadata returned by initialize, /health and /tools
    server_name: str = "Ultimate All-in-One MCP Server"
    server_version: str = "1.0.0"
    protocol_version: str = "2024-11-05"

    log_level: str = "info"

    def is_valid(self) -> tuple[bool, str]:
        """
        Check if config can be used to start the server.

        Returns:
            Tuple of (is_valid, error_message). If valid, error_message is empty string.

        Examples:
            >>> Config(http_port=80).is_valid()
            (True, '')

            >>> Config(http_port=70000).is_valid()
            (False, 'Port must be between 1 and 65535')

            >>> Config(http_port="3000").is_valid()
            (False, 'http_port must be an integer')
        """
        if not isinstance(self.http_port, int) or isinstance(self.http_port, bool):
            return False, "http_port must be an integer"
        for name in ("http_host", "http_path", "log_level", "server_name", "server_version", "protocol_version"):
            if not isinstance(getattr(self, name), str):
                return False, f"{name} must be a string"
        if not isinstance(self.cors_origins, list) or not all(isinstance(o, str) for o in self.cors_origins):
            return False, "cors_origins must be a list of strings"
        if not (1 <= self.http_port <= 65535):
            return False, "Port must be between 1 and 65535"
        if not self.http_path.strip("/"):
            return False, "http_path must not be empty ('/' serves the landing page)"
        if self.log_level.lower() not in _LOG_LEVELS:
            return False, f"Unknown log level: {self.log_level}"
        return True, ""

    @property
    def mcp_route(self) -> str:
        """Route path of the MCP endpoint, always with a leading slash."""
        return "/" + self.http_path.strip("/")

    def to_dict(self) -> dict:
        """
        Convert to dict for JSON storage.

        Returns:
            Dictionary representation of config suitable for JSON serialization.
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """
        Create from dict, using defaults for missing keys.

        Only includes keys that are actual dataclass fields, ignoring
        any extra keys in the input dict.

        Args:
            data: Dictionary with config values (typically from JSON).

        Returns:
            Config instance with provided values merged with defaults.

        Examples:
            >>> Config.from_dict({"http_port": 8080})
            Config(http_port=8080, ...)

            >>> Config.from_dict({"unknown_field": "ignored"})
            Config(http_port=3000, ...)  # Uses all defaults
        """
        return cls(
            **{k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        )


class ConfigManager:
    """
    Loads configuration from an optional JSON file.

    The file holds a flat JSON object whose keys are ``Config`` field names.
    Missing keys fall back to defaults; a missing file means all defaults.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Initialize config manager.

        Args:
            path: Location of the JSON config file, or None for defaults only.
        """
        self._path = Path(path) if path is not None else None

    def load(self) -> Config:
        """
        Load config, merging file values over defaults.

        Returns:
            Config instance with current settings.

        Raises:
            ValueError: If the file exists but does not hold a JSON object.
        """
        if self._path is None or not self._path.exists():
            if self._path is not None:
                logger.info("Config file %s not found, using defaults", self._path)
            return self.get_default()

        raw = json.loads(self._path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"Config file {self._path} must contain a JSON object")
        return Config.from_dict(raw)

    def get_default(self) -> Config:
        """
        Get default config (ignores the file).

        Returns:
            Config instance with all default values.
        """
        return Config()
