"""Command line entry point: ``python -m ultimate_mcp_server``."""

import logging
from typing import Optional

import click

from . import __version__
from .config import ConfigManager
from .mcp_server import McpServer

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="ultimate-mcp-server")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON file whose keys override the default configuration.",
)
@click.option("--host", default=None, help="Interface to bind (default 127.0.0.1).")
@click.option("--port", type=int, default=None, help="Port to listen on (default 3000).")
@click.option(
    "--log-level",
    type=click.Choice(["critical", "error", "warning", "info", "debug"], case_sensitive=False),
    default=None,
    help="Logging level for the server and uvicorn.",
)
def main(config_path: Optional[str], host: Optional[str], port: Optional[int], log_level: Optional[str]) -> None:
    """Serve the MCP endpoint over HTTP."""
    try:
        config = ConfigManager(config_path).load()
    except ValueError as e:
        raise click.ClickException(f"Cannot read config: {e}") from e
    if host is not None:
        config.http_host = host
    if port is not None:
        config.http_port = port
    if log_level is not None:
        config.log_level = log_level.lower()

    valid, error = config.is_valid()
    if not valid:
        raise click.UsageError(error)

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Effective configuration: %s", config.to_dict())
    McpServer(config).run()


if __name__ == "__main__":
    main()
